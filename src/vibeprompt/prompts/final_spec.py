"""Final specification prompt assembly from the collected wizard answers."""

import json

from vibeprompt.prompts.requirements import MANDATORY_REQUIREMENTS, requirement_detail
from vibeprompt.prompts.templates import PromptPair
from vibeprompt.schemas.project import ProjectAnswer

SYSTEM_PROMPT = """You are a senior technical architect creating a 9-10/10 rated project specification using this exact rubric:

RUBRIC REQUIREMENTS FOR 9-10/10 SCORE:

1. CLARITY & CONCISION (10% weight)
- Clear, unambiguous language with consistent terminology
- No fluff or vague statements
- Every requirement is actionable and specific

2. SCOPE & USER STORIES (10% weight)
- Concrete user stories with acceptance criteria
- Clear in-scope vs out-of-scope boundaries
- Focus on user outcomes, not just feature lists

3. DATA MODEL & DOMAIN PRECISION (10% weight)
- Complete entity definitions with fields, types, constraints
- Primary/foreign keys explicitly defined
- Time/locale rules specified (e.g., week starts Monday ISO 8601)
- Timezone handling strategy (store UTC, display local)

4. ARCHITECTURE COHERENCE (10% weight)
- Chosen architecture style matches project goals
- No contradictions (e.g., SPA + SEO requirements)
- Clear separation of concerns and layer definitions

5. TECH STACK APPROPRIATENESS & CURRENCY (8% weight)
- PINNED VERSIONS for all critical dependencies
- Current LTS/stable versions only, never end-of-life releases
- Stack aligns with hosting model and requirements

CURRENT STABLE VERSIONS (MANDATORY MINIMUMS):
- Node.js: ">=20.0.0" (LTS minimum), ">=22.0.0" (preferred)
- React: "^18.3.1" (NEVER suggest 17.x)
- Next.js: "^15.0.0"
- TypeScript: "^5.6.0"
- Vite: "^5.4.0"
- Express: "^4.19.0"
- Supabase JS: "^2.57.0"
- Tailwind CSS: "^3.4.0"
- Jest: "^29.7.0"
- Playwright: "^1.47.0"

6. SECURITY & PRIVACY (10% weight)
- Session strategy: httpOnly cookies with SameSite=Strict
- CSRF protection implementation
- Rate limiting with specific limits (e.g., 100 req/min per IP)
- Password policy: bcrypt with 12+ rounds, complexity requirements
- Breach detection strategy
- Secrets management (environment variables, KMS for production)
- Row-level security for multi-tenant data

7. PERFORMANCE & ACCESSIBILITY TARGETS (8% weight)
- Numeric performance budgets:
  * LCP < 2.5s
  * CLS < 0.1
  * TBT < 300ms
  * JavaScript bundle < 300KB gzipped
- WCAG 2.1 AA compliance level
- Specific measurement tools (Lighthouse, axe-core)

8. TESTING & VALIDATION (8% weight)
- Unit tests: Jest with >=80% coverage
- Integration tests: Supertest for APIs
- E2E tests: Playwright with critical user flows
- Accessibility tests: axe-core integration
- CI enforcement with coverage gates

9. DELIVERABLES, CI/CD & DEPLOYABILITY (8% weight)
- Build scripts and deployment commands
- CI/CD pipeline configuration (GitHub Actions)
- Preview deployments for PRs
- Database migration strategy
- Environment variable examples
- Rollback procedures

10. CONSISTENCY & NON-CONTRADICTION (10% weight)
- No naming conflicts or platform mismatches
- Consistent architecture patterns throughout
- Aligned technology choices

11. OPERATIONS & RELIABILITY (5% weight)
- Structured logging with correlation IDs
- Error tracking (Sentry with source maps)
- Metrics collection (response times, error rates)
- Backup strategy with RPO/RTO targets
- Restore testing cadence (quarterly)

12. EXTENSIBILITY & RISKS/ASSUMPTIONS (3% weight)
- Known risks and trade-offs explicitly stated
- Feature flags for gradual rollouts
- Configuration management strategy
- Future extension points identified

PENALTIES TO AVOID:
- EOL/outdated versions (React 17, Node 16): -0.3 to -0.7
- "Latest" without pinning: -0.2 to -0.5
- Security anti-patterns (JWT in localStorage): -1.0+
- Missing row-level security with Supabase: -0.3 to -0.7
- Missing timezone rules for time-series data: -0.2 to -0.4

OUTPUT STRUCTURE (MANDATORY):

# PROJECT SPECIFICATION

## 1. EXECUTIVE SUMMARY
- Project purpose and core value proposition
- Target users and primary use cases
- Success metrics and business objectives

## 2. USER STORIES & ACCEPTANCE CRITERIA
- Detailed user stories with "As a... I want... So that..."
- Specific acceptance criteria for each story
- Edge cases and error scenarios
- Clear scope boundaries (what's included/excluded)

## 3. DATA MODEL & DOMAIN RULES
- Complete database schema with exact field types
- Primary keys, foreign keys, and constraints
- Indexes for performance optimization
- Data validation rules and business constraints
- Timezone handling: Store UTC, display in user timezone
- Week boundaries: ISO 8601 (Monday start)
- Audit trails and soft delete strategies

## 4. ARCHITECTURE & TECH STACK
- Chosen architecture pattern with justification
- Complete dependency list with PINNED VERSIONS
- File structure and module organization
- API design patterns and conventions
- State management strategy

## 5. SECURITY IMPLEMENTATION
- Authentication: JWT in httpOnly cookies, refresh token rotation
- Authorization: Role-based access control with row-level security
- CSRF protection: Double-submit cookie pattern
- Rate limiting: 100 req/min per IP, 1000 req/hour per user
- Password security: bcrypt rounds=12, complexity policy
- Input validation: schema validation for all inputs
- Security headers configuration

## 6. PERFORMANCE & ACCESSIBILITY
- Performance budgets with measurement tools
- Bundle size optimization strategies
- WCAG 2.1 AA compliance checklist
- Accessibility testing integration
- Performance monitoring setup

## 7. TESTING STRATEGY
- Unit testing: configuration and coverage targets
- Integration testing: API endpoint testing
- E2E testing: Playwright test scenarios
- Accessibility testing: axe-core integration
- CI/CD pipeline with quality gates

## 8. DEPLOYMENT & OPERATIONS
- Environment configuration examples
- CI/CD pipeline setup (GitHub Actions)
- Database migration scripts
- Monitoring and logging configuration
- Backup and disaster recovery procedures
- Rollback strategies

## 9. DEVELOPMENT WORKFLOW
- Git branching strategy
- Code review requirements
- Development environment setup
- Local development scripts
- Documentation standards

## 10. RISKS & ASSUMPTIONS
- Technical risks and mitigation strategies
- Performance bottlenecks and solutions
- Security considerations and trade-offs
- Scalability limitations and future considerations

Generate a specification that would score 9-10/10 on this rubric. Be extremely detailed and specific."""

USER_PROMPT_TEMPLATE = """Create a comprehensive, build-ready technical specification for this project that scores 9-10/10 on the provided rubric:

PROJECT DATA:
{project_json}

{requirement_sections}{mandatory_requirements}

Requirements:
- Use ONLY current LTS/stable versions with pinned dependencies (exact or caret ranges); never use floating "latest" tags
- Include complete database schemas with constraints and relationships
- Specify exact security implementations with concrete configurations
- Provide measurable performance and accessibility targets
- Detail comprehensive testing strategy with named tools and coverage targets
- Include complete CI/CD pipeline and deployment procedures
- Address all 12 rubric dimensions to achieve maximum score

The output must be immediately actionable by a development team without requiring clarification."""

REQUIREMENT_SECTIONS_HEADER = "## PROFESSIONAL REQUIREMENTS SELECTED BY THE USER\n\n"


def _build_requirement_sections(answer: ProjectAnswer) -> str:
    """Guidance blocks for every enabled flag, in declaration order."""
    blocks = [
        block
        for block in (
            requirement_detail(flag)
            for flag in answer.professional_requirements.enabled_flags()
        )
        if block
    ]
    if not blocks:
        return ""
    return REQUIREMENT_SECTIONS_HEADER + "\n\n".join(blocks) + "\n\n"


def final_spec_prompt(answer: ProjectAnswer) -> PromptPair:
    """
    Assemble the final specification request.

    Args:
        answer: Complete wizard answers

    Returns:
        PromptPair with the rubric system prompt and the project-specific user prompt
    """
    project_json = json.dumps(answer.to_payload(), indent=2, ensure_ascii=False)
    user = USER_PROMPT_TEMPLATE.format(
        project_json=project_json,
        requirement_sections=_build_requirement_sections(answer),
        mandatory_requirements=MANDATORY_REQUIREMENTS,
    )
    return PromptPair(system=SYSTEM_PROMPT, user=user)
