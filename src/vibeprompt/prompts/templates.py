"""Prompt templates for the wizard's smaller assistant tasks.

Every function here is pure: the same arguments always produce the same
text, nothing is mutated, and nothing touches the network.
"""

from dataclasses import dataclass
from typing import Sequence

from vibeprompt.core.llm_base import ChatMessage

# Feature suggestions are only requested once the description says something
FEATURE_SUGGESTION_MIN_DESCRIPTION = 20


@dataclass(frozen=True)
class PromptPair:
    """System instruction plus user instruction for one request."""

    system: str
    user: str

    def to_messages(self) -> list[ChatMessage]:
        return [ChatMessage.system(self.system), ChatMessage.user(self.user)]


PROJECT_GUIDANCE_SYSTEM = (
    'You are an AI assistant helping non-technical "vibe coders" understand project types '
    "and requirements. Explain things in simple, friendly terms without technical jargon."
)

FEATURE_SUGGESTION_SYSTEM = (
    "You are helping a non-technical person understand what features their project should "
    "have. Suggest practical, essential features in simple terms."
)

DESCRIPTION_ENHANCEMENT_SYSTEM = (
    "You are a product manager helping to write detailed project descriptions. Take brief "
    "ideas and expand them into comprehensive, actionable descriptions that developers can "
    "understand and build from."
)

TECH_OPTIONS_SYSTEM = (
    "You are a technology consultant. Generate comprehensive, accurate technology options "
    "for different project types. Always return valid JSON only, no additional text."
)

TECH_RECOMMENDATION_SYSTEM = (
    "You are a tech consultant helping non-technical people choose the right technology "
    "stack. Explain choices in simple terms focusing on benefits and why they work well "
    "together."
)


def project_type_guidance_prompt(project_type: str) -> PromptPair:
    """Friendly overview of what building ``project_type`` involves."""
    return PromptPair(
        system=PROJECT_GUIDANCE_SYSTEM,
        user=(
            f"I want to build a {project_type}. Can you explain what this typically involves "
            "and what key features I should consider? Keep it simple and friendly."
        ),
    )


def feature_suggestion_prompt(project_type: str, project_name: str, description: str) -> PromptPair:
    """Ask for 8-10 plain-language features, one per line, unnumbered."""
    return PromptPair(
        system=FEATURE_SUGGESTION_SYSTEM,
        user=(
            f'For a {project_type} project called "{project_name}" with description: '
            f'"{description}", suggest 8-10 specific, actionable features that would be '
            "valuable. Return only a simple list of features, one per line, without numbers "
            "or bullets. Focus on features that are commonly needed for this type of project."
        ),
    )


def description_enhancement_prompt(description: str, project_type: str, project_name: str) -> PromptPair:
    """Ask for a prose rewrite covering purpose, problem, audience, features and differentiation."""
    user = f"""Take this basic project description and expand it into a comprehensive, detailed description that clearly explains:

1. What the project does
2. What problem it solves
3. Who the target users are
4. Key features and functionality
5. What makes it valuable or unique

Original description: "{description}"
Project type: {project_type}
Project name: {project_name or 'Unnamed Project'}

Please rewrite this as a detailed, professional project description that would help developers understand exactly what to build. Keep the same core idea but add context, user scenarios, and specific functionality details. Write it in a clear, engaging way as flowing prose paragraphs, not as a list."""
    return PromptPair(system=DESCRIPTION_ENHANCEMENT_SYSTEM, user=user)


def tech_options_prompt(project_type: str) -> PromptPair:
    """Ask for the four-category option catalog as strict JSON."""
    user = f"""Generate technology stack options for a {project_type} project. For each category (frontend, backend, database, hosting), provide 8-12 relevant options with:

1. value: kebab-case identifier
2. label: Display name
3. description: Brief explanation of what it is and why it's good for this project type
4. pros: Array of exactly 3 key benefits
5. difficulty: "Easy", "Medium", or "Hard"

Categories needed:
- frontend: User interface technologies appropriate for {project_type}
- backend: Server/API technologies (include "none" option for static projects)
- database: Data storage options (include "none" option)
- hosting: Deployment platforms suitable for {project_type}

For mobile apps, include React Native, Flutter, Swift, Kotlin, Ionic, etc.
For web apps, include React, Vue, Angular, etc.
For games, include Unity, Godot, Phaser, etc.

Return as valid JSON in this exact format, with all four categories present:
{{
  "frontend": {{
    "title": "User Interface",
    "description": "Technologies for building the user interface",
    "options": [
      {{
        "value": "react-native",
        "label": "React Native",
        "description": "Cross-platform mobile development with JavaScript",
        "pros": ["Single codebase", "Native performance", "Large community"],
        "difficulty": "Medium"
      }}
    ]
  }},
  "backend": {{ "title": "...", "description": "...", "options": [ ... ] }},
  "database": {{ "title": "...", "description": "...", "options": [ ... ] }},
  "hosting": {{ "title": "...", "description": "...", "options": [ ... ] }}
}}

Respond with the JSON object only. Do not add explanations, markdown fences, or any text before or after the JSON."""
    return PromptPair(system=TECH_OPTIONS_SYSTEM, user=user)


def tech_recommendation_prompt(
    project_type: str,
    project_name: str,
    description: str,
    core_features: Sequence[str],
) -> PromptPair:
    """Ask why a particular stack suits the project, as prose."""
    user = f"""Based on this project: Type: {project_type}, Name: "{project_name}", Description: "{description}", Features: {', '.join(core_features)}.

Recommend the best technology stack and explain why each choice is ideal for this specific project. Consider the project complexity, features needed, and ease of use for a non-technical person.

Please provide:
1. A brief explanation of why this stack works well
2. Specific recommendations for: Frontend, Backend, Database, Hosting
3. Keep explanations simple and focus on benefits

Format your response as explanatory text, not a list."""
    return PromptPair(system=TECH_RECOMMENDATION_SYSTEM, user=user)
