"""Implementation guidance appended to the final prompt for each enabled requirement flag."""

from vibeprompt.schemas.project import RequirementFlag

USER_ACCOUNTS = """### USER ACCOUNTS & AUTHENTICATION (REQUIRED)
- Email/password sign-up with email verification before first login
- Password reset via single-use, time-limited token (expires in 1 hour)
- Passwords hashed with bcrypt (cost factor 12 or higher); minimum 12 characters
- Sessions stored in httpOnly, Secure, SameSite=Strict cookies; never in localStorage
- Refresh token rotation with server-side revocation on logout
- Account lockout or exponential delay after 5 failed login attempts
- Profile page where users can view and edit their own details
- Optional OAuth sign-in (Google, GitHub) behind the same session model"""

SENSITIVE_DATA = """### SENSITIVE DATA PROTECTION (REQUIRED)
- HTTPS everywhere with HSTS; TLS 1.2 minimum
- Encrypt sensitive columns at rest (AES-256) with keys held in a KMS, not in code
- Input validation and sanitization on every endpoint (schema-validated payloads)
- Security headers: Content-Security-Policy, X-Frame-Options, X-Content-Type-Options, Referrer-Policy
- Privacy policy and cookie consent; GDPR data export and deletion on request
- Data minimization: collect only fields the product needs, with a retention period per field
- Audit log of access to personal data, retained for 1 year
- Secrets only in environment variables or a secrets manager; never committed"""

ADMIN_PANEL = """### ADMIN DASHBOARD (REQUIRED)
- Separate admin area behind role-based access control (admin, editor, viewer roles)
- Admin actions require re-authentication for destructive operations
- Content management screens with create, edit, archive and restore
- User management: search, suspend, role changes, impersonation disabled by default
- Overview page with key metrics (sign-ups, active users, errors)
- Every admin action written to an immutable audit trail (who, what, when)
- Admin routes excluded from public sitemap and protected from indexing"""

MOBILE_RESPONSIVE = """### MOBILE-RESPONSIVE DESIGN (REQUIRED)
- Mobile-first layout with breakpoints at 640px, 768px, 1024px and 1280px
- Touch targets at least 44x44px with adequate spacing
- Collapsible navigation (hamburger or bottom bar) on small screens
- Responsive images (srcset, modern formats such as WebP/AVIF) and lazy loading
- No horizontal scrolling at 320px viewport width
- Test on real iOS Safari and Android Chrome in addition to desktop browsers"""

REAL_TIME_FEATURES = """### REAL-TIME FEATURES (REQUIRED)
- WebSocket (or managed real-time service) connection with automatic reconnect and backoff
- Server is the source of truth; clients apply optimistic updates and reconcile
- Live notifications delivered to online users, persisted for offline users
- Presence indicators with heartbeat timeout (30 seconds)
- Conflict resolution strategy for concurrent edits (last-write-wins with version check, or CRDT)
- Authorization enforced on every channel subscription, not only on connect
- Rate limiting on outbound messages per connection"""

FILE_UPLOADS = """### FILE UPLOADS (REQUIRED)
- Direct-to-storage uploads using short-lived signed URLs (S3, GCS or Supabase Storage)
- Validate MIME type and file signature server-side; allow-list extensions
- Size limits per file type (e.g. images 10MB, documents 25MB) enforced client and server side
- Image processing pipeline: resize, compress, strip EXIF metadata
- Malware scanning before files are made available to other users
- Serve files through a CDN; private files only via expiring signed URLs
- Orphaned upload cleanup job"""

PAYMENTS = """### PAYMENT PROCESSING (REQUIRED)
- Stripe integration using Stripe Checkout or Payment Elements; card data never touches our servers
- Products, prices and subscriptions defined in Stripe and mirrored in the database
- Webhook endpoint with signature verification for checkout.session.completed,
  invoice.paid, invoice.payment_failed and customer.subscription.updated/deleted
- Idempotent webhook handling keyed by Stripe event id
- Email receipts and an order/billing history page
- Refund and cancellation flows, including proration for subscriptions
- Test mode keys for development, live keys only in production secrets
- PCI DSS scope kept to SAQ A by relying on Stripe-hosted fields"""

SEARCH_FEATURE = """### SEARCH FUNCTIONALITY (REQUIRED)
- Full-text search index (PostgreSQL tsvector, Meilisearch, Algolia or Typesense)
- Typo-tolerant fuzzy matching and relevance ranking
- Filters and sorting exposed in the URL so results are shareable
- Autocomplete suggestions with debounced input (250ms)
- Pagination or infinite scroll with stable ordering
- Index updates on create/update/delete; p95 query latency under 200ms
- Empty-state and no-results messaging"""

ANALYTICS = """### USAGE ANALYTICS (REQUIRED)
- Privacy-friendly analytics (Plausible, PostHog or GA4 with consent mode)
- Event tracking plan listing every event name and its properties
- Key funnels: sign-up, activation, conversion
- Consent banner; no tracking before consent where the law requires it
- IP anonymization and no personal data in event properties
- Dashboard for the core business metrics"""

MULTI_LANGUAGE = """### INTERNATIONALIZATION (REQUIRED)
- i18n framework (e.g. i18next, next-intl, or the platform equivalent) with message catalogs per locale
- No hard-coded user-facing strings; all text goes through translation keys
- Language switcher persisted per user; default from the Accept-Language header
- Locale-aware formatting of dates, numbers and currencies (Intl APIs)
- Right-to-left layout support for RTL languages
- Translation management workflow and fallback to the default locale for missing keys"""

REQUIREMENT_DETAILS: dict[RequirementFlag, str] = {
    RequirementFlag.USER_ACCOUNTS: USER_ACCOUNTS,
    RequirementFlag.SENSITIVE_DATA: SENSITIVE_DATA,
    RequirementFlag.ADMIN_PANEL: ADMIN_PANEL,
    RequirementFlag.MOBILE_RESPONSIVE: MOBILE_RESPONSIVE,
    RequirementFlag.REAL_TIME_FEATURES: REAL_TIME_FEATURES,
    RequirementFlag.FILE_UPLOADS: FILE_UPLOADS,
    RequirementFlag.PAYMENTS: PAYMENTS,
    RequirementFlag.SEARCH_FEATURE: SEARCH_FEATURE,
    RequirementFlag.ANALYTICS: ANALYTICS,
    RequirementFlag.MULTI_LANGUAGE: MULTI_LANGUAGE,
}

_unmapped = [flag.value for flag in RequirementFlag if flag not in REQUIREMENT_DETAILS]
if _unmapped:
    raise RuntimeError(f"Requirement flags without guidance: {', '.join(_unmapped)}")

MANDATORY_REQUIREMENTS = """## MANDATORY REQUIREMENTS (APPLY TO EVERY PROJECT)

1. Error Handling
- Global error boundary in the UI and a central error handler on the server
- User-facing messages that are friendly and never leak stack traces
- Typed error responses with stable error codes

2. Logging
- Structured JSON logs with request/correlation IDs
- Log levels used consistently; no secrets or personal data in logs
- Error tracking (e.g. Sentry) with source maps

3. Accessibility
- WCAG 2.1 AA: semantic HTML, keyboard navigation, visible focus states
- Color contrast of at least 4.5:1 for body text
- Alt text for images and labels for every form control
- Automated checks with axe-core in CI

4. Performance
- Budgets: LCP < 2.5s, CLS < 0.1, TBT < 300ms, JavaScript < 300KB gzipped
- Code splitting, image optimization and HTTP caching headers

5. SEO
- Unique title and meta description per page, Open Graph tags
- sitemap.xml and robots.txt; server-rendered or pre-rendered public pages

6. Documentation
- README with setup, scripts and architecture overview
- .env.example listing every environment variable
- API documentation for every endpoint

7. Git Workflow
- Trunk-based or GitHub Flow with short-lived feature branches
- Conventional commits and required pull request review
- CI must pass (lint, type check, tests) before merge

8. Environment Management
- Separate development, staging and production environments
- Configuration through environment variables, validated at startup

9. Deployment
- Automated deploys from CI with preview deployments for pull requests
- Database migrations run as a release step
- Documented rollback procedure and health check endpoint"""


def requirement_detail(flag: RequirementFlag) -> str:
    """Guidance block for ``flag``; unknown flags yield an empty string."""
    try:
        flag = RequirementFlag(flag)
    except ValueError:
        return ""
    return REQUIREMENT_DETAILS.get(flag, "")
