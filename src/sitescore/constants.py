# src/sitescore/constants.py
"""Centralized constants for the site eligibility scorer.

Point tables and thresholds here are fixed scoring contracts. For the
user-configurable category weights, see config.py and WeightTable.
"""

# =============================================================================
# Fetching
# =============================================================================

DEFAULT_SCHEME = "http"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_REDIRECTS = 5
DEFAULT_DOMAIN_LOOKUP_TIMEOUT_SECONDS = 10.0

# Response headers checked by the security criterion (lower-case)
HEADER_HSTS = "strict-transport-security"
HEADER_XSS_PROTECTION = "x-xss-protection"
HEADER_CSP = "content-security-policy"
HEADER_FRAME_OPTIONS = "x-frame-options"


# =============================================================================
# Required pages
# =============================================================================

# Substring looked for (case-insensitive) in link hrefs
PRIVACY_KEYWORD = "privacy"
CONTACT_KEYWORD = "contact"
ABOUT_KEYWORD = "about"
TERMS_KEYWORD = "terms"


# =============================================================================
# Criterion point tables
# =============================================================================

SEO_POINTS = {
    "title": 20,
    "meta_description": 20,
    "h1": 15,
    "h2": 10,
    "h3": 5,
    "internal_links": 15,
    "external_links": 15,
}

REQUIRED_PAGES_POINTS = {
    "privacy": 40,
    "contact": 20,
    "about": 20,
    "terms": 20,
}

SECURITY_POINTS = {
    "https": 40,
    "hsts": 20,
    "xss_protection": 20,
    "csp": 20,
}

# (minimum months, score), checked top to bottom
DOMAIN_AGE_TIERS = [
    (12, 100),
    (6, 80),
    (3, 60),
    (1, 40),
]
DOMAIN_AGE_FLOOR_SCORE = 20

# (minimum value, points), checked top to bottom; floor applies otherwise
WORD_COUNT_TIERS = [
    (1000, 50),
    (500, 30),
    (300, 20),
]
PARAGRAPH_LENGTH_TIERS = [
    (100, 50),
    (50, 30),
    (30, 20),
]
CONTENT_FLOOR_POINTS = 10

IMAGE_POINTS = {
    "any": 40,
    "with_alt": 30,
    "with_title": 30,
}

META_POINTS = {
    "viewport": 30,
    "robots": 20,
    "keywords": 15,
    "author": 15,
    "open_graph": 20,
}

# Points awarded for a passed check; a warning earns half, a failure none
PERFORMANCE_POINTS = {
    "scripts": 30,
    "stylesheets": 30,
    "load_time": 40,
}
ACCESSIBILITY_POINTS = {
    "images": 40,
    "links": 30,
    "forms": 30,
}


# =============================================================================
# Display / classification thresholds
# =============================================================================

MAX_SCRIPTS = 10
MAX_STYLESHEETS = 5
MAX_LOAD_TIME_SECONDS = 3

# Rough per-resource cost used by the load time estimate
MS_PER_RESOURCE = 100

ACCESSIBILITY_PASS_PERCENT = 90
ACCESSIBILITY_WARN_PERCENT = 50

DOMAIN_AGE_PASS_MONTHS = 6
WORD_COUNT_PASS = 500
PARAGRAPH_LENGTH_PASS = 50

DAYS_PER_MONTH = 30


# =============================================================================
# Progress
# =============================================================================

TOTAL_STEPS = 10

STEP_INIT = 0
STEP_FETCH = 1
STEP_SEO = 2
STEP_REQUIRED_PAGES = 3
STEP_SECURITY = 4
STEP_DOMAIN_AGE = 5
STEP_CONTENT = 6
STEP_IMAGES = 7
STEP_META_PERFORMANCE = 8
STEP_ACCESSIBILITY = 9
STEP_SCORING = 10

STEP_DESCRIPTIONS = {
    STEP_INIT: "Initializing analysis",
    STEP_FETCH: "Fetching webpage content",
    STEP_SEO: "Performing SEO checks",
    STEP_REQUIRED_PAGES: "Checking required pages",
    STEP_SECURITY: "Checking security measures",
    STEP_DOMAIN_AGE: "Checking domain age",
    STEP_CONTENT: "Analyzing content",
    STEP_IMAGES: "Analyzing images",
    STEP_META_PERFORMANCE: "Analyzing meta tags and performance",
    STEP_ACCESSIBILITY: "Analyzing accessibility",
    STEP_SCORING: "Calculating final score",
}
