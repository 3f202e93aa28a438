# src/seo_audit/constants.py
"""Centralized constants for the SEO audit.

This module contains the fixed values shared across the fetcher, the rule sets
and the renderers. For user-configurable thresholds, see config.py and
AuditThresholds.
"""

# =============================================================================
# Fetching
# =============================================================================

# Public CORS proxies, tried in order. {url} is the percent-encoded target URL.
PROXY_SERVICES = [
    "https://api.allorigins.win/raw?url={url}",
    "https://corsproxy.io/?{url}",
    "https://api.codetabs.com/v1/proxy?quest={url}",
]

# Template for fetching the target directly, without a proxy. {raw} is the
# target URL as given.
DIRECT_FETCH_TEMPLATE = "{raw}"

# Request timeout per proxy attempt
DEFAULT_TIMEOUT_SECONDS = 15

# Responses larger than this are rejected
MAX_CONTENT_LENGTH_BYTES = 10 * 1024 * 1024  # 10MB

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

REQUEST_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

# Bytes read per chunk while enforcing the content limit
DOWNLOAD_CHUNK_SIZE = 64 * 1024


# =============================================================================
# Scoring
# =============================================================================

MAX_SCORE = 100

# Points deducted per triggered issue
META_ISSUE_PENALTY = 10
CONTENT_ISSUE_PENALTY = 8
PERFORMANCE_ISSUE_PENALTY = 8

# Score bands for rendering: (minimum score, band name, color)
SCORE_BANDS = [
    (80, "good", "green"),
    (60, "fair", "yellow"),
    (0, "poor", "red"),
]


# =============================================================================
# Rendering
# =============================================================================

META_CARD_TITLE = "Meta Tags"
CONTENT_CARD_TITLE = "Content Analysis"
PERFORMANCE_CARD_TITLE = "Performance"

# Image extensions flagged as unoptimized (case-sensitive suffix match)
LARGE_IMAGE_EXTENSIONS = (".jpg", ".png", ".gif")

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
