"""Centralized constants for vaultmark.

Default values and fixed strings shared across the pipeline, the
configuration layer and the CLI host.
"""

from __future__ import annotations

# =============================================================================
# Bookmarks
# =============================================================================

DEFAULT_BOOKMARK_PATH = "bookmarks"
BOOKMARK_SUFFIX = ".md"
UNAVAILABLE_PREFIX = "UNAVAILABLE_"

# =============================================================================
# Fetching
# =============================================================================

# None disables the request timeout entirely (a hung fetch stalls the batch)
DEFAULT_FETCH_TIMEOUT: float | None = None
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; vaultmark)"

# Content types accepted as page text besides text/*
TEXT_CONTENT_TYPES = (
    "application/xhtml+xml",
    "application/xml",
    "application/json",
    "application/ld+json",
    "application/rss+xml",
    "application/atom+xml",
)

# =============================================================================
# Configuration
# =============================================================================

CONFIG_FILENAME = "vaultmark.json"
CONFIG_ENV_VAR = "VAULTMARK_CONFIG"
DEFAULT_USER_CONFIG_DIR = "~/.vaultmark"

# =============================================================================
# Logging
# =============================================================================

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "~/.vaultmark/logs"
DEFAULT_LOG_ROTATION = "10 MB"
DEFAULT_LOG_RETENTION = "7 days"
LOG_DIR_ENV_VAR = "VAULTMARK_LOG_DIR"

# =============================================================================
# Notices
# =============================================================================

NOTICE_BOOKMARKING = "bookmarking: {url}"
NOTICE_BOOKMARKED = "bookmarked: {path}"
NOTICE_COMPLETE = "bookmarking complete"
NOTICE_ERROR = "error: {error}"
