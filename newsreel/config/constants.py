"""
Centralized constants for newsreel.

Paging, debounce and network values live here so the screen, presenter
and service agree on them.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

NEWSREEL_CONFIG_DIR = Path.home() / ".config" / "newsreel"

# =============================================================================
# NEWS API
# =============================================================================

DEFAULT_BASE_URL = "https://newsapi.org"
EVERYTHING_ENDPOINT = "/v2/everything"
REQUEST_TIMEOUT_SECONDS = 10

# Articles per page requested from the API
QUERY_PAGE_SIZE = 20

# Topic shown when the search field is empty
DEFAULT_TOPIC = "general"

# Marker the API uses for withdrawn articles
REMOVED_ARTICLE_TITLE = "[Removed]"

# =============================================================================
# UI TIMING (seconds)
# =============================================================================

SEARCH_NEWS_TIME_DELAY = 0.5  # wait for the user to stop typing

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "NEWSREEL_API_KEY": {
        "description": "NewsAPI key sent with every request",
        "default": None,
        "valid_values": None,
        "sensitive": True,
    },
    "NEWSREEL_BASE_URL": {
        "description": "Base URL of the NewsAPI-compatible service",
        "default": DEFAULT_BASE_URL,
        "valid_values": None,
    },
    "NEWSREEL_LOG_LEVEL": {
        "description": "Log level for the TUI log file",
        "default": "INFO",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR"],
    },
}
