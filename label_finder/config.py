"""Configuration constants for the Label Finder."""

from __future__ import annotations

from dataclasses import dataclass

# GitHub endpoints
GITHUB_API_URL = "https://api.github.com"
SEARCH_ISSUES_PATH = "/search/issues"
API_VERSION = "2022-11-28"

# Search caps (100 is the search API's page-size ceiling)
SEARCH_PER_PAGE = 100
REQUEST_TIMEOUT_S = 30.0

# Result table
PAGE_SIZE = 10

# ── Shortcut labels offered as one-click filters ─────────────
TRENDING_TOPICS = (
    "hacktoberfest",
    "good-first-issue",
    "help-wanted",
    "bug",
    "enhancement",
    "documentation",
)

# ── User-facing messages ─────────────────────────────────────
REQUEST_FAILED_MESSAGE = "Failed to fetch issues"
FETCH_ERROR_MESSAGE = "An error occurred while fetching issues. Please try again."


@dataclass(frozen=True)
class SearchSettings:
    page_size: int = PAGE_SIZE
    per_page: int = SEARCH_PER_PAGE
    trending_topics: tuple[str, ...] = TRENDING_TOPICS
    api_url: str = GITHUB_API_URL
    timeout_s: float | None = REQUEST_TIMEOUT_S
    token: str | None = None

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        if not 1 <= self.per_page <= SEARCH_PER_PAGE:
            raise ValueError(f"per_page must be within 1..{SEARCH_PER_PAGE}, got {self.per_page}")


DEFAULT_SETTINGS = SearchSettings()
