"""GitHub issue search client."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional
from urllib.parse import quote

import requests

from .config import (
    API_VERSION,
    GITHUB_API_URL,
    REQUEST_FAILED_MESSAGE,
    REQUEST_TIMEOUT_S,
    SEARCH_ISSUES_PATH,
    SEARCH_PER_PAGE,
)

logger = logging.getLogger(__name__)


class SearchError(Exception):
    pass


class RequestFailed(SearchError):
    """The search API answered with a non-success status."""

    def __init__(self, status_code: int, detail: str = ""):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{REQUEST_FAILED_MESSAGE} (HTTP {status_code})")


class UnexpectedFailure(SearchError):
    """Transport errors, undecodable payloads and malformed issue records."""


def resolve_token(token: Optional[str] = None) -> Optional[str]:
    """CLI argument first, then ``GITHUB_TOKEN``. Anonymous search needs none."""
    return token or os.environ.get("GITHUB_TOKEN") or None


def search_url(query: str, per_page: int = SEARCH_PER_PAGE, api_url: str = GITHUB_API_URL) -> str:
    """Build the search URL by hand so ``+`` stays a term separator.

    Passing the query through ``params=`` would encode ``+`` as ``%2B`` and
    GitHub would read it as a literal plus sign.
    """
    return f"{api_url}{SEARCH_ISSUES_PATH}?q={quote(query, safe='+:')}&per_page={per_page}"


class SearchClient:
    """Issues a single search request per call. No retries, no rate-limit waits."""

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        api_url: str = GITHUB_API_URL,
        timeout_s: Optional[float] = REQUEST_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ):
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = session or requests.Session()
        self.session.headers.update(self._headers())

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": "label-finder",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def search_issues(self, query: str, per_page: int = SEARCH_PER_PAGE) -> list[dict[str, Any]]:
        """Return the ``items`` list of one search page for ``query``."""
        url = search_url(query, per_page=per_page, api_url=self.api_url)
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout_s)
        except requests.exceptions.RequestException as e:
            logger.warning("Search request failed: %s", e)
            raise UnexpectedFailure(f"Request failed: {e}") from e

        if not response.ok:
            error = RequestFailed(response.status_code, response.text[:500])
            logger.warning("Search API returned HTTP %d for %r: %s", error.status_code, query, error.detail)
            raise error

        try:
            payload = response.json()
        except ValueError as e:
            raise UnexpectedFailure(f"Search API returned invalid JSON: {e}") from e

        items = payload.get("items") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            raise UnexpectedFailure("Search API response has no 'items' list")
        logger.debug("Search for %r returned %d issues", query, len(items))
        return items

    def close(self) -> None:
        self.session.close()
