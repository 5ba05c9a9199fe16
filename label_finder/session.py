"""Search session: label text, fetch lifecycle and paging for one user."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from .aggregator import MalformedIssueError, aggregate
from .config import DEFAULT_SETTINGS, FETCH_ERROR_MESSAGE, SearchSettings
from .github_client import SearchError, UnexpectedFailure
from .models import FetchTicket, Failed, Idle, Loaded, Loading, RepoAggregate, SearchState
from .pagination import PageState, needs_pager, paginate
from .pagination import total_pages as count_pages
from .query import append_topic, build_query, parse_labels

logger = logging.getLogger(__name__)


class IssueSearcher(Protocol):
    def search_issues(self, query: str, per_page: int = ...) -> list[dict[str, Any]]: ...


class SearchSession:
    """Owns the label text, the current search state and the page index.

    Every fetch is tagged with a ticket; only the most recently issued ticket
    may change the state, so a slow response can never overwrite a newer one.
    """

    def __init__(self, client: IssueSearcher, settings: SearchSettings = DEFAULT_SETTINGS):
        self.client = client
        self.settings = settings
        self.state: SearchState = Idle()
        self.page = PageState(page_size=settings.page_size)
        self._label_text = ""
        self._tickets_issued = 0

    # ── Label text ──────────────────────────────────────────────

    @property
    def label_text(self) -> str:
        return self._label_text

    @property
    def labels(self) -> list[str]:
        return parse_labels(self._label_text)

    def set_label_text(self, text: str) -> SearchState:
        """Replace the label text, fetching right away when it yields a query."""
        self._label_text = text
        if build_query(text):
            self.fetch()
        return self.state

    def click_topic(self, topic: str) -> SearchState:
        """Append a trending topic to the label text. The page index is kept."""
        return self.set_label_text(append_topic(self._label_text, topic))

    def submit(self, text: str | None = None) -> SearchState:
        """Explicit search submission: back to page 1, then fetch.

        ``text`` replaces the label text without triggering a separate fetch.
        """
        if text is not None:
            self._label_text = text
        self.page.reset()
        if build_query(self._label_text):
            self.fetch()
        return self.state

    # ── Fetch cycle ─────────────────────────────────────────────

    def fetch(self) -> SearchState:
        previous = self.state
        ticket = self.begin_fetch()
        try:
            items = self.client.search_issues(ticket.query, per_page=self.settings.per_page)
        except SearchError as e:
            self.fail_fetch(ticket, e)
        except BaseException:
            # Interrupted (Ctrl+C): leave Loading and put the prior state back.
            if self.is_current(ticket):
                self.state = previous
            raise
        else:
            self.complete_fetch(ticket, items)
        return self.state

    def begin_fetch(self) -> FetchTicket:
        self._tickets_issued += 1
        ticket = FetchTicket(number=self._tickets_issued, query=build_query(self._label_text))
        self.state = Loading(query=ticket.query)
        return ticket

    def is_current(self, ticket: FetchTicket) -> bool:
        return ticket.number == self._tickets_issued

    def complete_fetch(self, ticket: FetchTicket, items: list[dict[str, Any]]) -> bool:
        """Apply a successful response. Returns False if ``ticket`` was superseded."""
        if not self.is_current(ticket):
            logger.debug("Discarding response for stale ticket #%d (%s)", ticket.number, ticket.query)
            return False
        try:
            results = aggregate(items)
        except MalformedIssueError as e:
            return self.fail_fetch(ticket, UnexpectedFailure(str(e)))
        self.state = Loaded(query=ticket.query, results=results)
        self.page.clamp(self.total_pages)
        return True

    def fail_fetch(self, ticket: FetchTicket, error: Exception) -> bool:
        if not self.is_current(ticket):
            logger.debug("Discarding failure for stale ticket #%d: %s", ticket.number, error)
            return False
        logger.debug("Fetch #%d failed: %s", ticket.number, error)
        # Previous results are dropped; the error is shown on its own.
        self.state = Failed(query=ticket.query, message=FETCH_ERROR_MESSAGE)
        return True

    # ── Paging ──────────────────────────────────────────────────

    def next_page(self) -> bool:
        return self.page.next(self.total_pages)

    def previous_page(self) -> bool:
        return self.page.previous()

    def go_to_page(self, page: int) -> int:
        self.page.go_to(page, self.total_pages)
        return self.page.current

    # ── Derived views ───────────────────────────────────────────

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def error(self) -> str | None:
        return self.state.message if isinstance(self.state, Failed) else None

    @property
    def results(self) -> tuple[RepoAggregate, ...]:
        return self.state.results if isinstance(self.state, Loaded) else ()

    @property
    def total_pages(self) -> int:
        return count_pages(len(self.results), self.settings.page_size)

    @property
    def visible_results(self) -> list[RepoAggregate]:
        return paginate(self.results, self.page.current, self.settings.page_size)

    @property
    def show_pager(self) -> bool:
        return needs_pager(len(self.results), self.settings.page_size)

    @property
    def first_row_number(self) -> int:
        return (self.page.current - 1) * self.settings.page_size + 1
