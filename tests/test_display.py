"""Tests for rendering a search session."""

import io

import pytest
from rich.console import Console

from label_finder.config import FETCH_ERROR_MESSAGE
from label_finder.display import display_session, label_badges, pager_line
from label_finder.github_client import RequestFailed
from label_finder.session import SearchSession


def issue(owner, name):
    return {"repository_url": f"https://api.github.com/repos/{owner}/{name}"}


class FakeClient:
    def __init__(self, items=None, error=None):
        self.items = items or []
        self.error = error

    def search_issues(self, query, per_page=100):
        if self.error:
            raise self.error
        return self.items


def render(session) -> str:
    out = Console(file=io.StringIO(), width=120)
    display_session(session, out)
    return out.file.getvalue()


def span_style(text, fragment):
    for span in text.spans:
        if text.plain[span.start:span.end] == fragment:
            return str(span.style)
    raise AssertionError(f"no span for {fragment!r}")


@pytest.fixture
def client():
    return FakeClient([issue("org", f"repo{i}") for i in range(12)])


class TestDisplaySession:
    def test_results_table_and_pager(self, client):
        session = SearchSession(client)
        session.set_label_text("bug")
        text = render(session)
        assert "Repository" in text
        assert "Issue Count" in text
        assert "org/repo0" in text
        assert "org/repo10" not in text
        assert "Page 1 of 2" in text

    def test_second_page_rows(self, client):
        session = SearchSession(client)
        session.set_label_text("bug")
        session.next_page()
        text = render(session)
        assert "org/repo10" in text
        assert "org/repo11" in text
        assert "org/repo0" not in text
        assert "Page 2 of 2" in text

    def test_no_pager_for_single_page(self):
        session = SearchSession(FakeClient([issue("a", "b")]))
        session.set_label_text("bug")
        assert "Page" not in render(session)

    def test_http_500_shows_only_message(self):
        session = SearchSession(FakeClient(error=RequestFailed(500)))
        session.set_label_text("bug")
        text = render(session)
        assert FETCH_ERROR_MESSAGE in text
        assert "Repository" not in text

    def test_failure_hides_earlier_results(self, client):
        session = SearchSession(client)
        session.set_label_text("bug")
        client.error = RequestFailed(500)
        session.submit()
        text = render(session)
        assert FETCH_ERROR_MESSAGE in text
        assert "org/repo0" not in text
        assert "Repository" not in text

    def test_empty_results(self):
        session = SearchSession(FakeClient([]))
        session.set_label_text("bug")
        assert "No repositories found." in render(session)

    def test_nothing_before_first_search(self, client):
        assert render(SearchSession(client)) == ""


class TestPagerLine:
    def test_last_page_disables_next(self):
        line = pager_line(2, 2)
        assert "Page 2 of 2" in line.plain
        assert span_style(line, "Next >") == "dim"
        assert span_style(line, "< Previous") == "bold"

    def test_first_page_disables_previous(self):
        line = pager_line(1, 3)
        assert span_style(line, "< Previous") == "dim"
        assert span_style(line, "Next >") == "bold"


class TestLabelBadges:
    def test_one_badge_per_label(self):
        badges = label_badges(["bug", "help-wanted"])
        assert badges.plain == " bug   help-wanted "
