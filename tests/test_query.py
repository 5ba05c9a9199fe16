"""Tests for label parsing and query building."""

from label_finder.query import append_topic, build_query, parse_labels


class TestParseLabels:
    def test_trims_and_splits(self):
        assert parse_labels("hacktoberfest, good-first-issue") == ["hacktoberfest", "good-first-issue"]

    def test_drops_empty_segments(self):
        assert parse_labels("  ,  ,bug") == ["bug"]

    def test_keeps_duplicates(self):
        assert parse_labels("bug,bug") == ["bug", "bug"]

    def test_empty(self):
        assert parse_labels("") == []

    def test_no_validation_of_label_text(self):
        assert parse_labels("good first issue, ☃") == ["good first issue", "☃"]


class TestBuildQuery:
    def test_two_labels(self):
        assert build_query("hacktoberfest, good-first-issue") == "label:hacktoberfest+label:good-first-issue"

    def test_single_label(self):
        assert build_query("bug") == "label:bug"

    def test_empty_input(self):
        assert build_query("") == ""

    def test_whitespace_only(self):
        assert build_query("   ") == ""

    def test_only_commas(self):
        assert build_query(" , , ") == ""

    def test_skips_empty_segments(self):
        assert build_query("  ,  ,bug") == "label:bug"

    def test_label_text_not_escaped(self):
        assert build_query("good first issue") == "label:good first issue"


class TestAppendTopic:
    def test_empty_text_becomes_topic(self):
        assert append_topic("", "bug") == "bug"

    def test_appends_with_comma(self):
        assert append_topic("hacktoberfest", "bug") == "hacktoberfest,bug"

    def test_appends_after_user_spacing(self):
        assert append_topic("a, b", "bug") == "a, b,bug"
