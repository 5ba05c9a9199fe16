"""Turn comma-separated label text into a GitHub issue search query."""

from __future__ import annotations


def parse_labels(raw_text: str) -> list[str]:
    """Split label text on commas, trimming segments and dropping empty ones.

    Duplicates are kept and nothing is validated against GitHub's label grammar.
    """
    return [label.strip() for label in raw_text.split(",") if label.strip()]


def build_query(raw_text: str) -> str:
    """Build the ``label:a+label:b`` query for the given label text.

    Label text is not escaped here; encoding the final query string is up to
    the caller. Empty input gives an empty query, which callers should not send.
    """
    return "+".join(f"label:{label}" for label in parse_labels(raw_text))


def append_topic(raw_text: str, topic: str) -> str:
    return f"{raw_text},{topic}" if raw_text else topic
