"""Group issue search hits by repository and rank repositories by match count."""

from __future__ import annotations

import re
from typing import Any, Iterable

from .models import RepoAggregate

_API_REPOS_PREFIX = re.compile(r"api\.([^/]+)/repos")


class MalformedIssueError(ValueError):
    pass


def repo_identifier(repository_url: str) -> str:
    """Return ``owner/name`` from the last two path segments of a repository URL."""
    parts = [p for p in repository_url.rstrip("/").split("/") if p]
    if len(parts) < 2:
        raise MalformedIssueError(f"Cannot derive owner/name from repository_url {repository_url!r}")
    return "/".join(parts[-2:])


def web_url(repository_url: str) -> str:
    """Map ``https://api.<host>/repos/o/n`` onto ``https://<host>/o/n``."""
    return _API_REPOS_PREFIX.sub(r"\1", repository_url, count=1)


def _repository_url(issue: dict[str, Any]) -> str:
    url = issue.get("repository_url") if isinstance(issue, dict) else None
    if not isinstance(url, str):
        raise MalformedIssueError(f"Issue record has no repository_url: {issue!r:.200}")
    return url


def aggregate(issues: Iterable[dict[str, Any]]) -> tuple[RepoAggregate, ...]:
    counts: dict[str, dict[str, Any]] = {}
    for issue in issues:
        url = _repository_url(issue)
        key = repo_identifier(url)
        if key not in counts:
            counts[key] = {"count": 0, "url": web_url(url)}
        counts[key]["count"] += 1

    ranked = [RepoAggregate(repo=k, count=v["count"], url=v["url"]) for k, v in counts.items()]
    # sorted() is stable, so equal counts keep first-seen order.
    ranked = sorted(ranked, key=lambda r: r.count, reverse=True)
    return tuple(ranked)
