from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Union


@dataclass(frozen=True)
class RepoAggregate:
    repo: str
    count: int
    url: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FetchTicket:
    number: int
    query: str


# ── Search state variants ────────────────────────────────────


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    query: str


@dataclass(frozen=True)
class Loaded:
    query: str
    results: tuple[RepoAggregate, ...]


@dataclass(frozen=True)
class Failed:
    query: str
    message: str


SearchState = Union[Idle, Loading, Loaded, Failed]
