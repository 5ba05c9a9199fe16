"""Fixed-size paging over the ranked result set."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

from .config import PAGE_SIZE

T = TypeVar("T")


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(count / page_size))


def needs_pager(count: int, page_size: int = PAGE_SIZE) -> bool:
    """The pager is only shown once the results overflow a single page."""
    return count > page_size


def paginate(results: Sequence[T], page_index: int, page_size: int = PAGE_SIZE) -> list[T]:
    """Return the 1-based page ``page_index``, clamped to the bounds of ``results``."""
    start = max(page_index - 1, 0) * page_size
    end = max(page_index, 0) * page_size
    return list(results[start:end])


@dataclass
class PageState:
    current: int = 1
    page_size: int = PAGE_SIZE

    def reset(self) -> None:
        self.current = 1

    def clamp(self, total: int) -> None:
        self.current = min(max(self.current, 1), max(total, 1))

    def go_to(self, page: int, total: int) -> None:
        self.current = page
        self.clamp(total)

    def has_previous(self) -> bool:
        return self.current > 1

    def has_next(self, total: int) -> bool:
        return self.current < total

    def previous(self) -> bool:
        """Step back one page. Returns False at the first page."""
        if not self.has_previous():
            return False
        self.current -= 1
        return True

    def next(self, total: int) -> bool:
        if not self.has_next(total):
            return False
        self.current += 1
        return True
