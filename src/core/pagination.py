"""Result pagination - Pure functions."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a result list.

    Attributes:
        items: Items on this page
        page: 1-based page number actually shown
        total_pages: Number of pages (0 for an empty list)
        total_count: Number of items across all pages
        display_start: 1-based index of the first item shown (0 if empty)
        display_end: 1-based index of the last item shown (0 if empty)
    """
    items: list[T]
    page: int
    total_pages: int
    total_count: int
    display_start: int
    display_end: int

    @property
    def can_go_prev(self) -> bool:
        return self.page > 1

    @property
    def can_go_next(self) -> bool:
        return self.page < self.total_pages


def paginate(items: list[T], page: int = 1, per_page: int = DEFAULT_PAGE_SIZE) -> Page[T]:
    """Slice a list into a page.

    Pure function. Out-of-range page numbers are clamped to [1, total_pages].

    Raises:
        ValueError: If per_page is not positive
    """
    if per_page <= 0:
        raise ValueError(f"per_page must be positive, got {per_page}")

    total_count = len(items)
    total_pages = math.ceil(total_count / per_page)
    current = max(1, min(page, total_pages or 1))

    start = (current - 1) * per_page
    end = min(start + per_page, total_count)

    return Page(
        items=items[start:end],
        page=current,
        total_pages=total_pages,
        total_count=total_count,
        display_start=start + 1 if total_count else 0,
        display_end=end,
    )
