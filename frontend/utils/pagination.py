"""
Pagination for the records table.
"""
import math
from dataclasses import dataclass
from typing import Callable, MutableMapping, Sequence

PAGE_KEY = "current_page"
PAGE_SIZE_KEY = "page_size"


@dataclass(frozen=True)
class Page:
    """One page of records. ``end_index`` is exclusive."""
    records: list
    total_pages: int
    start_index: int
    end_index: int


def total_pages(count: int, page_size: int) -> int:
    """Number of pages for ``count`` items; 0 when there are none."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(count / page_size)


def paginate(records: Sequence, page_size: int, current_page: int) -> Page:
    """
    Slice ``records`` into the requested page.

    Args:
        records: Ordered records
        page_size: Records per page (> 0)
        current_page: 1-based page number

    Returns:
        Page with the slice and its bounds. A page past the end is empty.
    """
    if current_page < 1:
        raise ValueError(f"current_page must be >= 1, got {current_page}")
    pages = total_pages(len(records), page_size)
    start = min((current_page - 1) * page_size, len(records))
    end = min(start + page_size, len(records))
    return Page(
        records=list(records[start:end]),
        total_pages=pages,
        start_index=start,
        end_index=end,
    )


class Paginator:
    """
    Page cursor kept in a session mapping.

    ``count`` returns the current number of records; out-of-range
    navigation is rejected, never clamped.
    """

    def __init__(
        self,
        store: MutableMapping,
        count: Callable[[], int],
        page_size: int = 20,
    ):
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._store = store
        self._count = count
        store.setdefault(PAGE_SIZE_KEY, page_size)
        store.setdefault(PAGE_KEY, 1)

    @property
    def page_size(self) -> int:
        return self._store[PAGE_SIZE_KEY]

    @property
    def current_page(self) -> int:
        return self._store[PAGE_KEY]

    @property
    def total_pages(self) -> int:
        return total_pages(self._count(), self.page_size)

    def page(self, records: Sequence) -> Page:
        """The current page of ``records``."""
        return paginate(records, self.page_size, self.current_page)

    def go_to(self, page: int) -> bool:
        """Move to ``page``. Returns False (and changes nothing) when out of range."""
        if page < 1 or page > self.total_pages:
            return False
        self._store[PAGE_KEY] = page
        return True

    def next(self) -> bool:
        return self.go_to(self.current_page + 1)

    def previous(self) -> bool:
        return self.go_to(self.current_page - 1)

    def set_page_size(self, page_size: int) -> None:
        """Change the page size and go back to page 1."""
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._store.update({PAGE_SIZE_KEY: page_size, PAGE_KEY: 1})

    def reset(self) -> None:
        self._store[PAGE_KEY] = 1
