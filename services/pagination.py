"""
Pagination engine for catalog list endpoints.

Turns a requested page number and a total item count into a bounded page
window. The last page is floored at 1, so an empty table yields page 1 with
offset 0 and no navigation links instead of a page 0 / negative offset.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from repositories.base import BaseRepository

logger = logging.getLogger("catalog.pagination")

PAGE_SIZE = 10


@dataclass(frozen=True)
class PageWindow:
    """A clamped page plus the data needed to fetch it and link around it."""

    page: int
    offset: int
    last_page: int
    page_size: int
    total_count: int

    @property
    def has_next(self) -> bool:
        return self.page < self.last_page

    @property
    def has_prev(self) -> bool:
        return self.page > 1


def parse_page_number(raw: Optional[Any]) -> int:
    """Parse a query-string page number; absent or non-numeric means 1."""
    if raw is None:
        return 1
    try:
        page = int(str(raw).strip())
    except ValueError:
        return 1
    return page if page != 0 else 1


def compute_window(
    requested_page: int, total_count: int, page_size: int = PAGE_SIZE
) -> PageWindow:
    """Clamp ``requested_page`` into ``[1, last_page]`` and derive the offset.

    Args:
        requested_page: 1-based page number, any integer
        total_count: number of rows available, >= 0
        page_size: rows per page, > 0

    Returns:
        PageWindow with ``offset = (page - 1) * page_size``
    """
    if total_count < 0:
        raise ValueError("total_count must be non-negative")
    if page_size <= 0:
        raise ValueError("page_size must be positive")

    last_page = max(1, math.ceil(total_count / page_size))
    page = min(max(requested_page, 1), last_page)
    return PageWindow(
        page=page,
        offset=(page - 1) * page_size,
        last_page=last_page,
        page_size=page_size,
        total_count=total_count,
    )


def build_links(base_path: str, window: PageWindow) -> Dict[str, str]:
    """Navigation links relative to ``base_path`` (e.g. ``/recipes``)."""
    links: Dict[str, str] = {}
    if window.has_next:
        links["nextPage"] = f"{base_path}?page={window.page + 1}"
        links["lastPage"] = f"{base_path}?page={window.last_page}"
    if window.has_prev:
        links["prevPage"] = f"{base_path}?page={window.page - 1}"
        links["firstPage"] = f"{base_path}?page=1"
    return links


class PaginationService:
    """Counts and fetches one page of rows from a catalog repository."""

    def __init__(self, repository: BaseRepository, page_size: int = PAGE_SIZE):
        self.repository = repository
        self.page_size = page_size

    def fetch(self, requested_page: int) -> Tuple[PageWindow, List[Any]]:
        total = self.repository.count()
        window = compute_window(requested_page, total, self.page_size)
        if total == 0:
            return window, []

        rows = self.repository.get_page(window.offset, window.page_size)
        logger.debug(
            f"page_fetched table={self.repository.model.__tablename__} "
            f"page={window.page} rows={len(rows)} total={total}"
        )
        return window, rows
