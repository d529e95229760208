"""Pagination helpers for Xero's page-numbered collections.

Xero pages hold at most 100 records and report no total, so a full page
is the only signal that another one may follow.
"""

from typing import List, Optional, TypeVar

from .constants import XERO_PAGE_SIZE
from .models import PagedResult

T = TypeVar("T")


def normalize_page(page: Optional[int]) -> int:
    """Return a 1-based page number, defaulting to the first page."""
    if not page or page < 1:
        return 1
    return page


def has_more_items(count: int, page_size: int = XERO_PAGE_SIZE) -> bool:
    return count >= page_size


def next_page_number(page: int, has_more: bool) -> Optional[int]:
    return page + 1 if has_more else None


def paged_result(items: List[T], page: int) -> PagedResult[T]:
    """Wrap one page of mapped records.

    Args:
        items: Mapped records from the page
        page: The 1-based page number that was requested

    Returns:
        PagedResult with the more-pages heuristic applied
    """
    more = has_more_items(len(items))
    return PagedResult(
        items=items,
        count=len(items),
        page=page,
        has_more=more,
        next_page=next_page_number(page, more),
    )
