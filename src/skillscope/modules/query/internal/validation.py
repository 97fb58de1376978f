"""Request normalization shared by every interface."""

from __future__ import annotations

from datetime import timedelta
from typing import Iterable, List

from skillscope.shared.errors import InvalidRequestError

MAX_QUERY_LENGTH = 500
SEARCH_LIMIT = (1, 50)
TRENDING_LIMIT = (1, 100)
COMPARE_SIZE = (2, 5)

WINDOWS = {
    "24h": timedelta(hours=24),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}
SORTS = ("new", "mentions", "hot")


def clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def normalize_query(q: str | None) -> str:
    query = (q or "").strip()
    if not query:
        raise InvalidRequestError('Query parameter "q" is required')
    if len(query) > MAX_QUERY_LENGTH:
        raise InvalidRequestError(f"Query too long (max {MAX_QUERY_LENGTH} characters)")
    return query


def normalize_ids(ids: Iterable[str]) -> List[str]:
    """Trimmed, non-empty, order-preserving unique ids within the compare bounds."""
    unique = list(dict.fromkeys(i.strip() for i in ids if i and i.strip()))
    low, high = COMPARE_SIZE
    if not low <= len(unique) <= high:
        raise InvalidRequestError(f"Provide between {low} and {high} skill IDs")
    return unique


def split_ids(raw: str | None) -> List[str]:
    if not raw:
        raise InvalidRequestError('Query parameter "ids" is required (comma-separated)')
    return raw.split(",")


def validate_window(window: str) -> timedelta:
    try:
        return WINDOWS[window]
    except KeyError:
        raise InvalidRequestError("Invalid window. Use 24h, 7d, or 30d") from None


def validate_sort(sort: str) -> str:
    if sort not in SORTS:
        raise InvalidRequestError("Invalid sort. Use new, mentions, or hot")
    return sort


__all__ = [
    "MAX_QUERY_LENGTH",
    "WINDOWS",
    "SORTS",
    "clamp",
    "normalize_query",
    "normalize_ids",
    "split_ids",
    "validate_window",
    "validate_sort",
]
