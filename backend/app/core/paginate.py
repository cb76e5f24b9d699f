"""Paginator: computes the page window over a filtered result set.

Invariants:
    - page < 1 is always an InvalidArgumentError ("page must be >= 1")
    - from = min((page-1) * size, total); to = min(from + size, total)
    - from >= total with total != 0 is out of range
    - total == 0 is never out of range: an empty result set yields an empty page

Design Decisions:
    - Raises instead of returning an error dict: the engine propagates it unmodified
      and the global handler maps it to 400 (ADR: fail fast, boundary translates)
"""

from collections.abc import Sequence

from app.core.domain_types import PAGE_SIZE, Character, Page
from app.core.errors import InvalidArgumentError


def validate_page(page: int) -> None:
    if page < 1:
        raise InvalidArgumentError("page must be >= 1")


def paginate(
    characters: Sequence[Character], page: int, size: int = PAGE_SIZE,
) -> Page:
    """Slice one page out of the filtered set. Pure, no IO."""
    validate_page(page)
    total = len(characters)
    start = min((page - 1) * size, total)
    if start >= total and total != 0:
        raise InvalidArgumentError("page is out of range")
    end = min(start + size, total)
    return Page(
        page=page, size=size, total=total,
        items=tuple(characters[start:end]),
    )
