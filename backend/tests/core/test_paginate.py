"""Paginator: tests for the pure page-window computation.

Tests cover:
    - page < 1 rejected with "page must be >= 1"
    - first, middle and last page sizes for 45 items
    - page past the end rejected when total > 0
    - total == 0 never out of range
    - items never exceed size or total
"""

import pytest

from app.core.domain_types import PAGE_SIZE, Character
from app.core.errors import InvalidArgumentError
from app.core.paginate import paginate, validate_page


def _chars(n: int) -> list[Character]:
    return [Character(id=str(i), name=f"C{i}") for i in range(n)]


# ─── validate_page ───────────────────────────────────────────────

@pytest.mark.parametrize("page", [0, -1, -100])
def test_validate_page_rejects_below_one(page):
    with pytest.raises(InvalidArgumentError) as exc_info:
        validate_page(page)
    assert exc_info.value.message == "page must be >= 1"
    assert exc_info.value.http_status == 400


def test_validate_page_accepts_one():
    validate_page(1)


# ─── paginate ────────────────────────────────────────────────────

def test_page_size_is_twenty():
    assert PAGE_SIZE == 20


def test_first_page_of_45_has_20_items():
    page = paginate(_chars(45), 1)
    assert page.page == 1
    assert page.size == PAGE_SIZE
    assert page.total == 45
    assert [c.id for c in page.items] == [str(i) for i in range(20)]


def test_last_page_of_45_has_5_items():
    page = paginate(_chars(45), 3)
    assert page.total == 45
    assert [c.id for c in page.items] == [str(i) for i in range(40, 45)]


def test_page_past_end_is_out_of_range():
    with pytest.raises(InvalidArgumentError) as exc_info:
        paginate(_chars(45), 4)
    assert exc_info.value.message == "page is out of range"


def test_exact_multiple_has_no_trailing_empty_page():
    chars = _chars(40)
    assert len(paginate(chars, 2).items) == 20
    with pytest.raises(InvalidArgumentError):
        paginate(chars, 3)


def test_empty_set_page_one_is_empty_page():
    page = paginate([], 1)
    assert page.total == 0
    assert page.items == ()
    assert page.total_pages == 0


def test_empty_set_is_never_out_of_range():
    page = paginate([], 7)
    assert page.page == 7
    assert page.total == 0
    assert page.items == ()


def test_empty_set_still_rejects_page_zero():
    with pytest.raises(InvalidArgumentError):
        paginate([], 0)


@pytest.mark.parametrize("total", [1, 19, 20, 21, 59, 60, 61])
def test_items_bounded_by_size_and_total(total):
    chars = _chars(total)
    last = (total - 1) // PAGE_SIZE + 1
    for n in range(1, last + 1):
        page = paginate(chars, n)
        assert len(page.items) <= PAGE_SIZE
        assert len(page.items) <= total
        assert page.total == total
    assert page.total_pages == last


def test_custom_size():
    page = paginate(_chars(7), 2, size=3)
    assert page.size == 3
    assert [c.id for c in page.items] == ["3", "4", "5"]
