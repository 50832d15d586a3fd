"""
Tests for the pagination engine.

Covers:
- clamping of any requested page into [1, last_page]
- the empty-table rule (last page floored at 1, no row fetch)
- navigation links
- windowed fetches against a real catalog store
"""

import math
from unittest.mock import Mock

import pytest

from repositories import RecipeRepository
from services.pagination import (
    PAGE_SIZE,
    PaginationService,
    build_links,
    compute_window,
    parse_page_number,
)
from test_fixtures import recipe_payload


@pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 25, 100, 101])
@pytest.mark.parametrize("requested", [-5, 0, 1, 2, 3, 10, 11, 1000])
def test_window_is_always_bounded(total, requested):
    window = compute_window(requested, total)

    upper = max(1, math.ceil(total / PAGE_SIZE))
    assert 1 <= window.page <= upper
    assert window.offset == (window.page - 1) * PAGE_SIZE
    assert window.offset >= 0
    assert window.last_page == upper


def test_scenario_last_page():
    window = compute_window(3, 25)

    assert window.page == 3
    assert window.last_page == 3
    assert window.offset == 20
    assert build_links("/recipes", window) == {
        "prevPage": "/recipes?page=2",
        "firstPage": "/recipes?page=1",
    }


def test_scenario_page_past_end_clamps():
    assert compute_window(10, 25) == compute_window(3, 25)


def test_first_page_links_forward_only():
    window = compute_window(1, 25)
    assert build_links("/reviews", window) == {
        "nextPage": "/reviews?page=2",
        "lastPage": "/reviews?page=3",
    }


def test_middle_page_links_both_ways():
    links = build_links("/recipes", compute_window(2, 25))
    assert set(links) == {"nextPage", "lastPage", "prevPage", "firstPage"}


def test_empty_total_normalizes_to_page_one():
    window = compute_window(4, 0)

    assert window.page == 1
    assert window.offset == 0
    assert window.last_page == 1
    assert build_links("/recipes", window) == {}


def test_negative_total_rejected():
    with pytest.raises(ValueError):
        compute_window(1, -1)


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 1), ("", 1), ("abc", 1), ("0", 1), ("3", 3), (" 7 ", 7), ("-2", -2), ("2.5", 1)],
)
def test_parse_page_number(raw, expected):
    assert parse_page_number(raw) == expected


def test_service_skips_fetch_for_empty_table():
    repo = Mock()
    repo.count.return_value = 0

    window, rows = PaginationService(repo).fetch(5)

    assert rows == []
    assert window.page == 1
    repo.get_page.assert_not_called()


def test_service_fetches_last_partial_page(db_session):
    repo = RecipeRepository(db_session)
    for i in range(25):
        repo.create(recipe_payload(title=f"Recipe {i + 1}"))

    window, rows = PaginationService(repo).fetch(3)

    assert window.page == 3
    assert [r.title for r in rows] == [f"Recipe {i}" for i in range(21, 26)]
    assert rows == sorted(rows, key=lambda r: r.id)
