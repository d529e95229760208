"""Unit tests for pagination helpers."""

import pytest

from xero_mcp.pagination import has_more_items, next_page_number, normalize_page, paged_result


class TestNormalizePage:

    @pytest.mark.parametrize("page,expected", [(None, 1), (0, 1), (-3, 1), (1, 1), (7, 7)])
    def test_normalize(self, page, expected):
        assert normalize_page(page) == expected


class TestHasMore:
    """Tests for the full-page heuristic."""

    def test_full_page(self):
        assert has_more_items(100) is True

    def test_short_page(self):
        assert has_more_items(99) is False

    def test_empty_page(self):
        assert has_more_items(0) is False

    def test_next_page(self):
        assert next_page_number(4, True) == 5
        assert next_page_number(4, False) is None


class TestPagedResult:

    def test_full_page_points_to_next(self):
        result = paged_result(list(range(100)), 2)

        assert result.count == 100
        assert result.has_more is True
        assert result.next_page == 3

    def test_last_page(self):
        result = paged_result(list(range(12)), 5)

        assert result.page == 5
        assert result.has_more is False
        assert result.next_page is None
