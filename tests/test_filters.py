"""Tests for dashboard search, sort and date-range filters."""

from datetime import date
from unittest.mock import patch

import pytest

from src.core.portfolio.filters import (
    SortConfig,
    filter_holdings,
    filter_timeline,
    search_holdings,
    sort_holdings,
)
from src.core.portfolio.models import TimeRange

HOLDINGS = [
    {"symbol": "INFY", "name": "Infosys Limited", "value": 201075.0, "gainLoss": 21075.0},
    {"symbol": "HDFCBANK", "name": "HDFC Bank Limited", "value": 126424.0, "gainLoss": -5576.0},
    {"symbol": "AXISBANK", "name": "Axis Bank Limited", "value": 94986.0, "gainLoss": 6786.0},
    {"symbol": "TCS", "name": "Tata Consultancy Services", "value": 258768.75, "gainLoss": 18768.75},
]

TODAY = date(2025, 6, 15)

TIMELINE = [
    {"date": "2025-06-15", "portfolio": 5},
    {"date": "2024-06-15", "portfolio": 1},
    {"date": "2025-05-20", "portfolio": 4},
    {"date": "2025-03-17", "portfolio": 3},
    {"date": "2024-12-15", "portfolio": 2},
]


def symbols(rows):
    return [r["symbol"] for r in rows]


class TestSearchHoldings:
    """Tests for holding search."""

    def test_matches_symbol(self):
        assert symbols(search_holdings(HOLDINGS, "tcs")) == ["TCS"]

    def test_matches_name_case_insensitively(self):
        assert symbols(search_holdings(HOLDINGS, "BANK")) == ["HDFCBANK", "AXISBANK"]
        assert symbols(search_holdings(HOLDINGS, "consultancy")) == ["TCS"]

    def test_empty_term_keeps_everything(self):
        assert symbols(search_holdings(HOLDINGS, "")) == symbols(HOLDINGS)

    def test_no_match(self):
        assert search_holdings(HOLDINGS, "reliance") == []


class TestSortHoldings:
    """Tests for holding sort."""

    def test_no_key_keeps_order(self):
        assert symbols(sort_holdings(HOLDINGS, SortConfig())) == symbols(HOLDINGS)

    def test_ascending_by_number(self):
        rows = sort_holdings(HOLDINGS, SortConfig(key="gainLoss"))
        assert symbols(rows) == ["HDFCBANK", "AXISBANK", "TCS", "INFY"]

    def test_descending_by_number(self):
        rows = sort_holdings(HOLDINGS, SortConfig(key="value", direction="desc"))
        assert symbols(rows) == ["TCS", "INFY", "HDFCBANK", "AXISBANK"]

    def test_by_symbol(self):
        rows = sort_holdings(HOLDINGS, SortConfig(key="symbol"))
        assert symbols(rows) == ["AXISBANK", "HDFCBANK", "INFY", "TCS"]

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError, match="Cannot sort by 'bogus'"):
            sort_holdings(HOLDINGS, SortConfig(key="bogus"))

    def test_search_then_sort(self):
        rows = filter_holdings(HOLDINGS, "bank", SortConfig(key="value", direction="desc"))
        assert symbols(rows) == ["HDFCBANK", "AXISBANK"]


class TestSortConfigToggle:
    """Tests for column-header click behaviour."""

    def test_first_click_sorts_ascending(self):
        assert SortConfig().toggle("value") == SortConfig(key="value", direction="asc")

    def test_second_click_sorts_descending(self):
        config = SortConfig().toggle("value").toggle("value")
        assert config == SortConfig(key="value", direction="desc")

    def test_third_click_back_to_ascending(self):
        config = SortConfig(key="value", direction="desc").toggle("value")
        assert config.direction == "asc"

    def test_other_column_resets_to_ascending(self):
        config = SortConfig(key="value", direction="desc").toggle("symbol")
        assert config == SortConfig(key="symbol", direction="asc")


class TestFilterTimeline:
    """Tests for the performance date-range filter."""

    def values(self, points):
        return [p["portfolio"] for p in points]

    def test_all_keeps_everything_sorted(self):
        points = filter_timeline(TIMELINE, TimeRange.ALL, today=TODAY)
        assert self.values(points) == [1, 2, 3, 4, 5]

    def test_one_month(self):
        points = filter_timeline(TIMELINE, TimeRange.ONE_MONTH, today=TODAY)
        assert self.values(points) == [4, 5]

    def test_three_months_is_inclusive(self):
        # 2025-03-17 is exactly 90 days before TODAY
        points = filter_timeline(TIMELINE, "3M", today=TODAY)
        assert self.values(points) == [3, 4, 5]

    def test_one_year(self):
        # 2024-06-15 is 365 days before TODAY
        points = filter_timeline(TIMELINE, TimeRange.ONE_YEAR, today=TODAY)
        assert self.values(points) == [1, 2, 3, 4, 5]

    def test_accepts_date_objects(self):
        timeline = [{"date": date(2025, 6, 1), "portfolio": 1}]
        assert self.values(filter_timeline(timeline, "1M", today=TODAY)) == [1]

    def test_empty_window(self):
        old = [{"date": "2020-01-01", "portfolio": 1}]
        assert filter_timeline(old, TimeRange.ONE_MONTH, today=TODAY) == []

    def test_unknown_range_raises(self):
        with pytest.raises(ValueError):
            filter_timeline(TIMELINE, "5Y", today=TODAY)

    def test_defaults_to_utc_today(self):
        with patch("src.core.portfolio.filters.utc_today", return_value=TODAY):
            points = filter_timeline(TIMELINE, TimeRange.ONE_MONTH)

        assert self.values(points) == [4, 5]
