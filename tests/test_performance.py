"""Tests for the sample performance generator."""

import random
from datetime import date
from unittest.mock import Mock

import pytest

from src.core.portfolio.performance import (
    CURRENT_GOLD,
    CURRENT_NIFTY50,
    PerformanceGenerator,
    months_before,
)
from src.core.portfolio.repository import HoldingRepository

TODAY = date(2025, 6, 15)


@pytest.fixture
def holdings():
    return HoldingRepository().get_all()


def make_generator(random_value=0.5):
    rng = Mock()
    rng.random.return_value = random_value
    return PerformanceGenerator(rng=rng, today=lambda: TODAY)


class TestMonthsBefore:
    """Tests for calendar month arithmetic."""

    def test_same_day_of_month(self):
        assert months_before(date(2025, 6, 15), 1) == date(2025, 5, 15)

    def test_crosses_year(self):
        assert months_before(date(2025, 1, 15), 12) == date(2024, 1, 15)
        assert months_before(date(2025, 1, 31), 3) == date(2024, 10, 31)

    def test_clamps_to_month_end(self):
        assert months_before(date(2024, 3, 31), 1) == date(2024, 2, 29)
        assert months_before(date(2024, 5, 31), 6) == date(2023, 11, 30)


class TestPerformanceGenerator:
    """Tests for PerformanceGenerator."""

    def test_timeline_dates(self, holdings):
        """Should produce 12, 6, 3 and 1 months ago, then today."""
        report = make_generator().generate(holdings)

        assert [p.date for p in report.timeline] == [
            date(2024, 6, 15),
            date(2024, 12, 15),
            date(2025, 3, 15),
            date(2025, 5, 15),
            TODAY,
        ]

    def test_portfolio_values_scale_current_value(self, holdings):
        report = make_generator().generate(holdings)

        # Current value of the sample portfolio is 2,006,087.75
        assert [p.portfolio for p in report.timeline] == [
            1504566,  # x 0.75
            1705175,  # x 0.85
            1805479,  # x 0.90
            1905783,  # x 0.95
            2006088,
        ]

    def test_benchmarks_at_midpoint_jitter(self, holdings):
        """A random draw of 0.5 gives exactly the benchmark base."""
        report = make_generator(0.5).generate(holdings)

        assert [p.nifty50 for p in report.timeline[:4]] == [18000, 19000, 20000, 21000]
        assert [p.gold for p in report.timeline[:4]] == [58000, 60000, 61000, 62000]

    def test_benchmarks_at_low_jitter(self, holdings):
        report = make_generator(0.0).generate(holdings)

        assert report.timeline[0].nifty50 == 17100
        assert report.timeline[0].gold == 55100

    def test_latest_point_is_fixed(self, holdings):
        report = make_generator(0.0).generate(holdings)

        latest = report.timeline[-1]
        assert latest.nifty50 == CURRENT_NIFTY50
        assert latest.gold == CURRENT_GOLD

    def test_jitter_stays_within_five_percent(self, holdings):
        generator = PerformanceGenerator(rng=random.Random(), today=lambda: TODAY)

        for _ in range(20):
            point = generator.generate(holdings).timeline[0]
            assert 17100 <= point.nifty50 <= 18900
            assert 55100 <= point.gold <= 60900

    def test_returns_table(self, holdings):
        report = make_generator().generate(holdings)

        assert report.returns["portfolio"] == {"1month": 5.3, "3months": 11.1, "1year": 25.7}
        assert report.returns["nifty50"] == {"1month": 4.8, "3months": 9.2, "1year": 18.4}
        assert report.returns["gold"] == {"1month": 1.5, "3months": 6.1, "1year": 12.9}

    def test_marked_as_sample(self, holdings):
        assert make_generator().generate(holdings).sample is True

    def test_seed_makes_timeline_reproducible(self, holdings):
        first = PerformanceGenerator.from_seed(42).generate(holdings)
        second = PerformanceGenerator.from_seed(42).generate(holdings)

        assert first.timeline == second.timeline

    def test_serializes_iso_dates(self, holdings):
        data = make_generator().generate(holdings).model_dump(mode="json", by_alias=True)

        assert data["timeline"][0] == {
            "date": "2024-06-15",
            "portfolio": 1504566,
            "nifty50": 18000,
            "gold": 58000,
        }
        assert data["sample"] is True
