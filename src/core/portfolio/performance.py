"""Sample performance timeline against Nifty 50 and gold benchmarks.

None of this comes from a market feed. Historical points are scaled from the
current portfolio value and benchmark values are jittered, so two calls give
different timelines unless the generator is seeded.
"""

from __future__ import annotations

import calendar
import logging
import random
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, Dict, List, Optional, Sequence

from src.core.portfolio.calculations import round_half_up
from src.core.portfolio.models import Holding, PerformancePoint, PerformanceReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryAnchor:
    """How to synthesise one historical point."""

    months_ago: int
    value_multiplier: float
    nifty_base: float
    gold_base: float


HISTORY_ANCHORS = (
    HistoryAnchor(months_ago=12, value_multiplier=0.75, nifty_base=18000, gold_base=58000),
    HistoryAnchor(months_ago=6, value_multiplier=0.85, nifty_base=19000, gold_base=60000),
    HistoryAnchor(months_ago=3, value_multiplier=0.90, nifty_base=20000, gold_base=61000),
    HistoryAnchor(months_ago=1, value_multiplier=0.95, nifty_base=21000, gold_base=62000),
)

# Latest benchmark levels
CURRENT_NIFTY50 = 23500
CURRENT_GOLD = 68000

# Benchmarks land within +/- 5% of their base
JITTER_FLOOR = 0.95
JITTER_SPAN = 0.1

TRAILING_RETURNS: Dict[str, Dict[str, float]] = {
    "portfolio": {"1month": 5.3, "3months": 11.1, "1year": 25.7},
    "nifty50": {"1month": 4.8, "3months": 9.2, "1year": 18.4},
    "gold": {"1month": 1.5, "3months": 6.1, "1year": 12.9},
}


def utc_today() -> date:
    """Current date in UTC, the timezone timeline dates are stamped in."""
    return datetime.now(timezone.utc).date()


def months_before(day: date, months: int) -> date:
    """Same day-of-month ``months`` earlier, clamped to the month's end."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


class PerformanceGenerator:
    """Builds the sample performance report for a set of holdings."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        today: Optional[Callable[[], date]] = None,
        anchors: Sequence[HistoryAnchor] = HISTORY_ANCHORS,
    ):
        """Initialize generator.

        Args:
            rng: Random source for benchmark jitter. Defaults to an unseeded one.
            today: Clock returning the current date. Defaults to UTC today.
            anchors: Historical points to generate, oldest first.
        """
        self.rng = rng or random.Random()
        self.today = today or utc_today
        self.anchors = tuple(anchors)

    @classmethod
    def from_seed(cls, seed: Optional[int]) -> "PerformanceGenerator":
        """Create a generator; a non-None seed makes timelines reproducible."""
        if seed is not None:
            logger.debug(f"Performance timeline seeded with {seed}")
        return cls(rng=random.Random(seed))

    def _jitter(self, base: float) -> int:
        factor = JITTER_FLOOR + self.rng.random() * JITTER_SPAN
        return int(round_half_up(base * factor))

    def build_timeline(self, holdings: Sequence[Holding]) -> List[PerformancePoint]:
        """Generate timeline points, oldest first, ending today."""
        current_value = sum(h.market_value for h in holdings)
        today = self.today()

        timeline = [
            PerformancePoint(
                date=months_before(today, anchor.months_ago),
                portfolio=int(round_half_up(current_value * anchor.value_multiplier)),
                nifty50=self._jitter(anchor.nifty_base),
                gold=self._jitter(anchor.gold_base),
            )
            for anchor in self.anchors
        ]
        timeline.append(
            PerformancePoint(
                date=today,
                portfolio=int(round_half_up(current_value)),
                nifty50=CURRENT_NIFTY50,
                gold=CURRENT_GOLD,
            )
        )
        return timeline

    def generate(self, holdings: Sequence[Holding]) -> PerformanceReport:
        """Generate the full performance report."""
        return PerformanceReport(
            timeline=self.build_timeline(holdings),
            returns={series: dict(periods) for series, periods in TRAILING_RETURNS.items()},
            sample=True,
        )
