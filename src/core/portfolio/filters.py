"""Search, sort and date-range filters applied to fetched portfolio views.

These mirror what the web dashboard does in the browser so the terminal
dashboard shows the same rows for the same inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

from src.core.portfolio.models import TimeRange
from src.core.portfolio.performance import utc_today

RANGE_DAYS: Dict[TimeRange, int] = {
    TimeRange.ONE_MONTH: 30,
    TimeRange.THREE_MONTHS: 90,
    TimeRange.ONE_YEAR: 365,
}

# Holding columns the table can sort by (wire names)
SORTABLE_FIELDS = (
    "symbol",
    "name",
    "quantity",
    "avgPrice",
    "currentPrice",
    "value",
    "gainLoss",
    "gainLossPercent",
)


@dataclass(frozen=True)
class SortConfig:
    """Active sort column and direction."""

    key: Optional[str] = None
    direction: str = "asc"

    def toggle(self, key: str) -> "SortConfig":
        """Sort config after clicking ``key``'s column header.

        Clicking the active ascending column flips it to descending; any
        other click sorts ascending.
        """
        if self.key == key and self.direction == "asc":
            return SortConfig(key=key, direction="desc")
        return SortConfig(key=key, direction="asc")


def search_holdings(holdings: Sequence[Dict[str, Any]], term: str) -> List[Dict[str, Any]]:
    """Keep holdings whose symbol or name contains ``term`` (case-insensitive)."""
    needle = term.lower()
    return [
        h for h in holdings
        if needle in h["symbol"].lower() or needle in h["name"].lower()
    ]


def sort_holdings(
    holdings: Sequence[Dict[str, Any]], config: SortConfig
) -> List[Dict[str, Any]]:
    """Sort holdings by the configured key; no key keeps the input order.

    Raises:
        ValueError: If the key is not a sortable column.
    """
    if config.key is None:
        return list(holdings)
    if config.key not in SORTABLE_FIELDS:
        raise ValueError(
            f"Cannot sort by '{config.key}'. Choose one of: {', '.join(SORTABLE_FIELDS)}"
        )
    return sorted(
        holdings,
        key=lambda h: h[config.key],
        reverse=config.direction == "desc",
    )


def filter_holdings(
    holdings: Sequence[Dict[str, Any]],
    term: str = "",
    config: Optional[SortConfig] = None,
) -> List[Dict[str, Any]]:
    """Apply search then sort, as the holdings table does."""
    filtered = search_holdings(holdings, term)
    return sort_holdings(filtered, config or SortConfig())


def _as_date(value: Union[str, date]) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def filter_timeline(
    timeline: Sequence[Dict[str, Any]],
    time_range: Union[TimeRange, str] = TimeRange.ALL,
    today: Optional[date] = None,
) -> List[Dict[str, Any]]:
    """Keep timeline points inside the range window, sorted oldest first.

    A point is inside the window when it is at most the window's number of
    days old, counted from UTC today by default. ``ALL`` keeps every point.
    """
    time_range = TimeRange(time_range)
    today = today or utc_today()

    points = list(timeline)
    if time_range != TimeRange.ALL:
        days = RANGE_DAYS[time_range]
        points = [p for p in points if (today - _as_date(p["date"])).days <= days]

    return sorted(points, key=lambda p: _as_date(p["date"]))
