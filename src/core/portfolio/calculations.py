"""Holding metrics, allocation and summary calculations."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Sequence

from src.core.portfolio.models import (
    Allocation,
    AllocationBucket,
    Holding,
    HoldingWithMetrics,
    Performer,
    PortfolioSummary,
    RiskLevel,
)

logger = logging.getLogger(__name__)

# Diversification: points per distinct sector, capped at MAX_DIVERSIFICATION
DIVERSIFICATION_PER_SECTOR = 1.2
MAX_DIVERSIFICATION = 10.0

# Mean absolute gain % above which the portfolio moves up a risk level
HIGH_RISK_THRESHOLD = 15.0
MODERATE_RISK_THRESHOLD = 8.0


class PortfolioError(Exception):
    """Base error for portfolio calculations."""


class EmptyPortfolioError(PortfolioError):
    """Raised when statistics need at least one holding."""


def round_half_up(value: float, places: int = 0) -> float:
    """Round with ties away from zero instead of Python's banker's rounding."""
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def calculate_holding_metrics(holding: Holding) -> HoldingWithMetrics:
    """Derive value, gain/loss and gain/loss % for a holding."""
    value = holding.market_value
    invested = holding.invested_value
    gain_loss = value - invested
    gain_loss_percent = gain_loss / invested * 100

    return HoldingWithMetrics(
        **holding.model_dump(),
        value=round_half_up(value, 2),
        gain_loss=round_half_up(gain_loss, 2),
        gain_loss_percent=round_half_up(gain_loss_percent, 2),
    )


def calculate_all_metrics(holdings: Sequence[Holding]) -> List[HoldingWithMetrics]:
    """Derive metrics for every holding, preserving order."""
    return [calculate_holding_metrics(h) for h in holdings]


def _group_allocation(
    holdings: Sequence[HoldingWithMetrics], key, total_value: float
) -> Dict[str, AllocationBucket]:
    """Sum holding values per group and express each as a % of the total."""
    totals: Dict[str, float] = {}
    for h in holdings:
        group = key(h)
        totals[group] = totals.get(group, 0.0) + h.value

    return {
        group: AllocationBucket(
            value=round_half_up(value, 2),
            percentage=round_half_up(value / total_value * 100, 1),
        )
        for group, value in totals.items()
    }


def calculate_allocation(holdings: Sequence[Holding]) -> Allocation:
    """Break portfolio value down by sector and by market-cap tier.

    Groups appear in the order their first holding appears. An empty
    portfolio yields empty breakdowns.
    """
    with_metrics = calculate_all_metrics(holdings)
    total_value = sum(h.value for h in with_metrics)

    if not with_metrics or total_value == 0:
        return Allocation(by_sector={}, by_market_cap={})

    return Allocation(
        by_sector=_group_allocation(with_metrics, lambda h: h.sector, total_value),
        by_market_cap=_group_allocation(
            with_metrics, lambda h: h.market_cap.value, total_value
        ),
    )


def calculate_diversification_score(holdings: Sequence[Holding]) -> float:
    """Score 0-10 based on the number of distinct sectors held."""
    sectors = {h.sector for h in holdings}
    score = min(MAX_DIVERSIFICATION, len(sectors) * DIVERSIFICATION_PER_SECTOR)
    return round_half_up(score, 1)


def classify_risk(holdings: Sequence[HoldingWithMetrics]) -> RiskLevel:
    """Classify risk by the mean absolute gain/loss % across holdings."""
    if not holdings:
        return RiskLevel.LOW

    avg_abs_change = sum(abs(h.gain_loss_percent) for h in holdings) / len(holdings)
    if avg_abs_change > HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if avg_abs_change > MODERATE_RISK_THRESHOLD:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def _performer(holding: HoldingWithMetrics) -> Performer:
    return Performer(
        symbol=holding.symbol,
        name=holding.name,
        gain_percent=holding.gain_loss_percent,
    )


def calculate_summary(holdings: Sequence[Holding]) -> PortfolioSummary:
    """Aggregate totals, best/worst performers, diversification and risk.

    Raises:
        EmptyPortfolioError: If there are no holdings.
    """
    if not holdings:
        raise EmptyPortfolioError("Cannot summarise an empty portfolio")

    with_metrics = calculate_all_metrics(holdings)
    total_value = sum(h.value for h in with_metrics)
    total_invested = sum(h.invested_value for h in with_metrics)
    total_gain_loss = total_value - total_invested
    total_gain_loss_percent = total_gain_loss / total_invested * 100

    # Stable sort: ties keep portfolio order
    by_performance = sorted(
        with_metrics, key=lambda h: h.gain_loss_percent, reverse=True
    )

    summary = PortfolioSummary(
        total_value=round_half_up(total_value, 2),
        total_invested=round_half_up(total_invested, 2),
        total_gain_loss=round_half_up(total_gain_loss, 2),
        total_gain_loss_percent=round_half_up(total_gain_loss_percent, 2),
        top_performer=_performer(by_performance[0]),
        worst_performer=_performer(by_performance[-1]),
        diversification_score=calculate_diversification_score(holdings),
        risk_level=classify_risk(with_metrics),
    )

    logger.debug(
        f"Summary over {len(holdings)} holdings: "
        f"value={summary.total_value}, risk={summary.risk_level.value}"
    )
    return summary
