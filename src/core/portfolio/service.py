"""Portfolio analytics service."""

from __future__ import annotations

import logging
from typing import List, Optional

from src.core.portfolio.calculations import (
    calculate_all_metrics,
    calculate_allocation,
    calculate_summary,
)
from src.core.portfolio.models import (
    Allocation,
    HoldingWithMetrics,
    PerformanceReport,
    PortfolioSummary,
)
from src.core.portfolio.performance import PerformanceGenerator
from src.core.portfolio.repository import HoldingRepository

logger = logging.getLogger(__name__)


class PortfolioService:
    """Derives the dashboard views from the holding repository."""

    def __init__(
        self,
        repository: Optional[HoldingRepository] = None,
        performance: Optional[PerformanceGenerator] = None,
    ):
        self.repository = repository or HoldingRepository()
        self.performance = performance or PerformanceGenerator()

    def get_holdings(self) -> List[HoldingWithMetrics]:
        """All holdings with value and gain/loss."""
        return calculate_all_metrics(self.repository.get_all())

    def get_allocation(self) -> Allocation:
        """Value breakdown by sector and market cap."""
        return calculate_allocation(self.repository.get_all())

    def get_performance(self) -> PerformanceReport:
        """Sample performance timeline and trailing returns."""
        return self.performance.generate(self.repository.get_all())

    def get_summary(self) -> PortfolioSummary:
        """Aggregate portfolio statistics."""
        return calculate_summary(self.repository.get_all())
