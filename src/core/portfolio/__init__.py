"""Portfolio holdings and analytics."""

from .models import (
    Allocation,
    AllocationBucket,
    Holding,
    HoldingWithMetrics,
    MarketCapTier,
    PerformancePoint,
    PerformanceReport,
    Performer,
    PortfolioSummary,
    RiskLevel,
    TimeRange,
)
from .calculations import EmptyPortfolioError, PortfolioError
from .repository import HoldingRepository
from .performance import PerformanceGenerator
from .service import PortfolioService

__all__ = [
    "Allocation",
    "AllocationBucket",
    "Holding",
    "HoldingWithMetrics",
    "MarketCapTier",
    "PerformancePoint",
    "PerformanceReport",
    "Performer",
    "PortfolioSummary",
    "RiskLevel",
    "TimeRange",
    "EmptyPortfolioError",
    "PortfolioError",
    "HoldingRepository",
    "PerformanceGenerator",
    "PortfolioService",
]
