"""FastAPI dependencies."""

from __future__ import annotations

from functools import lru_cache

from src.config import get_settings
from src.core.portfolio import HoldingRepository, PerformanceGenerator, PortfolioService


@lru_cache
def get_repository() -> HoldingRepository:
    """Shared repository over the sample holdings."""
    return HoldingRepository()


def get_performance_generator() -> PerformanceGenerator:
    """Performance generator for a request, seeded from settings if configured.

    Built per request so a configured seed gives the same timeline every time.
    """
    return PerformanceGenerator.from_seed(get_settings().performance_seed)


def get_portfolio_service() -> PortfolioService:
    """Portfolio service for a request."""
    return PortfolioService(
        repository=get_repository(),
        performance=get_performance_generator(),
    )
