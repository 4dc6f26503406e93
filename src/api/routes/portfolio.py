"""Portfolio API routes."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends

from src.api.deps import get_portfolio_service
from src.api.errors import APIError
from src.core.portfolio import (
    Allocation,
    HoldingWithMetrics,
    PerformanceReport,
    PortfolioService,
    PortfolioSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/holdings", response_model=List[HoldingWithMetrics])
def list_holdings(service: PortfolioService = Depends(get_portfolio_service)):
    """List all holdings with value and gain/loss."""
    try:
        return service.get_holdings()
    except Exception as e:
        logger.exception(f"Error fetching holdings: {e}")
        raise APIError("Failed to fetch portfolio holdings")


@router.get("/allocation", response_model=Allocation)
def get_allocation(service: PortfolioService = Depends(get_portfolio_service)):
    """Portfolio value broken down by sector and market cap."""
    try:
        return service.get_allocation()
    except Exception as e:
        logger.exception(f"Error calculating allocation: {e}")
        raise APIError("Failed to calculate portfolio allocation")


@router.get("/performance", response_model=PerformanceReport)
def get_performance(service: PortfolioService = Depends(get_portfolio_service)):
    """Sample performance timeline against Nifty 50 and gold.

    The history is generated on every call and is not market data.
    """
    try:
        return service.get_performance()
    except Exception as e:
        logger.exception(f"Error fetching performance data: {e}")
        raise APIError("Failed to fetch performance data")


@router.get("/summary", response_model=PortfolioSummary)
def get_summary(service: PortfolioService = Depends(get_portfolio_service)):
    """Totals, best/worst performers, diversification and risk level."""
    try:
        return service.get_summary()
    except Exception as e:
        logger.exception(f"Error calculating summary: {e}")
        raise APIError("Failed to calculate portfolio summary")
