"""Pydantic schemas for portfolio analytics.

Attributes are snake_case in Python and camelCase on the wire
(``avg_price`` <-> ``avgPrice``), so every schema shares ``CamelModel``'s
config.
"""

import datetime
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class MarketCapTier(str, Enum):
    """Market capitalisation tiers."""

    LARGE = "Large"
    MID = "Mid"
    SMALL = "Small"


class RiskLevel(str, Enum):
    """Portfolio risk classification."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


class TimeRange(str, Enum):
    """Date windows for the performance timeline."""

    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    ONE_YEAR = "1Y"
    ALL = "ALL"


class CamelModel(BaseModel):
    """Base schema serialized with camelCase field names."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class Holding(CamelModel):
    """One stock position."""

    symbol: str = Field(..., min_length=1, max_length=20)
    name: str
    quantity: int = Field(..., gt=0)
    avg_price: float = Field(..., gt=0, description="Average purchase price per share")
    current_price: float = Field(..., gt=0)
    sector: str
    market_cap: MarketCapTier
    exchange: str

    @field_validator("symbol", mode="before")
    @classmethod
    def symbol_uppercase(cls, v):
        # Normalized before the length check so blank symbols are rejected
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def invested_value(self) -> float:
        """Amount paid for the position."""
        return self.quantity * self.avg_price

    @property
    def market_value(self) -> float:
        """Position value at the current price."""
        return self.quantity * self.current_price


class HoldingWithMetrics(Holding):
    """Holding with derived value and P&L."""

    value: float
    gain_loss: float
    gain_loss_percent: float


class AllocationBucket(CamelModel):
    """Value held in one sector or market-cap tier."""

    value: float
    percentage: float


class Allocation(CamelModel):
    """Portfolio value broken down by sector and market cap."""

    by_sector: Dict[str, AllocationBucket]
    by_market_cap: Dict[str, AllocationBucket]


class Performer(CamelModel):
    """Best or worst holding by gain percentage."""

    symbol: str
    name: str
    gain_percent: float


class PortfolioSummary(CamelModel):
    """Aggregate statistics across all holdings."""

    total_value: float
    total_invested: float
    total_gain_loss: float
    total_gain_loss_percent: float
    top_performer: Performer
    worst_performer: Performer
    diversification_score: float
    risk_level: RiskLevel


class PerformancePoint(CamelModel):
    """Portfolio and benchmark values on one date."""

    date: datetime.date
    portfolio: int
    nifty50: int
    gold: int


class PerformanceReport(CamelModel):
    """Performance timeline with trailing returns per series.

    The history is generated, not sourced from a market feed, so ``sample``
    is always true.
    """

    timeline: List[PerformancePoint]
    returns: Dict[str, Dict[str, float]]
    sample: bool = True
