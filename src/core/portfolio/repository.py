"""Read-only repository over the in-memory holding list."""

from __future__ import annotations

from typing import Iterable, List, Optional

from src.core.portfolio.models import Holding
from src.core.portfolio.sample_data import SAMPLE_HOLDINGS


class HoldingRepository:
    """Repository for looking up holdings.

    The holding set is fixed for the lifetime of the repository; there are
    no create, update or delete paths.
    """

    def __init__(self, holdings: Optional[Iterable[Holding]] = None):
        """Initialize repository.

        Args:
            holdings: Holdings to serve. Defaults to the sample portfolio.

        Raises:
            ValueError: If two holdings share a symbol.
        """
        if holdings is None:
            holdings = [Holding(**record) for record in SAMPLE_HOLDINGS]

        self._holdings: List[Holding] = []
        seen = set()
        for holding in holdings:
            if holding.symbol in seen:
                raise ValueError(f"Duplicate holding symbol: {holding.symbol}")
            seen.add(holding.symbol)
            self._holdings.append(holding)

    def get_all(self) -> List[Holding]:
        """Get all holdings in their original order."""
        return list(self._holdings)

    def get_by_symbol(self, symbol: str) -> Optional[Holding]:
        """Get a holding by symbol (case-insensitive)."""
        symbol = symbol.upper().strip()
        for holding in self._holdings:
            if holding.symbol == symbol:
                return holding
        return None

    def count(self) -> int:
        """Number of holdings."""
        return len(self._holdings)
