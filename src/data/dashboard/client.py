"""HTTP client that loads all dashboard views from a running API."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from src.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# View name -> path under /api/portfolio
VIEW_PATHS = {
    "holdings": "holdings",
    "allocation": "allocation",
    "performance": "performance",
    "summary": "summary",
}


class DashboardFetchError(Exception):
    """Raised when any dashboard view cannot be loaded."""


@dataclass
class DashboardData:
    """Raw JSON of the four dashboard views."""

    holdings: List[Dict[str, Any]] = field(default_factory=list)
    allocation: Dict[str, Any] = field(default_factory=dict)
    performance: Dict[str, Any] = field(default_factory=dict)
    summary: Dict[str, Any] = field(default_factory=dict)


class DashboardClient:
    """Fetches the dashboard views in parallel."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize client.

        Args:
            base_url: API root, e.g. http://localhost:8000. Defaults to settings.
            timeout: Per-request timeout in seconds. Defaults to settings.
            session: HTTP session to reuse.
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout or settings.request_timeout_seconds
        self.session = session or requests.Session()

    def _url(self, view: str) -> str:
        return f"{self.base_url}/api/portfolio/{VIEW_PATHS[view]}"

    def fetch_view(self, view: str) -> Any:
        """Fetch one view's JSON.

        Raises:
            DashboardFetchError: On network errors, a non-2xx response, or a
                body that is not JSON.
        """
        url = self._url(view)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DashboardFetchError(f"Could not reach {url}: {e}") from e

        if not response.ok:
            logger.warning(f"GET {url} returned {response.status_code}")
            raise DashboardFetchError("Network response was not ok")

        try:
            return response.json()
        except ValueError as e:
            raise DashboardFetchError(f"Invalid JSON from {url}") from e

    def fetch_all(self) -> DashboardData:
        """Fetch all four views concurrently; fail if any one fails."""
        with ThreadPoolExecutor(max_workers=len(VIEW_PATHS), thread_name_prefix="dashboard") as executor:
            futures = {view: executor.submit(self.fetch_view, view) for view in VIEW_PATHS}
            results = {view: future.result() for view, future in futures.items()}

        logger.debug(f"Loaded {len(results['holdings'])} holdings from {self.base_url}")
        return DashboardData(**results)
