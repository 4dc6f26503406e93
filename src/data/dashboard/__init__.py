"""Remote access to the dashboard API."""

from .client import DashboardClient, DashboardData, DashboardFetchError

__all__ = ["DashboardClient", "DashboardData", "DashboardFetchError"]
