"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings

# ===========================================
# Product Branding
# ===========================================
PRODUCT_NAME = "Portfolio Analytics"
PRODUCT_TAGLINE = "Holdings, allocation and performance at a glance."
PRODUCT_VERSION = "1.0.0"
PRODUCT_DESCRIPTION = "Read-only analytics over a sample NSE stock portfolio."

# Brand Colors
BRAND_COLORS = {
    "primary_indigo": "#4F46E5",  # Page title, active range button
    "page_gray": "#F3F4F6",       # Page background
    "text_slate": "#374151",      # Section headers
    "muted_gray": "#6B7280",      # Card labels
    "gain_green": "#059669",      # Gains
    "loss_red": "#DC2626",        # Losses, high risk
    "warn_amber": "#D97706",      # Moderate risk
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    # CORS (the dashboard may be served from another origin)
    cors_origins: List[str] = ["*"]

    # Rate limiting (slowapi syntax)
    rate_limit: str = "300/minute"
    rate_limit_enabled: bool = True

    # Sample performance data; set to make the timeline reproducible
    performance_seed: Optional[int] = None

    # Terminal dashboard client
    api_base_url: str = "http://localhost:8000"
    request_timeout_seconds: int = 10

    # Display
    currency_symbol: str = "$"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
