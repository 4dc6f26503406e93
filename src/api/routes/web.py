"""Web dashboard routes."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.config import BRAND_COLORS, PRODUCT_NAME, PRODUCT_TAGLINE, get_settings

router = APIRouter()

# Set up templates
templates_dir = Path(__file__).parent.parent.parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))


@router.get("/", response_class=HTMLResponse)
def dashboard(request: Request):
    """Render the dashboard shell; the page script fetches the data."""
    settings = get_settings()
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "product_name": PRODUCT_NAME,
            "tagline": PRODUCT_TAGLINE,
            "api_base": "/api/portfolio",
            "currency_symbol": settings.currency_symbol,
            "colors": BRAND_COLORS,
        },
    )
