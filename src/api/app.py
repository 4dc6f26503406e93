"""FastAPI application setup."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.deps import get_repository
from src.api.errors import (
    APIError,
    api_error_handler,
    http_exception_handler,
    unhandled_exception_handler,
)
from src.api.routes import portfolio, web
from src.config import PRODUCT_DESCRIPTION, PRODUCT_NAME, PRODUCT_VERSION, get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# Rate limiter - key by IP address
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit],
    enabled=settings.rate_limit_enabled,
)

app = FastAPI(
    title=f"{PRODUCT_NAME} API",
    description=PRODUCT_DESCRIPTION,
    version=PRODUCT_VERSION,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.add_exception_handler(APIError, api_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# Mount static files
static_dir = Path(__file__).parent.parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")


@app.on_event("startup")
def startup():
    """Log what the API is serving."""
    logger.info(
        f"{PRODUCT_NAME} API v{PRODUCT_VERSION} serving "
        f"{get_repository().count()} holdings"
    )


@app.get("/api/health")
def health():
    """Health check endpoint."""
    return {
        "name": PRODUCT_NAME,
        "version": PRODUCT_VERSION,
        "status": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# Mount API routers
app.include_router(portfolio.router, prefix="/api/portfolio", tags=["portfolio"])

# Mount web dashboard (no prefix - serves at root)
app.include_router(web.router, tags=["dashboard"])
