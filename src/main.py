"""Main entry point for the API server."""

import logging
import sys

import uvicorn

from src.config import get_settings


def run(host: str, port: int) -> None:
    """Configure logging and serve the API with uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run("src.api.app:app", host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    settings = get_settings()
    if not (1 <= settings.port <= 65535):
        print(f"Error: Invalid PORT value '{settings.port}'. Must be an integer between 1-65535.")
        sys.exit(1)

    run(settings.host, settings.port)
