"""Main CLI entry point using Typer."""

import logging
from typing import Optional

import typer
from rich.console import Console

from src.config import PRODUCT_NAME, PRODUCT_TAGLINE, PRODUCT_VERSION, get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Reduce noise from third-party libraries
logging.getLogger("urllib3").setLevel(logging.WARNING)

console = Console()
app = typer.Typer(
    name="portfolio-analytics",
    help=f"{PRODUCT_NAME} — {PRODUCT_TAGLINE}",
    add_completion=False,
)


# Import and add subcommands
from src.cli.portfolio import app as portfolio_app

app.add_typer(portfolio_app, name="portfolio", help="Holdings, allocation, performance and summary")


ASCII_BANNER = """
[bold #4F46E5]█▀█ █▀█ █▀█ ▀█▀ █▀▀ █▀█ █   █ █▀█
█▀▀ █▄█ █▀▄  █  █▀  █▄█ █▄▄ █ █▄█[/]

[bold #059669]   Holdings, allocation and performance at a glance.[/]
"""


@app.command()
def version():
    """Show version information with ASCII banner."""
    console.print(ASCII_BANNER)
    console.print(f"[bold]Version:[/] {PRODUCT_VERSION}")
    console.print(f"[bold]Tagline:[/] {PRODUCT_TAGLINE}")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (defaults to settings)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", min=1, max=65535, help="Port (defaults to settings)"),
):
    """Run the API and web dashboard."""
    from src.main import run

    host = host or settings.host
    port = port or settings.port
    console.print(f"[green]Serving {PRODUCT_NAME}[/green] on http://{host}:{port}")
    run(host, port)


if __name__ == "__main__":
    app()
