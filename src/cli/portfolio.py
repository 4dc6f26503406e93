"""Portfolio CLI commands."""

from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.config import get_settings
from src.core.portfolio import (
    HoldingRepository,
    PerformanceGenerator,
    PortfolioService,
    TimeRange,
)
from src.core.portfolio.calculations import calculate_holding_metrics
from src.core.portfolio.filters import SortConfig, filter_holdings, filter_timeline
from src.data.dashboard import DashboardClient, DashboardFetchError

settings = get_settings()

console = Console()
app = typer.Typer()

RISK_STYLES = {"Low": "green", "Moderate": "yellow", "High": "red"}


def _service() -> PortfolioService:
    return PortfolioService(
        repository=HoldingRepository(),
        performance=PerformanceGenerator.from_seed(settings.performance_seed),
    )


def _wire(model) -> Any:
    """Serialize a model the way the API does."""
    return model.model_dump(mode="json", by_alias=True)


def _money(amount: float) -> str:
    return f"{settings.currency_symbol}{amount:,.2f}"


def _signed(amount: float, text: str) -> str:
    color = "green" if amount >= 0 else "red"
    return f"[{color}]{text}[/{color}]"


def render_holdings(rows: List[Dict[str, Any]]) -> None:
    """Print the holdings table."""
    if not rows:
        console.print("[yellow]No holdings match.[/yellow]")
        return

    table = Table(title="Holdings")
    table.add_column("Symbol", style="cyan")
    table.add_column("Name")
    table.add_column("Quantity", justify="right")
    table.add_column("Avg. Price", justify="right")
    table.add_column("Current Price", justify="right")
    table.add_column("Value", justify="right")
    table.add_column("Gain/Loss", justify="right")
    table.add_column("Gain/Loss %", justify="right")

    for h in rows:
        table.add_row(
            h["symbol"],
            h["name"],
            str(h["quantity"]),
            _money(h["avgPrice"]),
            _money(h["currentPrice"]),
            _money(h["value"]),
            _signed(h["gainLoss"], _money(h["gainLoss"])),
            _signed(h["gainLossPercent"], f"{h['gainLossPercent']:.2f}%"),
        )

    console.print(table)
    console.print(f"[dim]Showing {len(rows)} holding(s)[/dim]")


def render_allocation(allocation: Dict[str, Any]) -> None:
    """Print sector and market-cap breakdowns."""
    for title, key in (("Sector Distribution", "bySector"), ("Market Cap Distribution", "byMarketCap")):
        table = Table(title=title)
        table.add_column("Group", style="cyan")
        table.add_column("Value", justify="right")
        table.add_column("Share", justify="right")
        for group, bucket in allocation[key].items():
            table.add_row(group, _money(bucket["value"]), f"{bucket['percentage']:.1f}%")
        console.print(table)


def render_performance(performance: Dict[str, Any], time_range: TimeRange) -> None:
    """Print the timeline for a range plus trailing returns."""
    points = filter_timeline(performance["timeline"], time_range)

    if points:
        table = Table(title=f"Performance Comparison ({time_range.value})")
        table.add_column("Date")
        table.add_column("Portfolio", justify="right", style="cyan")
        table.add_column("Nifty 50", justify="right")
        table.add_column("Gold", justify="right")
        for p in points:
            table.add_row(
                p["date"],
                _money(p["portfolio"]),
                _money(p["nifty50"]),
                _money(p["gold"]),
            )
        console.print(table)
    else:
        console.print("[yellow]No data available for the selected time range[/yellow]")

    returns = Table(title="Trailing Returns")
    returns.add_column("Series", style="cyan")
    returns.add_column("1 Month", justify="right")
    returns.add_column("3 Months", justify="right")
    returns.add_column("1 Year", justify="right")
    for series, periods in performance["returns"].items():
        returns.add_row(
            series,
            f"{periods['1month']:.1f}%",
            f"{periods['3months']:.1f}%",
            f"{periods['1year']:.1f}%",
        )
    console.print(returns)

    if performance.get("sample"):
        console.print("[dim]Sample data: history is generated, not sourced from a market feed.[/dim]")


def render_summary(summary: Dict[str, Any], holdings_count: Optional[int] = None) -> None:
    """Print summary and performance-summary panels."""
    total_pl = summary["totalGainLoss"]
    total_pct = "{:.2f}%".format(summary["totalGainLossPercent"])
    lines = [
        f"[bold]Total Portfolio Value:[/bold] {_money(summary['totalValue'])}",
        f"[bold]Total Invested:[/bold]        {_money(summary['totalInvested'])}",
        f"[bold]Total Gain/Loss:[/bold]       {_signed(total_pl, _money(total_pl))}",
        f"[bold]Performance %:[/bold]         {_signed(total_pl, total_pct)}",
    ]
    if holdings_count is not None:
        lines.append(f"[bold]Number of Holdings:[/bold]    {holdings_count}")
    console.print(Panel("\n".join(lines), title="[cyan]Portfolio Summary[/cyan]"))

    top = summary["topPerformer"]
    worst = summary["worstPerformer"]
    top_pct = _signed(top["gainPercent"], "{:.2f}%".format(top["gainPercent"]))
    worst_pct = _signed(worst["gainPercent"], "{:.2f}%".format(worst["gainPercent"]))
    risk_style = RISK_STYLES.get(summary["riskLevel"], "white")
    console.print(Panel(
        f"[bold]Best Performer:[/bold]  {top['name']} ({top['symbol']}) {top_pct}\n"
        f"[bold]Worst Performer:[/bold] {worst['name']} ({worst['symbol']}) {worst_pct}\n"
        f"[bold]Diversification:[/bold] {summary['diversificationScore']}/10\n"
        f"[bold]Risk Level:[/bold]      [{risk_style}]{summary['riskLevel']}[/{risk_style}]",
        title="[cyan]Performance Summary[/cyan]",
    ))


def _apply_holding_filters(
    rows: List[Dict[str, Any]], search: str, sort: Optional[str], desc: bool
) -> List[Dict[str, Any]]:
    config = SortConfig(key=sort, direction="desc" if desc else "asc")
    try:
        return filter_holdings(rows, search, config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command("holdings")
def list_holdings(
    search: str = typer.Option("", "--search", "-s", help="Filter by symbol or name"),
    sort: Optional[str] = typer.Option(None, "--sort", help="Column to sort by (e.g. value, gainLoss)"),
    desc: bool = typer.Option(False, "--desc", help="Sort descending"),
):
    """List holdings with value and gain/loss."""
    rows = [_wire(h) for h in _service().get_holdings()]
    render_holdings(_apply_holding_filters(rows, search, sort, desc))


@app.command("show")
def show_holding(
    symbol: str = typer.Argument(..., help="Stock ticker symbol (e.g., INFY)"),
):
    """Show a single holding."""
    holding = HoldingRepository().get_by_symbol(symbol)
    if not holding:
        console.print(f"[red]Error:[/red] Holding {symbol.upper()} not found.")
        raise typer.Exit(1)

    h = calculate_holding_metrics(holding)
    console.print(Panel(
        f"[bold]{h.name}[/bold]\n\n"
        f"Sector: {h.sector}\n"
        f"Market Cap: {h.market_cap.value}\n"
        f"Exchange: {h.exchange}\n\n"
        f"Quantity: {h.quantity}\n"
        f"Avg. Price: {_money(h.avg_price)}\n"
        f"Current Price: {_money(h.current_price)}\n"
        f"Value: {_money(h.value)}\n"
        f"Gain/Loss: {_signed(h.gain_loss, _money(h.gain_loss))} "
        f"({_signed(h.gain_loss_percent, f'{h.gain_loss_percent:+.2f}%')})",
        title=f"[cyan]{h.symbol}[/cyan]",
    ))


@app.command("allocation")
def show_allocation():
    """Show allocation by sector and market cap."""
    render_allocation(_wire(_service().get_allocation()))


@app.command("performance")
def show_performance(
    time_range: TimeRange = typer.Option(TimeRange.ALL, "--range", "-r", help="Date window"),
):
    """Show the sample performance comparison."""
    render_performance(_wire(_service().get_performance()), time_range)


@app.command("summary")
def show_summary():
    """Show portfolio summary statistics."""
    service = _service()
    render_summary(_wire(service.get_summary()), holdings_count=service.repository.count())


@app.command("dashboard")
def remote_dashboard(
    api_url: Optional[str] = typer.Option(None, "--api-url", help="API root (defaults to settings)"),
    search: str = typer.Option("", "--search", "-s", help="Filter holdings by symbol or name"),
    sort: Optional[str] = typer.Option(None, "--sort", help="Holdings column to sort by"),
    desc: bool = typer.Option(False, "--desc", help="Sort descending"),
    time_range: TimeRange = typer.Option(TimeRange.ALL, "--range", "-r", help="Performance date window"),
):
    """Fetch every view from a running API and render the full dashboard."""
    client = DashboardClient(base_url=api_url)

    with console.status(f"Loading dashboard from {client.base_url}..."):
        try:
            data = client.fetch_all()
        except DashboardFetchError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)

    render_summary(data.summary, holdings_count=len(data.holdings))
    render_allocation(data.allocation)
    render_holdings(_apply_holding_filters(data.holdings, search, sort, desc))
    render_performance(data.performance, time_range)
