"""
bot-stats CLI entry point.

Usage:
    # List resources and their operations
    bot-stats resources

    # Show configuration status
    bot-stats status

    # Fetch a series and summarize a column
    bot-stats fetch exchange_rate daily -p start_period=2025-01-01 -p end_period=2025-01-31 --column rate

    # Export to CSV
    bot-stats fetch financial_holidays list -p year=2025 --csv holidays.csv
"""

import inspect
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from bank_of_thailand.client import BOTClient
from bank_of_thailand.core.config import Settings, load_settings
from bank_of_thailand.core.errors import BOTError
from bank_of_thailand.core.logging import get_logger, setup_logging
from bank_of_thailand.domain.response import Response, Trend
from bank_of_thailand.registry import create_default_registry

console = Console()
logger = get_logger("cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

TREND_STYLES = {
    Trend.UP: "green",
    Trend.DOWN: "red",
    Trend.FLAT: "white",
}


def parse_params(pairs: tuple[str, ...]) -> dict[str, str]:
    """Turn ``key=value`` strings into keyword arguments."""
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected key=value, got {pair!r}", param_hint="--param")
        params[key.strip()] = value
    return params


def _fmt(value: Optional[float]) -> str:
    return "-" if value is None else f"{value:,.4f}"


def display_summary(response: Response, column: str) -> None:
    """Display coverage and statistics of a response in the terminal."""
    table = Table(title=f"Summary ({column})")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    date_range = response.date_range
    table.add_row("Records", str(response.count))
    table.add_row("Date range", f"{date_range[0]} .. {date_range[1]}" if date_range else "-")
    table.add_row("Period days", str(response.period_days))
    table.add_row("Complete", "yes" if response.is_complete else "no")

    values = response.values_for(column)
    if values:
        table.add_row("Min", _fmt(response.min(column)))
        table.add_row("Max", _fmt(response.max(column)))
        table.add_row("Average", _fmt(response.average(column)))
        try:
            change = response.change(column)
        except ZeroDivisionError:
            change = None
            logger.warning(f"Cannot compute change for {column}: first value is zero")
        if change:
            table.add_row("Change", f"{change.absolute:+,.4f} ({change.percentage:+.4f}%)")
            trend = response.trend(column)
            style = TREND_STYLES[trend]
            table.add_row("Trend", f"[{style}]{trend.value}[/{style}]")
        table.add_row("Volatility", _fmt(response.volatility(column)))

    console.print(table)

    missing = response.missing_dates
    if missing:
        shown = ", ".join(d.isoformat() for d in missing[:10])
        more = f" (+{len(missing) - 10} more)" if len(missing) > 10 else ""
        console.print(f"[yellow]Missing dates:[/yellow] {shown}{more}")


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="YAML settings file")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Log level (overrides settings)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output (same as --log-level DEBUG)")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str], log_level: Optional[str], verbose: bool) -> None:
    """bot-stats - Bank of Thailand statistics from the command line"""
    if verbose:
        log_level = "DEBUG"
    try:
        settings = load_settings(config_path, log_level=log_level)
    except (FileNotFoundError, BOTError, ValueError) as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e

    setup_logging(log_level=settings.log_level, env=settings.env)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@main.command()
def resources() -> None:
    """List resources and their operations."""
    registry = create_default_registry()

    table = Table(title="Resources")
    table.add_column("Resource", style="cyan")
    table.add_column("Operations")
    table.add_column("Base URL", style="dim")

    for name in registry.list_resources():
        resource_class = registry.resource_class(name)
        table.add_row(name, ", ".join(resource_class.OPERATIONS), resource_class.BASE_URL)

    console.print(table)


@main.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration status."""
    settings: Settings = ctx.obj["settings"]

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    token = "[green]✓ Configured[/green]" if settings.api_token else "[red]✗ Missing[/red]"
    table.add_row("Environment", settings.env)
    table.add_row("API token", token)
    table.add_row("Base URL", settings.base_url)
    table.add_row("Timeout", f"{settings.timeout}s")
    table.add_row("Max retries (reserved)", str(settings.max_retries))
    table.add_row("Log level", settings.log_level)

    console.print(table)


@main.command()
@click.argument("resource_name")
@click.argument("operation")
@click.option("--param", "-p", "params", multiple=True, help="Operation argument as key=value")
@click.option("--column", "-c", default="value", show_default=True, help="Numeric column to summarize")
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False), help="Write records to a CSV file")
@click.option("--token", envvar="BOT_API_TOKEN", help="API token (overrides settings)")
@click.pass_context
def fetch(
    ctx: click.Context,
    resource_name: str,
    operation: str,
    params: tuple[str, ...],
    column: str,
    csv_path: Optional[str],
    token: Optional[str],
) -> None:
    """Call RESOURCE_NAME.OPERATION and summarize the result."""
    kwargs = parse_params(params)
    settings: Settings = ctx.obj["settings"]
    if token:
        settings = settings.with_overrides(api_token=token)

    try:
        with BOTClient(settings) as client:
            if resource_name not in client.resource_names:
                raise click.UsageError(f"Unknown resource: {resource_name}")
            resource = client.resource(resource_name)
            if operation not in resource.OPERATIONS:
                raise click.UsageError(
                    f"Unknown operation {operation!r} for {resource_name}. "
                    f"Choose from: {', '.join(resource.OPERATIONS)}"
                )
            method = getattr(resource, operation)
            try:
                inspect.signature(method).bind(**kwargs)
            except TypeError as e:
                raise click.UsageError(f"Bad arguments for {resource_name}.{operation}: {e}") from e
            response = method(**kwargs)
    except BOTError as e:
        logger.debug(f"Request failed: {e.to_dict()}")
        console.print(f"[bold red]{e.kind.value}[/bold red]: {e.message}")
        sys.exit(1)

    if csv_path:
        response.to_csv(csv_path)
        console.print(f"Wrote {response.count} records to {csv_path}")
        return

    display_summary(response, column)


if __name__ == "__main__":
    main()
