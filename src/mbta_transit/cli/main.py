"""CLI main entry point for MBTA transit line analysis."""

import logging
import sys
from collections.abc import Callable
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__
from ..core import (
    ConnectionResolver,
    ConnectionStatus,
    MalformedDataError,
    MBTAClient,
    NetworkError,
    TransitAnalyzer,
    TransitConfig,
    TransitReport,
    ValidationError,
)
from .formatters import (
    ALL_SECTIONS,
    CONNECTION,
    ROUTES,
    STOPS,
    format_connection_panel,
    format_connection_text,
    format_report_json,
    format_report_table,
    format_report_text,
)

console = Console()
error_console = Console(stderr=True)


def parse_route_types(
    ctx: click.Context | None, param: click.Parameter | None, value: str
) -> list[int]:
    """Parse a comma-separated list of MBTA route types."""
    try:
        route_types = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(
            f"Route types must be comma-separated integers, got '{value}'"
        ) from None
    if not route_types:
        raise click.BadParameter("At least one route type is required")
    return route_types


def analysis_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every command that talks to the API."""
    options = [
        click.option(
            "--format",
            "-f",
            "output_format",
            type=click.Choice(["text", "table", "json"]),
            default="text",
            help="Output format",
        ),
        click.option("--timeout", "-t", default=30, help="Request timeout in seconds"),
        click.option(
            "--route-types",
            "-r",
            default="0,1",
            callback=parse_route_types,
            help="Comma-separated MBTA route types (0 light rail, 1 subway)",
        ),
        click.option("--verbose", "-v", is_flag=True, help="Show debug logging"),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=error_console, show_path=False)],
            force=True,
        )


def make_analyzer(timeout: int, route_types: list[int]) -> TransitAnalyzer:
    config = TransitConfig(timeout=timeout, route_types=route_types)
    return TransitAnalyzer(MBTAClient(config))


def print_report(
    report: TransitReport, output_format: str, sections: tuple[str, ...]
) -> None:
    if output_format == "json":
        click.echo(format_report_json(report, sections))
    elif output_format == "table":
        format_report_table(report, sections)
    else:
        click.echo(format_report_text(report, sections))


def exit_with_error(error: Exception, verbose: bool) -> None:
    if isinstance(error, NetworkError):
        error_console.print(f"[red]Network error:[/red] {error}")
    elif isinstance(error, MalformedDataError):
        error_console.print(f"[red]Unexpected API data:[/red] {error}")
    elif isinstance(error, ValidationError):
        error_console.print(f"[red]Error:[/red] {error}")
    else:
        error_console.print(f"[red]Unexpected error:[/red] {error}")
        if verbose:
            error_console.print_exception()
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """MBTA Transit Lines - Analyse subway and light-rail routes and stops."""
    pass


@cli.command()
@analysis_options
def routes(
    output_format: str, timeout: int, route_types: list[int], verbose: bool
) -> None:
    """List the long names of all routes.

    Examples:
        mbta-transit routes
        mbta-transit routes --format json
    """
    configure_logging(verbose)
    try:
        with console.status("[bold green]Fetching routes..."):
            catalog = make_analyzer(timeout, route_types).load_catalog()
        print_report(
            TransitReport(route_names=catalog.route_names()), output_format, (ROUTES,)
        )
    except Exception as e:
        exit_with_error(e, verbose)


@cli.command()
@analysis_options
def stops(
    output_format: str, timeout: int, route_types: list[int], verbose: bool
) -> None:
    """Show routes with the most and fewest stops, and shared stops.

    Examples:
        mbta-transit stops
        mbta-transit stops --format table
    """
    configure_logging(verbose)
    try:
        with console.status("[bold green]Fetching route stops..."):
            report = make_analyzer(timeout, route_types).build_report()
        print_report(report, output_format, (STOPS,))
    except Exception as e:
        exit_with_error(e, verbose)


@cli.command()
@click.argument("from_stop")
@click.argument("to_stop")
@click.option(
    "--max-transfers",
    "-m",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum number of line switches (default: no limit)",
)
@analysis_options
def connect(
    from_stop: str,
    to_stop: str,
    max_transfers: int | None,
    output_format: str,
    timeout: int,
    route_types: list[int],
    verbose: bool,
) -> None:
    """Find the lines to ride between two stops.

    Examples:
        mbta-transit connect "Davis" "Kendall/MIT"
        mbta-transit connect "Ashmont" "Arlington" --max-transfers 1
    """
    configure_logging(verbose)
    try:
        with console.status(
            f"[bold green]Finding connection from {from_stop} to {to_stop}..."
        ):
            analyzer = make_analyzer(timeout, route_types)
            network, _ = analyzer.build_network(analyzer.load_catalog())
            connection = ConnectionResolver(network).find_connection(
                from_stop, to_stop, max_transfers=max_transfers
            )
    except Exception as e:
        exit_with_error(e, verbose)
        return

    if output_format == "json":
        click.echo(
            format_report_json(TransitReport(connection=connection), (CONNECTION,))
        )
    elif output_format == "table":
        format_connection_panel(connection)
    else:
        click.echo(format_connection_text(connection))

    if connection.status == ConnectionStatus.UNKNOWN_STOP:
        for stop in connection.missing_stops:
            suggestions = network.search_stops(stop)
            if suggestions:
                error_console.print(
                    f"[yellow]Did you mean:[/yellow] {', '.join(suggestions)}"
                )
        sys.exit(1)


@cli.command()
@click.option("--from", "from_stop", help="Origin stop for a connection lookup")
@click.option("--to", "to_stop", help="Destination stop for a connection lookup")
@analysis_options
def report(
    from_stop: str | None,
    to_stop: str | None,
    output_format: str,
    timeout: int,
    route_types: list[int],
    verbose: bool,
) -> None:
    """Print the full route and stop report.

    Examples:
        mbta-transit report
        mbta-transit report --from "Davis" --to "Kendall/MIT"
    """
    configure_logging(verbose)
    if bool(from_stop) != bool(to_stop):
        error_console.print("[red]Error:[/red] --from and --to must be given together")
        sys.exit(1)

    try:
        with console.status("[bold green]Building transit report..."):
            transit_report = make_analyzer(timeout, route_types).build_report(
                from_stop=from_stop, to_stop=to_stop
            )
        print_report(transit_report, output_format, ALL_SECTIONS)
    except Exception as e:
        exit_with_error(e, verbose)


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
def show_config() -> None:
    """Show default configuration."""
    defaults = TransitConfig()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"• API base URL: {defaults.base_url}")
    console.print(f"• Default timeout: {defaults.timeout} seconds")
    console.print(
        f"• Route types: {','.join(str(t) for t in defaults.route_types)} "
        f"({defaults.describe_route_types()})"
    )
    console.print("• Default format: text")


if __name__ == "__main__":
    cli()
