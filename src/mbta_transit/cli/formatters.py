"""Output formatters for CLI display."""

import json
from collections.abc import Collection

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.models import Connection, ConnectionStatus, TransitReport

console = Console()

ROUTES = "routes"
STOPS = "stops"
CONNECTION = "connection"
ALL_SECTIONS = (ROUTES, STOPS, CONNECTION)


def format_names(names: list[str]) -> str:
    """Join names the way every report line lists them."""
    return ", ".join(names)


def format_connection_text(connection: Connection) -> str:
    """One-line connection description."""
    if connection.found:
        return f"{connection.from_stop} to {connection.to_stop}: {connection}"
    return str(connection)


def format_report_text(
    report: TransitReport, sections: Collection[str] = ALL_SECTIONS
) -> str:
    """Format the report as plain text lines."""
    lines: list[str] = []

    if ROUTES in sections:
        lines.append(format_names(report.route_names))

    if STOPS in sections:
        if report.max_stops is None or report.min_stops is None:
            lines.append("No route stops available")
        else:
            lines.append(f"Maximum stops: {report.max_stops}")
            lines.append(f"Minimum stops: {report.min_stops}")
        lines.append(
            "Stops with multiple routes: "
            + format_names([str(stop) for stop in report.multi_route_stops])
        )
        if report.skipped_routes:
            lines.append(f"Skipped routes: {format_names(report.skipped_routes)}")

    if CONNECTION in sections and report.connection is not None:
        lines.append(format_connection_text(report.connection))

    return "\n".join(lines)


def format_report_table(
    report: TransitReport, sections: Collection[str] = ALL_SECTIONS
) -> None:
    """Display the report as rich tables."""
    if ROUTES in sections:
        table = Table(title="Routes", show_header=True, header_style="bold magenta")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Route", style="cyan")
        for idx, name in enumerate(report.route_names, 1):
            table.add_row(str(idx), name)
        console.print(table)

    if STOPS in sections:
        count_table = Table(
            title="Stop Counts", show_header=True, header_style="bold magenta"
        )
        count_table.add_column("Extreme", style="cyan", no_wrap=True)
        count_table.add_column("Routes", style="green")
        count_table.add_column("Stops", style="yellow", justify="right")
        for label, summary in (
            ("Maximum", report.max_stops),
            ("Minimum", report.min_stops),
        ):
            if summary is not None:
                count_table.add_row(
                    label, format_names(summary.routes), str(summary.count)
                )
        console.print(count_table)

        if report.multi_route_stops:
            stop_table = Table(
                title="Stops with Multiple Routes",
                show_header=True,
                header_style="bold blue",
            )
            stop_table.add_column("Stop", style="cyan")
            stop_table.add_column("Routes", style="green")
            for stop in report.multi_route_stops:
                stop_table.add_row(stop.name, format_names(stop.routes))
            console.print(stop_table)
        else:
            console.print("[dim]No stops are served by more than one route[/dim]")

        if report.skipped_routes:
            console.print(
                f"[yellow]Skipped routes:[/yellow] {format_names(report.skipped_routes)}"
            )

    if CONNECTION in sections and report.connection is not None:
        format_connection_panel(report.connection)


def format_connection_panel(connection: Connection) -> None:
    """Display a connection as a rich panel."""
    if connection.status == ConnectionStatus.UNKNOWN_STOP:
        body = f"[red]No such stop:[/red] {format_names(connection.missing_stops)}"
        border = "red"
    elif connection.status == ConnectionStatus.NOT_FOUND:
        body = "[yellow]No such connection[/yellow]"
        border = "yellow"
    else:
        body = f"""[bold]From:[/bold] {connection.from_stop}
[bold]To:[/bold] {connection.to_stop}
[bold]Lines:[/bold] {' → '.join(connection.lines)}
[bold]Transfers:[/bold] {connection.transfer_count}"""
        border = "green"

    console.print(Panel(body, title="Connection", border_style=border))


def format_report_json(
    report: TransitReport, sections: Collection[str] = ALL_SECTIONS
) -> str:
    """Format the report as JSON."""
    data: dict[str, object] = {}

    if ROUTES in sections:
        data["routes"] = report.route_names

    if STOPS in sections:
        data["max_stops"] = (
            report.max_stops.model_dump() if report.max_stops else None
        )
        data["min_stops"] = (
            report.min_stops.model_dump() if report.min_stops else None
        )
        data["multi_route_stops"] = [
            stop.model_dump() for stop in report.multi_route_stops
        ]
        data["skipped_routes"] = report.skipped_routes

    if CONNECTION in sections and report.connection is not None:
        connection = report.connection
        data["connection"] = {
            "from_stop": connection.from_stop,
            "to_stop": connection.to_stop,
            "status": connection.status.value,
            "lines": connection.lines,
            "transfer_count": connection.transfer_count,
            "missing_stops": connection.missing_stops,
        }

    return json.dumps(data, ensure_ascii=False, indent=2)
