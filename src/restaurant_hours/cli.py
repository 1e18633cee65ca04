"""
Command line interface using Typer.
"""

from pathlib import Path
from typing import Annotated, Optional
import logging

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from restaurant_hours.catalog import Catalog
from restaurant_hours.context import Context, ErrorPolicy
from restaurant_hours.model.day import Weekday
from restaurant_hours.query import (
    DateTimeQuery,
    DayTimeQuery,
    Query,
    find_open_restaurants,
)
from restaurant_hours.reader import load_catalog
from restaurant_hours.render import SEPARATOR, format_row, render_weekly_table
from restaurant_hours.util import ScheduleError

app = typer.Typer(
    name="restaurant-hours",
    help="Find the restaurants open at a given time",
    add_completion=False,
)

console = Console()


def _print_weekly_table(catalog: Catalog) -> None:
    table = Table(title="Opening hours", show_header=True, header_style="bold cyan")
    table.add_column("Name", style="bold yellow")
    for wday in Weekday:
        table.add_column(str(wday), style="dim")

    for row in render_weekly_table(catalog):
        table.add_row(escape(row.name), *row.days)

    console.print()
    console.print(table)
    console.print()


def _print_plain_listing(catalog: Catalog) -> None:
    for row in render_weekly_table(catalog):
        typer.echo(format_row(row))
    typer.echo(SEPARATOR)


def _build_query(
    date: Optional[str], day: Optional[str], time: Optional[str]
) -> Optional[Query]:
    # An explicit day and time take precedence over --date
    if day and time:
        return DayTimeQuery(day, time)
    if date:
        return DateTimeQuery.parse(date)
    return None


@app.command()
def main(
    csv: Annotated[Path, typer.Option("--csv", "-c", help="Path to CSV file")],
    date: Annotated[Optional[str], typer.Option("--date", "-D", help="Date and time in ISO format (e.g. 2020-05-23T01:35:00)")] = None,
    day: Annotated[Optional[str], typer.Option("--day", "-d", help="Day of week (e.g. Sat)")] = None,
    time: Annotated[Optional[str], typer.Option("--time", "-t", help="Time in 24-hour HH:MM format (e.g. 17:30)")] = None,
    list_hours: Annotated[bool, typer.Option("--list", "-l", help="List daily opening hours for all restaurants")] = False,
    plain: Annotated[bool, typer.Option("--plain", help="Print --list as tab-separated lines instead of a table")] = False,
    strict: Annotated[bool, typer.Option("--strict", help="Abort on the first restaurant whose hours cannot be parsed")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
):
    """
    Find restaurants open at a given time, or list everyone's opening hours.

    Examples:

        restaurant-hours -c rest_hours.csv -d Sat -t 17:30

        restaurant-hours -c rest_hours.csv -D 2020-05-23T01:35:00

        restaurant-hours -c rest_hours.csv --list

        restaurant-hours -c rest_hours.csv --list --plain
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not ((day and time) or date or list_hours):
        console.print("[bold red]Error:[/bold red] Missing arguments.")
        console.print("Use --day and --time, --date, or --list.")
        raise typer.Exit(2)

    ctx = Context(on_error=ErrorPolicy.FAIL if strict else ErrorPolicy.SKIP)

    try:
        query = _build_query(date, day, time)
        catalog = load_catalog(csv, ctx)

        if list_hours and plain:
            _print_plain_listing(catalog)
        elif list_hours:
            _print_weekly_table(catalog)

        if query is not None:
            open_restaurants = find_open_restaurants(catalog, query)
            console.print(f"Found {len(open_restaurants)} open restaurant(s):")
            for name in open_restaurants:
                console.print(f"  - {name}", markup=False, highlight=False)

    except (ScheduleError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
