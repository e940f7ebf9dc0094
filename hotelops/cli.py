"""CLI entry point using Typer."""
import logging
from datetime import date
from pathlib import Path
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from hotelops.config import settings
from hotelops.models.entities import EntityKind
from hotelops.services.export_service import export_all_json, report_rows, report_to_csv, csv_filename
from hotelops.services.hotel import Hotel, open_local_hotel
from hotelops.services.report_service import ReportType
from hotelops.services.sample_data import seed_sample_data

app = typer.Typer(
    name="hotelops",
    help="Hotel operations: sample data, backups and reports.",
    add_completion=False,
)
console = Console()

DatabaseOption = typer.Option(None, "--database-url", help="SQLAlchemy URL of the local storage")


def _open(database_url: Optional[str]) -> Hotel:
    return open_local_hotel(database_url, seed=False)


def _warn_if_unsaved(hotel: Hotel):
    if hotel.unsaved:
        console.print("[yellow]Warning:[/yellow] changes could not be saved to local storage")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(level=logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))


@app.command()
def seed(database_url: Optional[str] = DatabaseOption):
    """Load sample rooms, guests, staff and a reservation when no rooms exist."""
    hotel = _open(database_url)
    if hotel.store.count(EntityKind.ROOMS) > 0:
        console.print("[yellow]Rooms already exist, sample data not loaded.[/yellow]")
        raise typer.Exit(code=0)

    seed_sample_data(hotel)
    _warn_if_unsaved(hotel)
    console.print("[green]Sample data initialized successfully[/green]")


@app.command("export-data")
def export_data(
    output: Path = typer.Option(Path("hotel-data-backup.json"), "--output", "-o", help="Backup file"),
    database_url: Optional[str] = DatabaseOption,
):
    """Write every collection plus the export time as one JSON document."""
    hotel = _open(database_url)
    output.write_text(export_all_json(hotel.store), encoding="utf-8")
    console.print(f"[green]Data exported to[/green] {output}")


@app.command()
def report(
    report_type: ReportType = typer.Argument(..., help="occupancy, revenue or guest-activity"),
    date_from: Optional[str] = typer.Option(None, "--from", help="First day, YYYY-MM-DD (default: first of this month)"),
    date_to: Optional[str] = typer.Option(None, "--to", help="Last day, YYYY-MM-DD (default: today)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write CSV to this file"),
    database_url: Optional[str] = DatabaseOption,
):
    """Generate a report and print it, or export it as CSV."""
    today = date.today()
    try:
        start = date.fromisoformat(date_from) if date_from else today.replace(day=1)
        end = date.fromisoformat(date_to) if date_to else today
        hotel = _open(database_url)
        result = hotel.reports.generate(report_type, start, end)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    if output is not None:
        output.write_text(report_to_csv(report_type, result), encoding="utf-8")
        console.print(f"[green]Report exported to[/green] {output}")
        return

    header, rows = report_rows(report_type, result)
    table = Table(title=f"{report_type.value} report {start} ~ {end}")
    for column in header:
        table.add_column(column)
    for row in rows:
        table.add_row(*row)
    console.print(table)
    if report_type == ReportType.OCCUPANCY:
        console.print(f"Average occupancy rate: {result.average_rate:.1f}%")
    elif report_type == ReportType.REVENUE:
        console.print(f"Total revenue: ${result.total_revenue:.2f}  Average daily: ${result.average_daily_revenue:.2f}")
    console.print(f"Save with --output {csv_filename(report_type)}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the HTTP API with uvicorn."""
    console.print(f"[green]Serving {settings.APP_NAME}[/green] on http://{host}:{port}")
    uvicorn.run("hotelops.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
