"""
Command-line interface for smart-calendar.

Provides commands to try the text extractor, preview a month of events
and run the API server.

Usage:
    smart-calendar extract "Lunch with Sam next Friday at 1pm"
    smart-calendar month 2024 1 "Dentist tomorrow" "Team call next Tuesday"
    smart-calendar serve
"""

import json
import sys
from datetime import date
from typing import Any

import click

from src.config.settings import get_settings
from src.event_extraction.dates import reference_day
from src.observability.logging import setup_logging


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Smart Calendar - Natural-language calendar events."""
    if debug:
        import os
        os.environ["LOG_LEVEL"] = "DEBUG"
        get_settings.cache_clear()

    setup_logging()


@main.command()
@click.argument("text")
@click.option(
    "--reference-date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Date treated as today (YYYY-MM-DD)",
)
@click.option("--require-date", is_flag=True, help="Exit with status 1 if no date is found")
def extract(text: str, reference_date: Any, require_date: bool) -> None:
    """Extract event details from TEXT and print them as JSON."""
    from src.calendar.service import EXAMPLE_PHRASES
    from src.event_extraction.extractor import extract_event_info

    info = extract_event_info(text, reference_day(reference_date))
    click.echo(json.dumps(info.to_dict(), indent=2))

    if require_date and not info.has_date:
        hint = ", ".join(f'"{p}"' for p in EXAMPLE_PHRASES)
        click.echo(
            click.style(f"No date detected. Try phrases like {hint}.", fg="red"),
            err=True,
        )
        sys.exit(1)


@main.command()
@click.argument("year", type=int)
@click.argument("month", type=click.IntRange(1, 12))
@click.argument("texts", nargs=-1)
@click.option(
    "--reference-date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Date treated as today (YYYY-MM-DD)",
)
def month(year: int, month: int, texts: tuple[str, ...], reference_date: Any) -> None:
    """Add each of TEXTS as an event and print the YEAR/MONTH grid."""
    from src.calendar.service import CalendarService, DateNotDetectedError, EmptyInputError

    today = reference_day(reference_date)
    service = CalendarService(clock=lambda: today)

    for text in texts:
        try:
            event = service.add_from_text(text)
            click.echo(f"Added: {event.title} on {event.date.isoformat()}")
        except (DateNotDetectedError, EmptyInputError):
            click.echo(click.style(f"Skipped (no date): {text}", fg="yellow"), err=True)

    grid = service.month_grid(year, month)
    settings = service.get_settings()
    headers = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    if settings.start_week_on == "sunday":
        headers = headers[-1:] + headers[:-1]

    click.echo(f"\n{date(year, month, 1):%B %Y}")
    prefix = "Wk  " if grid.week_numbers else ""
    click.echo(prefix + " ".join(f"{h:>4}" for h in headers))
    for i, week in enumerate(grid.weeks):
        cells = []
        for day in week:
            if day is None:
                cells.append("    ")
            else:
                marker = "*" if day.events else " "
                cells.append(f"{day.date.day:>3}{marker}")
        row_prefix = f"{grid.week_numbers[i]:>2}  " if grid.week_numbers else ""
        click.echo(row_prefix + " ".join(cells))

    for day in grid.days:
        for event in day.events:
            when = f" {event.time}" if event.time else ""
            click.echo(f"  {day.date.isoformat()}{when}  {event.title} [{event.priority}]")


@main.command()
@click.option("--host", default=None, help="API server host")
@click.option("--port", default=None, type=int, help="API server port")
@click.option("--reload", is_flag=True, help="Enable auto-reload (dev only)")
@click.option("--metrics/--no-metrics", default=None, help="Enable metrics server")
@click.option("--metrics-port", default=None, type=int, help="Metrics server port")
def serve(
    host: str | None,
    port: int | None,
    reload: bool,
    metrics: bool | None,
    metrics_port: int | None,
) -> None:
    """Start the calendar API server."""
    import uvicorn

    from src.observability.metrics import get_metrics

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port
    if metrics is None:
        metrics = settings.metrics_enabled

    if metrics:
        metrics_port = metrics_port or settings.metrics_port
        get_metrics().start_server(port=metrics_port)
        click.echo(f"Metrics available on http://localhost:{metrics_port}/metrics")

    click.echo(f"Starting API server on {host}:{port}")
    click.echo(f"API docs available on http://localhost:{port}/docs")

    uvicorn.run(
        "src.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
