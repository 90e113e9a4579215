"""CLI entry point for extcal."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import List, Optional

import typer

from extcal import __version__
from extcal.ics import (
    CalendaringService,
    DirectoryHost,
    User,
    format_error_for_user,
    load_config,
    mail_recipients,
    validate_event_request,
)

app = typer.Typer(help="Generate iCalendar (.ics) files.")


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        typer.echo(f"extcal version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
):
    """Build calendar events and write them as .ics files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_host(output_dir: Optional[Path], organizer: Optional[str], organizer_name: Optional[str]) -> DirectoryHost:
    config = load_config()
    if output_dir is not None:
        config = dataclasses.replace(config, output_dir=output_dir)
    host = DirectoryHost(config)
    if organizer:
        host.add_user(User(id=organizer, email=organizer, display_name=organizer_name or organizer))
    return host


@app.command("event")
def event(
    summary: str = typer.Option(..., "--summary", "-s", help="Event summary."),
    start: str = typer.Option(..., "--start", help="Event start (ISO 8601, UTC when no offset is given)."),
    end: Optional[str] = typer.Option(None, "--end", help="Event end (ISO 8601, defaults to start)."),
    description: Optional[str] = typer.Option(None, "--description", help="Event description."),
    location: Optional[str] = typer.Option(None, "--location", help="Event location."),
    uid: Optional[str] = typer.Option(None, "--uid", help="Stable event UID (generated when omitted)."),
    sequence: Optional[int] = typer.Option(None, "--sequence", help="Event revision number."),
    url: Optional[str] = typer.Option(None, "--url", help="Event URL."),
    organizer: Optional[str] = typer.Option(None, "--organizer", help="Organizer email."),
    organizer_name: Optional[str] = typer.Option(None, "--organizer-name", help="Organizer display name."),
    attendee: Optional[List[str]] = typer.Option(
        None,
        "--attendee",
        "-a",
        help="Required attendee as 'email' or 'Name <email>'. Repeatable.",
    ),
    chair: Optional[List[str]] = typer.Option(
        None,
        "--chair",
        help="Chair attendee as 'email' or 'Name <email>'. Repeatable.",
    ),
    method: Optional[str] = typer.Option(None, "--method", help="iTIP method, e.g. REQUEST or CANCEL."),
    cancel: bool = typer.Option(False, "--cancel", help="Mark the event as cancelled."),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the generated file (defaults to EXTCAL_OUTPUT_DIR or the temp directory).",
    ),
):
    """Build one event and write it to a new .ics file."""
    try:
        params = validate_event_request(
            summary,
            start,
            end,
            description=description,
            location=location,
            uid=uid,
            sequence=sequence,
            url=url,
            creator=organizer,
            attendees=attendee,
            chairs=chair,
            method=method,
            cancel=cancel,
            output_dir=Path(output_dir) if output_dir else None,
        )
        service = CalendaringService(_build_host(params.output_dir, organizer, organizer_name))
        built = service.create_event(params.source, params.attendees)
        if built is None:
            typer.secho("ICS generation is disabled (EXTCAL_ENABLED).", fg=typer.colors.YELLOW, err=True)
            raise typer.Exit(code=1)
        service.add_chair_attendees(built, params.chairs)
        if params.cancel:
            service.cancel_event(built)
        calendar = service.create_calendar([built], params.method)
        path = service.to_file(calendar)
    except typer.Exit:
        raise
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(str(path))
    recipients = mail_recipients(built)
    if recipients:
        typer.echo(f"Recipients: {', '.join(recipients)}")


if __name__ == "__main__":
    app()
