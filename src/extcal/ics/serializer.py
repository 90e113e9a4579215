"""Render calendars to RFC 5545 text and write them to disk."""

from __future__ import annotations

import atexit
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional
from uuid import uuid4

import icalendar
from icalendar import vCalAddress, vDDDTypes, vText

from .constants import FILE_SUFFIX, NO_EMAIL_URI
from .errors import ICSFileError, ICSValidationError
from .host import CalendaringHost
from .models import Attendee, Calendar, Event, Organizer
from .timezones import to_utc, utc_timezone, utc_wall_time
from .validation import validate_calendar

logger = logging.getLogger(__name__)


def mail_uri(email: str) -> str:
    if not email:
        return NO_EMAIL_URI
    return f"mailto:{email}"


def _organizer_property(organizer: Organizer) -> vCalAddress:
    address = vCalAddress(mail_uri(organizer.email))
    if organizer.display_name:
        address.params["CN"] = vText(organizer.display_name)
    return address


def _attendee_property(attendee: Attendee) -> vCalAddress:
    address = vCalAddress(mail_uri(attendee.email))
    address.params["ROLE"] = vText(attendee.role.value)
    if attendee.display_name:
        address.params["CN"] = vText(attendee.display_name)
    address.params["PARTSTAT"] = vText(attendee.participation_status.value)
    address.params["RSVP"] = vText("TRUE" if attendee.rsvp else "FALSE")
    return address


def _zoned_time(value: datetime, tzid: str) -> vDDDTypes:
    """Wall-clock time carrying a TZID reference to the embedded VTIMEZONE."""
    prop = vDDDTypes(utc_wall_time(value))
    prop.params["TZID"] = tzid
    return prop


def event_component(event: Event) -> icalendar.Event:
    component = icalendar.Event()
    component.add("uid", event.uid)
    component.add("dtstamp", to_utc(event.stamp))
    if event.sequence is not None:
        component.add("sequence", event.sequence)
    component.add("summary", event.summary)
    component.add("description", event.description)
    component.add("location", event.location)
    component["dtstart"] = _zoned_time(event.start, event.tzid)
    component["dtend"] = _zoned_time(event.end, event.tzid)
    if event.organizer is not None:
        component.add("organizer", _organizer_property(event.organizer), encode=False)
    for attendee in event.attendees:
        component.add("attendee", _attendee_property(attendee), encode=False)
    if event.status is not None:
        component.add("status", event.status.value)
    if event.url is not None:
        component.add("url", event.url)
    return component


def calendar_component(calendar: Calendar) -> icalendar.Calendar:
    component = icalendar.Calendar()
    component.add("prodid", calendar.product_id)
    component.add("version", calendar.version)
    component.add("calscale", calendar.scale)
    if calendar.method is not None:
        component.add("method", calendar.method)
    component.add_component(utc_timezone())
    for event in calendar.events:
        component.add_component(event_component(event))
    return component


def render_calendar(calendar: Calendar) -> bytes:
    try:
        return calendar_component(calendar).to_ical()
    except ValueError as exc:
        raise ICSValidationError("Calendar cannot be rendered as iCalendar") from exc


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not remove calendar file %s: %s", path, exc)


def _ensure_directory(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ICSFileError("Unable to create calendar directory", path=str(directory)) from exc


def generate_file_path(directory: Path) -> Path:
    return directory / f"{uuid4()}{FILE_SUFFIX}"


def persist_calendar(calendar: Optional[Calendar], host: CalendaringHost) -> Optional[Path]:
    if not host.is_feature_enabled():
        logger.debug("ICS generation is disabled, not writing calendar")
        return None
    if calendar is None:
        logger.error("Calendar is None, cannot generate ICS file.")
        return None

    validate_calendar(calendar)
    data = render_calendar(calendar)
    directory = host.output_directory()
    _ensure_directory(directory)
    path = generate_file_path(directory)

    try:
        handle = path.open("xb")
    except OSError as exc:
        raise ICSFileError("Unable to create calendar file", path=str(path)) from exc
    try:
        with handle:
            handle.write(data)
    except OSError as exc:
        _remove_quietly(path)
        raise ICSFileError("Unable to write calendar file", path=str(path)) from exc

    if host.is_cleanup_enabled():
        atexit.register(_remove_quietly, path)

    logger.debug("Wrote calendar with %d event(s) to %s", len(calendar.events), path)
    return path
