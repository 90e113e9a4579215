"""Structural checks applied to calendars before they are written."""

from __future__ import annotations

import re
from typing import Optional

from .constants import ICAL_VERSION, METHOD_REQUEST
from .errors import ICSValidationError
from .models import Calendar, Event, EventStatus

_IANA_TOKEN_RE = re.compile(r"^[A-Za-z0-9-]+$")


def normalize_method(method: Optional[str]) -> Optional[str]:
    if method is None:
        return None
    cleaned = method.strip()
    if not _IANA_TOKEN_RE.match(cleaned):
        raise ICSValidationError("Method must be an iCalendar token such as REQUEST", field="method", value=method)
    return cleaned.upper()


def _validate_event(event: Event, method: Optional[str]) -> None:
    if not event.uid or not event.uid.strip():
        raise ICSValidationError("Event is missing UID", field="uid")
    if event.start is None:
        raise ICSValidationError("Event is missing DTSTART", field="dtstart", value=event.uid)
    if event.stamp is None:
        raise ICSValidationError("Event is missing DTSTAMP", field="dtstamp", value=event.uid)
    if event.end is not None and event.end < event.start:
        raise ICSValidationError("Event end must not be before its start", field="dtend", value=event.uid)
    if event.sequence is not None and (not isinstance(event.sequence, int) or event.sequence < 0):
        raise ICSValidationError("Event sequence must be a non-negative integer", field="sequence", value=event.sequence)
    if event.status is not None and not isinstance(event.status, EventStatus):
        raise ICSValidationError("Event status is not valid for VEVENT", field="status", value=event.status)
    if method == METHOD_REQUEST and not event.attendees:
        raise ICSValidationError(
            "Calendars with METHOD:REQUEST need at least one attendee per event",
            field="attendee",
            value=event.uid,
        )


def validate_calendar(calendar: Calendar) -> Calendar:
    if not calendar.product_id:
        raise ICSValidationError("Calendar is missing PRODID", field="prodid")
    if calendar.version != ICAL_VERSION:
        raise ICSValidationError("Calendar VERSION must be 2.0", field="version", value=calendar.version)
    if not calendar.events:
        raise ICSValidationError("Calendar has no events", field="events")
    method = normalize_method(calendar.method)
    for event in calendar.events:
        _validate_event(event, method)
    return calendar
