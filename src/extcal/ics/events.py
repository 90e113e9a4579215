"""Build calendar events from host event records and manage attendees."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional
from urllib.parse import urlparse

from .constants import FIELD_SEQUENCE, FIELD_UID, FIELD_URL, UTC_TZID
from .host import CalendaringHost
from .models import Attendee, AttendeeRole, Event, Organizer, SourceEvent, User
from .timezones import to_utc

logger = logging.getLogger(__name__)


def _resolve_uid(source: SourceEvent) -> str:
    return source.get_field(FIELD_UID) or source.id


def _parse_sequence(source: SourceEvent) -> Optional[int]:
    raw = source.get_field(FIELD_SEQUENCE)
    if raw is None:
        return None
    try:
        sequence = int(raw)
    except ValueError:
        logger.warning("Ignoring malformed sequence '%s' on event %s", raw, source.id)
        return None
    if sequence < 0:
        logger.warning("Ignoring negative sequence '%s' on event %s", raw, source.id)
        return None
    return sequence


def _parse_url(source: SourceEvent) -> Optional[str]:
    raw = source.get_field(FIELD_URL)
    if raw is None:
        return None
    parsed = urlparse(raw)
    if not parsed.scheme or not (parsed.netloc or parsed.path) or any(ch.isspace() for ch in raw):
        logger.warning("Ignoring malformed URL '%s' on event %s", raw, source.id)
        return None
    return raw


def _resolve_organizer(source: SourceEvent, host: CalendaringHost) -> Optional[Organizer]:
    creator = (source.creator or "").strip()
    if not creator:
        return None
    try:
        email = host.resolve_user_email(creator)
        display_name = host.resolve_user_display_name(creator) if email else ""
    except Exception as exc:
        logger.warning("Cannot resolve organizer for id: %s : %s", creator, exc)
        return None
    if not email:
        logger.debug("Creator %s has no email address, skipping organizer", creator)
        return None
    return Organizer(email=email, display_name=display_name or "")


def build_event(
    source: SourceEvent,
    host: CalendaringHost,
    attendees: Optional[Iterable[User]] = None,
) -> Optional[Event]:
    if not host.is_feature_enabled():
        logger.debug("ICS generation is disabled, not building event %s", source.id)
        return None

    event = Event(
        uid=_resolve_uid(source),
        summary=source.display_name,
        start=to_utc(source.start),
        end=to_utc(source.end),
        stamp=datetime.now(tz=timezone.utc),
        description=source.description,
        location=source.location,
        tzid=UTC_TZID,
        sequence=_parse_sequence(source),
        organizer=_resolve_organizer(source, host),
        url=_parse_url(source),
    )
    add_attendees(event, attendees)
    logger.debug("Built event %s", event.uid)
    return event


def assign_attendees(event: Event, attendees: Optional[Iterable[User]], role: AttendeeRole) -> Event:
    """Append each user as an attendee with the given role.

    Attendees are recorded as already accepted with no RSVP requested. The same
    user passed twice is appended twice.
    """
    if not attendees:
        return event
    added = [
        Attendee(email=user.email or "", display_name=user.display_name or "", role=role) for user in attendees
    ]
    event.attendees = [*event.attendees, *added]
    logger.debug("Event %s now has %d attendee(s)", event.uid, len(event.attendees))
    return event


def add_attendees(event: Event, attendees: Optional[Iterable[User]]) -> Event:
    return assign_attendees(event, attendees, AttendeeRole.REQUIRED)


def add_chair_attendees(event: Event, attendees: Optional[Iterable[User]]) -> Event:
    return assign_attendees(event, attendees, AttendeeRole.CHAIR)


def mail_recipients(event: Event) -> list[str]:
    """Attendee emails that can be reached by mail, in attendee order."""
    return [attendee.email for attendee in event.attendees if attendee.email]
