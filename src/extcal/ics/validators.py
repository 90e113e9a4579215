"""Validation and parsing helpers for the calendar CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from email.utils import parseaddr
from pathlib import Path
from typing import Optional
from uuid import uuid4

from .config import resolve_output_dir
from .constants import FIELD_SEQUENCE, FIELD_UID, FIELD_URL
from .errors import ICSValidationError
from .models import SourceEvent, User


@dataclass(frozen=True)
class EventRequestParams:
    source: SourceEvent
    attendees: list[User] = field(default_factory=list)
    chairs: list[User] = field(default_factory=list)
    method: Optional[str] = None
    cancel: bool = False
    output_dir: Optional[Path] = None


def validate_summary(summary: str) -> str:
    if not summary or not summary.strip():
        raise ICSValidationError("Summary is required", field="summary")
    return summary.strip()


def parse_event_datetime(value: str) -> datetime:
    if not value:
        raise ICSValidationError("Date/time value is required", field="datetime")

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        try:
            parsed_date = date.fromisoformat(value)
        except ValueError as exc:
            raise ICSValidationError(
                "Invalid datetime format. Use ISO 8601 (e.g. 2026-02-01T09:00Z)",
                field="datetime",
                value=value,
            ) from exc
        parsed = datetime.combine(parsed_date, time.min)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_start_end(start: datetime, end: datetime) -> None:
    if end < start:
        raise ICSValidationError("End time must not be before start time", field="end")


def parse_user(value: str) -> User:
    """Parse ``email`` or ``Display Name <email>`` into a user."""
    name, email = parseaddr(value)
    if not email or "@" not in email:
        raise ICSValidationError("Invalid attendee. Use 'email' or 'Name <email>'", field="attendee", value=value)
    return User(id=email, email=email, display_name=name or email)


def validate_sequence(sequence: Optional[int]) -> Optional[int]:
    if sequence is None:
        return None
    if sequence < 0:
        raise ICSValidationError("Sequence must not be negative", field="sequence", value=sequence)
    return sequence


def validate_event_request(
    summary: str,
    start: str,
    end: Optional[str],
    description: Optional[str] = None,
    location: Optional[str] = None,
    uid: Optional[str] = None,
    sequence: Optional[int] = None,
    url: Optional[str] = None,
    creator: Optional[str] = None,
    attendees: Optional[list[str]] = None,
    chairs: Optional[list[str]] = None,
    method: Optional[str] = None,
    cancel: bool = False,
    output_dir: Optional[Path] = None,
) -> EventRequestParams:
    validated_summary = validate_summary(summary)
    parsed_start = parse_event_datetime(start)
    parsed_end = parse_event_datetime(end) if end else parsed_start
    validate_start_end(parsed_start, parsed_end)
    validated_sequence = validate_sequence(sequence)

    fields: dict[str, str] = {}
    if uid:
        fields[FIELD_UID] = uid
    if validated_sequence is not None:
        fields[FIELD_SEQUENCE] = str(validated_sequence)
    if url:
        fields[FIELD_URL] = url

    source = SourceEvent(
        id=str(uuid4()),
        display_name=validated_summary,
        start=parsed_start,
        end=parsed_end,
        description=description or "",
        location=location or "",
        creator=creator or "",
        fields=fields,
    )
    return EventRequestParams(
        source=source,
        attendees=[parse_user(value) for value in attendees or []],
        chairs=[parse_user(value) for value in chairs or []],
        method=method.strip().upper() if method and method.strip() else None,
        cancel=cancel,
        output_dir=resolve_output_dir(output_dir) if output_dir else None,
    )
