"""Domain types for calendar events and calendars."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Mapping, Optional


class AttendeeRole(str, Enum):
    REQUIRED = "REQ-PARTICIPANT"
    CHAIR = "CHAIR"


class ParticipationStatus(str, Enum):
    ACCEPTED = "ACCEPTED"


class EventStatus(str, Enum):
    TENTATIVE = "TENTATIVE"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class User:
    id: str
    email: str = ""
    display_name: str = ""


@dataclass(frozen=True)
class SourceEvent:
    """A calendar event as recorded by the host application."""

    id: str
    display_name: str
    start: datetime
    end: datetime
    description: str = ""
    location: str = ""
    creator: str = ""
    fields: Mapping[str, str] = field(default_factory=dict)

    def get_field(self, name: str) -> Optional[str]:
        value = self.fields.get(name)
        if value is None or not str(value).strip():
            return None
        return str(value).strip()


@dataclass(frozen=True)
class Organizer:
    email: str
    display_name: str = ""


@dataclass(frozen=True)
class Attendee:
    email: str
    display_name: str
    role: AttendeeRole
    participation_status: ParticipationStatus = ParticipationStatus.ACCEPTED
    rsvp: bool = False


@dataclass
class Event:
    uid: str
    summary: str
    start: datetime
    end: datetime
    stamp: datetime
    description: str = ""
    location: str = ""
    tzid: str = "UTC"
    sequence: Optional[int] = None
    organizer: Optional[Organizer] = None
    attendees: list[Attendee] = field(default_factory=list)
    status: Optional[EventStatus] = None
    url: Optional[str] = None

    def __setattr__(self, name: str, value: object) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"Event {self.uid} belongs to a calendar and cannot be changed")
        if name == "uid" and getattr(self, "uid", ""):
            raise AttributeError("Event UID cannot be reassigned")
        super().__setattr__(name, value)

    @property
    def frozen(self) -> bool:
        return getattr(self, "_frozen", False)

    def snapshot(self) -> Event:
        """Read-only copy of this event, with attendees held as a tuple."""
        copied = copy.deepcopy(self)
        object.__setattr__(copied, "attendees", tuple(copied.attendees))
        object.__setattr__(copied, "_frozen", True)
        return copied


@dataclass(frozen=True)
class Calendar:
    events: tuple[Event, ...]
    product_id: str
    version: str
    scale: str
    timezone_id: str
    method: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "events", tuple(event.snapshot() for event in self.events))
