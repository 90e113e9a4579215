"""Facade over the calendaring operations for a single host."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from . import calendar as calendar_ops
from . import events as event_ops
from . import lifecycle, serializer
from .host import CalendaringHost, DirectoryHost
from .models import Calendar, Event, SourceEvent, User

logger = logging.getLogger(__name__)


class CalendaringService:
    """Builds, updates and writes calendar files on behalf of a host.

    Every operation returns ``None`` when the host has ICS generation turned
    off. Validation and file errors are raised as ``ICSError`` subclasses.
    """

    def __init__(self, host: Optional[CalendaringHost] = None) -> None:
        self.host = host or DirectoryHost()

    def is_enabled(self) -> bool:
        return self.host.is_feature_enabled()

    def _disabled(self, operation: str) -> bool:
        if self.is_enabled():
            return False
        logger.debug("ICS generation is disabled, skipping %s", operation)
        return True

    def create_event(self, source: SourceEvent, attendees: Optional[Iterable[User]] = None) -> Optional[Event]:
        return event_ops.build_event(source, self.host, attendees)

    def add_attendees(self, event: Event, attendees: Optional[Iterable[User]]) -> Optional[Event]:
        if self._disabled("add_attendees"):
            return None
        return event_ops.add_attendees(event, attendees)

    def add_chair_attendees(self, event: Event, attendees: Optional[Iterable[User]]) -> Optional[Event]:
        if self._disabled("add_chair_attendees"):
            return None
        return event_ops.add_chair_attendees(event, attendees)

    def cancel_event(self, event: Event) -> Optional[Event]:
        if self._disabled("cancel_event"):
            return None
        return lifecycle.cancel_event(event)

    def create_calendar(self, events: Optional[Iterable[Event]], method: Optional[str] = None) -> Optional[Calendar]:
        return calendar_ops.assemble_calendar(events, self.host, method)

    def to_file(self, calendar: Optional[Calendar]) -> Optional[Path]:
        return serializer.persist_calendar(calendar, self.host)
