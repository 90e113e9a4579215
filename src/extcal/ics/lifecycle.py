"""Status transitions for calendar events."""

from __future__ import annotations

import logging

from .models import Event, EventStatus

logger = logging.getLogger(__name__)

CANCELLATION_SEQUENCE = 1


def _set_status(event: Event, status: EventStatus) -> None:
    if event.status is not None and event.status != status:
        logger.debug("Replacing status %s with %s on event %s", event.status.value, status.value, event.uid)
    event.status = status


def cancel_event(event: Event) -> Event:
    _set_status(event, EventStatus.CANCELLED)
    # A cancellation must carry a sequence; an existing one is kept as is.
    if event.sequence is None:
        event.sequence = CANCELLATION_SEQUENCE
    logger.debug("Cancelled event %s (sequence %s)", event.uid, event.sequence)
    return event


def confirm_event(event: Event) -> Event:
    _set_status(event, EventStatus.CONFIRMED)
    return event
