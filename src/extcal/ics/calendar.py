"""Assemble calendars from built events."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .constants import CALSCALE, ICAL_VERSION, PROD_ID_TEMPLATE, UTC_TZID
from .host import CalendaringHost
from .models import Calendar, Event
from .serializer import render_calendar
from .validation import normalize_method, validate_calendar

logger = logging.getLogger(__name__)


def _product_id(host: CalendaringHost) -> str:
    return PROD_ID_TEMPLATE.format(server=host.server_identity())


def assemble_calendar(
    events: Optional[Iterable[Event]],
    host: CalendaringHost,
    method: Optional[str] = None,
) -> Optional[Calendar]:
    if not host.is_feature_enabled():
        logger.debug("ICS generation is disabled, not assembling calendar")
        return None

    collected = tuple(events) if events is not None else ()
    if not collected:
        logger.error("List of events was None or empty, no calendar will be created.")
        return None

    # The calendar keeps read-only snapshots of the events.
    calendar = Calendar(
        events=collected,
        product_id=_product_id(host),
        version=ICAL_VERSION,
        scale=CALSCALE,
        timezone_id=UTC_TZID,
        method=normalize_method(method),
    )
    validate_calendar(calendar)
    render_calendar(calendar)
    logger.debug("Assembled calendar with %d event(s)", len(collected))
    return calendar
