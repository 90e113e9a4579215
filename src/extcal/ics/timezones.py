"""Fixed UTC timezone support."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from icalendar import Timezone, TimezoneStandard

from .constants import UTC_TZID

_EPOCH = datetime(1970, 1, 1)


def utc_timezone() -> Timezone:
    """Return a new VTIMEZONE component describing UTC."""
    standard = TimezoneStandard()
    standard.add("dtstart", _EPOCH)
    standard.add("tzoffsetfrom", timedelta(0))
    standard.add("tzoffsetto", timedelta(0))
    standard.add("tzname", UTC_TZID)

    component = Timezone()
    component.add("tzid", UTC_TZID)
    component.add_component(standard)
    return component


def to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_wall_time(value: datetime) -> datetime:
    """Naive wall-clock time in UTC, for properties carrying a TZID parameter."""
    return to_utc(value).replace(tzinfo=None)
