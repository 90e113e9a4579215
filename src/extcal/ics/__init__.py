"""iCalendar generation for host calendar events."""

from .calendar import assemble_calendar
from .config import CalendaringConfig, default_output_dir, load_config, resolve_output_dir
from .errors import ICSConfigError, ICSError, ICSFileError, ICSValidationError, format_error_for_user
from .events import add_attendees, add_chair_attendees, assign_attendees, build_event, mail_recipients
from .host import CalendaringHost, DirectoryHost
from .lifecycle import cancel_event, confirm_event
from .models import (
    Attendee,
    AttendeeRole,
    Calendar,
    Event,
    EventStatus,
    Organizer,
    ParticipationStatus,
    SourceEvent,
    User,
)
from .serializer import persist_calendar, render_calendar
from .service import CalendaringService
from .timezones import utc_timezone
from .validation import validate_calendar
from .validators import EventRequestParams, parse_event_datetime, parse_user, validate_event_request

__all__ = [
    "assemble_calendar",
    "validate_calendar",
    "CalendaringConfig",
    "default_output_dir",
    "load_config",
    "resolve_output_dir",
    "ICSConfigError",
    "ICSError",
    "ICSFileError",
    "ICSValidationError",
    "format_error_for_user",
    "add_attendees",
    "add_chair_attendees",
    "assign_attendees",
    "build_event",
    "mail_recipients",
    "CalendaringHost",
    "DirectoryHost",
    "cancel_event",
    "confirm_event",
    "Attendee",
    "AttendeeRole",
    "Calendar",
    "Event",
    "EventStatus",
    "Organizer",
    "ParticipationStatus",
    "SourceEvent",
    "User",
    "persist_calendar",
    "render_calendar",
    "CalendaringService",
    "utc_timezone",
    "EventRequestParams",
    "parse_event_datetime",
    "parse_user",
    "validate_event_request",
]
