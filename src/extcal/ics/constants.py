"""Constants for iCalendar generation."""

PROD_ID_TEMPLATE = "-//{server}//extcal External Calendaring//EN"
ICAL_VERSION = "2.0"
CALSCALE = "GREGORIAN"

UTC_TZID = "UTC"

FILE_SUFFIX = ".ics"
NO_EMAIL_URI = "noemail"

# Extension fields understood on a source event record.
FIELD_UID = "vevent_uuid"
FIELD_SEQUENCE = "vevent_sequence"
FIELD_URL = "vevent_url"

METHOD_REQUEST = "REQUEST"

ENV_PREFIX = "EXTCAL_"
DEFAULTS = {
    "ENABLED": True,
    "CLEANUP": False,
}
