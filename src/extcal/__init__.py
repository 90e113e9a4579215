"""Generate RFC 5545 calendar files from generic calendar events."""

__version__ = "0.1.0"
