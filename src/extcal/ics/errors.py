"""Errors raised while assembling and writing calendar files.

Disabled generation and missing input are not errors: those operations return
``None``. Everything raised here means the caller asked for a calendar that
cannot be produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ICSError(Exception):
    message: str
    code: str = "ICS_ERROR"
    details: Any | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class ICSValidationError(ICSError):
    """A calendar or event breaks an RFC 5545 or iTIP rule."""

    def __init__(self, message: str, field: str | None = None, value: Any | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details={"field": field, "value": value})
        self.field = field
        self.value = value


class ICSFileError(ICSError):
    """The .ics output file could not be created or written."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message, code="FILE_ERROR", details={"path": path})
        self.path = path


class ICSConfigError(ICSError):
    """An ``EXTCAL_*`` environment variable holds an unusable value."""

    def __init__(self, message: str, variable: str | None = None) -> None:
        super().__init__(message, code="CONFIG_ERROR", details={"variable": variable})
        self.variable = variable


def format_error_for_user(error: Exception) -> str:
    if isinstance(error, ICSValidationError):
        if error.field:
            return f"Validation Error ({error.field}): {error.message}"
        return f"Validation Error: {error.message}"
    if isinstance(error, ICSFileError):
        if error.path:
            return f"File Error: {error.message} at {error.path}"
        return f"File Error: {error.message}"
    if isinstance(error, ICSConfigError):
        return f"Configuration Error: {error.message}"
    if isinstance(error, ICSError):
        return f"Calendar Error: {error.message}"
    return f"Error: {str(error)}"
