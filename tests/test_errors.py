"""Tests for user-facing error messages."""

import pytest

from extcal.ics import ICSConfigError, ICSError, ICSFileError, ICSValidationError, format_error_for_user


@pytest.mark.parametrize(
    "error, expected",
    [
        (ICSValidationError("End is before start", field="end"), "Validation Error (end): End is before start"),
        (ICSValidationError("No events"), "Validation Error: No events"),
        (ICSFileError("Unable to write", path="/tmp/a.ics"), "File Error: Unable to write at /tmp/a.ics"),
        (ICSFileError("Unable to write"), "File Error: Unable to write"),
        (ICSConfigError("Bad flag", variable="EXTCAL_ENABLED"), "Configuration Error: Bad flag"),
        (ICSError("Something broke"), "Calendar Error: Something broke"),
        (ValueError("plain"), "Error: plain"),
    ],
)
def test_format_error_for_user(error, expected) -> None:
    assert format_error_for_user(error) == expected


def test_error_codes() -> None:
    assert ICSValidationError("x", field="uid", value="").details == {"field": "uid", "value": ""}
    assert ICSFileError("x", path="p").code == "FILE_ERROR"
    assert ICSConfigError("x").code == "CONFIG_ERROR"
