"""Tests for the extcal command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from extcal import __version__
from extcal.cli import app
from extcal.ics import ICSValidationError, parse_event_datetime, parse_user, validate_event_request

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("EXTCAL_ENABLED", "EXTCAL_CLEANUP", "EXTCAL_SERVER_NAME", "EXTCAL_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("EXTCAL_SERVER_NAME", "cli-host")


def _written_path(output: str) -> Path:
    return Path(output.strip().splitlines()[0])


class TestEventCommand:
    def test_writes_request_calendar(self, tmp_path) -> None:
        result = runner.invoke(
            app,
            [
                "event",
                "--summary", "Planning",
                "--start", "2012-05-04T13:00:00+00:00",
                "--end", "2012-05-04T14:00:00+00:00",
                "--organizer", "steve@example.com",
                "--organizer-name", "Steve",
                "--attendee", "Ann <ann@example.com>",
                "--chair", "bob@example.com",
                "--method", "request",
                "--output-dir", str(tmp_path),
            ],
        )

        assert result.exit_code == 0, result.output
        path = _written_path(result.output)
        assert path.parent == tmp_path.resolve()
        content = path.read_text(encoding="utf-8").replace("\r\n ", "")
        assert "METHOD:REQUEST" in content
        assert "PRODID:-//cli-host//extcal External Calendaring//EN" in content
        assert "ORGANIZER;CN=Steve:mailto:steve@example.com" in content
        assert content.count("ATTENDEE") == 2
        assert "Recipients: ann@example.com, bob@example.com" in result.output

    def test_cancel_with_uid(self, tmp_path) -> None:
        result = runner.invoke(
            app,
            [
                "event",
                "-s", "Standup",
                "--start", "2012-05-04T13:00:00",
                "--uid", "fixed-uid",
                "--cancel",
                "-o", str(tmp_path),
            ],
        )

        assert result.exit_code == 0, result.output
        content = _written_path(result.output).read_text(encoding="utf-8")
        assert "UID:fixed-uid" in content
        assert "STATUS:CANCELLED" in content
        assert "SEQUENCE:1" in content

    def test_request_without_attendees_fails(self, tmp_path) -> None:
        result = runner.invoke(
            app,
            ["event", "-s", "Lonely", "--start", "2012-05-04T13:00:00", "--method", "REQUEST", "-o", str(tmp_path)],
        )

        assert result.exit_code == 1
        assert "Validation Error" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_bad_start_fails(self, tmp_path) -> None:
        result = runner.invoke(app, ["event", "-s", "Bad", "--start", "tomorrow", "-o", str(tmp_path)])

        assert result.exit_code == 1
        assert "Invalid datetime format" in result.output

    def test_disabled_feature(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("EXTCAL_ENABLED", "false")
        result = runner.invoke(app, ["event", "-s", "Off", "--start", "2012-05-04T13:00:00", "-o", str(tmp_path)])

        assert result.exit_code == 1
        assert "disabled" in result.output

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestValidators:
    def test_parse_user_with_name(self) -> None:
        user = parse_user("Ann Smith <ann@example.com>")
        assert user.email == "ann@example.com"
        assert user.display_name == "Ann Smith"

    def test_parse_user_bare_email(self) -> None:
        user = parse_user("ann@example.com")
        assert user.display_name == "ann@example.com"

    def test_parse_user_rejects_garbage(self) -> None:
        with pytest.raises(ICSValidationError):
            parse_user("nobody")

    def test_date_only_start(self) -> None:
        parsed = parse_event_datetime("2012-05-04")
        assert parsed.hour == 0
        assert parsed.utcoffset().total_seconds() == 0

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ICSValidationError):
            validate_event_request("x", "2012-05-04T13:00:00", "2012-05-04T12:00:00")

    def test_request_fields(self) -> None:
        params = validate_event_request(
            "Planning",
            "2012-05-04T13:00:00",
            None,
            uid="abc",
            sequence=3,
            url="http://example.com",
            method=" cancel ",
        )

        assert params.source.fields == {"vevent_uuid": "abc", "vevent_sequence": "3", "vevent_url": "http://example.com"}
        assert params.source.end == params.source.start
        assert params.method == "CANCEL"

    def test_negative_sequence_rejected(self) -> None:
        with pytest.raises(ICSValidationError):
            validate_event_request("x", "2012-05-04T13:00:00", None, sequence=-1)
