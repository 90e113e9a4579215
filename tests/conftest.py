"""Shared fixtures for extcal tests.

The fake host plays the part of the surrounding application: it knows a few
users, writes into a per-test directory, and can be switched off.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, List
from uuid import uuid4

import pytest

from extcal.ics import CalendaringService, SourceEvent, User

EVENT_NAME = "A new event"
LOCATION = "Building 1"
DESCRIPTION = "This is a sample event."
CREATOR = "steve"
START = datetime(2012, 5, 4, 13, 0, tzinfo=timezone.utc)
END = datetime(2012, 5, 4, 14, 0, tzinfo=timezone.utc)


class FakeHost:
    NO_EMAIL_ID = "noEmailPlease"
    BROKEN_ID = "lookupExplodes"
    NO_NAME_ID = "noNamePlease"

    def __init__(self, output_dir: Path, enabled: bool = True, cleanup: bool = False) -> None:
        self.output_dir = output_dir
        self.enabled = enabled
        self.cleanup = cleanup
        self.lookups: List[str] = []

    def is_feature_enabled(self) -> bool:
        return self.enabled

    def is_cleanup_enabled(self) -> bool:
        return self.cleanup

    def resolve_user_email(self, user_id: str) -> str:
        self.lookups.append(user_id)
        if user_id == self.BROKEN_ID:
            raise LookupError(f"no such user {user_id}")
        return "" if user_id == self.NO_EMAIL_ID else f"{user_id}@email.com"

    def resolve_user_display_name(self, user_id: str) -> str:
        return "" if user_id == self.NO_NAME_ID else f"User {user_id}"

    def server_identity(self) -> str:
        return "server_xyz"

    def output_directory(self) -> Path:
        return self.output_dir


def unfold(data: bytes) -> List[str]:
    """Split rendered iCalendar bytes into unfolded content lines."""
    return data.decode("utf-8").replace("\r\n ", "").split("\r\n")


@pytest.fixture
def host(tmp_path: Path) -> FakeHost:
    return FakeHost(tmp_path / "ics")


@pytest.fixture
def disabled_host(tmp_path: Path) -> FakeHost:
    return FakeHost(tmp_path / "ics", enabled=False)


@pytest.fixture
def service(host: FakeHost) -> CalendaringService:
    return CalendaringService(host)


@pytest.fixture
def make_source() -> Callable[..., SourceEvent]:
    def factory(creator: str = CREATOR, **fields: Any) -> SourceEvent:
        return SourceEvent(
            id=str(uuid4()),
            display_name=EVENT_NAME,
            start=START,
            end=END,
            description=DESCRIPTION,
            location=LOCATION,
            creator=creator,
            fields={key: str(value) for key, value in fields.items()},
        )

    return factory


@pytest.fixture
def users() -> List[User]:
    return [User(id=f"user{i}", email=f"user{i}@email.com", display_name=f"User {i}") for i in range(5)]
