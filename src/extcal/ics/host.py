"""Host capabilities consumed by the calendaring core."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional, Protocol

from .config import CalendaringConfig, load_config
from .models import User

logger = logging.getLogger(__name__)


class CalendaringHost(Protocol):
    """Everything the core needs from the surrounding application."""

    def is_feature_enabled(self) -> bool: ...

    def is_cleanup_enabled(self) -> bool: ...

    def resolve_user_email(self, user_id: str) -> str: ...

    def resolve_user_display_name(self, user_id: str) -> str: ...

    def server_identity(self) -> str: ...

    def output_directory(self) -> Path: ...


class DirectoryHost:
    """Host backed by a loaded configuration and an in-memory user directory.

    Unknown users resolve to an empty string, matching a directory lookup
    that found nothing.
    """

    def __init__(
        self,
        config: Optional[CalendaringConfig] = None,
        users: Optional[Mapping[str, User]] = None,
    ) -> None:
        self.config = config or load_config()
        self.users = dict(users or {})

    def add_user(self, user: User) -> None:
        self.users[user.id] = user

    def _lookup(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        if user is None:
            logger.warning("Cannot find user for id: %s", user_id)
        return user

    def is_feature_enabled(self) -> bool:
        return self.config.enabled

    def is_cleanup_enabled(self) -> bool:
        return self.config.cleanup

    def resolve_user_email(self, user_id: str) -> str:
        user = self._lookup(user_id)
        return user.email if user else ""

    def resolve_user_display_name(self, user_id: str) -> str:
        user = self._lookup(user_id)
        return user.display_name if user else ""

    def server_identity(self) -> str:
        return self.config.server_name

    def output_directory(self) -> Path:
        return self.config.output_dir
