"""Configuration loader for calendar file generation."""

from __future__ import annotations

import os
import socket
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import DEFAULTS, ENV_PREFIX
from .errors import ICSConfigError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class CalendaringConfig:
    enabled: bool
    cleanup: bool
    server_name: str
    output_dir: Path


def _env_flag(name: str, default: bool) -> bool:
    variable = f"{ENV_PREFIX}{name}"
    raw = os.getenv(variable)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ICSConfigError(f"Environment variable {variable} must be a boolean, got '{raw}'", variable=variable)


def default_output_dir() -> Path:
    return Path(tempfile.gettempdir())


def resolve_output_dir(path: Optional[Path]) -> Path:
    resolved = (path or default_output_dir()).expanduser()
    return resolved.resolve()


def load_config() -> CalendaringConfig:
    enabled = _env_flag("ENABLED", DEFAULTS["ENABLED"])
    cleanup = _env_flag("CLEANUP", DEFAULTS["CLEANUP"])
    server_name = os.getenv(f"{ENV_PREFIX}SERVER_NAME") or socket.gethostname()
    output_dir = os.getenv(f"{ENV_PREFIX}OUTPUT_DIR")

    return CalendaringConfig(
        enabled=enabled,
        cleanup=cleanup,
        server_name=server_name,
        output_dir=resolve_output_dir(Path(output_dir) if output_dir else None),
    )
