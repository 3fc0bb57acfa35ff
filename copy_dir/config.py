"""Settings read from the environment, with a .env file as fallback."""

from __future__ import annotations

import os
from pathlib import Path
from typing import get_args

from .types import ErrorMode

_QUOTES = ('"', "'")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def read_env_file(keys: list[str], env_file: Path | None = None) -> dict[str, str]:
    """Return the requested keys from a .env file (default: ./.env).

    Values are not exported to os.environ. Blank lines, comments, lines
    without "=" and empty values are skipped; one pair of matching quotes
    around a value is removed.
    """
    path = env_file or Path.cwd() / ".env"
    try:
        lines = path.read_text().splitlines()
    except OSError:
        return {}

    wanted = set(keys)
    found: dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or key not in wanted:
            continue
        value = _unquote(value.strip())
        if value:
            found[key] = value
    return found


def get_setting(name: str, default: str) -> str:
    """Look up a setting in os.environ first, then .env, then the default."""
    if os.environ.get(name):
        return os.environ[name]
    return read_env_file([name]).get(name, default)


def resolve_error_mode(value: str | None) -> ErrorMode:
    """Normalize a handler mode name, falling back to "collect"."""
    mode = (value or "").strip().lower()
    if mode in get_args(ErrorMode):
        return mode  # type: ignore[return-value]
    return "collect"


LOG_LEVEL: str = get_setting("LOG_LEVEL", "INFO").upper()
DEFAULT_ERROR_MODE: ErrorMode = resolve_error_mode(get_setting("COPY_DIR_ON_ERROR", "collect"))
