"""Library settings read from environment variables.

Settings are resolved once per process. Tests that change the environment
call `get_settings.cache_clear()` first.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _env_bool(name: str, *, default: bool) -> bool:
    """Parse a boolean environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed boolean value.
    """

    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _env_int(name: str, *, default: int | None) -> int | None:
    """Parse an integer environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set or blank.

    Returns:
        Parsed integer value.
    """

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw.strip())


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class LibrarySettings:
    """Resolved vizconfig settings.

    Args:
        variants_path: Optional override for the chart variant YAML table.
        json_sort_keys: Sort object keys in JSON output for deterministic payloads.
        json_indent: Indent width for pretty JSON output; None means compact.
    """

    variants_path: Path | None = None
    json_sort_keys: bool = False
    json_indent: int | None = None


@lru_cache(maxsize=1)
def get_settings() -> LibrarySettings:
    """Return process-wide settings built from `VIZCONFIG_*` environment variables."""

    return LibrarySettings(
        variants_path=_env_path("VIZCONFIG_VARIANTS_PATH"),
        json_sort_keys=_env_bool("VIZCONFIG_JSON_SORT_KEYS", default=False),
        json_indent=_env_int("VIZCONFIG_JSON_INDENT", default=None),
    )
