"""Environment-driven settings for the file engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "TEXTFILE_ENGINE_"

DEFAULT_CHUNK_SIZE = 128 * 1024
CHUNK_ALIGNMENT = 4 * 1024
# Extra capacity reserved on load, like SciTE does.
DEFAULT_ALLOCATION_SLACK = 1000


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _align(size: int) -> int:
    if size <= 0:
        return DEFAULT_CHUNK_SIZE
    return -(-size // CHUNK_ALIGNMENT) * CHUNK_ALIGNMENT


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Tunables shared by the reader, writer, and telemetry layers."""

    chunk_size: int = DEFAULT_CHUNK_SIZE
    allocation_slack: int = DEFAULT_ALLOCATION_SLACK
    max_document_size: int = 0
    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    log_console: bool = True
    log_color: bool = True

    @classmethod
    def from_env(cls) -> "EngineSettings":
        return cls(
            chunk_size=_align(_env_int("CHUNK_SIZE", DEFAULT_CHUNK_SIZE)),
            allocation_slack=max(
                0, _env_int("ALLOCATION_SLACK", DEFAULT_ALLOCATION_SLACK)
            ),
            max_document_size=max(0, _env_int("MAX_DOCUMENT_SIZE", 0)),
            log_level=(_env("LOG_LEVEL") or "INFO").upper(),
            log_file=_env("LOG_FILE") or "",
            log_json=_env_flag("LOG_JSON", False),
            log_console=not _env_flag("DISABLE_CONSOLE", False),
            log_color=not _env_flag("NO_COLOR", False),
        )


_SETTINGS: Optional[EngineSettings] = None


def get_settings() -> EngineSettings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = EngineSettings.from_env()
    return _SETTINGS


def reload_settings() -> EngineSettings:
    """Drop the cached settings and re-read the environment."""

    global _SETTINGS
    _SETTINGS = EngineSettings.from_env()
    return _SETTINGS


__all__ = [
    "ENV_PREFIX",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_ALLOCATION_SLACK",
    "EngineSettings",
    "get_settings",
    "reload_settings",
]
