"""Telemetry services for file operations, built on telelog.

The rest of the engine only touches a small surface:

``configure(...)`` -- adopt an explicit config, a preset, or the env defaults
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- profile a block and optionally track it as a component
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

from .settings import EngineSettings, get_settings

tl = cast(Any, telelog)

DEFAULT_LOGGER_NAME = "textfile_engine"

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _config_from_settings(settings: EngineSettings) -> Any:
    config = tl.Config()
    config.with_min_level(settings.log_level)
    config.with_console_output(settings.log_console)
    if settings.log_console:
        config.with_colored_output(settings.log_color)
    if settings.log_json:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    config.with_profiling(True)
    return config


def _build_preset_config(preset: str) -> Any:
    settings = get_settings()
    config = tl.Config()
    key = preset.lower()

    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif key == "quiet":
        # Batch/scripted runs: nothing on the console, errors still land on disk.
        config.with_min_level("WARNING")
        config.with_console_output(False)
        config.with_file_output(settings.log_file or "textfile_engine.log")
        config.with_buffering(True)
    else:
        raise ValueError(f"Unknown preset '{preset}'.")

    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active telelog configuration.

    Parameters
    ----------
    config:
        Explicit ``tl.Config`` instance to adopt.
    preset:
        ``"development"`` or ``"quiet"``. Mutually exclusive with ``config``.
        With neither, the configuration is rebuilt from ``EngineSettings``.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _build_preset_config(preset)
    elif config is None:
        config = _config_from_settings(get_settings())

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def _ensure_config() -> Any:
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _config_from_settings(get_settings())
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for this engine."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(
            logger_name, _ensure_config()
        )
    return _LOGGER_CACHE[logger_name]


def _resolve_level_method(logger: Any, level: Any) -> Tuple[Any, bool]:
    name = str(level).lower()
    with_attr = getattr(logger, f"{name}_with", None)
    if with_attr is not None:
        return with_attr, True
    attr = getattr(logger, name, None)
    if attr is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return attr, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, accepts_data = _resolve_level_method(logger, level)
    if accepts_data:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` line."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` for metadata updates and explicit outcomes."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _payload(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update({key: _stringify(val) for key, val in extra.items()})
        return payload

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload({"reason": reason}))

    def cancel(self, reason: str | None = None) -> None:
        extra = {"reason": reason} if reason else None
        _emit(self.logger, "warning", "span::cancel", self._payload(extra))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block and, when ``component`` is given, track it as one.

    ``component=True`` reuses ``name`` as the component id. Metadata is
    attached as logger context for the lifetime of the block.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None

    context_keys = []
    metadata_payload: Dict[str, Any] = {}
    for key, value in (metadata or {}).items():
        serialized = _stringify(value)
        metadata_payload[key] = serialized
        log.add_context(key, serialized)
        context_keys.append(key)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=cast(Optional[str], component_name),
            metadata=metadata_payload,
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in context_keys:
                log.remove_context(key)


__all__ = [
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
