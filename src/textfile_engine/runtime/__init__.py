"""Runtime services: settings and telemetry."""

from . import telemetry
from .settings import EngineSettings, get_settings, reload_settings

__all__ = ["EngineSettings", "get_settings", "reload_settings", "telemetry"]
