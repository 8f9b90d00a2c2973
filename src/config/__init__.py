"""Configuration loading and logging setup."""

from src.config.errors import ConfigError, ConfigIOError, ConfigParseError, LoggingInitError
from src.config.logging_setup import configure_logging, resolve_level
from src.config.settings import (
    AnalysisSettings,
    LoggingSettings,
    RuntimeEnvironment,
    Settings,
    load_settings,
)

__all__ = [
    "AnalysisSettings",
    "ConfigError",
    "ConfigIOError",
    "ConfigParseError",
    "LoggingInitError",
    "LoggingSettings",
    "RuntimeEnvironment",
    "Settings",
    "configure_logging",
    "load_settings",
    "resolve_level",
]
