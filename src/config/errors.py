# src/config/errors.py
"""Errors raised while loading configuration or setting up logging."""
from pathlib import Path


class ConfigError(Exception):
    """Configuration could not be loaded from a file."""

    def __init__(self, path: Path, cause: object):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")


class ConfigIOError(ConfigError):
    """Configuration file could not be read."""


class ConfigParseError(ConfigError):
    """Configuration file content is malformed or incomplete."""


class LoggingInitError(Exception):
    """Log file handler could not be created."""
