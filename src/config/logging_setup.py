# src/config/logging_setup.py
"""Process-wide logging initialisation."""
import logging
import sys
from pathlib import Path
from typing import Optional

from src.config.errors import LoggingInitError
from src.config.settings import LoggingSettings

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_configured = False


def resolve_level(name: Optional[str]) -> int:
    """Map a level name to a logging level; unknown names give INFO."""
    return LEVELS.get((name or "").strip().lower(), logging.INFO)


def bootstrap_logging() -> None:
    """Console logging for warnings raised before settings are loaded."""
    if _configured:
        return
    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def _build_handler(file: Optional[str]) -> logging.Handler:
    if not file:
        return logging.StreamHandler(sys.stderr)
    try:
        return logging.FileHandler(Path(file), mode="a", encoding="utf-8")
    except OSError as e:
        raise LoggingInitError(f"{file}: {e}") from e


def configure_logging(settings: LoggingSettings) -> bool:
    """Install the root handler once per process.

    Returns:
        True if logging was configured, False if it already had been.
    """
    global _configured

    if _configured:
        logger.debug("Logging already configured, keeping existing handlers")
        return False

    init_error = None
    try:
        handler = _build_handler(settings.file)
    except LoggingInitError as e:
        init_error = e
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logging.basicConfig(level=resolve_level(settings.level), handlers=[handler], force=True)
    _configured = True

    if init_error is not None:
        logger.warning(f"Could not open log file {init_error}. Logging to console")
    return True
