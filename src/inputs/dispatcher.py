# src/inputs/dispatcher.py
"""Turns command line input into an ordered sequence of text units."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

MAX_CONSECUTIVE_READ_ERRORS = 3


class InputFileError(Exception):
    """Input file could not be opened."""

    def __init__(self, path: Path, cause: OSError):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Cannot read {self.path}: {cause.strerror or cause}")


@dataclass(frozen=True)
class TextUnit:
    """One unit of work: a text to analyze or a line that failed to read."""

    line_number: Optional[int]
    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def from_text(text: str) -> Iterator[TextUnit]:
    """Single-text mode: the raw argument, unnumbered."""
    yield TextUnit(line_number=None, text=text)


def _strip_newline(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def from_file(path: Path, encoding: str = "utf-8") -> Iterator[TextUnit]:
    """Stream a file line by line.

    Lines are numbered from 1 by their position in the file. Blank lines
    are skipped but still counted. A line that cannot be decoded or read
    yields a unit carrying the error and reading carries on with the next
    line. After MAX_CONSECUTIVE_READ_ERRORS failed reads in a row the file
    is abandoned.

    Raises:
        InputFileError: If the file cannot be opened.
    """
    path = Path(path)
    try:
        handle = open(path, "rb")
    except OSError as e:
        raise InputFileError(path, e) from e

    with handle:
        line_number = 0
        failed_reads = 0
        while True:
            line_number += 1
            try:
                raw = next(handle)
            except StopIteration:
                return
            except OSError as e:
                failed_reads += 1
                logger.debug(f"Line {line_number}: read failed ({e})")
                yield TextUnit(line_number=line_number, error=str(e))
                if failed_reads >= MAX_CONSECUTIVE_READ_ERRORS:
                    logger.warning(f"Stopped reading {path} after {failed_reads} failed reads")
                    return
                continue
            failed_reads = 0

            try:
                text = _strip_newline(raw).decode(encoding)
            except UnicodeDecodeError as e:
                logger.debug(f"Line {line_number}: undecodable bytes ({e})")
                yield TextUnit(line_number=line_number, error=str(e))
                continue

            if not text.strip():
                logger.debug(f"Line {line_number}: blank, skipped")
                continue
            yield TextUnit(line_number=line_number, text=text)
