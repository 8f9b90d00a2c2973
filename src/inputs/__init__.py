"""Input dispatch for single texts and line-oriented files."""

from .dispatcher import InputFileError, TextUnit, from_file, from_text

__all__ = [
    "InputFileError",
    "TextUnit",
    "from_file",
    "from_text",
]
