# src/notifications/result_formatter.py
"""Formats sentiment results for the console."""
import sys
from typing import Optional, TextIO

from src.analyzers.sentiment_result import SentimentResult
from src.inputs.dispatcher import TextUnit

MAX_DISPLAY_LENGTH = 57
PRECISION = 3


def truncate(text: str, max_length: int = MAX_DISPLAY_LENGTH) -> str:
    """Cut text to its first max_length characters, without a marker."""
    return text if len(text) <= max_length else text[:max_length]


class ResultFormatter:
    """Formats results into readable output lines."""

    def __init__(self, max_length: int = MAX_DISPLAY_LENGTH, precision: int = PRECISION):
        if max_length < 1:
            raise ValueError(f"max_length must be positive, got {max_length}")
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")
        self.max_length = max_length
        self.precision = precision

    def _num(self, value: float) -> str:
        return f"{value:.{self.precision}f}"

    def format_result(self, result: SentimentResult) -> list[str]:
        """Format a result as one headline plus an optional breakdown line."""
        prefix = f"Line {result.line_number}: " if result.line_number is not None else ""
        headline = f"{prefix}{result.label.value}: {truncate(result.text, self.max_length)}"
        if result.scores.compound is not None:
            headline += f" ({self._num(result.scores.compound)})"

        lines = [headline]
        if result.scores.has_individual:
            lines.append(
                f"  pos: {self._num(result.scores.positive)}, "
                f"neg: {self._num(result.scores.negative)}, "
                f"neu: {self._num(result.scores.neutral)}"
            )
        return lines

    def format_read_error(self, unit: TextUnit) -> str:
        return f"Line {unit.line_number}: Error reading - {unit.error}"


class ConsoleReporter:
    """Writes results to stdout and read errors to stderr."""

    def __init__(
        self,
        formatter: Optional[ResultFormatter] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self.formatter = formatter or ResultFormatter()
        self._out = out
        self._err = err

    def report(self, result: SentimentResult) -> None:
        out = self._out or sys.stdout
        for line in self.formatter.format_result(result):
            print(line, file=out)

    def report_error(self, unit: TextUnit) -> None:
        print(self.formatter.format_read_error(unit), file=self._err or sys.stderr)
