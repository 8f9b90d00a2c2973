"""Console output for sentiment results."""

from .result_formatter import ConsoleReporter, ResultFormatter, truncate

__all__ = [
    "ConsoleReporter",
    "ResultFormatter",
    "truncate",
]
