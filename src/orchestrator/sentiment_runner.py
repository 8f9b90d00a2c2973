"""Runs text units through analysis and reporting in input order."""

import logging
from typing import Iterable

from src.analyzers.sentiment_analyzer import SentimentAnalyzer
from src.inputs.dispatcher import TextUnit
from src.notifications.result_formatter import ConsoleReporter
from src.orchestrator.models import RunSummary

logger = logging.getLogger(__name__)


class SentimentRunner:
    """Coordinates dispatcher output, analyzer and reporter.

    Each unit is scored, classified and printed before the next one is
    read, so output order always follows input order.
    """

    def __init__(self, analyzer: SentimentAnalyzer, reporter: ConsoleReporter):
        self._analyzer = analyzer
        self._reporter = reporter

    def run(self, units: Iterable[TextUnit]) -> RunSummary:
        summary = RunSummary()

        for unit in units:
            if unit.failed:
                summary.errors += 1
                self._reporter.report_error(unit)
                continue

            result = self._analyzer.analyze(unit.text, line_number=unit.line_number)
            if result is None:
                summary.skipped += 1
                continue

            summary.analyzed += 1
            summary.by_label[result.label] += 1
            self._reporter.report(result)

        logger.debug(f"Run complete: {summary.describe()}")
        return summary
