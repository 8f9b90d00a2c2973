"""Data models for the sentiment runner."""

from dataclasses import dataclass, field

from src.analyzers.sentiment_result import SentimentLabel


@dataclass
class RunSummary:
    """Counts collected over one run."""

    analyzed: int = 0
    skipped: int = 0
    errors: int = 0
    by_label: dict[SentimentLabel, int] = field(
        default_factory=lambda: {label: 0 for label in SentimentLabel}
    )

    def describe(self) -> str:
        labels = ", ".join(f"{label.value}={count}" for label, count in self.by_label.items())
        return (
            f"{self.analyzed} analyzed ({labels}), "
            f"{self.skipped} skipped, {self.errors} read errors"
        )
