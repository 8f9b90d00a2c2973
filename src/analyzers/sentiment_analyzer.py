# src/analyzers/sentiment_analyzer.py
import logging
from typing import Optional, Protocol

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from src.analyzers.classifier import classify
from src.analyzers.sentiment_result import (
    SentimentResult,
    SentimentScores,
    Thresholds,
)

logger = logging.getLogger(__name__)


class SentimentScorer(Protocol):
    def polarity_scores(self, text: str) -> dict: ...


class VaderScorer:
    """VADER lexicon scorer. The analyzer is built once and shared."""

    _analyzer: Optional[SentimentIntensityAnalyzer] = None

    @staticmethod
    def _ensure() -> SentimentIntensityAnalyzer:
        if VaderScorer._analyzer is None:
            VaderScorer._analyzer = SentimentIntensityAnalyzer()
            logger.debug("VADER lexicon loaded")
        return VaderScorer._analyzer

    def polarity_scores(self, text: str) -> dict:
        """Return the compound, pos, neg and neu scores for text."""
        return self._ensure().polarity_scores(text)


class SentimentAnalyzer:
    """Scores text and classifies it against a threshold pair."""

    def __init__(
        self,
        thresholds: Thresholds,
        scorer: Optional[SentimentScorer] = None,
        include_compound: bool = True,
        include_individual: bool = False,
    ):
        """Initialize the sentiment analyzer.

        Args:
            thresholds: Positive/negative boundaries for classification.
            scorer: Object with a polarity_scores method. Defaults to VADER.
            include_compound: Keep the compound score in results.
            include_individual: Keep the pos/neg/neu breakdown in results.
        """
        self.thresholds = thresholds
        self.scorer = scorer or VaderScorer()
        self.include_compound = include_compound
        self.include_individual = include_individual

    def analyze(self, text: str, line_number: Optional[int] = None) -> Optional[SentimentResult]:
        """Analyze a single text.

        Returns None for blank text. The untrimmed text is scored since
        capitalisation and punctuation carry signal.
        """
        if not text or not text.strip():
            return None

        scores = self.scorer.polarity_scores(text)
        compound = float(scores.get("compound", 0.0))
        label = classify(compound, self.thresholds.positive, self.thresholds.negative)
        logger.debug(f"Scored text ({len(text)} chars): compound={compound:.4f} label={label.value}")

        selected = {}
        if self.include_compound:
            selected["compound"] = compound
        if self.include_individual:
            selected["positive"] = float(scores.get("pos", 0.0))
            selected["negative"] = float(scores.get("neg", 0.0))
            selected["neutral"] = float(scores.get("neu", 0.0))

        return SentimentResult(
            text=text,
            label=label,
            scores=SentimentScores(**selected),
            line_number=line_number,
        )
