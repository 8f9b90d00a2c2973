"""Analyzers package for sentiment scoring and classification."""

from src.analyzers.sentiment_result import (
    SentimentLabel,
    SentimentResult,
    SentimentScores,
    Thresholds,
)
from src.analyzers.classifier import classify
from src.analyzers.sentiment_analyzer import SentimentAnalyzer, SentimentScorer, VaderScorer

__all__ = [
    "SentimentAnalyzer",
    "SentimentLabel",
    "SentimentResult",
    "SentimentScorer",
    "SentimentScores",
    "Thresholds",
    "VaderScorer",
    "classify",
]
