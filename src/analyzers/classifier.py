# src/analyzers/classifier.py
from src.analyzers.sentiment_result import SentimentLabel


def classify(compound: float, pos_threshold: float, neg_threshold: float) -> SentimentLabel:
    """Map a compound score onto a label.

    Both boundaries are inclusive. When the thresholds are equal a score
    sitting exactly on them is Positive.
    """
    if compound >= pos_threshold:
        return SentimentLabel.POSITIVE
    if compound <= neg_threshold:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL
