# src/analyzers/sentiment_result.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class SentimentLabel(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class Thresholds(BaseModel):
    """Boundaries that map a compound score to a label."""

    model_config = ConfigDict(frozen=True)

    positive: float
    negative: float

    @model_validator(mode="after")
    def check_order(self) -> "Thresholds":
        if not self.positive > self.negative:
            raise ValueError("Positive threshold must be greater than negative threshold")
        return self


class SentimentScores(BaseModel):
    """Scores selected for display; unselected scores stay None."""

    model_config = ConfigDict(frozen=True)

    compound: Optional[float] = None
    positive: Optional[float] = None
    negative: Optional[float] = None
    neutral: Optional[float] = None

    @property
    def has_individual(self) -> bool:
        return None not in (self.positive, self.negative, self.neutral)


class SentimentResult(BaseModel):
    """Result from sentiment analysis of one unit of text."""

    model_config = ConfigDict(frozen=True)

    text: str
    label: SentimentLabel
    scores: SentimentScores
    line_number: Optional[int] = None
