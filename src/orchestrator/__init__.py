"""Orchestration of the analysis run."""

from src.orchestrator.models import RunSummary
from src.orchestrator.sentiment_runner import SentimentRunner

__all__ = ["RunSummary", "SentimentRunner"]
