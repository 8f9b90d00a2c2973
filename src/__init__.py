"""Sentiment classification for single texts and line-oriented files."""
