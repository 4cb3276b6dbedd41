"""Deterministic analysis stages."""

from .metrics import calculate_metrics, classify_sentiment, positive_share, round_half_up
from .highlights import extract_highlights
from .keywords import extract_keywords
from .trends import analyze_time_trends
from .aspect import analyze_aspects, find_common_themes

__all__ = [
    "calculate_metrics",
    "classify_sentiment",
    "positive_share",
    "round_half_up",
    "extract_highlights",
    "extract_keywords",
    "analyze_time_trends",
    "analyze_aspects",
    "find_common_themes",
]
