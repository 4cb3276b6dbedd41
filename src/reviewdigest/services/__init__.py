"""Services for ReviewDigest."""

from .llm import OpenAIService
from .narrative import (
    NarrativeStrategy,
    AINarrativeStrategy,
    RuleBasedNarrativeStrategy,
    NarrativeStrategyFactory,
)
from .summarizer import ReviewSummarizer

__all__ = [
    "OpenAIService",
    "NarrativeStrategy",
    "AINarrativeStrategy",
    "RuleBasedNarrativeStrategy",
    "NarrativeStrategyFactory",
    "ReviewSummarizer",
]
