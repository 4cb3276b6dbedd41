"""ReviewDigest - review aggregation and summarization engine."""

__version__ = "1.0.0"
__author__ = "ReviewDigest Team"

from .core.models import *
from .core.config import settings, Settings
from .core.lexicon import Lexicon, load_lexicon
from .services.summarizer import ReviewSummarizer
from .services.narrative import NarrativeStrategyFactory

__all__ = [
    "settings",
    "Settings",
    "Lexicon",
    "load_lexicon",
    "Review",
    "SummaryResult",
    "ReviewSummarizer",
    "NarrativeStrategyFactory",
]
