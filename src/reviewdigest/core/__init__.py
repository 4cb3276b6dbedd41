"""Core modules for ReviewDigest."""

from .models import *
from .config import settings, Settings
from .lexicon import Lexicon, load_lexicon
from .errors import *

__all__ = [
    "settings",
    "Settings",
    "Lexicon",
    "load_lexicon",
    "Review",
    "Metrics",
    "Sentiment",
    "Highlights",
    "Keyword",
    "TimeTrend",
    "AspectScore",
    "SummaryResult",
]
