"""Frequency-ranked keyword extraction."""

from typing import List, Iterable

from ..core.constants import AnalysisConstants
from ..core.lexicon import Lexicon
from ..core.models import Review, Keyword

_STRIP_TABLE = str.maketrans("", "", AnalysisConstants.KEYWORD_PUNCTUATION)


def tokenize(comment: str, stopwords: Iterable[str]) -> List[str]:
    """Lowercase, drop punctuation, and keep only meaningful tokens."""
    words = comment.lower().translate(_STRIP_TABLE).split()
    return [
        word for word in words
        if len(word) > AnalysisConstants.MIN_KEYWORD_LENGTH
        and word not in stopwords
        and not word.isdigit()
    ]


def extract_keywords(reviews: List[Review], lexicon: Lexicon) -> List[Keyword]:
    """Top keywords across all comments, most frequent first.
    
    Words seen only once are dropped. Equal counts keep first-seen order
    because dict insertion order survives the stable sort.
    """
    counts = {}
    for review in reviews:
        if not review.comment:
            continue
        for word in tokenize(review.comment, lexicon.stopwords):
            counts[word] = counts.get(word, 0) + 1
    
    frequent = [(w, c) for w, c in counts.items() if c > AnalysisConstants.MIN_KEYWORD_COUNT]
    frequent.sort(key=lambda item: item[1], reverse=True)
    return [Keyword(word=w, count=c) for w, c in frequent[:AnalysisConstants.MAX_KEYWORDS]]
