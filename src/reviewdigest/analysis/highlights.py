"""Highlight extraction from strongly positive and negative reviews."""

import re
from typing import List, Optional

from ..core.constants import AnalysisConstants
from ..core.models import Review, Highlights

_SENTENCE_SPLIT = re.compile(r"[.!?]")


def first_sentence(comment: str) -> Optional[str]:
    """First sentence whose trimmed length exceeds the minimum, if any."""
    for sentence in _SENTENCE_SPLIT.split(comment):
        sentence = sentence.strip()
        if len(sentence) > AnalysisConstants.MIN_HIGHLIGHT_SENTENCE_LENGTH:
            return sentence
    return None


def _pick(reviews: List[Review]) -> List[str]:
    picked = []
    for review in reviews[:AnalysisConstants.MAX_HIGHLIGHTS]:
        sentence = first_sentence(review.comment)
        # A review without a usable sentence leaves its slot empty
        if sentence:
            picked.append(sentence)
    return picked


def extract_highlights(reviews: List[Review]) -> Highlights:
    """One representative sentence from up to three reviews on each side."""
    min_length = AnalysisConstants.MIN_HIGHLIGHT_COMMENT_LENGTH
    
    good = sorted(
        (r for r in reviews
         if r.rating >= AnalysisConstants.POSITIVE_RATING and len(r.comment or "") > min_length),
        key=lambda r: r.rating,
        reverse=True,
    )
    bad = sorted(
        (r for r in reviews
         if r.rating <= AnalysisConstants.NEGATIVE_RATING and len(r.comment or "") > min_length),
        key=lambda r: r.rating,
    )
    
    return Highlights(pros=_pick(good), cons=_pick(bad))
