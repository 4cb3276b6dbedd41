"""Keyword-driven aspect scoring and theme detection."""

import logging
from typing import Dict, List

from ..core.models import Review, AspectScore
from .metrics import mean_rating

logger = logging.getLogger(__name__)


def mentions_any(text: str, keywords: List[str]) -> bool:
    """Case-insensitive substring match against a keyword list."""
    text_lower = text.lower()
    return any(keyword in text_lower for keyword in keywords)


def analyze_aspects(reviews: List[Review], aspects: Dict[str, List[str]]) -> Dict[str, AspectScore]:
    """Average rating of the reviews mentioning each aspect.
    
    A review counts towards every aspect it mentions. Aspects nobody
    mentions are left out.
    """
    pools: Dict[str, List[int]] = {name: [] for name in aspects}
    for review in reviews:
        if not review.comment:
            continue
        for name, keywords in aspects.items():
            if mentions_any(review.comment, keywords):
                pools[name].append(review.rating)
    
    return {
        name: AspectScore(aspect=name, score=mean_rating(ratings), count=len(ratings))
        for name, ratings in pools.items()
        if ratings
    }


def find_common_themes(
    reviews: List[Review],
    themes: Dict[str, List[str]],
    min_count: int = 2,
    ratio: float = 0.3,
) -> List[str]:
    """Themes mentioned by at least max(min_count, ratio * len(reviews)) reviews."""
    threshold = max(min_count, ratio * len(reviews))
    found = []
    for theme, keywords in themes.items():
        count = sum(1 for r in reviews if r.comment and mentions_any(r.comment, keywords))
        if count >= threshold:
            found.append(theme)
    logger.debug(f"Common themes over {len(reviews)} reviews: {found}")
    return found
