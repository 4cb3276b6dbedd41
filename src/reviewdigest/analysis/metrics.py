"""Rating metrics and sentiment classification."""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence

from ..core.constants import AnalysisConstants
from ..core.models import Review, Metrics, Sentiment

logger = logging.getLogger(__name__)

# (lower bound, type, label), checked top-down
SENTIMENT_THRESHOLDS = [
    (4.5, "very_positive", "Rất tích cực"),
    (3.5, "positive", "Tích cực"),
    (2.5, "neutral", "Trung bình"),
    (1.5, "negative", "Tiêu cực"),
]
VERY_NEGATIVE = ("very_negative", "Rất tiêu cực")


def round_half_up(value: float, digits: int = 1) -> float:
    """Round half up on the exact binary value of the float, not its repr.
    
    29 / 20 is stored as 1.4499... and rounds to 1.4; 4.25 is exact and
    rounds to 4.3.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def mean_rating(ratings: Sequence[int]) -> float:
    """Mean rating rounded to one decimal; 0 for no ratings."""
    if not ratings:
        return 0.0
    return round_half_up(sum(ratings) / len(ratings), 1)


def calculate_metrics(reviews: List[Review]) -> Metrics:
    """Compute the rating distribution and average."""
    distribution = {
        rating: 0
        for rating in range(AnalysisConstants.MAX_RATING, AnalysisConstants.MIN_RATING - 1, -1)
    }
    for review in reviews:
        distribution[review.rating] += 1
    
    return Metrics(
        total_reviews=len(reviews),
        average_rating=mean_rating([r.rating for r in reviews]),
        distribution=distribution,
    )


def classify_sentiment(average_rating: float) -> Sentiment:
    """Map an average rating to a sentiment bucket."""
    for lower_bound, sentiment_type, label in SENTIMENT_THRESHOLDS:
        if average_rating >= lower_bound:
            return Sentiment(type=sentiment_type, label=label)
    return Sentiment(*VERY_NEGATIVE)


def positive_share(metrics: Metrics) -> int:
    """Percentage of 4 and 5 star reviews, rounded half up to a whole number."""
    if not metrics.total_reviews:
        return 0
    return int(round_half_up(metrics.positive_count / metrics.total_reviews * 100, 0))
