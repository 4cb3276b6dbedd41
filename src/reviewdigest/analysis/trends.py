"""Monthly rating trend."""

from collections import defaultdict
from datetime import datetime, timezone
from typing import List

from ..core.models import Review, TimeTrend
from .metrics import mean_rating


def month_key(created_at: datetime) -> str:
    """YYYY-MM of a timestamp in UTC; naive timestamps are treated as UTC."""
    if created_at.tzinfo is not None:
        created_at = created_at.astimezone(timezone.utc)
    return created_at.strftime("%Y-%m")


def analyze_time_trends(reviews: List[Review]) -> List[TimeTrend]:
    """Average rating per month, oldest month first."""
    monthly = defaultdict(list)
    for review in reviews:
        if review.created_at is None:
            continue
        monthly[month_key(review.created_at)].append(review.rating)
    
    # YYYY-MM sorts chronologically as a string
    return [
        TimeTrend(month=month, average_rating=mean_rating(ratings), review_count=len(ratings))
        for month, ratings in sorted(monthly.items())
    ]
