"""Data models for ReviewDigest."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

from .constants import AnalysisConstants
from .errors import InvalidReview


def _parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO string, epoch number or datetime; None if unusable."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # Epoch milliseconds are common in JSON exports
        seconds = value / 1000.0 if value > 1e11 else float(value)
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class Review:
    """A single customer review of one catalog item."""
    rating: int
    comment: str = ""
    created_at: Optional[datetime] = None
    
    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Review":
        """Build a Review from a raw JSON record."""
        rating = record.get("rating")
        if isinstance(rating, bool) or not isinstance(rating, (int, float)) or not float(rating).is_integer():
            raise InvalidReview(f"rating must be an integer, got {rating!r}")
        rating = int(rating)
        if not AnalysisConstants.MIN_RATING <= rating <= AnalysisConstants.MAX_RATING:
            raise InvalidReview(f"rating out of range: {rating}")
        
        comment = record.get("comment") or ""
        created = record.get("createdAt", record.get("created_at"))
        return cls(
            rating=rating,
            comment=str(comment),
            created_at=_parse_timestamp(created),
        )


@dataclass
class Metrics:
    """Quantitative summary of the ratings."""
    total_reviews: int
    average_rating: float
    distribution: Dict[int, int]
    
    @property
    def positive_count(self) -> int:
        return sum(
            count for rating, count in self.distribution.items()
            if rating >= AnalysisConstants.POSITIVE_RATING
        )


@dataclass
class Sentiment:
    """Coarse sentiment bucket derived from the average rating."""
    type: str
    label: str


@dataclass
class Highlights:
    """Representative sentences from strong reviews."""
    pros: List[str] = field(default_factory=list)
    cons: List[str] = field(default_factory=list)


@dataclass
class Keyword:
    """A salient term and how often it occurs."""
    word: str
    count: int


@dataclass
class TimeTrend:
    """Average rating for one calendar month."""
    month: str  # YYYY-MM
    average_rating: float
    review_count: int


@dataclass
class AspectScore:
    """Average rating of the reviews mentioning one aspect."""
    aspect: str
    score: float
    count: int


@dataclass
class SummaryResult:
    """Everything the storefront shows about an item's reviews."""
    summary: str
    highlights: Highlights
    sentiment: Sentiment
    keywords: List[Keyword]
    total_reviews: int
    average_rating: str
    time_trends: List[TimeTrend]
    aspect_analysis: Dict[str, AspectScore]
    rating_distribution: Dict[int, int] = field(default_factory=dict)
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON shape consumed by the storefront."""
        return {
            "summary": self.summary,
            "highlights": {
                "pros": list(self.highlights.pros),
                "cons": list(self.highlights.cons),
            },
            "sentiment": {"type": self.sentiment.type, "label": self.sentiment.label},
            "keywords": [{"word": k.word, "count": k.count} for k in self.keywords],
            "totalReviews": self.total_reviews,
            "averageRating": self.average_rating,
            "ratingDistribution": {
                str(rating): self.rating_distribution.get(rating, 0)
                for rating in range(AnalysisConstants.MAX_RATING, AnalysisConstants.MIN_RATING - 1, -1)
            },
            "timeTrends": [
                {
                    "month": t.month,
                    "averageRating": f"{t.average_rating:.1f}",
                    "reviewCount": t.review_count,
                }
                for t in self.time_trends
            ],
            "aspectAnalysis": {
                name: {"score": f"{a.score:.1f}", "count": a.count}
                for name, a in self.aspect_analysis.items()
            },
        }
