"""Review summarization pipeline."""

import logging
from typing import List, Optional

from ..core.config import Settings, settings as default_settings
from ..core.constants import Messages, NarrativeConstants
from ..core.errors import NarrativeError
from ..core.lexicon import Lexicon, load_lexicon
from ..core.models import Review, Metrics, Sentiment, Highlights, SummaryResult
from ..analysis import (
    calculate_metrics, classify_sentiment, positive_share,
    extract_highlights, extract_keywords, analyze_time_trends, analyze_aspects,
)
from .narrative import NarrativeStrategy, NarrativeStrategyFactory, RuleBasedNarrativeStrategy

logger = logging.getLogger(__name__)


def compose_summary(narrative: str, metrics: Metrics, sentiment: Sentiment) -> str:
    """Metrics preamble followed by the narrative (or a sentiment sentence)."""
    text = Messages.PREAMBLE.format(
        total=metrics.total_reviews, average=f"{metrics.average_rating:.1f}"
    )
    text += Messages.POSITIVE_SHARE.format(percentage=positive_share(metrics))
    
    if narrative and len(narrative) > NarrativeConstants.MIN_NARRATIVE_LENGTH:
        text += narrative
    elif sentiment.type in ("very_positive", "positive"):
        text += Messages.FALLBACK_POSITIVE
    elif sentiment.type in ("negative", "very_negative"):
        text += Messages.FALLBACK_NEGATIVE
    else:
        text += Messages.FALLBACK_NEUTRAL
    return text


def empty_result() -> SummaryResult:
    """Canonical result for an item nobody has reviewed."""
    return SummaryResult(
        summary=Messages.NO_REVIEWS,
        highlights=Highlights(),
        sentiment=Sentiment(type="neutral", label=Messages.NO_DATA_LABEL),
        keywords=[],
        total_reviews=0,
        average_rating="0",
        time_trends=[],
        aspect_analysis={},
        rating_distribution={rating: 0 for rating in range(5, 0, -1)},
    )


class ReviewSummarizer:
    """Builds a SummaryResult for one item's reviews; never raises."""
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        lexicon: Optional[Lexicon] = None,
        strategies: Optional[List[NarrativeStrategy]] = None,
    ):
        self.settings = settings or default_settings
        self.lexicon = lexicon or load_lexicon(self.settings.lexicon_file)
        self.strategies = strategies or NarrativeStrategyFactory.create(self.settings, self.lexicon)
        self.rule_based = RuleBasedNarrativeStrategy(
            lexicon=self.lexicon,
            min_count=self.settings.theme_min_count,
            ratio=self.settings.theme_ratio,
        )
    
    def summarize(self, reviews: Optional[List[Review]]) -> SummaryResult:
        """Summarize the reviews, degrading to simpler output on any failure."""
        try:
            reviews = list(reviews or [])
        except TypeError:
            logger.error(f"Expected a list of reviews, got {type(reviews).__name__}")
            return empty_result()
        if not reviews:
            return empty_result()
        
        try:
            logger.info(f"Summarizing {len(reviews)} reviews...")
            return self._run(reviews)
        except Exception:
            logger.exception("Error in summarize, using rule-based fallback")
            return self._fallback(reviews)
    
    def generate_narrative(self, reviews: List[Review], metrics: Metrics) -> str:
        """First narrative that a strategy manages to produce."""
        for strategy in self.strategies:
            try:
                narrative = strategy.generate(reviews, metrics)
                logger.info(f"Narrative generated by {strategy.name} strategy")
                return narrative
            except NarrativeError as e:
                logger.warning(f"{strategy.name} narrative failed ({type(e).__name__}): {e}")
        return self.rule_based.generate(reviews, metrics)
    
    def _run(self, reviews: List[Review]) -> SummaryResult:
        metrics = calculate_metrics(reviews)
        sentiment = classify_sentiment(metrics.average_rating)
        
        # Independent stages over the same immutable input
        highlights = extract_highlights(reviews)
        keywords = extract_keywords(reviews, self.lexicon)
        time_trends = analyze_time_trends(reviews)
        aspect_analysis = analyze_aspects(reviews, self.lexicon.aspects)
        
        narrative = self.generate_narrative(reviews, metrics)
        
        return SummaryResult(
            summary=compose_summary(narrative, metrics, sentiment),
            highlights=highlights,
            sentiment=sentiment,
            keywords=keywords,
            total_reviews=metrics.total_reviews,
            average_rating=f"{metrics.average_rating:.1f}",
            time_trends=time_trends,
            aspect_analysis=aspect_analysis,
            rating_distribution=dict(metrics.distribution),
        )
    
    def _fallback(self, reviews: List[Review]) -> SummaryResult:
        """Fully deterministic result; last resort is a bare shape-valid one."""
        try:
            metrics = calculate_metrics(reviews)
            sentiment = classify_sentiment(metrics.average_rating)
            narrative = self.rule_based.generate(reviews, metrics)
            return SummaryResult(
                summary=compose_summary(narrative, metrics, sentiment),
                highlights=extract_highlights(reviews),
                sentiment=sentiment,
                keywords=extract_keywords(reviews, self.lexicon),
                total_reviews=metrics.total_reviews,
                average_rating=f"{metrics.average_rating:.1f}",
                time_trends=analyze_time_trends(reviews),
                aspect_analysis=analyze_aspects(reviews, self.lexicon.aspects),
                rating_distribution=dict(metrics.distribution),
            )
        except Exception:
            logger.exception("Rule-based fallback failed, returning minimal summary")
            result = empty_result()
            result.summary = Messages.UNAVAILABLE.format(total=len(reviews))
            result.total_reviews = len(reviews)
            result.sentiment = Sentiment(type="neutral", label=Messages.NO_DATA_LABEL)
            return result
