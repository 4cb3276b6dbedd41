"""Narrative strategies: AI-written and rule-based."""

import logging
import re
from abc import ABC, abstractmethod
from textwrap import dedent
from typing import List, Optional

from ..core.config import Settings, settings as default_settings
from ..core.constants import AnalysisConstants, NarrativeConstants, Messages
from ..core.errors import (
    ConfigurationAbsent, NarrativeError, NoEligibleEvidence,
    ExternalServiceFailure, DegenerateOutput,
)
from ..core.lexicon import Lexicon
from ..core.models import Review, Metrics
from ..analysis.aspect import find_common_themes
from .llm import OpenAIService

logger = logging.getLogger(__name__)

NARRATIVE_PROMPT = dedent("""
Bạn là một chuyên gia phân tích đánh giá sản phẩm. Hãy tóm tắt các đánh giá sau đây thành một đoạn văn ngắn gọn, súc tích bằng tiếng Việt.

Thông tin tổng quan:
- Tổng số đánh giá: {total}
- Điểm trung bình: {average}/5
- Phân bố: {distribution}

Các đánh giá chi tiết:
{reviews}

Yêu cầu:
1. Tóm tắt trong 2-3 câu
2. Nêu rõ điểm mạnh và điểm yếu (nếu có)
3. Đưa ra nhận xét tổng quan về sản phẩm
4. Sử dụng ngôn ngữ tự nhiên, dễ hiểu
5. KHÔNG đề cập đến số liệu cụ thể (vì đã có ở phần khác)

Tóm tắt:""").strip()

_BOLD = re.compile(r"\*\*")
_WS = re.compile(r"\s+")
_LABEL = re.compile(r"^(?:tóm tắt|summary)\s*:?\s*", re.IGNORECASE)


def clean_narrative(text: str) -> str:
    """Strip markdown bold, flatten whitespace and drop an echoed label."""
    cleaned = _BOLD.sub("", (text or "").strip())
    cleaned = _WS.sub(" ", cleaned).strip()
    return _LABEL.sub("", cleaned)


class NarrativeStrategy(ABC):
    """Produces the free-text part of a summary."""
    
    name = "narrative"
    
    @abstractmethod
    def generate(self, reviews: List[Review], metrics: Metrics) -> str:
        """Return narrative text, or raise NarrativeError."""


class AINarrativeStrategy(NarrativeStrategy):
    """Narrative written by the OpenAI chat model."""
    
    name = "ai"
    
    def __init__(self, settings: Settings, service: Optional[OpenAIService] = None):
        if not settings.has_usable_openai_key:
            raise ConfigurationAbsent("OpenAI API key missing or placeholder")
        self.settings = settings
        self.service = service or OpenAIService(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            timeout=settings.narrative_timeout,
        )
    
    def select_evidence(self, reviews: List[Review]) -> List[Review]:
        """Reviews long enough to quote, capped at the evidence limit."""
        eligible = [
            r for r in reviews
            if r.comment and len(r.comment) > NarrativeConstants.MIN_EVIDENCE_COMMENT_LENGTH
        ]
        return eligible[:self.settings.evidence_limit]
    
    def build_prompt(self, evidence: List[Review], metrics: Metrics) -> str:
        distribution = ", ".join(
            f"{rating} sao: {count}" for rating, count in sorted(metrics.distribution.items())
        )
        reviews_text = "\n".join(f"[{r.rating} sao] {r.comment}" for r in evidence)
        return NARRATIVE_PROMPT.format(
            total=metrics.total_reviews,
            average=f"{metrics.average_rating:.1f}",
            distribution=distribution,
            reviews=reviews_text,
        )
    
    def generate(self, reviews: List[Review], metrics: Metrics) -> str:
        evidence = self.select_evidence(reviews)
        if not evidence:
            raise NoEligibleEvidence("No review text long enough to summarize")
        
        prompt = self.build_prompt(evidence, metrics)
        logger.info(f"Requesting AI narrative from {len(evidence)} reviews")
        try:
            raw = self.service.chat(
                system=NarrativeConstants.SYSTEM_PROMPT,
                user=prompt,
                temperature=self.settings.narrative_temperature,
                max_tokens=self.settings.narrative_max_tokens,
            )
        except NarrativeError:
            raise
        except Exception as e:
            raise ExternalServiceFailure(f"OpenAI request failed: {e}") from e
        
        cleaned = clean_narrative(raw)
        if len(cleaned) < NarrativeConstants.MIN_NARRATIVE_LENGTH:
            raise DegenerateOutput(f"Generated summary too short ({len(cleaned)} chars)")
        return cleaned


class RuleBasedNarrativeStrategy(NarrativeStrategy):
    """Deterministic narrative from common themes; never fails."""
    
    name = "rule_based"
    
    def __init__(self, lexicon: Optional[Lexicon] = None, min_count: int = 2, ratio: float = 0.3):
        self.lexicon = lexicon or Lexicon()
        self.min_count = min_count
        self.ratio = ratio
    
    def _themes(self, reviews: List[Review]) -> List[str]:
        return find_common_themes(reviews, self.lexicon.themes, self.min_count, self.ratio)
    
    def generate(self, reviews: List[Review], metrics: Metrics) -> str:
        positive = [r for r in reviews if r.rating >= AnalysisConstants.POSITIVE_RATING]
        negative = [r for r in reviews if r.rating <= AnalysisConstants.NEGATIVE_RATING]
        
        summary = ""
        if positive:
            themes = self._themes(positive)
            if themes:
                summary += Messages.PRAISED_THEMES.format(themes=", ".join(themes))
            else:
                summary += Messages.GENERIC_PRAISE
        
        if negative:
            themes = self._themes(negative)
            if themes:
                summary += Messages.CRITICISED_THEMES.format(themes=", ".join(themes))
            elif len(negative) >= 2:
                summary += Messages.GENERIC_CRITICISM
        
        if metrics.average_rating >= 4:
            summary += Messages.CLOSING_RECOMMEND
        elif metrics.average_rating >= 3:
            summary += Messages.CLOSING_FIT
        else:
            summary += Messages.CLOSING_CAUTION
        return summary


class NarrativeStrategyFactory:
    """Factory for the ordered list of narrative strategies."""
    
    @staticmethod
    def create(settings: Optional[Settings] = None, lexicon: Optional[Lexicon] = None) -> List[NarrativeStrategy]:
        """AI strategy first when configured, rule-based always last."""
        settings = settings or default_settings
        strategies: List[NarrativeStrategy] = []
        try:
            strategies.append(AINarrativeStrategy(settings))
            logger.info("AI narrative enabled")
        except ConfigurationAbsent:
            logger.warning("OpenAI API key not configured - AI summaries disabled, using rule-based narrative")
        
        strategies.append(RuleBasedNarrativeStrategy(
            lexicon=lexicon,
            min_count=settings.theme_min_count,
            ratio=settings.theme_ratio,
        ))
        return strategies
