"""Tests for the AI and rule-based narrative strategies."""

import threading
import time
from unittest.mock import Mock

import pytest

from reviewdigest.analysis.metrics import calculate_metrics
from reviewdigest.core.config import Settings
from reviewdigest.core.errors import (
    ConfigurationAbsent, NoEligibleEvidence, ExternalServiceFailure, DegenerateOutput,
)
from reviewdigest.services.llm import OpenAIService
from reviewdigest.services.narrative import (
    AINarrativeStrategy, RuleBasedNarrativeStrategy, NarrativeStrategyFactory, clean_narrative,
)
from conftest import make_review


def fake_client(content=None, side_effect=None):
    """OpenAI client double returning one chat completion."""
    client = Mock()
    create = client.chat.completions.create
    if side_effect is not None:
        create.side_effect = side_effect
    else:
        create.return_value.choices = [Mock(message=Mock(content=content))]
    return client


LONG_REVIEWS = [
    make_review(5, "Chất lượng rất tốt, dùng bền và đẹp."),
    make_review(4, "Giao hàng nhanh, đóng gói cẩn thận."),
    make_review(2, "Pin yếu hơn mong đợi, hơi thất vọng."),
]


class TestCleanNarrative:
    """Tests for clean_narrative()."""
    
    def test_strips_markup_and_whitespace(self):
        raw = "  **Tóm tắt:** Sản phẩm **tốt**.\n\nGiao hàng   nhanh.  "
        assert clean_narrative(raw) == "Sản phẩm tốt. Giao hàng nhanh."
    
    def test_strips_english_label(self):
        assert clean_narrative("Summary: Works well overall.") == "Works well overall."
    
    def test_none(self):
        assert clean_narrative(None) == ""


class TestAINarrativeStrategy:
    """Tests for AINarrativeStrategy."""
    
    def setup_method(self):
        self.metrics = calculate_metrics(LONG_REVIEWS)
    
    def _strategy(self, settings, client):
        service = OpenAIService(api_key="unused", timeout=settings.narrative_timeout, client=client)
        return AINarrativeStrategy(settings, service=service)
    
    @pytest.mark.parametrize("key", ["", "   ", "YOUR_API_KEY_HERE", "your_key_here"])
    def test_unusable_key_disables_strategy(self, key):
        settings = Settings(_env_file=None, openai_api_key=key)
        with pytest.raises(ConfigurationAbsent):
            AINarrativeStrategy(settings)
    
    def test_returns_cleaned_text(self, ai_settings):
        client = fake_client("**Tóm tắt:** Khách hàng khen chất lượng và giao hàng nhanh.")
        strategy = self._strategy(ai_settings, client)
        
        narrative = strategy.generate(LONG_REVIEWS, self.metrics)
        
        assert narrative == "Khách hàng khen chất lượng và giao hàng nhanh."
        client.chat.completions.create.assert_called_once()
    
    def test_prompt_contains_metrics_and_evidence(self, ai_settings):
        client = fake_client("Khách hàng khen chất lượng và giao hàng nhanh.")
        strategy = self._strategy(ai_settings, client)
        strategy.generate(LONG_REVIEWS + [make_review(3, "Tạm")], self.metrics)
        
        messages = client.chat.completions.create.call_args.kwargs["messages"]
        prompt = messages[-1]["content"]
        assert "Tổng số đánh giá: 3" in prompt
        assert "Điểm trung bình: 3.7/5" in prompt
        assert "Phân bố: 1 sao: 0, 2 sao: 1, 3 sao: 0, 4 sao: 1, 5 sao: 1" in prompt
        assert "[2 sao] Pin yếu hơn mong đợi, hơi thất vọng." in prompt
        assert "Tạm" not in prompt
    
    def test_evidence_capped(self):
        settings = Settings(_env_file=None, openai_api_key="sk-test", evidence_limit=2)
        strategy = self._strategy(settings, fake_client("x"))
        assert len(strategy.select_evidence(LONG_REVIEWS)) == 2
    
    def test_no_evidence_skips_call(self, ai_settings):
        client = fake_client("unused")
        strategy = self._strategy(ai_settings, client)
        
        with pytest.raises(NoEligibleEvidence):
            strategy.generate([make_review(5, "Tốt"), make_review(4, "")], self.metrics)
        client.chat.completions.create.assert_not_called()
    
    def test_short_output_is_degenerate(self, ai_settings):
        strategy = self._strategy(ai_settings, fake_client("**Tóm tắt:** Tốt."))
        with pytest.raises(DegenerateOutput):
            strategy.generate(LONG_REVIEWS, self.metrics)
    
    def test_client_error_is_service_failure(self, ai_settings):
        strategy = self._strategy(ai_settings, fake_client(side_effect=RuntimeError("boom")))
        with pytest.raises(ExternalServiceFailure):
            strategy.generate(LONG_REVIEWS, self.metrics)
    
    def test_timeout_is_service_failure(self, ai_settings):
        release = threading.Event()
        
        def slow_create(**kwargs):
            release.wait(5)
            return Mock(choices=[Mock(message=Mock(content="Câu trả lời đến quá muộn rồi."))])
        
        strategy = self._strategy(ai_settings, fake_client(side_effect=slow_create))
        started = time.monotonic()
        try:
            with pytest.raises(ExternalServiceFailure) as exc_info:
                strategy.generate(LONG_REVIEWS, self.metrics)
        finally:
            release.set()
        
        assert exc_info.value.reason == "timeout"
        assert time.monotonic() - started < 2


class TestRuleBasedNarrativeStrategy:
    """Tests for RuleBasedNarrativeStrategy."""
    
    def setup_method(self):
        self.strategy = RuleBasedNarrativeStrategy()
    
    def test_praised_and_criticised_themes(self):
        reviews = [
            make_review(5, "Chất lượng tốt, giao nhanh"),
            make_review(5, "Hàng bền, ship nhanh"),
            make_review(4, "Đẹp"),
            make_review(1, "Giá đắt quá"),
            make_review(2, "Tiền nào của nấy, giá cao"),
        ]
        narrative = self.strategy.generate(reviews, calculate_metrics(reviews))
        
        assert narrative == (
            "Khách hàng đánh giá cao về chất lượng, giao hàng. "
            "Một số khách hàng chưa hài lòng về giá cả. "
            "Sản phẩm phù hợp với nhiều khách hàng."
        )
    
    def test_generic_statements(self):
        reviews = [make_review(5, "Ổn"), make_review(1, "Tệ"), make_review(2, "Chán")]
        narrative = self.strategy.generate(reviews, calculate_metrics(reviews))
        
        assert narrative == (
            "Nhiều khách hàng hài lòng với sản phẩm. "
            "Một số khách hàng gặp vấn đề với sản phẩm. "
            "Cần cân nhắc kỹ trước khi mua sản phẩm này."
        )
    
    def test_single_negative_without_theme_is_silent(self):
        reviews = [make_review(5), make_review(5), make_review(5), make_review(1, "Tệ")]
        narrative = self.strategy.generate(reviews, calculate_metrics(reviews))
        assert narrative == (
            "Nhiều khách hàng hài lòng với sản phẩm. "
            "Đây là sản phẩm được đánh giá cao và đáng tin cậy."
        )


class TestNarrativeStrategyFactory:
    """Tests for NarrativeStrategyFactory.create()."""
    
    def test_rule_based_only_without_key(self, offline_settings):
        strategies = NarrativeStrategyFactory.create(offline_settings)
        assert [s.name for s in strategies] == ["rule_based"]
    
    def test_ai_first_with_key(self, ai_settings):
        strategies = NarrativeStrategyFactory.create(ai_settings)
        assert [s.name for s in strategies] == ["ai", "rule_based"]
