"""Stopwords and keyword taxonomies used by the text analysis stages."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, FrozenSet, Optional

import yaml

logger = logging.getLogger(__name__)


# Vietnamese function words plus generic shopping nouns ("sản phẩm", "mua", "hàng")
DEFAULT_STOPWORDS = frozenset({
    "và", "là", "của", "có", "được", "cho", "với", "này", "khi", "để",
    "từ", "trong", "rất", "cũng", "nên", "vì", "do", "nếu", "thì",
    "mình", "tôi", "sản", "phẩm", "mua", "hàng", "nhưng", "như",
    "một", "những", "các", "đã", "sẽ", "về", "cái", "đến", "không",
    "bạn", "đó", "vậy", "thế", "nó", "ấy", "họ", "ta",
})

# Aspect name -> keywords, matched as lowercase substrings
DEFAULT_ASPECTS = {
    "quality": ["chất lượng", "bền", "tốt", "xấu", "kém", "đẹp"],
    "price": ["giá", "rẻ", "đắt", "hợp lý", "tiền"],
    "delivery": ["giao", "ship", "nhanh", "chậm", "vận chuyển"],
    "service": ["phục vụ", "hỗ trợ", "tư vấn", "chăm sóc"],
    "packaging": ["đóng gói", "bao bì", "gói hàng"],
}

# Theme label -> keywords for the rule-based narrative; labels appear in the text
DEFAULT_THEMES = {
    "chất lượng": ["chất lượng", "quality", "tốt", "bền", "đẹp", "xịn"],
    "giá cả": ["giá", "price", "rẻ", "đắt", "hợp lý", "tiền"],
    "giao hàng": ["giao", "ship", "delivery", "nhanh", "chậm", "vận chuyển"],
    "dịch vụ": ["phục vụ", "service", "hỗ trợ", "tư vấn", "shop"],
    "đóng gói": ["đóng gói", "package", "bao bì", "gói"],
}


def _lowered(taxonomy: Dict[str, List[str]]) -> Dict[str, List[str]]:
    return {name: [str(kw).lower() for kw in keywords] for name, keywords in taxonomy.items()}


@dataclass(frozen=True)
class Lexicon:
    """Word lists injected into the analyzers; swap in fixtures for tests."""
    stopwords: FrozenSet[str] = DEFAULT_STOPWORDS
    aspects: Dict[str, List[str]] = field(default_factory=lambda: dict(DEFAULT_ASPECTS))
    themes: Dict[str, List[str]] = field(default_factory=lambda: dict(DEFAULT_THEMES))

    def __post_init__(self):
        # Matching lowercases the text, so every word list is stored lowercase
        object.__setattr__(self, "stopwords", frozenset(str(w).lower() for w in self.stopwords))
        object.__setattr__(self, "aspects", _lowered(self.aspects))
        object.__setattr__(self, "themes", _lowered(self.themes))

    @classmethod
    def from_mapping(cls, data: dict) -> "Lexicon":
        """Build a lexicon from a mapping; missing sections keep the defaults."""
        stopwords = data.get("stopwords")
        aspects = data.get("aspects")
        themes = data.get("themes")
        return cls(
            stopwords=stopwords or DEFAULT_STOPWORDS,
            aspects=aspects or DEFAULT_ASPECTS,
            themes=themes or DEFAULT_THEMES,
        )


def load_lexicon(path: Optional[str] = None) -> Lexicon:
    """Load a lexicon from a YAML file, falling back to the built-in lists."""
    if not path:
        return Lexicon()
    
    lexicon_file = Path(path)
    if not lexicon_file.exists():
        logger.warning(f"Lexicon file {lexicon_file} not found, using defaults")
        return Lexicon()
    
    try:
        with open(lexicon_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load lexicon from {lexicon_file}: {e}")
        return Lexicon()
    
    if not isinstance(data, dict):
        logger.error(f"Lexicon file {lexicon_file} must contain a mapping, using defaults")
        return Lexicon()
    
    logger.info(f"Loaded lexicon overrides from {lexicon_file}")
    return Lexicon.from_mapping(data)
