"""Constants and configuration values for ReviewDigest."""

# Analysis Constants
class AnalysisConstants:
    """Thresholds shared by the deterministic analysis stages."""
    
    # Ratings
    MIN_RATING = 1
    MAX_RATING = 5
    POSITIVE_RATING = 4  # rating >= this counts as positive
    NEGATIVE_RATING = 2  # rating <= this counts as negative
    
    # Highlights
    MIN_HIGHLIGHT_COMMENT_LENGTH = 20  # comment must be longer than this
    MIN_HIGHLIGHT_SENTENCE_LENGTH = 10  # trimmed sentence must be longer than this
    MAX_HIGHLIGHTS = 3  # per side
    
    # Keywords
    MIN_KEYWORD_LENGTH = 2  # token must be longer than this
    MIN_KEYWORD_COUNT = 1  # keyword count must be greater than this
    MAX_KEYWORDS = 10
    KEYWORD_PUNCTUATION = ".,!?;:()"

# Narrative Constants
class NarrativeConstants:
    """Constants for narrative generation."""
    
    MIN_EVIDENCE_COMMENT_LENGTH = 20  # comment must be longer than this to be quoted
    MIN_NARRATIVE_LENGTH = 20  # cleaned AI output shorter than this is rejected
    
    # Values shipped in .env templates, never real keys
    PLACEHOLDER_KEYS = frozenset({
        "your_api_key_here",
        "your_key_here",
        "your_openai_api_key",
        "sk-your-key-here",
        "changeme",
    })
    
    SYSTEM_PROMPT = "Bạn là một chuyên gia phân tích đánh giá sản phẩm."

# User-facing text
class Messages:
    """Vietnamese texts rendered by the storefront."""
    
    NO_REVIEWS = "Chưa có đánh giá nào cho sản phẩm này."
    NO_DATA_LABEL = "Chưa có dữ liệu"
    
    PREAMBLE = "Sản phẩm có {total} đánh giá với điểm trung bình {average}/5. "
    POSITIVE_SHARE = "{percentage}% khách hàng đánh giá tích cực. "
    
    # Used when the narrative is missing or too short
    FALLBACK_POSITIVE = "Phần lớn khách hàng hài lòng với chất lượng sản phẩm và dịch vụ. "
    FALLBACK_NEGATIVE = "Một số khách hàng chưa hài lòng với sản phẩm, cần cải thiện chất lượng. "
    FALLBACK_NEUTRAL = "Sản phẩm nhận được đánh giá đa dạng từ khách hàng. "
    
    # Rule-based narrative
    PRAISED_THEMES = "Khách hàng đánh giá cao về {themes}. "
    GENERIC_PRAISE = "Nhiều khách hàng hài lòng với sản phẩm. "
    CRITICISED_THEMES = "Một số khách hàng chưa hài lòng về {themes}. "
    GENERIC_CRITICISM = "Một số khách hàng gặp vấn đề với sản phẩm. "
    CLOSING_RECOMMEND = "Đây là sản phẩm được đánh giá cao và đáng tin cậy."
    CLOSING_FIT = "Sản phẩm phù hợp với nhiều khách hàng."
    CLOSING_CAUTION = "Cần cân nhắc kỹ trước khi mua sản phẩm này."
    
    # Last resort when no metrics could be computed
    UNAVAILABLE = "Sản phẩm có {total} đánh giá. Tóm tắt chi tiết hiện chưa khả dụng."

# File and Path Constants
class FileConstants:
    """Constants for file operations."""
    
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EXPORT_VERSION = "1.0.0"
