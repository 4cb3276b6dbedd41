"""Configuration management for ReviewDigest."""

from pydantic_settings import BaseSettings
from pydantic import Field

from .constants import NarrativeConstants


class Settings(BaseSettings):
    """Application settings."""
    
    # OpenAI API
    openai_api_key: str = Field("", description="OpenAI API key")
    openai_model: str = Field("gpt-4o-mini", description="Model used for AI narratives")
    
    @property
    def has_usable_openai_key(self) -> bool:
        """True when the key is set and is not a template placeholder."""
        key = (self.openai_api_key or "").strip()
        return bool(key) and key.lower() not in NarrativeConstants.PLACEHOLDER_KEYS
    
    # Narrative generation
    narrative_timeout: float = Field(15.0, description="Seconds to wait for the AI narrative")
    narrative_max_tokens: int = Field(300, description="Max tokens for the AI narrative")
    narrative_temperature: float = Field(0.4, description="Temperature for the AI narrative")
    evidence_limit: int = Field(10, description="Max reviews quoted in the AI prompt")
    theme_min_count: int = Field(2, description="Minimum reviews for a common theme")
    theme_ratio: float = Field(0.3, description="Share of a pool needed for a common theme")
    
    # Lexicon override (YAML)
    lexicon_file: str = Field("", description="Optional YAML lexicon override")
    
    # Logging
    log_level: str = Field("INFO", description="Logging level")
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
