"""Shared fixtures for ReviewDigest tests."""

from datetime import datetime, timezone

import pytest

from reviewdigest.core.config import Settings
from reviewdigest.core.models import Review


def make_review(rating: int, comment: str = "", created_at=None) -> Review:
    """Helper to create a review."""
    return Review(rating=rating, comment=comment, created_at=created_at)


def utc(year: int, month: int, day: int = 1) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


@pytest.fixture
def offline_settings():
    """Settings with no API key and no .env file."""
    return Settings(_env_file=None, openai_api_key="")


@pytest.fixture
def ai_settings():
    """Settings with a usable-looking key and a short timeout."""
    return Settings(_env_file=None, openai_api_key="sk-test-1234567890", narrative_timeout=0.2)
