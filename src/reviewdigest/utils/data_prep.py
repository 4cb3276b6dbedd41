"""Data preparation for import and export."""

import datetime
import json
import logging
from typing import Dict, Any, List

from ..core.constants import FileConstants
from ..core.errors import InvalidReview
from ..core.models import Review, SummaryResult

logger = logging.getLogger(__name__)


def parse_reviews(records: List[Dict[str, Any]]) -> List[Review]:
    """Turn raw records into Reviews, skipping the invalid ones."""
    reviews = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning(f"Skipping review #{index}: expected an object, got {type(record).__name__}")
            continue
        try:
            reviews.append(Review.from_dict(record))
        except InvalidReview as e:
            logger.warning(f"Skipping review #{index}: {e}")
    return reviews


def load_reviews(filename: str) -> List[Review]:
    """Load reviews from a JSON array or an object with a "reviews" array."""
    with open(filename, 'r', encoding='utf-8') as f:
        data = json.load(f)
    
    if isinstance(data, dict):
        data = data.get("reviews", [])
    if not isinstance(data, list):
        raise ValueError(f"{filename} does not contain a list of reviews")
    
    reviews = parse_reviews(data)
    logger.info(f"Loaded {len(reviews)} of {len(data)} reviews from {filename}")
    return reviews


def prepare_export(result: SummaryResult) -> Dict[str, Any]:
    """Prepare a summary for JSON export."""
    export_data = result.to_dict()
    export_data["metadata"] = {
        "export_timestamp": None,  # Will be set on export
        "version": FileConstants.EXPORT_VERSION
    }
    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    # Add timestamp
    data.setdefault("metadata", {"version": FileConstants.EXPORT_VERSION})
    data["metadata"]["export_timestamp"] = datetime.datetime.now().isoformat()
    
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
