"""Utility modules for ReviewDigest."""

from .data_prep import export_to_json, prepare_export, load_reviews, parse_reviews

__all__ = [
    "export_to_json",
    "prepare_export",
    "load_reviews",
    "parse_reviews",
]
