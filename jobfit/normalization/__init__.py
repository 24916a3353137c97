"""Text normalization and fuzzy string comparison.

This module provides:
- normalize_text: Lowercase, trimmed, punctuation-free text
- string_similarity: Tiered 0-1 similarity between two free-text strings
- education_rank: Rank of an education level on the fixed ladder
"""

from .text import (
    EDUCATION_LEVELS,
    education_rank,
    normalize_text,
    string_similarity,
    tokenize,
)

__all__ = [
    "EDUCATION_LEVELS",
    "education_rank",
    "normalize_text",
    "string_similarity",
    "tokenize",
]
