"""Text normalization and fuzzy comparison for profile matching.

This module provides the string primitives every scorer builds on:
- normalize_text: lowercase, trim and strip punctuation
- string_similarity: tiered exact / containment / token-overlap similarity
- education_rank: map a free-text education level onto a fixed ladder

Scorer thresholds assume the tier values returned by string_similarity.
"""

import re
from typing import List, Optional

# Lowest to highest. Index is the rank.
EDUCATION_LEVELS: List[str] = [
    "Elementary",
    "Junior High",
    "Senior High",
    "Diploma",
    "Associate",
    "Bachelor",
    "Master",
    "Doctorate",
    "PhD",
]

EXACT_SIMILARITY = 1.0
CONTAINMENT_SIMILARITY = 0.8

# Tokens this short never count as a match in the overlap tier
MIN_MATCH_TOKEN_LENGTH = 3

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Normalize text for fuzzy comparison.

    Normalization steps:
    - Convert to lowercase
    - Strip leading/trailing whitespace
    - Remove every character other than a-z, 0-9 and whitespace

    Inner whitespace is left as-is, so punctuation removal can leave a
    trailing or doubled space behind.

    Args:
        text: Text to normalize

    Returns:
        Normalized text

    Example:
        >>> normalize_text("  Node.js (Advanced)  ")
        'nodejs advanced'
    """
    return _NON_ALPHANUMERIC.sub("", text.lower().strip())


def tokenize(normalized: str) -> List[str]:
    """Split normalized text on runs of whitespace.

    Empty strings are kept when the text starts or ends with whitespace, and
    an empty text yields a single empty token. Both still count toward the
    similarity denominator.
    """
    return _WHITESPACE.split(normalized)


def string_similarity(first: str, second: str) -> float:
    """Compare two free-text strings, returning a similarity in [0, 1].

    Algorithm (cheapest tier first):
    1. Normalize both strings
    2. Equal after normalization: 1.0
    3. One contains the other: 0.8
    4. Token overlap: each token of the first string counts at most once if
       some token of the second string equals it or contains it (or is
       contained by it). Only pairs where both tokens are at least 3
       characters long can match. The count is divided by the longer token
       list's length.

    An empty string is contained in every string, so comparing an empty
    value with a non-empty one scores 0.8.

    Args:
        first: First string
        second: Second string

    Returns:
        Similarity between 0.0 and 1.0
    """
    a = normalize_text(first)
    b = normalize_text(second)

    if a == b:
        return EXACT_SIMILARITY
    if b in a or a in b:
        return CONTAINMENT_SIMILARITY

    tokens_a = tokenize(a)
    tokens_b = tokenize(b)

    match_count = 0
    for token_a in tokens_a:
        for token_b in tokens_b:
            if len(token_a) < MIN_MATCH_TOKEN_LENGTH or len(token_b) < MIN_MATCH_TOKEN_LENGTH:
                continue
            if token_a == token_b or token_b in token_a or token_a in token_b:
                match_count += 1
                break

    return match_count / max(len(tokens_a), len(tokens_b))


def education_rank(level: Optional[str]) -> int:
    """Map an education level string onto the EDUCATION_LEVELS ladder.

    The ladder is scanned from the top down and the first level name found
    inside the normalized input wins, so "Master / Bachelor" ranks as Master.
    Unrecognized or missing levels rank 0.

    Example:
        >>> education_rank("Bachelor of Science")
        5
        >>> education_rank("Bootcamp")
        0
    """
    if not level:
        return 0

    normalized = normalize_text(level)
    for rank in range(len(EDUCATION_LEVELS) - 1, -1, -1):
        if normalize_text(EDUCATION_LEVELS[rank]) in normalized:
            return rank
    return 0
