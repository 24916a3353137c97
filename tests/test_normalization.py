"""Tests for text normalization, string similarity and education ranks."""

import pytest

from jobfit.normalization import (
    EDUCATION_LEVELS,
    education_rank,
    normalize_text,
    string_similarity,
    tokenize,
)


class TestNormalizeText:
    """Test the normalize_text() function."""

    def test_lowercases_and_strips(self):
        """Test case folding and outer whitespace removal."""
        assert normalize_text("  Computer Science  ") == "computer science"

    def test_removes_punctuation(self):
        """Test that non-alphanumeric characters are dropped."""
        assert normalize_text("  Node.js (Advanced)  ") == "nodejs advanced"
        assert normalize_text("C++ / C#") == "c  c"

    def test_non_ascii_letters_removed(self):
        """Test that letters outside a-z are stripped, not transliterated."""
        assert normalize_text("Café") == "caf"

    def test_empty_string(self):
        """Test that empty input stays empty."""
        assert normalize_text("") == ""


class TestTokenize:
    """Test the tokenize() function."""

    def test_splits_on_whitespace_runs(self):
        assert tokenize("web   developer") == ["web", "developer"]

    def test_empty_text_yields_one_empty_token(self):
        assert tokenize("") == [""]


class TestStringSimilarity:
    """Test the tiered string_similarity() function."""

    def test_exact_match_after_normalization(self):
        """Test that case and punctuation differences still score 1.0."""
        assert string_similarity("Computer Science", "computer science!") == 1.0

    def test_containment(self):
        """Test that substring containment scores 0.8 in either direction."""
        assert string_similarity("Science", "Computer Science") == 0.8
        assert string_similarity("Computer Science", "Science") == 0.8

    def test_empty_string_is_contained(self):
        """Test that an empty value compared with text scores 0.8."""
        assert string_similarity("", "Accounting") == 0.8
        assert string_similarity("", "") == 1.0

    def test_token_overlap(self):
        """Test partial token overlap divided by the longer token list."""
        assert string_similarity(
            "Frontend Web Developer", "Web Developer Lead"
        ) == pytest.approx(2 / 3)
        assert string_similarity(
            "Software Engineer", "Senior Software Developer"
        ) == pytest.approx(1 / 3)

    def test_short_tokens_never_match(self):
        """Test that tokens shorter than three characters are ignored."""
        assert string_similarity("IT Support", "IT Manager") == 0.0

    def test_no_overlap(self):
        assert string_similarity("Informatics", "Computer Science") == 0.0

    def test_result_within_bounds(self):
        """Test that similarity stays in [0, 1] for assorted inputs."""
        pairs = [
            ("a b c", "abc def"),
            ("data data data", "data"),
            ("marketing", "market research analyst"),
        ]
        for first, second in pairs:
            assert 0.0 <= string_similarity(first, second) <= 1.0


class TestEducationRank:
    """Test the education_rank() function."""

    def test_ladder_order(self):
        """Test that each ladder entry ranks at its own index."""
        for index, level in enumerate(EDUCATION_LEVELS):
            assert education_rank(level) == index

    def test_embedded_level_name(self):
        """Test that the level may appear inside longer text."""
        assert education_rank("Bachelor of Science") == 5
        assert education_rank("Senior High School") == 2
        assert education_rank("PhD in Physics") == 8

    def test_highest_level_wins(self):
        """Test that the scan runs from the top of the ladder down."""
        assert education_rank("Master / Bachelor") == 6

    def test_case_insensitive(self):
        assert education_rank("bachelor") == 5

    @pytest.mark.parametrize("level", [None, "", "Bootcamp", "S1"])
    def test_unknown_levels_rank_zero(self, level):
        """Test that missing or unrecognized levels rank 0."""
        assert education_rank(level) == 0
