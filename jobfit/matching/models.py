"""Data models for the matching engine.

This module defines the score breakdown and per-job match result returned by
the engine.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict

from .constants import PARTIAL_FIT_THRESHOLD


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-section sub-scores, each an integer in [0, 100].

    Attributes:
        education_score: Education level and major fit
        skills_score: Desired skill coverage plus proficiency bonus
        experience_score: Tenure and role relevance
        training_score: Training count and keyword relevance
    """

    education_score: int = 0
    skills_score: int = 0
    experience_score: int = 0
    training_score: int = 0


@dataclass(frozen=True)
class MatchResult:
    """Result of scoring one candidate against one job.

    Attributes:
        job_id: Identifier of the scored job
        job_title: Title of the scored job
        match_score: Weighted total, an integer in [0, 100]
        is_good_fit: True if match_score reaches the good-fit threshold
        breakdown: Rounded sub-scores behind the total
    """

    job_id: str
    job_title: str
    match_score: int
    is_good_fit: bool
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)

    @property
    def match_quality(self) -> str:
        """Return a coarse label for badges and summaries.

        Returns:
            "good-fit" at or above the good-fit threshold,
            "partial" from PARTIAL_FIT_THRESHOLD up to the good-fit threshold,
            "weak" below that
        """
        if self.is_good_fit:
            return "good-fit"
        if self.match_score >= PARTIAL_FIT_THRESHOLD:
            return "partial"
        return "weak"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict for JSON output and templates."""
        data = asdict(self)
        data["match_quality"] = self.match_quality
        return data
