"""Candidate-job matching engine.

This module provides:
- MatchEngine: Scores and ranks jobs for a candidate
- MatchResult / ScoreBreakdown: Per-job result with sub-score breakdown
- match / rank_jobs / best_job: One-shot helpers around MatchEngine
- Utility functions for building report payloads and summaries
"""

from .engine import MatchEngine, best_job, clamp_score, match, rank_jobs, round_half_up
from .models import MatchResult, ScoreBreakdown
from .scorers import education_score, experience_score, skills_score, training_score
from .utils import build_match_payload, format_breakdown

__all__ = [
    "MatchEngine",
    "MatchResult",
    "ScoreBreakdown",
    "match",
    "rank_jobs",
    "best_job",
    "clamp_score",
    "round_half_up",
    "education_score",
    "skills_score",
    "experience_score",
    "training_score",
    "build_match_payload",
    "format_breakdown",
]
