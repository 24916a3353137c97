"""Utility functions for preparing match results for downstream consumers.

This module provides helpers for building report payloads and a compact
one-line summary of a match for logs and tooltips.
"""

from typing import Dict, List, Optional

from jobfit.domain.models import CandidateProfile

from .models import MatchResult


def build_match_payload(
    candidate: CandidateProfile,
    results: List[MatchResult],
    top_n: Optional[int] = None,
    good_fits_only: bool = False,
) -> Dict:
    """Build a report payload for one candidate's ranked matches.

    Args:
        candidate: The candidate the results were computed for
        results: Ranked MatchResults, best first
        top_n: Keep only the first N results (None keeps all)
        good_fits_only: Drop results below the good-fit threshold

    Returns:
        Dict with keys:
        - candidate_id: Candidate identifier
        - candidate_name: Display name (falls back to the identifier)
        - job_count: Number of jobs scored, before filtering
        - good_fit_count: Number of good fits among all scored jobs
        - best_match: Best result as a dict, or None if nothing was scored
        - matches: Filtered results as dicts, in rank order
    """
    selected = [r for r in results if r.is_good_fit] if good_fits_only else list(results)
    if top_n is not None:
        selected = selected[:top_n]

    return {
        "candidate_id": candidate.candidate_id,
        "candidate_name": candidate.display_name,
        "job_count": len(results),
        "good_fit_count": sum(1 for r in results if r.is_good_fit),
        "best_match": results[0].to_dict() if results else None,
        "matches": [r.to_dict() for r in selected],
    }


def format_breakdown(result: MatchResult) -> str:
    """Format a match result's breakdown on a single line.

    Example:
        >>> format_breakdown(result)
        'Frontend Developer: 82 (education 100, skills 61, experience 92, training 70)'
    """
    b = result.breakdown
    return (
        f"{result.job_title}: {result.match_score} "
        f"(education {b.education_score}, skills {b.skills_score}, "
        f"experience {b.experience_score}, training {b.training_score})"
    )
