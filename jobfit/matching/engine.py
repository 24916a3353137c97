"""Candidate-job matching engine.

This module implements the aggregation that:
1. Computes the four sub-scores for a candidate against a job
2. Clamps each sub-score to [0, 100] and combines them with fixed weights
3. Flags good fits and ranks jobs for a candidate
"""

import logging
import math
from typing import Iterable, List, Optional

from jobfit.domain.models import CandidateProfile, JobPosting
from jobfit.logging import get_logger
from jobfit.utils.timestamps import reference_year

from . import constants as c
from .models import MatchResult, ScoreBreakdown
from .scorers import education_score, experience_score, skills_score, training_score

logger = get_logger(__name__, component="matching")


def clamp_score(score: float) -> float:
    """Clamp a raw sub-score to [MIN_SCORE, MAX_SCORE].

    Non-finite values collapse to MIN_SCORE.
    """
    if not math.isfinite(score):
        return float(c.MIN_SCORE)
    return max(float(c.MIN_SCORE), min(float(c.MAX_SCORE), score))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (9.5 -> 10)."""
    return int(math.floor(value + 0.5))


class MatchEngine:
    """Scores a candidate against job postings.

    Responsibilities:
    - Compute education, skills, experience and training sub-scores
    - Combine them into a weighted 0-100 match score
    - Flag good fits (score >= GOOD_FIT_THRESHOLD)
    - Rank jobs for a candidate and pick the best one

    The engine holds no per-call state, so one instance can be shared.
    """

    def __init__(
        self,
        current_year: Optional[int] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize MatchEngine.

        Args:
            current_year: Year used for ongoing or undated experience. Defaults
                to the current UTC year at construction time.
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.current_year = reference_year(current_year)
        self.logger = logger_instance or logger

    def match(self, candidate: CandidateProfile, job: JobPosting) -> MatchResult:
        """Score a candidate against a single job.

        Args:
            candidate: Candidate profile to score
            job: Job posting to score against

        Returns:
            MatchResult with weighted score, good-fit flag and breakdown
        """
        education = clamp_score(education_score(candidate, job))
        skills = clamp_score(skills_score(candidate, job))
        experience = clamp_score(experience_score(candidate, job, self.current_year))
        training = clamp_score(training_score(candidate, job))

        weighted = (
            education * c.WEIGHTS["education"]
            + skills * c.WEIGHTS["skills"]
            + experience * c.WEIGHTS["experience"]
            + training * c.WEIGHTS["training"]
        )
        match_score = round_half_up(weighted)

        breakdown = ScoreBreakdown(
            education_score=round_half_up(education),
            skills_score=round_half_up(skills),
            experience_score=round_half_up(experience),
            training_score=round_half_up(training),
        )
        result = MatchResult(
            job_id=job.job_id,
            job_title=job.title,
            match_score=match_score,
            is_good_fit=match_score >= c.GOOD_FIT_THRESHOLD,
            breakdown=breakdown,
        )

        self.logger.debug(
            f"Scored {candidate.candidate_id} against {job.job_id}: {match_score}",
            extra={
                "event": "match.scored",
                "candidate_id": candidate.candidate_id,
                "job_id": job.job_id,
                "match_score": match_score,
                "is_good_fit": result.is_good_fit,
                "education_score": breakdown.education_score,
                "skills_score": breakdown.skills_score,
                "experience_score": breakdown.experience_score,
                "training_score": breakdown.training_score,
            },
        )
        return result

    def rank_jobs(
        self, candidate: CandidateProfile, jobs: Iterable[JobPosting]
    ) -> List[MatchResult]:
        """Score every job and sort descending by match score.

        The sort is stable: jobs with equal scores keep their input order.

        Args:
            candidate: Candidate profile to score
            jobs: Job postings to rank

        Returns:
            MatchResults, best first (empty if no jobs)
        """
        results = [self.match(candidate, job) for job in jobs]
        results.sort(key=lambda result: result.match_score, reverse=True)

        if results:
            self.logger.info(
                f"Ranked {len(results)} jobs for {candidate.candidate_id}",
                extra={
                    "event": "match.ranked",
                    "candidate_id": candidate.candidate_id,
                    "job_count": len(results),
                    "best_job_id": results[0].job_id,
                    "best_score": results[0].match_score,
                    "good_fit_count": sum(1 for r in results if r.is_good_fit),
                },
            )
        return results

    def best_job(
        self, candidate: CandidateProfile, jobs: Iterable[JobPosting]
    ) -> Optional[MatchResult]:
        """Return the highest-scoring job, or None when there are no jobs."""
        ranked = self.rank_jobs(candidate, jobs)
        return ranked[0] if ranked else None


def match(
    candidate: CandidateProfile, job: JobPosting, current_year: Optional[int] = None
) -> MatchResult:
    """Score a candidate against one job with a throwaway engine."""
    return MatchEngine(current_year=current_year).match(candidate, job)


def rank_jobs(
    candidate: CandidateProfile,
    jobs: Iterable[JobPosting],
    current_year: Optional[int] = None,
) -> List[MatchResult]:
    """Rank jobs for a candidate with a throwaway engine."""
    return MatchEngine(current_year=current_year).rank_jobs(candidate, jobs)


def best_job(
    candidate: CandidateProfile,
    jobs: Iterable[JobPosting],
    current_year: Optional[int] = None,
) -> Optional[MatchResult]:
    """Pick the best job for a candidate with a throwaway engine."""
    return MatchEngine(current_year=current_year).best_job(candidate, jobs)
