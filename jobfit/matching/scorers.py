"""Sub-scorers comparing one candidate profile section against a job.

Each scorer returns a raw float score, nominally 0-100. Scores are clamped
and rounded by the engine, not here, so the weighted total is computed from
unrounded values.
"""

from typing import Optional

from jobfit.domain.models import CandidateProfile, JobPosting
from jobfit.normalization.text import education_rank, normalize_text, string_similarity
from jobfit.utils.timestamps import reference_year

from . import constants as c


def education_score(candidate: CandidateProfile, job: JobPosting) -> float:
    """Score the candidate's education against the job's minimum level and majors.

    Up to 50 points for the education level (full marks when the candidate's
    highest level meets the minimum, proportional credit below it) plus up to
    50 points for the best major similarity. Jobs without required majors give
    a flat 30 for the major part.
    """
    if not candidate.education:
        return 0.0

    highest = max(education_rank(entry.level) for entry in candidate.education)
    min_required = education_rank(job.min_education)

    if highest >= min_required:
        level_score = float(c.EDUCATION_LEVEL_POINTS)
    else:
        level_score = highest / max(min_required, 1) * c.EDUCATION_LEVEL_POINTS

    if job.required_majors:
        major_score = 0.0
        for entry in candidate.education:
            if not entry.major:
                continue
            for required_major in job.required_majors:
                similarity = string_similarity(entry.major, required_major)
                major_score = max(major_score, similarity * c.MAJOR_POINTS)
    else:
        major_score = float(c.NO_MAJOR_REQUIREMENT_POINTS)

    return min(float(c.MAX_SCORE), level_score + major_score)


def skills_score(candidate: CandidateProfile, job: JobPosting) -> float:
    """Score skill coverage of the job's desired skills plus a proficiency bonus."""
    if not candidate.skills:
        return 0.0

    required_skills = job.optional_skills or []
    if not required_skills:
        return float(c.UNSPECIFIED_SKILLS_SCORE)

    candidate_skill_names = [normalize_text(skill.name) for skill in candidate.skills]

    matched = 0
    for required in required_skills:
        normalized_required = normalize_text(required)
        for name in candidate_skill_names:
            if normalized_required in name or name in normalized_required:
                matched += 1
                break

    match_ratio = matched / len(required_skills)

    # Bonus counts every skill, matched or not
    proficiency_bonus = sum(
        c.PROFICIENCY_BONUS.get(skill.proficiency_level, 0) for skill in candidate.skills
    )

    return min(
        float(c.MAX_SCORE),
        match_ratio * c.SKILL_MATCH_POINTS + min(c.PROFICIENCY_BONUS_CAP, proficiency_bonus),
    )


def experience_score(
    candidate: CandidateProfile, job: JobPosting, current_year: Optional[int] = None
) -> float:
    """Score years of experience and the relevance of past roles.

    Tenure earns 8 points per year up to 40. Relevance is the best similarity
    between any past position and the job title, or half the similarity
    between descriptions, whichever is higher, scaled to 60 points.

    Args:
        candidate: Candidate profile
        job: Job posting
        current_year: Year used for open-ended or undated entries. Defaults to
            the current UTC year.

    Returns:
        Raw experience score
    """
    if not candidate.experience:
        return float(c.NO_EXPERIENCE_SCORE)

    current_year = reference_year(current_year)

    total_years = 0
    relevance = 0.0

    for entry in candidate.experience:
        start = entry.year_start if entry.year_start is not None else current_year
        end = entry.year_end if entry.year_end is not None else current_year
        total_years += end - start

        if job.title:
            relevance = max(relevance, string_similarity(entry.position, job.title))

        if entry.description and job.description:
            description_similarity = string_similarity(entry.description, job.description)
            relevance = max(relevance, description_similarity * c.DESCRIPTION_RELEVANCE_FACTOR)

    years_score = min(c.YEARS_POINTS_CAP, total_years * c.POINTS_PER_YEAR)
    relevance_points = relevance * c.RELEVANCE_POINTS

    return min(float(c.MAX_SCORE), years_score + relevance_points)


def training_score(candidate: CandidateProfile, job: JobPosting) -> float:
    """Score trainings by count and by keyword overlap with the job text."""
    if not candidate.trainings:
        return float(c.NO_TRAINING_SCORE)

    job_keywords = " ".join(
        [*(job.optional_skills or []), job.title or "", job.description or ""]
    ).lower()

    relevance = 0
    for training in candidate.trainings:
        training_text = f"{training.title} {training.organizer or ''}".lower()
        for word in training_text.split():
            if len(word) >= c.MIN_KEYWORD_LENGTH and word in job_keywords:
                relevance += c.KEYWORD_HIT_POINTS

    base_score = min(c.TRAINING_COUNT_CAP, len(candidate.trainings) * c.POINTS_PER_TRAINING)

    return min(float(c.MAX_SCORE), base_score + min(c.KEYWORD_POINTS_CAP, relevance))
