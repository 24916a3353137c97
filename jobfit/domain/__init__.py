"""Domain models for the jobfit matching engine."""

from .models import (
    CandidateProfile,
    EducationEntry,
    ExperienceEntry,
    JobPosting,
    JobStatus,
    ProficiencyLevel,
    SkillEntry,
    TrainingEntry,
)

__all__ = [
    "CandidateProfile",
    "EducationEntry",
    "ExperienceEntry",
    "JobPosting",
    "JobStatus",
    "ProficiencyLevel",
    "SkillEntry",
    "TrainingEntry",
]
