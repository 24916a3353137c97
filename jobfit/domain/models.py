"""Core domain models for candidate profiles and job postings.

This module defines the read-only records the matching engine consumes:
- EducationEntry, SkillEntry, ExperienceEntry, TrainingEntry: profile sections
- CandidateProfile: a candidate with all of their profile sections
- JobPosting: a job posting with its education and skill requirements

Records are frozen once built. Validation happens here, at the boundary, so
the scorers can treat every field as well-typed.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

# Years outside this window are treated as data-entry errors
MIN_YEAR = 1900
MAX_YEAR = 2200


class ProficiencyLevel(str, Enum):
    """Skill proficiency levels offered by the profile forms."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class JobStatus(str, Enum):
    """Lifecycle status of a job posting."""

    ACTIVE = "Active"
    CLOSED = "Closed"


def _strip_required(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Field cannot be empty or whitespace-only")
    return v.strip()


def _strip_optional(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    stripped = v.strip()
    return stripped if stripped else None


def _check_year(v: Optional[int]) -> Optional[int]:
    if v is None:
        return None
    if not MIN_YEAR <= v <= MAX_YEAR:
        raise ValueError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}, got: {v}")
    return v


class EducationEntry(BaseModel):
    """A single education record (degree level and optional major)."""

    level: str = Field(..., description="Education level, e.g. 'Bachelor'")
    major: Optional[str] = Field(None, description="Field of study")
    school_name: Optional[str] = Field(None, description="Institution name")
    year_start: Optional[int] = Field(None, description="Year the study started")
    year_end: Optional[int] = Field(None, description="Year the study ended")

    @field_validator("level")
    @classmethod
    def strip_level(cls, v: str) -> str:
        """Strip whitespace from the level."""
        return _strip_required(v)

    @field_validator("major", "school_name")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        return _strip_optional(v)

    @field_validator("year_start", "year_end")
    @classmethod
    def check_years(cls, v: Optional[int]) -> Optional[int]:
        return _check_year(v)

    model_config = {"frozen": True}


class SkillEntry(BaseModel):
    """A skill with an optional self-reported proficiency."""

    name: str = Field(..., description="Skill name, e.g. 'React'")
    proficiency_level: Optional[str] = Field(
        None, description="Beginner, Intermediate, Advanced or Expert"
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Strip whitespace from the skill name."""
        return _strip_required(v)

    @field_validator("proficiency_level")
    @classmethod
    def strip_level(cls, v: Optional[str]) -> Optional[str]:
        return _strip_optional(v)

    model_config = {"frozen": True}


class ExperienceEntry(BaseModel):
    """A work experience record.

    A missing year_end means the position is ongoing. Both years missing means
    the entry contributes no tenure, only relevance.
    """

    position: str = Field(..., description="Job title held")
    description: Optional[str] = Field(None, description="What the role involved")
    company_name: Optional[str] = Field(None, description="Employer name")
    year_start: Optional[int] = Field(None, description="Year the role started")
    year_end: Optional[int] = Field(None, description="Year the role ended")

    @field_validator("position")
    @classmethod
    def strip_position(cls, v: str) -> str:
        """Strip whitespace from the position."""
        return _strip_required(v)

    @field_validator("description", "company_name")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        return _strip_optional(v)

    @field_validator("year_start", "year_end")
    @classmethod
    def check_years(cls, v: Optional[int]) -> Optional[int]:
        return _check_year(v)

    model_config = {"frozen": True}


class TrainingEntry(BaseModel):
    """A training course or certification."""

    title: str = Field(..., description="Course or certification title")
    organizer: Optional[str] = Field(None, description="Organizing body")
    year: Optional[int] = Field(None, description="Year completed")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Strip whitespace from the title."""
        return _strip_required(v)

    @field_validator("organizer")
    @classmethod
    def strip_organizer(cls, v: Optional[str]) -> Optional[str]:
        return _strip_optional(v)

    @field_validator("year")
    @classmethod
    def check_year(cls, v: Optional[int]) -> Optional[int]:
        return _check_year(v)

    model_config = {"frozen": True}


class CandidateProfile(BaseModel):
    """A candidate's profile as seen by the matching engine.

    Section lists default to empty. An explicit null is accepted and treated
    the same as an empty list, since both earn the floor score for that
    section.
    """

    candidate_id: str = Field(..., description="Unique candidate identifier")
    full_name: Optional[str] = Field(None, description="Display name")
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[SkillEntry] = Field(default_factory=list)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    trainings: List[TrainingEntry] = Field(default_factory=list)

    @field_validator("candidate_id")
    @classmethod
    def strip_candidate_id(cls, v: str) -> str:
        """Strip whitespace from the identifier."""
        return _strip_required(v)

    @field_validator("full_name")
    @classmethod
    def strip_full_name(cls, v: Optional[str]) -> Optional[str]:
        """Strip whitespace from the display name."""
        return _strip_optional(v)

    @field_validator("education", "skills", "experience", "trainings", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        """Treat a null section as an empty one."""
        return [] if v is None else v

    @property
    def display_name(self) -> str:
        """Name to show in reports, falling back to the identifier."""
        return self.full_name or self.candidate_id

    model_config = {
        "frozen": True,
        "json_schema_extra": {"example": {
            "candidate_id": "cand-001",
            "full_name": "Dewi Lestari",
            "education": [{"level": "Bachelor", "major": "Computer Science"}],
            "skills": [{"name": "React", "proficiency_level": "Expert"}],
            "experience": [{
                "position": "Frontend Developer",
                "description": "Built React dashboards",
                "year_start": 2019,
                "year_end": 2023,
            }],
            "trainings": [{"title": "React Advanced Patterns", "organizer": "Dicoding"}],
        }},
    }


class JobPosting(BaseModel):
    """A job posting with the requirements the engine scores against."""

    job_id: str = Field(..., description="Unique job identifier")
    title: str = Field(..., description="Job title")
    description: Optional[str] = Field(None, description="Full job description")
    min_education: Optional[str] = Field(None, description="Minimum education level")
    required_majors: Optional[List[str]] = Field(
        None, description="Accepted fields of study"
    )
    optional_skills: Optional[List[str]] = Field(None, description="Desired skills")
    status: JobStatus = Field(JobStatus.ACTIVE, description="Active or Closed")

    @field_validator("job_id", "title")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip whitespace from required string fields."""
        return _strip_required(v)

    @field_validator("description", "min_education")
    @classmethod
    def strip_optional(cls, v: Optional[str]) -> Optional[str]:
        """Strip whitespace from optional string fields."""
        return _strip_optional(v)

    @field_validator("required_majors", "optional_skills")
    @classmethod
    def drop_blank_terms(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        """Strip each term and drop blank ones."""
        if v is None:
            return None
        return [term.strip() for term in v if term and term.strip()]

    @property
    def is_active(self) -> bool:
        """Whether the posting is still open."""
        return self.status == JobStatus.ACTIVE

    model_config = {
        "frozen": True,
        "use_enum_values": True,
        "json_schema_extra": {"example": {
            "job_id": "job-001",
            "title": "Frontend Developer",
            "description": "Build React and TypeScript user interfaces",
            "min_education": "Bachelor",
            "required_majors": ["Computer Science", "Informatics"],
            "optional_skills": ["React", "TypeScript"],
            "status": "Active",
        }},
    }
