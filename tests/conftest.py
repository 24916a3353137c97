"""Shared fixtures for the jobfit test suite."""

import logging

import pytest

from jobfit.domain.models import (
    CandidateProfile,
    EducationEntry,
    ExperienceEntry,
    JobPosting,
    SkillEntry,
    TrainingEntry,
)
from jobfit.logging.context import clear_log_context

ENV_VARS = ("LOG_LEVEL", "ENVIRONMENT", "JOBFIT_CURRENT_YEAR")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Unset jobfit environment variables so the host shell cannot leak in."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level changed by configure_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def empty_candidate():
    """Candidate with no profile sections at all."""
    return CandidateProfile(candidate_id="cand-empty")


@pytest.fixture
def frontend_candidate():
    """Bachelor in Computer Science with React experience."""
    return CandidateProfile(
        candidate_id="cand-001",
        full_name="Dewi Lestari",
        education=[
            EducationEntry(level="Bachelor", major="Computer Science", year_start=2014, year_end=2018)
        ],
        skills=[
            SkillEntry(name="React", proficiency_level="Expert"),
            SkillEntry(name="Node.js", proficiency_level="Advanced"),
            SkillEntry(name="SQL", proficiency_level="Intermediate"),
        ],
        experience=[
            ExperienceEntry(
                position="Frontend Developer",
                description="Built React dashboards for internal analytics",
                year_start=2018,
                year_end=2022,
            ),
            ExperienceEntry(
                position="Senior Frontend Developer",
                description="Led a team building React and TypeScript web apps",
                year_start=2022,
            ),
        ],
        trainings=[TrainingEntry(title="React Advanced Patterns", organizer="Dicoding")],
    )


@pytest.fixture
def frontend_job():
    """Frontend role requiring a Bachelor in CS or IS."""
    return JobPosting(
        job_id="job-001",
        title="Frontend Developer",
        description="Build React web applications with TypeScript",
        min_education="Bachelor",
        required_majors=["Computer Science", "Information Systems"],
        optional_skills=["React", "Node.js", "TypeScript"],
    )


@pytest.fixture
def finance_job():
    """Finance role the frontend candidate is a poor fit for."""
    return JobPosting(
        job_id="job-002",
        title="Finance Officer",
        description="Prepare financial reports and manage budgets",
        min_education="Bachelor",
        required_majors=["Accounting", "Finance"],
        optional_skills=["Excel", "SAP"],
    )


@pytest.fixture
def dataset_yaml(tmp_path):
    """Write a small dataset file and return its path."""
    path = tmp_path / "dataset.yaml"
    path.write_text(
        """
candidates:
  - candidate_id: cand-001
    full_name: Dewi Lestari
    education:
      - level: Bachelor
        major: Computer Science
    skills:
      - name: React
        proficiency_level: Expert
      - name: Node.js
        proficiency_level: Advanced
    experience:
      - position: Frontend Developer
        year_start: 2018
        year_end: 2022
    trainings:
      - title: React Advanced Patterns
  - candidate_id: cand-002
    full_name: Budi Santoso
jobs:
  - job_id: job-001
    title: Frontend Developer
    description: Build React web applications with TypeScript
    min_education: Bachelor
    required_majors: [Computer Science]
    optional_skills: [React, Node.js, TypeScript]
  - job_id: job-002
    title: Finance Officer
    min_education: Bachelor
    required_majors: [Accounting]
  - job_id: job-003
    title: Backend Engineer
    status: Closed
"""
    )
    return path
