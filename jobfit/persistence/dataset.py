"""Loading candidate and job datasets from YAML or JSON files.

A dataset document has two top-level lists:

    candidates:
      - candidate_id: cand-001
        education: [{level: Bachelor, major: Computer Science}]
    jobs:
      - job_id: job-001
        title: Frontend Developer
        min_education: Bachelor
"""

import json
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from jobfit.domain.models import CandidateProfile, JobPosting
from jobfit.logging import get_logger

from .exceptions import DatasetError
from .repositories import InMemoryJobRepository, InMemoryProfileRepository

logger = get_logger(__name__, component="persistence")

JSON_SUFFIXES = frozenset({".json"})


class Dataset(BaseModel):
    """Validated contents of a dataset file."""

    candidates: List[CandidateProfile] = Field(default_factory=list)
    jobs: List[JobPosting] = Field(default_factory=list)

    model_config = {"frozen": True}

    def profile_repository(self) -> InMemoryProfileRepository:
        """Build a profile repository from the candidates."""
        return InMemoryProfileRepository(self.candidates)

    def job_repository(self) -> InMemoryJobRepository:
        """Build a job repository from the jobs."""
        return InMemoryJobRepository(self.jobs)


def load_dataset(path: Union[str, Path]) -> Dataset:
    """Read and validate a dataset file.

    Files ending in .json are parsed as JSON; everything else as YAML.

    Args:
        path: Dataset file location

    Returns:
        Validated Dataset

    Raises:
        DatasetError: If the file is missing, malformed or fails validation
    """
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in JSON_SUFFIXES:
                raw = json.load(f)
            else:
                raw = yaml.safe_load(f)
    except FileNotFoundError:
        raise DatasetError(f"Dataset file not found: {path}") from None
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DatasetError(f"Failed to parse dataset {path}: {e}") from e
    except OSError as e:
        raise DatasetError(f"Failed to read dataset {path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise DatasetError(
            f"Dataset {path} must contain a mapping with 'candidates' and 'jobs'"
        )

    try:
        dataset = Dataset.model_validate(raw)
    except ValidationError as e:
        errors = [
            f"{' -> '.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise DatasetError(f"Dataset {path} failed validation", errors=errors) from e

    logger.info(
        f"Loaded dataset {path.name}",
        extra={
            "event": "dataset.loaded",
            "path": str(path),
            "candidate_count": len(dataset.candidates),
            "job_count": len(dataset.jobs),
        },
    )
    return dataset
