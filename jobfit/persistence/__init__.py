"""Persistence layer for candidate profiles and job postings.

Public API:
    # Dataset files
    - load_dataset(path) -> Dataset

    # Repository interfaces and in-memory implementations
    - ProfileRepository, JobRepository
    - InMemoryProfileRepository, InMemoryJobRepository

    # Exceptions
    - PersistenceError: Base exception for all persistence errors
    - RecordNotFoundError: Required record not found
    - DuplicateRecordError: Two records share an id
    - DatasetError: Dataset file unreadable or invalid

Example usage:
    >>> from jobfit.persistence import load_dataset
    >>> dataset = load_dataset("candidates.yaml")
    >>> profiles = dataset.profile_repository()
    >>> profile = profiles.get("cand-001")
"""

from .dataset import Dataset, load_dataset
from .exceptions import (
    DatasetError,
    DuplicateRecordError,
    PersistenceError,
    RecordNotFoundError,
)
from .repositories import (
    InMemoryJobRepository,
    InMemoryProfileRepository,
    JobRepository,
    ProfileRepository,
)

__all__ = [
    # Datasets
    "Dataset",
    "load_dataset",
    # Repositories
    "ProfileRepository",
    "JobRepository",
    "InMemoryProfileRepository",
    "InMemoryJobRepository",
    # Exceptions
    "PersistenceError",
    "RecordNotFoundError",
    "DuplicateRecordError",
    "DatasetError",
]
