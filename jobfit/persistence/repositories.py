"""Data access layer (repositories) for candidate profiles and job postings.

The engine never reaches for global state: callers build a repository and
pass records to it. The in-memory implementations back the CLI and tests;
other storage can be plugged in by implementing the abstract interfaces.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List

from jobfit.domain.models import CandidateProfile, JobPosting

from .exceptions import DuplicateRecordError, RecordNotFoundError

logger = logging.getLogger(__name__)


class ProfileRepository(ABC):
    """Read access to candidate profiles."""

    @abstractmethod
    def get(self, candidate_id: str) -> CandidateProfile:
        """Return the profile with this id.

        Raises:
            RecordNotFoundError: If no such candidate exists
        """

    @abstractmethod
    def list_all(self) -> List[CandidateProfile]:
        """Return every profile in insertion order."""


class JobRepository(ABC):
    """Read access to job postings."""

    @abstractmethod
    def get(self, job_id: str) -> JobPosting:
        """Return the posting with this id.

        Raises:
            RecordNotFoundError: If no such job exists
        """

    @abstractmethod
    def list_all(self) -> List[JobPosting]:
        """Return every posting in insertion order."""

    def list_active(self) -> List[JobPosting]:
        """Return postings that are still open, in insertion order."""
        return [job for job in self.list_all() if job.is_active]


def _index(records: Iterable, id_attr: str, kind: str) -> Dict[str, object]:
    index: Dict[str, object] = {}
    for record in records:
        record_id = getattr(record, id_attr)
        if record_id in index:
            raise DuplicateRecordError(kind, record_id)
        index[record_id] = record
    return index


class InMemoryProfileRepository(ProfileRepository):
    """Profile repository backed by a dict."""

    def __init__(self, profiles: Iterable[CandidateProfile] = ()):
        """Index profiles by candidate_id.

        Raises:
            DuplicateRecordError: If two profiles share a candidate_id
        """
        self._profiles = _index(profiles, "candidate_id", "candidate")
        logger.debug(f"Loaded {len(self._profiles)} candidate profiles")

    def get(self, candidate_id: str) -> CandidateProfile:
        try:
            return self._profiles[candidate_id]
        except KeyError:
            raise RecordNotFoundError("candidate", candidate_id) from None

    def list_all(self) -> List[CandidateProfile]:
        return list(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)


class InMemoryJobRepository(JobRepository):
    """Job repository backed by a dict."""

    def __init__(self, jobs: Iterable[JobPosting] = ()):
        """Index postings by job_id.

        Raises:
            DuplicateRecordError: If two postings share a job_id
        """
        self._jobs = _index(jobs, "job_id", "job")
        logger.debug(f"Loaded {len(self._jobs)} job postings")

    def get(self, job_id: str) -> JobPosting:
        try:
            return self._jobs[job_id]
        except KeyError:
            raise RecordNotFoundError("job", job_id) from None

    def list_all(self) -> List[JobPosting]:
        return list(self._jobs.values())

    def __len__(self) -> int:
        return len(self._jobs)
