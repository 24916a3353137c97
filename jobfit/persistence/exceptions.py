"""Persistence layer exceptions.

All persistence exceptions inherit from PersistenceError so callers can catch
every data-access failure with a single except clause.
"""


class PersistenceError(Exception):
    """Base exception for all persistence layer errors."""

    pass


class RecordNotFoundError(PersistenceError):
    """Raised when a required record is not found.

    Lookups that may legitimately miss should return None instead.
    """

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found: {record_id}")


class DuplicateRecordError(PersistenceError):
    """Raised when two records share the same identifier."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"Duplicate {kind} id: {record_id}")


class DatasetError(PersistenceError):
    """Raised when a dataset file cannot be read or fails validation.

    Examples:
    - File missing or unreadable
    - YAML or JSON syntax error
    - Candidate or job record failing model validation
    """

    def __init__(self, message: str, errors=None):
        self.message = message
        self.errors = list(errors or [])
        detail = "".join(f"\n  - {error}" for error in self.errors)
        super().__init__(f"{message}{detail}")
