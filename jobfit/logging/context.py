"""Context propagation for structured logging.

Fields pushed here are injected into every log record emitted inside the
scope by ContextualFilter. Storage is a ContextVar, so scopes are isolated
per thread and per asyncio task.
"""

import uuid
from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return LogContextVar.get().copy()


def push_log_context(**kwargs) -> Token:
    """Merge fields into the logging context.

    Returns:
        Token for pop_log_context() to restore the previous state

    Example:
        >>> token = push_log_context(run_id="abc123", candidate_id="cand-001")
        >>> # ... every log record now carries run_id and candidate_id ...
        >>> pop_log_context(token)
    """
    return LogContextVar.set({**LogContextVar.get(), **kwargs})


def pop_log_context(token: Token) -> None:
    """Restore the logging context saved by push_log_context()."""
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Drop every context field. Mostly useful in tests."""
    LogContextVar.set({})


def new_run_id() -> str:
    """Generate a short identifier for one CLI invocation."""
    return uuid.uuid4().hex[:12]


class log_context:
    """Context manager for scoped logging context.

    Example:
        >>> with log_context(run_id="abc123", candidate_id="cand-001"):
        ...     logger.info("Ranking candidate")  # includes run_id and candidate_id
    """

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.kwargs)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
