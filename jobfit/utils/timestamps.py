"""UTC clock helpers.

The engine reads the clock only through reference_year(), so tests and
callers can pin the year used for ongoing experience.
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Return dt in UTC. Naive values are assumed to already be UTC; None passes through."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def reference_year(
    override: Optional[int] = None, at: Optional[datetime] = None
) -> int:
    """Resolve the year used for ongoing experience entries.

    Args:
        override: Explicit year (wins when set)
        at: Reference moment, converted to UTC (defaults to utc_now())

    Returns:
        Calendar year

    Example:
        >>> reference_year(2024)
        2024
        >>> reference_year(at=datetime(2025, 12, 31, 23, 0, tzinfo=timezone.utc))
        2025
    """
    if override is not None:
        return override
    return ensure_utc(at or utc_now()).year
