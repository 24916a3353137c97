"""Utility functions for time handling."""

from .timestamps import ensure_utc, reference_year, utc_now

__all__ = [
    "ensure_utc",
    "reference_year",
    "utc_now",
]
