"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List, Optional

from jobfit.utils.timestamps import reference_year

KNOWN_SECTIONS = frozenset({"logging", "ranking", "output"})

# Reports longer than this are rarely read
LARGE_TOP_N = 100


def check_for_warnings(
    config_dict: Dict[str, Any], this_year: Optional[int] = None
) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary
        this_year: Year to compare current_year overrides against (defaults to now)

    Returns:
        List of warning messages
    """
    warning_messages = []

    unknown = sorted(str(key) for key in config_dict if key not in KNOWN_SECTIONS)
    if unknown:
        warning_messages.append(
            f"Unknown configuration sections will be ignored: {', '.join(unknown)}"
        )

    ranking = config_dict.get("ranking", {})
    if isinstance(ranking, dict):
        top_n = ranking.get("top_n")
        if isinstance(top_n, int) and not isinstance(top_n, bool) and top_n > LARGE_TOP_N:
            warning_messages.append(
                f"Large top_n ({top_n}) produces long reports; consider a smaller value"
            )

        current_year = ranking.get("current_year")
        this_year = reference_year(this_year)
        if isinstance(current_year, int) and current_year > this_year:
            warning_messages.append(
                f"current_year ({current_year}) is in the future; ongoing experience "
                "will be overstated"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
