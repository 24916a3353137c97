"""Environment variable loading and validation."""

import os
from typing import Optional

from jobfit.domain.models import MAX_YEAR, MIN_YEAR

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
        current_year: Optional[int] = None,
    ):
        self.log_level = log_level
        self.environment = environment or "local"
        self.current_year = current_year


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Environment label attached to every log record (default: local)
    - JOBFIT_CURRENT_YEAR: Reference year for ongoing experience entries

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If any variable is set to an invalid value
    """
    errors = []

    log_level = os.getenv("LOG_LEVEL")
    environment = os.getenv("ENVIRONMENT")
    current_year_str = os.getenv("JOBFIT_CURRENT_YEAR")

    if log_level:
        if log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        else:
            log_level = log_level.upper()

    current_year = None
    if current_year_str:
        try:
            current_year = int(current_year_str)
            if not MIN_YEAR <= current_year <= MAX_YEAR:
                errors.append(
                    f"Invalid JOBFIT_CURRENT_YEAR: {current_year}. "
                    f"Must be between {MIN_YEAR} and {MAX_YEAR}."
                )
        except ValueError:
            errors.append(
                f"Invalid JOBFIT_CURRENT_YEAR: '{current_year_str}'. Must be a valid integer."
            )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the values in your .env file",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        log_level=log_level,
        environment=environment,
        current_year=current_year,
    )
