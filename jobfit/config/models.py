"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from jobfit.domain.models import MAX_YEAR, MIN_YEAR


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class OutputFormat(str, Enum):
    """Report output formats."""

    TEXT = "text"
    JSON = "json"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class RankingConfig(BaseModel):
    """How jobs are selected and how many ranked results are reported."""

    top_n: Optional[int] = Field(
        None, ge=1, description="Report only the N best jobs per candidate (null = all)"
    )
    include_inactive_jobs: bool = Field(
        False, description="Also rank postings whose status is not Active"
    )
    good_fits_only: bool = Field(
        False, description="Report only jobs at or above the good-fit threshold"
    )
    current_year: Optional[int] = Field(
        None,
        ge=MIN_YEAR,
        le=MAX_YEAR,
        description="Reference year for ongoing experience (null = current UTC year)",
    )


class OutputConfig(BaseModel):
    """Report output settings."""

    format: OutputFormat = Field(OutputFormat.TEXT, description="Report format (text or json)")

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for jobfit."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    ranking: RankingConfig = Field(
        default_factory=RankingConfig, description="Ranking settings"
    )
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")

    model_config = {"extra": "ignore"}
