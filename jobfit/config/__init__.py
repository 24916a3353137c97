"""Configuration management module for jobfit."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, validate_config_file
from .models import (
    AppConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    RankingConfig,
)

__all__ = [
    # Main loader functions
    "load_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "LoggingConfig",
    "RankingConfig",
    "OutputConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    "OutputFormat",
    # Exceptions
    "ConfigurationError",
]
