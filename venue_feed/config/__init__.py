"""Configuration management module for the venue feed."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, parse_config_dict, validate_config_file
from .models import AppConfig, FeedSettings, LogFormat, LoggingConfig, LogLevel

__all__ = [
    # Main loader functions
    "load_config",
    "parse_config_dict",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "FeedSettings",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
