"""Environment variable loading and validation."""

import os
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
        feed_seed: Optional[str] = None,
    ):
        self.log_level = log_level
        self.environment = environment or "local"
        self.feed_seed = feed_seed


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Label attached to every log record (default: local)
    - FEED_SEED: Seed used when neither the request nor the CLI gives one

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    log_level = os.getenv("LOG_LEVEL")
    environment = os.getenv("ENVIRONMENT")
    feed_seed = os.getenv("FEED_SEED")

    if log_level:
        log_level = log_level.strip().upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

    if feed_seed is not None and not feed_seed.strip():
        errors.append("FEED_SEED is set but empty")

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the variables exported in your shell or .env file",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        log_level=log_level or None,
        environment=environment,
        feed_seed=feed_seed.strip() if feed_seed else None,
    )
