"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


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


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}

    @field_validator("level", mode="before")
    @classmethod
    def uppercase_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class FeedSettings(BaseModel):
    """Feed behaviour that surrounds the ranking core.

    The ranking policy itself (weights, windows, age delta) is fixed and not
    configurable here.
    """

    mutual_preference: bool = Field(
        False,
        description="Also require the candidate's preference to accept the viewer",
    )
    respect_blocks: bool = Field(
        True, description="Hide candidates the viewer has blocked"
    )
    default_seed: Optional[str] = Field(
        None, description="Seed used when a request carries none"
    )

    @field_validator("default_seed")
    @classmethod
    def strip_seed(cls, v: Optional[str]) -> Optional[str]:
        """Strip whitespace; blank seeds count as unset."""
        if v is None:
            return None
        stripped = v.strip()
        return stripped or None


class AppConfig(BaseModel):
    """Root configuration object for the venue feed."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    feed: FeedSettings = Field(default_factory=FeedSettings, description="Feed settings")
