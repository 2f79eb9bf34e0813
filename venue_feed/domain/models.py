"""Core domain models for the venue feed.

This module defines the profile records the ranking core consumes:
- Sex / PartnerPreference: enumerated profile fields
- ViewerProfile: the user requesting the feed
- CandidateProfile: someone currently checked in at the venue

Both profiles are immutable for the duration of a ranking call. Values coming
straight from the ``users``/``check_ins`` tables (Portuguese enum labels,
ISO-8601 strings) are normalized here, before ranking ever sees them.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from venue_feed.utils.timestamps import ensure_utc, parse_iso_datetime

# Labels stored by the mobile app's database
_STORED_LABELS = {
    "masculino": "male",
    "feminino": "female",
    "outro": "other",
    "todos": "any",
}


def _normalize_label(value):
    if isinstance(value, str):
        lowered = value.strip().lower()
        return _STORED_LABELS.get(lowered, lowered)
    return value


class Sex(str, Enum):
    """Sex declared on a profile."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class PartnerPreference(str, Enum):
    """Which sex a user wants to see in the feed."""

    MALE = "male"
    FEMALE = "female"
    ANY = "any"


class ViewerProfile(BaseModel):
    """The user requesting the feed.

    ``min_age_preference``/``max_age_preference`` are optional overrides of
    the default age window; the eligibility filter still floors the minimum
    at the legal age.
    """

    id: str = Field(..., min_length=1, description="User identifier")
    bio: Optional[str] = Field(None, description="Free-text bio")
    age: int = Field(..., ge=0, description="Age in years")
    sex: Sex = Field(..., description="Declared sex")
    partner_preference: PartnerPreference = Field(..., description="Who the user wants to see")
    min_age_preference: Optional[int] = Field(None, ge=0, description="Minimum age override")
    max_age_preference: Optional[int] = Field(None, ge=0, description="Maximum age override")

    model_config = {"frozen": True}

    @field_validator("sex", "partner_preference", mode="before")
    @classmethod
    def normalize_labels(cls, v):
        """Accept stored Portuguese labels as aliases of the enum values."""
        return _normalize_label(v)

    @model_validator(mode="after")
    def validate_age_window(self):
        """Reject an override window that is inverted."""
        if (
            self.min_age_preference is not None
            and self.max_age_preference is not None
            and self.min_age_preference > self.max_age_preference
        ):
            raise ValueError(
                f"min_age_preference ({self.min_age_preference}) is greater than "
                f"max_age_preference ({self.max_age_preference})"
            )
        return self


class CandidateProfile(BaseModel):
    """A person currently checked in at the venue.

    ``checked_in_at`` is always stored as an aware UTC datetime.
    """

    id: str = Field(..., min_length=1, description="User identifier")
    name: str = Field(..., description="Display name")
    bio: Optional[str] = Field(None, description="Free-text bio")
    age: int = Field(..., ge=0, description="Age in years")
    sex: Sex = Field(..., description="Declared sex")
    partner_preference: PartnerPreference = Field(..., description="Who the user wants to see")
    checked_in_at: datetime = Field(..., description="When the check-in happened (UTC)")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "id": "c1",
                "name": "Ana",
                "bio": "Gosto musica viagem fotografia",
                "age": 26,
                "sex": "female",
                "partner_preference": "any",
                "checked_in_at": "2023-11-14T22:08:20Z",
            }
        },
    }

    @field_validator("sex", "partner_preference", mode="before")
    @classmethod
    def normalize_labels(cls, v):
        """Accept stored Portuguese labels as aliases of the enum values."""
        return _normalize_label(v)

    @field_validator("checked_in_at", mode="before")
    @classmethod
    def parse_checked_in_at(cls, v):
        """Parse ISO-8601 strings, including a trailing ``Z``."""
        if isinstance(v, str):
            parsed = parse_iso_datetime(v)
            if parsed is None:
                raise ValueError(f"Invalid ISO-8601 timestamp: {v!r}")
            return parsed
        return v

    @field_validator("checked_in_at")
    @classmethod
    def normalize_checked_in_at(cls, v: datetime) -> datetime:
        """Ensure datetime is timezone-aware and in UTC."""
        return ensure_utc(v)
