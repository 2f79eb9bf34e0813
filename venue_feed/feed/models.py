"""Data models for building a venue feed."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, List, Optional

from pydantic import BaseModel, Field, field_validator

from venue_feed.domain.models import CandidateProfile, ViewerProfile
from venue_feed.ranking.models import ScoredCandidate
from venue_feed.utils.timestamps import ensure_utc, parse_iso_datetime


@dataclass
class FeedRequest:
    """
    Everything needed to build one viewer's feed for one venue.

    Attributes:
        venue_id: Venue whose presence list is being ranked
        viewer: The user requesting the feed
        candidates: Everyone checked in at the venue
        seed: Session seed; falls back to configuration when None
        now: Reference instant for recency; current time when None
        blocked_ids: User ids the viewer has blocked
    """

    venue_id: str
    viewer: ViewerProfile
    candidates: List[CandidateProfile] = field(default_factory=list)
    seed: Optional[str] = None
    now: Optional[datetime] = None
    blocked_ids: FrozenSet[str] = field(default_factory=frozenset)


@dataclass
class FeedResult:
    """
    Outcome of building a feed.

    Attributes:
        venue_id: Venue the feed was built for
        viewer_id: Viewer the feed was built for
        seed: Seed actually used for tie-breaking
        generated_at: Reference instant used for recency scoring
        entries: Ranked candidates with their scores, best first
        total_candidates: Candidates received
        blocked_count: Candidates hidden by the viewer's block list
        duration_seconds: Time spent ranking
    """

    venue_id: str
    viewer_id: str
    seed: str
    generated_at: datetime
    entries: List[ScoredCandidate] = field(default_factory=list)
    total_candidates: int = 0
    blocked_count: int = 0
    duration_seconds: float = 0.0

    @property
    def profiles(self) -> List[CandidateProfile]:
        """Ranked candidate profiles without scores."""
        return [entry.candidate for entry in self.entries]

    @property
    def eligible_count(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        """True when nobody passed the filters; callers render an empty state."""
        return not self.entries


class VenueSnapshot(BaseModel):
    """A venue's presence list as stored on disk (YAML or JSON)."""

    venue_id: str = Field(..., min_length=1, description="Venue identifier")
    viewer: ViewerProfile = Field(..., description="The user requesting the feed")
    candidates: List[CandidateProfile] = Field(
        default_factory=list, description="Everyone checked in at the venue"
    )
    seed: Optional[str] = Field(None, description="Session seed")
    now: Optional[datetime] = Field(None, description="Reference instant (UTC)")
    blocked_ids: List[str] = Field(default_factory=list, description="Blocked user ids")

    @field_validator("now", mode="before")
    @classmethod
    def parse_now(cls, v):
        """Parse ISO-8601 strings, including a trailing ``Z``."""
        if isinstance(v, str):
            parsed = parse_iso_datetime(v)
            if parsed is None:
                raise ValueError(f"Invalid ISO-8601 timestamp: {v!r}")
            return parsed
        return v

    @field_validator("now")
    @classmethod
    def normalize_now(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)

    def to_request(self) -> FeedRequest:
        """Convert to a FeedRequest."""
        return FeedRequest(
            venue_id=self.venue_id,
            viewer=self.viewer,
            candidates=list(self.candidates),
            seed=self.seed,
            now=self.now,
            blocked_ids=frozenset(self.blocked_ids),
        )
