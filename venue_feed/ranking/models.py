"""Data models for the ranking core.

These structures only live for the duration of one ranking call and are
never persisted.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet

from venue_feed.domain.models import CandidateProfile


@dataclass(frozen=True)
class ScoreBreakdown:
    """Sub-scores behind a candidate's composite score.

    Attributes:
        similarity: Bio keyword overlap in [0, 1]
        recency: Presence freshness in [0, 1]
        composite: Weighted sum of the two, in [0, 1]
        shared_keywords: Keywords present in both bios
    """

    similarity: float
    recency: float
    composite: float
    shared_keywords: FrozenSet[str] = field(default_factory=frozenset)

    def as_dict(self) -> Dict:
        """Serialize for logs and CLI output."""
        return {
            "similarity": round(self.similarity, 4),
            "recency": round(self.recency, 4),
            "composite": round(self.composite, 4),
            "shared_keywords": sorted(self.shared_keywords),
        }


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate paired with its composite score."""

    candidate: CandidateProfile
    score: float
    breakdown: ScoreBreakdown
