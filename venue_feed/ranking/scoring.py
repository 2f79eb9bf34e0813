"""Compatibility scoring for eligible candidates.

The composite score mixes two signals, both bounded to [0, 1]:
- bio similarity: share of keywords the two bios have in common
- recency: how fresh the candidate's check-in is
"""

from datetime import datetime
from typing import Optional

from venue_feed.domain.models import CandidateProfile, ViewerProfile
from venue_feed.utils.timestamps import ensure_utc

from .keywords import extract_keywords
from .models import ScoreBreakdown
from .policy import BIO_SIMILARITY_WEIGHT, FRESH_WINDOW, RECENCY_WEIGHT, STALE_AFTER


def bio_similarity(bio_a: Optional[str], bio_b: Optional[str]) -> float:
    """Score keyword overlap between two bios.

    Returns ``|A ∩ B| / max(|A|, |B|)`` over the extracted keyword sets.
    Two bios without any keyword give 0 (no signal), not a perfect match.
    """
    keywords_a = extract_keywords(bio_a)
    keywords_b = extract_keywords(bio_b)

    largest = max(len(keywords_a), len(keywords_b))
    if largest == 0:
        return 0.0

    return len(keywords_a & keywords_b) / largest


def recency_score(checked_in_at: datetime, now: datetime) -> float:
    """Score how fresh a check-in is.

    1.0 up to ``FRESH_WINDOW`` after check-in, 0.0 from ``STALE_AFTER`` on,
    linear in between. Check-ins stamped in the future count as fresh.

    Args:
        checked_in_at: Check-in instant
        now: Reference instant

    Returns:
        Score in [0, 1]
    """
    age = ensure_utc(now) - ensure_utc(checked_in_at)

    if age <= FRESH_WINDOW:
        return 1.0
    if age >= STALE_AFTER:
        return 0.0
    return 1.0 - (age - FRESH_WINDOW) / (STALE_AFTER - FRESH_WINDOW)


def score_breakdown(
    viewer: ViewerProfile, candidate: CandidateProfile, now: datetime
) -> ScoreBreakdown:
    """Compute the composite score of a candidate together with its parts."""
    similarity = bio_similarity(viewer.bio, candidate.bio)
    recency = recency_score(candidate.checked_in_at, now)
    composite = BIO_SIMILARITY_WEIGHT * similarity + RECENCY_WEIGHT * recency

    return ScoreBreakdown(
        similarity=similarity,
        recency=recency,
        composite=min(max(composite, 0.0), 1.0),
        shared_keywords=frozenset(
            extract_keywords(viewer.bio) & extract_keywords(candidate.bio)
        ),
    )


def composite_score(
    viewer: ViewerProfile, candidate: CandidateProfile, now: datetime
) -> float:
    """Weighted compatibility score of a candidate for a viewer, in [0, 1]."""
    return score_breakdown(viewer, candidate, now).composite
