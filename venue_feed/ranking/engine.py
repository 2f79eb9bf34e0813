"""Feed ordering for one venue.

This module composes the ranking steps:
1. Hard filters drop ineligible candidates (and the viewer, if present)
2. Each survivor gets a composite compatibility score
3. A seeded shuffle fixes a per-session order among equals
4. A stable sort by descending score produces the feed

The pipeline is pure: the same viewer, candidates, seed and ``now`` always
yield the same list. It does no I/O apart from DEBUG logging.
"""

from datetime import datetime
from typing import List, Optional, Sequence

from venue_feed.domain.models import CandidateProfile, ViewerProfile
from venue_feed.logging import get_logger
from venue_feed.utils.timestamps import ensure_utc, utc_now

from .eligibility import is_eligible
from .models import ScoredCandidate
from .scoring import score_breakdown
from .shuffle import seeded_shuffle

logger = get_logger(__name__, component="ranking")


def score_candidates(
    viewer: ViewerProfile,
    candidates: Sequence[CandidateProfile],
    seed: str,
    now: Optional[datetime] = None,
    mutual: bool = False,
) -> List[ScoredCandidate]:
    """Rank candidates and keep their scores.

    Same ordering as ``order_feed``; useful for diagnostics.

    Args:
        viewer: The user requesting the feed
        candidates: Everyone checked in at the venue, in any order
        seed: Stable session seed used for tie-breaking
        now: Reference instant for recency (defaults to current UTC time)
        mutual: Also require candidates to want the viewer

    Returns:
        ScoredCandidate list, best first
    """
    reference = ensure_utc(now) if now is not None else utc_now()

    eligible = []
    seen_ids = {viewer.id}
    for candidate in candidates:
        # Presence snapshots may list the viewer or repeat a check-in
        if candidate.id in seen_ids:
            continue
        seen_ids.add(candidate.id)
        if not is_eligible(viewer, candidate, mutual=mutual):
            logger.debug(
                "Candidate filtered out",
                extra={
                    "event": "feed.candidate.ineligible",
                    "candidate_id": candidate.id,
                },
            )
            continue
        eligible.append(candidate)

    scored = []
    for candidate in eligible:
        breakdown = score_breakdown(viewer, candidate, reference)
        scored.append(
            ScoredCandidate(candidate=candidate, score=breakdown.composite, breakdown=breakdown)
        )

    shuffled = seeded_shuffle(scored, seed)
    # sorted() is stable, so ties keep the shuffled order
    ranked = sorted(shuffled, key=lambda item: item.score, reverse=True)

    logger.debug(
        "Feed ordered",
        extra={
            "event": "feed.ordered",
            "viewer_id": viewer.id,
            "candidate_count": len(candidates),
            "eligible_count": len(ranked),
        },
    )
    return ranked


def order_feed(
    viewer: ViewerProfile,
    candidates: Sequence[CandidateProfile],
    seed: str,
    now: Optional[datetime] = None,
    mutual: bool = False,
) -> List[CandidateProfile]:
    """Order a venue's checked-in candidates for a viewer.

    Candidates failing the hard filters are dropped silently. The rest are
    sorted by descending compatibility score, ties broken by a shuffle keyed
    on ``seed``. The input sequence is never modified.

    Args:
        viewer: The user requesting the feed
        candidates: Everyone checked in at the venue, in any order
        seed: Stable session seed (e.g. the viewer's check-in id)
        now: Reference instant for recency; pass it to make scoring
            reproducible (defaults to current UTC time)
        mutual: Also require candidates to want the viewer

    Returns:
        Candidate profiles, best first (possibly empty)
    """
    return [
        item.candidate
        for item in score_candidates(viewer, candidates, seed, now=now, mutual=mutual)
    ]
