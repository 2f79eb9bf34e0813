"""Ranking core for the "who's here now" venue feed.

This module provides:
- order_feed: filter, score, shuffle and sort a venue's candidates
- score_candidates: the same ordering with scores attached
- Building blocks: eligibility rules, keyword extraction, scoring and the
  seeded shuffle
"""

from .eligibility import age_bounds, is_eligible, wants
from .engine import order_feed, score_candidates
from .keywords import extract_keywords
from .models import ScoreBreakdown, ScoredCandidate
from .scoring import bio_similarity, composite_score, recency_score, score_breakdown
from .shuffle import Mulberry32, seeded_shuffle

__all__ = [
    "order_feed",
    "score_candidates",
    "is_eligible",
    "wants",
    "age_bounds",
    "extract_keywords",
    "bio_similarity",
    "recency_score",
    "composite_score",
    "score_breakdown",
    "seeded_shuffle",
    "Mulberry32",
    "ScoredCandidate",
    "ScoreBreakdown",
]
