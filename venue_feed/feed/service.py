"""Feed service wrapping the ranking core for one request."""

import time
from typing import Optional

from venue_feed.config.models import FeedSettings
from venue_feed.logging import get_logger
from venue_feed.logging.context import log_context
from venue_feed.ranking.engine import score_candidates
from venue_feed.utils.timestamps import ensure_utc, utc_now

from .models import FeedRequest, FeedResult

logger = get_logger(__name__, component="feed")


class FeedService:
    """
    Builds a viewer's feed for one venue.

    Responsibilities around the pure ranking core:
    - Resolve the session seed (request, then configuration, then a
      venue/viewer derived default)
    - Hide candidates on the viewer's block list
    - Apply the configured preference mode
    - Report counts and timing
    """

    def __init__(self, settings: Optional[FeedSettings] = None, fallback_seed: Optional[str] = None):
        """
        Initialize the feed service.

        Args:
            settings: Feed settings (defaults to FeedSettings())
            fallback_seed: Seed used when the request carries none; takes
                precedence over settings.default_seed
        """
        self.settings = settings or FeedSettings()
        self.fallback_seed = fallback_seed

    def resolve_seed(self, request: FeedRequest) -> str:
        """Pick the seed for a request.

        Without an explicit seed the venue and viewer ids are combined, which
        keeps the feed stable for that viewer at that venue.
        """
        if request.seed:
            return request.seed
        if self.fallback_seed:
            return self.fallback_seed
        if self.settings.default_seed:
            return self.settings.default_seed
        return f"{request.venue_id}:{request.viewer.id}"

    def build_feed(self, request: FeedRequest) -> FeedResult:
        """
        Rank a venue's candidates for the request's viewer.

        Args:
            request: Viewer, candidates and ranking inputs

        Returns:
            FeedResult with ranked entries (possibly empty) and counts
        """
        seed = self.resolve_seed(request)
        now = ensure_utc(request.now) if request.now is not None else utc_now()

        with log_context(venue_id=request.venue_id, viewer_id=request.viewer.id, seed=seed):
            started = time.perf_counter()

            candidates = request.candidates
            blocked_count = 0
            if self.settings.respect_blocks and request.blocked_ids:
                candidates = [c for c in candidates if c.id not in request.blocked_ids]
                blocked_count = len(request.candidates) - len(candidates)

            entries = score_candidates(
                request.viewer,
                candidates,
                seed,
                now=now,
                mutual=self.settings.mutual_preference,
            )

            result = FeedResult(
                venue_id=request.venue_id,
                viewer_id=request.viewer.id,
                seed=seed,
                generated_at=now,
                entries=entries,
                total_candidates=len(request.candidates),
                blocked_count=blocked_count,
                duration_seconds=time.perf_counter() - started,
            )

            logger.info(
                f"Feed built: {result.eligible_count}/{result.total_candidates} candidates",
                extra={
                    "event": "feed.built",
                    "total_candidates": result.total_candidates,
                    "blocked_count": blocked_count,
                    "eligible_count": result.eligible_count,
                    "mutual_preference": self.settings.mutual_preference,
                    "duration_seconds": round(result.duration_seconds, 6),
                },
            )

            if result.is_empty:
                logger.info(
                    "Feed is empty",
                    extra={"event": "feed.empty"},
                )

        return result
