"""Feed building around the ranking core.

This module provides:
- FeedService: builds one viewer's feed with block-list and seed handling
- FeedRequest / FeedResult: inputs and outputs of a feed build
- load_snapshot: reads a venue snapshot file into a FeedRequest
"""

from .exceptions import SnapshotError, SnapshotFormatError, SnapshotNotFoundError
from .models import FeedRequest, FeedResult, VenueSnapshot
from .service import FeedService
from .snapshot import load_snapshot

__all__ = [
    "FeedService",
    "FeedRequest",
    "FeedResult",
    "VenueSnapshot",
    "load_snapshot",
    "SnapshotError",
    "SnapshotFormatError",
    "SnapshotNotFoundError",
]
