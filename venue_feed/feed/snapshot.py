"""Loading venue snapshots from disk.

A snapshot is a YAML (or JSON, which YAML parses too) document holding a
viewer, the venue's checked-in candidates and optionally the seed, reference
time and block list to rank with.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from venue_feed.config.loader import format_validation_errors
from venue_feed.logging import get_logger

from .exceptions import SnapshotFormatError, SnapshotNotFoundError
from .models import FeedRequest, VenueSnapshot

logger = get_logger(__name__, component="snapshot")


def load_snapshot(path: Path) -> FeedRequest:
    """
    Read and validate a venue snapshot file.

    Args:
        path: Path to a YAML or JSON snapshot

    Returns:
        FeedRequest built from the snapshot

    Raises:
        SnapshotNotFoundError: If the file is missing or unreadable
        SnapshotFormatError: If the file is not valid YAML/JSON or fails validation
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise SnapshotNotFoundError(f"Snapshot file not found: {path}") from e
    except OSError as e:
        raise SnapshotNotFoundError(f"Failed to read snapshot file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SnapshotFormatError(f"Failed to parse snapshot {path}: {e}") from e

    if not isinstance(raw, dict):
        raise SnapshotFormatError(
            f"Snapshot {path} must contain a mapping",
            errors=[f"Got {type(raw).__name__}"],
        )

    try:
        snapshot = VenueSnapshot.model_validate(raw)
    except ValidationError as e:
        raise SnapshotFormatError(
            f"Snapshot {path} failed validation", errors=format_validation_errors(e)
        ) from e

    logger.info(
        f"Snapshot loaded: {snapshot.venue_id}",
        extra={
            "event": "snapshot.loaded",
            "path": str(path),
            "venue_id": snapshot.venue_id,
            "candidate_count": len(snapshot.candidates),
        },
    )
    return snapshot.to_request()
