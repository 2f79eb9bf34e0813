"""Feed layer exceptions.

All snapshot problems inherit from SnapshotError so callers can catch them
with a single except clause. The ranking core itself never raises these.
"""

from typing import List, Optional


class SnapshotError(Exception):
    """Base exception for venue snapshot loading errors."""

    pass


class SnapshotNotFoundError(SnapshotError):
    """Raised when the snapshot file does not exist or cannot be read."""

    pass


class SnapshotFormatError(SnapshotError):
    """Raised when a snapshot cannot be parsed or fails validation.

    Examples:
    - Invalid YAML/JSON syntax
    - Missing viewer section
    - Candidate with an unknown sex value or unparseable check-in time
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = list(errors or [])
        if self.errors:
            message = message + "\n" + "\n".join(f"  - {error}" for error in self.errors)
        super().__init__(message)
