"""Timestamp helpers for check-in instants.

Check-in times arrive from storage as ISO-8601 strings or datetimes in
arbitrary offsets. Everything inside the ranking core compares aware UTC
instants, so all conversions go through this module.
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Current UTC time with timezone info
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Normalize a datetime to an aware UTC instant.

    Naive datetimes are taken to already be in UTC; aware ones are converted.

    Args:
        dt: Datetime to convert (can be None)

    Returns:
        Timezone-aware datetime in UTC, or None if input is None

    Example:
        >>> naive = datetime(2025, 11, 4, 12, 0, 0)
        >>> ensure_utc(naive).tzinfo == timezone.utc
        True
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def parse_iso_datetime(iso_string: str) -> Optional[datetime]:
    """Parse an ISO 8601 string (as written by the check-in table) to UTC.

    Accepts a trailing ``Z``, explicit offsets, naive timestamps and
    date-only values.

    Args:
        iso_string: ISO 8601 formatted datetime string

    Returns:
        Timezone-aware datetime in UTC, or None if parsing fails

    Example:
        >>> parse_iso_datetime("2023-11-14T22:13:20.000Z").minute
        13
    """
    if not iso_string or not iso_string.strip():
        return None

    cleaned = iso_string.strip()
    # fromisoformat only learned about "Z" in 3.11
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"

    try:
        return ensure_utc(datetime.fromisoformat(cleaned))
    except ValueError:
        return None


def format_timestamp(dt: datetime) -> str:
    """Format a datetime as ISO 8601 in UTC with a ``Z`` suffix.

    Example:
        >>> format_timestamp(datetime(2025, 11, 4, 12, 0, 0, tzinfo=timezone.utc))
        '2025-11-04T12:00:00Z'
    """
    dt_utc = ensure_utc(dt)
    if dt_utc is None:
        return ""
    return dt_utc.strftime("%Y-%m-%dT%H:%M:%SZ")
