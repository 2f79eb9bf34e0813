"""Utility functions for seed hashing and time handling."""

from .hashing import fnv1a_32
from .timestamps import (
    ensure_utc,
    format_timestamp,
    parse_iso_datetime,
    utc_now,
)

__all__ = [
    # Hashing
    "fnv1a_32",
    # Timestamps
    "utc_now",
    "ensure_utc",
    "parse_iso_datetime",
    "format_timestamp",
]
