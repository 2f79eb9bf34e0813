"""Test helpers for venue feed tests."""

from .profiles import NOW, make_candidate, make_viewer, minutes_ago

__all__ = ["NOW", "make_candidate", "make_viewer", "minutes_ago"]
