"""Venue feed: ranks who is checked in at a venue for a viewing user."""

__version__ = "1.0.0"
