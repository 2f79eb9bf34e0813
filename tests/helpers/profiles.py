"""Profile factories shared by the test suite."""

from datetime import datetime, timedelta, timezone

from venue_feed.domain.models import CandidateProfile, ViewerProfile

# Fixed reference instant (1_700_000_000 seconds after the epoch)
NOW = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


def minutes_ago(minutes: float, now: datetime = NOW) -> datetime:
    """Instant ``minutes`` before ``now``."""
    return now - timedelta(minutes=minutes)


def make_viewer(**overrides) -> ViewerProfile:
    """Build a viewer: 28-year-old man looking for women."""
    data = {
        "id": "viewer-1",
        "bio": "Gosto de musica e viagem",
        "age": 28,
        "sex": "male",
        "partner_preference": "female",
    }
    data.update(overrides)
    return ViewerProfile(**data)


def make_candidate(**overrides) -> CandidateProfile:
    """Build a candidate: 26-year-old woman open to anyone, checked in 5 minutes ago."""
    data = {
        "id": "candidate-1",
        "name": "Ana",
        "bio": "Curto musica e livros",
        "age": 26,
        "sex": "female",
        "partner_preference": "any",
        "checked_in_at": minutes_ago(5),
    }
    data.update(overrides)
    return CandidateProfile(**data)
