"""Hard eligibility filters for the venue feed.

A candidate failing any rule here is excluded from the feed no matter how
well they would score.
"""

from typing import Tuple

from venue_feed.domain.models import (
    CandidateProfile,
    PartnerPreference,
    Sex,
    ViewerProfile,
)

from .policy import DEFAULT_AGE_DELTA, MINIMUM_AGE


def wants(preference: PartnerPreference, sex: Sex) -> bool:
    """Return True when ``preference`` accepts someone of ``sex``.

    ``any`` accepts everybody; ``male`` and ``female`` only accept the
    matching sex.
    """
    if preference == PartnerPreference.ANY:
        return True
    if preference == PartnerPreference.MALE:
        return sex == Sex.MALE
    if preference == PartnerPreference.FEMALE:
        return sex == Sex.FEMALE
    return False


def age_bounds(viewer: ViewerProfile) -> Tuple[int, int]:
    """Compute the inclusive (min, max) candidate age window for a viewer.

    Overrides on the viewer replace the default ``age ± DEFAULT_AGE_DELTA``
    window. The minimum is always floored at ``MINIMUM_AGE``.
    """
    if viewer.min_age_preference is not None:
        min_age = viewer.min_age_preference
    else:
        min_age = viewer.age - DEFAULT_AGE_DELTA

    if viewer.max_age_preference is not None:
        max_age = viewer.max_age_preference
    else:
        max_age = viewer.age + DEFAULT_AGE_DELTA

    return max(min_age, MINIMUM_AGE), max_age


def is_eligible(
    viewer: ViewerProfile, candidate: CandidateProfile, mutual: bool = False
) -> bool:
    """Check whether a candidate passes the hard filters for a viewer.

    Rules:
    1. Candidate age within ``age_bounds(viewer)`` (inclusive)
    2. Viewer's partner preference accepts the candidate's sex

    Preference matching is one-directional by default. With ``mutual=True``
    the candidate's preference must also accept the viewer's sex.

    Args:
        viewer: The user requesting the feed
        candidate: Someone checked in at the venue
        mutual: Also require the candidate to want the viewer

    Returns:
        True if the candidate may appear in the viewer's feed
    """
    min_age, max_age = age_bounds(viewer)
    if not min_age <= candidate.age <= max_age:
        return False

    if not wants(viewer.partner_preference, candidate.sex):
        return False

    if mutual and not wants(candidate.partner_preference, viewer.sex):
        return False

    return True
