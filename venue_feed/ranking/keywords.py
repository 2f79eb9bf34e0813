"""Keyword extraction for bio similarity."""

import re
from typing import Optional, Set

from .policy import MIN_KEYWORD_LENGTH, STOPWORDS

# Anything that is not a (possibly accented) letter or whitespace
_NON_LETTER_RE = re.compile(r"[^a-záàâãéêíóôõúüçñ\s]")


def extract_keywords(bio: Optional[str]) -> Set[str]:
    """Extract the significant keywords of a bio.

    The bio is lowercased, every non-letter character becomes a space, and
    the result is split on whitespace. Tokens shorter than
    ``MIN_KEYWORD_LENGTH`` and stopwords are dropped.

    Args:
        bio: Free-text bio, or None

    Returns:
        Set of normalized keywords (empty for a missing or blank bio)

    Example:
        >>> sorted(extract_keywords("Gosto de música, viagem & fotografia!"))
        ['fotografia', 'música', 'viagem']
    """
    if not bio:
        return set()

    cleaned = _NON_LETTER_RE.sub(" ", bio.lower())
    return {
        word
        for word in cleaned.split()
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOPWORDS
    }
