"""Ranking policy constants.

Every number the feed ranking depends on lives here so the policy can be
audited (and tested) in one place.
"""

from datetime import timedelta

# Eligibility
DEFAULT_AGE_DELTA = 10
MINIMUM_AGE = 18

# Keyword extraction
MIN_KEYWORD_LENGTH = 3

# Portuguese function words plus a few filler verbs common in bios
STOPWORDS = frozenset(
    {
        "a", "o", "e", "de", "do", "da", "em", "no", "na", "os", "as", "um",
        "uma", "por", "com", "se", "que", "ao", "aos", "das", "dos", "para",
        "mas", "ou", "is", "me", "my", "eu", "tu", "ele", "ela", "nos", "eles",
        "nao", "sou", "ser", "ter", "gosto", "curto",
    }
)

# Recency window
FRESH_WINDOW = timedelta(minutes=15)
STALE_AFTER = timedelta(hours=4)

# Composite score weights, must sum to 1
BIO_SIMILARITY_WEIGHT = 0.6
RECENCY_WEIGHT = 0.4
