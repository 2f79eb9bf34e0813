"""Seeded deterministic shuffle used to break score ties.

The shuffle is keyed by a text seed (typically the viewer's check-in id) so
re-rendering the same feed in the same session never reshuffles it. The
generator is Mulberry32 seeded with the FNV-1a hash of the seed; both work
on 32-bit unsigned arithmetic so a given seed orders a list the same way on
every platform.

Not suitable for anything security sensitive.
"""

import math
from typing import List, Sequence, TypeVar

from venue_feed.utils.hashing import MASK_32, fnv1a_32

T = TypeVar("T")

MULBERRY32_INCREMENT = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply."""
    return (a * b) & MASK_32


class Mulberry32:
    """Mulberry32 pseudo-random generator.

    Each call advances a 32-bit state by a fixed odd increment and mixes it
    into a float in [0, 1).

    Example:
        >>> rng = Mulberry32(42)
        >>> 0.0 <= rng.next_float() < 1.0
        True
    """

    def __init__(self, seed: int):
        self.state = seed & MASK_32

    def next_float(self) -> float:
        self.state = (self.state + MULBERRY32_INCREMENT) & MASK_32
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
        return ((t ^ (t >> 14)) & MASK_32) / 4294967296.0


def seeded_shuffle(items: Sequence[T], seed: str) -> List[T]:
    """Return a new list with the elements of ``items`` in a seeded order.

    Runs a Fisher-Yates shuffle on a private copy, walking from the last
    index down to 1. ``items`` itself is never modified.

    Args:
        items: Sequence to shuffle
        seed: Text seed; identical seeds give identical orders

    Returns:
        Shuffled copy of ``items``
    """
    result = list(items)
    rng = Mulberry32(fnv1a_32(seed))
    for i in range(len(result) - 1, 0, -1):
        j = math.floor(rng.next_float() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result
