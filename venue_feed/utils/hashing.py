"""Hashing utilities for turning session seeds into PRNG state.

This module provides a deterministic 32-bit string hash (FNV-1a). It is used
to derive the integer seed of the feed shuffle from a text seed such as a
check-in id. It is not a cryptographic hash.
"""

FNV_OFFSET_BASIS_32 = 0x811C9DC5
FNV_PRIME_32 = 0x01000193
MASK_32 = 0xFFFFFFFF


def fnv1a_32(value: str) -> int:
    """Compute the 32-bit FNV-1a hash of a string.

    The string is encoded as UTF-8 and every byte is XORed into the
    accumulator before multiplying by the FNV prime. Only the low 32 bits
    are kept after each step.

    Args:
        value: Text to hash (may be empty)

    Returns:
        Unsigned 32-bit integer

    Example:
        >>> fnv1a_32("")
        2166136261
        >>> hex(fnv1a_32("a"))
        '0xe40c292c'
    """
    h = FNV_OFFSET_BASIS_32
    for byte in value.encode("utf-8"):
        h ^= byte
        h = (h * FNV_PRIME_32) & MASK_32
    return h
