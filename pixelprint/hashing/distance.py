"""
Distance calculations between hash strings.

Hashes are only comparable when produced by the same algorithm at the same
precision. A length mismatch is reported as the longer length so callers
rank such pairs as maximally dissimilar.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Mapping, Optional, Union


def hamming_distance(hash1: str, hash2: str) -> int:
    """
    Count the positions at which two hashes differ.

    Args:
        hash1: First bit string
        hash2: Second bit string

    Returns:
        Number of differing positions, or max(len(hash1), len(hash2)) when
        the lengths differ

    Examples:
        >>> hamming_distance('11110000', '11001100')
        4
        >>> hamming_distance('11110000', '1111000000')
        10
    """
    if len(hash1) != len(hash2):
        return max(len(hash1), len(hash2))
    return sum(1 for a, b in zip(hash1, hash2) if a != b)


def similarity(hash1: str, hash2: str) -> float:
    """
    Fraction of matching bits, from 0.0 (nothing matches) to 1.0.

    Two empty hashes are identical; hashes of different length score 0.0.
    """
    longest = max(len(hash1), len(hash2))
    if longest == 0:
        return 1.0
    return 1.0 - hamming_distance(hash1, hash2) / longest


def is_similar(hash1: str, hash2: str, threshold: int) -> bool:
    """
    Check whether two comparable hashes differ in at most threshold bits.

    Hashes of different length are never similar.
    """
    if len(hash1) != len(hash2):
        return False
    return hamming_distance(hash1, hash2) <= threshold


def rank_by_distance(
    query: str,
    candidates: Union[Mapping[Hashable, Optional[str]], Iterable[tuple[Hashable, Optional[str]]]],
) -> list[tuple[Hashable, int]]:
    """
    Order candidates by Hamming distance to a query hash, closest first.

    Args:
        query: Bit string to compare against
        candidates: Mapping of key -> hash, or iterable of (key, hash) pairs.
            Entries whose hash is None are skipped.

    Returns:
        List of (key, distance) sorted ascending; ties keep input order
    """
    items = candidates.items() if isinstance(candidates, Mapping) else candidates
    scored = [
        (key, hamming_distance(query, value))
        for key, value in items
        if value is not None
    ]
    # sorted() is stable, so equal distances keep input order
    return sorted(scored, key=lambda item: item[1])


__all__ = [
    'hamming_distance',
    'similarity',
    'is_similar',
    'rank_by_distance',
]
