"""Small string helpers shared by the cipher modules."""

from __future__ import annotations

from collections.abc import Sequence


def are_equal_strings(first: str, second: str) -> bool:
    """Return True when both strings have the same length and characters."""
    return len(first) == len(second) and first == second


def key_order(key: Sequence) -> list[int]:
    """Rank every item of *key* from 1 upwards in sorted order.

    Equal items are ranked left to right, so the result is always a
    permutation of ``1..len(key)``.
    """
    ranks = [0] * len(key)
    ordered = sorted(enumerate(key), key=lambda pair: pair[1])
    for rank, (position, _) in enumerate(ordered, start=1):
        ranks[position] = rank
    return ranks