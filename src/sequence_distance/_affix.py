"""Common prefix and suffix helpers shared by edit distances and Winkler."""

from __future__ import annotations

from collections.abc import Hashable, Sequence


def common_prefix_length(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """Return the number of leading elements ``a`` and ``b`` share."""
    n = 0
    for x, y in zip(a, b):
        if x != y:
            break
        n += 1
    return n


def common_suffix_length(
    a: Sequence[Hashable], b: Sequence[Hashable], limit: int | None = None
) -> int:
    """Return the number of trailing elements ``a`` and ``b`` share.

    ``limit`` caps the count so a suffix never overlaps an already stripped
    prefix.
    """
    bound = min(len(a), len(b)) if limit is None else limit
    n = 0
    while n < bound and a[len(a) - 1 - n] == b[len(b) - 1 - n]:
        n += 1
    return n


def strip_common_affix(
    a: Sequence[Hashable], b: Sequence[Hashable]
) -> tuple[Sequence[Hashable], Sequence[Hashable]]:
    """Drop the shared prefix and suffix, returning the distinct middles.

    Stripping is distance-preserving for the edit-distance family and shrinks
    the DP table to the region where the sequences actually differ.
    """
    prefix = common_prefix_length(a, b)
    suffix = common_suffix_length(a, b, limit=min(len(a), len(b)) - prefix)
    return a[prefix : len(a) - suffix], b[prefix : len(b) - suffix]
