"""Jaro and Jaro-Winkler similarity, exposed as distances.

Jaro counts elements that match within a sliding window and penalizes
matches that appear in a different relative order::

    window = max(0, max(len_a, len_b) // 2 - 1)
    sim    = (m / len_a + m / len_b + (m - t) / m) / 3

where ``m`` is the number of matches and ``t`` half the number of
out-of-order matches.  Jaro-Winkler adds a bonus for a shared prefix.  Both
distances are ``1 - similarity`` and are already normalized.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from sequence_distance._affix import common_prefix_length
from sequence_distance.algorithm.config import (
    DEFAULT_WINKLER_MAX_PREFIX,
    DEFAULT_WINKLER_SCALING,
    DEFAULT_WINKLER_THRESHOLD,
    validate_winkler,
)
from sequence_distance.algorithm.normalizer import clamp_unit
from sequence_distance.result import Exact

__all__ = ["Jaro", "JaroWinkler", "jaro_similarity", "winkler_boost"]


def jaro_similarity(a: Sequence[Hashable], b: Sequence[Hashable]) -> float:
    """Return the Jaro similarity of ``a`` and ``b`` in [0.0, 1.0].

    Both empty -> 1.0.  No matching elements (including exactly one side
    empty) -> 0.0.
    """
    len_a = len(a)
    len_b = len(b)
    if len_a == 0 and len_b == 0:
        return 1.0
    if len_a == 0 or len_b == 0:
        return 0.0
    if len_a > len_b:
        a, b = b, a
        len_a, len_b = len_b, len_a

    window = max(0, max(len_a, len_b) // 2 - 1)
    matched_a = [False] * len_a
    matched_b = [False] * len_b
    matches = 0

    for i, ch_a in enumerate(a):
        start = max(0, i - window)
        end = min(i + window + 1, len_b)
        for j in range(start, end):
            if not matched_b[j] and ch_a == b[j]:
                matched_a[i] = True
                matched_b[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    # Walk both match lists in order; each mismatch is half a transposition.
    half_transpositions = 0
    k = 0
    for i, ch_a in enumerate(a):
        if not matched_a[i]:
            continue
        while not matched_b[k]:
            k += 1
        if ch_a != b[k]:
            half_transpositions += 1
        k += 1

    t = half_transpositions / 2
    return (matches / len_a + matches / len_b + (matches - t) / matches) / 3.0


def winkler_boost(
    similarity: float,
    prefix_length: int,
    scaling: float,
    threshold: float,
    max_prefix: int,
) -> float:
    """Apply the Winkler prefix bonus to ``similarity``.

    The bonus ``min(prefix_length, max_prefix) * scaling * (1 - similarity)``
    is added only when ``similarity`` exceeds ``threshold``; the result is
    clamped to at most 1.0.
    """
    if similarity <= threshold:
        return similarity
    prefix = min(prefix_length, max_prefix)
    return clamp_unit(similarity + prefix * scaling * (1.0 - similarity))


@dataclass(frozen=True, slots=True)
class Jaro:
    """Jaro distance, ``1 - jaro_similarity``."""

    def distance(self, a: Sequence[Hashable], b: Sequence[Hashable]) -> Exact:
        return Exact(self.normalized_distance(a, b))

    def normalized_distance(
        self, a: Sequence[Hashable], b: Sequence[Hashable]
    ) -> float:
        return clamp_unit(1.0 - jaro_similarity(a, b))


@dataclass(frozen=True, slots=True)
class JaroWinkler:
    """Jaro-Winkler distance: Jaro similarity with a common-prefix bonus.

    Attributes:
        scaling: Bonus per shared prefix element (default 0.1).
        threshold: The bonus applies only above this Jaro similarity
            (default 0.7).
        max_prefix: Longest prefix that earns a bonus (default 4).
    """

    scaling: float = DEFAULT_WINKLER_SCALING
    threshold: float = DEFAULT_WINKLER_THRESHOLD
    max_prefix: int = DEFAULT_WINKLER_MAX_PREFIX

    def __post_init__(self) -> None:
        validate_winkler(self.scaling, self.threshold, self.max_prefix)

    def distance(self, a: Sequence[Hashable], b: Sequence[Hashable]) -> Exact:
        return Exact(self.normalized_distance(a, b))

    def normalized_distance(
        self, a: Sequence[Hashable], b: Sequence[Hashable]
    ) -> float:
        boosted = winkler_boost(
            jaro_similarity(a, b),
            common_prefix_length(a, b),
            self.scaling,
            self.threshold,
            self.max_prefix,
        )
        return clamp_unit(1.0 - boosted)
