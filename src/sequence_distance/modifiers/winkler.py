"""Winkler modifier: the Jaro-Winkler prefix boost applied to any metric."""

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
from sequence_distance.algorithm.jaro import winkler_boost
from sequence_distance.algorithm.normalizer import clamp_unit
from sequence_distance.protocols import DistanceMetric
from sequence_distance.result import Exact

__all__ = ["Winkler"]


@dataclass(frozen=True, slots=True)
class Winkler:
    """Boost the similarity of sequences sharing a prefix.

    The inner metric's normalized distance is turned into a similarity
    ``s = 1 - d``.  When ``s`` exceeds ``threshold`` it becomes
    ``s + min(prefix, max_prefix) * scaling * (1 - s)``, where ``prefix`` is
    the common-prefix length of the two inputs.  ``Winkler(Jaro())`` is
    equivalent to ``JaroWinkler()``.

    Attributes:
        inner: Any ``DistanceMetric``.
        scaling: Bonus per shared prefix element (default 0.1).
        threshold: Similarity above which the bonus applies (default 0.7).
        max_prefix: Longest prefix that earns a bonus (default 4).
    """

    inner: DistanceMetric
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
        similarity = 1.0 - self.inner.normalized_distance(a, b)
        boosted = winkler_boost(
            similarity,
            common_prefix_length(a, b),
            self.scaling,
            self.threshold,
            self.max_prefix,
        )
        return clamp_unit(1.0 - boosted)
