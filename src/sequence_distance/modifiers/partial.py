"""Partial modifier: best alignment of the shorter sequence inside the longer."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from sequence_distance.protocols import DistanceMetric
from sequence_distance.result import Exact

__all__ = ["Partial"]


@dataclass(frozen=True, slots=True)
class Partial:
    """Minimum inner distance between the shorter input and any equal-length
    window of the longer one.

    Sequences of equal length are passed to the inner metric unchanged.
    Windows are taken by slicing, so the longer input must support it (every
    built-in sequence type does).

    Attributes:
        inner: Any ``DistanceMetric``.
    """

    inner: DistanceMetric

    def distance(self, a: Sequence[Hashable], b: Sequence[Hashable]) -> Exact:
        return Exact(self.normalized_distance(a, b))

    def normalized_distance(
        self, a: Sequence[Hashable], b: Sequence[Hashable]
    ) -> float:
        if len(a) == len(b):
            return self.inner.normalized_distance(a, b)

        short, long = (a, b) if len(a) < len(b) else (b, a)
        width = len(short)
        best = 1.0
        for offset in range(len(long) - width + 1):
            best = min(
                best,
                self.inner.normalized_distance(short, long[offset : offset + width]),
            )
            if best == 0.0:
                break
        return best
