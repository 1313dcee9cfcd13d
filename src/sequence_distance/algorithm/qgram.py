"""Q-gram family: metrics over multisets of length-q fragments.

Each sequence is turned into a q-gram profile — a ``Counter`` mapping every
contiguous window of length ``q`` (as a tuple) to its number of occurrences.
Profile conventions:

- A sequence of length >= q yields ``len - q + 1`` windows.
- A non-empty sequence shorter than ``q`` yields a single gram: itself.
- An empty sequence yields an empty profile.

The two profiles are aligned over the union of their grams as numpy count
vectors, from which every metric is derived:

- ``QGram``:        L1 distance ``sum |A(g) - B(g)|``, normalized by ``|A| + |B|``.
- ``Cosine``:       ``1 - A.B / (||A|| * ||B||)``.
- ``Jaccard``:      ``1 - inter / union``.
- ``SorensenDice``: ``1 - 2 * inter / (|A| + |B|)``.
- ``Overlap``:      ``1 - inter / min(|A|, |B|)``.

Two empty profiles are identical (0.0); exactly one empty profile is
maximally dissimilar (1.0).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Hashable, Sequence
from dataclasses import dataclass

import numpy as np

from sequence_distance.algorithm.config import DEFAULT_Q, validate_q
from sequence_distance.algorithm.normalizer import clamp_unit, normalize_by_total
from sequence_distance.result import Exact

__all__ = [
    "Cosine",
    "Jaccard",
    "Overlap",
    "QGram",
    "QGramVectors",
    "SorensenDice",
    "qgram_profile",
    "qgram_vectors",
]


def qgram_profile(seq: Sequence[Hashable], q: int) -> Counter[tuple[Hashable, ...]]:
    """Build the q-gram multiset of ``seq``.

    Args:
        seq: Any sequence of hashable elements.
        q:   Fragment length (> 0).

    Returns:
        ``Counter`` mapping each gram tuple to its occurrence count.
    """
    validate_q(q)
    if len(seq) == 0:
        return Counter()
    if len(seq) < q:
        return Counter([tuple(seq)])
    return Counter(tuple(seq[i : i + q]) for i in range(len(seq) - q + 1))


@dataclass(frozen=True, slots=True)
class QGramVectors:
    """Count vectors of two q-gram profiles aligned over their union.

    Attributes:
        counts_a: Occurrences of each gram in the first sequence.
        counts_b: Occurrences of each gram in the second sequence.
    """

    counts_a: np.ndarray
    counts_b: np.ndarray

    @property
    def size_a(self) -> int:
        return int(self.counts_a.sum())

    @property
    def size_b(self) -> int:
        return int(self.counts_b.sum())

    @property
    def intersection(self) -> int:
        return int(np.minimum(self.counts_a, self.counts_b).sum())

    @property
    def union(self) -> int:
        return self.size_a + self.size_b - self.intersection

    @property
    def l1(self) -> int:
        return int(np.abs(self.counts_a - self.counts_b).sum())

    def cosine_similarity(self) -> float:
        # Squared norms stay integral so identical profiles give exactly 1.0.
        squared_a = int(np.dot(self.counts_a, self.counts_a))
        squared_b = int(np.dot(self.counts_b, self.counts_b))
        if squared_a == 0 or squared_b == 0:
            return 1.0 if squared_a == squared_b else 0.0
        dot = int(np.dot(self.counts_a, self.counts_b))
        return dot / float(np.sqrt(float(squared_a * squared_b)))


def qgram_vectors(a: Sequence[Hashable], b: Sequence[Hashable], q: int) -> QGramVectors:
    """Profile ``a`` and ``b`` and align their counts over the shared gram space."""
    profile_a = qgram_profile(a, q)
    profile_b = qgram_profile(b, q)
    grams = list(profile_a.keys() | profile_b.keys())
    return QGramVectors(
        counts_a=np.array([profile_a[g] for g in grams], dtype=np.int64),
        counts_b=np.array([profile_b[g] for g in grams], dtype=np.int64),
    )


def _empty_sides_distance(vectors: QGramVectors) -> float | None:
    """Distance for degenerate profiles, or ``None`` when both are non-empty."""
    empty_a = vectors.size_a == 0
    empty_b = vectors.size_b == 0
    if empty_a and empty_b:
        return 0.0
    if empty_a or empty_b:
        return 1.0
    return None


@dataclass(frozen=True, slots=True)
class _QGramMetric(ABC):
    """Base for q-gram metrics whose raw distance is already in [0, 1].

    Attributes:
        q: Fragment length (> 0).  Defaults to 2.
    """

    q: int = DEFAULT_Q

    def __post_init__(self) -> None:
        validate_q(self.q)

    def distance(self, a: Sequence[Hashable], b: Sequence[Hashable]) -> Exact:
        return Exact(self.normalized_distance(a, b))

    def normalized_distance(
        self, a: Sequence[Hashable], b: Sequence[Hashable]
    ) -> float:
        vectors = qgram_vectors(a, b, self.q)
        degenerate = _empty_sides_distance(vectors)
        if degenerate is not None:
            return degenerate
        return clamp_unit(1.0 - self._similarity(vectors))

    @abstractmethod
    def _similarity(self, vectors: QGramVectors) -> float: ...


@dataclass(frozen=True, slots=True)
class QGram:
    """L1 distance between q-gram count vectors.

    The raw distance is an ``int``; normalization divides by the combined
    profile size ``|A| + |B|``.

    Attributes:
        q: Fragment length (> 0).  Defaults to 2.
    """

    q: int = DEFAULT_Q

    def __post_init__(self) -> None:
        validate_q(self.q)

    def distance(self, a: Sequence[Hashable], b: Sequence[Hashable]) -> Exact:
        return Exact(qgram_vectors(a, b, self.q).l1)

    def normalized_distance(
        self, a: Sequence[Hashable], b: Sequence[Hashable]
    ) -> float:
        vectors = qgram_vectors(a, b, self.q)
        return normalize_by_total(vectors.l1, vectors.size_a + vectors.size_b)


@dataclass(frozen=True, slots=True)
class Cosine(_QGramMetric):
    """Cosine distance between q-gram count vectors."""

    def _similarity(self, vectors: QGramVectors) -> float:
        return vectors.cosine_similarity()


@dataclass(frozen=True, slots=True)
class Jaccard(_QGramMetric):
    """Jaccard distance, ``1 - |A & B| / |A | B|`` on q-gram multisets."""

    def _similarity(self, vectors: QGramVectors) -> float:
        return vectors.intersection / vectors.union


@dataclass(frozen=True, slots=True)
class SorensenDice(_QGramMetric):
    """Sorensen-Dice distance, ``1 - 2 |A & B| / (|A| + |B|)``."""

    def _similarity(self, vectors: QGramVectors) -> float:
        return 2.0 * vectors.intersection / (vectors.size_a + vectors.size_b)


@dataclass(frozen=True, slots=True)
class Overlap(_QGramMetric):
    """Overlap distance, ``1 - |A & B| / min(|A|, |B|)``."""

    def _similarity(self, vectors: QGramVectors) -> float:
        return vectors.intersection / min(vectors.size_a, vectors.size_b)
