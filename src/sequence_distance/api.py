"""Public API functions for sequence-distance.

This module provides the user-facing convenience functions: compare,
compare_normalized, similarity and is_similar.  Each takes the metric
descriptor explicitly (defaulting to ``Levenshtein()``); descriptors are
immutable, so there is no global state between calls.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from sequence_distance.algorithm.levenshtein import Levenshtein
from sequence_distance.errors import ConfigurationError
from sequence_distance.protocols import DistanceMetric
from sequence_distance.result import DistanceValue

__all__ = ["compare", "compare_normalized", "is_similar", "similarity"]

_DEFAULT_METRIC = Levenshtein()


def compare(
    a: Sequence[Hashable],
    b: Sequence[Hashable],
    metric: DistanceMetric | None = None,
) -> DistanceValue:
    """Return the raw distance between two sequences.

    Args:
        a:      First sequence (``str``, ``list``, ``tuple``, ...).
        b:      Second sequence.
        metric: Any ``DistanceMetric``.  Defaults to ``Levenshtein()``.

    Returns:
        ``Exact(value)``, or ``Exceeded(bound)`` from a bounded edit-distance
        metric whose bound was reached.
    """
    metric = metric if metric is not None else _DEFAULT_METRIC
    return metric.distance(a, b)


def compare_normalized(
    a: Sequence[Hashable],
    b: Sequence[Hashable],
    metric: DistanceMetric | None = None,
) -> float:
    """Return the normalized distance in [0.0, 1.0]; 0.0 means identical.

    Args:
        a:      First sequence.
        b:      Second sequence.
        metric: Any ``DistanceMetric``.  Defaults to ``Levenshtein()``.
    """
    metric = metric if metric is not None else _DEFAULT_METRIC
    return metric.normalized_distance(a, b)


def similarity(
    a: Sequence[Hashable],
    b: Sequence[Hashable],
    metric: DistanceMetric | None = None,
) -> float:
    """Return ``1 - compare_normalized(a, b, metric)``; 1.0 means identical."""
    return 1.0 - compare_normalized(a, b, metric)


def is_similar(
    a: Sequence[Hashable],
    b: Sequence[Hashable],
    metric: DistanceMetric | None = None,
    threshold: float = 0.8,
) -> bool:
    """Return True when ``similarity(a, b, metric)`` is at least ``threshold``.

    Args:
        a:         First sequence.
        b:         Second sequence.
        metric:    Any ``DistanceMetric``.  Defaults to ``Levenshtein()``.
        threshold: Minimum similarity in [0, 1] to count as similar.

    Raises:
        ConfigurationError: If ``threshold`` lies outside [0, 1].
    """
    if not 0.0 <= threshold <= 1.0:
        msg = f"threshold must be in [0, 1], got {threshold}"
        raise ConfigurationError(msg)
    return similarity(a, b, metric) >= threshold
