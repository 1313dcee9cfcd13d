"""Normalization rules mapping raw metric output onto [0, 1].

Formulas::

    edit distance:  Exact(d)     -> d / max(len_a, len_b)
                    Exceeded(b)  -> b / max(len_a, len_b)
    QGram:          d / (|A| + |B|)

An ``Exceeded`` result normalizes to a lower-bound estimate because the
exact value was never computed; callers needing the exact ratio must use an
unbounded metric.  Both empty inputs normalize to 0.0 (identical).
"""

from __future__ import annotations

from sequence_distance.result import DistanceValue


def clamp_unit(value: float) -> float:
    """Clamp ``value`` into [0.0, 1.0], absorbing floating-point drift."""
    return min(1.0, max(0.0, value))


def normalize_by_total(value: float, total: float) -> float:
    """Divide ``value`` by ``total``; 0.0 when ``total`` is zero."""
    if total == 0:
        return 0.0
    return clamp_unit(value / total)


def normalize_edit_distance(value: DistanceValue, len_a: int, len_b: int) -> float:
    """Normalize an edit-distance result by the longer sequence length.

    Args:
        value: ``Exact`` distance or ``Exceeded`` bound from an edit-distance
            metric.
        len_a: Length of the first sequence.
        len_b: Length of the second sequence.

    Returns:
        Float in [0.0, 1.0].  0.0 when both sequences are empty.
    """
    return normalize_by_total(float(value), max(len_a, len_b))
