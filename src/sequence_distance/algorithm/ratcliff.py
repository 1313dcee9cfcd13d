"""Ratcliff-Obershelp (gestalt pattern matching) distance.

The matched length ``M`` is the length of the longest common contiguous run
plus, recursively, the matched length of the unmatched regions to its left
and to its right::

    sim  = 2 * M / (len_a + len_b)
    dist = 1 - sim

Two empty sequences are identical (distance 0.0).
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from sequence_distance.algorithm.normalizer import clamp_unit
from sequence_distance.result import Exact

__all__ = ["CommonRun", "RatcliffObershelp", "longest_common_run", "matched_length"]


class CommonRun(NamedTuple):
    """A contiguous run shared by two sequences."""

    start_a: int
    start_b: int
    length: int


def longest_common_run(a: Sequence[Hashable], b: Sequence[Hashable]) -> CommonRun:
    """Find the longest contiguous run common to ``a`` and ``b``.

    Ties resolve to the run that ends first in ``a`` (then in ``b``).  Uses a
    single DP row of run lengths ending at each position of ``b``.

    Returns:
        ``CommonRun`` with ``length == 0`` when nothing is shared.
    """
    best = CommonRun(0, 0, 0)
    prev_row = [0] * (len(b) + 1)
    for i, ch_a in enumerate(a, start=1):
        curr_row = [0] * (len(b) + 1)
        for j, ch_b in enumerate(b, start=1):
            if ch_a == ch_b:
                run = prev_row[j - 1] + 1
                curr_row[j] = run
                if run > best.length:
                    best = CommonRun(i - run, j - run, run)
        prev_row = curr_row
    return best


def matched_length(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """Total length of common runs found by recursive gestalt matching."""
    total = 0
    # Explicit stack of (a_lo, a_hi, b_lo, b_hi) regions still to match.
    pending = [(0, len(a), 0, len(b))]
    while pending:
        a_lo, a_hi, b_lo, b_hi = pending.pop()
        if a_lo >= a_hi or b_lo >= b_hi:
            continue
        run = longest_common_run(a[a_lo:a_hi], b[b_lo:b_hi])
        if run.length == 0:
            continue
        total += run.length
        mid_a = a_lo + run.start_a
        mid_b = b_lo + run.start_b
        pending.append((a_lo, mid_a, b_lo, mid_b))
        pending.append((mid_a + run.length, a_hi, mid_b + run.length, b_hi))
    return total


@dataclass(frozen=True, slots=True)
class RatcliffObershelp:
    """Ratcliff-Obershelp distance, ``1 - 2 * M / (len_a + len_b)``."""

    def distance(self, a: Sequence[Hashable], b: Sequence[Hashable]) -> Exact:
        return Exact(self.normalized_distance(a, b))

    def normalized_distance(
        self, a: Sequence[Hashable], b: Sequence[Hashable]
    ) -> float:
        total = len(a) + len(b)
        if total == 0:
            return 0.0
        # Ties between equally long runs depend on argument order; fixing the
        # order keeps the distance symmetric.
        if len(a) > len(b):
            a, b = b, a
        matched = matched_length(a, b)
        if len(a) == len(b) and matched < len(a):
            matched = max(matched, matched_length(b, a))
        return clamp_unit(1.0 - 2.0 * matched / total)
