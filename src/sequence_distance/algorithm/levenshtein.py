"""Edit-distance family: Levenshtein and Damerau-Levenshtein.

Both metrics count unit-cost single-element edits (insert, delete,
substitute; Damerau-Levenshtein also adjacent transpositions) needed to turn
one sequence into the other.  Each accepts an optional ``max_distance``
bound.  With a bound active the DP stops as soon as a lower bound on the
final distance reaches it and reports ``Exceeded(bound)``; the work done is
then proportional to the bound rather than to the full table.

The shared prefix and suffix of the inputs are stripped first — the edits
only ever touch the differing middle.

Example::

    from sequence_distance.algorithm import Levenshtein

    Levenshtein().distance("kitten", "sitting")              # Exact(3)
    Levenshtein.with_max_distance(2).distance("kitten", "sitting")  # Exceeded(2)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Self

from sequence_distance._affix import strip_common_affix
from sequence_distance.algorithm.config import validate_max_distance
from sequence_distance.algorithm.normalizer import normalize_edit_distance
from sequence_distance.result import DistanceValue, Exact, Exceeded

logger = logging.getLogger(__name__)

__all__ = ["DamerauLevenshtein", "Levenshtein"]


@dataclass(frozen=True, slots=True)
class _EditDistance(ABC):
    """Common configuration and normalization for bounded edit distances.

    Attributes:
        max_distance: The largest distance of interest, or ``None`` for an
            unbounded computation.  Must be >= 0.
    """

    max_distance: int | None = None

    def __post_init__(self) -> None:
        validate_max_distance(self.max_distance)

    @classmethod
    def with_max_distance(cls, max_distance: int) -> Self:
        """Build a metric that stops once the distance reaches ``max_distance``."""
        return cls(max_distance=max_distance)

    @abstractmethod
    def distance(
        self, a: Sequence[Hashable], b: Sequence[Hashable]
    ) -> DistanceValue: ...

    def normalized_distance(
        self, a: Sequence[Hashable], b: Sequence[Hashable]
    ) -> float:
        """Distance divided by the longer length, in [0.0, 1.0].

        Under ``Exceeded(bound)`` this is ``bound / max(len(a), len(b))``, a
        lower-bound estimate of the exact ratio.
        """
        return normalize_edit_distance(self.distance(a, b), len(a), len(b))

    def _exceeded(self, bound: int, where: str) -> Exceeded:
        logger.debug(
            "%s stopped early (%s): distance >= %d",
            type(self).__name__,
            where,
            bound,
        )
        return Exceeded(bound)


@dataclass(frozen=True, slots=True)
class Levenshtein(_EditDistance):
    """Levenshtein distance: insertions, deletions and substitutions.

    Uses a rolling two-row DP with the shorter sequence on the inner axis,
    so memory is O(min(len(a), len(b))).
    """

    def distance(
        self, a: Sequence[Hashable], b: Sequence[Hashable]
    ) -> DistanceValue:
        """Compute the Levenshtein distance between ``a`` and ``b``.

        Returns:
            ``Exact(d)`` with the true distance, or ``Exceeded(max_distance)``
            when a bound is configured and the distance is >= that bound.
        """
        bound = self.max_distance
        a, b = strip_common_affix(a, b)

        # `a` is the shorter remainder: it spans the row.
        if len(a) > len(b):
            a, b = b, a

        # The distance is never below the length difference
        if bound is not None and len(b) - len(a) >= bound:
            return self._exceeded(bound, "length difference")

        if not a:
            return Exact(len(b))

        prev_row = list(range(len(a) + 1))
        for i, ch_b in enumerate(b, start=1):
            curr_row = [i] + [0] * len(a)
            for j, ch_a in enumerate(a, start=1):
                insert_cost = curr_row[j - 1] + 1
                delete_cost = prev_row[j] + 1
                replace_cost = prev_row[j - 1] + (0 if ch_a == ch_b else 1)
                curr_row[j] = min(insert_cost, delete_cost, replace_cost)
            # Every alignment path crosses every row, so the row minimum
            # bounds the final distance from below.
            if bound is not None and min(curr_row) >= bound:
                return self._exceeded(bound, f"row {i}")
            prev_row = curr_row

        result = prev_row[-1]
        if bound is not None and result >= bound:
            return self._exceeded(bound, "full table")
        return Exact(result)


@dataclass(frozen=True, slots=True)
class DamerauLevenshtein(_EditDistance):
    """Damerau-Levenshtein distance: Levenshtein plus adjacent transpositions.

    This is the unrestricted variant (Lowrance-Wagner): a substring may be
    edited again after a transposition, so ``"CA"`` -> ``"ABC"`` costs 2,
    not 3 as under optimal string alignment.  The algorithm keeps, for every
    distinct element, the last row at which it occurred in ``a`` and, per
    row, the last column that matched in ``b``; transposition costs are then
    an O(1) table lookup.  The transposition lookup reaches arbitrarily far
    back, so the full table is retained: memory is O(len(a) * len(b)) even
    when a bound ends the computation early.
    """

    def distance(
        self, a: Sequence[Hashable], b: Sequence[Hashable]
    ) -> DistanceValue:
        """Compute the Damerau-Levenshtein distance between ``a`` and ``b``.

        Returns:
            ``Exact(d)`` with the true distance, or ``Exceeded(max_distance)``
            when a bound is configured and the distance is >= that bound.
        """
        bound = self.max_distance
        a, b = strip_common_affix(a, b)
        n = len(a)
        m = len(b)

        if bound is not None and abs(n - m) >= bound:
            return self._exceeded(bound, "length difference")

        if n == 0 or m == 0:
            return Exact(max(n, m))

        # table[i + 1][j + 1] holds the distance between a[:i] and b[:j];
        # row and column 0 are sentinels larger than any real distance.
        sentinel = n + m
        table = [[sentinel] * (m + 2)]
        table.append([sentinel, *range(m + 1)])
        table.extend([sentinel, i] + [0] * m for i in range(1, n + 1))

        last_row: dict[Hashable, int] = {}
        # min over finished rows r of (row_min(r) - r); row 0 has minimum 0.
        best_skip = 0

        for i in range(1, n + 1):
            ch_a = a[i - 1]
            last_match_col = 0
            for j in range(1, m + 1):
                ch_b = b[j - 1]
                k = last_row.get(ch_b, 0)
                ell = last_match_col
                if ch_a == ch_b:
                    cost = 0
                    last_match_col = j
                else:
                    cost = 1
                table[i + 1][j + 1] = min(
                    table[i][j] + cost,  # substitute
                    table[i + 1][j] + 1,  # insert
                    table[i][j + 1] + 1,  # delete
                    table[k][ell] + (i - k - 1) + 1 + (j - ell - 1),  # transpose
                )
            last_row[ch_a] = i

            if bound is not None:
                row_min = min(table[i + 1][1:])
                # A transposition jumping from row r over row i lands on a
                # cell worth at least row_min(r) + (i - r).
                floor = min(row_min, best_skip + i)
                if floor >= bound:
                    return self._exceeded(bound, f"row {i}")
                best_skip = min(best_skip, row_min - i)

        result = table[n + 1][m + 1]
        if bound is not None and result >= bound:
            return self._exceeded(bound, "full table")
        return Exact(result)
