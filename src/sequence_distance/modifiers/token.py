"""Token modifiers: word-order and word-multiplicity invariant comparison.

Both modifiers split ``str`` inputs on whitespace (``str.split()``), rebuild
strings from the tokens and hand those to the inner metric:

- ``TokenSort`` sorts the tokens of each side and rejoins them, so word
  order no longer matters.
- ``TokenSet`` reduces each side to its set of tokens and compares the
  shared tokens against each side's full set, taking the best of three
  pairings::

      inter  = sorted(A & B)
      diff_a = sorted(A - B)
      diff_b = sorted(B - A)

      min(d(inter, inter + diff_a),
          d(inter, inter + diff_b),
          d(inter + diff_a, inter + diff_b))

  With no shared tokens only the last pairing is meaningful, so the result
  is ``d(diff_a, diff_b)``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sequence_distance.protocols import DistanceMetric
from sequence_distance.result import Exact

__all__ = ["TokenSet", "TokenSort"]

SEPARATOR = " "


def _join(*groups: Iterable[str]) -> str:
    """Join every token of ``groups`` with a single separator."""
    return SEPARATOR.join(token for group in groups for token in group)


@dataclass(frozen=True, slots=True)
class TokenSort:
    """Compare inputs after sorting their whitespace-delimited tokens.

    Attributes:
        inner: Any ``DistanceMetric`` over strings.
    """

    inner: DistanceMetric

    def distance(self, a: str, b: str) -> Exact:
        return Exact(self.normalized_distance(a, b))

    def normalized_distance(self, a: str, b: str) -> float:
        return self.inner.normalized_distance(
            _join(sorted(a.split())), _join(sorted(b.split()))
        )


@dataclass(frozen=True, slots=True)
class TokenSet:
    """Compare the shared token set of two inputs against each side's tokens.

    Duplicate tokens are ignored.  The result is the minimum of the three
    normalized distances described in the module docstring.

    Attributes:
        inner: Any ``DistanceMetric`` over strings.
    """

    inner: DistanceMetric

    def distance(self, a: str, b: str) -> Exact:
        return Exact(self.normalized_distance(a, b))

    def normalized_distance(self, a: str, b: str) -> float:
        tokens_a = set(a.split())
        tokens_b = set(b.split())

        inter = sorted(tokens_a & tokens_b)
        diff_a = sorted(tokens_a - tokens_b)
        diff_b = sorted(tokens_b - tokens_a)

        joined_inter = _join(inter)
        joined_a = _join(inter, diff_a)
        joined_b = _join(inter, diff_b)

        if not inter:
            return self.inner.normalized_distance(joined_a, joined_b)

        return min(
            self.inner.normalized_distance(joined_inter, joined_a),
            self.inner.normalized_distance(joined_inter, joined_b),
            self.inner.normalized_distance(joined_a, joined_b),
        )
