"""DistanceValue result types returned by every metric's ``distance`` call.

A bounded edit-distance computation may stop before the exact value is
known.  The result is therefore a tagged value:

- ``Exact(value)``:    the true raw distance.
- ``Exceeded(bound)``: the true distance is at least ``bound``.

Only edit-distance metrics configured with ``max_distance`` ever produce
``Exceeded``.  Both variants convert to their number via ``int()`` and
``float()`` so callers that only care about the magnitude can ignore the tag.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DistanceValue", "Exact", "Exceeded"]


@dataclass(frozen=True, slots=True)
class Exact:
    """The exact raw distance between two sequences.

    Attributes:
        value: Non-negative distance.  ``int`` for edit distances and QGram,
            ``float`` for similarity-derived metrics.
    """

    value: int | float

    @property
    def is_exact(self) -> bool:
        return True

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True, slots=True)
class Exceeded:
    """The true distance is greater than or equal to ``bound``.

    Attributes:
        bound: The ``max_distance`` configured on the metric that produced
            this result.
    """

    bound: int

    @property
    def value(self) -> int:
        """The bound, a lower limit of the unknown exact distance."""
        return self.bound

    @property
    def is_exact(self) -> bool:
        return False

    def __int__(self) -> int:
        return self.bound

    def __float__(self) -> float:
        return float(self.bound)


DistanceValue = Exact | Exceeded
