"""DistanceMetric Protocol: the capability every metric and modifier offers.

Modifiers depend only on this structural interface, never on a concrete
algorithm, so any conformant object can be wrapped.  No inheritance is
required — a class with conformant ``distance`` and ``normalized_distance``
methods passes ``isinstance`` checks.

Example::

    from sequence_distance import Exact
    from sequence_distance.protocols import DistanceMetric

    class Discrete:
        def distance(self, a, b):
            return Exact(0 if a == b else 1)

        def normalized_distance(self, a, b):
            return 0.0 if a == b else 1.0

    assert isinstance(Discrete(), DistanceMetric)  # True, structural conformance
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sequence_distance.result import DistanceValue


@runtime_checkable
class DistanceMetric(Protocol):
    """Structural protocol for sequence metrics.

    ``distance`` returns the raw ``DistanceValue``; ``normalized_distance``
    returns a float in [0.0, 1.0] where 0.0 means identical under the metric.
    Both must accept any pair of sequences of hashable elements, including
    empty ones, without raising.
    """

    def distance(
        self, a: Sequence[Hashable], b: Sequence[Hashable]
    ) -> DistanceValue: ...

    def normalized_distance(
        self, a: Sequence[Hashable], b: Sequence[Hashable]
    ) -> float: ...
