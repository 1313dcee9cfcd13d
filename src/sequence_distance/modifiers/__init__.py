"""modifiers subpackage — metrics that wrap and adapt another metric.

Every modifier holds an ``inner`` ``DistanceMetric`` and depends only on its
``normalized_distance``; modifiers nest freely.

Example::

    from sequence_distance.algorithm import Levenshtein, RatcliffObershelp
    from sequence_distance.modifiers import Partial, TokenSet

    TokenSet(RatcliffObershelp()).normalized_distance(
        "Real Madrid vs FC Barcelona", "Barcelona vs Real Madrid"
    )  # 0.0
    Partial(Levenshtein()).normalized_distance("needle", "haystack needle")  # 0.0
"""

from __future__ import annotations

from sequence_distance.modifiers.partial import Partial
from sequence_distance.modifiers.token import TokenSet, TokenSort
from sequence_distance.modifiers.winkler import Winkler

__all__ = ["Partial", "TokenSet", "TokenSort", "Winkler"]
