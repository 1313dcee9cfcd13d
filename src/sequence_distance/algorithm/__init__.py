"""algorithm subpackage — public API for the base metrics.

Provides the edit-distance, alignment and q-gram metrics.  Import from this
module (not from sub-modules directly) to stay on the stable public
interface.

Example::

    from sequence_distance.algorithm import Levenshtein, SorensenDice

    Levenshtein().distance("kitten", "sitting")            # Exact(3)
    SorensenDice(2).normalized_distance("nacht", "night")  # 0.75
"""

from __future__ import annotations

from sequence_distance.algorithm.jaro import Jaro, JaroWinkler
from sequence_distance.algorithm.levenshtein import DamerauLevenshtein, Levenshtein
from sequence_distance.algorithm.qgram import (
    Cosine,
    Jaccard,
    Overlap,
    QGram,
    SorensenDice,
    qgram_profile,
)
from sequence_distance.algorithm.ratcliff import RatcliffObershelp

__all__ = [
    "Cosine",
    "DamerauLevenshtein",
    "Jaccard",
    "Jaro",
    "JaroWinkler",
    "Levenshtein",
    "Overlap",
    "QGram",
    "RatcliffObershelp",
    "SorensenDice",
    "qgram_profile",
]
