"""Sequence distance - interchangeable string and sequence metrics."""

from __future__ import annotations

import logging

from sequence_distance.algorithm import (
    Cosine,
    DamerauLevenshtein,
    Jaccard,
    Jaro,
    JaroWinkler,
    Levenshtein,
    Overlap,
    QGram,
    RatcliffObershelp,
    SorensenDice,
)
from sequence_distance.api import compare, compare_normalized, is_similar, similarity
from sequence_distance.errors import ConfigurationError
from sequence_distance.modifiers import Partial, TokenSet, TokenSort, Winkler
from sequence_distance.protocols import DistanceMetric
from sequence_distance.result import DistanceValue, Exact, Exceeded

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ConfigurationError",
    "Cosine",
    "DamerauLevenshtein",
    "DistanceMetric",
    "DistanceValue",
    "Exact",
    "Exceeded",
    "Jaccard",
    "Jaro",
    "JaroWinkler",
    "Levenshtein",
    "Overlap",
    "Partial",
    "QGram",
    "RatcliffObershelp",
    "SorensenDice",
    "TokenSet",
    "TokenSort",
    "Winkler",
    "compare",
    "compare_normalized",
    "is_similar",
    "similarity",
]
