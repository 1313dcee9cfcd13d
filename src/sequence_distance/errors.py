"""Exception types for sequence-distance."""

from __future__ import annotations

__all__ = ["ConfigurationError"]


class ConfigurationError(ValueError):
    """A metric descriptor was constructed with an invalid parameter.

    Raised only at construction time (``q = 0``, a negative bound, an
    out-of-range Winkler coefficient); comparisons themselves never raise
    for well-formed input.  Subclasses ``ValueError`` so callers catching
    the broader type keep working.
    """
