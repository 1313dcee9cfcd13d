"""Shared parameter validation for metric descriptors.

Every metric descriptor is a frozen (immutable) dataclass that calls one of
these validators from ``__post_init__``, so an invalid parameter fails at
construction time with ``ConfigurationError`` and never during comparison.
"""

from __future__ import annotations

import logging

from sequence_distance.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_Q: int = 2
DEFAULT_WINKLER_SCALING: float = 0.1
DEFAULT_WINKLER_THRESHOLD: float = 0.7
DEFAULT_WINKLER_MAX_PREFIX: int = 4


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_max_distance(max_distance: int | None) -> None:
    """Reject a bound that is not ``None`` or a non-negative integer."""
    if max_distance is None:
        return
    if not _is_int(max_distance):
        msg = f"max_distance must be an int or None, got {max_distance!r}"
        raise ConfigurationError(msg)
    if max_distance < 0:
        msg = f"max_distance must be >= 0, got {max_distance}"
        raise ConfigurationError(msg)


def validate_q(q: int) -> None:
    """Reject a q-gram length that is not a positive integer."""
    if not _is_int(q):
        msg = f"q must be an int, got {q!r}"
        raise ConfigurationError(msg)
    if q <= 0:
        msg = f"q must be > 0, got {q}"
        raise ConfigurationError(msg)


def validate_winkler(scaling: float, threshold: float, max_prefix: int) -> None:
    """Reject Winkler coefficients that could push a similarity above 1.0."""
    if scaling < 0.0:
        msg = f"scaling must be >= 0.0, got {scaling}"
        raise ConfigurationError(msg)
    if not 0.0 <= threshold <= 1.0:
        msg = f"threshold must be in [0, 1], got {threshold}"
        raise ConfigurationError(msg)
    if not _is_int(max_prefix) or max_prefix < 0:
        msg = f"max_prefix must be an int >= 0, got {max_prefix!r}"
        raise ConfigurationError(msg)
    if scaling * max_prefix > 1.0:
        msg = (
            f"scaling * max_prefix must be <= 1.0, got "
            f"{scaling} * {max_prefix} = {scaling * max_prefix}"
        )
        raise ConfigurationError(msg)
    logger.debug(
        "Winkler boost configured: scaling=%s threshold=%s max_prefix=%s",
        scaling,
        threshold,
        max_prefix,
    )
