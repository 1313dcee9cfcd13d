"""Deterministic sequence generators for performance benchmarks.

All generators produce fixed, reproducible inputs. No random values.
Two tiers: 200 and 1000 elements. Each tier provides a "similar" pair
(a handful of scattered edits) and a "dissimilar" pair (disjoint alphabets)
of equal length, so bounded metrics cannot short-circuit on length alone.
"""

from __future__ import annotations

import pytest

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def generate_text(length: int, alphabet: str = _ALPHABET) -> str:
    """Generate a string cycling through ``alphabet`` with a stride of 7."""
    return "".join(alphabet[(i * 7) % len(alphabet)] for i in range(length))


def _make_similar(length: int) -> tuple[str, str]:
    """Same text with every 50th character replaced."""
    left = generate_text(length)
    right = "".join(
        "#" if i % 50 == 25 else ch for i, ch in enumerate(left)
    )
    return left, right


def _make_dissimilar(length: int) -> tuple[str, str]:
    """Lowercase text against digits: no shared elements."""
    return generate_text(length), generate_text(length, "0123456789")


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_200_similar() -> tuple[str, str]:
    """200-character pair differing in 4 positions."""
    return _make_similar(200)


@pytest.fixture
def pair_200_dissimilar() -> tuple[str, str]:
    """200-character pair with disjoint alphabets."""
    return _make_dissimilar(200)


@pytest.fixture
def pair_1000_similar() -> tuple[str, str]:
    """1000-character pair differing in 20 positions."""
    return _make_similar(1000)


@pytest.fixture
def pair_1000_dissimilar() -> tuple[str, str]:
    """1000-character pair with disjoint alphabets."""
    return _make_dissimilar(1000)
