"""Tests for Jaro and Jaro-Winkler."""

from __future__ import annotations

import pytest

from sequence_distance.algorithm.jaro import (
    Jaro,
    JaroWinkler,
    jaro_similarity,
    winkler_boost,
)
from sequence_distance.errors import ConfigurationError
from sequence_distance.result import Exact


class TestJaroSimilarity:
    def test_both_empty(self) -> None:
        assert jaro_similarity("", "") == 1.0

    def test_one_empty(self) -> None:
        assert jaro_similarity("", "abc") == 0.0
        assert jaro_similarity("abc", "") == 0.0

    def test_identical(self) -> None:
        assert jaro_similarity("foo", "foo") == 1.0

    def test_no_matches(self) -> None:
        assert jaro_similarity("abc", "xyz") == 0.0

    def test_single_elements(self) -> None:
        assert jaro_similarity("a", "a") == 1.0
        assert jaro_similarity("a", "b") == 0.0

    def test_martha_marhta(self) -> None:
        # 6 matches, one transposition (t/h swapped).
        assert jaro_similarity("MARTHA", "MARHTA") == pytest.approx(0.944444, abs=1e-6)

    def test_dixon_dicksonx(self) -> None:
        assert jaro_similarity("DIXON", "DICKSONX") == pytest.approx(0.766667, abs=1e-6)

    def test_generic_sequences(self) -> None:
        assert jaro_similarity([1, 2, 3], [1, 2, 3]) == 1.0


class TestJaroDistance:
    def test_both_empty(self) -> None:
        assert Jaro().distance("", "") == Exact(0)

    def test_identical(self) -> None:
        assert Jaro().distance("foo", "foo") == Exact(0)

    def test_trailing_space(self) -> None:
        assert Jaro().normalized_distance("foo", "foo ") == pytest.approx(
            0.083333, abs=1e-6
        )

    def test_elephant_hippo(self) -> None:
        assert Jaro().normalized_distance("elephant", "hippo") == pytest.approx(
            0.558333, abs=1e-6
        )

    def test_company_names(self) -> None:
        assert Jaro().normalized_distance(
            "D N H Enterprises Inc", "D &amp; H Enterprises, Inc."
        ) == pytest.approx(0.177293, abs=1e-6)

    def test_one_empty_is_maximal(self) -> None:
        assert Jaro().normalized_distance("", "abc") == 1.0

    def test_distance_equals_normalized(self) -> None:
        metric = Jaro()
        assert metric.distance("dwayne", "duane").value == metric.normalized_distance(
            "dwayne", "duane"
        )


class TestWinklerBoost:
    def test_below_threshold_unchanged(self) -> None:
        assert winkler_boost(0.5, 4, 0.1, 0.7, 4) == 0.5

    def test_at_threshold_unchanged(self) -> None:
        assert winkler_boost(0.7, 4, 0.1, 0.7, 4) == 0.7

    def test_boost_applied(self) -> None:
        # 0.8 + 2 * 0.1 * 0.2 = 0.84
        assert winkler_boost(0.8, 2, 0.1, 0.7, 4) == pytest.approx(0.84)

    def test_prefix_capped(self) -> None:
        assert winkler_boost(0.8, 10, 0.1, 0.7, 4) == pytest.approx(
            winkler_boost(0.8, 4, 0.1, 0.7, 4)
        )

    def test_clamped_to_one(self) -> None:
        assert winkler_boost(0.99, 4, 0.25, 0.7, 4) <= 1.0


class TestJaroWinkler:
    def test_martha_marhta(self) -> None:
        assert JaroWinkler().normalized_distance("MARTHA", "MARHTA") == pytest.approx(
            1 - 0.961111, abs=1e-6
        )

    def test_dixon_dicksonx(self) -> None:
        assert JaroWinkler().normalized_distance("DIXON", "DICKSONX") == pytest.approx(
            1 - 0.813333, abs=1e-6
        )

    def test_never_further_than_jaro(self) -> None:
        pairs = [("dwayne", "duane"), ("abc", "xyz"), ("prefix", "prefecture")]
        for a, b in pairs:
            assert JaroWinkler().normalized_distance(a, b) <= Jaro().normalized_distance(
                a, b
            )

    def test_no_boost_without_prefix(self) -> None:
        assert JaroWinkler().normalized_distance("xabc", "yabc") == pytest.approx(
            Jaro().normalized_distance("xabc", "yabc")
        )

    def test_identical(self) -> None:
        assert JaroWinkler().distance("nacht", "nacht") == Exact(0)

    def test_both_empty(self) -> None:
        assert JaroWinkler().normalized_distance("", "") == 0.0

    def test_custom_scaling(self) -> None:
        plain = JaroWinkler().normalized_distance("MARTHA", "MARHTA")
        strong = JaroWinkler(scaling=0.2).normalized_distance("MARTHA", "MARHTA")
        assert strong < plain

    def test_scaling_times_prefix_above_one_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="scaling \\* max_prefix"):
            JaroWinkler(scaling=0.3)

    def test_negative_scaling_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            JaroWinkler(scaling=-0.1)

    def test_threshold_out_of_range_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            JaroWinkler(threshold=1.5)
