"""Tests for the TokenSort and TokenSet modifiers."""

from __future__ import annotations

import pytest

from sequence_distance.algorithm import Jaro, Levenshtein, RatcliffObershelp
from sequence_distance.modifiers import Partial, TokenSet, TokenSort
from sequence_distance.result import Exact

MADRID = "Real Madrid vs FC Barcelona"


class _RecordingMetric:
    """Levenshtein wrapper remembering every pair it was asked about."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def distance(self, a: str, b: str) -> Exact:
        return Exact(self.normalized_distance(a, b))

    def normalized_distance(self, a: str, b: str) -> float:
        self.calls.append((a, b))
        return Levenshtein().normalized_distance(a, b)


class TestTokenSort:
    def test_word_order_ignored(self) -> None:
        metric = TokenSort(Levenshtein())
        assert metric.normalized_distance("new york mets", "mets new york") == 0.0

    def test_whitespace_collapsed(self) -> None:
        metric = TokenSort(Levenshtein())
        assert metric.normalized_distance("  a\tb \n c ", "c b a") == 0.0

    def test_inner_sees_sorted_strings(self) -> None:
        recorder = _RecordingMetric()
        TokenSort(recorder).normalized_distance("b a c", "c a")
        assert recorder.calls == [("a b c", "a c")]

    def test_duplicates_kept(self) -> None:
        metric = TokenSort(Levenshtein())
        assert metric.normalized_distance("a a b", "a b") > 0.0

    def test_both_empty(self) -> None:
        assert TokenSort(Levenshtein()).normalized_distance("", "   ") == 0.0

    def test_distance_wraps_normalized(self) -> None:
        assert TokenSort(Levenshtein()).distance("x y", "y x") == Exact(0)


class TestTokenSet:
    def test_subset_of_tokens_is_identical(self) -> None:
        metric = TokenSet(RatcliffObershelp())
        assert metric.normalized_distance(MADRID, "Barcelona vs Real Madrid") == 0.0

    def test_misspelled_token(self) -> None:
        metric = TokenSet(RatcliffObershelp())
        assert metric.normalized_distance(
            MADRID, "Barcelona vs Rel Madrid"
        ) == pytest.approx(0.08)

    def test_duplicates_ignored(self) -> None:
        metric = TokenSet(Levenshtein())
        assert metric.normalized_distance("fuzzy fuzzy bear", "bear fuzzy") == 0.0

    def test_three_pairings_compared(self) -> None:
        recorder = _RecordingMetric()
        TokenSet(recorder).normalized_distance("b a c", "a d")
        assert recorder.calls == [
            ("a", "a b c"),
            ("a", "a d"),
            ("a b c", "a d"),
        ]

    def test_no_shared_tokens(self) -> None:
        metric = TokenSet(Levenshtein())
        assert metric.normalized_distance("abc", "xyz") == 1.0

    def test_both_empty(self) -> None:
        assert TokenSet(Levenshtein()).normalized_distance("", "") == 0.0

    def test_one_side_empty(self) -> None:
        metric = TokenSet(Levenshtein())
        assert metric.normalized_distance("", "hello world") == 1.0
        assert metric.normalized_distance("hello world", "") == 1.0

    def test_whitespace_only_side(self) -> None:
        metric = TokenSet(Levenshtein())
        assert metric.normalized_distance("   ", "abc") == 1.0
        assert metric.normalized_distance("abc", "   ") == 1.0

    @pytest.mark.parametrize(
        "inner", [Levenshtein(), RatcliffObershelp(), Jaro()], ids=repr
    )
    def test_empty_side_never_identical(self, inner: object) -> None:
        metric = TokenSet(inner)  # type: ignore[arg-type]
        assert metric.normalized_distance("", "hello world") > 0.0

    def test_no_shared_tokens_compares_token_sets(self) -> None:
        recorder = _RecordingMetric()
        TokenSet(recorder).normalized_distance("b a", "d c")
        assert recorder.calls == [("a b", "c d")]

    def test_nests_with_partial(self) -> None:
        metric = TokenSet(Partial(Levenshtein()))
        assert metric.normalized_distance("yankees new york", "york yankees") == 0.0
