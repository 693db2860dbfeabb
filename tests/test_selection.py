"""Tests for textmagnet.selection module."""

import pytest

from textmagnet.exceptions import InvalidInputError
from textmagnet.models import Word
from textmagnet.selection import (
    WordsMap,
    build_words_map,
    choose_k,
    corpus_representatives,
    frequent_words,
    representative_words,
    sample_typical_words,
    typical_words,
)


@pytest.fixture
def lighting_words():
    """Words of a lighting package, unsorted."""
    return [
        Word.of("light", count=5),
        Word.of("lights", count=2),
        Word.of("camera", count=4),
        Word.of("flight", count=1),
        Word.of("cameras", count=3),
    ]


class TestFrequentWords:
    """Tests for frequency ordering."""

    def test_descending_count(self, lighting_words):
        ranked = frequent_words(lighting_words)
        assert [w.element for w in ranked] == ["light", "camera", "cameras", "lights", "flight"]

    def test_ties_keep_input_order(self):
        words = [Word.of("sort"), Word.of("pivot", count=3), Word.of("merge", count=3)]
        assert [w.element for w in frequent_words(words)] == ["pivot", "merge", "sort"]


class TestBuildWordsMap:
    """Tests for top-k typicality ranking."""

    def test_ranks_only_top_k(self, lighting_words):
        frequent = frequent_words(lighting_words)
        words_map = build_words_map(3, frequent)

        assert words_map.frequent == frequent
        assert len(words_map.typical) == 3
        assert set(words_map.typical) == set(frequent[:3])

    def test_returns_word_objects(self, lighting_words):
        frequent = frequent_words(lighting_words)
        words_map = build_words_map(len(frequent), frequent)

        assert all(any(t is f for f in frequent) for t in words_map.typical)

    def test_zero_k(self, lighting_words):
        assert build_words_map(0, lighting_words).typical == []

    def test_missing_words(self):
        with pytest.raises(InvalidInputError):
            build_words_map(3, None)


class TestTypicalWords:
    """Tests for corpus-level typical word selection."""

    def test_top_k(self, lighting_words):
        typical = typical_words(lighting_words, k=2)

        assert len(typical) == 2
        assert set(typical) <= set(lighting_words)

    def test_all_when_k_missing(self, lighting_words):
        assert len(typical_words(lighting_words)) == len(lighting_words)

    def test_k_beyond_size(self, lighting_words):
        assert len(typical_words(lighting_words, k=50)) == len(lighting_words)


class TestRepresentativeWords:
    """Tests for coverage-based ranking."""

    def test_ranked_by_coverage(self, lighting_words):
        """light is closest to lights and flight; camera only to cameras."""
        typical = [Word("light"), Word("camera"), Word("zzz")]
        representative = representative_words(typical, lighting_words)

        assert [w.element for w in representative] == ["light", "camera"]
        assert representative[0] is typical[0]

    def test_sample_when_all_ranked(self, lighting_words):
        assert len(sample_typical_words(lighting_words, lighting_words)) == 3
        assert sample_typical_words(lighting_words[:2], lighting_words) == lighting_words[:2]

    def test_corpus_representatives_come_from_sample(self, lighting_words):
        frequent = frequent_words(lighting_words)
        words_map = build_words_map(len(frequent), frequent)
        sample = words_map.typical[: choose_k(words_map.typical)]

        representative = corpus_representatives(words_map)

        assert representative
        assert set(representative) <= set(sample)

    def test_empty_map(self):
        assert corpus_representatives(WordsMap()) == []

    def test_choose_k(self):
        assert choose_k([]) == 0
        assert choose_k([1, 2, 3, 4, 5]) == 3
