"""Tests for textmagnet.query module."""

import pytest

from textmagnet.exceptions import InvalidInputError, ItemTypeError
from textmagnet.index import create_index
from textmagnet.models import Document, Word
from textmagnet.query import (
    Result,
    labels,
    labels_search,
    method_search,
    methods,
    type_search,
    types,
)


class TestMethodSearch:
    """Tests for ranking documents against words."""

    def test_scores_positive_and_descending(self, algorithm_words):
        index = create_index(algorithm_words)
        result = method_search(["array", "sort"], index)

        scores = result.scores()
        assert scores
        assert all(s > 0 for s in scores)
        assert scores == sorted(scores, reverse=True)

    def test_returns_documents(self, sort_pivot_words):
        index = create_index(sort_pivot_words)
        result = method_search([Word("pivot")], index)

        assert len(result) > 0
        assert all(isinstance(d, Document) for d in result)
        assert methods(["pivot"], index) == list(result)

    def test_unknown_word_gives_empty_result(self, sort_pivot_words):
        index = create_index(sort_pivot_words)
        assert method_search(["quicksort"], index).is_empty()

    def test_empty_query_rejected(self, sort_pivot_words):
        index = create_index(sort_pivot_words)
        with pytest.raises(InvalidInputError):
            method_search([], index)

    def test_missing_index_rejected(self):
        with pytest.raises(InvalidInputError):
            method_search(["sort"], None)


class TestTypeSearch:
    """Tests for ranking words against documents."""

    def test_returns_words_descending(self, algorithm_words):
        index = create_index(algorithm_words)
        result = type_search([index.document("D#find")], index)

        assert len(result) > 0
        assert all(isinstance(w, Word) for w in result)
        scores = result.scores()
        assert scores == sorted(scores, reverse=True)
        assert types([index.document("D#find")], index) == list(result)

    def test_unknown_document_gives_empty_result(self, sort_pivot_words):
        index = create_index(sort_pivot_words)
        stranger = Document.from_container(0, "Z#zap")
        assert len(type_search([stranger], index)) == 0

    def test_empty_documents_rejected(self, sort_pivot_words):
        index = create_index(sort_pivot_words)
        with pytest.raises(InvalidInputError):
            type_search([], index)


class TestResult:
    """Tests for typed result access."""

    def test_items_cast(self):
        result = Result([("a", 2.0), ("b", 1.0)])
        assert Result.items(result, str) == ["a", "b"]
        assert result[0] == "a"
        assert result[:1] == ["a"]
        assert result.score_of("b") == 1.0
        assert result.score_of("c") is None

    def test_items_wrong_type_fails_fast(self):
        result = Result([("a", 2.0), (3, 1.0)])
        with pytest.raises(ItemTypeError):
            result.items_of(str)

    def test_item_type_error_is_type_error(self, sort_pivot_words):
        index = create_index(sort_pivot_words)
        result = method_search(["sort"], index)
        with pytest.raises(TypeError):
            Result.items(result, Word)


class TestLabelsSearch:
    """Tests for frequent name words."""

    def test_drops_single_occurrences(self, make_docs):
        docs = make_docs("geo.ShapeBox", "geo.CarBox", "geo.BoxCar")
        result = labels_search(docs)

        assert list(result) == ["box", "car"]
        assert result.scores() == [3.0, 2.0]

    def test_stop_words(self, make_docs):
        docs = make_docs("geo.ShapeBox", "geo.CarBox", "geo.BoxCar")
        assert labels(docs, stop_words={"Car"}) == ["box"]

    def test_single_document_keeps_everything(self, make_docs):
        assert labels(make_docs("geo.ShapeBox")) == ["shape", "box"]
