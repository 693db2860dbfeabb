"""Tests for textmagnet.matrices module."""

import numpy as np
import pytest

from textmagnet.matrices import Matrices


class TestSimilarity:
    """Tests for the project score."""

    def test_identical_vectors(self):
        assert Matrices.similarity(np.array([1.0, 0.0]), np.array([1.0, 0.0])) == pytest.approx(1.0)

    def test_orthogonal_vectors(self):
        assert Matrices.similarity(np.array([1.0, 0.0]), np.array([0.0, 1.0])) == 0.0

    def test_zero_vector(self):
        """Zero norms score 0 instead of NaN."""
        assert Matrices.similarity(np.zeros(3), np.ones(3)) == 0.0

    def test_missing_vector(self):
        assert Matrices.similarity(None, np.ones(3)) == 0.0

    def test_absolute_products(self):
        """Mixed signs still add up: [1,-1] vs [1,1] scores 1, not 0."""
        assert Matrices.similarity(np.array([1.0, -1.0]), np.array([1.0, 1.0])) == pytest.approx(1.0)

    def test_shape_mismatch(self):
        with pytest.raises(ValueError):
            Matrices.similarity(np.ones(2), np.ones(3))


class TestSlicing:
    """Tests for row/column access and splitting."""

    def test_row_and_column_are_copies(self):
        m = np.array([[1.0, 2.0], [3.0, 4.0]])
        col = Matrices.column(m, 1)
        col[0] = 99.0
        assert m[0, 1] == 2.0
        assert list(Matrices.row(m, 1)) == [3.0, 4.0]

    def test_col_sum(self):
        assert Matrices.col_sum(np.array([[1.0, 2.0], [3.0, 4.0]]), 0) == 4.0

    def test_split_matrix(self):
        m = np.array([[1.0, 2.0], [3.0, 4.0]])
        split = Matrices.split_matrix(["a", "b"], m)
        assert list(split) == ["a", "b"]
        assert list(split["b"]) == [3.0, 4.0]

    def test_split_matrix_label_mismatch(self):
        with pytest.raises(ValueError):
            Matrices.split_matrix(["a"], np.ones((2, 2)))

    def test_read_only(self):
        view = Matrices.read_only(np.zeros((2, 2)))
        with pytest.raises(ValueError):
            view[0, 0] = 1.0


class TestWeighting:
    """Tests for TF-IDF and similarity matrices."""

    def test_tfidf_writes_new_matrix(self):
        freq = np.array([[1.0, 1.0], [1.0, 0.0]])
        weighted = Matrices.tfidf_matrix(freq)
        assert weighted is not freq
        assert freq[0, 0] == 1.0
        assert weighted.shape == (2, 2)

    def test_tfidf_empty_column_stays_zero(self):
        freq = np.array([[1.0, 0.0], [2.0, 0.0]])
        assert list(Matrices.tfidf_matrix(freq)[:, 1]) == [0.0, 0.0]

    def test_similarity_matrix_symmetric(self):
        m = np.array([[1.0, 0.0, 1.0], [0.0, 1.0, 1.0]])
        sims = Matrices.build_similarity_matrix(m)
        assert sims.shape == (3, 3)
        assert np.allclose(sims, sims.T)
        assert sims[0, 0] == pytest.approx(1.0)
        assert sims[0, 1] == 0.0
