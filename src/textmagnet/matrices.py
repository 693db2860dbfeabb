"""Matrix helpers over numpy arrays: slicing, scoring and weighting."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

logger = logging.getLogger(__name__)


class Matrices:
    """Vector-space operations shared by the index, queries and k-means."""

    @staticmethod
    def column(matrix: np.ndarray, j: int) -> np.ndarray:
        """Column j as a 1-d copy."""
        return np.array(matrix[:, j], dtype=float)

    @staticmethod
    def row(matrix: np.ndarray, i: int) -> np.ndarray:
        """Row i as a 1-d copy."""
        return np.array(matrix[i, :], dtype=float)

    @staticmethod
    def similarity(a: np.ndarray, b: np.ndarray) -> float:
        """
        Project score of two vectors: sum(|a * b|) / (||a||_2 * ||b||_2).

        Differs from cosine similarity when components have mixed signs.
        Returns 0.0 when either vector is missing or has zero norm.

        Args:
            a: First vector (any shape, flattened)
            b: Second vector with the same number of elements

        Returns:
            Score in [0, 1]
        """
        if a is None or b is None:
            return 0.0

        a = np.ravel(a).astype(float)
        b = np.ravel(b).astype(float)
        if a.shape != b.shape:
            raise ValueError(f"vector shapes differ: {a.shape} != {b.shape}")

        norm = float(np.linalg.norm(a)) * float(np.linalg.norm(b))
        if norm == 0.0 or math.isnan(norm):
            return 0.0

        return float(np.sum(np.abs(a * b)) / norm)

    @staticmethod
    def col_sum(matrix: np.ndarray, j: int) -> float:
        return float(np.sum(matrix[:, j]))

    @staticmethod
    def tfidf_matrix(matrix: np.ndarray) -> np.ndarray:
        """
        Weight a term x document frequency matrix with TF-IDF.

        tf(i, j) = m[i, j] / sum_i m[i, j]
        idf(i)   = ln(docs / (1 + docs containing term i))

        The result is written into a new matrix; columns with no terms
        stay 0.
        """
        freq = np.asarray(matrix, dtype=float)
        rows, cols = freq.shape
        result = np.zeros((rows, cols))
        if rows == 0 or cols == 0:
            return result

        col_sums = freq.sum(axis=0)
        containing = np.count_nonzero(freq > 0, axis=1)
        idf = np.log(cols / (1.0 + containing))

        for j in range(cols):
            if col_sums[j] == 0:
                continue
            result[:, j] = (freq[:, j] / col_sums[j]) * idf

        return result

    @staticmethod
    def build_similarity_matrix(matrix: np.ndarray) -> np.ndarray:
        """Pairwise project scores between the columns of matrix."""
        cols = matrix.shape[1]
        result = np.zeros((cols, cols))

        for i in range(cols):
            a = Matrices.column(matrix, i)
            for j in range(i, cols):
                score = Matrices.similarity(a, Matrices.column(matrix, j))
                result[i, j] = score
                result[j, i] = score

        return result

    @staticmethod
    def split_matrix(labels: Sequence, matrix: np.ndarray) -> dict:
        """Map each label to its row of matrix, in label order."""
        if len(labels) != matrix.shape[0]:
            raise ValueError(f"{len(labels)} labels for a matrix with {matrix.shape[0]} rows")

        return {label: Matrices.row(matrix, i) for i, label in enumerate(labels)}

    @staticmethod
    def read_only(matrix: np.ndarray) -> np.ndarray:
        """A non-writeable view of matrix."""
        view = matrix.view()
        view.flags.writeable = False
        return view
