"""Centroid clustering over index vectors.

WordKMeans clusters words by their rows of the frequency matrix;
DocumentKMeans clusters documents by their columns. Both seed
floor(sqrt(n)) groups with the first items and reassign every item to the
group whose centroid scores highest until the memberships stop changing.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Generic, Optional, TypeVar

import numpy as np

from ..config import DEFAULT_CONFIG, ClusteringConfig
from ..exceptions import InvalidInputError
from ..index import Index, create_index
from ..logging_config import get_logger
from ..matrices import Matrices
from ..models import Document, Word
from .models import Groups, VectorGroup

logger = get_logger(__name__)

T = TypeVar("T")


class KMeans(Generic[T]):
    """Shared k-means loop; subclasses choose the items and their vectors."""

    def __init__(self, config: Optional[ClusteringConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def apply(self, items: list[Word]) -> Groups[T]:
        if not items:
            raise InvalidInputError("items", "must not be empty")

        words = list(dict.fromkeys(w for w in items if w is not None))
        if not words:
            raise InvalidInputError("items", "must contain at least one word")

        index = create_index(words)
        members, vectors = self._vectors(words, index)

        return Groups(self._cluster(members, vectors), index)

    def _vectors(self, words: list[Word], index: Index) -> tuple[list[T], list[np.ndarray]]:
        raise NotImplementedError

    def _cluster(self, members: Sequence[T], vectors: Sequence[np.ndarray]) -> list[VectorGroup[T]]:
        n = len(members)
        num_groups = max(1, int(math.floor(math.sqrt(n))))

        groups: list[VectorGroup[T]] = [VectorGroup() for _ in range(num_groups)]
        holder: dict[T, int] = {}
        for g, (member, vector) in enumerate(zip(members[:num_groups], vectors)):
            groups[g].add(member, vector)
            holder[member] = g

        previous = None
        for iteration in range(1, self.config.kmeans_max_iterations + 1):
            for group in groups:
                group.compute_center()

            for member, vector in zip(members, vectors):
                best, best_score = 0, -math.inf
                for g, group in enumerate(groups):
                    score = group.proximity(vector)
                    if score > best_score:
                        best, best_score = g, score

                if member in holder:
                    groups[holder[member]].remove(member)
                groups[best].add(member, vector)
                holder[member] = best

            snapshot = [frozenset(group.items) for group in groups]
            if snapshot == previous:
                logger.debug(f"K-means converged after {iteration} iterations, k={num_groups}")
                return groups
            previous = snapshot

        logger.warning(
            f"K-means stopped after {self.config.kmeans_max_iterations} iterations "
            "without converging"
        )
        return groups


class WordKMeans(KMeans[Word]):
    """Clusters words; each word is its row of the frequency matrix."""

    def _vectors(self, words, index):
        freq = index.word_doc_frequency
        vectors = [Matrices.row(freq, index.word_position(word)) for word in words]
        return words, vectors


class DocumentKMeans(KMeans[Document]):
    """Clusters the documents the words occur in; each is its column of the frequency matrix."""

    def _vectors(self, words, index):
        freq_t = index.word_doc_frequency.T
        documents = list(index.doc_set)
        vectors = [Matrices.row(freq_t, j) for j in range(len(documents))]
        return documents, vectors
