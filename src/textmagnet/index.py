"""Vector-space index with a latent-semantic-indexing reduction.

An Index is built once per corpus in three phases:

    index(words)             vocabulary, documents, words per document
    create_word_doc_matrix() word x document frequency matrix
    create_lsi_matrix()      truncated-SVD reconstruction, column normalized

create_index() runs all three.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, Optional

import numpy as np
from scipy import linalg

from .exceptions import DegenerateIndexError, InvalidInputError
from .logging_config import get_logger
from .matrices import Matrices
from .models import Document, Word

logger = get_logger(__name__)

# Column sums with a smaller magnitude are treated as zero
ZERO_SUM_TOLERANCE = 1e-12


class Index:
    """Words and documents of one corpus, with their frequency and LSI matrices.

    Matrices are word-major: row i is vocabulary word i, column j is
    document j. Accessors return read-only views.
    """

    def __init__(self) -> None:
        self._vocabulary: dict[Word, int] = {}
        self._documents: dict[Document, list[Word]] = {}
        self._by_container: dict[str, Document] = {}
        self._by_name: dict[str, Document] = {}
        self._freq: Optional[np.ndarray] = None
        self._lsi: Optional[np.ndarray] = None

    # -- phase 1 -----------------------------------------------------------

    def index(
        self, words: Iterable[Word], transform: Optional[Callable[[str], str]] = None
    ) -> None:
        """Collect the vocabulary and one document per distinct container.

        Args:
            words: Words with their containers; case-insensitive duplicates
                join the vocabulary once but count once per occurrence
            transform: Optional short-name transform passed to every Document
        """
        if self._freq is not None:
            raise InvalidInputError("index", "index already built; create a new Index")

        for word in words:
            if word is None:
                continue

            self._vocabulary.setdefault(word, len(self._vocabulary))

            for container in word.containers:
                document = self._document_for(container, transform)
                self._documents[document].append(word)

        logger.debug(
            f"Indexed {len(self._vocabulary)} words across {len(self._documents)} documents"
        )

    def _document_for(
        self, container: str, transform: Optional[Callable[[str], str]]
    ) -> Document:
        known = self._by_container.get(container)
        if known is None:
            candidate = Document.from_container(len(self._documents), container, transform)
            # Documents are equal by case-insensitive qualified name
            known = self._by_name.setdefault(str(candidate).lower(), candidate)
            self._documents.setdefault(known, [])
            self._by_container[container] = known

        return known

    # -- phase 2 -----------------------------------------------------------

    def create_word_doc_matrix(self) -> np.ndarray:
        """Build the word x document frequency matrix.

        freq[i, j] is the number of entries of document j's word list equal
        to vocabulary word i.
        """
        freq = np.zeros((len(self._vocabulary), len(self._documents)))

        for j, doc_words in enumerate(self._documents.values()):
            for word in doc_words:
                freq[self._vocabulary[word], j] += 1

        self._freq = freq
        logger.debug(f"Frequency matrix: {freq.shape[0]} x {freq.shape[1]}")
        return Matrices.read_only(freq)

    # -- phase 3 -----------------------------------------------------------

    def create_lsi_matrix(self) -> np.ndarray:
        """Reduce the frequency matrix with a rank-k truncated SVD.

        A = freq.T (documents x words), k = floor(sqrt(#words)). The rank-k
        reconstruction U_k S_k V_k^T is column normalized into a new matrix,
        W'[i, j] = |W[i, j] / sum_i W[i, j]|, and stored transposed back to
        word-major orientation.

        Raises:
            DegenerateIndexError: If k < 1, or no document exists
        """
        if self._freq is None:
            self.create_word_doc_matrix()

        a = self._freq.T
        k = int(math.floor(math.sqrt(a.shape[1])))
        if k < 1:
            raise DegenerateIndexError("rank must be at least 1 (empty vocabulary)", a.shape)

        if k > min(a.shape):
            logger.debug(f"Clamping LSI rank from {k} to {min(a.shape)}")
            k = min(a.shape)
        if k < 1:
            raise DegenerateIndexError("no documents to decompose", a.shape)

        u, s, vt = linalg.svd(a, full_matrices=False)
        w = u[:, :k] @ np.diag(s[:k]) @ vt[:k, :]

        sums = w.sum(axis=0)
        zero = np.abs(sums) < ZERO_SUM_TOLERANCE
        if zero.any():
            logger.warning(
                f"LSI reconstruction has {int(zero.sum())} zero-sum column(s); "
                "zeroing them instead of dividing by zero"
            )

        normalized = np.zeros_like(w)
        keep = ~zero
        normalized[:, keep] = np.abs(w[:, keep] / sums[keep])

        self._lsi = normalized.T
        logger.debug(f"LSI matrix: rank {k}, shape {self._lsi.shape[0]} x {self._lsi.shape[1]}")
        return Matrices.read_only(self._lsi)

    # -- accessors ---------------------------------------------------------

    @property
    def word_list(self) -> tuple[Word, ...]:
        return tuple(self._vocabulary)

    @property
    def doc_set(self) -> tuple[Document, ...]:
        return tuple(self._documents)

    @property
    def doc_list(self) -> list[Document]:
        return list(self._documents)

    @property
    def word_doc_frequency(self) -> np.ndarray:
        if self._freq is None:
            raise InvalidInputError("word_doc_frequency", "frequency matrix not built yet")
        return Matrices.read_only(self._freq)

    @property
    def lsi_matrix(self) -> np.ndarray:
        if self._lsi is None:
            raise InvalidInputError("lsi_matrix", "LSI matrix not built yet")
        return Matrices.read_only(self._lsi)

    @property
    def tfidf_matrix(self) -> np.ndarray:
        """TF-IDF weighting of the frequency matrix (computed on access)."""
        return Matrices.read_only(Matrices.tfidf_matrix(self.word_doc_frequency))

    def document(self, container: str) -> Optional[Document]:
        """The Document parsed from container, or None if not indexed."""
        return self._by_container.get(container)

    def words_in(self, document: Document) -> list[Word]:
        """Words recorded for document, in occurrence order."""
        return list(self._documents.get(document, ()))

    def word_position(self, word: Word) -> int:
        return self._vocabulary.get(word, -1)

    def __len__(self) -> int:
        return len(self._documents)

    def __repr__(self) -> str:
        return f"Index(words={len(self._vocabulary)}, docs={len(self._documents)})"


def create_index(
    words: Iterable[Word], transform: Optional[Callable[[str], str]] = None
) -> Index:
    """Build an Index over words, running all three phases.

    Raises:
        InvalidInputError: If words is None or empty
        DegenerateIndexError: If the SVD rank is below 1
    """
    if words is None:
        raise InvalidInputError("words", "must not be None")

    words = [w for w in words if w is not None]
    if not words:
        raise InvalidInputError("words", "must not be empty")

    index = Index()
    index.index(words, transform)
    index.create_word_doc_matrix()
    index.create_lsi_matrix()
    return index
