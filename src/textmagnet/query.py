"""Ranked queries against an Index.

    method_search: documents most related to a set of words
    type_search:   words most related to a set of documents
    labels_search: frequent words in the names of a set of documents
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, Optional, TypeVar, Union, overload

import numpy as np

from .exceptions import InvalidInputError, ItemTypeError
from .index import Index
from .logging_config import get_logger
from .matrices import Matrices
from .models import Document, Word
from .strings import word_split

logger = get_logger(__name__)

T = TypeVar("T")
K = TypeVar("K")

# Labels shorter than this are never reported
MIN_LABEL_LENGTH = 3


class Result(Generic[T]):
    """Ordered query result: items with their scores, best first."""

    def __init__(self, entries: Iterable[tuple[T, float]] = ()):
        self._entries: list[tuple[T, float]] = list(entries)

    @staticmethod
    def items(result: Result, klass: type[K]) -> list[K]:
        """Cast every item of result to klass.

        Raises:
            ItemTypeError: On the first item that is not a klass instance
        """
        items: list[K] = []
        for item, _ in result._entries:
            if not isinstance(item, klass):
                raise ItemTypeError(item, klass)
            items.append(item)
        return items

    def items_of(self, klass: type[K]) -> list[K]:
        return Result.items(self, klass)

    def scores(self) -> list[float]:
        return [score for _, score in self._entries]

    def entries(self) -> list[tuple[T, float]]:
        return list(self._entries)

    def score_of(self, item: T) -> Optional[float]:
        for candidate, score in self._entries:
            if candidate == item:
                return score
        return None

    def is_empty(self) -> bool:
        return not self._entries

    def __iter__(self) -> Iterator[T]:
        return (item for item, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @overload
    def __getitem__(self, i: int) -> T: ...

    @overload
    def __getitem__(self, i: slice) -> list[T]: ...

    def __getitem__(self, i):
        if isinstance(i, slice):
            return [item for item, _ in self._entries[i]]
        return self._entries[i][0]

    def __repr__(self) -> str:
        shown = ", ".join(f"{item}={score:.3f}" for item, score in self._entries[:5])
        more = ", ..." if len(self._entries) > 5 else ""
        return f"Result([{shown}{more}])"


def _query_vector(size: int, positions: Iterable[int]) -> np.ndarray:
    # 1.0 at matching positions, then L1 normalized
    vector = np.zeros(size)
    for position in positions:
        vector[position] = 1.0

    total = vector.sum()
    if total > 0:
        vector /= total
    return vector


def _rank(query: np.ndarray, candidates: Sequence, vectors: np.ndarray) -> list[tuple]:
    # vectors holds one candidate per column
    scored = []
    for j, candidate in enumerate(candidates):
        score = Matrices.similarity(query, Matrices.column(vectors, j))
        if score > 0:
            scored.append((candidate, score))

    scored.sort(key=lambda entry: -entry[1])
    return scored


def method_search(query_words: Iterable[Union[Word, str]], index: Index) -> Result[Document]:
    """Rank the documents of index against a set of words.

    Args:
        query_words: Words (or plain strings) to search for
        index: A fully built Index

    Returns:
        Documents with a positive score, best first

    Raises:
        InvalidInputError: If query_words or index is missing or empty
    """
    if index is None:
        raise InvalidInputError("index", "must not be None")
    if query_words is None:
        raise InvalidInputError("query_words", "must not be None")

    wanted = {w if isinstance(w, Word) else Word(w) for w in query_words if w is not None}
    if not wanted:
        raise InvalidInputError("query_words", "must not be empty")

    vocabulary = index.word_list
    query = _query_vector(
        len(vocabulary), (i for i, word in enumerate(vocabulary) if word in wanted)
    )
    if not query.any():
        logger.debug("No query word found in the index vocabulary")
        return Result()

    ranked = _rank(query, index.doc_set, index.lsi_matrix)
    logger.debug(f"Method search for {len(wanted)} words matched {len(ranked)} documents")
    return Result(ranked)


def type_search(documents: Iterable[Document], index: Index) -> Result[Word]:
    """Rank the vocabulary of index against a set of documents.

    Raises:
        InvalidInputError: If documents or index is missing or empty
    """
    if index is None:
        raise InvalidInputError("index", "must not be None")
    if documents is None:
        raise InvalidInputError("documents", "must not be None")

    wanted = {d for d in documents if d is not None}
    if not wanted:
        raise InvalidInputError("documents", "must not be empty")

    docs = index.doc_set
    query = _query_vector(len(docs), (j for j, doc in enumerate(docs) if doc in wanted))
    if not query.any():
        logger.debug("No query document found in the index")
        return Result()

    ranked = _rank(query, index.word_list, index.lsi_matrix.T)
    logger.debug(f"Type search for {len(wanted)} documents matched {len(ranked)} words")
    return Result(ranked)


def labels_search(
    documents: Sequence[Document], stop_words: Iterable[str] = ()
) -> Result[str]:
    """Frequent words in the transformed names of documents.

    Words seen once are dropped when more than one document is given, as
    are words shorter than three characters and stop words. Scores are the
    word frequencies; ties keep first-seen order.
    """
    if documents is None:
        raise InvalidInputError("documents", "must not be None")

    stop = {s.lower() for s in stop_words}
    frequencies: dict[str, int] = {}
    for document in documents:
        for label in word_split(document.transformed_name):
            key = label.lower()
            frequencies[key] = frequencies.get(key, 0) + 1

    several = len(documents) > 1
    entries = [
        (label, float(count))
        for label, count in frequencies.items()
        if len(label) >= MIN_LABEL_LENGTH
        and label not in stop
        and not (several and count == 1)
    ]
    entries.sort(key=lambda entry: -entry[1])
    return Result(entries)


def methods(words: Iterable[Union[Word, str]], index: Index) -> list[Document]:
    """Documents related to words, best first."""
    return method_search(words, index).items_of(Document)


def types(documents: Iterable[Document], index: Index) -> list[Word]:
    """Words related to documents, best first."""
    return type_search(documents, index).items_of(Word)


def labels(documents: Sequence[Document], stop_words: Iterable[str] = ()) -> list[str]:
    """Frequent name words of documents, most frequent first."""
    return labels_search(documents, stop_words).items_of(str)
