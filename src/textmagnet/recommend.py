"""Label recommendation for groups of documents."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from typing import Optional

from .exceptions import InvalidInputError
from .logging_config import get_logger
from .models import Document
from .query import MIN_LABEL_LENGTH, labels
from .strings import intersect, word_split

logger = get_logger(__name__)

# Separator of a coalesced label
LABEL_SEPARATOR = ";"


def _split(text: str, singular: Optional[Callable[[str], str]]) -> list[str]:
    words = word_split(text)
    if singular is None:
        return words
    return [singular(w) for w in words]


def mapping_of_labels(
    relevant: Iterable[str],
    all_labels: Iterable[str],
    singular: Optional[Callable[[str], str]] = None,
) -> dict[str, list[str]]:
    """Map each relevant word to the labels that share a word with it.

    Both sides are split into words (and singularized when singular is
    given) before comparing. Every relevant word gets an entry, possibly
    empty; labels keep their first-seen order.
    """
    targets = {t: _split(t, singular) for t in dict.fromkeys(relevant)}
    coverage: dict[str, list[str]] = {t: [] for t in targets}

    for label in dict.fromkeys(all_labels):
        words = _split(label, singular)
        for target, target_words in targets.items():
            if intersect(words, target_words):
                coverage[target].append(label)

    return coverage


def coalesce(labels_: Sequence[str]) -> str:
    """Join labels into one, last label first: ["a", "b"] -> "b;a"."""
    if labels_ is None:
        raise InvalidInputError("labels", "must not be None")
    return LABEL_SEPARATOR.join(reversed(list(labels_)))


def recommend_labels(documents: Sequence[Document], stop_words: Iterable[str] = ()) -> list[str]:
    """Lowercase labels for a group of documents, most frequent first.

    Keeps the floor(sqrt(n)) most frequent name words, where n is the
    number of distinct words of three or more characters; a single document
    keeps all of them. When nothing qualifies, every distinct name word
    longer than one character is returned instead.

    Raises:
        InvalidInputError: If documents is None
    """
    if documents is None:
        raise InvalidInputError("documents", "must not be None")

    words = [w for document in documents for w in word_split(document.transformed_name)]
    vocabulary = {w.lower() for w in words if len(w) >= MIN_LABEL_LENGTH}

    if len(documents) == 1:
        k = len(vocabulary)
    else:
        k = int(math.floor(math.sqrt(len(vocabulary))))

    chosen = labels(documents, stop_words)[:k]
    if not chosen:
        chosen = list(dict.fromkeys(w.lower() for w in words if len(w) > 1))

    logger.debug(f"Recommended {len(chosen)} labels for {len(documents)} documents")
    return chosen
