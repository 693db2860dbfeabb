"""Typicality-based pruning of document clusters."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable

import numpy as np

from ..models import Document
from ..strings import typicality_query, word_split
from .models import Group, Groups

logger = logging.getLogger(__name__)

Ranker = Callable[[Iterable[str]], dict[str, float]]


def prune_doc_groups(
    groups: Groups[Document], weight: float = 1.0, ranker: Ranker = typicality_query
) -> Groups[Document]:
    """Drop documents whose name words are atypical for their group.

    Per group: every document's short name is split into lowercase words,
    each distinct word is scored with ranker, and the most typical word is
    the top scorer. A document survives when one of its words scores within
    radius = weight * stdev(scores) of the most typical word.

    A group with a single distinct word has radius 0 and is emptied.

    Args:
        groups: Document groups to prune
        weight: Scale applied to the radius
        ranker: Maps distinct words to typicality scores

    Returns:
        Groups with the same index; emptied groups are dropped.
    """
    pruned: list[Group[Document]] = []

    for group in groups:
        documents = group.items_of(Document)
        tokens = {
            doc: [w.lower() for w in word_split(doc.short_name)] for doc in documents
        }

        distinct = list(dict.fromkeys(t for words in tokens.values() for t in words))
        if not distinct:
            continue

        scores = ranker(distinct)
        values = np.array([scores[t] for t in distinct])
        typical = float(values[int(np.argmax(values))])
        radius = weight * math.sqrt(float(np.sum((values - values.mean()) ** 2)) / len(values))

        kept = Group(
            doc
            for doc in documents
            if any(abs(typical - scores[t]) < radius for t in tokens[doc])
        )

        logger.debug(f"Pruned group of {len(group)} to {len(kept)} (radius {radius:.4f})")
        pruned.append(kept)

    return Groups(pruned, groups.index)
