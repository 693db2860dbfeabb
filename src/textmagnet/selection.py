"""Frequent, typical and representative word selection.

Narrows the words harvested from a corpus down to the ones that describe
it best:

    frequent_words          every word, most frequent first
    build_words_map         top-k frequent words ranked by typicality
    typical_words           the most typical words of a corpus
    representative_words    typical words that are closest to most others

Typicality and representativeness are computed over the word elements with
the kernel in textmagnet.strings; the results map back to the Word objects.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from .config import DEFAULT_CONFIG, ClusteringConfig
from .exceptions import InvalidInputError
from .logging_config import get_logger
from .models import Word
from .strings import DEFAULT_BANDWIDTH, representativeness_rank, typicality_rank

logger = get_logger(__name__)


@dataclass
class WordsMap:
    """All frequent words of a corpus and the typicality ranking of its top k.

    Attributes:
        frequent: Every word, most frequent first
        typical: The top-k frequent words, most typical first
    """

    frequent: list[Word] = field(default_factory=list)
    typical: list[Word] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.frequent


def choose_k(items: Sequence) -> int:
    """Sample size for items: ceil(sqrt(n)), 0 when empty."""
    if not items:
        return 0
    return math.ceil(math.sqrt(len(items)))


def frequent_words(words: Iterable[Word]) -> list[Word]:
    """Words by descending count; equal counts keep their input order."""
    ranked = sorted((w for w in words if w is not None), key=lambda w: -w.value)
    logger.debug(f"Selected {len(ranked)} frequent words")
    return ranked


def build_words_map(
    top_k: int, frequent: Sequence[Word], bandwidth: float = DEFAULT_BANDWIDTH
) -> WordsMap:
    """Rank the top_k most frequent words by typicality.

    Args:
        top_k: How many of the frequent words to rank
        frequent: Words already sorted by frequency
        bandwidth: Gaussian kernel width

    Raises:
        InvalidInputError: If frequent is None
    """
    if frequent is None:
        raise InvalidInputError("frequent", "must not be None")

    chosen = list(frequent[: max(0, top_k)])
    logger.debug(f"Chose top {len(chosen)} words from {len(frequent)} words")

    by_element = {w.element: w for w in chosen}
    ranked = typicality_rank([w.element for w in chosen], bandwidth=bandwidth)

    return WordsMap(list(frequent), [by_element[element] for element in ranked])


def typical_words(
    words: Iterable[Word], k: Optional[int] = None, config: Optional[ClusteringConfig] = None
) -> list[Word]:
    """The k most typical of the given words (all of them ranked when k is None)."""
    config = config or DEFAULT_CONFIG

    frequent = frequent_words(words)
    typical = build_words_map(len(frequent), frequent, config.typicality_bandwidth).typical
    if k is not None:
        typical = typical[: max(0, k)]

    logger.debug(f"Top {len(typical)} typical words selected")
    return typical


def sample_typical_words(typical: Sequence[Word], frequent: Sequence[Word]) -> list[Word]:
    """Typical words to use as cluster seeds.

    When every frequent word was ranked, only the first choose_k of them
    are kept.
    """
    if len(typical) >= len(frequent):
        return list(typical[: choose_k(typical)])
    return list(typical)


def representative_words(typical: Sequence[Word], universe: Sequence[Word]) -> list[Word]:
    """Typical words ordered by how many universe words they are closest to.

    Typical words that are closest to no other word are left out.
    """
    by_element = {w.element: w for w in typical}
    ranked = representativeness_rank(
        [w.element for w in typical], [w.element for w in universe]
    )

    representative = [by_element[element] for element in ranked]
    logger.debug(f"Top {len(representative)} representative words selected")
    return representative


def corpus_representatives(words_map: WordsMap) -> list[Word]:
    """Representative words of a words map, over a sample of its typical words."""
    if words_map.is_empty():
        return []

    sample = sample_typical_words(words_map.typical, words_map.frequent)
    return representative_words(sample, words_map.frequent)
