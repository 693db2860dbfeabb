"""Identifier word splitting and typicality ranking.

Word splitting turns a type name into capitalized words:

    "BoxShape"        -> ["Box", "Shape"]
    "parseURLQuery2"  -> ["Parse", "URL", "Query"]
    "IOStream"        -> ["Stream"]
    "read_file_name"  -> ["Read", "File", "Name"]

Typicality scores how representative each string is of the whole
population, using a Gaussian kernel over character-Jaccard distances.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Iterable, Optional, Sequence

import numpy as np

from .similarity import jaccard_distance, shared_suffix

logger = logging.getLogger(__name__)

# Uppercase runs, capitalized/lowercase words, or digit runs
_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")
_NUMBER = re.compile(r"\d+")
_VOWELS = frozenset("aeiou")

DEFAULT_BANDWIDTH = 0.3


def is_number(text: Optional[str]) -> bool:
    return bool(text) and _NUMBER.fullmatch(text) is not None


def has_vowel(text: str) -> bool:
    return any(ch in _VOWELS for ch in text.lower())


def only_vowels(text: str) -> bool:
    return bool(text) and all(ch in _VOWELS for ch in text.lower())


def capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:] if word else word


def word_split(text: Optional[str]) -> list[str]:
    """Split an identifier into words.

    Splits on camelCase boundaries, digits, underscores and punctuation, then
    drops single characters, numbers, and fragments made only of vowels or
    only of consonants. The first letter of each kept word is upper-cased.
    """
    if not text:
        return []

    words: list[str] = []
    for token in _WORD.findall(text):
        if len(token) <= 1 or is_number(token) or not has_vowel(token) or only_vowels(token):
            continue
        words.append(capitalize_first(token))

    return words


def intersect(x: str | Sequence[str], y: str | Sequence[str]) -> list[str]:
    """Words shared by x and y, in x's order, without duplicates.

    Strings are split with word_split first.
    """
    a = word_split(x) if isinstance(x, str) else list(x)
    b = set(word_split(y) if isinstance(y, str) else y)

    return [w for w in dict.fromkeys(a) if w in b and not is_number(w)]


def last_word(text: str) -> Optional[str]:
    words = word_split(text)
    return words[-1] if words else None


def typicality_query(
    club: Iterable[str], bandwidth: float = DEFAULT_BANDWIDTH
) -> dict[str, float]:
    """Typicality score of every distinct string in club.

    T(s_i) = 2 * sum_j t1 * exp(-d(s_i, s_j)^2 / t2)

    with t1 = sqrt(2*pi) / k, t2 = 2 * bandwidth^2, d the character Jaccard
    distance and k the number of distinct strings. The sum runs over every
    ordered pair, so each pair contributes to both ends.

    Returns:
        Mapping string -> score, in first-seen order.
    """
    members = list(dict.fromkeys(club))
    if not members:
        return {}

    k = len(members)
    t1 = 1.0 / k * math.sqrt(2.0 * math.pi)
    t2 = 2.0 * bandwidth**2

    distances = np.array([[jaccard_distance(a, b) for b in members] for a in members])
    weights = t1 * np.exp(-(distances**2) / t2)
    scores = 2.0 * weights.sum(axis=1)

    return {s: float(v) for s, v in zip(members, scores)}


def typicality_rank(
    data: Sequence[str], k: Optional[int] = None, bandwidth: float = DEFAULT_BANDWIDTH
) -> list[str]:
    """Sort strings by descending typicality.

    Args:
        data: Strings to rank (duplicates collapse)
        k: Keep the top k; None keeps all, values < 1 keep ceil(sqrt(n))
        bandwidth: Gaussian kernel width

    Returns:
        Strings ordered from most to least typical (stable on ties).
    """
    if len(data) < 2:
        return list(data)

    if k is None:
        k = len(data)
    elif k < 1:
        k = math.ceil(math.sqrt(len(data)))

    scores = typicality_query(data, bandwidth)
    ranked = sorted(scores, key=lambda s: -scores[s])[:k]

    logger.debug("Typicality rank: %s", {s: round(scores[s], 4) for s in ranked})
    return ranked


def coverage_region(typical: Sequence[str], others: Iterable[str]) -> dict[str, list[str]]:
    """Assign every non-typical string to its closest typical string.

    Closest means smallest character Jaccard distance; ties keep the first
    typical string.
    """
    region: dict[str, list[str]] = {t: [] for t in typical}
    if not region:
        return region

    for other in others:
        closest = typical[0]
        for candidate in typical:
            if jaccard_distance(other, candidate) < jaccard_distance(other, closest):
                closest = candidate
        region[closest].append(other)

    return region


def representativeness_rank(typical: Sequence[str], universe: Iterable[str]) -> list[str]:
    """Rank typical strings by how many other strings they cover.

    A typical string is representative when it is the closest typical string
    of many strings in (universe - typical). Typical strings covering nothing
    are dropped.
    """
    typical = list(dict.fromkeys(typical))
    chosen = set(typical)
    difference = [s for s in dict.fromkeys(universe) if s not in chosen]

    region = coverage_region(typical, difference)
    ranked = sorted(
        (t for t, covered in region.items() if covered),
        key=lambda t: -len(region[t]),
    )

    logger.debug("Representativeness rank: %s", {t: len(region[t]) for t in ranked})
    return ranked


__all__ = [
    "capitalize_first",
    "coverage_region",
    "has_vowel",
    "intersect",
    "is_number",
    "last_word",
    "only_vowels",
    "representativeness_rank",
    "shared_suffix",
    "typicality_query",
    "typicality_rank",
    "word_split",
]
