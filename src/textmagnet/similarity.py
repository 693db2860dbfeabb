"""String similarity scores used as edge weights and typicality distances.

Suffix scores are normalized by the length of the longer string; Jaccard
compares character sets. Everything falls in [0, 1], and "distance"
functions return 1 - similarity.
"""

from __future__ import annotations

import re

_SPACES = re.compile(r"\s+")


def normalize(distance: int, s1: str, s2: str) -> float:
    """Normalize a length/distance value by the longer string's length.

    Returns 0.0 when both strings are empty.
    """
    if s1 is None or s2 is None:
        raise TypeError("cannot normalize against a missing string")

    length = max(len(s1), len(s2))
    if length == 0:
        return 0.0

    return distance / float(length)


def shared_suffix(x: str, y: str) -> str:
    """Longest common character suffix of x and y (case sensitive)."""
    k = 0
    for a, b in zip(reversed(x), reversed(y)):
        if a != b:
            break
        k += 1

    return x[len(x) - k :]


def lc_suffix(x: str, y: str) -> int:
    """Length of the longest common suffix."""
    return len(shared_suffix(x, y))


def lc_suffix_score(x: str, y: str) -> float:
    """Normalized longest-common-suffix similarity.

    "ShapeBox" vs "Box" -> 3 / 8 = 0.375
    """
    return normalize(lc_suffix(x, y), x, y)


def _profile(text: str) -> set[str]:
    # 1-shingles after collapsing whitespace runs
    return set(_SPACES.sub(" ", text))


def jaccard(s1: str, s2: str) -> float:
    """Jaccard index of the character sets: |A ∩ B| / |A ∪ B|.

    Two empty strings score 0.0.
    """
    p1, p2 = _profile(s1), _profile(s2)
    union = p1 | p2
    if not union:
        return 0.0

    return len(p1 & p2) / len(union)


def jaccard_distance(s1: str, s2: str) -> float:
    return 1.0 - jaccard(s1, s2)
