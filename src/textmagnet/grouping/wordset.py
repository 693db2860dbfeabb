"""Project clustering by shared word sets."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import DEFAULT_CONFIG, ClusteringConfig
from ..models import Project
from .models import Group, Groups

logger = logging.getLogger(__name__)


class WordsetMagnet:
    """Pairs every project with its best-scoring partner.

    A pair sharing more than the overlap threshold of words joins an
    existing bucket when it can; a pair sharing fewer words forms its own
    bucket; a project sharing nothing is "missed" and ends up alone unless
    another bucket already holds it.
    """

    def __init__(self, config: Optional[ClusteringConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def score(self, a: Project, b: Project) -> float:
        raise NotImplementedError

    def apply(self, items: list[Project]) -> Groups[Project]:
        projects = list(dict.fromkeys(p for p in items if p is not None))
        threshold = self.config.overlap_threshold

        by_name: dict[str, Project] = {p.name: p for p in projects}
        index: dict[str, dict[str, None]] = {}
        missed: dict[str, None] = {}

        for a in projects:
            best: Optional[Project] = None
            for b in projects:
                if a == b:
                    continue
                if best is None or self.score(a, b) > self.score(a, best):
                    best = b

            if best is None:
                missed[a.name] = None
                continue

            self._populate(threshold, index, missed, a, best)

        for name in missed:
            if not any(name in bucket for bucket in index.values()):
                index.setdefault(name, {name: None})

        groups: list[Group[Project]] = []
        for key, bucket in index.items():
            head = by_name[key]
            group = Group([head] + [by_name[n] for n in bucket if n != key])
            if group not in groups:
                groups.append(group)

        logger.debug(
            f"{type(self).__name__}: {len(projects)} projects in {len(groups)} groups "
            f"({len(missed)} missed, threshold {threshold})"
        )
        return Groups(groups)

    @staticmethod
    def _populate(
        threshold: int,
        index: dict[str, dict[str, None]],
        missed: dict[str, None],
        a: Project,
        best: Project,
    ) -> None:
        common = a.word_set & best.word_set

        if len(common) > threshold:
            if a.name not in index:
                if best.name in index:
                    index[best.name].setdefault(a.name, None)
                else:
                    index[a.name] = {best.name: None}
            else:
                index[a.name].setdefault(best.name, None)
        elif common:
            index[a.name] = {best.name: None}
        else:
            missed[a.name] = None


class IntersectionWordsetMagnet(WordsetMagnet):
    """Scores a pair by the number of shared words."""

    def score(self, a: Project, b: Project) -> float:
        return float(len(a.word_set & b.word_set))


class JaccardWordsetMagnet(WordsetMagnet):
    """Scores a pair by the Jaccard index of their word sets."""

    def score(self, a: Project, b: Project) -> float:
        return jaccard(a, b)


def jaccard(a: Project, b: Project) -> float:
    union = a.word_set | b.word_set
    if not union:
        return 0.0
    return len(a.word_set & b.word_set) / len(union)
