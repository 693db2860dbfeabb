"""Undirected document graph weighted by shared name suffixes."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Optional

from ..config import DEFAULT_CONFIG, ClusteringConfig
from ..exceptions import InvalidInputError
from ..models import Document
from ..similarity import lc_suffix_score
from ..similarity import shared_suffix as common_suffix
from ..strings import intersect, word_split

logger = logging.getLogger(__name__)


@dataclass
class Edge:
    """A weighted, labelled pair of distinct documents."""

    source: Document
    target: Document
    weight: float
    labels: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.weight is None or math.isnan(self.weight):
            raise InvalidInputError("weight", "edge weight is NaN")
        if str(self.source) == str(self.target):
            raise InvalidInputError("target", f"self edge on {self.source}")
        self.labels = list(dict.fromkeys(label for label in self.labels if label))

    def add_labels(self, *labels: str) -> None:
        for label in labels:
            if label and label not in self.labels:
                self.labels.append(label)

    def __str__(self) -> str:
        return f"{self.source.short_name}-{self.target.short_name} {self.weight:.5f} {self.labels}"


def shared_labels(a: Document, b: Document, min_length: int = 3) -> list[str]:
    """Words common to both transformed names, at least min_length long."""
    return [w for w in intersect(a.transformed_name, b.transformed_name) if len(w) >= min_length]


def shared_suffix(a: Document, b: Document) -> bool:
    """True when both transformed names end with the same word."""
    x, y = word_split(a.transformed_name), word_split(b.transformed_name)
    if not x or not y:
        return False
    return x[-1] == y[-1]


def suffix_distance(a: Document, b: Optional[Document]) -> float:
    """Normalized shared-suffix length of the transformed names.

    Higher means closer; a missing document scores 0.0.
    """
    if b is None:
        return 0.0
    return lc_suffix_score(a.transformed_name, b.transformed_name)


class Graph:
    """Documents plus the edges between related pairs, heaviest first.

    A pair becomes an edge when the names end with the same word, or when
    they share labels and either score above edge_distance_threshold or
    share at least two labels.
    """

    def __init__(
        self,
        vertices: Sequence[Document],
        edges: Optional[Iterable[Edge]] = None,
        config: Optional[ClusteringConfig] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.vertices: list[Document] = list(dict.fromkeys(v for v in vertices if v is not None))
        if edges is None:
            self.edges = self._make_edges()
            logger.debug(f"Graph: {len(self.vertices)} vertices, {len(self.edges)} edges")
        else:
            self.edges = list(edges)

    def _make_edges(self) -> list[Edge]:
        edges: list[Edge] = []
        threshold = self.config.edge_distance_threshold

        for i, a in enumerate(self.vertices):
            for b in self.vertices[i + 1 :]:
                if str(a) == str(b):
                    continue

                weight = lc_suffix_score(a.transformed_name, b.transformed_name)
                labels = shared_labels(a, b, self.config.min_label_length)
                suffix = shared_suffix(a, b)

                too_far = weight <= threshold and len(labels) < 2
                if not suffix and (too_far or not labels):
                    continue

                edge = Edge(a, b, weight, labels)
                edge.add_labels(common_suffix(a.transformed_name, b.transformed_name))
                edges.append(edge)

        edges.sort(key=lambda e: -e.weight)
        return edges

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)
