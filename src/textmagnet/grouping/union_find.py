"""Union-find over documents, with orphan reattachment when forming clusters."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from ..config import DEFAULT_CONFIG, ClusteringConfig
from ..logging_config import get_logger
from ..models import Document
from .graph import Edge, shared_labels, shared_suffix, suffix_distance

logger = get_logger(__name__)


class UnionFind:
    """Disjoint document classes, union by size.

    The larger class absorbs the smaller one; on equal sizes the first
    argument's class joins the second's.
    """

    def __init__(self, vertices: Iterable[Document] = (), config: Optional[ClusteringConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._parent: dict[Document, Document] = {}
        self._children: dict[Document, list[Document]] = {}
        for vertex in vertices:
            self.create(vertex)

    def create(self, vertex: Document) -> None:
        if vertex not in self._parent:
            self._parent[vertex] = vertex
            self._children[vertex] = [vertex]

    def find(self, vertex: Document) -> Document:
        return self._parent[vertex]

    def connected(self, a: Document, b: Document) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: Document, b: Document) -> None:
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return

        if len(self._children[root_a]) > len(self._children[root_b]):
            root_a, root_b = root_b, root_a

        # root_a's class joins root_b's
        for vertex in self._children[root_a]:
            self._parent[vertex] = root_b
        self._children[root_b].extend(self._children.pop(root_a))

    def classes(self) -> dict[Document, list[Document]]:
        """Current classes keyed by root, ordered by their first vertex."""
        classes: dict[Document, list[Document]] = {}
        for vertex in self._parent:
            classes.setdefault(self.find(vertex), []).append(vertex)
        return classes

    def make_clusters(self, edges: Iterable[Edge] = ()) -> list[list[Document]]:
        """Union every edge, then reattach single-document classes.

        Each reattachment pass moves every orphan (a class of one) into the
        multi-document class whose root it resembles most, when one
        qualifies. Orphans never join other orphans.
        """
        for edge in edges:
            self.union(edge.source, edge.target)

        classes = self.classes()
        for _ in range(self.config.orphan_passes):
            orphans = [root for root, members in classes.items() if len(members) == 1]
            self._reattach(orphans, classes)

        logger.debug(f"Union-find produced {len(classes)} clusters")
        return list(classes.values())

    def _reattach(self, orphans: Sequence[Document], classes: dict[Document, list[Document]]) -> None:
        for orphan in orphans:
            best: Optional[Document] = None
            for parent, members in classes.items():
                if len(members) < 2:
                    continue
                if self._skip_pair(orphan, parent):
                    continue

                labels = shared_labels(orphan, parent, self.config.min_label_length)
                if best is None and (labels or shared_suffix(orphan, parent)):
                    best = parent
                elif labels and suffix_distance(orphan, best) < suffix_distance(orphan, parent):
                    best = parent

            if best is None:
                continue

            classes[best].extend(classes.pop(orphan))

    def _skip_pair(self, orphan: Document, parent: Document) -> bool:
        distance = suffix_distance(orphan, parent)
        suffix = shared_suffix(orphan, parent)

        skip = (
            distance < self.config.orphan_distance_threshold and not suffix
        ) or distance == suffix_distance(orphan, orphan)
        can_override = suffix and str(orphan) != str(parent)

        return skip and not can_override
