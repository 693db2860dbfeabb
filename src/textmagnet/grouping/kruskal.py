"""Filtered Kruskal forest and the union-find clustering magnet."""

from __future__ import annotations

from typing import Optional

from ..config import DEFAULT_CONFIG, ClusteringConfig
from ..logging_config import get_logger
from ..models import Document
from .graph import Graph, shared_suffix
from .models import Group, Groups
from .union_find import UnionFind

logger = get_logger(__name__)


def mst(graph: Graph, config: Optional[ClusteringConfig] = None) -> Graph:
    """Spanning forest over the edges whose names share a last word.

    Only edges weighing at least min_edge_score qualify. Edges are taken
    heaviest first and kept when they join two different components.
    """
    config = config or DEFAULT_CONFIG

    candidates = [
        e for e in graph.edges if e.weight >= config.min_edge_score and shared_suffix(e.source, e.target)
    ]

    components = UnionFind(graph.vertices, config)
    forest = []
    for edge in candidates:
        if not components.connected(edge.source, edge.target):
            forest.append(edge)
            components.union(edge.source, edge.target)

    logger.debug(f"Forest kept {len(forest)} of {len(graph.edges)} edges")
    return Graph(graph.vertices, forest, config)


class UnionFindMagnet:
    """Clusters documents by name similarity.

    Builds the document graph, reduces it to a spanning forest, unions the
    forest edges and reattaches orphans.
    """

    def __init__(self, config: Optional[ClusteringConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def apply(self, items: list[Document]) -> Groups[Document]:
        graph = Graph(items, config=self.config)
        forest = mst(graph, self.config)

        clusters = UnionFind(forest.vertices, self.config).make_clusters(forest.edges)
        return Groups([Group(cluster) for cluster in clusters])
