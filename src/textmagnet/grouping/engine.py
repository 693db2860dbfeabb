"""Entry points that pick a magnet and run it."""

from __future__ import annotations

from collections.abc import Sequence
from functools import partial
from typing import Optional, TypeVar

from ..config import DEFAULT_CONFIG, ClusteringConfig
from ..exceptions import InvalidInputError
from ..logging_config import get_logger
from ..models import Document, Project, Word
from ..strings import typicality_query
from .kmeans import DocumentKMeans, WordKMeans
from .kruskal import UnionFindMagnet
from .magnet import Magnet
from .models import Group, Groups
from .pruning import prune_doc_groups
from .wordset import IntersectionWordsetMagnet, JaccardWordsetMagnet

logger = get_logger(__name__)

R = TypeVar("R")
I = TypeVar("I")  # noqa: E741


def groups(items: list[I], magnet: Magnet[R, I]) -> R:
    """Cluster items with the given strategy."""
    return magnet.apply(items)


def form_word_groups(
    words: Optional[Sequence[Word]], config: Optional[ClusteringConfig] = None
) -> Groups[Word]:
    """K-means clusters of words; no words gives no groups."""
    if not words:
        return Groups.empty()
    return groups(list(words), WordKMeans(config))


def form_doc_groups(
    words: Optional[Sequence[Word]], config: Optional[ClusteringConfig] = None
) -> Groups[Document]:
    """K-means clusters of the documents words occur in; no words gives no groups."""
    if not words:
        return Groups.empty()
    return groups(list(words), DocumentKMeans(config))


def regroup(group: Group, config: Optional[ClusteringConfig] = None) -> Groups[Document]:
    """Re-cluster a group of documents by name similarity.

    The graph sees each document once; a document added to the group more
    than once comes back that many times, in its new group.
    """
    occurrences: dict[Document, list[Document]] = {}
    for document in group.items_of(Document):
        occurrences.setdefault(document, []).append(document)

    clustered = groups(list(occurrences), UnionFindMagnet(config))
    return Groups([Group(d for doc in piece for d in occurrences[doc]) for piece in clustered])


def regroups(
    group: Group, cap: int, config: Optional[ClusteringConfig] = None
) -> Groups[Document]:
    """Split a document group until every piece holds fewer than cap documents.

    Groups below cap are returned as they are. Larger ones are re-clustered
    by name similarity, recursively. When re-clustering cannot split a group
    it is cut into consecutive chunks of cap - 1 documents.

    Raises:
        InvalidInputError: If cap < 2
    """
    if cap < 2:
        raise InvalidInputError("cap", f"must be at least 2, got {cap}")

    if len(group) < cap:
        return Groups([group])

    result: list[Group] = []
    for piece in regroup(group, config):
        if len(piece) < cap:
            result.append(piece)
        elif len(piece) == len(group):
            logger.debug(f"Regroup made no progress on {len(group)} documents; chunking")
            result.extend(_chunks(piece, cap - 1))
        else:
            result.extend(regroups(piece, cap, config))

    return Groups(result)


def _chunks(group: Group, size: int) -> list[Group]:
    items = group.items
    return [Group(items[i : i + size]) for i in range(0, len(items), size)]


def prune(groups_: Groups[Document], config: Optional[ClusteringConfig] = None) -> Groups[Document]:
    """prune_doc_groups with the configured weight and kernel bandwidth."""
    config = config or DEFAULT_CONFIG
    ranker = partial(typicality_query, bandwidth=config.typicality_bandwidth)
    return prune_doc_groups(groups_, weight=config.prune_weight, ranker=ranker)


def group_projects_by_set_intersection(
    projects: list[Project], config: Optional[ClusteringConfig] = None
) -> Groups[Project]:
    return groups(projects, IntersectionWordsetMagnet(config))


def group_projects_by_set_similarity(
    projects: list[Project], config: Optional[ClusteringConfig] = None
) -> Groups[Project]:
    return groups(projects, JaccardWordsetMagnet(config))
