"""Clustering strategies and their results."""

from .engine import (
    form_doc_groups,
    form_word_groups,
    group_projects_by_set_intersection,
    group_projects_by_set_similarity,
    groups,
    prune,
    regroup,
    regroups,
)
from .graph import Edge, Graph, shared_labels, shared_suffix
from .kmeans import DocumentKMeans, WordKMeans
from .kruskal import UnionFindMagnet, mst
from .magnet import Magnet
from .models import Group, Groups, VectorGroup
from .pruning import prune_doc_groups
from .union_find import UnionFind
from .wordset import IntersectionWordsetMagnet, JaccardWordsetMagnet, WordsetMagnet

__all__ = [
    "Magnet",
    "Group",
    "VectorGroup",
    "Groups",
    "groups",
    "form_word_groups",
    "form_doc_groups",
    "regroup",
    "regroups",
    "prune",
    "prune_doc_groups",
    "WordKMeans",
    "DocumentKMeans",
    "Edge",
    "Graph",
    "shared_labels",
    "shared_suffix",
    "mst",
    "UnionFind",
    "UnionFindMagnet",
    "WordsetMagnet",
    "IntersectionWordsetMagnet",
    "JaccardWordsetMagnet",
    "group_projects_by_set_intersection",
    "group_projects_by_set_similarity",
]
