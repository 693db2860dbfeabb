"""
textmagnet - Vector-space indexing and clustering of identifier words

Builds a word x document index with a latent-semantic-indexing reduction,
ranks documents and words against it, and clusters words, documents and
projects with k-means, union-find and word-set strategies.
"""

__version__ = "0.1.0"

from .config import ClusteringConfig, load_config
from .grouping import (
    DocumentKMeans,
    Group,
    Groups,
    UnionFindMagnet,
    WordKMeans,
    form_doc_groups,
    form_word_groups,
    groups,
    prune_doc_groups,
    regroups,
)
from .harvest import flatten_words, harvest_words
from .index import Index, create_index
from .logging_config import setup_logging
from .models import Document, Project, Word
from .query import Result, labels_search, method_search, type_search
from .recommend import coalesce, mapping_of_labels, recommend_labels
from .selection import frequent_words, representative_words, typical_words

__all__ = [
    "Word",
    "Document",
    "Project",
    "Index",
    "create_index",  # Main entry point
    "Result",
    "method_search",
    "type_search",
    "labels_search",
    "recommend_labels",
    "mapping_of_labels",
    "coalesce",
    "frequent_words",
    "typical_words",
    "representative_words",
    "Group",
    "Groups",
    "groups",
    "form_word_groups",
    "form_doc_groups",
    "regroups",
    "prune_doc_groups",
    "WordKMeans",
    "DocumentKMeans",
    "UnionFindMagnet",
    "harvest_words",
    "flatten_words",
    "ClusteringConfig",
    "load_config",
    "setup_logging",
]
