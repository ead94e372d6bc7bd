"""
wordnet_sca
===========

Shortest common ancestors in a rooted DAG, and a WordNet lexicon on top.

Public API:

- Digraph                : adjacency-list digraph (edges point to hypernyms).
- dist_from              : BFS hop counts from a source vertex.
- ShortestCommonAncestor : length/ancestor queries for vertices and vertex subsets.
- WordNetFactory         : create a lexicon (WordNetAPI) by version.
- Outcast                : the noun least related to the others.
"""

from .bfs import bfs_tree, dist_from, path_to
from .digraph import Digraph
from .errors import (
    NO_ANCESTOR,
    SCAError,
    GraphNotSetError,
    VertexOutOfRangeError,
    EmptySubsetError,
    NotANounError,
)
from .sca import ShortestCommonAncestor
from .wordnet_api import WordNetAPI, Synset
from .csv_adapter import CSVAdapter
from .wordnet_factory import WordNetFactory
from .outcast import Outcast

__all__ = [
    "bfs_tree",
    "dist_from",
    "path_to",
    "Digraph",
    "NO_ANCESTOR",
    "SCAError",
    "GraphNotSetError",
    "VertexOutOfRangeError",
    "EmptySubsetError",
    "NotANounError",
    "ShortestCommonAncestor",
    "WordNetAPI",
    "Synset",
    "CSVAdapter",
    "WordNetFactory",
    "Outcast",
]
