from __future__ import annotations

from pathlib import Path

import pytest

from wordnet_sca.digraph import Digraph
from wordnet_sca.sca import ShortestCommonAncestor

DATA_DIR = Path(__file__).resolve().parents[1] / "data" / "wordnet"


@pytest.fixture
def tree_graph() -> Digraph:
    """Root 0; 1 and 2 below it; 3 below 1; 4 below 2."""
    return Digraph.from_edges(5, [(1, 0), (2, 0), (3, 1), (4, 2)])


@pytest.fixture
def diamond_graph() -> Digraph:
    """3 reaches the root 0 through both 1 and 2."""
    return Digraph.from_edges(4, [(1, 0), (2, 0), (3, 1), (3, 2)])


@pytest.fixture
def two_roots_graph() -> Digraph:
    """Two separate trees: 1 -> 0 and 3 -> 2."""
    return Digraph.from_edges(4, [(1, 0), (3, 2)])


@pytest.fixture
def tree_sca(tree_graph: Digraph) -> ShortestCommonAncestor:
    return ShortestCommonAncestor(tree_graph)


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR
