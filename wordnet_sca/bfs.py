# bfs.py
from collections import deque
from typing import Dict, List, Optional, Tuple

from .digraph import Digraph


def bfs_tree(graph: Digraph, source: int) -> Tuple[Dict[int, int], Dict[int, Optional[int]]]:
    """Breadth-first search along out-edges from source.

    Args:
        graph: Graph to traverse.
        source: Start vertex.

    Returns:
        (dist, parent): dist maps every reachable vertex to its hop count from
        source, keyed in discovery order; parent maps it to its BFS
        predecessor (None for source). Unreachable vertices are absent.
    """
    graph.validate_vertex(source)

    dist = {source: 0}
    parent: Dict[int, Optional[int]] = {source: None}

    queue = deque([source])
    while queue:
        v = queue.popleft()
        for w in graph.neighbors(v):
            if w not in dist:
                dist[w] = dist[v] + 1
                parent[w] = v
                queue.append(w)

    return dist, parent


def dist_from(graph: Digraph, source: int) -> Dict[int, int]:
    """Shortest hop count from source to every vertex reachable from it."""
    dist, _ = bfs_tree(graph, source)
    return dist


def path_to(parent: Dict[int, Optional[int]], target: int) -> List[int]:
    """Rebuild the BFS path source -> target from a parent map.

    Returns an empty list if target was not reached.
    """
    if target not in parent:
        return []

    path = []
    v: Optional[int] = target
    while v is not None:
        path.append(v)
        v = parent[v]
    path.reverse()
    return path
