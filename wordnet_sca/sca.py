# sca.py
import logging
from collections import OrderedDict, namedtuple
from collections.abc import Iterable as IterableABC
from numbers import Integral
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .bfs import bfs_tree, path_to
from .digraph import Digraph
from .errors import NO_ANCESTOR, EmptySubsetError, GraphNotSetError

logger = logging.getLogger(__name__)

VertexOrSubset = Union[int, Iterable[int]]
BFSTree = Tuple[Dict[int, int], Dict[int, Optional[int]]]
CacheInfo = namedtuple('CacheInfo', ['hits', 'misses', 'maxsize', 'currsize'])


class ShortestCommonAncestor:
    """Shortest common ancestors in a rooted DAG.

    A common ancestor of v and w is a vertex reachable from both along the
    edges. The shortest one minimises dist(v, a) + dist(w, a), and that sum
    is the length of the ancestral path v -> a <- w.

    Every query runs fresh breadth-first searches and keeps nothing once it
    returns. With ``cache_size > 0`` the engine keeps the BFS results of the
    most recently used sources instead. The cache holds mutable state, so a
    caching engine must not be shared between threads.

    Ties between ancestors of equal length go to the smallest vertex id, so
    ancestor(v, w) == ancestor(w, v) always holds. Ties between subset pairs go to the first pair found
    while iterating A, then B.
    """

    def __init__(self, graph: Digraph, cache_size: int = 0):
        if graph is None:
            raise GraphNotSetError("graph is None")
        if cache_size < 0:
            raise ValueError(f"cache_size must be non-negative, got {cache_size}")

        self.graph = graph
        self.cache_size = cache_size
        self._cache: 'OrderedDict[int, BFSTree]' = OrderedDict()
        self._hits = 0
        self._misses = 0

    def __str__(self) -> str:
        return f'{self.__class__.__name__}({self.graph})'

    __repr__ = __str__

    # ------------------------------------------------------------------ #
    # Public queries
    # ------------------------------------------------------------------ #
    def length(self, v: VertexOrSubset, w: VertexOrSubset) -> int:
        """Length of a shortest ancestral path between v and w.

        v and w are either two vertex ids or two non-empty subsets of vertex
        ids. Returns -1 if they share no ancestor.

        Raises:
            VertexOutOfRangeError: If an id is outside [0, V).
            EmptySubsetError: If a subset is empty or None.
        """
        if self._is_vertex(v) and self._is_vertex(w):
            return self._shortest(v, w)[1]
        a, v, w = self.triad(v, w)
        if a == NO_ANCESTOR:
            return -1
        return self._dist(v)[a] + self._dist(w)[a]

    def ancestor(self, v: VertexOrSubset, w: VertexOrSubset) -> int:
        """A shortest common ancestor of v and w (vertices or subsets).

        Returns NO_ANCESTOR if there is none.
        """
        if self._is_vertex(v) and self._is_vertex(w):
            return self._shortest(v, w)[0]
        return self.triad(v, w)[0]

    def triad(self, A: VertexOrSubset, B: VertexOrSubset) -> Tuple[int, int, int]:
        """Find the best (ancestor, v, w) over every v in A and w in B.

        The ancestor is a common ancestor of that particular v and w, not
        merely of the two subsets. Returns three NO_ANCESTOR values when no
        pair has a common ancestor.
        """
        A = self._as_subset(A, 'A')
        B = self._as_subset(B, 'B')

        best = (NO_ANCESTOR, NO_ANCESTOR, NO_ANCESTOR)
        best_length = -1

        dists_b = [(w, self._dist(w)) for w in B]
        for v in A:
            dist_v = self._dist(v)
            for w, dist_w in dists_b:
                a, length = self._closest(dist_v, dist_w)
                if a == NO_ANCESTOR:
                    continue
                if best_length < 0 or length < best_length:
                    best, best_length = (a, v, w), length

        logger.debug("triad(%s, %s) = %s, length %d", A, B, best, best_length)
        if best[0] == NO_ANCESTOR:
            logger.warning("no common ancestor for subsets %s and %s", A, B)
        return best

    def ancestral_path(self, v: int, w: int) -> List[int]:
        """Vertices on a shortest ancestral path v -> ... -> a <- ... <- w.

        Returns an empty list if v and w share no ancestor.
        """
        self.graph.validate_vertex(v, 'v')
        self.graph.validate_vertex(w, 'w')

        dist_v, parent_v = self._tree(v)
        dist_w, parent_w = self._tree(w)
        a, _ = self._closest(dist_v, dist_w)
        if a == NO_ANCESTOR:
            return []

        up = path_to(parent_v, a)
        down = path_to(parent_w, a)
        return up + down[-2::-1]

    def cache_info(self) -> CacheInfo:
        """Hits, misses, maximum and current size of the BFS cache."""
        return CacheInfo(self._hits, self._misses, self.cache_size, len(self._cache))

    def clear_cache(self) -> None:
        self._cache.clear()
        self._hits = self._misses = 0

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #
    @staticmethod
    def _is_vertex(x) -> bool:
        return isinstance(x, Integral) and not isinstance(x, bool)

    def _as_subset(self, subset, name: str) -> List[int]:
        if subset is None:
            raise EmptySubsetError(f"{name} is None")
        if self._is_vertex(subset):
            subset = [subset]
        elif not isinstance(subset, IterableABC):
            self.graph.validate_vertex(subset, name)
        members = list(subset)
        if not members:
            raise EmptySubsetError(f"{name} is empty")
        for x in members:
            self.graph.validate_vertex(x, name)
        return members

    def _shortest(self, v: int, w: int) -> Tuple[int, int]:
        self.graph.validate_vertex(v, 'v')
        self.graph.validate_vertex(w, 'w')

        a, length = self._closest(self._dist(v), self._dist(w))
        logger.debug("ancestor(%d, %d) = %d, length %d", v, w, a, length)
        if a == NO_ANCESTOR:
            logger.warning("no common ancestor for vertices %d and %d", v, w)
        return a, length

    @staticmethod
    def _closest(dist_v: Dict[int, int], dist_w: Dict[int, int]) -> Tuple[int, int]:
        # equal lengths go to the smaller vertex id, independent of argument order
        best, best_length = NO_ANCESTOR, -1
        for a, dv in dist_v.items():
            dw = dist_w.get(a)
            if dw is None:
                continue
            length = dv + dw
            if best_length < 0 or length < best_length or (length == best_length and a < best):
                best, best_length = a, length
        return best, best_length

    def _dist(self, v: int) -> Dict[int, int]:
        return self._tree(v)[0]

    def _tree(self, v: int) -> BFSTree:
        if self.cache_size == 0:
            return bfs_tree(self.graph, v)

        if v in self._cache:
            self._hits += 1
            self._cache.move_to_end(v)
            return self._cache[v]

        self._misses += 1
        tree = bfs_tree(self.graph, v)
        self._cache[v] = tree
        if len(self._cache) > self.cache_size:
            self._cache.popitem(last=False)
        return tree
