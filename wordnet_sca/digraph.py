# digraph.py
from numbers import Integral
from typing import Iterable, List, Tuple

from .errors import VertexOutOfRangeError


class Digraph:
    """Adjacency-list directed graph over the vertices 0..V-1.

    Edges point from a synset to its hypernym. The vertex count is fixed at
    construction; edges are only added while a lexicon is being built.
    """

    def __init__(self, num_vertices: int):
        if isinstance(num_vertices, bool) or not isinstance(num_vertices, Integral):
            raise TypeError(f"Number of vertices must be an integer, got {num_vertices!r}")
        if num_vertices < 0:
            raise ValueError(f"Number of vertices must be non-negative, got {num_vertices}")
        self._num_vertices = int(num_vertices)
        self._num_edges = 0
        self._adj: List[List[int]] = [[] for _ in range(self._num_vertices)]

    def __str__(self) -> str:
        return f'{self.__class__.__name__}(V={self._num_vertices}, E={self._num_edges})'

    __repr__ = __str__

    @classmethod
    def from_edges(cls, num_vertices: int, edges: Iterable[Tuple[int, int]]) -> 'Digraph':
        """Build a graph from (source, target) pairs."""
        graph = cls(num_vertices)
        for source, target in edges:
            graph.add_edge(source, target)
        return graph

    @classmethod
    def from_file(cls, path: str) -> 'Digraph':
        """Read a graph in the classic digraph text format.

        The file holds the vertex count, the edge count, then one
        whitespace-separated ``v w`` pair per edge.

        Args:
            path: Path to the digraph file.

        Returns:
            Digraph with the edges in file order.

        Raises:
            ValueError: If the file is truncated or malformed.
        """
        with open(path, encoding='utf-8') as f:
            tokens = f.read().split()

        if len(tokens) < 2:
            raise ValueError(f"{path!r} does not start with a vertex and an edge count")

        num_vertices, num_edges = int(tokens[0]), int(tokens[1])
        if num_edges < 0:
            raise ValueError(f"Number of edges must be non-negative, got {num_edges}")

        pairs = tokens[2:]
        if len(pairs) < 2 * num_edges:
            raise ValueError(f"{path!r} declares {num_edges} edges but lists {len(pairs) // 2}")

        graph = cls(num_vertices)
        for i in range(num_edges):
            graph.add_edge(int(pairs[2 * i]), int(pairs[2 * i + 1]))
        return graph

    def num_vertices(self) -> int:
        return self._num_vertices

    def num_edges(self) -> int:
        return self._num_edges

    def validate_vertex(self, v: int, name: str = 'v') -> None:
        """Raise VertexOutOfRangeError unless v is an int id in [0, V)."""
        if isinstance(v, bool) or not isinstance(v, Integral) or not 0 <= v < self._num_vertices:
            raise VertexOutOfRangeError(name, v, self._num_vertices)

    def add_edge(self, source: int, target: int) -> None:
        """Append target to source's adjacency list (duplicates are kept)."""
        self.validate_vertex(source, 'source')
        self.validate_vertex(target, 'target')
        self._adj[int(source)].append(int(target))
        self._num_edges += 1

    def neighbors(self, v: int) -> Tuple[int, ...]:
        """Out-neighbours of v, in insertion order."""
        self.validate_vertex(v)
        return tuple(self._adj[v])

    def edges(self) -> List[Tuple[int, int]]:
        return [(v, w) for v in range(self._num_vertices) for w in self._adj[v]]
