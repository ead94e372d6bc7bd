# errors.py

# Returned by ancestor queries when two vertices share no ancestor.
NO_ANCESTOR = -1


class SCAError(Exception):
    """Base class for errors raised by the ancestor engine and the lexicons."""


class GraphNotSetError(SCAError, TypeError):
    """The engine was constructed without a graph."""


class VertexOutOfRangeError(SCAError, IndexError):
    """A vertex id lies outside [0, V)."""

    def __init__(self, name: str, vertex, num_vertices: int):
        self.name = name
        self.vertex = vertex
        self.num_vertices = num_vertices
        super().__init__(f"{name} is invalid: {vertex!r} not in [0, {num_vertices})")


class EmptySubsetError(SCAError, ValueError):
    """A vertex subset was empty or missing."""


class NotANounError(SCAError, KeyError):
    """A word is not a noun of the lexicon."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ''
