# wordnet_api.py
import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Set

from .digraph import Digraph
from .errors import NO_ANCESTOR, NotANounError
from .sca import ShortestCommonAncestor

logger = logging.getLogger(__name__)


class Synset:
    """A synonym set: one vertex of the hypernym DAG."""

    def __init__(self, sid: int, lemmas: List[str], definition: str = ''):
        self._id = sid
        self._lemmas = list(lemmas)
        self._definition = definition

    def __str__(self) -> str:
        return f'{self.__class__.__name__}({self._id!r})'

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        return isinstance(other, Synset) and (self._id, self._lemmas) == (other._id, other._lemmas)

    def __hash__(self) -> int:
        return hash(self._id)

    def id(self) -> int:
        """Return the synset ID (its vertex in the DAG)."""
        return self._id

    def lemmas(self) -> List[str]:
        """Return list of lemmas."""
        return self._lemmas

    def definition(self) -> str:
        """Return the definition."""
        return self._definition

    def text(self) -> str:
        """Return the lemmas joined by spaces, as written in a synsets file."""
        return ' '.join(self._lemmas)


class WordNetAPI(ABC):
    """Abstract interface for WordNet backends.

    A backend loads its synsets and hypernym edges and hands them to
    ``_build``. Noun lookups, shortest common ancestors and distances are
    then answered here, on top of the ShortestCommonAncestor engine.
    """

    def __init__(self):
        self._synsets: List[Synset] = []
        self._noun_index: Dict[str, Set[int]] = {}
        self._graph: Optional[Digraph] = None
        self._sca: Optional[ShortestCommonAncestor] = None

    def __str__(self) -> str:
        return f'{self.__class__.__name__}({self.lexicon!r})'

    __repr__ = __str__

    @property
    @abstractmethod
    def lexicon(self) -> str:
        pass

    @abstractmethod
    def synset(self, sid) -> Synset:
        """Return a Synset object by ID.

        Args:
            sid: Synset ID to query.

        Returns:
            Synset object.

        Raises:
            ValueError: If the ID is not in the lexicon.
        """
        pass

    @abstractmethod
    def synsets(self, noun: str) -> List[Synset]:
        """Return list of Synset objects containing a noun.

        Args:
            noun: Noun to query.

        Returns:
            List of Synset objects, empty if the noun is unknown.
        """
        pass

    # ------------------------------------------------------------------ #
    # Loading
    # ------------------------------------------------------------------ #
    def _build(self, synsets: List[Synset], edges: Iterable) -> None:
        """Index the synsets by noun and build the hypernym DAG.

        Args:
            synsets: Synsets in vertex order; synsets[i].id() must be i.
            edges: (hyponym, hypernym) vertex pairs.
        """
        self._synsets = synsets
        self._noun_index = {}
        for ss in synsets:
            for noun in ss.lemmas():
                self._noun_index.setdefault(noun, set()).add(ss.id())

        self._graph = Digraph.from_edges(len(synsets), edges)
        self._sca = ShortestCommonAncestor(self._graph)
        logger.info("%s: loaded %d synsets, %d nouns, %d hypernym edges",
                    self, len(synsets), len(self._noun_index), self._graph.num_edges())

    @property
    def graph(self) -> Digraph:
        if self._graph is None:
            raise RuntimeError(f"{self.__class__.__name__} is not initialized")
        return self._graph

    @property
    def engine(self) -> ShortestCommonAncestor:
        if self._sca is None:
            raise RuntimeError(f"{self.__class__.__name__} is not initialized")
        return self._sca

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def nouns(self) -> List[str]:
        """Return all nouns of the lexicon."""
        return list(self._noun_index.keys())

    def is_noun(self, word: str) -> bool:
        if word is None:
            raise TypeError("word is None")
        return word in self._noun_index

    def _ids(self, noun: str, name: str) -> Set[int]:
        if noun is None:
            raise TypeError(f"{name} is None")
        if noun not in self._noun_index:
            raise NotANounError(f"{name} is not a noun: {noun!r}")
        return self._noun_index[noun]

    def sca(self, noun1: str, noun2: str) -> Optional[str]:
        """Return the synset text of a shortest common ancestor of two nouns.

        Every synset of noun1 is paired with every synset of noun2; the
        ancestor of the best pair wins. Returns None if the nouns share no
        ancestor (which only happens in a DAG with several roots).

        Raises:
            TypeError: If a noun is None.
            NotANounError: If a noun is not in the lexicon.
        """
        a = self.engine.ancestor(self._ids(noun1, 'noun1'), self._ids(noun2, 'noun2'))
        if a == NO_ANCESTOR:
            return None
        return self._synsets[a].text()

    def ancestor_synset(self, noun1: str, noun2: str) -> Optional[Synset]:
        """Like sca(), but return the ancestor's Synset."""
        a = self.engine.ancestor(self._ids(noun1, 'noun1'), self._ids(noun2, 'noun2'))
        return None if a == NO_ANCESTOR else self._synsets[a]

    def distance(self, noun1: str, noun2: str) -> int:
        """Length of a shortest ancestral path between two nouns (-1 if none)."""
        return self.engine.length(self._ids(noun1, 'noun1'), self._ids(noun2, 'noun2'))

    def ancestral_path(self, noun1: str, noun2: str) -> List[Synset]:
        """Synsets on a shortest ancestral path between two nouns."""
        a, v, w = self.engine.triad(self._ids(noun1, 'noun1'), self._ids(noun2, 'noun2'))
        if a == NO_ANCESTOR:
            return []
        return [self._synsets[x] for x in self.engine.ancestral_path(v, w)]
