# wn_adapter.py
import logging
import os
import wn
from typing import Dict, List, Optional

from .wordnet_api import WordNetAPI, Synset

logger = logging.getLogger(__name__)


class WNAdapter(WordNetAPI):
    """Adapter for the wn library backend.

    Noun synsets of the lexicon become the vertices 0..N-1 (in the order wn
    lists them) and their hypernym / instance hypernym relations become the
    edges of the DAG.
    """

    HYPERNYM_RELATIONS = ('hypernym', 'instance_hypernym')

    def __init__(self, lexicon: str, data_dir: Optional[str] = None, wordnet=None, **kwargs):
        """Initialize with wn lexicon.

        Args:
            lexicon: WordNet lexicon identifier (e.g., 'oewn:2024').
            data_dir: Directory to store lexicon data.
            wordnet: An already opened wn.Wordnet (skips download).
        """
        super().__init__()
        self._lexicon = lexicon

        if wordnet is None:
            if data_dir is not None:
                if not os.path.exists(data_dir):
                    os.makedirs(data_dir)
                wn.config.data_directory = data_dir
            try:
                wordnet = wn.Wordnet(lexicon)
            except wn.Error:
                logger.info("Downloading %s ...", lexicon)
                wn.download(lexicon)
                wordnet = wn.Wordnet(lexicon)

        self._wn = wordnet
        self._wn_ids: Dict[str, int] = {}
        self._load()

    @property
    def lexicon(self):
        return self._lexicon

    def _load(self) -> None:
        wn_synsets = list(self._wn.synsets(pos='n'))
        self._wn_ids = {ss.id: i for i, ss in enumerate(wn_synsets)}

        synsets = [Synset(i, [lemma.replace(' ', '_') for lemma in ss.lemmas()], ss.definition() or '')
                   for i, ss in enumerate(wn_synsets)]

        edges = []
        for i, ss in enumerate(wn_synsets):
            for hyper in ss.get_related(*self.HYPERNYM_RELATIONS):
                # hypernyms from another lexicon are not vertices
                j = self._wn_ids.get(hyper.id)
                if j is not None and j != i:
                    edges.append((i, j))

        self._build(synsets, edges)

    def vertex(self, wn_id: str) -> int:
        """Return the vertex of a wn synset ID."""
        if wn_id not in self._wn_ids:
            raise ValueError(f"{wn_id!r} is not exists in {self.lexicon!r}")
        return self._wn_ids[wn_id]

    def synset(self, sid) -> Synset:
        """Return a Synset object by vertex or wn synset ID.

        Raises:
            ValueError: If the ID is not in the lexicon.
        """
        if isinstance(sid, str) and not sid.isdigit():
            sid = self.vertex(sid)
        idx = int(sid)
        if not 0 <= idx < len(self._synsets):
            raise ValueError(f"{sid!r} is not exists in {self.lexicon!r}")
        return self._synsets[idx]

    def synsets(self, noun: str) -> List[Synset]:
        if noun is None:
            return []
        return [self._synsets[i] for i in sorted(self._noun_index.get(noun, ()))]
