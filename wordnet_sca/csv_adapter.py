# csv_adapter.py
import os
import pandas as pd
from typing import List, Optional

from .wordnet_api import WordNetAPI, Synset


def _read_lines(path: str) -> pd.Series:
    with open(path, encoding='utf-8') as f:
        lines = [line.rstrip('\r\n') for line in f]
    return pd.Series([line for line in lines if line.strip()], dtype=object)


class CSVAdapter(WordNetAPI):
    """Adapter for Princeton-style synsets/hypernyms text files.

    synsets file, one synset per line:   ``id,lemma1 lemma2,gloss``
    hypernyms file, one line per synset: ``id,hypernym1,hypernym2,...``

    The gloss may itself contain commas, so only the first two split a
    synsets line. Synset ids must be exactly 0..N-1.
    """

    SYNSETS_FILE = 'synsets.txt'
    HYPERNYMS_FILE = 'hypernyms.txt'

    def __init__(self, lexicon: str, data_dir: Optional[str] = None,
                 synsets_path: Optional[str] = None, hypernyms_path: Optional[str] = None, **kwargs):
        """Initialize from a data directory or from explicit file paths.

        Args:
            lexicon: Name of the lexicon.
            data_dir: Directory containing synsets.txt and hypernyms.txt.
            synsets_path: Path to the synsets file (overrides data_dir).
            hypernyms_path: Path to the hypernyms file (overrides data_dir).
        """
        super().__init__()
        if synsets_path is None or hypernyms_path is None:
            if data_dir is None:
                raise ValueError("Either data_dir or both synsets_path and hypernyms_path are required")
            synsets_path = synsets_path or os.path.join(data_dir, self.SYNSETS_FILE)
            hypernyms_path = hypernyms_path or os.path.join(data_dir, self.HYPERNYMS_FILE)

        self._lexicon = lexicon
        self.synsets_path = synsets_path
        self.hypernyms_path = hypernyms_path

        self.nodes = self._read_synsets(synsets_path)
        self.edges = self._read_hypernyms(hypernyms_path)

        synsets = [Synset(int(row.id), row.lemma.split(), row.definition)
                   for row in self.nodes.itertuples(index=False)]
        self._build(synsets, zip(self.edges['source'], self.edges['target']))

    @property
    def lexicon(self):
        return self._lexicon

    @staticmethod
    def _read_synsets(path: str) -> pd.DataFrame:
        lines = _read_lines(path)
        if lines.empty:
            return pd.DataFrame({'id': pd.Series(dtype=int), 'lemma': pd.Series(dtype=object),
                                 'definition': pd.Series(dtype=object)})

        parts = lines.str.split(',', n=2, expand=True)
        if parts.shape[1] < 2:
            raise ValueError(f"{path!r}: expected 'id,lemmas[,gloss]' lines")

        parts = parts.reindex(columns=[0, 1, 2])
        nodes = pd.DataFrame({
            'id': pd.to_numeric(parts[0].str.strip()).astype(int),
            'lemma': parts[1].fillna('').astype(str),
            'definition': parts[2].fillna('').astype(str),
        })
        nodes = nodes.sort_values('id', kind='stable').reset_index(drop=True)

        if not nodes['id'].equals(pd.Series(range(len(nodes)), dtype=nodes['id'].dtype)):
            raise ValueError(f"{path!r}: synset ids must be exactly 0..{len(nodes) - 1}")
        return nodes

    @staticmethod
    def _read_hypernyms(path: str) -> pd.DataFrame:
        lines = _read_lines(path)
        if lines.empty:
            return pd.DataFrame({'source': pd.Series(dtype=int), 'target': pd.Series(dtype=int)})

        ids = lines.str.split(',')
        edges = pd.DataFrame({
            'source': ids.str[0],
            'target': ids.str[1:],
        }).explode('target')

        edges = edges.dropna(subset=['target'])
        edges = edges[edges['target'].str.strip() != '']
        if edges.empty:
            return pd.DataFrame({'source': pd.Series(dtype=int), 'target': pd.Series(dtype=int)})

        edges = edges.assign(source=pd.to_numeric(edges['source'].str.strip()).astype(int),
                             target=pd.to_numeric(edges['target'].str.strip()).astype(int))
        # a synset listed as its own hypernym is not an edge
        return edges[edges['source'] != edges['target']].reset_index(drop=True)

    def synset(self, sid) -> Synset:
        """Return a Synset object by ID.

        Args:
            sid: Synset ID (int or numeric string).

        Returns:
            Synset object.

        Raises:
            ValueError: If the ID is not in the lexicon.
        """
        try:
            idx = int(sid)
        except (TypeError, ValueError):
            raise ValueError(f"{sid!r} is not a synset id of {self.lexicon!r}") from None
        if not 0 <= idx < len(self._synsets):
            raise ValueError(f"{sid!r} is not exists in {self.lexicon!r}")
        return self._synsets[idx]

    def synsets(self, noun: str) -> List[Synset]:
        if noun is None:
            return []
        return [self._synsets[i] for i in sorted(self._noun_index.get(noun, ()))]
