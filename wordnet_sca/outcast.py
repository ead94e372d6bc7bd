# outcast.py
import logging
from typing import Dict, Sequence, Tuple

from .wordnet_api import WordNetAPI

logger = logging.getLogger(__name__)


class Outcast:
    """Finds the noun least related to the others in a list."""

    def __init__(self, wordnet: WordNetAPI):
        if wordnet is None:
            raise TypeError("wordnet is None")
        self.wordnet = wordnet

    def scores(self, nouns: Sequence[str]) -> Dict[str, Tuple[int, int]]:
        """(unrelated, distance) for each noun of the list.

        unrelated counts the nouns it shares no ancestor with; distance sums
        the lengths to all the others it does share one with. A repeated
        noun keeps a single entry.
        """
        scores = {}
        for noun in nouns:
            unrelated, total = 0, 0
            for other in nouns:
                distance = self.wordnet.distance(noun, other)
                if distance < 0:
                    unrelated += 1
                else:
                    total += distance
            scores[noun] = (unrelated, total)
        return scores

    def distances(self, nouns: Sequence[str]) -> Dict[str, int]:
        """Sum of the distances from each noun to every related noun in the list."""
        return {noun: total for noun, (_, total) in self.scores(nouns).items()}

    def outcast(self, nouns: Sequence[str]) -> str:
        """Return the noun least related to the others.

        A noun sharing no ancestor with more of the list ranks above any
        finite distance; otherwise the largest summed distance wins. The
        first noun reaching the maximum wins, and if every score is zero the
        first noun is returned.

        Raises:
            ValueError: If nouns is empty.
            NotANounError: If a word is not in the lexicon.
        """
        if not nouns:
            raise ValueError("nouns is empty")

        best, best_score = nouns[0], (0, 0)
        for noun, score in self.scores(nouns).items():
            if score > best_score:
                best, best_score = noun, score

        logger.debug("outcast(%s) = %r (unrelated %d, distance %d)", nouns, best, *best_score)
        return best
