from __future__ import annotations

from typing import Dict, List

import pytest

from wordnet_sca.wn_adapter import WNAdapter


class FakeSynset:
    def __init__(self, sid: str, lemmas: List[str], definition: str = "") -> None:
        self.id = sid
        self._lemmas = lemmas
        self._definition = definition
        self.related: Dict[str, List[FakeSynset]] = {}

    def lemmas(self) -> List[str]:
        return self._lemmas

    def definition(self) -> str:
        return self._definition

    def get_related(self, *relations: str) -> List[FakeSynset]:
        return [ss for rel in relations for ss in self.related.get(rel, [])]


class FakeWordnet:
    """Stands in for wn.Wordnet: only synsets(pos='n') is used."""

    def __init__(self, synsets: List[FakeSynset]) -> None:
        self._synsets = synsets
        self.requested_pos = None

    def synsets(self, pos=None) -> List[FakeSynset]:
        self.requested_pos = pos
        return self._synsets


@pytest.fixture
def fake_wordnet() -> FakeWordnet:
    entity = FakeSynset("x-1-n", ["entity"], "a thing")
    animal = FakeSynset("x-2-n", ["animal", "beast"])
    dog = FakeSynset("x-3-n", ["dog", "domestic dog"])
    lassie = FakeSynset("x-4-n", ["Lassie"])
    stray = FakeSynset("x-5-n", ["stray"])
    animal.related["hypernym"] = [entity]
    dog.related["hypernym"] = [animal, FakeSynset("other-9-n", ["canine"])]
    lassie.related["instance_hypernym"] = [dog]
    stray.related["hypernym"] = [stray]
    return FakeWordnet([entity, animal, dog, lassie, stray])


def test_builds_dag_from_hypernyms(fake_wordnet: FakeWordnet) -> None:
    adapter = WNAdapter("fake:1", wordnet=fake_wordnet)

    assert fake_wordnet.requested_pos == "n"
    assert adapter.lexicon == "fake:1"
    assert adapter.graph.num_vertices() == 5
    # the hypernym from another lexicon and the self reference are dropped
    assert adapter.graph.edges() == [(1, 0), (2, 1), (3, 2)]


def test_queries(fake_wordnet: FakeWordnet) -> None:
    adapter = WNAdapter("fake:1", wordnet=fake_wordnet)

    assert adapter.is_noun("domestic_dog")
    assert adapter.sca("Lassie", "beast") == "animal beast"
    assert adapter.distance("Lassie", "entity") == 3
    assert adapter.sca("stray", "dog") is None


def test_synset_by_wn_id(fake_wordnet: FakeWordnet) -> None:
    adapter = WNAdapter("fake:1", wordnet=fake_wordnet)

    assert adapter.vertex("x-3-n") == 2
    assert adapter.synset("x-3-n").lemmas() == ["dog", "domestic_dog"]
    assert adapter.synset(0).definition() == "a thing"
    assert [ss.id() for ss in adapter.synsets("dog")] == [2]
    with pytest.raises(ValueError):
        adapter.synset("x-7-n")
