from __future__ import annotations

from pathlib import Path

import pytest

from wordnet_sca.csv_adapter import CSVAdapter
from wordnet_sca.wordnet_factory import WordNetFactory


def test_versions() -> None:
    assert WordNetFactory.versions() == ["princeton-3.0", "oewn:2024"]


def test_create_csv_lexicon(data_dir: Path) -> None:
    wordnet = WordNetFactory.create("princeton-3.0", data_dir=str(data_dir))
    assert isinstance(wordnet, CSVAdapter)
    assert wordnet.lexicon == "princeton-3.0"
    assert wordnet.distance("worm", "bird") == 4


def test_data_root_from_environment(tmp_path: Path, data_dir: Path, monkeypatch) -> None:
    (tmp_path / "wordnet").mkdir()
    for name in ("synsets.txt", "hypernyms.txt"):
        (tmp_path / "wordnet" / name).write_text((data_dir / name).read_text())
    monkeypatch.setenv("WORDNET_SCA_DATA_DIR", str(tmp_path))

    wordnet = WordNetFactory.create("princeton-3.0")
    assert wordnet.synsets_path == str(tmp_path / "wordnet" / "synsets.txt")


def test_unsupported_version() -> None:
    with pytest.raises(ValueError, match="Unsupported"):
        WordNetFactory.create("klingon:1")


def test_missing_data_dir(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="does not exist"):
        WordNetFactory.create("princeton-3.0", data_dir=str(tmp_path / "missing"))
