import json

import pytest

from hrcli.models import Human, Metric
from hrcli.storage import Storage


def test_save_load_remove_roundtrip(tmp_path):
    storage = Storage(tmp_path)
    human = Human(
        id="123",
        name="Jane",
        phone="555-0100",
        description="A description",
        label=["eng", "team-a"],
        metric=[Metric("speed", 7), Metric("height", 42)],
    )
    storage.save(human)

    loaded = storage.load("Jane")
    assert loaded.name == "Jane"
    assert loaded.id == "123"
    assert loaded.phone == "555-0100"
    assert loaded.description == "A description"
    assert len(loaded.label) == 2
    assert len(loaded.metric) == 2

    assert any(h.name == "Jane" for h in storage.load_all())

    storage.remove("Jane")
    with pytest.raises(FileNotFoundError):
        storage.load("Jane")


def test_creates_missing_directory(tmp_path):
    target = tmp_path / "a" / "b"
    Storage(target)
    assert target.is_dir()


def test_saved_file_is_pretty_json(tmp_path):
    storage = Storage(tmp_path)
    storage.save(Human(name="Bob"))
    text = (tmp_path / "Bob.json").read_text(encoding="utf-8")
    assert json.loads(text) == {
        "id": None,
        "name": "Bob",
        "phone": None,
        "description": None,
        "label": None,
        "metric": None,
    }
    assert "\n  " in text


def test_load_all_ignores_non_json(tmp_path):
    storage = Storage(tmp_path)
    storage.save(Human(name="b"))
    storage.save(Human(name="a"))
    (tmp_path / "notes.txt").write_text("hello", encoding="utf-8")
    assert [h.name for h in storage.load_all()] == ["a", "b"]


def test_remove_missing_raises(tmp_path):
    storage = Storage(tmp_path)
    with pytest.raises(FileNotFoundError):
        storage.remove("ghost")


def test_save_overwrites(tmp_path):
    storage = Storage(tmp_path)
    storage.save(Human(name="Bob", phone="1"))
    storage.save(Human(name="Bob", phone="2"))
    assert storage.load("Bob").phone == "2"
    assert len(storage.load_all()) == 1