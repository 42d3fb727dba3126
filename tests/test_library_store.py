"""
Tests for library persistence
"""
import json
import os
import uuid

import pytest

from soundfonter.library import Library
from soundfonter.library_model import Collection, FAVOURITES_ID
from soundfonter.library_store import LibraryStore, LibraryStoreError, get_data_dir


@pytest.fixture
def store(tmp_path):
    return LibraryStore(str(tmp_path / "library.json"))


def test_first_load_creates_library(store):
    assert not store.exists()
    library = store.load()
    assert store.exists()
    assert library.root_directory is None
    assert library.favourites.id == FAVOURITES_ID
    assert library.user_collections == []


def test_round_trip(store, instruments):
    library = Library(root_directory="/Instruments")
    library.add_instrument(instruments[3], library.favourites)
    library.add_instrument(instruments[0], library.favourites)
    strings = library.create_user_collection("Strings", instruments[1:3])
    library.create_user_collection("Strings", [instruments[4]])
    store.save(library)

    loaded = store.load()
    assert loaded.root_directory == "/Instruments"
    assert loaded.favourites.instruments == [instruments[3], instruments[0]]
    assert [c.name for c in loaded.user_collections] == ["Strings", "Strings"]
    assert loaded.user_collections[0] == strings
    assert loaded.user_collections[0].instruments == instruments[1:3]
    assert loaded.user_collections[1].instruments == [instruments[4]]


def test_soundfonts_are_not_persisted(store, instruments):
    soundfont = Collection("Soundfont", instruments=instruments, source_path="/Instruments/sf")
    store.save(Library(soundfonts=[soundfont]))

    with open(store.path) as f:
        data = json.load(f)
    assert "soundfonts" not in data
    assert store.load().soundfonts == []


def test_favourites_always_use_reserved_id(store):
    with open(store.path, 'w') as f:
        json.dump({
            'format_version': 1,
            'root_directory': None,
            'favourites': {'id': str(uuid.uuid4()), 'name': 'Favourites', 'instruments': []},
            'user_collections': [],
        }, f)
    assert store.load().favourites.id == FAVOURITES_ID


def test_missing_favourites_are_recreated(store):
    with open(store.path, 'w') as f:
        json.dump({'root_directory': '/Instruments'}, f)
    library = store.load()
    assert library.favourites.name == "Favourites"
    assert library.favourites.instruments == []


def test_duplicate_paths_are_collapsed(store):
    path = "/Instruments/ARIAConverted/sf2/Collection_sf2/0/000_Instrument_0.sfz"
    with open(store.path, 'w') as f:
        json.dump({
            'favourites': {'name': 'Favourites', 'instruments': [path, path]},
            'user_collections': [],
        }, f)
    assert len(store.load().favourites) == 1


@pytest.mark.parametrize("content", [
    "not json",
    "[]",
    '{"user_collections": [{"name": "No id"}]}',
    '{"user_collections": [{"id": "not-a-uuid", "name": "Bad"}]}',
    '{"format_version": 99}',
    '{"root_directory": 5}',
    '{"favourites": {"name": 3}}',
    '{"favourites": {"instruments": "/lib/0/1_Piano.sfz"}}',
    '{"user_collections": [{"id": "5f0e5cd4-3f6e-4a53-9c55-0d1e9e1f2a10", "instruments": [7]}]}',
])
def test_malformed_library_raises(store, content):
    with open(store.path, 'w') as f:
        f.write(content)
    with pytest.raises(LibraryStoreError):
        store.load()


def test_user_collection_with_favourites_id_raises(store):
    with open(store.path, 'w') as f:
        json.dump({
            'user_collections': [{'id': str(FAVOURITES_ID), 'name': 'Shadow', 'instruments': []}],
        }, f)
    with pytest.raises(LibraryStoreError):
        store.load()


def test_repeated_user_collection_id_raises(store):
    collection_id = str(uuid.uuid4())
    with open(store.path, 'w') as f:
        json.dump({
            'user_collections': [
                {'id': collection_id, 'name': 'First', 'instruments': []},
                {'id': collection_id, 'name': 'Second', 'instruments': []},
            ],
        }, f)
    with pytest.raises(LibraryStoreError):
        store.load()

def test_save_failure_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    store = LibraryStore(str(blocker / "library.json"))
    with pytest.raises(LibraryStoreError):
        store.save(Library())


def test_save_leaves_no_temporary_files(store):
    store.save(Library())
    store.save(Library(root_directory="/Instruments"))
    assert os.listdir(os.path.dirname(store.path)) == ["library.json"]


def test_data_dir_from_environment(data_dir):
    assert get_data_dir() == data_dir
    assert LibraryStore().path == os.path.join(data_dir, "library.json")


def test_data_dir_default(monkeypatch):
    monkeypatch.delenv("SOUNDFONTER_DATA_DIR", raising=False)
    assert get_data_dir() == os.path.expanduser("~/.soundfonter")
