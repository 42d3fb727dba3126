"""
Tests for the library manager
"""
import pytest

from soundfonter.library_manager import (LibraryManager, cleanup_library_manager,
                                         get_library_manager, initialize_library_manager)
from soundfonter.library_model import InvalidLibraryLayout
from soundfonter.library_store import LibraryStore, LibraryStoreError


class SignalRecorder:
    """Collects the arguments of every emission of the connected signals"""

    def __init__(self, *signals):
        self.calls = []
        for signal in signals:
            signal.connect(self.record)

    def record(self, *args):
        self.calls.append(args)


@pytest.fixture
def store(tmp_path):
    return LibraryStore(str(tmp_path / "library.json"))


@pytest.fixture
def manager(store):
    return LibraryManager(store)


def test_select_library_scans_and_persists(manager, store, library_root):
    recorder = SignalRecorder(manager.soundfonts_changed)
    manager.select_library(library_root)

    assert len(manager.soundfonts) == 2
    assert recorder.calls == [()]
    assert store.load().root_directory == library_root


def test_failed_selection_keeps_previous_library(manager, store, library_root, tmp_path):
    manager.select_library(library_root)
    soundfonts = list(manager.soundfonts)
    errors = SignalRecorder(manager.library_error)

    (tmp_path / "empty").mkdir()
    with pytest.raises(InvalidLibraryLayout):
        manager.select_library(str(tmp_path / "empty"))

    assert manager.root_directory == library_root
    assert manager.soundfonts == soundfonts
    assert store.load().root_directory == library_root
    assert len(errors.calls) == 1


def test_reload_rescans_stored_root(store, library_root):
    first = LibraryManager(store)
    first.select_library(library_root)

    second = LibraryManager(store)
    assert second.soundfonts == []
    second.reload()
    assert [sf.name for sf in second.soundfonts] == [sf.name for sf in first.soundfonts]


def test_membership_changes_are_saved_and_signalled(manager, store, instruments):
    recorder = SignalRecorder(manager.collection_contents_changed)

    assert manager.add_instrument(instruments[0], manager.favourites)
    assert not manager.add_instrument(instruments[0], manager.favourites)
    assert recorder.calls == [(str(manager.favourites.id),)]
    assert store.load().favourites.instruments == [instruments[0]]

    assert manager.remove_instrument(instruments[0], manager.favourites)
    assert not manager.remove_instrument(instruments[0], manager.favourites)
    assert len(recorder.calls) == 2
    assert store.load().favourites.instruments == []


def test_toggle_favourite(manager, instruments):
    assert manager.toggle_favourite(instruments[1])
    assert manager.is_favourite(instruments[1])
    assert not manager.toggle_favourite(instruments[1])


def test_user_collection_lifecycle(manager, store, instruments):
    recorder = SignalRecorder(manager.collections_changed)

    collection = manager.create_user_collection("Brass", [instruments[2]])
    assert manager.rename_collection(collection, "Horns")
    assert manager.add_instruments(instruments[3:], collection)
    assert [c.name for c in store.load().user_collections] == ["Horns"]
    assert store.load().user_collections[0].instruments == [instruments[2]] + instruments[3:]

    assert manager.delete_user_collection(collection)
    assert not manager.delete_user_collection(manager.favourites)
    assert store.load().user_collections == []
    assert len(recorder.calls) == 3


def test_find_collection_accepts_strings(manager):
    favourites = manager.favourites
    assert manager.find_collection(str(favourites.id)) is favourites


def test_save_errors_are_reported(tmp_path, instruments):
    store = LibraryStore(str(tmp_path / "library.json"))
    manager = LibraryManager(store)
    errors = SignalRecorder(manager.library_error)

    store.path = str(tmp_path / "missing" / "blocked" / "library.json")
    (tmp_path / "missing").write_text("")
    manager.add_instrument(instruments[0], manager.favourites)

    assert manager.is_favourite(instruments[0])
    assert len(errors.calls) == 1


def test_global_manager(data_dir):
    manager = initialize_library_manager()
    try:
        assert get_library_manager() is manager
        assert manager.store.path.startswith(data_dir)
    finally:
        cleanup_library_manager()
    assert get_library_manager() is None


def test_global_manager_with_corrupt_store(tmp_path):
    path = tmp_path / "library.json"
    path.write_text("{")
    with pytest.raises(LibraryStoreError):
        initialize_library_manager(LibraryStore(str(path)))
