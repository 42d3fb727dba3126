"""
Library Manager
Owns the library, persists collection changes and notifies the UI through signals
"""
import uuid
from typing import Iterable, List, Optional

from PySide6.QtCore import QObject, Signal

from soundfonter.library import Library
from soundfonter.library_model import Collection, DEFAULT_COLLECTION_NAME, Instrument, LibraryError
from soundfonter.library_store import LibraryStore, LibraryStoreError
from soundfonter.logger import get_logger


class LibraryManager(QObject):
    """Manages the soundfont library for Soundfonter"""

    # Signals
    soundfonts_changed = Signal()
    collections_changed = Signal()
    collection_contents_changed = Signal(str)  # collection id
    library_error = Signal(str)                # error message

    def __init__(self, store: LibraryStore, library: Optional[Library] = None):
        super().__init__()
        self.logger = get_logger(__name__)
        self.store = store
        self.library = library if library is not None else store.load()

    # Properties

    @property
    def root_directory(self) -> Optional[str]:
        return self.library.root_directory

    @property
    def has_root_directory(self) -> bool:
        return self.library.root_directory is not None

    @property
    def soundfonts(self) -> List[Collection]:
        return self.library.soundfonts

    @property
    def favourites(self) -> Collection:
        return self.library.favourites

    @property
    def user_collections(self) -> List[Collection]:
        return self.library.user_collections

    def find_collection(self, collection_id) -> Optional[Collection]:
        if isinstance(collection_id, str):
            collection_id = uuid.UUID(collection_id)
        return self.library.find_collection(collection_id)

    # Loading

    def reload(self):
        """Rescan the current library directory.

        Raises LibraryError on failure, leaving the soundfonts untouched.
        """
        try:
            self.library.load_soundfonts()
        except LibraryError as e:
            self.logger.warning(f"Failed to load library {self.root_directory}: {e}")
            self.library_error.emit(str(e))
            raise

        self.soundfonts_changed.emit()

    def select_library(self, root_directory: str):
        """Switch to a new library directory and scan it.

        The new directory is only kept and saved if the scan succeeds.
        """
        previous_root = self.library.root_directory
        self.library.root_directory = root_directory
        try:
            self.reload()
        except LibraryError:
            self.library.root_directory = previous_root
            raise

        self.logger.info(f"Library directory set to {root_directory}")
        self._save()

    # Membership

    def add_instrument(self, instrument: Instrument, to_collection: Collection) -> bool:
        if not self.library.add_instrument(instrument, to_collection):
            return False
        self._contents_changed(to_collection)
        return True

    def add_instruments(self, instruments: Iterable[Instrument], to_collection: Collection) -> bool:
        if not self.library.add_instruments(instruments, to_collection):
            return False
        self._contents_changed(to_collection)
        return True

    def remove_instrument(self, instrument: Instrument, from_collection: Collection) -> bool:
        if not self.library.remove_instrument(instrument, from_collection):
            return False
        self._contents_changed(from_collection)
        return True

    def is_favourite(self, instrument: Optional[Instrument]) -> bool:
        return self.library.is_favourite(instrument)

    def toggle_favourite(self, instrument: Instrument) -> bool:
        is_favourite = self.library.toggle_favourite(instrument)
        self._contents_changed(self.library.favourites)
        return is_favourite

    # User collections

    def create_user_collection(self, name: str = DEFAULT_COLLECTION_NAME,
                               initial_instruments: Iterable[Instrument] = ()) -> Collection:
        collection = self.library.create_user_collection(name, initial_instruments)
        self.logger.info(f"Created collection '{collection.name}'")
        self._save()
        self.collections_changed.emit()
        return collection

    def delete_user_collection(self, collection: Collection) -> bool:
        if not self.library.delete_user_collection(collection):
            return False
        self.logger.info(f"Deleted collection '{collection.name}'")
        self._save()
        self.collections_changed.emit()
        return True

    def rename_collection(self, collection: Collection, name: str) -> bool:
        if not self.library.rename_collection(collection, name):
            return False
        self._save()
        self.collections_changed.emit()
        return True

    def filter_instruments(self, collection: Collection, query: str) -> List[Instrument]:
        return self.library.filter_instruments(collection, query)

    # Persistence

    def _contents_changed(self, collection: Collection):
        self._save()
        self.collection_contents_changed.emit(str(collection.id))

    def _save(self):
        try:
            self.store.save(self.library)
        except LibraryStoreError as e:
            self.logger.error(str(e))
            self.library_error.emit(str(e))


# Global library manager instance
_library_manager: Optional[LibraryManager] = None

def get_library_manager() -> Optional[LibraryManager]:
    """Get the global library manager instance"""
    return _library_manager

def initialize_library_manager(store: Optional[LibraryStore] = None) -> LibraryManager:
    """Initialize the global library manager.

    Raises LibraryStoreError if the persisted library cannot be loaded.
    """
    global _library_manager
    _library_manager = LibraryManager(store or LibraryStore())
    return _library_manager

def cleanup_library_manager():
    """Clean up the global library manager"""
    global _library_manager
    _library_manager = None
