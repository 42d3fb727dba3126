"""
Library of soundfonts and user collections
Holds the scanned soundfonts, the favourites and the user-created collections
"""
import uuid
from typing import Iterable, List, Optional

from soundfonter.library_model import (AccessDenied, Collection, DEFAULT_COLLECTION_NAME,
                                       FAVOURITES_ID, FAVOURITES_NAME, Instrument)
from soundfonter.library_scanner import scan_library
from soundfonter.logger import get_logger

logger = get_logger(__name__)


def _unique(instruments: Iterable[Instrument]) -> List[Instrument]:
    """Drop repeated instruments, keeping the first occurrence"""
    return list(dict.fromkeys(instruments))


class Library:
    """A library of soundfonts and user collections.

    ``soundfonts`` is rebuilt by every scan and never persisted; the
    favourites and user collections are what the library store saves.
    """

    def __init__(self, root_directory: Optional[str] = None,
                 favourites: Optional[Collection] = None,
                 user_collections: Optional[List[Collection]] = None,
                 soundfonts: Optional[List[Collection]] = None,
                 favourites_id: uuid.UUID = FAVOURITES_ID):
        self.favourites_id = favourites_id
        self.root_directory = root_directory
        self.soundfonts: List[Collection] = list(soundfonts or [])
        if favourites is None:
            favourites = Collection(FAVOURITES_NAME, id=favourites_id)
        self.favourites = favourites
        self.user_collections: List[Collection] = list(user_collections or [])

        if self.favourites.id != favourites_id:
            raise ValueError(f"Favourites collection must use id {favourites_id}")

    # Collection kinds

    def is_favourites(self, collection: Optional[Collection]) -> bool:
        return collection is not None and collection.id == self.favourites_id

    def is_user_collection(self, collection: Optional[Collection]) -> bool:
        return collection is not None and collection in self.user_collections

    def is_editable(self, collection: Optional[Collection]) -> bool:
        """Whether instruments can be added to or removed from a collection"""
        return collection is not None and not collection.is_soundfont

    def is_renamable(self, collection: Optional[Collection]) -> bool:
        return self.is_editable(collection) and not self.is_favourites(collection)

    @property
    def collections(self) -> List[Collection]:
        """The favourites followed by the user collections"""
        return [self.favourites] + self.user_collections

    def find_collection(self, collection_id: uuid.UUID) -> Optional[Collection]:
        for collection in self.soundfonts + self.collections:
            if collection.id == collection_id:
                return collection
        return None

    # Scanning

    def load_soundfonts(self):
        """Load the soundfonts within the library directory, replacing existing soundfonts.

        The soundfont list is left untouched if the scan fails.
        """
        if self.root_directory is None:
            raise AccessDenied("No library directory has been selected")

        self.soundfonts = scan_library(self.root_directory)

    # Membership

    def add_instrument(self, instrument: Instrument, to_collection: Collection) -> bool:
        """Append an instrument to the favourites or a user collection.

        Returns False without changes if the collection is a soundfont or
        already contains the instrument.
        """
        if not self.is_editable(to_collection):
            logger.debug(f"Refusing to add {instrument} to soundfont '{to_collection.name}'")
            return False
        if to_collection.contains(instrument):
            return False

        to_collection.instruments.append(instrument)
        return True

    def add_instruments(self, instruments: Iterable[Instrument], to_collection: Collection) -> bool:
        """Add dropped instruments to a collection.

        The whole drop is cancelled if any instrument is already a member.
        """
        instruments = _unique(instruments)
        if not instruments or not self.is_editable(to_collection):
            return False
        if any(to_collection.contains(instrument) for instrument in instruments):
            return False

        to_collection.instruments.extend(instruments)
        return True

    def remove_instrument(self, instrument: Instrument, from_collection: Collection) -> bool:
        """Remove every occurrence of an instrument; a no-op if it is absent"""
        if not self.is_editable(from_collection):
            return False

        remaining = [existing for existing in from_collection.instruments if existing != instrument]
        if len(remaining) == len(from_collection.instruments):
            return False

        from_collection.instruments[:] = remaining
        return True

    def is_favourite(self, instrument: Optional[Instrument]) -> bool:
        return instrument is not None and self.favourites.contains(instrument)

    def toggle_favourite(self, instrument: Instrument) -> bool:
        """Add or remove an instrument from the favourites, returning the new state"""
        if self.is_favourite(instrument):
            self.remove_instrument(instrument, self.favourites)
            return False

        self.add_instrument(instrument, self.favourites)
        return True

    def collections_containing(self, instrument: Instrument) -> List[Collection]:
        """The user collections that contain an instrument"""
        return [collection for collection in self.user_collections if collection.contains(instrument)]

    # User collections

    def create_user_collection(self, name: str = DEFAULT_COLLECTION_NAME,
                               initial_instruments: Iterable[Instrument] = ()) -> Collection:
        collection = Collection(name, instruments=_unique(initial_instruments))
        self.user_collections.append(collection)
        return collection

    def delete_user_collection(self, collection: Collection) -> bool:
        """Delete a user collection. The favourites and soundfonts cannot be deleted."""
        if self.is_favourites(collection) or collection.is_soundfont:
            logger.debug(f"Refusing to delete collection '{collection.name}'")
            return False
        if collection not in self.user_collections:
            return False

        self.user_collections.remove(collection)
        return True

    def rename_collection(self, collection: Collection, name: str) -> bool:
        name = name.strip()
        if not name or not self.is_renamable(collection) or collection.name == name:
            return False

        collection.name = name
        return True

    # Selection helpers

    def default_selection(self) -> Collection:
        """The first soundfont, or the favourites if there are none"""
        return self.soundfonts[0] if self.soundfonts else self.favourites

    def selection_after_delete(self, collection: Collection) -> Collection:
        """The collection to select once the given user collection is deleted"""
        if collection in self.user_collections:
            index = self.user_collections.index(collection)
            if index - 1 >= 0:
                return self.user_collections[index - 1]
        return self.favourites

    # Queries

    @staticmethod
    def filter_instruments(collection: Collection, query: str) -> List[Instrument]:
        """Get the instruments within a collection filtered by a search query.

        Matches the name, number or bank case-insensitively; an empty query
        returns every instrument in collection order.
        """
        clean_query = query.strip().lower()
        if not clean_query:
            return list(collection.instruments)

        return [
            instrument for instrument in collection.instruments
            if clean_query in instrument.name.lower()
            or clean_query in str(instrument.number)
            or clean_query in str(instrument.bank)
        ]
