"""
Library persistence for Soundfonter
Saves the library directory, favourites and user collections as JSON
"""
import json
import os
import tempfile
import uuid
from typing import Any, Dict, Optional

from soundfonter.library import Library
from soundfonter.library_model import Collection, FAVOURITES_ID, FAVOURITES_NAME, Instrument
from soundfonter.logger import get_logger

logger = get_logger(__name__)

FORMAT_VERSION = 1
LIBRARY_FILENAME = "library.json"


class LibraryStoreError(Exception):
    """The persisted library could not be read or written"""


def get_data_dir() -> str:
    """Get the directory holding persisted library data"""
    return os.getenv('SOUNDFONTER_DATA_DIR') or os.path.expanduser("~/.soundfonter")


def collection_to_dict(collection: Collection) -> Dict[str, Any]:
    return {
        'id': str(collection.id),
        'name': collection.name,
        'instruments': [instrument.path for instrument in collection.instruments],
    }


def collection_from_dict(data: Dict[str, Any], collection_id: Optional[uuid.UUID] = None) -> Collection:
    name = data.get('name', '')
    if not isinstance(name, str):
        raise ValueError(f"collection name must be a string, not {name!r}")
    paths = data.get('instruments', [])
    if not isinstance(paths, list) or not all(isinstance(path, str) for path in paths):
        raise ValueError("collection instruments must be a list of paths")

    instruments = [Instrument(path) for path in paths]
    return Collection(
        name,
        instruments=list(dict.fromkeys(instruments)),
        id=collection_id or uuid.UUID(data['id']),
    )


class LibraryStore:
    """Reads and writes the persisted part of a Library"""

    def __init__(self, path: Optional[str] = None, favourites_id: uuid.UUID = FAVOURITES_ID):
        self.path = path or os.path.join(get_data_dir(), LIBRARY_FILENAME)
        self.favourites_id = favourites_id

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load(self) -> Library:
        """Load the library, creating an empty one on first run.

        Raises LibraryStoreError if the stored library is unreadable or malformed.
        """
        if not self.exists():
            logger.info(f"No library at {self.path}, creating a new one")
            library = Library(favourites_id=self.favourites_id)
            self.save(library)
            return library

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise LibraryStoreError(f"Failed to read library from {self.path}: {e}") from e

        try:
            library = self._library_from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise LibraryStoreError(f"Library at {self.path} is malformed: {e}") from e

        logger.info(f"Library loaded from {self.path} "
                    f"({len(library.favourites)} favourites, {len(library.user_collections)} collections)")
        return library

    def save(self, library: Library):
        """Write the library atomically. Soundfonts are never written."""
        data = {
            'format_version': FORMAT_VERSION,
            'root_directory': library.root_directory,
            'favourites': collection_to_dict(library.favourites),
            'user_collections': [collection_to_dict(c) for c in library.user_collections],
        }

        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(prefix='.library-', suffix='.json', dir=directory)
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(data, f, indent=2)
                os.replace(temp_path, self.path)
            except BaseException:
                os.unlink(temp_path)
                raise
        except OSError as e:
            raise LibraryStoreError(f"Failed to save library to {self.path}: {e}") from e

        logger.debug(f"Library saved to {self.path}")

    def _library_from_dict(self, data: Dict[str, Any]) -> Library:
        version = data.get('format_version', FORMAT_VERSION)
        if version > FORMAT_VERSION:
            raise ValueError(f"unsupported format version {version}")

        favourites_data = data.get('favourites') or {'name': FAVOURITES_NAME}
        favourites = collection_from_dict(favourites_data, collection_id=self.favourites_id)
        if not favourites.name:
            favourites.name = FAVOURITES_NAME

        root_directory = data.get('root_directory')
        if root_directory is not None and not isinstance(root_directory, str):
            raise ValueError(f"root directory must be a path, not {root_directory!r}")

        user_collections = []
        seen_ids = {self.favourites_id}
        for collection_data in data.get('user_collections', []):
            collection = collection_from_dict(collection_data)
            if collection.id in seen_ids:
                raise ValueError(f"duplicate collection id {collection.id}")
            seen_ids.add(collection.id)
            user_collections.append(collection)

        return Library(
            root_directory=root_directory,
            favourites=favourites,
            user_collections=user_collections,
            favourites_id=self.favourites_id,
        )
