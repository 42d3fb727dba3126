"""
Library data model
Instruments, collections and the errors raised while loading a library
"""
import os
import re
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

# Identity of the favourites collection, passed to every Library explicitly
FAVOURITES_ID = uuid.UUID("12CD3324-0121-4842-AAE0-4591C388F36E")

DEFAULT_COLLECTION_NAME = "New Collection"
FAVOURITES_NAME = "Favourites"

# Sentinel for bank/number segments that are not decimal integers
UNKNOWN_NUMBER = -1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class LibraryError(Exception):
    """Base class for errors raised while loading a library"""


class AccessDenied(LibraryError):
    """The library directory cannot be read"""


class InvalidLibraryLayout(LibraryError):
    """The library directory does not follow the converted soundfont layout"""


def parse_number(text: str) -> int:
    """Parse a decimal integer, returning UNKNOWN_NUMBER when it is not one"""
    if not _INTEGER_PATTERN.fullmatch(text):
        return UNKNOWN_NUMBER
    return int(text)


def _segments(text: str) -> List[str]:
    # Empty segments (leading, trailing or doubled underscores) are ignored
    return [segment for segment in text.split("_") if segment]


@dataclass(frozen=True)
class Instrument:
    """An instrument that can be played, identified by its file path.

    The name, number and bank are derived from the path on every access:
    ``.../<bank>/<number>_<words...>.sfz``.
    """
    path: str

    def __post_init__(self):
        object.__setattr__(self, "path", os.path.abspath(self.path))

    @property
    def filename(self) -> str:
        return os.path.basename(self.path)

    @property
    def number(self) -> int:
        """The number of this instrument within its bank"""
        segments = _segments(self.filename)
        return parse_number(segments[0]) if segments else UNKNOWN_NUMBER

    @property
    def name(self) -> str:
        """The human-readable display name of this instrument"""
        stem = os.path.splitext(self.filename)[0]
        return " ".join(_segments(stem)[1:])

    @property
    def bank(self) -> int:
        """The number of the bank containing this instrument"""
        parent = os.path.basename(os.path.dirname(self.path))
        return parse_number(parent)

    @property
    def sort_key(self):
        """Bank then number, the ordering used by the sforzando player"""
        return (self.bank, self.number)

    def __str__(self):
        return f"{self.bank}/{self.number} {self.name}"


@dataclass(eq=False)
class Collection:
    """A named collection of instruments.

    Collections with a ``source_path`` come from a soundfont directory and
    are only ever replaced by a rescan. Equality follows ``id``, never the
    name.
    """
    name: str = DEFAULT_COLLECTION_NAME
    instruments: List[Instrument] = field(default_factory=list)
    source_path: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def is_soundfont(self) -> bool:
        """Whether this collection mirrors a soundfont directory"""
        return self.source_path is not None

    def contains(self, instrument: Instrument) -> bool:
        return instrument in self.instruments

    def __len__(self):
        return len(self.instruments)

    def __eq__(self, other):
        if not isinstance(other, Collection):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return f"Collection(name={self.name!r}, instruments={len(self.instruments)}, id={self.id})"
