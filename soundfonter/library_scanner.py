"""
Library Scanner
Discovers converted soundfonts and their instruments within a library directory

Expected layout:
    <root>/ARIAConverted/sf2/<soundfont name>_sf2/<bank>/<number>_<instrument>.sfz
"""
import os
from typing import List

from soundfonter.library_model import (AccessDenied, Collection, Instrument,
                                       InvalidLibraryLayout)
from soundfonter.logger import get_logger

logger = get_logger(__name__)

LIBRARY_SUBPATH = os.path.join("ARIAConverted", "sf2")
SOUNDFONT_SUFFIX = "_sf2"
INSTRUMENT_EXTENSION = ".sfz"


def soundfont_display_name(directory_name: str) -> str:
    """Get the display name for a soundfont directory name"""
    if directory_name.endswith(SOUNDFONT_SUFFIX):
        directory_name = directory_name[:-len(SOUNDFONT_SUFFIX)]
    return " ".join(part for part in directory_name.split("_") if part)


def sort_instruments(instruments: List[Instrument]) -> List[Instrument]:
    """Sort instruments by bank then number, keeping the order of equal pairs"""
    return sorted(instruments, key=lambda instrument: instrument.sort_key)


def _raise_access_denied(error: OSError):
    raise AccessDenied(f"Cannot read {error.filename}: {error.strerror}") from error


def _find_instrument_paths(soundfont_dir: str) -> List[str]:
    """Recursively list instrument files, walking directories in name order"""
    paths = []
    for dirpath, dirnames, filenames in os.walk(soundfont_dir, onerror=_raise_access_denied):
        dirnames.sort()
        for filename in sorted(filenames):
            if filename.endswith(INSTRUMENT_EXTENSION):
                paths.append(os.path.join(dirpath, filename))
    return paths


def scan_soundfont(soundfont_dir: str) -> Collection:
    """Build the collection for a single soundfont directory"""
    instruments = [Instrument(path) for path in _find_instrument_paths(soundfont_dir)]
    return Collection(
        soundfont_display_name(os.path.basename(soundfont_dir)),
        instruments=sort_instruments(instruments),
        source_path=soundfont_dir,
    )


def scan_library(root: str) -> List[Collection]:
    """Scan a library directory, returning one collection per soundfont.

    Raises AccessDenied if the root (or anything beneath it) cannot be read
    and InvalidLibraryLayout if the root has no ARIAConverted/sf2 directory.
    Nothing is returned unless the whole tree was scanned.
    """
    root = os.path.abspath(root)
    try:
        os.listdir(root)
    except OSError as e:
        _raise_access_denied(e)

    sf2_dir = os.path.join(root, LIBRARY_SUBPATH)
    if not os.path.isdir(sf2_dir):
        raise InvalidLibraryLayout(f"{root} does not contain {LIBRARY_SUBPATH}")

    try:
        entries = sorted(os.listdir(sf2_dir))
    except OSError as e:
        _raise_access_denied(e)

    soundfonts = []
    for entry in entries:
        soundfont_dir = os.path.join(sf2_dir, entry)
        if not entry.endswith(SOUNDFONT_SUFFIX) or not os.path.isdir(soundfont_dir):
            continue
        soundfont = scan_soundfont(soundfont_dir)
        logger.debug(f"Soundfont '{soundfont.name}': {len(soundfont)} instruments")
        soundfonts.append(soundfont)

    logger.info(f"Found {len(soundfonts)} soundfonts in {root}")
    return soundfonts
