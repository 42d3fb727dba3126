"""
Shared fixtures for Soundfonter tests
"""
import os

import pytest

from soundfonter.library_model import Instrument

SF2_DIR = os.path.join("ARIAConverted", "sf2")


def write_library(root, relative_paths):
    """Create empty files under <root>/ARIAConverted/sf2"""
    for relative_path in relative_paths:
        path = os.path.join(str(root), SF2_DIR, relative_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            f.write("<region> sample=placeholder.wav\n")
    return str(root)


@pytest.fixture
def library_root(tmp_path):
    """A library with two soundfonts whose files are written out of order"""
    return write_library(tmp_path / "Instruments", [
        "General_User_GS_sf2/999/999_Instrument_-_4.sfz",
        "General_User_GS_sf2/15/500_Instrument_2.sfz",
        "General_User_GS_sf2/0/000_Instrument_0.sfz",
        "General_User_GS_sf2/199/090_Instrument_Spaces_3.sfz",
        "General_User_GS_sf2/5/005_Instru.ment_1.sfz",
        "General_User_GS_sf2/5/readme.txt",
        "Chiptune_sf2/0/001_Square_Lead.sfz",
        "Chiptune_sf2/0/000_Pulse.sfz",
        "not_a_soundfont/0/000_Ignored.sfz",
    ])


@pytest.fixture
def instruments():
    """Instruments in (bank, number) order"""
    base = "/Instruments/ARIAConverted/sf2/Collection_sf2"
    return [
        Instrument(f"{base}/0/000_Instrument_0.sfz"),
        Instrument(f"{base}/5/005_Instru.ment_1.sfz"),
        Instrument(f"{base}/15/500_Instrument_2.sfz"),
        Instrument(f"{base}/199/090_Instrument_Spaces_3.sfz"),
        Instrument(f"{base}/999/999_Instrument_-_4.sfz"),
    ]


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the library store at a temporary directory"""
    directory = tmp_path / "data"
    monkeypatch.setenv("SOUNDFONTER_DATA_DIR", str(directory))
    return str(directory)
