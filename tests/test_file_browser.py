"""
Tests for revealing files in the file browser
"""
import os

from soundfonter import file_browser
from soundfonter.file_browser import reveal_command, reveal_in_file_browser


def test_reveal_command_macos():
    assert reveal_command("/lib/0/000_Piano.sfz", "darwin") == ["open", "-R", "/lib/0/000_Piano.sfz"]


def test_reveal_command_windows():
    command = reveal_command("/lib/0/000_Piano.sfz", "win32")
    assert command[0] == "explorer"
    assert command[1].startswith("/select,")


def test_reveal_command_linux_opens_parent(tmp_path):
    instrument = tmp_path / "000_Piano.sfz"
    instrument.write_text("")
    assert reveal_command(str(instrument), "linux") == ["xdg-open", str(tmp_path)]
    assert reveal_command(str(tmp_path), "linux") == ["xdg-open", str(tmp_path)]


def test_reveal_runs_command(tmp_path, monkeypatch):
    launched = []
    monkeypatch.setattr(file_browser.subprocess, "Popen", lambda command: launched.append(command))
    assert reveal_in_file_browser(str(tmp_path))
    assert launched == [reveal_command(str(tmp_path))]


def test_reveal_missing_path(tmp_path, monkeypatch):
    launched = []
    monkeypatch.setattr(file_browser.subprocess, "Popen", lambda command: launched.append(command))
    assert not reveal_in_file_browser(os.path.join(str(tmp_path), "missing.sfz"))
    assert launched == []
