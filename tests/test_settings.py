"""
Tests for application settings
"""
import json

from soundfonter.settings import DARK_THEME, LIGHT_THEME, SettingsManager, Theme


def test_defaults_without_file(tmp_path):
    manager = SettingsManager(str(tmp_path / "settings.json"))
    assert manager.settings.display.theme == Theme.DARK.value
    assert manager.settings.window_width == 1000
    assert manager.get_theme_colors() == DARK_THEME


def test_save_and_load(tmp_path):
    path = str(tmp_path / "settings.json")
    manager = SettingsManager(path)
    manager.settings.sidebar_width = 300
    manager.set_theme(Theme.LIGHT)

    reloaded = SettingsManager(path)
    assert reloaded.settings.sidebar_width == 300
    assert reloaded.get_theme_colors() == LIGHT_THEME


def test_malformed_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({'display': {'unknown_option': 1}}))
    manager = SettingsManager(str(path))
    assert manager.settings.display.theme == Theme.DARK.value

    path.write_text("{")
    assert SettingsManager(str(path)).settings.window_height == 650
