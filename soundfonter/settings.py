"""
Application settings management for Soundfonter
"""
import json
import os
from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Optional

from soundfonter.logger import get_logger

logger = get_logger(__name__)

class Theme(Enum):
    """UI theme options"""
    DARK = "dark"
    LIGHT = "light"

@dataclass
class ThemeColors:
    """Color scheme for a theme"""
    # Main background
    background: str

    # Sidebar
    sidebar_background: str
    section_header: str

    # Text
    text: str
    secondary_text: str

    # Selection
    selection: str
    selection_text: str

    # Favourite marker
    favourite: str

# Define theme color schemes
DARK_THEME = ThemeColors(
    background="#282c34",
    sidebar_background="#21252b",
    section_header="#8be9fd",
    text="#f8f8f2",
    secondary_text="#9da5b4",
    selection="#44475a",
    selection_text="#ffffff",
    favourite="#ff79c6"
)

LIGHT_THEME = ThemeColors(
    background="#ffffff",
    sidebar_background="#f0f0f0",
    section_header="#0080ff",
    text="#2c3e50",
    secondary_text="#7f8c8d",
    selection="#cce4ff",
    selection_text="#000000",
    favourite="#e74c3c"
)

@dataclass
class DisplaySettings:
    """Display and UI settings"""
    theme: str = Theme.DARK.value

    # Collection table columns
    name_column_width: int = 320
    number_column_width: int = 50
    bank_column_width: int = 50

@dataclass
class AppSettings:
    """Main application settings"""
    display: DisplaySettings = field(default_factory=DisplaySettings)

    # Window state
    window_width: int = 1000
    window_height: int = 650
    window_maximized: bool = False
    sidebar_width: int = 220

class SettingsManager:
    """Manages application settings"""

    def __init__(self, settings_file: Optional[str] = None):
        self.settings_file = settings_file or os.path.expanduser("~/.soundfonter_settings.json")
        self.settings = self._load_default_settings()
        self.load_settings()

    def _load_default_settings(self) -> AppSettings:
        """Load default settings"""
        return AppSettings(display=DisplaySettings())

    def load_settings(self):
        """Load settings from file, keeping the defaults if it is unreadable"""
        if not os.path.exists(self.settings_file):
            return

        try:
            with open(self.settings_file, 'r') as f:
                data = json.load(f)

            display = DisplaySettings(**data.get('display', {}))
            defaults = AppSettings()
            self.settings = AppSettings(
                display=display,
                window_width=data.get('window_width', defaults.window_width),
                window_height=data.get('window_height', defaults.window_height),
                window_maximized=data.get('window_maximized', defaults.window_maximized),
                sidebar_width=data.get('sidebar_width', defaults.sidebar_width)
            )

            logger.info(f"Settings loaded from {self.settings_file}")
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Error loading settings: {e}")
            self.settings = self._load_default_settings()

    def save_settings(self):
        """Save settings to file"""
        try:
            with open(self.settings_file, 'w') as f:
                json.dump(asdict(self.settings), f, indent=2)

            logger.debug(f"Settings saved to {self.settings_file}")
        except OSError as e:
            logger.warning(f"Error saving settings: {e}")

    def get_theme_colors(self) -> ThemeColors:
        """Get current theme colors"""
        if self.settings.display.theme == Theme.LIGHT.value:
            return LIGHT_THEME
        else:
            return DARK_THEME

    def set_theme(self, theme: Theme):
        """Set current theme"""
        self.settings.display.theme = theme.value
        self.save_settings()

# Global settings manager instance
_settings_manager = None

def get_settings_manager() -> SettingsManager:
    """Get the global settings manager instance"""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager

def get_settings() -> AppSettings:
    """Get current application settings"""
    return get_settings_manager().settings
