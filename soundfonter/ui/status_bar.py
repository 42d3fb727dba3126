"""
Status bar for Soundfonter
Displays the library directory and the size of the displayed collection
"""
from typing import Optional

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QLabel, QStatusBar

from soundfonter.settings import ThemeColors


class LibraryStatusBar(QStatusBar):
    """Status bar showing library information"""

    def __init__(self):
        super().__init__()
        self.setup_ui()

    def setup_ui(self):
        """Setup the status bar layout"""
        self.count_label = QLabel("")
        self.count_label.setFont(QFont("Arial", 9))
        self.addPermanentWidget(self.count_label)

        self.library_label = QLabel("No library")
        self.library_label.setFont(QFont("Arial", 9))
        self.addPermanentWidget(self.library_label)

    def apply_theme(self, colors: ThemeColors):
        self.count_label.setStyleSheet(f"color: {colors.secondary_text}; padding: 2px;")
        self.library_label.setStyleSheet(f"color: {colors.section_header}; font-weight: bold; padding: 2px;")

    def update_library(self, root_directory: Optional[str]):
        """Update library directory display"""
        self.library_label.setText(root_directory or "No library")
        self.library_label.setToolTip(root_directory or "")

    def update_count(self, shown: int, total: int):
        if shown == total:
            self.count_label.setText(f"{total} instruments")
        else:
            self.count_label.setText(f"{shown} of {total} instruments")

    def show_message(self, message: str, timeout: int = 3000):
        """Show temporary message"""
        super().showMessage(message, timeout)
