"""
Library selection dialogs
"""
from typing import Optional

from PySide6.QtWidgets import QFileDialog, QMessageBox, QWidget


def _ask(parent: QWidget, icon, title: str, text: str) -> bool:
    box = QMessageBox(icon, title, text, parent=parent)
    select_button = box.addButton("Select", QMessageBox.AcceptRole)
    box.addButton(QMessageBox.Cancel)
    box.setDefaultButton(select_button)
    box.exec()
    return box.clickedButton() == select_button


def ask_select_library(parent: QWidget) -> bool:
    """Explain which directory to choose; False if the user declined"""
    return _ask(parent, QMessageBox.Information, "Select Library",
                "Please select the folder containing your sforzando library.")


def ask_retry_after_failure(parent: QWidget, detail: str = "") -> bool:
    """Report a library that failed to load; False if the user declined to choose another"""
    text = "Library is invalid or malformed."
    if detail:
        text += f"\n\n{detail}"
    return _ask(parent, QMessageBox.Warning, "Failed to Load Library", text)


def choose_library_directory(parent: QWidget, start_dir: str = "") -> Optional[str]:
    """Let the user pick a library directory, returning None if cancelled"""
    directory = QFileDialog.getExistingDirectory(parent, "Select Library", start_dir)
    return directory or None
