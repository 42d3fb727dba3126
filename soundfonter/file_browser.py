"""
Reveal files in the platform file browser
"""
import os
import subprocess
import sys

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices

from soundfonter.logger import get_logger

logger = get_logger(__name__)


def reveal_command(path: str, platform: str = sys.platform) -> list:
    """Get the command that shows a file or directory in the file browser"""
    if platform == "darwin":
        return ["open", "-R", path]
    if platform.startswith("win"):
        return ["explorer", f"/select,{os.path.normpath(path)}"]

    # No portable "select" on other platforms; open the containing directory
    directory = path if os.path.isdir(path) else os.path.dirname(path)
    return ["xdg-open", directory]


def reveal_in_file_browser(path: str) -> bool:
    """Show a file or directory in Finder, Explorer or the desktop's file manager"""
    if not os.path.exists(path):
        logger.warning(f"Cannot reveal missing path: {path}")
        return False

    try:
        subprocess.Popen(reveal_command(path))
        return True
    except OSError as e:
        logger.info(f"File browser command failed ({e}), falling back to desktop services")

    directory = path if os.path.isdir(path) else os.path.dirname(path)
    return QDesktopServices.openUrl(QUrl.fromLocalFile(directory))
