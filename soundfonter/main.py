import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from soundfonter.library_manager import cleanup_library_manager, initialize_library_manager
from soundfonter.library_store import LibraryStoreError
from soundfonter.logger import get_logger, set_debug_mode

logger = get_logger(__name__)

def main():
    """Main application entry point"""
    if "--debug" in sys.argv:
        set_debug_mode(True)

    app = QApplication(sys.argv)

    # Set application properties (for macOS menu bar)
    app.setApplicationName("Soundfonter")
    app.setApplicationDisplayName("Soundfonter")
    app.setOrganizationName("Soundfonter")

    # The library must load before anything else; there is nothing to show without it
    try:
        manager = initialize_library_manager()
    except LibraryStoreError as e:
        logger.critical(f"Failed to load library: {e}")
        QMessageBox.critical(None, "Soundfonter", f"Failed to load library:\n{e}")
        sys.exit(1)

    from soundfonter.ui.main_window import SoundfonterMainWindow
    window = SoundfonterMainWindow(manager)
    window.show()

    exit_code = app.exec()
    cleanup_library_manager()
    sys.exit(exit_code)

if __name__ == "__main__":
    main()
