from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction, QActionGroup, QKeySequence
from PySide6.QtWidgets import QMainWindow, QSplitter

from soundfonter.file_browser import reveal_in_file_browser
from soundfonter.import_flow import ImportFlow, ImportStatus
from soundfonter.library_manager import LibraryManager
from soundfonter.library_model import Collection, Instrument, LibraryError
from soundfonter.logger import get_logger
from soundfonter.settings import Theme, ThemeColors, get_settings_manager
from soundfonter.ui.collection_widget import CollectionView
from soundfonter.ui.instrument_menu import InstrumentAction, populate_instrument_menu
from soundfonter.ui.library_dialogs import (ask_retry_after_failure, ask_select_library,
                                            choose_library_directory)
from soundfonter.ui.sidebar_widget import LibrarySidebar
from soundfonter.ui.status_bar import LibraryStatusBar


class SoundfonterMainWindow(QMainWindow):
    def __init__(self, manager: LibraryManager):
        super().__init__()
        self.logger = get_logger(__name__)
        self.manager = manager
        self.settings_manager = get_settings_manager()
        self.import_flow = ImportFlow()
        self._last_error = ""

        self.setWindowTitle("Soundfonter")
        settings = self.settings_manager.settings
        self.resize(settings.window_width, settings.window_height)

        # Sidebar (left) and collection view (right)
        self.splitter = QSplitter(Qt.Horizontal)
        self.sidebar = LibrarySidebar(manager)
        self.collection_view = CollectionView(manager, self.perform_instrument_action)
        self.splitter.addWidget(self.sidebar)
        self.splitter.addWidget(self.collection_view)
        self.splitter.setStretchFactor(1, 1)
        self.splitter.setSizes([settings.sidebar_width, settings.window_width - settings.sidebar_width])
        self.setCentralWidget(self.splitter)

        self.status_bar = LibraryStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.update_library(manager.root_directory)

        self._create_menu_bar()
        self._connect_signals()
        self.apply_theme(self.settings_manager.get_theme_colors())

        self.collection_view.set_collection(self.sidebar.selected_collection)
        if settings.window_maximized:
            self.showMaximized()

        # Load after the window is shown so dialogs have a parent on screen
        QTimer.singleShot(100, self._load_library)

    def _create_menu_bar(self):
        menu_bar = self.menuBar()

        # File Menu
        file_menu = menu_bar.addMenu("&File")

        new_collection_action = file_menu.addAction("&New Collection")
        new_collection_action.setShortcut(QKeySequence("Ctrl+Alt+N"))
        new_collection_action.triggered.connect(self.sidebar.create_collection)

        open_action = file_menu.addAction("&Open Library...")
        open_action.setShortcut(QKeySequence("Ctrl+O"))
        open_action.triggered.connect(self.import_flow.start_import)

        reload_action = file_menu.addAction("&Reload Library")
        reload_action.setShortcut(QKeySequence("Ctrl+R"))
        reload_action.triggered.connect(self._reload_library)

        file_menu.addSeparator()

        quit_action = file_menu.addAction("&Quit")
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)

        # Edit Menu
        edit_menu = menu_bar.addMenu("&Edit")

        find_action = edit_menu.addAction("&Find...")
        find_action.setShortcut(QKeySequence("Ctrl+F"))
        find_action.triggered.connect(self.collection_view.focus_search)

        # View Menu
        view_menu = menu_bar.addMenu("&View")
        theme_menu = view_menu.addMenu("&Theme")
        theme_group = QActionGroup(self)
        current_theme = self.settings_manager.settings.display.theme
        for theme in Theme:
            action = QAction(theme.value.title(), self, checkable=True)
            action.setChecked(theme.value == current_theme)
            action.triggered.connect(lambda checked, t=theme: self._on_theme_changed(t))
            theme_group.addAction(action)
            theme_menu.addAction(action)

        # Instrument Menu, rebuilt whenever the selection or collections change
        self.instrument_menu = menu_bar.addMenu("&Instrument")
        self._rebuild_instrument_menu()

    def _connect_signals(self):
        self.sidebar.collection_selected.connect(self._on_collection_selected)
        self.collection_view.instrument_selected.connect(self._schedule_instrument_menu_rebuild)
        self.collection_view.instruments_shown.connect(self.status_bar.update_count)
        self.manager.collections_changed.connect(self._schedule_instrument_menu_rebuild)
        self.manager.collection_contents_changed.connect(self._schedule_instrument_menu_rebuild)
        self.manager.library_error.connect(self.status_bar.show_message)
        self.manager.soundfonts_changed.connect(
            lambda: self.status_bar.update_library(self.manager.root_directory))
        self.import_flow.status_changed.connect(self._on_import_status_changed)

    # Theme

    def apply_theme(self, colors: ThemeColors):
        self.setStyleSheet(f"""
            QMainWindow, QTableWidget, QLineEdit {{
                background-color: {colors.background};
                color: {colors.text};
            }}
            QTreeWidget {{
                background-color: {colors.sidebar_background};
                color: {colors.text};
                border: none;
            }}
            QTableWidget::item:selected, QTreeWidget::item:selected {{
                background-color: {colors.selection};
                color: {colors.selection_text};
            }}
            QHeaderView::section {{
                background-color: {colors.sidebar_background};
                color: {colors.secondary_text};
            }}
        """)
        self.status_bar.apply_theme(colors)

    def _on_theme_changed(self, theme: Theme):
        self.settings_manager.set_theme(theme)
        self.apply_theme(self.settings_manager.get_theme_colors())

    # Collections and instruments

    def _on_collection_selected(self, collection: Optional[Collection]):
        self.collection_view.set_collection(collection)
        self._schedule_instrument_menu_rebuild()

    def _schedule_instrument_menu_rebuild(self, *args):
        # Deferred: the menu may be emitting the signal that triggered the rebuild
        QTimer.singleShot(0, self._rebuild_instrument_menu)

    def _rebuild_instrument_menu(self):
        self.instrument_menu.clear()
        populate_instrument_menu(
            self.instrument_menu, self.manager,
            self.collection_view.selected_instrument,
            self.collection_view.collection,
            self.perform_instrument_action,
            shortcuts=True)

    def perform_instrument_action(self, instrument: Optional[Instrument], action: InstrumentAction,
                                  collection: Optional[Collection] = None):
        """Perform an instrument action requested from a menu"""
        if instrument is None:
            return

        if action == InstrumentAction.ADD_TO and collection is not None:
            self.manager.add_instrument(instrument, collection)
        elif action == InstrumentAction.ADD_TO_NEW_COLLECTION:
            new_collection = self.manager.create_user_collection(initial_instruments=[instrument])
            self.sidebar.select_collection(new_collection)
        elif action == InstrumentAction.REMOVE_FROM and collection is not None:
            self.manager.remove_instrument(instrument, collection)
        elif action == InstrumentAction.SHOW_IN_FILE_BROWSER:
            if not reveal_in_file_browser(instrument.path):
                self.status_bar.show_message(f"Could not show {instrument.path}")

    # Library import

    def _load_library(self):
        """Load the stored library, or start the import flow if there is none"""
        if not self.manager.has_root_directory:
            self.import_flow.advance()
            return

        try:
            self.manager.reload()
        except LibraryError as e:
            self._last_error = str(e)
            self.import_flow.status = ImportStatus.FAILURE

    def _reload_library(self):
        if not self.manager.has_root_directory:
            self.import_flow.start_import()
            return
        self._load_library()

    def _on_import_status_changed(self, status: ImportStatus):
        # Each stage opens a modal dialog, so run it outside the signal emission
        QTimer.singleShot(0, self._run_import_stage)

    def _run_import_stage(self):
        flow = self.import_flow
        if flow.is_showing_info:
            if ask_select_library(self):
                flow.advance()
            else:
                flow.reset()
        elif flow.is_showing_dialogue:
            directory = choose_library_directory(self, self.manager.root_directory or "")
            if directory is None:
                flow.advance()
                return
            try:
                self.manager.select_library(directory)
            except LibraryError as e:
                self._last_error = str(e)
                flow.advance(ImportStatus.FAILURE)
            else:
                self.status_bar.show_message(f"Loaded {len(self.manager.soundfonts)} soundfonts")
                flow.advance(ImportStatus.SUCCESS)
        elif flow.is_showing_failure:
            if ask_retry_after_failure(self, self._last_error):
                flow.advance()
            else:
                flow.reset()

    # Window state

    def closeEvent(self, event):
        settings = self.settings_manager.settings
        settings.window_maximized = self.isMaximized()
        if not self.isMaximized():
            settings.window_width = self.width()
            settings.window_height = self.height()
        settings.sidebar_width = self.splitter.sizes()[0]
        settings.display.name_column_width = self.collection_view.table.columnWidth(0)
        self.settings_manager.save_settings()
        self.logger.info("Window state saved")
        super().closeEvent(event)
