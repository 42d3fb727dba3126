"""
Collection view
Searchable table of the instruments within the selected collection
"""
from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (QAbstractItemView, QHeaderView, QLabel, QLineEdit, QMenu,
                               QTableWidget, QTableWidgetItem, QVBoxLayout, QWidget)

from soundfonter.instrument_mime import instruments_to_mime
from soundfonter.library_manager import LibraryManager
from soundfonter.library_model import Collection, Instrument
from soundfonter.settings import get_settings
from soundfonter.ui.instrument_menu import PerformCallback, populate_instrument_menu

NAME_COLUMN = 0
NUMBER_COLUMN = 1
BANK_COLUMN = 2


class InstrumentTable(QTableWidget):
    """Instrument table whose rows can be dragged out as file URLs"""

    def __init__(self, parent=None):
        super().__init__(0, 3, parent)
        self.setHorizontalHeaderLabels(["Name", "#", "Bank"])
        self.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setDragEnabled(True)
        self.setDragDropMode(QAbstractItemView.DragOnly)
        self.verticalHeader().hide()
        self.setShowGrid(False)
        self.setAlternatingRowColors(True)
        self.setContextMenuPolicy(Qt.CustomContextMenu)

        header = self.horizontalHeader()
        header.setSectionResizeMode(NAME_COLUMN, QHeaderView.Stretch)
        display = get_settings().display
        self.setColumnWidth(NAME_COLUMN, display.name_column_width)
        self.setColumnWidth(NUMBER_COLUMN, display.number_column_width)
        self.setColumnWidth(BANK_COLUMN, display.bank_column_width)

    def mimeTypes(self):
        return ["text/uri-list", "text/plain"]

    def mimeData(self, items):
        instruments = []
        for item in items:
            instrument = item.data(Qt.UserRole)
            if item.column() == NAME_COLUMN and instrument is not None:
                instruments.append(instrument)
        return instruments_to_mime(instruments)

    def instrument_at_row(self, row: int) -> Optional[Instrument]:
        item = self.item(row, NAME_COLUMN)
        return item.data(Qt.UserRole) if item else None


class CollectionView(QWidget):
    """Displays and filters the instruments of a single collection"""

    # Signals
    instrument_selected = Signal(object)  # Instrument or None
    instruments_shown = Signal(int, int)  # shown, total

    def __init__(self, manager: LibraryManager, perform: PerformCallback, parent=None):
        super().__init__(parent)
        self.manager = manager
        self.perform = perform
        self.collection: Optional[Collection] = None
        self.selected_instrument: Optional[Instrument] = None

        self.setup_ui()

        self.manager.collection_contents_changed.connect(self._on_contents_changed)
        self.manager.collections_changed.connect(self._update_title)

    def setup_ui(self):
        """Setup the user interface"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        self.title_label = QLabel("")
        self.title_label.setFont(QFont("Arial", 14, QFont.Bold))
        layout.addWidget(self.title_label)

        self.search_field = QLineEdit()
        self.search_field.setPlaceholderText("Search")
        self.search_field.setClearButtonEnabled(True)
        self.search_field.textChanged.connect(self.refresh)
        layout.addWidget(self.search_field)

        self.table = InstrumentTable(self)
        self.table.itemSelectionChanged.connect(self._on_selection_changed)
        self.table.customContextMenuRequested.connect(self._show_context_menu)
        layout.addWidget(self.table)

    def set_collection(self, collection: Optional[Collection]):
        """Display a collection, clearing the selection when it changes"""
        changed = collection != self.collection
        self.collection = collection
        if changed:
            self.set_selected_instrument(None)
        self._update_title()
        self.refresh()

    def focus_search(self):
        self.search_field.setFocus()
        self.search_field.selectAll()

    def visible_instruments(self) -> List[Instrument]:
        if self.collection is None:
            return []
        return self.manager.filter_instruments(self.collection, self.search_field.text())

    def refresh(self):
        """Rebuild the table from the current collection and search query"""
        instruments = self.visible_instruments()

        self.table.blockSignals(True)
        self.table.setRowCount(len(instruments))
        for row, instrument in enumerate(instruments):
            name_item = QTableWidgetItem(instrument.name)
            name_item.setData(Qt.UserRole, instrument)
            name_item.setToolTip(instrument.path)
            self.table.setItem(row, NAME_COLUMN, name_item)

            number_item = QTableWidgetItem(str(instrument.number))
            number_item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self.table.setItem(row, NUMBER_COLUMN, number_item)

            bank_item = QTableWidgetItem(str(instrument.bank))
            bank_item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self.table.setItem(row, BANK_COLUMN, bank_item)

            if instrument == self.selected_instrument:
                self.table.selectRow(row)
        self.table.blockSignals(False)

        total = len(self.collection) if self.collection is not None else 0
        self.instruments_shown.emit(len(instruments), total)

    def set_selected_instrument(self, instrument: Optional[Instrument]):
        if instrument == self.selected_instrument:
            return
        self.selected_instrument = instrument
        if instrument is None:
            self.table.clearSelection()
        self.instrument_selected.emit(instrument)

    def _update_title(self):
        self.title_label.setText(self.collection.name if self.collection else "")

    def _on_contents_changed(self, collection_id: str):
        if self.collection is not None and str(self.collection.id) == collection_id:
            if self.selected_instrument is not None and not self.collection.contains(self.selected_instrument):
                self.set_selected_instrument(None)
            self.refresh()

    def _on_selection_changed(self):
        rows = self.table.selectionModel().selectedRows()
        instrument = self.table.instrument_at_row(rows[0].row()) if rows else None
        self.set_selected_instrument(instrument)

    def _show_context_menu(self, pos):
        item = self.table.itemAt(pos)
        if item is None:
            return

        instrument = self.table.instrument_at_row(item.row())
        menu = QMenu(self)
        populate_instrument_menu(menu, self.manager, instrument, self.collection, self.perform)
        menu.exec(self.table.viewport().mapToGlobal(pos))
