"""
Sidebar
Lists the soundfonts and collections of the library and accepts instrument drops
"""
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (QAbstractItemView, QMenu, QMessageBox, QStyle, QTreeWidget,
                               QTreeWidgetItem)

from soundfonter.file_browser import reveal_in_file_browser
from soundfonter.instrument_mime import instruments_from_mime
from soundfonter.library_manager import LibraryManager
from soundfonter.library_model import Collection
from soundfonter.logger import get_logger


class LibrarySidebar(QTreeWidget):
    """Sidebar with a "Soundfonts" and a "Collections" section"""

    # Signals
    collection_selected = Signal(object)  # Collection or None

    def __init__(self, manager: LibraryManager, parent=None):
        super().__init__(parent)
        self.logger = get_logger(__name__)
        self.manager = manager
        self.selected_collection: Optional[Collection] = None
        self._rebuilding = False

        self.setHeaderHidden(True)
        self.setRootIsDecorated(False)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.setEditTriggers(QAbstractItemView.DoubleClicked | QAbstractItemView.EditKeyPressed)
        self.setAcceptDrops(True)
        self.setDragDropMode(QAbstractItemView.DropOnly)
        self.setContextMenuPolicy(Qt.CustomContextMenu)

        self.soundfonts_section = self._create_section("Soundfonts")
        self.collections_section = self._create_section("Collections")

        self.itemSelectionChanged.connect(self._on_selection_changed)
        self.itemChanged.connect(self._on_item_changed)
        self.customContextMenuRequested.connect(self._show_context_menu)

        self.manager.soundfonts_changed.connect(self._on_soundfonts_changed)
        self.manager.collections_changed.connect(self._on_collections_changed)
        self.manager.collection_contents_changed.connect(self._on_contents_changed)

        self.rebuild()
        self.reset_selection()

    def _create_section(self, title: str) -> QTreeWidgetItem:
        section = QTreeWidgetItem(self, [title])
        section.setFlags(Qt.ItemIsEnabled)
        font = QFont()
        font.setBold(True)
        section.setFont(0, font)
        section.setExpanded(True)
        return section

    # Building

    def rebuild(self):
        """Recreate the items from the library, keeping the current selection"""
        self._rebuilding = True
        self.soundfonts_section.takeChildren()
        self.collections_section.takeChildren()

        for soundfont in self.manager.soundfonts:
            self._add_collection_item(self.soundfonts_section, soundfont)

        self._add_collection_item(self.collections_section, self.manager.favourites)
        for collection in self.manager.user_collections:
            self._add_collection_item(self.collections_section, collection)

        self.soundfonts_section.setExpanded(True)
        self.collections_section.setExpanded(True)
        self._rebuilding = False

        if self.selected_collection is not None:
            self.select_collection(self.manager.find_collection(self.selected_collection.id))

    def _add_collection_item(self, section: QTreeWidgetItem, collection: Collection) -> QTreeWidgetItem:
        library = self.manager.library
        item = QTreeWidgetItem(section, [collection.name])
        item.setData(0, Qt.UserRole, str(collection.id))
        item.setToolTip(0, f"{len(collection)} instruments")

        flags = Qt.ItemIsEnabled | Qt.ItemIsSelectable
        if library.is_editable(collection):
            flags |= Qt.ItemIsDropEnabled
        if library.is_renamable(collection):
            flags |= Qt.ItemIsEditable
        item.setFlags(flags)

        if collection.is_soundfont:
            item.setIcon(0, self.style().standardIcon(QStyle.SP_MediaVolume))
        elif library.is_favourites(collection):
            item.setIcon(0, self.style().standardIcon(QStyle.SP_DialogYesButton))
        else:
            item.setIcon(0, self.style().standardIcon(QStyle.SP_DirIcon))
        return item

    def collection_for_item(self, item: Optional[QTreeWidgetItem]) -> Optional[Collection]:
        if item is None:
            return None
        collection_id = item.data(0, Qt.UserRole)
        return self.manager.find_collection(collection_id) if collection_id else None

    def item_for_collection(self, collection: Collection) -> Optional[QTreeWidgetItem]:
        for section in (self.soundfonts_section, self.collections_section):
            for i in range(section.childCount()):
                child = section.child(i)
                if child.data(0, Qt.UserRole) == str(collection.id):
                    return child
        return None

    # Selection

    def select_collection(self, collection: Optional[Collection]):
        item = self.item_for_collection(collection) if collection else None
        if item is None:
            self.clearSelection()
            self._set_selected(None)
            return
        self.setCurrentItem(item)
        self._set_selected(collection)

    def reset_selection(self):
        """Select the first soundfont, or the favourites if there are none"""
        self.select_collection(self.manager.library.default_selection())

    def _set_selected(self, collection: Optional[Collection]):
        if collection == self.selected_collection and collection is not None:
            return
        self.selected_collection = collection
        self.collection_selected.emit(collection)

    def _on_selection_changed(self):
        if self._rebuilding:
            return
        items = self.selectedItems()
        collection = self.collection_for_item(items[0]) if items else None
        if collection is not None:
            self._set_selected(collection)

    def _on_soundfonts_changed(self):
        self.rebuild()
        self.reset_selection()

    def _on_collections_changed(self):
        shown_ids = [self.collections_section.child(i).data(0, Qt.UserRole)
                     for i in range(self.collections_section.childCount())]
        if shown_ids != [str(c.id) for c in self.manager.library.collections]:
            self.rebuild()
            return

        # Only names changed; items are kept since one may be mid-edit
        self._rebuilding = True
        for i, collection in enumerate(self.manager.library.collections):
            item = self.collections_section.child(i)
            if item.text(0) != collection.name:
                item.setText(0, collection.name)
        self._rebuilding = False

    def _on_contents_changed(self, collection_id: str):
        collection = self.manager.find_collection(collection_id)
        item = self.item_for_collection(collection) if collection else None
        if item is not None:
            item.setToolTip(0, f"{len(collection)} instruments")

    def _on_item_changed(self, item: QTreeWidgetItem, column: int):
        if self._rebuilding:
            return
        collection = self.collection_for_item(item)
        if collection is None or item.text(0) == collection.name:
            return
        if not self.manager.rename_collection(collection, item.text(0)):
            # Empty names are rejected, restore the current one
            self._rebuilding = True
            item.setText(0, collection.name)
            self._rebuilding = False

    # Actions

    def create_collection(self) -> Collection:
        collection = self.manager.create_user_collection()
        self.select_collection(collection)
        return collection

    def delete_collection(self, collection: Collection):
        """Delete a user collection, moving the selection to its neighbour"""
        next_selection = self.manager.library.selection_after_delete(collection)
        was_selected = collection == self.selected_collection
        if not self.manager.delete_user_collection(collection):
            return
        if was_selected:
            self.select_collection(next_selection)

    def _confirm_delete(self, collection: Collection):
        reply = QMessageBox.question(
            self, "Delete Collection",
            f"Delete the collection \"{collection.name}\"?",
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No)
        if reply == QMessageBox.Yes:
            self.delete_collection(collection)

    def _show_context_menu(self, pos):
        item = self.itemAt(pos)
        collection = self.collection_for_item(item)
        library = self.manager.library

        menu = QMenu(self)
        if collection is not None and collection.is_soundfont:
            show_action = menu.addAction("Show in File Browser")
            show_action.triggered.connect(lambda: reveal_in_file_browser(collection.source_path))
        elif collection is not None and library.is_renamable(collection):
            rename_action = menu.addAction("Rename")
            rename_action.triggered.connect(lambda: self.editItem(item, 0))
            delete_action = menu.addAction("Delete")
            delete_action.triggered.connect(lambda: self._confirm_delete(collection))

        if not menu.isEmpty():
            menu.addSeparator()
        new_action = menu.addAction("New Collection")
        new_action.triggered.connect(self.create_collection)

        menu.exec(self.viewport().mapToGlobal(pos))

    # Drag and drop

    def _drop_target(self, event) -> Optional[Collection]:
        collection = self.collection_for_item(self.itemAt(event.position().toPoint()))
        if collection is None or not self.manager.library.is_editable(collection):
            return None
        return collection

    def dragEnterEvent(self, event):
        if instruments_from_mime(event.mimeData()):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event):
        collection = self._drop_target(event)
        instruments = instruments_from_mime(event.mimeData())
        if collection is not None and instruments and not any(collection.contains(i) for i in instruments):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dropEvent(self, event):
        collection = self._drop_target(event)
        instruments = instruments_from_mime(event.mimeData())
        if collection is not None and self.manager.add_instruments(instruments, collection):
            self.logger.info(f"Dropped {len(instruments)} instruments on '{collection.name}'")
            event.acceptProposedAction()
        else:
            event.ignore()
