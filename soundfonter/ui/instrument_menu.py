"""
Instrument menus
Builds the favourite and "Add to Collection" menus shared by the context menu and the menu bar
"""
from enum import Enum
from typing import Callable, Optional

from PySide6.QtGui import QKeySequence
from PySide6.QtWidgets import QMenu

from soundfonter.library_manager import LibraryManager
from soundfonter.library_model import Collection, Instrument


class InstrumentAction(Enum):
    """The different actions that can be performed on an instrument"""
    ADD_TO = "add_to"                                # add to the given collection
    ADD_TO_NEW_COLLECTION = "add_to_new_collection"  # create a collection holding it
    REMOVE_FROM = "remove_from"                      # remove from the given collection
    SHOW_IN_FILE_BROWSER = "show_in_file_browser"


# perform(instrument, action, collection)
PerformCallback = Callable[[Instrument, InstrumentAction, Optional[Collection]], None]


def add_favourite_action(menu: QMenu, manager: LibraryManager, instrument: Optional[Instrument],
                         perform: PerformCallback, shortcuts: bool = False):
    """Add the action toggling the favourite state of an instrument"""
    is_favourite = manager.is_favourite(instrument)
    action = menu.addAction("Remove Favourite" if is_favourite else "Favourite")
    action.setEnabled(instrument is not None)
    if shortcuts:
        action.setShortcut(QKeySequence("Ctrl+1"))

    favourites = manager.favourites
    if is_favourite:
        action.triggered.connect(lambda: perform(instrument, InstrumentAction.REMOVE_FROM, favourites))
    else:
        action.triggered.connect(lambda: perform(instrument, InstrumentAction.ADD_TO, favourites))
    return action


def add_user_collection_menu(menu: QMenu, manager: LibraryManager, instrument: Optional[Instrument],
                             perform: PerformCallback, shortcuts: bool = False) -> QMenu:
    """Add the "Add to Collection" submenu with one checkable entry per user collection"""
    submenu = menu.addMenu("Add to Collection")
    submenu.setEnabled(instrument is not None)

    new_action = submenu.addAction("New Collection")
    if shortcuts:
        new_action.setShortcut(QKeySequence("Shift+Ctrl+N"))
    new_action.triggered.connect(lambda: perform(instrument, InstrumentAction.ADD_TO_NEW_COLLECTION, None))

    if manager.user_collections:
        submenu.addSeparator()

    for collection in manager.user_collections:
        action = submenu.addAction(collection.name)
        action.setCheckable(True)
        action.setChecked(instrument is not None and collection.contains(instrument))
        action.toggled.connect(
            lambda checked, c=collection: perform(
                instrument, InstrumentAction.ADD_TO if checked else InstrumentAction.REMOVE_FROM, c))

    return submenu


def populate_instrument_menu(menu: QMenu, manager: LibraryManager, instrument: Optional[Instrument],
                             collection: Optional[Collection], perform: PerformCallback,
                             shortcuts: bool = False):
    """Fill a menu with every action available for an instrument"""
    show_action = menu.addAction("Show in File Browser")
    show_action.setEnabled(instrument is not None)
    show_action.triggered.connect(lambda: perform(instrument, InstrumentAction.SHOW_IN_FILE_BROWSER, None))

    menu.addSeparator()

    add_favourite_action(menu, manager, instrument, perform, shortcuts)
    add_user_collection_menu(menu, manager, instrument, perform, shortcuts)

    if collection is not None and manager.library.is_editable(collection):
        menu.addSeparator()
        remove_action = menu.addAction(f"Remove from {collection.name}")
        remove_action.setEnabled(instrument is not None)
        remove_action.triggered.connect(lambda: perform(instrument, InstrumentAction.REMOVE_FROM, collection))
