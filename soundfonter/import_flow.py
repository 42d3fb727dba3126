"""
Library import flow
Tracks the stages of choosing a library directory
"""
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal


class ImportStatus(Enum):
    """Stages of the library import flow"""
    IDLE = "idle"
    INFO = "info"            # explaining which directory to choose
    IMPORTING = "importing"  # directory chooser open
    FAILURE = "failure"
    SUCCESS = "success"


class ImportFlow(QObject):
    """State machine behind the library selection dialogs"""

    status_changed = Signal(ImportStatus)

    def __init__(self):
        super().__init__()
        self._status = ImportStatus.IDLE

    @property
    def status(self) -> ImportStatus:
        return self._status

    @status.setter
    def status(self, status: ImportStatus):
        if self._status != status:
            self._status = status
            self.status_changed.emit(status)

    @property
    def is_showing_info(self) -> bool:
        return self._status == ImportStatus.INFO

    @property
    def is_showing_dialogue(self) -> bool:
        return self._status == ImportStatus.IMPORTING

    @property
    def is_showing_failure(self) -> bool:
        return self._status == ImportStatus.FAILURE

    def advance(self, result: Optional[ImportStatus] = None) -> ImportStatus:
        """Advance the flow to its next stage.

        While importing, ``result`` is the outcome of the directory chooser;
        no result means the chooser was cancelled and the flow returns to
        the information stage.
        """
        if self._status == ImportStatus.IDLE:
            self.status = ImportStatus.INFO
        elif self._status == ImportStatus.INFO:
            self.status = ImportStatus.IMPORTING
        elif self._status == ImportStatus.IMPORTING:
            self.status = result if result is not None else ImportStatus.INFO
        elif self._status == ImportStatus.FAILURE:
            self.status = ImportStatus.IMPORTING
        return self._status

    def start_import(self):
        """Jump straight to the directory chooser"""
        self.status = ImportStatus.IMPORTING

    def reset(self):
        self.status = ImportStatus.IDLE
