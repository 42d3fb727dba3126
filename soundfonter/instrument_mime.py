"""
Drag and drop payload for instruments
Instruments travel as file URLs so other applications can accept them too
"""
import os
from typing import Iterable, List

from PySide6.QtCore import QMimeData, QUrl

from soundfonter.library_model import Instrument


def instruments_to_mime(instruments: Iterable[Instrument]) -> QMimeData:
    """Build mime data holding the file URLs of the given instruments"""
    paths = [instrument.path for instrument in instruments]

    mime_data = QMimeData()
    mime_data.setUrls([QUrl.fromLocalFile(path) for path in paths])
    mime_data.setText("\n".join(paths))
    return mime_data


def instruments_from_mime(mime_data: QMimeData) -> List[Instrument]:
    """Read instruments back from dropped mime data, ignoring non-local URLs"""
    if mime_data.hasUrls():
        paths = [url.toLocalFile() for url in mime_data.urls() if url.isLocalFile()]
    elif mime_data.hasText():
        paths = [line.strip() for line in mime_data.text().splitlines()]
    else:
        paths = []

    return [Instrument(path) for path in dict.fromkeys(paths) if path and os.path.isabs(path)]


def has_instruments(mime_data: QMimeData) -> bool:
    return bool(instruments_from_mime(mime_data))
