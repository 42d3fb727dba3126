"""
Tests for the instrument drag and drop payload
"""
from PySide6.QtCore import QMimeData, QUrl

from soundfonter.instrument_mime import has_instruments, instruments_from_mime, instruments_to_mime


def test_payload_carries_file_urls(instruments):
    mime_data = instruments_to_mime(instruments[:2])
    assert mime_data.hasUrls()
    assert [url.toLocalFile() for url in mime_data.urls()] == [i.path for i in instruments[:2]]
    assert mime_data.text().splitlines() == [i.path for i in instruments[:2]]
    assert instruments_from_mime(mime_data) == instruments[:2]


def test_non_local_urls_are_ignored(instruments):
    mime_data = QMimeData()
    mime_data.setUrls([QUrl("https://example.com/piano.sfz"), QUrl.fromLocalFile(instruments[0].path)])
    assert instruments_from_mime(mime_data) == [instruments[0]]


def test_plain_text_paths(instruments):
    mime_data = QMimeData()
    mime_data.setText(f"{instruments[0].path}\n\nrelative/path.sfz\n{instruments[0].path}\n")
    assert instruments_from_mime(mime_data) == [instruments[0]]


def test_empty_payload():
    mime_data = QMimeData()
    assert instruments_from_mime(mime_data) == []
    assert not has_instruments(mime_data)
