"""
Tests for the library import flow
"""
from soundfonter.import_flow import ImportFlow, ImportStatus


def test_starts_idle():
    assert ImportFlow().status == ImportStatus.IDLE


def test_successful_import():
    flow = ImportFlow()
    assert flow.advance() == ImportStatus.INFO
    assert flow.is_showing_info
    assert flow.advance() == ImportStatus.IMPORTING
    assert flow.is_showing_dialogue
    assert flow.advance(ImportStatus.SUCCESS) == ImportStatus.SUCCESS
    assert flow.advance() == ImportStatus.SUCCESS


def test_cancelled_chooser_returns_to_info():
    flow = ImportFlow()
    flow.advance()
    flow.advance()
    assert flow.advance() == ImportStatus.INFO


def test_failure_retries_import():
    flow = ImportFlow()
    flow.start_import()
    assert flow.advance(ImportStatus.FAILURE) == ImportStatus.FAILURE
    assert flow.is_showing_failure
    assert flow.advance() == ImportStatus.IMPORTING


def test_status_changes_are_signalled():
    flow = ImportFlow()
    statuses = []
    flow.status_changed.connect(lambda status: statuses.append(status))

    flow.advance()
    flow.advance()
    flow.advance(ImportStatus.FAILURE)
    flow.status = ImportStatus.FAILURE
    flow.reset()

    assert statuses == [ImportStatus.INFO, ImportStatus.IMPORTING, ImportStatus.FAILURE, ImportStatus.IDLE]
