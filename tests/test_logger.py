"""
Tests for logging configuration
"""
import logging

import pytest

from soundfonter import logger as logger_module
from soundfonter.logger import get_logger, set_debug_mode


@pytest.fixture
def restore_debug_mode():
    original = logger_module.DEBUG_MODE
    yield
    set_debug_mode(original)


def test_set_debug_mode_updates_existing_loggers(restore_debug_mode):
    log = get_logger("soundfonter.debug_check")
    set_debug_mode(True)
    assert log.level == logging.DEBUG
    assert get_logger("soundfonter.debug_check.child").level == logging.DEBUG

    set_debug_mode(False)
    assert log.level == logging.INFO


def test_set_debug_mode_ignores_other_loggers(restore_debug_mode):
    other = logging.getLogger("unrelated.debug_check")
    other.setLevel(logging.WARNING)
    set_debug_mode(True)
    assert other.level == logging.WARNING
