"""Tests for logger configuration."""

from __future__ import annotations

import logging
import logging.handlers

import pytest

from event_emitter.lib.logger import configure_logger


@pytest.fixture
def restore_root_logger():
    """Remove the handlers configure_logger installs and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler or isinstance(
            handler, logging.handlers.RotatingFileHandler
        ):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_configure_logger_console_only(restore_root_logger):
    """Test that without a log directory only a console handler is installed."""
    handlers = configure_logger(log_level=logging.INFO)

    root = logging.getLogger()
    assert root.level == logging.INFO
    assert root.handlers == handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)


def test_configure_logger_writes_log_file(tmp_path, restore_root_logger):
    """Test that a dated log file is created and receives records."""
    log_dir = tmp_path / "logs"

    handlers = configure_logger(log_level=logging.DEBUG, log_dir=log_dir)
    logging.debug("hello from the emitter")
    for handler in handlers:
        handler.flush()

    log_files = list(log_dir.glob("*.log"))
    assert len(log_files) == 1
    assert "] DEBUG hello from the emitter" in log_files[0].read_text()
