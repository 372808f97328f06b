"""Tests for console log formatting."""

import logging
import sys
from collections.abc import Generator

import pytest

from gsend.utils.console import ColorfulFormatter, configure_logging


def make_record(name: str, level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


@pytest.fixture
def restore_gsend_logger() -> Generator[None, None, None]:
    """Undo configure_logging side effects."""
    gsend_logger = logging.getLogger("gsend")
    handlers = list(gsend_logger.handlers)
    level = gsend_logger.level
    propagate = gsend_logger.propagate
    yield
    gsend_logger.handlers = handlers
    gsend_logger.setLevel(level)
    gsend_logger.propagate = propagate


def test_plain_format_without_colors() -> None:
    """Without colors the line has no escape codes."""
    formatter = ColorfulFormatter(use_colors=False)
    line = formatter.format(
        make_record("gsend.services.transfer", logging.INFO, "Wrote 5 bytes")
    )

    assert "\033[" not in line
    assert "INFO" in line
    assert "services.transfer" in line
    assert "gsend.services" not in line
    assert line.endswith("Wrote 5 bytes")


def test_colors_highlight_addresses() -> None:
    """Addresses and byte counts are highlighted when colors are on."""
    formatter = ColorfulFormatter(use_colors=True)
    line = formatter.format(
        make_record("gsend.cli", logging.INFO, "Connected to nas.local:2222, 5 bytes")
    )

    assert "\033[95mnas.local:2222\033[0m" in line
    assert "\033[93m5 bytes\033[0m" in line


def test_exception_included() -> None:
    """Tracebacks are appended to the line."""
    formatter = ColorfulFormatter(use_colors=False)
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "gsend.cli", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )

    assert "ValueError: boom" in formatter.format(record)


def test_configure_logging_installs_single_handler(restore_gsend_logger: None) -> None:
    """Repeated configuration does not duplicate handlers."""
    gsend_logger = logging.getLogger("gsend")
    gsend_logger.handlers = []

    configure_logging("DEBUG", use_colors=False)
    configure_logging("DEBUG", use_colors=False)

    assert len(gsend_logger.handlers) == 1
    assert isinstance(gsend_logger.handlers[0].formatter, ColorfulFormatter)
    assert gsend_logger.level == logging.DEBUG
    assert gsend_logger.propagate is False
    assert logging.getLogger("asyncssh").level == logging.WARNING
