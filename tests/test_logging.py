"""Tests for assetaudit.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from assetaudit.logging import SUMMARY, SummaryFormatter, configure_logging, get_logger


def _record(message: str, **extra: object) -> logging.LogRecord:
    return get_logger("test").makeRecord(
        "assetaudit.test", logging.INFO, __file__, 1, message, (), None, extra=extra or None
    )


def test_summary_record_is_printed_verbatim() -> None:
    formatter = SummaryFormatter()

    assert formatter.format(_record("Unused assets: 2", **SUMMARY)) == "Unused assets: 2"


def test_regular_record_keeps_console_prefix() -> None:
    formatter = SummaryFormatter()

    assert formatter.format(_record("Scanning lib")) == "[assetaudit] INFO Scanning lib"


def test_configure_logging_installs_summary_formatter(tmp_path: Path) -> None:
    logger = configure_logging(verbose=True, log_file=tmp_path / "audit.log")
    try:
        assert logger.level == logging.DEBUG
        stream_handlers = [
            handler for handler in logger.handlers if not isinstance(handler, logging.FileHandler)
        ]
        assert len(stream_handlers) == 1
        assert isinstance(stream_handlers[0].formatter, SummaryFormatter)
        assert any(isinstance(handler, logging.FileHandler) for handler in logger.handlers)
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_configure_logging_does_not_duplicate_handlers() -> None:
    configure_logging()
    logger = configure_logging()

    assert len(logger.handlers) == 1
