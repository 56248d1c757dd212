"""Logging utilities for assetaudit commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "assetaudit"
_CONSOLE_FORMAT = "[assetaudit] %(levelname)s %(message)s"

SUMMARY = {"summary": True}


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the assetaudit hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


class SummaryFormatter(logging.Formatter):
    """Prints report summary lines verbatim; other records get the console prefix.

    Summary records are logged with ``extra=SUMMARY``.
    """

    def __init__(self) -> None:
        super().__init__(_CONSOLE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "summary", False):
            return record.getMessage()
        return super().format(record)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the assetaudit logger with console output and optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(SummaryFormatter())
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["SUMMARY", "SummaryFormatter", "configure_logging", "get_logger"]
