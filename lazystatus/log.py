"""Logging setup for the package logger.

The terminal is owned by the UI, so records only ever go to a file. Without
a log file the package logger gets a ``NullHandler``.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

PACKAGE_LOGGER = "lazystatus"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 2


def setup_logging(log_file: Path | None, debug: bool = False) -> logging.Logger:
    """Configure and return the ``lazystatus`` logger.

    Existing handlers on the package logger are replaced so repeated calls
    (tests, re-entry from ``main``) do not duplicate output.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    logger.info("logging to %s", log_file)
    return logger
