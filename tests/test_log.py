"""Tests for file-only logging setup."""

from __future__ import annotations

import logging
import logging.handlers
import tempfile
import unittest
from pathlib import Path

from lazystatus.log import PACKAGE_LOGGER, setup_logging


class SetupLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        setup_logging(None)

    def test_without_log_file_only_null_handler_is_installed(self) -> None:
        logger = setup_logging(None)

        self.assertEqual(logger.name, PACKAGE_LOGGER)
        self.assertEqual([type(h) for h in logger.handlers], [logging.NullHandler])
        self.assertFalse(logger.propagate)

    def test_log_file_receives_records_from_child_loggers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "nested" / "lazystatus.log"
            setup_logging(log_file, debug=True)

            logging.getLogger("lazystatus.gateway").debug("running git status")
            for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
                handler.flush()
            content = log_file.read_text(encoding="utf-8")
            setup_logging(None)

        self.assertIn("DEBUG lazystatus.gateway: running git status", content)

    def test_repeated_setup_does_not_stack_handlers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "lazystatus.log"
            setup_logging(log_file)
            logger = setup_logging(log_file)
            handlers = list(logger.handlers)
            setup_logging(None)

        self.assertEqual(len(handlers), 1)
        self.assertIsInstance(handlers[0], logging.handlers.RotatingFileHandler)
        self.assertEqual(logger.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
