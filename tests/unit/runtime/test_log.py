"""Logging setup tests: file-only output and level normalization."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from lazyjj.runtime.log import APP_NAME, configure_logging, get_logger


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.package_logger = logging.getLogger(APP_NAME)
        self.saved_handlers = list(self.package_logger.handlers)
        self.saved_level = self.package_logger.level

    def tearDown(self) -> None:
        for handler in self.package_logger.handlers:
            if handler not in self.saved_handlers:
                handler.close()
        self.package_logger.handlers = self.saved_handlers
        self.package_logger.setLevel(self.saved_level)

    def test_records_go_to_requested_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "logs" / "lazyjj.log"

            returned = configure_logging("debug", target)
            get_logger("lazyjj.jj.runner").debug("running %s", "jj debug snapshot")
            for handler in self.package_logger.handlers:
                handler.flush()

            self.assertEqual(returned, target)
            self.assertIn("running jj debug snapshot", target.read_text(encoding="utf-8"))

    def test_unknown_level_falls_back_to_info(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging("chatty", Path(tmp) / "x.log")

            self.assertEqual(self.package_logger.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
