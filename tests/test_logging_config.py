"""Unit tests for logging configuration."""

import unittest
import logging
import shutil
import tempfile
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security import logging_config
from catpoint_security.logging_config import StructuredFormatter, get_logger, setup_logging


class TestLoggingConfig(unittest.TestCase):
    """Test cases for logging configuration."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.root_logger = logging.getLogger()
        self.saved_handlers = list(self.root_logger.handlers)
        self.saved_level = self.root_logger.level
        self.saved_manager = logging_config.logging_manager

    def tearDown(self):
        """Restore the root logger."""
        for handler in self.root_logger.handlers:
            handler.close()
        self.root_logger.handlers[:] = self.saved_handlers
        self.root_logger.setLevel(self.saved_level)
        logging_config.logging_manager = self.saved_manager
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_component_logger_name(self):
        logger = get_logger("security_service")
        self.assertEqual(logger.name, "catpoint_security.security_service")
        self.assertIs(get_logger("security_service"), logger)

    def test_setup_logging_writes_files(self):
        manager = setup_logging("DEBUG", self.test_dir)
        get_logger("test_component").error("sensor feed lost")

        for handler in self.root_logger.handlers:
            handler.flush()

        self.assertTrue(manager.configured)
        self.assertEqual(manager.log_level, logging.DEBUG)
        with open(os.path.join(self.test_dir, "errors.log")) as f:
            self.assertIn("sensor feed lost", f.read())
        self.assertIn("security.log", manager.get_log_stats()["log_files"])

    def test_structured_formatter_context(self):
        record = logging.LogRecord("catpoint_security.x", logging.INFO, __file__, 1,
                                   "Alarm status changed", (), None)
        record.context = {"rule": "sensor_triggered"}

        output = StructuredFormatter(include_context=True).format(record)
        self.assertIn("Alarm status changed", output)
        self.assertIn("rule=sensor_triggered", output)


if __name__ == '__main__':
    unittest.main()
