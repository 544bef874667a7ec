"""Unit tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

from src.utils.logger import get_logger, setup_logger


class TestSetupLogger:
    """Test cases for setup_logger."""

    def teardown_method(self):
        root = logging.getLogger()
        for handler in root.handlers:
            handler.close()
        root.handlers.clear()

    def test_file_and_console(self, tmp_path):
        """Test both handlers are installed when configured."""
        log_file = tmp_path / 'logs' / 'test.log'
        logger = setup_logger({'logging': {'level': 'WARNING', 'file': str(log_file)}})

        assert logger.level == logging.WARNING
        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        assert len(logger.handlers) == 2
        assert log_file.parent.exists()

    def test_file_disabled(self):
        """Test an empty file setting disables the file handler."""
        logger = setup_logger({'logging': {'file': '', 'console_output': False}})

        assert logger.handlers == []

    def test_level_override(self):
        """Test the override replaces the configured level."""
        logger = setup_logger({'logging': {'level': 'ERROR', 'file': ''}}, 'DEBUG')

        assert logger.level == logging.DEBUG
        assert logging.getLogger('PIL').level == logging.INFO


class TestGetLogger:
    """Test cases for get_logger."""

    def test_module_logger_reaches_root_handlers(self):
        """Test module loggers propagate to the configured root logger."""
        root = setup_logger({'logging': {'level': 'WARNING', 'file': '', 'console_output': False}})
        log = get_logger('src.main')

        assert log.name == 'src.main'
        assert log.propagate
        assert log.getEffectiveLevel() == root.level == logging.WARNING
