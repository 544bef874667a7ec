"""Logging configuration and setup."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Third-party loggers that are chatty at DEBUG
QUIET_LOGGERS = ('PIL', 'exiftool')


def setup_logger(config: Dict, level_override: Optional[str] = None) -> logging.Logger:
    """Initialize logging with file and console handlers.

    Args:
        config: Configuration dictionary with 'logging' section
        level_override: Level name that replaces the configured one (e.g. from --verbose)

    Returns:
        Configured root logger
    """
    log_config = config.get('logging') or {}
    level_name = (level_override or log_config.get('level', 'INFO')).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger()
    logger.setLevel(log_level)
    logger.handlers.clear()

    # File logging is optional; an empty 'file' disables it
    log_file = log_config.get('file', 'logs/exif_tool.log')
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=log_config.get('max_bytes', 10485760),  # 10MB
            backupCount=log_config.get('backup_count', 5),
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if log_config.get('console_output', True):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.INFO))

    logger.debug(f"Logging initialized at {level_name} (file: {log_file or 'disabled'})")

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger for specific module."""
    return logging.getLogger(name)
