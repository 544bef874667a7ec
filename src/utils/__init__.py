"""Configuration and logging helpers."""

from .config_loader import ConfigLoader, load_config, resolve_allowed_tags
from .logger import setup_logger, get_logger

__all__ = [
    'ConfigLoader',
    'load_config',
    'resolve_allowed_tags',
    'setup_logger',
    'get_logger'
]
