"""Configuration loader with environment variable substitution."""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Set
import logging
import re

from src.exif.exceptions import UnknownTagError
from src.exif.tags import parse_tag

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load and validate configuration from YAML file."""

    # ${VAR_NAME} or ${VAR_NAME:default}; an empty default is allowed
    ENV_PATTERN = re.compile(r'\$\{([A-Z_][A-Z0-9_]*)(:[^}]*)?\}')

    def __init__(self, config_path: str = "config/config.yaml"):
        """Initialize configuration loader.

        Args:
            config_path: Path to configuration YAML file
        """
        self.config_path = Path(config_path)

    def load(self) -> Dict[str, Any]:
        """Load configuration with environment variable substitution.

        Falls back to "<config_path>.example" when the file is missing.

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If neither the config nor its example exists
            yaml.YAMLError: If config file is invalid YAML
            ValueError: If the configuration is incomplete
        """
        path = self._resolve_path()

        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}

        config = self._substitute_env_vars(config)
        self._validate(config)

        logger.info(f"Configuration loaded from: {path}")
        return config

    def _resolve_path(self) -> Path:
        if self.config_path.exists():
            return self.config_path

        example_path = self.config_path.with_name(self.config_path.name + ".example")
        if not example_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        logger.warning(f"Config file not found: {self.config_path}. Using example: {example_path}")
        return example_path

    def _substitute_env_vars(self, config: Any) -> Any:
        """Recursively substitute environment variables in strings."""
        if isinstance(config, dict):
            return {k: self._substitute_env_vars(v) for k, v in config.items()}
        if isinstance(config, list):
            return [self._substitute_env_vars(item) for item in config]
        if isinstance(config, str):
            return self.ENV_PATTERN.sub(self._replace_env_var, config)
        return config

    @staticmethod
    def _replace_env_var(match) -> str:
        var_name, default = match.group(1), match.group(2)

        env_value = os.getenv(var_name)
        if env_value is not None:
            return env_value

        if default is not None:
            return default[1:]

        logger.warning(f"Environment variable {var_name} not set and no default provided")
        return match.group(0)

    def _validate(self, config: Dict) -> None:
        """Validate configuration has required fields.

        Args:
            config: Configuration dictionary

        Raises:
            ValueError: If required fields are missing or invalid
        """
        required_sections = ['exif', 'logging']

        for section in required_sections:
            if section not in config:
                raise ValueError(f"Missing required config section: {section}")

        allowed = (config['exif'] or {}).get('allowed_tags')
        if allowed is not None and not isinstance(allowed, list):
            raise ValueError(
                f"exif.allowed_tags must be a list, got {type(allowed).__name__}"
            )

        # Resolves names early so typos fail at load time
        resolve_allowed_tags(config)

        exiftool_path = (config.get('exiftool') or {}).get('path') or ''
        if exiftool_path and '${' not in exiftool_path and not Path(exiftool_path).exists():
            logger.warning(
                f"ExifTool not found at {exiftool_path}. "
                "Writing EXIF back to images will be unavailable."
            )

        logger.debug("Configuration validation passed")


def resolve_allowed_tags(config: Dict[str, Any]) -> Optional[Set[int]]:
    """Resolve the configured EXIF allow-list to tag identifiers.

    Entries may be tag names ("Orientation"), decimal or hex strings, or ints.

    Args:
        config: Configuration dictionary

    Returns:
        Set of tag identifiers, or None when no allow-list is configured

    Raises:
        ValueError: If an entry does not name a known tag
    """
    allowed = (config.get('exif') or {}).get('allowed_tags')
    if allowed is None:
        return None

    tags = set()
    for entry in allowed:
        try:
            tags.add(parse_tag(entry))
        except UnknownTagError:
            raise ValueError(f"Unknown tag in exif.allowed_tags: {entry}")
    return tags


def load_config(config_path: str = "config/config.yaml") -> Dict[str, Any]:
    """Convenience function to load configuration.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary
    """
    loader = ConfigLoader(config_path)
    return loader.load()
