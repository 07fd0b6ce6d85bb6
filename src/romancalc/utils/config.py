"""Configuration management utilities."""

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .constants import DEFAULT_CONFIG, LOG_LEVELS
from .exceptions import ConfigurationError

CONFIG_ENV_VAR = "ROMANCALC_CONFIG"

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """
    Validated configuration schema for romancalc.

    All configuration values are validated upon instantiation to ensure
    required fields exist and have appropriate types.
    """

    log_level: str
    max_workers: int
    case_insensitive: bool

    def __post_init__(self):
        """Validates configuration values after initialization."""
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )
        self.log_level = self.log_level.upper()

        if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int):
            raise ConfigurationError("max_workers must be an integer")

        if self.max_workers <= 0:
            raise ConfigurationError("max_workers must be positive")

        if not isinstance(self.case_insensitive, bool):
            raise ConfigurationError("case_insensitive must be true or false")

    def to_dict(self) -> Dict[str, Any]:
        """Converts the config back to a dictionary."""
        return asdict(self)


def default_config_path() -> Path:
    """Returns the config.json at the project root."""
    return Path(__file__).parent.parent.parent.parent / "config.json"


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Loads and validates settings from a JSON configuration file.

    The file is looked up in this order: the ``path`` argument, the
    ``ROMANCALC_CONFIG`` environment variable, the project root config.json.
    When none of these is given and the project root file is absent (as in a
    regular install), the built-in defaults are used.

    Args:
        path: Optional explicit path to the configuration file

    Returns:
        A dictionary containing validated configuration settings

    Raises:
        ConfigurationError: If the config file cannot be found, parsed, or validated
    """
    try:
        if path is not None:
            config_path = Path(path)
        elif os.environ.get(CONFIG_ENV_VAR):
            config_path = Path(os.environ[CONFIG_ENV_VAR])
        else:
            config_path = default_config_path()
            if not config_path.exists():
                logger.debug(f"No config file at {config_path}, using defaults")
                return Config(**DEFAULT_CONFIG).to_dict()

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found at {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            raw_config = json.load(f)

        if not isinstance(raw_config, dict):
            raise ConfigurationError("Configuration must be a JSON object")

        try:
            validated_config = Config(**raw_config)
            return validated_config.to_dict()
        except TypeError as e:
            # Missing or extra fields
            raise ConfigurationError(f"Invalid configuration schema: {e}")

    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in configuration file: {e}")
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e}")
