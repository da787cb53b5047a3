# swms_compliance/config/loader.py
"""
Configuration loading with auto-creation of defaults.

Uses platformdirs for cross-platform config directory management.
"""

import logging
from pathlib import Path

import yaml
from platformdirs import user_config_path
from pydantic import ValidationError

from swms_compliance.errors import ConfigError

from .schema import SwmsComplianceConfig

logger = logging.getLogger(__name__)

APP_NAME = "swms-compliance"


def get_config_dir() -> Path:
    """Get the config directory, creating it if needed."""
    return user_config_path(APP_NAME, ensure_exists=True)


def get_config_path() -> Path:
    """Get path to config file, ensuring config directory exists."""
    return get_config_dir() / "config.yaml"


def load_config(config_path: Path | None = None) -> SwmsComplianceConfig:
    """
    Load configuration from YAML file.

    If config file doesn't exist, creates it with defaults.
    Returns validated Pydantic model.

    Args:
        config_path: Optional explicit path (defaults to the platform config dir)

    Raises:
        ConfigError: If the file exists but does not validate
    """
    config_path = config_path or get_config_path()

    if not config_path.exists():
        default_config = SwmsComplianceConfig()
        config_dict = default_config.model_dump(mode="json")

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with config_path.open("w") as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Created default config at {config_path}")
        return default_config

    with config_path.open("r") as f:
        config_data = yaml.safe_load(f) or {}

    try:
        config = SwmsComplianceConfig(**config_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config at {config_path}: {e}") from e

    logger.info(f"Loaded config from {config_path}")
    return config
