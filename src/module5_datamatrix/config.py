# file: src/module5_datamatrix/config.py

"""
Configuration loading and logging setup.
"""

import logging
import os
from typing import Optional

import yaml

from module1_compaction.exceptions import InvalidOptionError

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


def get_default_config() -> dict:
    """
    Get hardcoded default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "encoding": {
            "scheme": None,
            "rectangular": False,
        },
        "system": {
            "verbose": False,
        },
    }


def load_config(config_path: Optional[str] = None) -> dict:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file, or None for default_config.yaml

    Returns:
        Configuration dictionary; sections missing from the file are
        filled from the hardcoded defaults

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        InvalidOptionError: If the file does not hold a mapping
    """
    defaults = get_default_config()

    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return defaults
        config_path = DEFAULT_CONFIG_PATH

    with open(config_path, 'r') as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise InvalidOptionError(
            f"Configuration {config_path} must be a mapping, got {type(loaded).__name__}",
            option="config",
            value=loaded,
        )

    for section, values in defaults.items():
        section_values = loaded.get(section) or {}
        if not isinstance(section_values, dict):
            raise InvalidOptionError(
                f"Configuration section '{section}' must be a mapping",
                option=section,
                value=section_values,
            )
        merged = dict(values)
        merged.update(section_values)
        loaded[section] = merged

    return loaded


def setup_logging(verbose: bool = True):
    """Configure logging for the encoder."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
