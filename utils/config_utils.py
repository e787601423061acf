# File: utils/config_utils.py
# Description: Helpers for loading and validating the YAML settings used by the tree demo.

import logging  # Report fallbacks to default settings
import os  # File existence checks
from typing import Any, Dict, List, Optional

import yaml  # Import PyYAML for reading and parsing YAML files

logger = logging.getLogger(__name__)


class ConfigLoaderError(Exception):
    """
    Custom exception for errors encountered during configuration loading or validation.
    """
    pass


def load_config(config_file_path: str, default_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load the configuration from a YAML file.

    Args:
        config_file_path (str): Path to the YAML configuration file.
        default_config (dict, optional): Default configuration to use if loading fails.

    Returns:
        dict: Parsed configuration dictionary. An empty file yields an empty dictionary.

    Raises:
        ConfigLoaderError: If the configuration file does not exist, fails to parse, or does not
            hold a mapping, and no default is provided.
    """
    # Step 1: Check if the YAML file exists at the specified path
    if not os.path.exists(config_file_path):
        if default_config is not None:
            logger.warning(f"Config file '{config_file_path}' not found. Using default configuration.")
            return dict(default_config)
        raise ConfigLoaderError(f"Config file '{config_file_path}' not found.")

    # Step 2: Attempt to load the YAML file
    try:
        with open(config_file_path, "r") as config_file:
            config = yaml.safe_load(config_file)
    except yaml.YAMLError as e:
        if default_config is not None:
            logger.warning(f"Error parsing YAML file '{config_file_path}': {e}. Using default configuration.")
            return dict(default_config)
        raise ConfigLoaderError(f"Error parsing YAML file '{config_file_path}': {e}") from e

    # Step 3: The settings file must describe a mapping of keys to values
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigLoaderError(
            f"Config file '{config_file_path}' must contain a mapping, got {type(config).__name__}."
        )
    return config


def validate_config(config: Dict[str, Any], required_keys: List[str]) -> None:
    """
    Validate that required keys are present in the configuration dictionary.

    Args:
        config (dict): The configuration dictionary to validate.
        required_keys (list): A list of keys that must be present in the configuration.

    Raises:
        ConfigLoaderError: If any required keys are missing.
    """
    missing_keys = [key for key in required_keys if key not in config]
    if missing_keys:
        raise ConfigLoaderError(f"Missing required keys in configuration: {missing_keys}")
