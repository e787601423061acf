# File: config/tree_config.py
# Runtime settings for the binary search tree engine.
# Logging settings come from environment variables (optionally loaded from config/.env);
# demo settings come from config/bst_settings.yaml.

import logging  # Resolve level names and hand out configured loggers
import os  # Import os for accessing environment variables
from pathlib import Path  # Import Path for managing filesystem paths
from typing import Any, Dict, Optional

from dotenv import load_dotenv  # Import load_dotenv to load environment variables from a .env file

from config.logger_config import configure_logger
from utils.config_utils import ConfigLoaderError, load_config, validate_config

CONFIG_DIR = Path(__file__).resolve().parent
ENV_PATH = CONFIG_DIR / ".env"
SETTINGS_PATH = CONFIG_DIR / "bst_settings.yaml"

# Values the demo falls back to when the settings file is missing or unreadable
DEFAULT_DEMO_SETTINGS: Dict[str, Any] = {
    "sample_values": ["M", "A", "Z", "N", "O", "Q", "X", "D"],
    "print_level": 3,
}
REQUIRED_DEMO_KEYS = ["sample_values", "print_level"]

# A missing .env file is not an error; the defaults below apply
load_dotenv(dotenv_path=ENV_PATH)


def get_log_settings() -> Dict[str, Any]:
    """
    Read the logging settings from the environment.

    Returns:
        dict: Keyword arguments accepted by configure_logger (level, output, log_dir, log_file).

    Raises:
        ValueError: If BST_LOG_LEVEL names an unknown logging level.
    """
    level_name = os.getenv("BST_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level in BST_LOG_LEVEL: '{level_name}'")

    return {
        "level": level,
        "output": os.getenv("BST_LOG_OUTPUT", "console").lower(),
        "log_dir": os.getenv("BST_LOG_DIR") or None,
        "log_file": os.getenv("BST_LOG_FILE", "bst_engine.log"),
    }


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger for an engine module, configured from the environment settings.

    Args:
        name (str): Logger name, usually the module's __name__.

    Returns:
        logging.Logger: The configured logger.
    """
    return configure_logger(name=name, **get_log_settings())


def load_demo_settings(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the demo settings (sample values and the level to print).

    Args:
        path (Optional[str]): Settings file to read. Defaults to config/bst_settings.yaml.

    Returns:
        dict: Settings holding at least 'sample_values' (list) and 'print_level' (int).

    Raises:
        ConfigLoaderError: If the file lacks a required key or holds values of the wrong type.
    """
    settings = load_config(str(path or SETTINGS_PATH), default_config=DEFAULT_DEMO_SETTINGS)
    validate_config(settings, REQUIRED_DEMO_KEYS)

    if not isinstance(settings["sample_values"], list):
        raise ConfigLoaderError("'sample_values' must be a list of values.")
    if isinstance(settings["print_level"], bool) or not isinstance(settings["print_level"], int):
        raise ConfigLoaderError("'print_level' must be an integer.")
    return settings
