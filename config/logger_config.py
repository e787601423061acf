# File: config/logger_config.py
# Centralized logging setup for the binary search tree engine.
# Every module asks this function for its named logger so handlers and format stay consistent.

import logging  # Provides logging functionality
import os  # For handling file system paths and directories
from logging.handlers import RotatingFileHandler  # For managing rotating log files
from typing import Optional  # For optional type hinting

# Project root, used when no explicit log directory is given
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
VALID_OUTPUTS = {"file", "console", "both"}


def configure_logger(
    name: Optional[str] = None,  # The name of the logger; None defaults to the root logger
    log_dir: Optional[str] = None,  # Directory for log files; None means <project>/logs
    log_file: str = "bst_engine.log",  # Name of the log file
    level: int = logging.INFO,  # Logging level (e.g., DEBUG, INFO, WARNING, ERROR)
    max_bytes: int = 10 * 1024 * 1024,  # Maximum size of a log file before rotation (default: 10 MB)
    backup_count: int = 5,  # Number of backup files to keep during log rotation
    output: str = "console",  # Where to output logs: "file", "console", or "both"
) -> logging.Logger:
    """
    Configures and returns a logger instance.

    Args:
        name (Optional[str]): Name of the logger. If None, the root logger is used.
        log_dir (Optional[str]): Directory to store log files. Defaults to the project's logs directory.
        log_file (str): Name of the log file.
        level (int): Logging level (e.g., logging.INFO, logging.DEBUG).
        max_bytes (int): Maximum size of the log file before rotation.
        backup_count (int): Number of backup files to keep during rotation.
        output (str): Where to send logs: "file", "console", or "both".

    Returns:
        logging.Logger: Configured logger instance.

    Raises:
        ValueError: If output is not one of "file", "console" or "both".
        RuntimeError: If a handler or the log directory cannot be set up.
    """
    if output not in VALID_OUTPUTS:
        raise ValueError(f"Unsupported log output '{output}'. Expected one of {sorted(VALID_OUTPUTS)}.")

    try:
        # Create or retrieve the logger instance with the specified name
        logger = logging.getLogger(name)

        # Set the logging level for the logger
        logger.setLevel(level)

        # Loggers are cached by name, so only the first call attaches handlers
        if logger.handlers:
            return logger

        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        # If output includes file logging, configure a rotating file handler
        if output in {"file", "both"}:
            log_dir = log_dir or os.path.join(PROJECT_ROOT, "logs")
            # Ensure the logs directory exists; create it if it does not
            os.makedirs(log_dir, exist_ok=True)
            try:
                file_handler = RotatingFileHandler(
                    os.path.join(log_dir, log_file), maxBytes=max_bytes, backupCount=backup_count
                )
                file_handler.setLevel(level)
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)
            except Exception as e:  # Catch unexpected errors during file handler setup
                raise RuntimeError(
                    f"Failed to configure file handler for logger: {e}"
                ) from e

        # If output includes console logging, configure a stream handler
        if output in {"console", "both"}:
            try:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(level)
                console_handler.setFormatter(formatter)
                logger.addHandler(console_handler)
            except Exception as e:  # Catch unexpected errors during console handler setup
                raise RuntimeError(
                    f"Failed to configure console handler for logger: {e}"
                ) from e

        return logger

    except OSError as e:  # Handle issues with creating log directories or files
        raise RuntimeError(
            f"Failed to create or access log directory: {e}"
        ) from e
