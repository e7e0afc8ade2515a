"""
Logging utilities for the gmapsgeo geocoding client.

Provides a single place to configure the package logger and thin
convenience helpers so every module logs through the same channel.
"""

import logging
from pathlib import Path
from typing import Optional


# Name of the logger every gmapsgeo module writes to
LOGGER_NAME = "gmapsgeo"

# Flag to track if logger has been initialized to ensure idempotency
_logger_initialized = False


def get_logger() -> logging.Logger:
    """Return the package logger."""
    return logging.getLogger(LOGGER_NAME)


def initialize_logger(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Initialize the package logger with a console handler and an optional file handler.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file; console only when None
    """
    global _logger_initialized

    if _logger_initialized:
        return

    logger = get_logger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Clear any existing handlers to prevent duplicates
    logger.handlers.clear()

    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    _logger_initialized = True

    logger.info(f"Logger initialized with level {log_level}, file: {log_file or 'none'}")


def log_info(message: str) -> None:
    """
    Log an info message.

    Args:
        message: Message to log
    """
    get_logger().info(message)


def log_warning(message: str) -> None:
    """
    Log a warning message.

    Args:
        message: Message to log
    """
    get_logger().warning(message)


def log_error(message: str) -> None:
    """
    Log an error message.

    Args:
        message: Message to log
    """
    get_logger().error(message)
