"""
Configuration management for the gmapsgeo geocoding client.

Loads environment variables from a .env file, reads individual settings
and validates that the keys an authentication scheme needs are present.
"""

import os
import logging
from typing import Any, Dict, List
from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when required environment configuration is missing or empty."""
    pass


def load_config(env_path: str = ".env") -> bool:
    """
    Load environment variables from a .env file.

    Values in the file override variables already present in the environment.

    Args:
        env_path: Path to the .env file (default: ".env")

    Returns:
        True if the file was found and loaded
    """
    logger = logging.getLogger(__name__)

    if os.path.exists(env_path):
        load_dotenv(env_path, override=True)
        logger.info(f"Loaded configuration from {env_path}")
        return True

    logger.warning(f"Configuration file {env_path} not found, using system environment variables only")
    return False


def get_config(key: str, default: Any = None) -> Any:
    """
    Get a configuration value from environment variables.

    Args:
        key: Environment variable key
        default: Default value if key not found

    Returns:
        Configuration value or default
    """
    value = os.getenv(key)
    if value is None:
        logging.getLogger(__name__).debug(
            f"Configuration key '{key}' not set, using default"
        )
        return default
    return value


def validate_config(required_keys: List[str]) -> Dict[str, str]:
    """
    Check that credential keys are set and return their values.

    Whitespace-only values count as empty.

    Args:
        required_keys: Environment variable keys a scheme needs

    Returns:
        Mapping of each key to its value

    Raises:
        ConfigError: Listing every missing and empty key
    """
    logger = logging.getLogger(__name__)
    values = {key: os.getenv(key) for key in required_keys}

    missing_keys = [key for key, value in values.items() if value is None]
    empty_keys = [key for key, value in values.items() if value is not None and not value.strip()]

    problems = []
    if missing_keys:
        problems.append(f"Missing keys: {', '.join(missing_keys)}.")
    if empty_keys:
        problems.append(f"Empty keys: {', '.join(empty_keys)}.")

    if problems:
        error_msg = f"Configuration validation failed: {' '.join(problems)}"
        logger.error(error_msg)
        raise ConfigError(error_msg)

    logger.info(f"Configuration validation passed for keys: {', '.join(required_keys)}")
    return values
