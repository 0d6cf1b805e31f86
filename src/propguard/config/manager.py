"""
Configuration management and singleton pattern.

This module provides the process-wide configuration used when an
installation is made without explicit options. The configuration is loaded
at most once; without a configuration file the defaults are used.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from ..models.config import CheckerConfig
from ..validation import handle_config_error, ErrorSeverity
from .loader import load_checker_config
from .validators import default_config

logger = logging.getLogger(__name__)

# --- Global Singleton for Configuration ---

# This global variable will hold the single instance of the loaded CheckerConfig.
_CONFIG: Optional[CheckerConfig] = None

# Environment variable naming a configuration file, read when no path is set.
CONFIG_ENV_VAR = "PROPGUARD_CONFIG"

# Explicitly configured path; overrides the environment variable.
_CONFIG_FILE_PATH: Optional[Path] = None


def set_config_path(config_path: Optional[Path]) -> None:
    """
    Set a custom configuration file path.

    Passing None goes back to the environment variable, then the defaults.
    Clears the cached configuration so the next get_config() reloads.
    """
    global _CONFIG_FILE_PATH, _CONFIG
    _CONFIG_FILE_PATH = Path(config_path) if config_path is not None else None
    _CONFIG = None
    logger.info(f"Configuration path set to: {config_path}")


def clear_config_cache() -> None:
    """
    Clear the cached configuration, forcing a reload on next access.
    """
    global _CONFIG
    _CONFIG = None
    logger.debug("Configuration cache cleared")


def get_config_path() -> Optional[Path]:
    """Return the configuration file in effect, or None for defaults."""
    if _CONFIG_FILE_PATH is not None:
        return _CONFIG_FILE_PATH
    env_path = os.environ.get(CONFIG_ENV_VAR)
    return Path(env_path) if env_path else None


def _load_config(config_path: Optional[Path]) -> CheckerConfig:
    """
    Load the configuration from ``config_path``, or build the defaults.

    Raises:
        FileNotFoundError: If the configuration file is missing
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    if config_path is None:
        logger.debug("No configuration file set, using defaults")
        return default_config()

    try:
        config = load_checker_config(config_path)
    except Exception as e:
        handle_config_error(
            error=e,
            context="loading checker configuration",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise

    logger.info(
        f"Successfully loaded configuration with {len(config.include)} include, "
        f"{len(config.exclude)} exclude and {len(config.whitelist)} whitelist patterns"
    )
    return config


def get_config() -> CheckerConfig:
    """
    Get the process-wide checker configuration, loading it if necessary.

    Returns:
        The singleton CheckerConfig instance
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _load_config(get_config_path())
    return _CONFIG


def is_config_loaded() -> bool:
    """
    Check if configuration has been loaded and cached.
    """
    return _CONFIG is not None


def get_config_info() -> dict:
    """
    Get information about the current configuration state.
    """
    config_path = get_config_path()
    return {
        "config_loaded": is_config_loaded(),
        "config_path": str(config_path) if config_path else None,
        "max_distance": _CONFIG.max_distance if _CONFIG else None,
        "warn_undeclared": _CONFIG.warn_undeclared if _CONFIG else None,
        "whitelist_count": len(_CONFIG.whitelist) if _CONFIG else 0,
    }
