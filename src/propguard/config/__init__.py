"""
Configuration management for the propguard package.

This module provides a clean interface for loading, validating, and
accessing checker configuration from TOML files with singleton pattern
management.
"""

# Main configuration interface
from .manager import (
    CONFIG_ENV_VAR,
    clear_config_cache,
    get_config,
    get_config_info,
    get_config_path,
    is_config_loaded,
    set_config_path,
)

# For advanced usage - direct access to loaders and validators
from .loader import (
    load_checker_config,
    load_toml_file,
    starter_config_data,
    write_starter_config,
)
from .validators import (
    build_checker_config,
    default_config,
    normalize_options,
    validate_checker_config,
)

__all__ = [
    # Main interface
    "CONFIG_ENV_VAR",
    "get_config",
    "get_config_path",
    "set_config_path",
    "clear_config_cache",
    "is_config_loaded",
    "get_config_info",
    # Advanced interface
    "load_toml_file",
    "load_checker_config",
    "starter_config_data",
    "write_starter_config",
    "build_checker_config",
    "default_config",
    "normalize_options",
    "validate_checker_config",
]
