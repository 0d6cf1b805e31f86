"""
Configuration file loading utilities.

This module handles the low-level loading and parsing of TOML configuration
files, and writing a starter file for new projects.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict

import toml

from ..matching.patterns import normalize_patterns
from ..models.config import CheckerConfig
from ..validation import handle_config_error, ErrorSeverity
from .validators import (
    DEFAULT_EXCLUDE,
    DEFAULT_INCLUDE,
    DEFAULT_MAX_DISTANCE,
    DEFAULT_WARN_UNDECLARED,
    validate_checker_config,
)

logger = logging.getLogger(__name__)


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Load and parse a TOML file with error handling.

    Args:
        file_path: Path to the TOML file to load
        description: Human-readable description for error messages

    Returns:
        Parsed TOML data as a dictionary

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the file is malformed
    """
    logger.info(f"Loading {description} from: {file_path}")

    if not file_path.exists():
        logger.error(f"{description} not found: {file_path}")
        raise FileNotFoundError(f"{description} not found: {file_path}")

    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        handle_config_error(
            error=e,
            context=f"parsing {description}",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise


def load_checker_config(config_path: Path) -> CheckerConfig:
    """
    Load and validate a checker configuration file.

    Args:
        config_path: Path to a TOML file with a ``[checker]`` table

    Returns:
        Validated CheckerConfig
    """
    return validate_checker_config(load_toml_file(Path(config_path), "checker configuration file"))


def starter_config_data() -> Dict[str, Any]:
    """Default options in their TOML form."""
    return {
        "checker": {
            "include": [p.to_spec() for p in normalize_patterns(DEFAULT_INCLUDE)],
            "exclude": [p.to_spec() for p in normalize_patterns(DEFAULT_EXCLUDE)],
            "max_distance": DEFAULT_MAX_DISTANCE,
            "warn_undeclared": DEFAULT_WARN_UNDECLARED,
            "whitelist": {"categories": ["all"], "extra": []},
        }
    }


def write_starter_config(config_path: Path, overwrite: bool = False) -> Path:
    """
    Write a starter configuration file holding the defaults.

    Raises:
        FileExistsError: If the file exists and ``overwrite`` is False
    """
    config_path = Path(config_path)
    if config_path.exists() and not overwrite:
        raise FileExistsError(f"Configuration file already exists: {config_path}")

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        toml.dump(starter_config_data(), f)
    logger.info(f"Wrote starter configuration to: {config_path}")
    return config_path
