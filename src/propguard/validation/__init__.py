"""
Validation and error handling for the propguard package.

This module provides input validation and error handling with consistent
error reporting across the package.
"""

from .exceptions import (
    ErrorSeverity,
    ValidationError,
    handle_error,
    handle_check_error,
    handle_cli_error,
    handle_config_error,
)

from .validators import (
    validate_boolean,
    validate_enum_choice,
    validate_positive_integer,
    validate_regex_pattern,
)

__all__ = [
    # Core functionality
    "ErrorSeverity",
    "ValidationError",
    "handle_error",
    "handle_check_error",
    "handle_cli_error",
    "handle_config_error",
    # Validators
    "validate_boolean",
    "validate_enum_choice",
    "validate_positive_integer",
    "validate_regex_pattern",
]
