"""
Configuration validation utilities.

Turns raw option values, from keyword arguments or from a TOML ``[checker]``
table, into a normalized CheckerConfig.
"""

import logging
import re
from typing import Any, Dict, Mapping, Optional

from ..matching.patterns import normalize_patterns
from ..models.config import CheckerConfig
from ..validation import ValidationError, validate_boolean, validate_positive_integer
from ..whitelist import get_whitelist

logger = logging.getLogger(__name__)

DEFAULT_INCLUDE = re.compile(".")
DEFAULT_EXCLUDE = re.compile("[^a-zA-Z0-9]")
DEFAULT_MAX_DISTANCE = 2
DEFAULT_WARN_UNDECLARED = True

OPTION_NAMES = ("include", "exclude", "max_distance", "warn_undeclared", "whitelist")

_UNSET = object()


def build_checker_config(
    include: Any = _UNSET,
    exclude: Any = _UNSET,
    max_distance: Any = DEFAULT_MAX_DISTANCE,
    warn_undeclared: Any = DEFAULT_WARN_UNDECLARED,
    whitelist: Any = _UNSET,
) -> CheckerConfig:
    """
    Validate options and create a CheckerConfig.

    Args:
        include: Pattern spec(s) a display name must match to be instrumented.
        exclude: Pattern spec(s) that veto instrumentation.
        max_distance: Largest edit distance reported as a typo (>= 0).
        warn_undeclared: Report props missing from a non-empty schema.
        whitelist: Pattern spec(s), or a ``{"categories": [...], "extra": [...]}``
            table, of prop names never reported as undeclared.

    Returns:
        Validated CheckerConfig instance

    Raises:
        ValidationError: If max_distance, warn_undeclared or a whitelist
            category is invalid. Malformed patterns do not raise; they
            degrade to patterns that never match.
    """
    config = CheckerConfig(
        include=tuple(normalize_patterns(DEFAULT_INCLUDE if include is _UNSET else include)),
        exclude=tuple(normalize_patterns(DEFAULT_EXCLUDE if exclude is _UNSET else exclude)),
        whitelist=_validate_whitelist(whitelist),
        max_distance=validate_positive_integer(
            max_distance, min_value=0, field_name="checker.max_distance"
        ),
        warn_undeclared=validate_boolean(
            warn_undeclared, field_name="checker.warn_undeclared"
        ),
    )
    logger.debug(
        f"Checker config: {len(config.include)} include, {len(config.exclude)} exclude, "
        f"{len(config.whitelist)} whitelist patterns, max_distance={config.max_distance}, "
        f"warn_undeclared={config.warn_undeclared}"
    )
    return config


def _validate_whitelist(whitelist: Any):
    if whitelist is _UNSET:
        return get_whitelist()
    if isinstance(whitelist, Mapping) and ("categories" in whitelist or "extra" in whitelist):
        unknown = set(whitelist) - {"categories", "extra"}
        if unknown:
            raise ValidationError(
                f"checker.whitelist has unknown keys: {sorted(unknown)}",
                field_name="checker.whitelist",
                value=whitelist,
            )
        categories = whitelist.get("categories", [])
        if isinstance(categories, str):
            categories = [categories]
        if not isinstance(categories, (list, tuple)):
            raise ValidationError(
                "checker.whitelist.categories must be a list of category names",
                field_name="checker.whitelist.categories",
                value=categories,
            )
        if not categories:
            return tuple(normalize_patterns(whitelist.get("extra")))
        return get_whitelist(*categories, extra=whitelist.get("extra"))
    return tuple(normalize_patterns(whitelist))


def normalize_options(options: Optional[Mapping[str, Any]] = None) -> CheckerConfig:
    """
    Create a CheckerConfig from an options mapping.

    Missing keys take their defaults; unknown keys are rejected.

    Raises:
        ValidationError: On unknown keys or invalid values.
    """
    options = dict(options or {})
    unknown = [name for name in options if name not in OPTION_NAMES]
    if unknown:
        raise ValidationError(
            f"Unknown checker option(s) {unknown}; expected any of {list(OPTION_NAMES)}",
            field_name="checker",
            value=options,
        )
    return build_checker_config(**options)


def validate_checker_config(config_data: Mapping[str, Any]) -> CheckerConfig:
    """
    Validate the parsed contents of a configuration file.

    Args:
        config_data: Parsed TOML with an optional ``[checker]`` table

    Returns:
        Validated CheckerConfig instance
    """
    checker_data: Dict[str, Any] = config_data.get("checker", {})
    if not isinstance(checker_data, Mapping):
        raise ValidationError(
            "[checker] must be a table",
            field_name="checker",
            value=checker_data,
        )
    return normalize_options(checker_data)


def default_config() -> CheckerConfig:
    """The configuration used when no options are given."""
    return build_checker_config()
