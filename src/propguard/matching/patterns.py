"""
Pattern normalization and matching.

Include, exclude and whitelist options may be given as a single value or a
list of values. Each value becomes a NamePattern:

- ``str``: literal name, compared against the whole name
- compiled ``re.Pattern``: regex, searched anywhere in the name
- ``NamePattern``: used as is
- ``{"regex": "..."}`` / ``{"literal": "..."}``: the TOML forms

Anything else, and regex sources that do not compile, degrade to a pattern
that never matches. Nothing in this module raises.
"""

import logging
import re
from typing import Any, Iterable, List, Mapping

from ..models.patterns import NamePattern
from ..validation import ErrorSeverity, ValidationError, handle_config_error, validate_regex_pattern

logger = logging.getLogger(__name__)

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def to_pattern(spec: Any) -> NamePattern:
    """
    Convert one pattern spec into a NamePattern.

    Args:
        spec: A literal string, a compiled regex, a NamePattern or a mapping
            with a single ``regex`` or ``literal`` key.

    Returns:
        The normalized pattern. Unrecognized specs give a NEVER pattern.
    """
    if isinstance(spec, NamePattern):
        return spec
    if isinstance(spec, str):
        return NamePattern.literal(spec)
    if isinstance(spec, re.Pattern):
        if not isinstance(spec.pattern, str):
            return _degrade(spec, "regex must be compiled from a str, not bytes")
        return NamePattern.from_regex(spec)
    if isinstance(spec, Mapping):
        return _from_mapping(spec)
    return _degrade(spec, f"unsupported pattern type {type(spec).__name__}")


def _from_mapping(spec: Mapping) -> NamePattern:
    if len(spec) != 1:
        return _degrade(spec, "pattern table must have exactly one of 'regex' or 'literal'")

    (key, value), = spec.items()
    if not isinstance(value, str):
        return _degrade(spec, f"'{key}' value must be a string")
    if key == "literal":
        return NamePattern.literal(value)
    if key == "regex":
        try:
            return NamePattern.from_regex(validate_regex_pattern(value, field_name="regex"))
        except ValidationError as e:
            return _degrade(spec, str(e))
    return _degrade(spec, f"unknown pattern key '{key}'")


def _degrade(spec: Any, reason: str) -> NamePattern:
    handle_config_error(
        error=ValidationError(reason, field_name="pattern", value=spec),
        context=f"normalizing pattern {spec!r}",
        severity=ErrorSeverity.WARNING,
        reraise=False,
        logger=logger,
    )
    return NamePattern.never(repr(spec))


def normalize_patterns(spec: Any) -> List[NamePattern]:
    """
    Normalize a scalar or a collection of specs into a list of patterns.

    ``None`` gives an empty list, which matches nothing.
    """
    if spec is None:
        return []
    if isinstance(spec, _SEQUENCE_TYPES):
        return [to_pattern(item) for item in spec]
    return [to_pattern(spec)]


def matches_any(name: str, patterns: Iterable[NamePattern]) -> bool:
    """
    Return True if ``name`` matches at least one of ``patterns``.

    A pattern that fails while being evaluated counts as a non-match.
    """
    for pattern in patterns:
        try:
            if pattern.matches(name):
                return True
        except Exception as e:
            logger.debug(f"Pattern {pattern} failed on {name!r}, treating as no match: {e}")
    return False
