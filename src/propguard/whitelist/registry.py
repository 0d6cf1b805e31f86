"""
Whitelist registry.

Exposes the built-in categories as read-only tuples of NamePattern, together
with the derived "all" union, and composes custom whitelists from them.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from ..matching.patterns import normalize_patterns
from ..models.patterns import NamePattern
from ..validation import ValidationError, validate_enum_choice
from .builtin import ALL_CATEGORY, BUILTIN_CATEGORIES

logger = logging.getLogger(__name__)


def _build_registry() -> Mapping[str, Tuple[NamePattern, ...]]:
    categories: Dict[str, Tuple[NamePattern, ...]] = {
        name: tuple(normalize_patterns(list(specs)))
        for name, specs in BUILTIN_CATEGORIES.items()
    }
    # Union of every category, computed once; categories never change after load.
    union: List[NamePattern] = []
    for patterns in categories.values():
        union.extend(patterns)
    categories[ALL_CATEGORY] = tuple(union)
    return MappingProxyType(categories)


WHITELIST: Mapping[str, Tuple[NamePattern, ...]] = _build_registry()


def list_categories() -> List[str]:
    """Return every category name, the "all" union last."""
    return list(WHITELIST.keys())


def get_whitelist(*categories: str, extra: Any = None) -> Tuple[NamePattern, ...]:
    """
    Compose a whitelist from built-in categories plus extra pattern specs.

    Args:
        *categories: Category names; defaults to ``"all"`` when none given.
        extra: Additional pattern specs (anything normalize_patterns accepts).

    Returns:
        Tuple of patterns, categories first in the order given.

    Raises:
        ValidationError: If a category name is unknown.

    Examples:
        >>> import re
        >>> wl = get_whitelist(extra=["testId", re.compile("^x-")])
    """
    names = categories or (ALL_CATEGORY,)
    choices = list_categories()

    patterns: List[NamePattern] = []
    for name in names:
        try:
            category = validate_enum_choice(name, choices=choices, field_name="whitelist category")
        except ValidationError:
            logger.error(f"Unknown whitelist category {name!r}; available: {', '.join(choices)}")
            raise
        patterns.extend(WHITELIST[category])
    patterns.extend(normalize_patterns(extra))
    return tuple(patterns)
