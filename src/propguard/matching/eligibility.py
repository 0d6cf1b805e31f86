"""
Decide which components get instrumented.
"""

import logging
from typing import Any

from ..models.config import CheckerConfig
from .patterns import matches_any

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_NAME = "Component"


def get_display_name(component: Any) -> str:
    """Return ``display_name``, then ``__name__``, then ``"Component"``."""
    for attr in ("display_name", "__name__"):
        name = getattr(component, attr, None)
        if isinstance(name, str) and name:
            return name
    return DEFAULT_DISPLAY_NAME


def should_instrument(display_name: str, config: CheckerConfig) -> bool:
    """Return True if the name is included and not excluded.

    Exclude always wins. With the default configuration every name is
    included and names containing a non-alphanumeric character (wrappers,
    generated names) are excluded.
    """
    if not matches_any(display_name, config.include):
        logger.debug(f"{display_name!r} not matched by include patterns")
        return False
    if matches_any(display_name, config.exclude):
        logger.debug(f"{display_name!r} matched by exclude patterns")
        return False
    return True
