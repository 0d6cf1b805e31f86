"""
Name matching utilities for the propguard package.

This module provides pattern normalization, edit distance between prop
names and the component eligibility filter.
"""

from .patterns import matches_any, normalize_patterns, to_pattern
from .similarity import edit_distance
from .eligibility import get_display_name, should_instrument

__all__ = [
    "edit_distance",
    "get_display_name",
    "matches_any",
    "normalize_patterns",
    "should_instrument",
    "to_pattern",
]
