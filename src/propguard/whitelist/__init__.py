"""
Built-in prop name whitelist.

Categories of framework and platform reserved prop names, plus their "all"
union, exposed read-only for composing custom whitelists.
"""

from .builtin import ALL_CATEGORY
from .registry import WHITELIST, get_whitelist, list_categories

__all__ = [
    "ALL_CATEGORY",
    "WHITELIST",
    "get_whitelist",
    "list_categories",
]
