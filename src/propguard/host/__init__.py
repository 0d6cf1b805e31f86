"""
Minimal component host for propguard.

Provides elements, a stateful component base class and a host owning the
replaceable creation entry point.
"""

from .tree import Component, Element, is_stateful
from .runtime import Host, Mounted, create_element, default_host, mount

__all__ = [
    "Component",
    "Element",
    "Host",
    "Mounted",
    "create_element",
    "default_host",
    "is_stateful",
    "mount",
]
