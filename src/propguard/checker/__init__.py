"""
Prop validation for instrumented components.
"""

from .validator import (
    SCHEMA_ATTRIBUTE,
    PropValidator,
    describe_component,
    get_declared_schema,
)

__all__ = [
    "SCHEMA_ATTRIBUTE",
    "PropValidator",
    "describe_component",
    "get_declared_schema",
]
