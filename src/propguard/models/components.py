"""
Component descriptor models.

Descriptors are kept in the instrumentation controller's side table, keyed
by component identity. Nothing is ever written onto the component itself.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class ComponentKind(Enum):
    """Wrapping strategy selector for a component value."""
    STATELESS = "stateless"
    STATEFUL = "stateful"
    UNSUPPORTED = "unsupported"


@dataclass
class ComponentDescriptor:
    """
    What the checker knows about one component definition.

    ``instrumented`` only ever goes from False to True.
    """

    display_name: str
    declared_schema: Mapping[str, Any] = field(default_factory=dict)
    kind: ComponentKind = ComponentKind.STATELESS
    instrumented: bool = False

    def mark_instrumented(self) -> None:
        self.instrumented = True
