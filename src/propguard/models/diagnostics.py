"""
Diagnostic data models.

Diagnostics are produced by the prop validator and emitted immediately;
they are never stored by the checker.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DiagnosticKind(Enum):
    """Type of a prop diagnostic."""
    SIMILARITY = "similarity"
    UNDECLARED = "undeclared"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about one supplied prop."""

    kind: DiagnosticKind
    component_name: str
    prop_name: str
    suggestion: Optional[str] = None

    def format(self) -> str:
        """Render the one-line message sent to the reporting channel."""
        if self.kind is DiagnosticKind.SIMILARITY:
            return (
                f'{self.component_name}: received prop "{self.prop_name}". '
                f'Maybe you meant "{self.suggestion}"?'
            )
        return (
            f'{self.component_name}: received prop "{self.prop_name}", '
            f'but "{self.prop_name}" is not declared in the schema. '
            f'Maybe you should add "{self.prop_name}" to the schema for '
            f'{self.component_name}.'
        )

    def __str__(self) -> str:
        return self.format()
