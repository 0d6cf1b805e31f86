"""
Data models for the prop checker.

Configuration Models:
- Normalized name patterns for include, exclude and whitelist entries
- The immutable configuration of one installation

Component Models:
- Wrapping strategy classification
- Per-component descriptors kept in the instrumentation side table

Diagnostic Models:
- Similarity and undeclared-prop findings and their message format
"""

from .config import CheckerConfig
from .patterns import NamePattern, PatternKind
from .components import ComponentDescriptor, ComponentKind
from .diagnostics import Diagnostic, DiagnosticKind

__all__ = [
    # Configuration
    "CheckerConfig",
    "NamePattern",
    "PatternKind",
    # Components
    "ComponentDescriptor",
    "ComponentKind",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
]
