"""
Configuration data models.

This module contains the normalized configuration of one installation.
Raw options are turned into a CheckerConfig by propguard.config.validators.
"""

from dataclasses import dataclass
from typing import Tuple

from .patterns import NamePattern


@dataclass(frozen=True)
class CheckerConfig:
    """
    Normalized configuration for one installation. Immutable once built.
    """

    # Display names that may be instrumented (OR semantics).
    include: Tuple[NamePattern, ...]
    # Display names that are never instrumented; wins over include.
    exclude: Tuple[NamePattern, ...]
    # Prop names accepted even when missing from a declared schema.
    whitelist: Tuple[NamePattern, ...]
    # Largest edit distance still reported as a likely typo.
    max_distance: int = 2
    # Whether props absent from a non-empty schema are reported.
    warn_undeclared: bool = True

    def __post_init__(self):
        # Kept as a hard invariant; option validation happens before this.
        if self.max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {self.max_distance}")
