"""
Instrumentation of component creation.

This module provides the controller that intercepts a host's creation entry
point, the per-kind wrapping strategies, and the process-wide install and
uninstall pair for the default host.
"""

from .strategies import (
    STRATEGIES,
    StatefulWrapStrategy,
    StatelessWrapStrategy,
    WrapStrategy,
    classify,
    get_strategy,
)
from .controller import (
    InstallHandle,
    InstrumentationController,
    get_controller,
    install,
    reset_controller,
    resolve_config,
    uninstall,
)

__all__ = [
    # Strategies
    "STRATEGIES",
    "StatefulWrapStrategy",
    "StatelessWrapStrategy",
    "WrapStrategy",
    "classify",
    "get_strategy",
    # Controller
    "InstallHandle",
    "InstrumentationController",
    "get_controller",
    "install",
    "reset_controller",
    "resolve_config",
    "uninstall",
]
