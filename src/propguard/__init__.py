"""
propguard: catch prop name mistakes as components are created.

At instantiation time, the props given to a component are compared with the
props it declares (``prop_types``). Likely typos of a declared name and,
optionally, names the component does not declare are reported through a
diagnostic channel. Nothing about the component's behaviour changes.

The package is organized into specialized modules:
- config: Configuration loading, validation and the process-wide singleton
- models: Data structures and type definitions
- validation: Input validation and error handling
- matching: Pattern matching, edit distance and eligibility
- whitelist: Built-in prop names that are always accepted
- checker: The prop validator
- reporting: Diagnostic sinks
- instrumentation: Interception of component creation
- host: Minimal component host
- cli: Command-line interface

Usage:
    import propguard
    from propguard.host import Component, create_element, mount

    propguard.install(max_distance=2)

    class Button(Component):
        prop_types = {"label": str}

    mount(create_element(Button, {"lable": "OK"}))
    # Button: received prop "lable". Maybe you meant "label"?
"""

from .config import get_config, clear_config_cache, set_config_path

from .models import (
    CheckerConfig,
    ComponentDescriptor,
    ComponentKind,
    Diagnostic,
    DiagnosticKind,
    NamePattern,
    PatternKind,
)

from .validation import ValidationError

from .matching import edit_distance, should_instrument
from .whitelist import WHITELIST, get_whitelist
from .checker import PropValidator
from .reporting import CollectingReporter, LoggingReporter, StreamReporter

from .instrumentation import (
    InstallHandle,
    InstrumentationController,
    install,
    uninstall,
)

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "get_config",
    "clear_config_cache",
    "set_config_path",
    # Models
    "CheckerConfig",
    "ComponentDescriptor",
    "ComponentKind",
    "Diagnostic",
    "DiagnosticKind",
    "NamePattern",
    "PatternKind",
    # Validation
    "ValidationError",
    # Matching
    "edit_distance",
    "should_instrument",
    # Whitelist
    "WHITELIST",
    "get_whitelist",
    # Checking and reporting
    "PropValidator",
    "CollectingReporter",
    "LoggingReporter",
    "StreamReporter",
    # Instrumentation
    "InstallHandle",
    "InstrumentationController",
    "install",
    "uninstall",
]
