"""
Diagnostic reporting for the propguard package.
"""

from .reporters import (
    DIAGNOSTICS_LOGGER,
    CollectingReporter,
    LoggingReporter,
    Reporter,
    StreamReporter,
    emit,
)

__all__ = [
    "DIAGNOSTICS_LOGGER",
    "CollectingReporter",
    "LoggingReporter",
    "Reporter",
    "StreamReporter",
    "emit",
]
