"""
Reporting channel implementations.

A reporter is any callable that accepts one human-readable diagnostic
string. Emission is fire-and-forget: a reporter that fails is logged and
otherwise ignored.
"""

import logging
import sys
from typing import Callable, List, Optional, TextIO

from ..validation import handle_check_error

logger = logging.getLogger(__name__)

DIAGNOSTICS_LOGGER = "propguard.diagnostics"

Reporter = Callable[[str], None]


class LoggingReporter:
    """Send each diagnostic to a logger, at WARNING by default."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.WARNING):
        self.logger = logger or logging.getLogger(DIAGNOSTICS_LOGGER)
        self.level = level

    def __call__(self, message: str) -> None:
        self.logger.log(self.level, message)


class StreamReporter:
    """Write each diagnostic as one line to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved late so that a replaced sys.stderr is honoured.
        return self._stream if self._stream is not None else sys.stderr

    def __call__(self, message: str) -> None:
        self.stream.write(message + "\n")
        self.stream.flush()


class CollectingReporter:
    """Keep diagnostics in memory."""

    def __init__(self):
        self.messages: List[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()

    def __len__(self) -> int:
        return len(self.messages)


def emit(reporter: Reporter, message: str) -> None:
    """Deliver ``message`` to ``reporter`` without ever raising."""
    try:
        reporter(message)
    except Exception as e:
        handle_check_error(e, f"reporting via {reporter!r}", logger=logger)
