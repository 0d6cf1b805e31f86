"""
Unit tests for diagnostic reporters.
"""

import io
import logging

import pytest

from propguard.reporting import (
    DIAGNOSTICS_LOGGER,
    CollectingReporter,
    LoggingReporter,
    StreamReporter,
    emit,
)


@pytest.mark.unit
class TestReporters:
    """Test cases for the built-in sinks."""

    def test_logging_reporter(self, caplog):
        with caplog.at_level(logging.WARNING, logger=DIAGNOSTICS_LOGGER):
            LoggingReporter()("Widget: received prop \"x\".")

        record = caplog.records[-1]
        assert record.name == DIAGNOSTICS_LOGGER
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "Widget: received prop \"x\"."

    def test_logging_reporter_custom_level(self, caplog):
        with caplog.at_level(logging.INFO, logger="custom"):
            LoggingReporter(logging.getLogger("custom"), level=logging.INFO)("hello")
        assert caplog.records[-1].levelno == logging.INFO

    def test_stream_reporter(self):
        stream = io.StringIO()
        reporter = StreamReporter(stream)
        reporter("one")
        reporter("two")
        assert stream.getvalue() == "one\ntwo\n"

    def test_stream_reporter_defaults_to_stderr(self, capsys):
        StreamReporter()("to stderr")
        assert capsys.readouterr().err == "to stderr\n"

    def test_collecting_reporter(self):
        reporter = CollectingReporter()
        reporter("a")
        assert reporter.messages == ["a"]
        assert len(reporter) == 1
        reporter.clear()
        assert reporter.messages == []


@pytest.mark.unit
class TestEmit:
    """Test cases for fire-and-forget delivery."""

    def test_delivers(self):
        reporter = CollectingReporter()
        emit(reporter, "msg")
        assert reporter.messages == ["msg"]

    def test_failures_are_logged_not_raised(self, caplog):
        def broken(message):
            raise OSError("pipe closed")

        emit(broken, "msg")

        assert "pipe closed" in caplog.text
