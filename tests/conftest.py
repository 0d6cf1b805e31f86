"""
Pytest configuration and shared fixtures for the propguard test suite.

This module provides common fixtures, test utilities, and configuration
for all test modules in the propguard project.
"""

import re
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def reporter():
    """A reporter that keeps every diagnostic message."""
    from propguard.reporting import CollectingReporter

    return CollectingReporter()


@pytest.fixture
def host():
    """A fresh host, so entry point replacement never leaks between tests."""
    from propguard.host import Host

    return Host()


@pytest.fixture
def controller(host, reporter):
    """An instrumentation controller bound to the fresh host."""
    from propguard.instrumentation import InstrumentationController

    ctrl = InstrumentationController(host, reporter=reporter)
    yield ctrl
    ctrl.uninstall()


@pytest.fixture
def default_config():
    """The default checker configuration."""
    from propguard.config import build_checker_config

    return build_checker_config()


@pytest.fixture
def sample_checker_data():
    """Sample [checker] table as it would appear in a TOML file."""
    return {
        "include": [{"regex": "^Include"}, {"literal": "PatchMe"}],
        "exclude": [{"regex": "^Exclude"}, {"literal": "DoNotPatchMe"}],
        "max_distance": 1,
        "warn_undeclared": True,
        "whitelist": {
            "categories": ["framework-internal", "event-handlers"],
            "extra": [{"literal": "testId"}, {"regex": "^x-"}],
        },
    }


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def config_file(temp_dir, sample_checker_data):
    """Create a temporary configuration file for testing."""
    import toml

    path = temp_dir / "propguard.toml"
    with open(path, "w") as f:
        toml.dump({"checker": sample_checker_data}, f)
    return path


# ============================================================================
# Test Utilities
# ============================================================================


class TestUtils:
    """Utility functions for testing."""

    @staticmethod
    def make_stateful(name, prop_types=None, base=None):
        """Create a stateful component class with the given display name."""
        from propguard.host import Component

        return type(name, (base or Component,), {
            "display_name": name,
            "prop_types": dict(prop_types or {}),
            "render": lambda self: None,
        })

    @staticmethod
    def make_stateless(name, prop_types=None):
        """Create a stateless component function with the given name."""
        def component(props):
            return None

        component.__name__ = name
        component.__qualname__ = name
        if prop_types is not None:
            component.prop_types = dict(prop_types)
        return component

    @staticmethod
    def matches(pattern, message):
        return re.search(pattern, message) is not None


@pytest.fixture
def test_utils():
    """Provide test utility functions."""
    return TestUtils


@pytest.fixture(autouse=True)
def clear_global_state():
    """Automatically reset the configuration cache and default installation."""
    yield

    from propguard.config import clear_config_cache, set_config_path
    from propguard.instrumentation import reset_controller

    reset_controller()
    set_config_path(None)
    clear_config_cache()
