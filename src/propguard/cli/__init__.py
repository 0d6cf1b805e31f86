"""
Command-line interface for the propguard package.
"""

from .main import main_cli, run

__all__ = [
    "main_cli",
    "run",
]
