"""Pytest configuration to make the project root importable as a package.

This ensures that ``import array_console`` works when tests are run from the
repository root or other locations without installing the package.
"""

import io
import os
import sys

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from array_console.utils.streams import ConsoleStreams  # noqa: E402


@pytest.fixture
def make_streams():
    """Build ConsoleStreams over in-memory text, with captured output and error."""
    def _make(text=""):
        return ConsoleStreams(input=io.StringIO(text), output=io.StringIO(), error=io.StringIO())
    return _make
