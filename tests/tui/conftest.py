"""Shared setup for terminal UI tests."""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(__file__))


def pytest_collection_modifyitems(items):
    for item in items:
        if os.path.join("tests", "tui") in str(item.fspath):
            item.add_marker(pytest.mark.unit)
