"""
Global pytest configuration and fixtures for the namely test suite.
"""

import os
import sys

# Add project root to sys.path so 'namely' and 'cli' can be imported without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from namely import FileNameRef


@pytest.fixture
def make_ref():
    """Build a FileNameRef under a fixed parent directory."""
    def _make(name, parent="/data/music"):
        return FileNameRef(parent_path=parent, name=name)
    return _make
