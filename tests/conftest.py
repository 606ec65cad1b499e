"""Pytest configuration for dataknobs_fieldchain tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_fieldchain import settings  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings():
    """Restore default settings around every test."""
    settings.reset()
    yield
    settings.reset()
