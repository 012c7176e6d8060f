"""Shared fixtures for the test suite."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def fake_logger() -> MagicMock:
    """Logger stand-in that records calls without touching log files."""
    return MagicMock()
