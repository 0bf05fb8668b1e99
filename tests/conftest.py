"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import Mock

import pytest


class RecordingQuoter:
    """Quoter stand-in that wraps values in double angle brackets and records calls"""

    def __init__(self) -> None:
        self.calls: list[Any] = []

    def quote(self, value: Any) -> str:
        self.calls.append(value)
        return f"<<{value}>>"


@pytest.fixture
def quoter() -> RecordingQuoter:
    """Deterministic quoter that needs no connection."""
    return RecordingQuoter()


@pytest.fixture
def mock_cursor():
    """Mock Snowflake cursor whose execute returns itself."""
    cursor = Mock()
    cursor.execute.return_value = cursor
    cursor.sfqid = "test-query-id"
    cursor.rowcount = 1
    cursor.description = None
    return cursor
