"""Pytest configuration and shared fixtures."""

import pytest

from mailkey.domain.value_objects import Email


@pytest.fixture
def sample_email() -> Email:
    """Create the sample email used across tests."""
    return Email.parse("sample@example.com")
