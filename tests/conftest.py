"""
Pytest configuration and shared fixtures for punjab tests.
"""

from types import SimpleNamespace

import pytest
from faker import Faker

fake = Faker()


@pytest.fixture
def make_user():
    """Build a principal with the given id and a fake name."""
    def _make(user_id: int):
        return SimpleNamespace(id=user_id, name=fake.name())
    return _make


@pytest.fixture
def decisions_logged(monkeypatch):
    """Turn on per-decision DEBUG logging for the test."""
    monkeypatch.setenv("LOG_AUTHORIZATION_DECISIONS", "true")

