"""Shared test fixtures."""

import logging

import pytest

from shared_preferences import PreferenceStore
from shared_preferences.backends import InMemoryBackend


@pytest.fixture
def backend():
    return InMemoryBackend(domain="com.example.app")


@pytest.fixture
def store(backend):
    return PreferenceStore(backend)


@pytest.fixture
def shared_backend():
    """A domain that already holds entries from another tenant."""
    return InMemoryBackend(
        domain="com.example.app",
        initial={"flutter.a": 1, "other.b": 2, "NSWindow Frame": "0 0 800 600"},
    )


@pytest.fixture
def restore_logging():
    """Undo root-logger changes made by ``configure_logging``."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
