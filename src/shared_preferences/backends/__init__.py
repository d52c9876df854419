"""Backing domains for preference persistence."""

from shared_preferences.backends.base import Backend
from shared_preferences.backends.memory import InMemoryBackend
from shared_preferences.backends.plist import PlistBackend
from shared_preferences.backends.sqlite import SQLiteBackend

__all__ = ["Backend", "InMemoryBackend", "PlistBackend", "SQLiteBackend"]
