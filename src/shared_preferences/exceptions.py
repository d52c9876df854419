"""Custom exceptions for the shared_preferences package."""

from __future__ import annotations


class PreferencesError(Exception):
    """Base exception for all preference-store errors."""


class UnsupportedValueKindError(PreferencesError):
    """Raised when a value cannot be represented by the backing domain."""

    def __init__(self, value: object, detail: str = "") -> None:
        self.value_type = type(value).__name__
        msg = f"Unsupported preference value of type '{self.value_type}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class KeyOutsideNamespaceError(PreferencesError):
    """Raised when a write targets a key that lacks the namespace prefix."""

    def __init__(self, key: str, prefix: str) -> None:
        self.key = key
        self.prefix = prefix
        super().__init__(f"Key '{key}' is outside the '{prefix}' namespace")


class ConfigError(PreferencesError):
    """Raised when the store configuration is invalid."""


class ChannelError(PreferencesError):
    """Raised when a channel message cannot be dispatched."""

    def __init__(self, channel: str, detail: str) -> None:
        self.channel = channel
        super().__init__(f"Channel '{channel}': {detail}")
