"""shared_preferences — a prefix-scoped, typed, persistent preference store.

One flat backing domain per application, shared with other tenants.  The
store only ever sees, writes and deletes keys that carry its prefix.
"""

from shared_preferences.exceptions import (
    ChannelError,
    ConfigError,
    KeyOutsideNamespaceError,
    PreferencesError,
    UnsupportedValueKindError,
)
from shared_preferences.store import DEFAULT_PREFIX, PreferenceStore
from shared_preferences.variant import PreferenceValue, ValueKind, Variant

__all__ = [
    "DEFAULT_PREFIX",
    "ChannelError",
    "ConfigError",
    "KeyOutsideNamespaceError",
    "PreferenceStore",
    "PreferenceValue",
    "PreferencesError",
    "UnsupportedValueKindError",
    "ValueKind",
    "Variant",
]
