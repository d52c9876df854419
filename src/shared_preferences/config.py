"""Runtime configuration and backend construction."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from shared_preferences.backends import Backend, InMemoryBackend, PlistBackend, SQLiteBackend
from shared_preferences.exceptions import ConfigError
from shared_preferences.store import DEFAULT_PREFIX


class PreferencesSettings(BaseSettings):
    """Settings for the stdio host.

    Values come from ``SHARED_PREFERENCES_*`` environment variables or a
    ``.env`` file.

    Attributes:
        backend:   Backend type ("memory", "sqlite" or "plist").
        path:      SQLite database file, or plist directory (optional).
        domain:    Application identity owning the backing domain.
        prefix:    Namespace prefix for keys owned by the store.
        log_level: Root log level.
    """

    backend: Literal["memory", "sqlite", "plist"] = "memory"
    path: str = ""
    domain: str = "app"
    prefix: str = DEFAULT_PREFIX
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="SHARED_PREFERENCES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def create_backend(settings: PreferencesSettings) -> Backend:
    """Build the backend described by *settings*.

    Raises:
        ConfigError: If the sqlite backend is selected without a path.
    """
    if settings.backend == "sqlite":
        if not settings.path:
            raise ConfigError("SQLite backend requires 'path' configuration")
        return SQLiteBackend(settings.path, domain=settings.domain)
    if settings.backend == "plist":
        return PlistBackend(settings.path or None, domain=settings.domain)
    return InMemoryBackend(domain=settings.domain)
