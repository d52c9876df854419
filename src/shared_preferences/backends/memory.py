"""InMemoryBackend — zero-config, dict-backed domain for development and testing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from shared_preferences.backends.base import Backend
from shared_preferences.variant import Variant


class InMemoryBackend(Backend):
    """In-memory domain using a plain dict.  Data is lost on process exit.

    Parameters:
        domain:  Application identity this backend stands in for.
        initial: Optional raw values to seed the domain with, including
                 keys outside any namespace.
    """

    def __init__(self, domain: str = "app", initial: Mapping[str, Any] | None = None) -> None:
        super().__init__(domain)
        self._data: dict[str, Variant] = {
            key: Variant.of(value) for key, value in (initial or {}).items()
        }

    async def get(self, key: str) -> Variant | None:
        variant = self._data.get(key)
        return None if variant is None else variant.copy()

    async def set(self, key: str, value: Variant) -> None:
        self._data[key] = value.copy()

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    async def entries(self) -> dict[str, Variant]:
        return {key: variant.copy() for key, variant in self._data.items()}
