"""Backend protocol — the narrow capability interface over a preference domain."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shared_preferences.variant import Variant


class Backend(ABC):
    """Abstract base for all backing domains.

    A backend owns exactly one *domain* (the application identity, e.g.
    ``"com.example.app"``).  It knows nothing about namespace prefixes: it
    persists :class:`Variant` values keyed by plain string keys, and every
    write is durable and visible once the call returns.
    """

    def __init__(self, domain: str) -> None:
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    @abstractmethod
    async def get(self, key: str) -> Variant | None:
        """Return the stored value, or ``None`` if not found."""
        ...

    @abstractmethod
    async def set(self, key: str, value: Variant) -> None:
        """Create or overwrite a value."""
        ...

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete a value.  No-op if the key does not exist."""
        ...

    @abstractmethod
    async def entries(self) -> dict[str, Variant]:
        """Return a snapshot of every entry in the domain."""
        ...

    async def close(self) -> None:
        """Release any held resources.  Default is a no-op."""
