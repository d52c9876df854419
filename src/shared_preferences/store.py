"""PreferenceStore — typed get/set/remove/clear over one prefixed namespace."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from shared_preferences.backends.memory import InMemoryBackend
from shared_preferences.exceptions import KeyOutsideNamespaceError, UnsupportedValueKindError
from shared_preferences.variant import SET_VALUE_KINDS, PreferenceValue, Variant

if TYPE_CHECKING:
    from shared_preferences.backends.base import Backend

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "flutter."


class PreferenceStore:
    """Exposes the entries of a backing domain whose keys start with *prefix*.

    Entries without the prefix share the same domain but are invisible to
    every operation: they are never listed, overwritten or deleted.  The
    store keeps no state of its own; each call goes straight to the backend.

    Writes must target keys that start with *prefix*.  ``set_bool``,
    ``set_double`` and ``set_value`` raise :class:`KeyOutsideNamespaceError`
    for any other key and leave the domain untouched; ``remove`` of such a
    key is a silent no-op.  Together with :class:`UnsupportedValueKindError`
    these are the only errors raised by the store itself.  Backend failures
    propagate unchanged.

    Parameters:
        backend: Backing domain.  Defaults to :class:`InMemoryBackend`
                 when omitted.
        prefix:  Literal, case-sensitive namespace prefix.
    """

    def __init__(self, backend: Backend | None = None, prefix: str = DEFAULT_PREFIX) -> None:
        self._backend: Backend = backend or InMemoryBackend()
        self._prefix = prefix

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def prefix(self) -> str:
        return self._prefix

    def owns(self, key: str) -> bool:
        """Return ``True`` if *key* belongs to this store's namespace."""
        return key.startswith(self._prefix)

    # ── reads ────────────────────────────────────────────────

    async def get_all(self) -> dict[str, PreferenceValue]:
        """Return every namespaced entry as ``{key: value}``."""
        entries = await self._namespaced()
        return {key: variant.copy().value for key, variant in entries.items()}

    # ── writes ───────────────────────────────────────────────

    async def set_bool(self, key: str, value: bool) -> None:
        await self._write(key, Variant.boolean(value))

    async def set_double(self, key: str, value: float) -> None:
        await self._write(key, Variant.double(value))

    async def set_value(self, key: str, value: Any) -> None:
        """Store a string, integer, list of strings or bytes under *key*.

        Raises:
            UnsupportedValueKindError: If *value* is any other type.  The
                backend is not touched, so a previous value survives.
        """
        variant = Variant.of(value)
        if variant.kind not in SET_VALUE_KINDS:
            raise UnsupportedValueKindError(
                value, f"setValue does not accept {variant.kind.value} values"
            )
        await self._write(key, variant)

    async def remove(self, key: str) -> None:
        """Delete *key* if present.  Keys outside the namespace are ignored."""
        if not self.owns(key):
            logger.debug("Ignoring remove of %r outside namespace %r", key, self._prefix)
            return
        await self._backend.remove(key)
        logger.debug("Removed %r", key)

    async def clear(self) -> None:
        """Delete every namespaced entry, one key at a time.

        The domain itself is never dropped, since it is shared with
        entries outside the namespace.  A backend failure part-way through
        leaves the remaining entries in place.
        """
        keys = list(await self._namespaced())
        for key in keys:
            await self._backend.remove(key)
        logger.debug("Cleared %d entries under %r", len(keys), self._prefix)

    # ── internals ────────────────────────────────────────────

    async def _namespaced(self) -> dict[str, Variant]:
        entries = await self._backend.entries()
        return {key: variant for key, variant in entries.items() if self.owns(key)}

    async def _write(self, key: str, variant: Variant) -> None:
        if not self.owns(key):
            raise KeyOutsideNamespaceError(key, self._prefix)
        await self._backend.set(key, variant)
        logger.debug("Set %r (%s)", key, variant.kind.value)
