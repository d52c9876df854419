"""PlistBackend — the native macOS per-application property-list domain."""

from __future__ import annotations

import logging
import os
import plistlib
import tempfile
from pathlib import Path
from typing import Any

from shared_preferences.backends.base import Backend
from shared_preferences.exceptions import UnsupportedValueKindError
from shared_preferences.variant import Variant

logger = logging.getLogger(__name__)

DEFAULT_PREFERENCES_DIR = Path.home() / "Library" / "Preferences"


class PlistBackend(Backend):
    """Domain stored as ``<directory>/<domain>.plist`` in binary plist format.

    Every operation re-reads the file, so changes made by other writers are
    observed; every write replaces the file atomically.  Values other
    tenants stored with plist types outside the preference set (dicts,
    dates, mixed arrays) are left alone and hidden from :meth:`entries`.

    Parameters:
        directory: Folder holding the domain file.  Defaults to
                   ``~/Library/Preferences``.
        domain:    Application identity, e.g. ``"com.example.app"``.
    """

    def __init__(self, directory: str | Path | None = None, domain: str = "app") -> None:
        super().__init__(domain)
        self._directory = Path(directory) if directory else DEFAULT_PREFERENCES_DIR

    @property
    def path(self) -> Path:
        return self._directory / f"{self.domain}.plist"

    def _load(self) -> dict[str, Any]:
        try:
            with self.path.open("rb") as fh:
                data = plistlib.load(fh)
        except FileNotFoundError:
            return {}
        if not isinstance(data, dict):
            raise plistlib.InvalidFileException(f"{self.path} does not hold a dictionary")
        return data

    def _dump(self, data: dict[str, Any]) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._directory, suffix=".plist.tmp")
        try:
            with os.fdopen(fd, "wb") as fh:
                plistlib.dump(data, fh, fmt=plistlib.FMT_BINARY)
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise

    # ── Backend protocol ─────────────────────────────────────

    async def get(self, key: str) -> Variant | None:
        raw = self._load().get(key)
        return None if raw is None else _decode(key, raw)

    async def set(self, key: str, value: Variant) -> None:
        data = self._load()
        data[key] = value.value
        self._dump(data)

    async def remove(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._dump(data)

    async def entries(self) -> dict[str, Variant]:
        result: dict[str, Variant] = {}
        for key, raw in self._load().items():
            variant = _decode(key, raw)
            if variant is not None:
                result[key] = variant
        return result


def _decode(key: str, raw: Any) -> Variant | None:
    try:
        return Variant.of(raw)
    except UnsupportedValueKindError as exc:
        logger.warning("Skipping plist entry %r: %s", key, exc)
        return None
