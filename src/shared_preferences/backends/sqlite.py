"""SQLiteBackend — durable, single-file domain storage using aiosqlite."""

from __future__ import annotations

import json
import logging

import aiosqlite

from shared_preferences.backends.base import Backend
from shared_preferences.variant import Variant

logger = logging.getLogger(__name__)

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS preferences (
    domain TEXT NOT NULL,
    key    TEXT NOT NULL,
    kind   TEXT NOT NULL,
    value  TEXT NOT NULL,
    PRIMARY KEY (domain, key)
)
"""


class SQLiteBackend(Backend):
    """Persistent domain backed by a single SQLite file.

    Several domains may share one file; rows are partitioned by the
    ``domain`` column.

    Parameters:
        db_path: Path to the SQLite database file.  Use ``":memory:"``
                 for an in-memory database (useful for testing).
        domain:  Application identity whose rows this backend reads and writes.
    """

    def __init__(self, db_path: str = "preferences.db", domain: str = "app") -> None:
        super().__init__(domain)
        self._db_path = db_path
        self._db: aiosqlite.Connection | None = None

    async def _connect(self) -> aiosqlite.Connection:
        if self._db is None:
            self._db = await aiosqlite.connect(self._db_path)
            await self._db.execute(_CREATE_TABLE)
            await self._db.commit()
            logger.debug("Opened preferences database %s for domain %s", self._db_path, self.domain)
        return self._db

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    # ── Backend protocol ─────────────────────────────────────

    async def get(self, key: str) -> Variant | None:
        db = await self._connect()
        cursor = await db.execute(
            "SELECT kind, value FROM preferences WHERE domain = ? AND key = ?",
            (self.domain, key),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return _decode(row[0], row[1])

    async def set(self, key: str, value: Variant) -> None:
        db = await self._connect()
        payload = value.to_json()
        await db.execute(
            "INSERT OR REPLACE INTO preferences (domain, key, kind, value) VALUES (?, ?, ?, ?)",
            (self.domain, key, payload["kind"], json.dumps(payload["value"])),
        )
        await db.commit()

    async def remove(self, key: str) -> None:
        db = await self._connect()
        await db.execute(
            "DELETE FROM preferences WHERE domain = ? AND key = ?",
            (self.domain, key),
        )
        await db.commit()

    async def entries(self) -> dict[str, Variant]:
        db = await self._connect()
        cursor = await db.execute(
            "SELECT key, kind, value FROM preferences WHERE domain = ?",
            (self.domain,),
        )
        rows = await cursor.fetchall()
        return {row[0]: _decode(row[1], row[2]) for row in rows}


def _decode(kind: str, raw: str) -> Variant:
    return Variant.from_json({"kind": kind, "value": json.loads(raw)})
