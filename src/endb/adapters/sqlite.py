"""SQLiteAdapter — durable, single-file storage backend using aiosqlite."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

try:
    import aiosqlite
except ImportError as exc:
    raise ImportError(
        "SQLiteAdapter requires the 'aiosqlite' package. "
        "Install it with: pip install endb[sqlite]"
    ) from exc

from endb.adapters.base import Adapter
from endb.adapters.sql import DEFAULT_TABLE, validate_identifier
from endb.element import Element

if TYPE_CHECKING:
    from endb.options import EndbOptions

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"


def database_path(uri: str) -> str:
    """Return the database path of a ``sqlite://<path>`` URI.

    ``sqlite://data.db`` is relative, ``sqlite:///var/lib/data.db`` is
    absolute and ``sqlite://:memory:`` is a private in-memory database.
    """
    if "://" in uri:
        path = uri.split("://", 1)[1]
    else:
        path = uri.split(":", 1)[1] if ":" in uri else ""
    return path or MEMORY_DATABASE


class SQLiteAdapter(Adapter):
    """Persistent adapter backed by a single SQLite file.

    Parameters:
        db_path: Path to the SQLite database file.  Use ``":memory:"``
                 for an in-memory database (useful for testing).
        table:   Name of the table holding the entries.
    """

    def __init__(self, db_path: str = MEMORY_DATABASE, *, table: str = DEFAULT_TABLE) -> None:
        super().__init__()
        self._db_path = db_path
        self._table = validate_identifier(table)
        self._db: aiosqlite.Connection | None = None

    @classmethod
    def from_options(cls, options: EndbOptions) -> SQLiteAdapter:
        return cls(
            database_path(options.uri or ""),
            table=options.extra("table", DEFAULT_TABLE),
        )

    @property
    def db_path(self) -> str:
        return self._db_path

    async def _connect(self) -> aiosqlite.Connection:
        if self._db is None:
            logger.debug("Opening SQLite database %s", self._db_path)
            db = await aiosqlite.connect(self._db_path)
            try:
                await db.execute(
                    f"CREATE TABLE IF NOT EXISTS {self._table} "
                    "(key TEXT PRIMARY KEY, value TEXT)"
                )
                await db.commit()
            except Exception:
                await db.close()
                raise
            self._db = db
        return self._db

    async def close(self) -> None:
        if self._db is not None:
            await self._db.close()
            self._db = None

    # ── Adapter protocol ─────────────────────────────────────

    async def all(self) -> list[Element]:
        with self._reporting("all"):
            db = await self._connect()
            prefix = self.prefix
            cursor = await db.execute(
                f"SELECT key, value FROM {self._table} WHERE substr(key, 1, ?) = ?",
                (len(prefix), prefix),
            )
            rows = await cursor.fetchall()
        return [Element(row[0], row[1]) for row in rows]

    async def clear(self) -> None:
        with self._reporting("clear"):
            db = await self._connect()
            prefix = self.prefix
            await db.execute(
                f"DELETE FROM {self._table} WHERE substr(key, 1, ?) = ?",
                (len(prefix), prefix),
            )
            await db.commit()

    async def delete(self, key: str) -> bool:
        with self._reporting("delete"):
            db = await self._connect()
            cursor = await db.execute(f"DELETE FROM {self._table} WHERE key = ?", (key,))
            await db.commit()
        return cursor.rowcount > 0

    async def get(self, key: str) -> Any | None:
        with self._reporting("get"):
            db = await self._connect()
            cursor = await db.execute(f"SELECT value FROM {self._table} WHERE key = ?", (key,))
            row = await cursor.fetchone()
        return None if row is None else row[0]

    async def has(self, key: str) -> bool:
        with self._reporting("has"):
            db = await self._connect()
            cursor = await db.execute(f"SELECT 1 FROM {self._table} WHERE key = ?", (key,))
            return (await cursor.fetchone()) is not None

    async def set(self, key: str, value: Any) -> None:
        with self._reporting("set"):
            db = await self._connect()
            await db.execute(
                f"INSERT OR REPLACE INTO {self._table} (key, value) VALUES (?, ?)",
                (key, value),
            )
            await db.commit()
