"""MongoAdapter — MongoDB backend using PyMongo's asyncio client."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

try:
    from pymongo import AsyncMongoClient
except ImportError as exc:
    raise ImportError(
        "MongoAdapter requires the 'pymongo' package. "
        "Install it with: pip install endb[mongo]"
    ) from exc

from endb.adapters.base import Adapter
from endb.element import Element

if TYPE_CHECKING:
    from pymongo.asynchronous.collection import AsyncCollection

    from endb.options import EndbOptions

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "endb"
DEFAULT_COLLECTION = "endb"


class MongoAdapter(Adapter):
    """Adapter storing each entry as a ``{key, value}`` document.

    Parameters:
        uri:        ``mongodb://host:port/database``.  The database named in
                    the URI is used, ``"endb"`` otherwise.
        collection: Name of the collection holding the entries.
        client:     Ready-made client to use instead of one built from *uri*.
    """

    def __init__(
        self,
        uri: str = "mongodb://localhost:27017",
        *,
        collection: str = DEFAULT_COLLECTION,
        client: AsyncMongoClient[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__()
        # The "mongo" scheme is accepted as an alias of "mongodb".
        self._uri = re.sub(r"^mongo://", "mongodb://", uri)
        self._collection_name = collection
        self._client: AsyncMongoClient[dict[str, Any]] | None = client

    @classmethod
    def from_options(cls, options: EndbOptions) -> MongoAdapter:
        return cls(
            options.uri or "mongodb://localhost:27017",
            collection=options.extra("collection", DEFAULT_COLLECTION),
        )

    def _collection(self) -> AsyncCollection[dict[str, Any]]:
        if self._client is None:
            logger.debug("Creating MongoDB client")
            self._client = AsyncMongoClient(self._uri)
        database = self._client.get_default_database(default=DEFAULT_DATABASE)
        return database[self._collection_name]

    def _namespace_filter(self) -> dict[str, Any]:
        return {"key": {"$regex": f"^{re.escape(self.prefix)}"}}

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

    # ── Adapter protocol ─────────────────────────────────────

    async def all(self) -> list[Element]:
        with self._reporting("all"):
            cursor = self._collection().find(self._namespace_filter())
            return [Element(doc["key"], doc["value"]) async for doc in cursor]

    async def clear(self) -> None:
        with self._reporting("clear"):
            await self._collection().delete_many(self._namespace_filter())

    async def delete(self, key: str) -> bool:
        with self._reporting("delete"):
            result = await self._collection().delete_one({"key": key})
        return result.deleted_count > 0

    async def get(self, key: str) -> Any | None:
        with self._reporting("get"):
            doc = await self._collection().find_one({"key": key})
        return None if doc is None else doc["value"]

    async def has(self, key: str) -> bool:
        with self._reporting("has"):
            return await self._collection().count_documents({"key": key}, limit=1) > 0

    async def set(self, key: str, value: Any) -> None:
        with self._reporting("set"):
            await self._collection().update_one(
                {"key": key}, {"$set": {"value": value}}, upsert=True
            )
