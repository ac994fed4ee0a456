"""RedisAdapter — Redis backend using redis-py's asyncio client."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

try:
    from redis import asyncio as aioredis
except ImportError as exc:
    raise ImportError(
        "RedisAdapter requires the 'redis' package. "
        "Install it with: pip install endb[redis]"
    ) from exc

from endb.adapters.base import Adapter
from endb.element import Element

if TYPE_CHECKING:
    from endb.options import EndbOptions

logger = logging.getLogger(__name__)

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def escape_glob(text: str) -> str:
    """Backslash-escape the characters Redis treats as glob syntax."""
    return _GLOB_SPECIAL.sub(r"\\\1", text)


class RedisAdapter(Adapter):
    """Adapter storing each entry as a plain Redis string.

    Parameters:
        uri:    ``redis://[:password@]host:port/db``.
        client: Ready-made client to use instead of one built from *uri*.
                It must decode responses to ``str``.
    """

    def __init__(
        self,
        uri: str = "redis://localhost:6379",
        *,
        client: aioredis.Redis | None = None,
    ) -> None:
        super().__init__()
        self._uri = uri
        self._client: aioredis.Redis | None = client

    @classmethod
    def from_options(cls, options: EndbOptions) -> RedisAdapter:
        return cls(options.uri or "redis://localhost:6379")

    def _connect(self) -> aioredis.Redis:
        if self._client is None:
            logger.debug("Creating Redis client")
            self._client = aioredis.from_url(self._uri, decode_responses=True)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _namespace_keys(self) -> list[str]:
        client = self._connect()
        return [key async for key in client.scan_iter(match=f"{escape_glob(self.prefix)}*")]

    # ── Adapter protocol ─────────────────────────────────────

    async def all(self) -> list[Element]:
        with self._reporting("all"):
            keys = await self._namespace_keys()
            if not keys:
                return []
            values = await self._connect().mget(keys)
        return [Element(key, value) for key, value in zip(keys, values) if value is not None]

    async def clear(self) -> None:
        with self._reporting("clear"):
            keys = await self._namespace_keys()
            if keys:
                await self._connect().delete(*keys)

    async def delete(self, key: str) -> bool:
        with self._reporting("delete"):
            return await self._connect().delete(key) > 0

    async def get(self, key: str) -> Any | None:
        with self._reporting("get"):
            return await self._connect().get(key)

    async def has(self, key: str) -> bool:
        with self._reporting("has"):
            return await self._connect().exists(key) > 0

    async def set(self, key: str, value: Any) -> None:
        with self._reporting("set"):
            await self._connect().set(key, value)
