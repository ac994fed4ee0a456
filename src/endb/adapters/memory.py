"""MemoryAdapter — zero-config, dict-backed storage for development and testing."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from endb.adapters.base import Adapter
from endb.element import Element


class MemoryAdapter(Adapter):
    """In-memory adapter over a plain mapping.  Data is lost on process exit.

    Parameters:
        data: Mapping to store entries in.  Pass the same mapping to several
              adapters to share one physical store between namespaces.
              A fresh dict is used when omitted.
    """

    def __init__(self, data: MutableMapping[str, Any] | None = None) -> None:
        super().__init__()
        self._data: MutableMapping[str, Any] = {} if data is None else data

    @property
    def data(self) -> MutableMapping[str, Any]:
        return self._data

    async def all(self) -> list[Element]:
        prefix = self.prefix
        return [Element(key, value) for key, value in self._data.items() if key.startswith(prefix)]

    async def clear(self) -> None:
        prefix = self.prefix
        for key in [k for k in self._data if k.startswith(prefix)]:
            del self._data[key]

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, _ABSENT) is not _ABSENT

    async def get(self, key: str) -> Any | None:
        return self._data.get(key)

    async def has(self, key: str) -> bool:
        return key in self._data

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = value


_ABSENT = object()
