"""Endb — the key-value store facade."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Any

from endb._internal.events import ErrorEmitter
from endb._internal.keys import add_key_prefix, remove_key_prefix
from endb.adapters.registry import resolve_adapter
from endb.element import Element
from endb.options import EndbOptions
from endb.paths import get_path, has_path, set_path, unset_path

if TYPE_CHECKING:
    from endb.adapters.base import Adapter
    from endb.adapters.registry import AdapterRegistry

logger = logging.getLogger(__name__)


def _or_empty(value: Any) -> Any:
    """Return *value*, or a fresh dict when it is absent or a falsy scalar."""
    if value is None or (not value and not isinstance(value, dict | list)):
        return {}
    return value


class Endb(ErrorEmitter):
    """Uniform async key-value interface over interchangeable adapters.

    Every key is stored as ``"<namespace>:<key>"``.  Values are encoded with
    ``options.serialize`` on the way in and string values are decoded with
    ``options.deserialize`` on the way out.  ``get``, ``set``, ``has`` and
    ``delete`` take an optional *path* (``"a.b[0].c"``) addressing a field
    inside the stored value.

    Errors reported by the adapter are re-emitted on this store's
    ``"error"`` channel (see :meth:`on`); failing operations also raise.

    Parameters:
        uri:      Connection string, e.g. ``"sqlite://data.db"``.  Its scheme
                  selects the adapter unless ``adapter`` is given.
        registry: Adapter registry to resolve names against.  Defaults to
                  the built-in adapters.
        **options: Any :class:`EndbOptions` field (``namespace``,
                  ``adapter``, ``store``, ``serialize``, ``deserialize``)
                  plus adapter-specific extras such as ``table``.

    Raises:
        ConfigurationError: If no adapter can be resolved from the options.

    Example:
        db = Endb(namespace="users")
        await db.set("alice", {"plan": "pro"})
        await db.get("alice", "plan")  # "pro"
    """

    def __init__(
        self,
        uri: str | None = None,
        *,
        registry: AdapterRegistry | None = None,
        **options: Any,
    ) -> None:
        if uri is not None:
            options["uri"] = uri
        self._init(EndbOptions(**options), registry)

    @classmethod
    def from_options(cls, options: EndbOptions, registry: AdapterRegistry | None = None) -> Endb:
        """Build a store from an already validated :class:`EndbOptions`."""
        store = cls.__new__(cls)
        store._init(options, registry)
        return store

    def _init(self, options: EndbOptions, registry: AdapterRegistry | None) -> None:
        super().__init__()
        self._options = options
        self._adapter: Adapter = resolve_adapter(options, registry)
        self._adapter.on("error", self.emit_error)
        self._adapter.namespace = options.namespace
        logger.debug(
            "Endb ready: namespace=%s adapter=%s",
            options.namespace,
            type(self._adapter).__name__,
        )

    # ── configuration ────────────────────────────────────────

    @property
    def options(self) -> EndbOptions:
        return self._options

    @property
    def adapter(self) -> Adapter:
        return self._adapter

    @property
    def namespace(self) -> str:
        """Key namespace.  Reassigning it orphans keys written under the old one."""
        return self._options.namespace

    @namespace.setter
    def namespace(self, value: str) -> None:
        self._options.namespace = value
        self._adapter.namespace = value

    def add_key_prefix(self, key: str) -> str:
        return add_key_prefix(self._options.namespace, key)

    def remove_key_prefix(self, key: str) -> str:
        return remove_key_prefix(self._options.namespace, key)

    def _decode(self, value: Any) -> Any:
        return self._options.deserialize(value) if isinstance(value, str) else value

    # ── bulk reads ───────────────────────────────────────────

    async def all(self) -> list[Element]:
        """Return every entry of the namespace with keys unprefixed and values decoded."""
        data = await self._adapter.all()
        return [
            Element(key=self.remove_key_prefix(element.key), value=self._decode(element.value))
            for element in data
        ]

    async def keys(self) -> list[str]:
        return [element.key for element in await self.all()]

    async def values(self) -> list[Any]:
        return [element.value for element in await self.all()]

    async def entries(self) -> list[tuple[str, Any]]:
        return [(element.key, element.value) for element in await self.all()]

    async def clear(self) -> None:
        """Delete every entry.  Scope is decided by the adapter."""
        await self._adapter.clear()

    # ── single-key operations ────────────────────────────────

    async def get(self, key: str, path: str | None = None) -> Any:
        """Return the value of *key* (or the field at *path*), ``None`` if absent."""
        stored = await self._adapter.get(self.add_key_prefix(key))
        value = self._decode(stored)
        if value is None:
            return None
        if path is not None:
            return get_path(value, path)
        return value

    async def has(self, key: str, path: str | None = None) -> bool:
        """Return ``True`` if *key* exists, or if *path* exists inside its value."""
        if path is not None:
            data = _or_empty(await self.get(key))
            return has_path(data, path)
        return await self._adapter.has(self.add_key_prefix(key))

    async def set(self, key: str, value: Any, path: str | None = None) -> bool:
        """Store *value* under *key*, or at *path* inside the current value.

        A path write reads the current value (``{}`` when absent), sets the
        field and writes the whole value back.  This read-modify-write is not
        atomic; concurrent path writes to one key can lose updates.

        Always returns ``True``; adapter failures raise.
        """
        if path is not None:
            data = _or_empty(await self.get(key))
            value = set_path(data, path, value)
        await self._adapter.set(self.add_key_prefix(key), self._options.serialize(value))
        return True

    async def delete(self, key: str, path: str | None = None) -> bool:
        """Delete *key*, or the field at *path* inside its value.

        Without *path*, returns whether the key existed.  With *path*, the
        remaining value is written back (``{}`` for an absent key) and the
        result of that write is returned.
        """
        if path is not None:
            data = _or_empty(await self.get(key))
            unset_path(data, path)
            return await self.set(key, data)
        return await self._adapter.delete(self.add_key_prefix(key))

    # ── lifecycle ────────────────────────────────────────────

    async def close(self) -> None:
        """Release the adapter's connections."""
        await self._adapter.close()

    async def __aenter__(self) -> Endb:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
