# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Adapter registry and resolution.

Uses the Registry pattern to map adapter names to adapter classes, so new
backends can be plugged in without touching the store facade.  Built-in
adapters are referenced lazily (``"module:Class"``) and only imported when
selected, so their drivers stay optional.
"""

from __future__ import annotations

import importlib
import logging
import re
from collections.abc import Callable, Mapping, MutableMapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Union

from endb.adapters.base import Adapter
from endb.adapters.memory import MemoryAdapter
from endb.exceptions import ConfigurationError

if TYPE_CHECKING:
    from endb.options import EndbOptions

logger = logging.getLogger(__name__)

AdapterFactory = Callable[["EndbOptions"], Adapter]
AdapterTarget = Union[str, type[Adapter], AdapterFactory]

DEFAULT_ADAPTERS: Mapping[str, str] = MappingProxyType(
    {
        "mongo": "endb.adapters.mongo:MongoAdapter",
        "mongodb": "endb.adapters.mongo:MongoAdapter",
        "mysql": "endb.adapters.mysql:MySQLAdapter",
        "postgres": "endb.adapters.postgres:PostgresAdapter",
        "postgresql": "endb.adapters.postgres:PostgresAdapter",
        "redis": "endb.adapters.redis:RedisAdapter",
        "sqlite": "endb.adapters.sqlite:SQLiteAdapter",
    }
)

_URI_SCHEME = re.compile(r"^[^:]+")


class AdapterRegistry:
    """Maps adapter names to adapter classes or factories.

    A target is either a lazy ``"module:attribute"`` reference, an
    :class:`Adapter` subclass (built with its ``from_options``), or any
    callable taking :class:`~endb.EndbOptions` and returning an adapter.

    Registries are plain instances: each store resolves against the one it
    was given, so registering a backend never affects other stores.

    Example:
        registry = default_registry()
        registry.register("dynamo", DynamoAdapter)
        db = Endb("dynamo://table", registry=registry)
    """

    def __init__(self, entries: Mapping[str, AdapterTarget] | None = None) -> None:
        self._entries: dict[str, AdapterTarget] = dict(entries or {})

    def register(self, name: str, target: AdapterTarget) -> None:
        """Register *target* under *name*, replacing any previous entry."""
        self._entries[name] = target
        logger.debug("Registered adapter: %s", name)

    def names(self) -> list[str]:
        """Return the registered adapter names."""
        return list(self._entries)

    def copy(self) -> AdapterRegistry:
        return AdapterRegistry(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def create(self, name: str, options: EndbOptions) -> Adapter:
        """Build the adapter registered under *name*.

        Raises:
            ConfigurationError: If *name* is unknown, its driver is not
                installed, or the adapter rejects the options.
        """
        target = self._entries.get(name)
        if target is None:
            available = ", ".join(sorted(self._entries))
            raise ConfigurationError(f"Invalid adapter '{name}'. Available adapters: {available}")

        factory = _load(name, target)
        try:
            if isinstance(factory, type) and issubclass(factory, Adapter):
                adapter = factory.from_options(options)
            else:
                adapter = factory(options)
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Failed to create adapter '{name}': {e}") from e

        if not isinstance(adapter, Adapter):
            raise ConfigurationError(
                f"Adapter '{name}' produced {type(adapter).__name__}, not an Adapter"
            )
        logger.debug("Created %s for adapter '%s'", type(adapter).__name__, name)
        return adapter


def _load(name: str, target: AdapterTarget) -> type[Adapter] | AdapterFactory:
    if not isinstance(target, str):
        return target
    module_name, _, attribute = target.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Adapter '{name}' is not available: {e}") from e
    try:
        loaded: type[Adapter] | AdapterFactory = getattr(module, attribute)
    except AttributeError as e:
        raise ConfigurationError(f"Adapter '{name}' points to missing '{target}'") from e
    return loaded


def default_registry() -> AdapterRegistry:
    """Return a new registry holding the built-in adapters."""
    return AdapterRegistry(DEFAULT_ADAPTERS)


def adapter_name_from_uri(uri: str) -> str:
    """Return the scheme of *uri*: everything before the first ``":"``.

    Raises:
        ConfigurationError: If *uri* has no scheme.
    """
    match = _URI_SCHEME.match(uri)
    if match is None:
        raise ConfigurationError(f"Could not infer adapter from '{uri}'")
    return match.group(0)


def resolve_adapter(options: EndbOptions, registry: AdapterRegistry | None = None) -> Adapter:
    """Select the adapter described by *options*.

    Resolution order:
    1. ``options.store``: used as is; a mutable mapping becomes the storage
       of a :class:`MemoryAdapter`.
    2. ``options.adapter``: looked up in *registry*.
    3. ``options.uri``: its scheme is looked up in *registry*.
    4. Nothing given: a fresh :class:`MemoryAdapter`.
    """
    if options.store is not None:
        store = options.store
        if isinstance(store, Adapter):
            return store
        if isinstance(store, MutableMapping):
            return MemoryAdapter(store)
        raise ConfigurationError(
            f"store must be an Adapter or a mutable mapping, got {type(store).__name__}"
        )

    name = options.adapter
    if not name and options.uri:
        name = adapter_name_from_uri(options.uri)
    if not name:
        logger.debug("No adapter configured, using in-memory storage")
        return MemoryAdapter()

    registry = registry if registry is not None else default_registry()
    return registry.create(name, options)
