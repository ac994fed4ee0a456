"""endb — a key-value store facade over interchangeable storage adapters.

One async ``get / set / has / delete / all`` interface, namespaced keys,
nested-path access into stored values, and adapters picked by name or by
connection-string scheme (memory, SQLite, PostgreSQL, MySQL, Redis,
MongoDB).
"""

from endb.adapters import Adapter, AdapterRegistry, MemoryAdapter, default_registry
from endb.element import Element
from endb.exceptions import BackendError, ConfigurationError, EndbError
from endb.options import EndbOptions
from endb.serialization import parse, stringify
from endb.store import Endb

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "BackendError",
    "ConfigurationError",
    "Element",
    "Endb",
    "EndbError",
    "EndbOptions",
    "MemoryAdapter",
    "default_registry",
    "parse",
    "stringify",
]
