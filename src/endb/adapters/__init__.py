"""Storage adapters behind the :class:`~endb.Endb` facade.

Only the in-memory adapter is imported eagerly; the others load on demand
through the registry so their drivers stay optional.
"""

from endb.adapters.base import Adapter
from endb.adapters.memory import MemoryAdapter
from endb.adapters.registry import (
    DEFAULT_ADAPTERS,
    AdapterRegistry,
    adapter_name_from_uri,
    default_registry,
    resolve_adapter,
)

__all__ = [
    "DEFAULT_ADAPTERS",
    "Adapter",
    "AdapterRegistry",
    "MemoryAdapter",
    "adapter_name_from_uri",
    "default_registry",
    "resolve_adapter",
]
