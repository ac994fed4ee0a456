"""EndbOptions — validated configuration for an :class:`~endb.Endb` store.

Options can be built from keyword arguments, a dict (``model_validate``)
or JSON (``model_validate_json``).  Unknown fields are kept and handed to
the adapter, which reads the ones it understands (``table``,
``collection``...).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from endb.adapters.base import DEFAULT_NAMESPACE
from endb.serialization import parse, stringify


class EndbOptions(BaseModel):
    """Store configuration.

    Attributes:
        namespace:   Token prefixed to every key (``"<namespace>:<key>"``).
        uri:         Connection string.  Its scheme selects the adapter when
                     ``adapter`` is not set.
        adapter:     Adapter name, e.g. ``"sqlite"`` or ``"redis"``.
        store:       Prebuilt :class:`~endb.adapters.Adapter`, or a mutable
                     mapping to use as in-memory storage.  Bypasses
                     adapter resolution.
        serialize:   Encodes values before they reach the adapter.
        deserialize: Decodes string values read back from the adapter.
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    namespace: str = DEFAULT_NAMESPACE
    uri: str | None = None
    adapter: str | None = None
    store: Any = None
    serialize: Callable[[Any], str] = Field(default=stringify, exclude=True)
    deserialize: Callable[[str], Any] = Field(default=parse, exclude=True)

    def extra(self, name: str, default: Any = None) -> Any:
        """Return an adapter-specific option, or *default* when not given."""
        return (self.model_extra or {}).get(name, default)
