"""Element — one key/value pair returned by bulk reads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Element:
    """A single stored entry.

    Attributes:
        key:   The key.  Adapters return the namespaced key; the store
               facade strips the namespace before handing elements out.
        value: The stored value.  Adapters return it encoded; the facade
               returns it decoded.
    """

    key: str
    value: Any
