"""Adapter protocol — the capability interface every backend implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from endb._internal.events import ErrorEmitter
from endb._internal.keys import key_prefix
from endb.element import Element
from endb.exceptions import BackendError

if TYPE_CHECKING:
    from endb.options import EndbOptions

DEFAULT_NAMESPACE = "endb"


class Adapter(ErrorEmitter, ABC):
    """Abstract base for all storage backends.

    An adapter stores encoded values under fully prefixed keys
    (``"<namespace>:<key>"``).  It knows nothing about encoding or paths;
    the :class:`~endb.Endb` facade handles those.

    ``namespace`` is assigned by the facade right after construction.
    ``all`` and ``clear`` only touch keys that belong to it.

    Failures are reported twice: the adapter emits a :class:`BackendError`
    on its ``"error"`` channel and raises it to the caller.  Subclasses
    that define ``__init__`` must call ``super().__init__()``.
    """

    def __init__(self) -> None:
        super().__init__()
        self.namespace: str = DEFAULT_NAMESPACE

    @classmethod
    def from_options(cls, options: EndbOptions) -> Adapter:
        """Build the adapter from store options.  Override to read them."""
        return cls()

    @property
    def prefix(self) -> str:
        """Key prefix shared by every entry of the current namespace."""
        return key_prefix(self.namespace)

    @abstractmethod
    async def all(self) -> list[Element]:
        """Return every entry of the current namespace."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Delete every entry of the current namespace."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete *key*.  Return ``True`` if it existed."""
        ...

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the stored value, or ``None`` if not found."""
        ...

    @abstractmethod
    async def has(self, key: str) -> bool:
        """Return ``True`` if *key* exists."""
        ...

    @abstractmethod
    async def set(self, key: str, value: Any) -> Any:
        """Create or overwrite a value."""
        ...

    async def close(self) -> None:
        """Release connections.  No-op by default."""

    @contextmanager
    def _reporting(self, operation: str) -> Iterator[None]:
        """Translate driver failures into :class:`BackendError` and emit them."""
        try:
            yield
        except BackendError as error:
            self.emit_error(error)
            raise
        except Exception as exc:
            error = BackendError(operation, str(exc))
            self.emit_error(error)
            raise error from exc
