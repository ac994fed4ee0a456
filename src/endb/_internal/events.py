"""Error channel shared by adapters and the store facade."""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[BaseException], object]

ERROR_EVENT = "error"


class ErrorEmitter:
    """Minimal event emitter that only knows the ``"error"`` event.

    Handlers run synchronously, in subscription order.  A handler that raises
    is logged and does not stop delivery to the remaining handlers.
    """

    def __init__(self) -> None:
        self._error_handlers: list[ErrorHandler] = []

    def on(self, event: str, handler: ErrorHandler) -> None:
        if event != ERROR_EVENT:
            raise ValueError(f"Unsupported event '{event}', only '{ERROR_EVENT}' is emitted")
        self._error_handlers.append(handler)

    def emit_error(self, error: BaseException) -> None:
        if not self._error_handlers:
            logger.warning(
                "%s emitted an error with no subscribers: %s", type(self).__name__, error
            )
            return
        for handler in list(self._error_handlers):
            try:
                handler(error)
            except Exception:
                logger.exception("Error handler %r failed", handler)
