"""Custom exceptions for the endb package."""

from __future__ import annotations


class EndbError(Exception):
    """Base exception for all endb errors."""


class ConfigurationError(EndbError):
    """Raised when a store cannot be built from its options."""


class BackendError(EndbError):
    """Raised when an adapter operation fails."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        self.detail = detail
        msg = f"Backend error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)

