"""Helpers shared by the SQL-family adapters."""

from __future__ import annotations

import re
from urllib.parse import SplitResult, unquote, urlsplit

from endb.exceptions import ConfigurationError

DEFAULT_TABLE = "endb"

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_identifier(name: str, kind: str = "table") -> str:
    """Return *name* if it is safe to interpolate into SQL as an identifier."""
    if not _IDENTIFIER.match(name):
        raise ConfigurationError(f"Invalid {kind} name '{name}'")
    return name


def split_uri(uri: str) -> SplitResult:
    """Split a connection URI, rejecting anything without a network location."""
    parts = urlsplit(uri)
    if not parts.hostname:
        raise ConfigurationError(f"Connection URI '{uri}' has no host")
    return parts


def database_name(parts: SplitResult) -> str | None:
    name = unquote(parts.path.lstrip("/"))
    return name or None
