"""Namespace prefixing for logical keys."""

from __future__ import annotations

SEPARATOR = ":"


def add_key_prefix(namespace: str, key: str) -> str:
    return f"{namespace}{SEPARATOR}{key}"


def remove_key_prefix(namespace: str, key: str) -> str:
    """Strip ``"<namespace>:"`` from *key*.

    Only the first occurrence is removed, wherever it sits in the key, so a
    logical key that itself contains ``"<namespace>:"`` comes back altered
    when the stored key does not start with the prefix.
    """
    return key.replace(f"{namespace}{SEPARATOR}", "", 1)


def key_prefix(namespace: str) -> str:
    """Return the prefix shared by every stored key of *namespace*."""
    return f"{namespace}{SEPARATOR}"
