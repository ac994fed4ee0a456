"""Nested-path access into decoded values.

Paths address a field inside nested dicts and lists using dotted and
bracketed segments::

    "a.b[0].c"      -> ["a", "b", "0", "c"]
    'a["x.y"].z'    -> ["a", "x.y", "z"]

Segments are always strings; a segment made only of digits addresses a list
index when the container is a list.
"""

from __future__ import annotations

import re
from typing import Any

_SEGMENT = re.compile(
    r"""
    \[(?P<index>-?\d+)\]                      # [0]
    | \[(?P<quote>["'])(?P<quoted>.*?)(?P=quote)\]   # ["x.y"] or ['x.y']
    | (?P<name>[^.\[\]]+)                     # plain name
    """,
    re.VERBOSE,
)

_MISSING = object()


def to_path(path: str) -> list[str]:
    """Split a path expression into its segments."""
    segments: list[str] = []
    for match in _SEGMENT.finditer(path):
        if match.group("index") is not None:
            segments.append(match.group("index"))
        elif match.group("quote") is not None:
            segments.append(match.group("quoted"))
        else:
            segments.append(match.group("name"))
    return segments


def _is_index(segment: str) -> bool:
    return segment.isdigit()


def _child(container: Any, segment: str) -> Any:
    if isinstance(container, dict):
        return container.get(segment, _MISSING)
    if isinstance(container, list) and _is_index(segment):
        index = int(segment)
        if index < len(container):
            return container[index]
    return _MISSING


def _lookup(data: Any, path: str) -> Any:
    segments = to_path(path)
    if not segments:
        return _MISSING
    current = data
    for segment in segments:
        current = _child(current, segment)
        if current is _MISSING:
            break
    return current


def get_path(data: Any, path: str, default: Any = None) -> Any:
    """Return the value at *path* inside *data*, or *default* when missing."""
    value = _lookup(data, path)
    return default if value is _MISSING else value


def has_path(data: Any, path: str) -> bool:
    """Return ``True`` if every segment of *path* exists inside *data*."""
    return _lookup(data, path) is not _MISSING


def _assign(container: dict[str, Any] | list[Any], segment: str, value: Any) -> None:
    if isinstance(container, dict):
        container[segment] = value
        return
    index = int(segment)
    if index >= len(container):
        container.extend([None] * (index + 1 - len(container)))
    container[index] = value


def set_path(data: Any, path: str, value: Any) -> Any:
    """Set *value* at *path* inside *data*, creating containers as needed.

    Missing or non-container intermediates are replaced by a list when the
    following segment is an index and by a dict otherwise.  *data* is
    mutated in place and returned; a *data* that is not a dict or list is
    returned unchanged.

    A non-index segment addressing a list cannot be stored, so the write
    stops there and *data* is returned as it was.
    """
    if not isinstance(data, dict | list):
        return data
    segments = to_path(path)
    if not segments:
        return data

    current: dict[str, Any] | list[Any] = data
    for segment, following in zip(segments, segments[1:]):
        if isinstance(current, list) and not _is_index(segment):
            return data
        child = _child(current, segment)
        if not isinstance(child, dict | list):
            child = [] if _is_index(following) else {}
            _assign(current, segment, child)
        current = child
    if isinstance(current, list) and not _is_index(segments[-1]):
        return data
    _assign(current, segments[-1], value)
    return data


def unset_path(data: Any, path: str) -> bool:
    """Remove the field at *path* from *data*.

    Returns ``True`` when the field was removed or did not exist, ``False``
    when *path* is empty.  A removed list item is replaced by ``None`` so the
    indexes of later items do not change.
    """
    segments = to_path(path)
    if not segments:
        return False
    parent = data
    for segment in segments[:-1]:
        parent = _child(parent, segment)
        if parent is _MISSING:
            return True

    last = segments[-1]
    if isinstance(parent, dict):
        parent.pop(last, None)
    elif isinstance(parent, list) and _is_index(last) and int(last) < len(parent):
        parent[int(last)] = None
    return True
