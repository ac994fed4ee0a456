"""Binary-safe JSON codec used to encode values before they reach an adapter.

Values are encoded with :mod:`json`.  ``bytes`` (and ``bytearray`` /
``memoryview``) become ``{"type": "Buffer", "data": "base64:<payload>"}``
objects and are turned back into ``bytes`` on decode, so binary payloads
survive any adapter that only stores text.
"""

from __future__ import annotations

import base64
import json
from typing import Any

BUFFER_TYPE = "Buffer"
BASE64_PREFIX = "base64:"


def _encode_default(value: Any) -> Any:
    if isinstance(value, bytes | bytearray | memoryview):
        raw = bytes(value)
        data = BASE64_PREFIX + base64.b64encode(raw).decode("ascii") if raw else ""
        return {"type": BUFFER_TYPE, "data": data}
    raise TypeError(f"Object of type {type(value).__name__} is not serializable")


def _decode_hook(obj: dict[str, Any]) -> Any:
    if obj.get("type") != BUFFER_TYPE or len(obj) != 2 or "data" not in obj:
        return obj
    data = obj["data"]
    if isinstance(data, str):
        if data.startswith(BASE64_PREFIX):
            return base64.b64decode(data[len(BASE64_PREFIX) :])
        return data.encode("utf-8")
    if isinstance(data, list) and all(isinstance(b, int) for b in data):
        return bytes(data)
    return obj


def stringify(value: Any) -> str:
    """Encode *value* as JSON text, keeping binary payloads intact."""
    return json.dumps(value, default=_encode_default, ensure_ascii=False)


def parse(data: str) -> Any:
    """Decode JSON text produced by :func:`stringify`."""
    return json.loads(data, object_hook=_decode_hook)
