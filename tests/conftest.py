"""Shared test fixtures."""

from typing import Any

import pytest

from endb import Adapter, Element, Endb


@pytest.fixture
def db():
    return Endb()


@pytest.fixture
def shared():
    """One physical in-memory backend for several stores."""
    return {}


class FailingAdapter(Adapter):
    """Adapter whose every operation fails like a dropped connection."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    async def _fail(self, operation: str) -> Any:
        self.calls.append(operation)
        with self._reporting(operation):
            raise ConnectionError("connection reset")

    async def all(self) -> list[Element]:
        return await self._fail("all")

    async def clear(self) -> None:
        await self._fail("clear")

    async def delete(self, key: str) -> bool:
        return await self._fail("delete")

    async def get(self, key: str) -> Any:
        return await self._fail("get")

    async def has(self, key: str) -> bool:
        return await self._fail("has")

    async def set(self, key: str, value: Any) -> Any:
        return await self._fail("set")


class FalseAdapter(Adapter):
    """Adapter that reports failure through return values instead of raising."""

    def __init__(self) -> None:
        super().__init__()
        self.data: dict[str, Any] = {}

    async def all(self) -> list[Element]:
        return [Element(k, v) for k, v in self.data.items()]

    async def clear(self) -> None:
        self.data.clear()

    async def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None

    async def get(self, key: str) -> Any:
        return self.data.get(key)

    async def has(self, key: str) -> bool:
        return key in self.data

    async def set(self, key: str, value: Any) -> bool:
        self.data[key] = value
        return False


@pytest.fixture
def failing_adapter():
    return FailingAdapter()


@pytest.fixture
def false_adapter():
    return FalseAdapter()
