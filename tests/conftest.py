"""Shared fixtures for weblinq tests."""

from collections.abc import Callable, Iterable, Iterator

import pytest


class Tracked[T]:
    """Single-pass iterator recording how many elements were pulled from it."""

    __slots__ = ("_inner", "pulled")

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)
        self.pulled = 0

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        value = next(self._inner)
        self.pulled += 1
        return value


@pytest.fixture
def tracked() -> Callable[[Iterable[object]], Tracked[object]]:
    """Factory wrapping any iterable into a `Tracked` iterator."""
    return Tracked


class Passes[T]:
    """Re-iterable source counting how many times `__iter__` was called."""

    __slots__ = ("_data", "passes")

    def __init__(self, data: Iterable[T]) -> None:
        self._data = tuple(data)
        self.passes = 0

    def __iter__(self) -> Iterator[T]:
        self.passes += 1
        return iter(self._data)


@pytest.fixture
def passes() -> Callable[[Iterable[object]], Passes[object]]:
    """Factory wrapping any iterable into a `Passes` source."""
    return Passes
