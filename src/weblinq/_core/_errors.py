from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when an operator receives an argument it cannot work with.

    Always raised before the source is iterated.

    Args:
        name (str): Name of the offending parameter.
        reason (str): Human readable description of the problem.
    """

    name: str

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"invalid argument `{name}`: {reason}")


def iter_source[T](source: Iterable[T] | None, name: str = "source") -> Iterator[T]:
    """Return the single iterator an operator will pull from.

    `iter()` is called exactly once on **source**.
    """
    if source is None:
        raise InvalidArgumentError(name, "expected an iterable, got None")
    try:
        return iter(source)
    except TypeError:
        msg = f"expected an iterable, got {type(source).__name__}"
        raise InvalidArgumentError(name, msg) from None


def check_callable[F: Callable[..., Any]](func: F | None, name: str) -> F:
    if func is None:
        raise InvalidArgumentError(name, "expected a callable, got None")
    if not callable(func):
        msg = f"expected a callable, got {type(func).__name__}"
        raise InvalidArgumentError(name, msg)
    return func


def check_positive(value: int, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentError(name, "expected an int, got bool")
    try:
        index = operator.index(value)
    except TypeError:
        msg = f"expected an int, got {type(value).__name__}"
        raise InvalidArgumentError(name, msg) from None
    if index <= 0:
        raise InvalidArgumentError(name, f"expected a positive int, got {index}")
    return index
