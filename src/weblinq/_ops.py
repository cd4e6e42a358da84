"""Sequence operators over plain Python iterables.

Every operator validates its arguments when called, and only then touches the source.

The lazy operators are explicit pull-based state machines: the source is only advanced when the consumer asks for the next output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from enum import Enum, auto

import more_itertools as mit

from ._core import check_callable, check_positive, deprecated, iter_source
from ._option import NONE, Option, Some

logger = logging.getLogger(__name__)


def _advance[T](it: Iterator[T]) -> Option[T]:
    try:
        return Some(next(it))
    except StopIteration:
        return NONE


def fold_until[T, A](
    source: Iterable[T],
    seed: A,
    combine: Callable[[A, T], A],
    stop: Callable[[A], bool],
) -> A:
    """Fold **source** into **seed** with **combine**, stopping as soon as **stop** holds on the accumulated value.

    **stop** is checked after each call to **combine**, never on the seed alone.

    Once it returns `True`, no further element is pulled from **source**, so an infinite source is fine as long as **stop** eventually holds.

    If **source** is empty, **seed** is returned and neither callable is invoked.

    Args:
        source (Iterable[T]): Elements to fold.
        seed (A): Initial accumulated value.
        combine (Callable[[A, T], A]): Function merging an element into the accumulated value.
        stop (Callable[[A], bool]): Predicate over the accumulated value ending the fold.

    Returns:
        A: The accumulated value.

    Raises:
        InvalidArgumentError: If **source** is not iterable, or **combine**/**stop** is not callable.

    A typical use is draining a paginated API, where the number of pages is only known after the first call:
    ```python
    >>> import itertools
    >>> import weblinq as wl
    >>> pages = {0: ["a", "b"], 1: ["c"], 2: []}
    >>> wl.fold_until(
    ...     itertools.count(),
    ...     [],
    ...     lambda acc, page: acc + pages[page],
    ...     lambda acc: len(acc) >= 3,
    ... )
    ['a', 'b', 'c']
    >>> wl.fold_until([], 10, lambda acc, x: acc + x, lambda acc: True)
    10

    ```
    """
    check_callable(combine, "combine")
    check_callable(stop, "stop")
    it = iter_source(source)

    result = seed
    consumed = 0
    for element in it:
        result = combine(result, element)
        consumed += 1
        if stop(result):
            logger.debug("fold stopped early after %d element(s)", consumed)
            break
    return result


@deprecated("fold_until")
def aggregate_until[T, A](
    source: Iterable[T],
    seed: A,
    combine: Callable[[A, T], A],
    stop: Callable[[A], bool],
) -> A:
    """Former name of `fold_until`."""
    return fold_until(source, seed, combine, stop)


class _State(Enum):
    NOT_STARTED = auto()
    ACCUMULATING = auto()
    DONE = auto()


class GroupAdjacent[T](Iterator[tuple[T, ...]]):
    """Iterator over the contiguous runs of a source, see `group_adjacent`."""

    __slots__ = ("_adjacent", "_group", "_previous", "_source", "_state")

    def __init__(
        self, source: Iterable[T], adjacent: Callable[[T, T], bool]
    ) -> None:
        self._adjacent = check_callable(adjacent, "adjacent")
        self._source = iter_source(source)
        self._state = _State.NOT_STARTED
        self._group: list[T] = []
        self._previous: Option[T] = NONE

    def __next__(self) -> tuple[T, ...]:
        try:
            return self._step()
        except StopIteration:
            raise
        except BaseException:
            self._finish()
            raise

    def _step(self) -> tuple[T, ...]:
        match self._state:
            case _State.DONE:
                raise StopIteration
            case _State.NOT_STARTED:
                first = _advance(self._source)
                if first.is_none():
                    self._finish()
                    raise StopIteration
                self._open(first.unwrap())
            case _State.ACCUMULATING:
                pass

        while (item := _advance(self._source)).is_some():
            current = item.unwrap()
            previous = self._previous.unwrap()
            if self._matches(previous, current):
                self._group.append(current)
                self._previous = item
            else:
                group = tuple(self._group)
                self._open(current)
                return group

        group = tuple(self._group)
        self._finish()
        return group

    def _matches(self, previous: T, current: T) -> bool:
        try:
            return self._adjacent(previous, current)
        except StopIteration as exc:
            msg = "`adjacent` raised StopIteration"
            raise RuntimeError(msg) from exc

    def _open(self, first: T) -> None:
        self._group = [first]
        self._previous = Some(first)
        self._state = _State.ACCUMULATING

    def _finish(self) -> None:
        self._group = []
        self._previous = NONE
        self._state = _State.DONE


class ChunkBySize[T](Iterator[tuple[T, ...]]):
    """Iterator over the fixed-size chunks of a source, see `chunk_by_size`."""

    __slots__ = ("_size", "_source", "_state")

    def __init__(self, source: Iterable[T], size: int) -> None:
        self._size = check_positive(size, "size")
        self._source = iter_source(source)
        self._state = _State.ACCUMULATING

    def __next__(self) -> tuple[T, ...]:
        if self._state is _State.DONE:
            raise StopIteration

        chunk: list[T] = []
        try:
            while len(chunk) < self._size:
                item = _advance(self._source)
                if item.is_none():
                    self._state = _State.DONE
                    break
                chunk.append(item.unwrap())
        except BaseException:
            self._state = _State.DONE
            raise

        if not chunk:
            raise StopIteration
        return tuple(chunk)


def group_adjacent[T](
    source: Iterable[T], adjacent: Callable[[T, T], bool]
) -> Iterator[tuple[T, ...]]:
    """Lazily split **source** into runs of consecutive elements.

    Each element is compared with the element right before it, not with the first element of its group.

    If `adjacent(previous, current)` is `True`, **current** extends the open group, otherwise a new group starts with it.

    Args:
        source (Iterable[T]): Elements to group.
        adjacent (Callable[[T, T], bool]): Predicate receiving the previous and the current element.

    Returns:
        Iterator[tuple[T, ...]]: The groups, in source order.

    Raises:
        InvalidArgumentError: If **source** is not iterable, or **adjacent** is not callable.

    Example:
    ```python
    >>> import weblinq as wl
    >>> list(wl.group_adjacent([1, 2, 3, 10, 11, 20], lambda a, b: b - a == 1))
    [(1, 2, 3), (10, 11), (20,)]
    >>> list(wl.group_adjacent([], lambda a, b: True))
    []

    ```
    """
    return GroupAdjacent(source, adjacent)


def chunk_by_size[T](source: Iterable[T], size: int) -> Iterator[tuple[T, ...]]:
    """Lazily split **source** into consecutive chunks of **size** elements.

    The last chunk is shorter if the source length is not a multiple of **size**.

    Args:
        source (Iterable[T]): Elements to split.
        size (int): Number of elements per chunk, must be positive.

    Returns:
        Iterator[tuple[T, ...]]: The chunks, in source order.

    Raises:
        InvalidArgumentError: If **source** is not iterable, or **size** is not a positive int.

    Example:
    ```python
    >>> import weblinq as wl
    >>> list(wl.chunk_by_size([1, 2, 3, 4, 5], 2))
    [(1, 2), (3, 4), (5,)]
    >>> list(wl.chunk_by_size([1, 2, 3, 4], 2))
    [(1, 2), (3, 4)]

    ```
    """
    return ChunkBySize(source, size)


def distribute[T](source: Iterable[T], count: int) -> tuple[Iterator[T], ...]:
    """Deal the elements of **source** into **count** strided groups.

    Element at index `i` lands in group `i % count`.

    The groups are lazy and share a single pass over **source**.

    Args:
        source (Iterable[T]): Elements to distribute.
        count (int): Number of groups, must be positive.

    Returns:
        tuple[Iterator[T], ...]: Exactly **count** iterators.

    Raises:
        InvalidArgumentError: If **source** is not iterable, or **count** is not a positive int.

    Example:
    ```python
    >>> import weblinq as wl
    >>> [list(g) for g in wl.distribute([1, 2, 3, 4, 5, 6], 3)]
    [[1, 4], [2, 5], [3, 6]]

    ```
    """
    check_positive(count, "count")
    return tuple(mit.distribute(count, iter_source(source)))
