from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, overload

from . import _ops
from ._iter import CommonMethods, convert_data
from ._option import NONE, Option, Some

if TYPE_CHECKING:
    from ._eager import Seq


class Iter[T](CommonMethods[T], Iterator[T]):
    """A superset around Python's built-in `Iterator` Protocol, providing chainable sequence operators.

    Implements the `Iterator` Protocol from `collections.abc`, so it can be used as a standard iterator.

    It's designed around lazy evaluation: lazy methods return a new `Iter` and only pull from the source when the result is consumed.

    Keep in mind that `Iter` instances are single-use; once exhausted, they cannot be reused or reset.

    If you need to reuse the data, consider collecting it into a `Seq` first with `.collect()`.

    Args:
        data (Iterable[T]): Any object that can be iterated over.
    """

    _inner: Iterator[T]

    __slots__ = ("_inner",)

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)  # pyright: ignore[reportIncompatibleVariableOverride]

    def __next__(self) -> T:
        return next(self._inner)

    def next(self) -> Option[T]:
        """Try to advance the iterator.

        Unlike the builtin `next`, exhaustion is reported as a value rather than an exception, and a `None` element stays distinguishable from the end of the data.

        Returns:
            Option[T]: `Some[T]` holding the next element, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import weblinq as wl
        >>> it = wl.Iter((1, None))
        >>> it.next()
        Some(value=1)
        >>> it.next()
        Some(value=None)
        >>> it.next()
        NONE

        ```
        """
        try:
            return Some(next(self._inner))
        except StopIteration:
            return NONE

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iterator` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.
            Be sure to use `Iter.take()` or `Iter.fold_until()` to bound the number of items pulled.

        Args:
            start (int): Starting value of the sequence. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Iter.from_count(10, 2).take(3).collect()
        Seq(10, 12, 14)

        ```
        """
        return Iter(itertools.count(start, step))

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an `Iter` from an `Iterable`, or from unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to wrap, or a single value.
            *more_data (U): Unpacked items to include, if **data** is not an Iterable.

        Returns:
            Iter[U]: A new Iter over the provided data.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Iter.from_(1, 2, 3).collect()
        Seq(1, 2, 3)

        ```
        """
        return Iter(convert_data(data, *more_data))

    def collect(self) -> Seq[T]:
        """Consume the iterator into an immutable `Seq`.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Iter(range(3)).collect()
        Seq(0, 1, 2)

        ```
        """
        return self._eager(tuple)

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply a function to each element.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Iter((1, 2)).map(lambda x: x + 1).collect()
        Seq(2, 3)

        ```
        """
        return self._iter(lambda data: map(func, data))

    def filter(self, func: Callable[[T], bool]) -> Iter[T]:
        """Keep only the elements for which **func** returns `True`.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Iter((1, 2, 3)).filter(lambda x: x > 1).collect()
        Seq(2, 3)

        ```
        """
        return self._iter(lambda data: filter(func, data))

    def take(self, n: int) -> Iter[T]:
        """Take the first **n** elements.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Iter((1, 2, 3)).take(2).collect()
        Seq(1, 2)

        ```
        """
        return self._iter(itertools.islice, n)

    def flatten[U](self: Iter[Iterable[U]]) -> Iter[U]:
        """Flatten one level of nesting.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Iter(((1, 2), (3,))).flatten().collect()
        Seq(1, 2, 3)

        ```
        """
        return self._iter(itertools.chain.from_iterable)

    def group_adjacent(self, adjacent: Callable[[T, T], bool]) -> Iter[Seq[T]]:
        """Lazily split the elements into runs of consecutive elements.

        **adjacent** receives the previous and the current element, and returns `True` if the current one belongs to the same run.

        The comparison is always made with the element right before, so a run can drift away from its first element.

        Args:
            adjacent (Callable[[T, T], bool]): Predicate receiving the previous and the current element.

        Returns:
            Iter[Seq[T]]: An iterator of runs, in source order.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Iter((1, 2, 3, 10, 11, 20)).group_adjacent(lambda a, b: b - a == 1).collect()
        Seq(Seq(1, 2, 3), Seq(10, 11), Seq(20,))
        >>> wl.Iter("aabca").group_adjacent(lambda a, b: a == b).map(lambda g: g.length()).collect()
        Seq(2, 1, 1, 1)

        ```
        """
        from ._eager import Seq

        return Iter(map(Seq, _ops.group_adjacent(self._inner, adjacent)))

    def chunk_by_size(self, size: int) -> Iter[Seq[T]]:
        """Lazily split the elements into chunks of **size** elements.

        The last chunk will be shorter if there are not enough elements.

        Args:
            size (int): Number of elements in each chunk, must be positive.

        Returns:
            Iter[Seq[T]]: An iterator of chunks, in source order.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Iter((1, 2, 3, 4, 5)).chunk_by_size(2).collect()
        Seq(Seq(1, 2), Seq(3, 4), Seq(5,))
        >>> wl.Iter.from_count().chunk_by_size(3).next().unwrap()
        Seq(0, 1, 2)

        ```
        """
        from ._eager import Seq

        return Iter(map(Seq, _ops.chunk_by_size(self._inner, size)))

    def distribute(self, count: int) -> Seq[Iter[T]]:
        """Deal the elements into **count** strided groups.

        Element at index `i` lands in group `i % count`.

        Args:
            count (int): Number of groups, must be positive.

        Returns:
            Seq[Iter[T]]: Exactly **count** lazy groups, sharing one pass over the data.

        Example:
        ```python
        >>> import weblinq as wl
        >>> groups = wl.Iter(range(7)).distribute(3)
        >>> groups.iter().map(lambda g: g.collect()).collect()
        Seq(Seq(0, 3, 6), Seq(1, 4), Seq(2, 5))

        ```
        """
        from ._eager import Seq

        return Seq(tuple(Iter(group) for group in _ops.distribute(self._inner, count)))

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Consume the Iterator by applying a function to each element.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Iter((1, 2)).for_each(print)
        1
        2

        ```
        """
        for v in self._inner:
            func(v)
