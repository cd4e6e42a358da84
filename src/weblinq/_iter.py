from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Concatenate, Self

import cytoolz as cz

from . import _ops
from ._core import CommonBase, get_config

if TYPE_CHECKING:
    from ._eager import Seq
    from ._lazy import Iter


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class CommonMethods[T](CommonBase[Iterable[T]]):
    """Terminal methods shared by `Iter`, `Seq` and `Vec`."""

    _inner: Iterable[T]

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def _eager[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], tuple[U, ...]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Seq[U]:
        from ._eager import Seq

        def _(data: Iterable[T]) -> Seq[U]:
            return Seq(factory(data, *args, **kwargs))

        return self.into(_)

    def _iter[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        from ._lazy import Iter

        def _(data: Iterable[T]) -> Iter[U]:
            return Iter(factory(data, *args, **kwargs))

        return self.into(_)

    def eq(self, other: Self) -> bool:
        """Check if two Iterables are equal based on their data.

        Note:
            This will consume any `Iter` instances involved in the comparison (**self** and/or **other**).

        Args:
            other (Self): Another instance of `Iter[T]|Seq[T]|Vec[T]` to compare against.

        Returns:
            bool: True if the underlying data are equal, False otherwise.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Iter((1, 2, 3)).eq(wl.Iter((1, 2, 3)))
        True
        >>> wl.Seq((1, 2, 3)).eq(wl.Vec([1, 2]))
        False

        ```
        """
        return tuple(self._inner) == tuple(other._inner)

    def fold[A](self, seed: A, combine: Callable[[A, T], A]) -> A:
        """Fold every element into an accumulator, from left to right.

        Args:
            seed (A): Initial accumulated value.
            combine (Callable[[A, T], A]): Function merging an element into the accumulated value.

        Returns:
            A: The accumulated value, **seed** if there is no element.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Seq((1, 2, 3)).fold(10, lambda acc, x: acc + x)
        16

        ```
        """

        def _fold(data: Iterable[T]) -> A:
            return functools.reduce(combine, data, seed)

        return self.into(_fold)

    def fold_until[A](
        self,
        seed: A,
        combine: Callable[[A, T], A],
        stop: Callable[[A], bool],
    ) -> A:
        """Fold elements into an accumulator, until **stop** holds on the accumulated value.

        See `weblinq.fold_until` for the exact semantics.

        Args:
            seed (A): Initial accumulated value.
            combine (Callable[[A, T], A]): Function merging an element into the accumulated value.
            stop (Callable[[A], bool]): Predicate over the accumulated value ending the fold.

        Returns:
            A: The accumulated value.

        Example:
        ```python
        >>> import weblinq as wl
        >>> wl.Iter.from_count(1).fold_until(0, lambda acc, x: acc + x, lambda acc: acc > 10)
        15
        >>> wl.Seq((1, 2)).fold_until(0, lambda acc, x: acc + x, lambda acc: acc > 10)
        3

        ```
        """
        return self.into(_ops.fold_until, seed, combine, stop)

    def reduce(self, func: Callable[[T, T], T]) -> T:
        """Apply a function of two arguments cumulatively to the items of an iterable, from left to right.

        Args:
            func (Callable[[T, T], T]): Function to apply cumulatively to the items of the iterable.

        Returns:
            T: Single value resulting from cumulative reduction.

        ```python
        >>> import weblinq as wl
        >>> wl.Seq((1, 2, 3)).reduce(lambda a, b: a + b)
        6

        ```
        """

        def _reduce(data: Iterable[T]) -> T:
            return functools.reduce(func, data)

        return self.into(_reduce)

    def first(self) -> T:
        """Return the first element.

        ```python
        >>> import weblinq as wl
        >>> wl.Seq((9,)).first()
        9

        ```
        """
        return self.into(cz.itertoolz.first)

    def last(self) -> T:
        """Return the last element.

        ```python
        >>> import weblinq as wl
        >>> wl.Seq((7, 8, 9)).last()
        9

        ```
        """
        return self.into(cz.itertoolz.last)

    def length(self) -> int:
        """Return the length of the Iterable.

        Like the builtin len but works on lazy sequences.

        Returns:
            int: The count of elements.

        ```python
        >>> import weblinq as wl
        >>> wl.Iter((1, 2)).length()
        2

        ```
        """
        return self.into(cz.itertoolz.count)
