from __future__ import annotations

import itertools
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ._errors import check_positive

type _Materialized = tuple[Any, ...] | list[Any]


@dataclass(slots=True)
class Config:
    """Display settings shared by all wrappers.

    Only affects `__repr__` output, never the behavior of the operators.

    Attributes:
        max_items (int): Maximum number of elements shown before the repr is truncated with `...`.
    """

    max_items: int = 20

    def update(self, *, max_items: int | None = None) -> Config:
        """Update the settings in place.

        Args:
            max_items (int | None): New value for `max_items`, left untouched if `None`.

        Returns:
            Config: The updated configuration.

        Example:
        ```python
        >>> import weblinq as wl
        >>> cfg = wl.Config()
        >>> cfg.update(max_items=3)
        Config(max_items=3)

        ```
        """
        if max_items is not None:
            self.max_items = check_positive(max_items, "max_items")
        return self

    def iter_repr(self, v: Iterable[Any]) -> str:
        """Format the elements of an in-memory collection, without the surrounding parentheses.

        Lazy iterators are left as is, since formatting them would consume them.
        """
        match v:
            case tuple() | list():
                return _format_items(v, self.max_items)
            case _:
                return repr(v)


def _format_items(v: _Materialized, max_items: int) -> str:
    shown = tuple(itertools.islice(v, max_items))
    body = repr(shown)[1:-1]
    if len(v) > max_items:
        return f"{body.rstrip(',')}, ..."
    return body


_CONFIG = Config()


def get_config() -> Config:
    """Return the process-wide `Config` instance."""
    return _CONFIG
