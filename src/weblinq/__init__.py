"""Fluent, lazy sequence operators: early-stopping folds, adjacent grouping and fixed-size chunking."""

import logging

from ._core import Config, InvalidArgumentError, get_config
from ._eager import Seq, Vec
from ._lazy import Iter
from ._ops import aggregate_until, chunk_by_size, distribute, fold_until, group_adjacent
from ._option import NONE, Option, OptionUnwrapError, Some

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Config",
    "InvalidArgumentError",
    "Iter",
    "Option",
    "OptionUnwrapError",
    "Seq",
    "Some",
    "Vec",
    "aggregate_until",
    "chunk_by_size",
    "distribute",
    "fold_until",
    "get_config",
    "group_adjacent",
]
