from ._config import Config, get_config
from ._depreciation import deprecated
from ._errors import (
    InvalidArgumentError,
    check_callable,
    check_positive,
    iter_source,
)
from ._main import CommonBase, Pipeable

__all__ = [
    "CommonBase",
    "Config",
    "InvalidArgumentError",
    "Pipeable",
    "check_callable",
    "check_positive",
    "iter_source",
    "deprecated",
    "get_config",
]
