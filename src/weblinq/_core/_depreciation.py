import warnings
from collections.abc import Callable
from functools import wraps


def deprecated[**P, R](replacement: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Mark a function as a deprecated alias of **replacement**.

    Each call emits a `DeprecationWarning` pointing at the caller, then forwards to the wrapped function.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        msg = f"`{func.__name__}` is deprecated, use `{replacement}` instead"

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            warnings.warn(msg, DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        return wrapper

    return decorator
