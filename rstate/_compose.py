from functools import reduce
from typing import Any, Callable


__all__ = (
    "compose",
)


def _identity(arg: Any) -> Any:
    return arg


def _compose_pair(
    outer: Callable[..., Any],
    inner: Callable[..., Any]
) -> Callable[..., Any]:
    def composed(*args: Any, **kwargs: Any) -> Any:
        return outer(inner(*args, **kwargs))

    return composed


def compose(*functions: Callable[..., Any]) -> Callable[..., Any]:
    """Compose single-argument functions from right to left.

    ``compose(f, g, h)(*args)`` is ``f(g(h(*args)))``. Only the rightmost
    function may take more than one argument. With no functions the result
    is the identity function, with one it is that function.
    """

    if not functions:
        return _identity

    if len(functions) == 1:
        return functions[0]

    return reduce(_compose_pair, functions)
