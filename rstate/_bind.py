from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Mapping, TypeVar, Union, overload

from ._errors import ConfigurationError


__all__ = (
    "ActionCreator",

    "bind_action_creators",
)


A = TypeVar("A")
R = TypeVar("R")


ActionCreator = Callable[..., A]


def _bind_action_creator(
    action_creator: Callable[..., A],
    dispatch: Callable[[A], R]
) -> Callable[..., R]:
    @wraps(action_creator)
    def bound(*args: Any, **kwargs: Any) -> R:
        return dispatch(action_creator(*args, **kwargs))

    return bound


def _public_members(source: Any) -> Mapping[str, Any]:
    return {
        name: value
        for name, value in vars(source).items()
        if not name.startswith("_")
    }


@overload
def bind_action_creators(
    action_creators: Callable[..., A],
    dispatch: Callable[[A], R]
) -> Callable[..., R]:
    ...


@overload
def bind_action_creators(
    action_creators: Any,
    dispatch: Callable[[Any], R]
) -> dict[str, Callable[..., R]]:
    ...


def bind_action_creators(
    action_creators: Any,
    dispatch: Callable[[Any], R]
) -> Union[Callable[..., R], dict[str, Callable[..., R]]]:
    """Wrap action creators so that calling them dispatches their result.

    A single callable gives back a single bound callable. A mapping, module
    or namespace gives back a dict with the same keys; values that are not
    callable are left out. Private names of non-mapping sources are
    skipped.
    """

    if callable(action_creators):
        return _bind_action_creator(action_creators, dispatch)

    if isinstance(action_creators, Mapping):
        source = action_creators
    elif action_creators is not None and hasattr(action_creators, "__dict__"):
        source = _public_members(action_creators)
    else:
        received = (
            "None" if action_creators is None
            else type(action_creators).__name__
        )

        raise ConfigurationError(
            "bind_action_creators expected a mapping, a namespace or a "
            f"function, instead received {received}."
        )

    bound_action_creators: dict[str, Callable[..., R]] = {}

    for key, action_creator in source.items():
        if callable(action_creator):
            bound_action_creators[key] = _bind_action_creator(
                action_creator,
                dispatch
            )

    return bound_action_creators
