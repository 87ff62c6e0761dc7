from __future__ import annotations

from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, field_validator

from ._errors import InvalidActionError


__all__ = (
    "Action",
    "ActionLike",
    "ActionTypes",

    "get_action_type",
    "validate_action"
)


class ActionTypes:
    """Action types reserved by the store.

    Reducers must return the current state for any action type they do not
    recognize, and their own initial state when the current state is
    ``None``. Do not dispatch these types from application code.
    """

    INIT = "@@rstate/INIT"


class Action(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    type: Any

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Action type may not be None")

        return value


ActionLike = Union[Mapping[str, Any], BaseModel]


def get_action_type(action: ActionLike) -> Any:
    if isinstance(action, Mapping):
        return action.get("type")

    return getattr(action, "type", None)


def validate_action(action: Any) -> None:
    if not isinstance(action, (Mapping, BaseModel)):
        raise InvalidActionError(
            "Actions must be plain records (a mapping or a pydantic model), "
            f"instead received {type(action).__name__}. "
            "Use custom middleware for async actions."
        )

    if get_action_type(action) is None:
        raise InvalidActionError(
            'Actions may not have an undefined "type" property. '
            "Have you misspelled a constant?"
        )
