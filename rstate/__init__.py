from ._action import (
    Action,
    ActionLike,
    ActionTypes,
    get_action_type,
    validate_action
)
from ._bind import ActionCreator, bind_action_creators
from ._compose import compose
from ._errors import (
    ConfigurationError,
    InvalidActionError,
    InvalidOperationError,
    ReentrancyError,
    StoreError
)
from ._reducer import Reducer, ReducerCallable
from ._store import (
    Dispatch,
    Enhancer,
    Listener,
    Store,
    StoreCreator,
    StoreObservable,
    Subscription,
    SupportsObservable,
    Unsubscribe,
    create_store
)


__all__ = (
    "Action",
    "ActionCreator",
    "ActionLike",
    "ActionTypes",
    "ConfigurationError",
    "Dispatch",
    "Enhancer",
    "InvalidActionError",
    "InvalidOperationError",
    "Listener",
    "Reducer",
    "ReducerCallable",
    "ReentrancyError",
    "Store",
    "StoreCreator",
    "StoreError",
    "StoreObservable",
    "Subscription",
    "SupportsObservable",
    "Unsubscribe",

    "bind_action_creators",
    "compose",
    "create_store",
    "get_action_type",
    "validate_action"
)
