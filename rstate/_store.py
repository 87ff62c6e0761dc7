from __future__ import annotations

import logging

from typing import (
    Any,
    Callable,
    Generic,
    Mapping,
    Optional,
    Protocol,
    TypeVar,
    runtime_checkable
)

from ._action import ActionLike, ActionTypes, validate_action
from ._errors import (
    ConfigurationError,
    InvalidOperationError,
    ReentrancyError
)
from ._reducer import ReducerCallable


__all__ = (
    "Dispatch",
    "Enhancer",
    "Listener",
    "Store",
    "StoreCreator",
    "StoreObservable",
    "Subscription",
    "SupportsObservable",
    "Unsubscribe",

    "create_store"
)


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger("rstate.store")


Dispatch = Callable[[A], A]
Listener = Callable[[], None]
Unsubscribe = Callable[[], None]


class Store(Generic[S, A]):
    """Read, dispatch and subscribe surface of a state container.

    Enhancers that wrap a store subclass this and delegate whatever they
    do not change to the inner store.
    """

    @property
    def is_dispatching(self) -> bool:
        raise NotImplementedError

    def get_state(self) -> Optional[S]:
        raise NotImplementedError

    def dispatch(self, action: A) -> A:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError

    def replace_reducer(self, next_reducer: ReducerCallable) -> None:
        raise NotImplementedError

    def observable(self) -> StoreObservable[S]:
        return StoreObservable(self)


StoreCreator = Callable[..., Store[Any, Any]]
Enhancer = Callable[[StoreCreator], StoreCreator]


@runtime_checkable
class SupportsObservable(Protocol):
    """Capability probed by reactive libraries to adapt a store."""

    def observable(self) -> Any:
        ...


class Subscription:
    def __init__(self, unsubscribe: Unsubscribe) -> None:
        self.unsubscribe = unsubscribe


_PRIMITIVES = (str, bytes, int, float, complex)


def _get_next(observer: Any) -> Optional[Callable[[Any], None]]:
    if isinstance(observer, Mapping):
        return observer.get("next")

    return getattr(observer, "next", None)


class StoreObservable(Generic[S]):
    """Minimal observable of state changes.

    ``next`` is looked up on every notification, so an observer may attach
    or detach it after subscribing.
    """

    def __init__(self, store: Store[S, Any]) -> None:
        self._store = store

    def subscribe(self, observer: Any) -> Subscription:
        # A bare callable is not an observer; it would never be notified.
        if (
            observer is None
            or isinstance(observer, _PRIMITIVES)
            or (callable(observer) and _get_next(observer) is None)
        ):
            raise InvalidOperationError(
                "Expected the observer to be an object, "
                f"instead received {type(observer).__name__}."
            )

        def observe_state() -> None:
            next_ = _get_next(observer)

            if next_ is not None:
                next_(self._store.get_state())

        observe_state()

        return Subscription(self._store.subscribe(observe_state))

    def observable(self) -> StoreObservable[S]:
        return self


class _DefaultStore(Store[S, A]):
    _reducer: ReducerCallable
    _state: Optional[S]

    # _current_listeners is the snapshot being notified; subscribe and
    # unsubscribe only touch _next_listeners. Both name the same list until
    # the first mutation after a snapshot.
    _current_listeners: list[Listener]
    _next_listeners: list[Listener]

    _is_dispatching: bool

    def __init__(
        self,
        reducer: ReducerCallable,
        preloaded_state: Optional[S] = None
    ) -> None:
        self._reducer = reducer
        self._state = preloaded_state

        self._current_listeners = []
        self._next_listeners = self._current_listeners

        self._is_dispatching = False

    def _ensure_can_mutate_next_listeners(self) -> None:
        if self._next_listeners is self._current_listeners:
            self._next_listeners = list(self._current_listeners)

    @property
    def is_dispatching(self) -> bool:
        return self._is_dispatching

    def get_state(self) -> Optional[S]:
        return self._state

    def subscribe(self, listener: Listener) -> Unsubscribe:
        if not callable(listener):
            raise InvalidOperationError(
                "Expected the listener to be a function, "
                f"instead received {type(listener).__name__}."
            )

        is_subscribed = True

        self._ensure_can_mutate_next_listeners()
        self._next_listeners.append(listener)

        def unsubscribe() -> None:
            nonlocal is_subscribed

            if not is_subscribed:
                return

            is_subscribed = False

            self._ensure_can_mutate_next_listeners()

            # Listeners are matched by identity, not equality.
            for index, registered in enumerate(self._next_listeners):
                if registered is listener:
                    del self._next_listeners[index]
                    break

        return unsubscribe

    def dispatch(self, action: A) -> A:
        validate_action(action)

        if self._is_dispatching:
            raise ReentrancyError("Reducers may not dispatch actions.")

        try:
            self._is_dispatching = True
            self._state = self._reducer(self._state, action)
        finally:
            self._is_dispatching = False

        listeners = self._current_listeners = self._next_listeners

        for listener in listeners:
            listener()

        return action

    def _dispatch_init(self) -> None:
        self.dispatch({"type": ActionTypes.INIT})  # type: ignore[arg-type]

    def replace_reducer(self, next_reducer: ReducerCallable) -> None:
        if not callable(next_reducer):
            raise ConfigurationError(
                "Expected the next reducer to be a function."
            )

        logger.debug("Replacing reducer with %r", next_reducer)

        self._reducer = next_reducer
        self._dispatch_init()


def create_store(
    reducer: ReducerCallable,
    preloaded_state: Any = None,
    enhancer: Optional[Enhancer] = None
) -> Store[Any, ActionLike]:
    """Create a store holding the state tree produced by ``reducer``.

    A callable second argument with no third argument is taken as the
    enhancer. An enhancer receives ``create_store`` itself and must return a
    function with the same ``(reducer, preloaded_state)`` signature.
    """

    if callable(preloaded_state) and enhancer is None:
        enhancer = preloaded_state
        preloaded_state = None

    if enhancer is not None:
        if not callable(enhancer):
            raise ConfigurationError("Expected the enhancer to be a function.")

        logger.debug("Delegating store creation to enhancer %r", enhancer)

        return enhancer(create_store)(reducer, preloaded_state)

    if not callable(reducer):
        raise ConfigurationError("Expected the reducer to be a function.")

    store: _DefaultStore[Any, ActionLike] = _DefaultStore(
        reducer,
        preloaded_state
    )

    store._dispatch_init()

    logger.debug("Created store with reducer %r", reducer)

    return store
