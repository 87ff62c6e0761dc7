from typing import Callable, Generic, TypeVar


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "Reducer",
    "ReducerCallable",
)


ReducerCallable = Callable[[S, A], S]


class Reducer(Generic[S, A]):
    """Optional base for class-based reducers.

    Any ``(state, action) -> state`` callable is a reducer; subclasses only
    implement ``apply`` and are called like a function.
    """

    def apply(self, state: S, action: A) -> S:
        raise NotImplementedError

    def __call__(self, state: S, action: A) -> S:
        return self.apply(state, action)
