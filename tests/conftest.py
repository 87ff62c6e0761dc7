from typing import Any

import pytest


def counter(state: Any, action: Any) -> Any:
    if state is None:
        state = 0

    if action["type"] == "increment":
        return state + action.get("amount", 1)

    if action["type"] == "decrement":
        return state - 1

    return state


@pytest.fixture
def counter_reducer():
    return counter
