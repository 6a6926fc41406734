"""
rxstate Container - Single Source of Truth with Path Subscriptions
==================================================================

``setup`` wires one StateReducer and one PathSelector together and hands back
the three operations callers need:

```python
from rxstate import setup

submit, observe_full, select = setup({"some": {"value": 0}})

select("some", "value").subscribe(print)     # prints 0

submit(lambda s: s)                                          # nothing, value unchanged
submit(lambda s: {"some": {"value": s["some"]["value"] + 1}})  # prints 1
```

The returned StateContainer can also be used directly, including as a
context manager that disposes the container on exit:

```python
with setup({"count": 0}) as state:
    state.select("count").subscribe(print)
    state.submit({"count": 1})
```
"""

from typing import Any, Generic, Iterator, Optional, TypeVar

from rx.core import Observable

from .config import DEFAULT_CONFIG, ContainerConfig
from .reducer import StateReducer
from .selector import PathSelector

S = TypeVar("S")


class StateContainer(Generic[S]):
    """A reducer plus its path selector, bound to one private state."""

    def __init__(self, initial_state: S, config: Optional[ContainerConfig] = None):
        self._config = config or DEFAULT_CONFIG
        self._reducer: StateReducer[S] = StateReducer(initial_state, self._config)
        self._selector = PathSelector(self._reducer, self._config)

    @property
    def config(self) -> ContainerConfig:
        return self._config

    def submit(self, update: Any) -> None:
        """Apply a partial (mapping) or a function of the current state."""
        self._reducer.submit(update)

    def observe_full(self) -> Observable:
        """Replayed stream of whole-state snapshots."""
        return self._reducer.observe()

    def select(self, *path: Any) -> Observable:
        """Deduplicated, non-null stream of the value at ``path``."""
        return self._selector.select(*path)

    def dispose(self) -> None:
        # Completing the reducer first lets open views complete as well
        self._reducer.dispose()
        self._selector.dispose()

    def __enter__(self) -> "StateContainer[S]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.dispose()

    def __iter__(self) -> Iterator[Any]:
        return iter((self.submit, self.observe_full, self.select))

    def __repr__(self) -> str:
        return (
            f"StateContainer({self._config.name!r}, "
            f"submitted={self._reducer.submitted}, views={len(self._selector)})"
        )


def setup(initial_state: S, config: Optional[ContainerConfig] = None) -> StateContainer[S]:
    """
    Create a state container.

    Args:
        initial_state: The first state value, replayed to early subscribers.
        config: Optional ContainerConfig; defaults to DEFAULT_CONFIG.

    Returns:
        A StateContainer, which also unpacks into ``submit, observe_full, select``.
    """
    return StateContainer(initial_state, config)
