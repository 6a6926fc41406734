"""
rxstate Reducer - Ordered Fold of Updates into State Snapshots
==============================================================

The reducer owns the single current state. Every accepted update produces a
new snapshot:

    S0 = initial_state
    Sn = shallow_merge(Sn-1, resolve(update_n, Sn-1))

Snapshots are published through a ``BehaviorSubject``, which is exactly the
"multicast with a memory of one" the container needs: a subscriber attaching
at any time first receives the latest snapshot (the initial state if nothing
was submitted yet) and then every later one, in publication order.

The fold runs in ``submit`` rather than inside an ``ops.scan`` pipeline. An
exception raised by a transform has to reach the caller of ``submit`` and
leave the container usable, whereas an error inside an Rx operator would be
routed to ``on_error`` and terminate the stream for every observer.

Ordering
--------

``submit`` applies the update and fans the snapshot out to all observers
before returning. When an observer submits from inside its callback, the
nested update is applied at once (so its transform sees the latest state and
its errors reach the nested caller) but publication is queued until the
current fan-out completes. Every observer therefore sees the same global
order of snapshots.

If an observer raises, the queued snapshots are still published and the
first error is then re-raised from ``submit``. The replayed snapshot always
matches the state the next update will be resolved against.

Threads
-------

The read-modify-publish sequence runs under a re-entrant lock. Concurrent
``submit`` calls from several threads are serialised; a thread calling
``submit`` waits until the previous fan-out has finished.
"""

import logging
import threading
from collections import deque
from contextlib import nullcontext
from typing import Any, Deque, Generic, Optional, TypeVar

from rx import operators as ops
from rx.core import Observable
from rx.subject import BehaviorSubject

from .config import DEFAULT_CONFIG, ContainerConfig
from .errors import ContainerDisposedError
from .merge import shallow_merge
from .updates import as_update

S = TypeVar("S")


class StateReducer(Generic[S]):
    """
    Folds submitted updates into a replayed sequence of state snapshots.

    Example:
        ```python
        reducer = StateReducer({"count": 0})
        reducer.observe().subscribe(print)   # prints {'count': 0}

        reducer.submit({"count": 1})                            # {'count': 1}
        reducer.submit(lambda s: {"count": s["count"] + 1})     # {'count': 2}
        ```
    """

    def __init__(self, initial_state: S, config: Optional[ContainerConfig] = None):
        self._config = config or DEFAULT_CONFIG
        self._state = initial_state
        self._submitted = 0
        self._disposed = False
        self._lock = threading.RLock() if self._config.thread_safe else nullcontext()
        self._pending: Deque[S] = deque()
        self._is_publishing = False
        self._snapshots = BehaviorSubject(initial_state)
        self._stream: Observable = self._snapshots.pipe(ops.as_observable())
        logging.debug(f"[{self._config.name}] reducer created")

    @property
    def config(self) -> ContainerConfig:
        return self._config

    @property
    def submitted(self) -> int:
        """Number of updates accepted so far."""
        return self._submitted

    @property
    def disposed(self) -> bool:
        return self._disposed

    def submit(self, update: Any) -> None:
        """
        Apply an update and publish the resulting snapshot.

        Args:
            update: A mapping of top-level fields, a function of the current
                state returning such a mapping, or a Patch/Transform.

        Raises:
            InvalidUpdateError: If the update (or what a transform returns) is
                not a mapping. The state is left unchanged.
            ContainerDisposedError: If the reducer has been disposed.
        """
        update = as_update(update)
        with self._lock:
            if self._disposed:
                raise ContainerDisposedError(
                    f"Container '{self._config.name}' has been disposed"
                )
            # Nothing is committed unless resolve and merge both succeed
            next_state = shallow_merge(self._state, update.resolve(self._state))
            self._state = next_state
            self._submitted += 1
            logging.debug(
                f"[{self._config.name}] applied update #{self._submitted} "
                f"({type(update).__name__})"
            )
            self._pending.append(next_state)
            self._publish()

    def _publish(self) -> None:
        if self._is_publishing:
            return

        self._is_publishing = True
        error: Optional[Exception] = None
        try:
            while self._pending:
                try:
                    self._snapshots.on_next(self._pending.popleft())
                except Exception as exc:
                    # Keep the published snapshot in step with the folded state
                    if error is None:
                        error = exc
        finally:
            self._is_publishing = False

        if error is not None:
            raise error

    def observe(self) -> Observable:
        """Latest snapshot followed by every later one."""
        return self._stream

    def dispose(self) -> None:
        """Complete the snapshot stream. Later submits raise ContainerDisposedError."""
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            self._pending.clear()
            self._snapshots.on_completed()
            logging.debug(
                f"[{self._config.name}] reducer disposed after {self._submitted} updates"
            )

    def __repr__(self) -> str:
        return (
            f"StateReducer({self._config.name!r}, submitted={self._submitted}, "
            f"disposed={self._disposed})"
        )
