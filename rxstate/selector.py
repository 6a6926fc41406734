"""
rxstate Selector - Memoized Path Views over the Snapshot Stream
===============================================================

``select(*path)`` narrows the reducer's snapshot stream to the value living at
``path``:

1. **extract** the value at the path from each snapshot (``ABSENT`` if any
   segment is missing)
2. **distinct** drop a value equal to the one right before it
3. **filter** drop ``None`` and ``ABSENT``
4. **replay** share the result, remembering the latest value for late
   subscribers

Views are created on first request and cached under the normalised path, so
``select("a", "b")`` and ``select(["a", "b"])`` share one computation. Each
view is connected as soon as it is created and stays connected for the life
of the selector; every snapshot is therefore extracted exactly once per
distinct path, no matter how many observers the view has.

The empty path is the whole state: ``select()`` returns the reducer's stream
itself, without deduplication or filtering.

A path that never resolves is not an error. Its view simply stays silent until
some snapshot populates it.
"""

import logging
import threading
from typing import Any, Dict, Optional

from rx import operators as ops
from rx.core import Observable
from rx.disposable import Disposable
from rx.scheduler import ImmediateScheduler

from .config import ContainerConfig
from .errors import ContainerDisposedError
from .paths import Path, extract, is_present, normalize_path
from .reducer import StateReducer


class PathSelector:
    """Creates and caches path views on top of a StateReducer."""

    def __init__(
        self, reducer: StateReducer, config: Optional[ContainerConfig] = None
    ) -> None:
        self._reducer = reducer
        self._config = config or reducer.config
        self._views: Dict[Path, Observable] = {}
        self._connections: Dict[Path, Disposable] = {}
        self._lock = threading.RLock()

    def select(self, *path: Any) -> Observable:
        """
        Observable of the value at ``path``.

        Accepts segments as arguments (``select("some", "value")``) or as one
        list/tuple (``select(["some", "value"])``).

        Raises:
            ContainerDisposedError: If the underlying reducer has been disposed.
        """
        key = normalize_path(*path)
        with self._lock:
            if self._reducer.disposed:
                raise ContainerDisposedError(
                    f"Container '{self._config.name}' has been disposed"
                )
            if not key:
                return self._reducer.observe()

            view = self._views.get(key)
            if view is not None:
                logging.debug(f"[{self._config.name}] reusing view for {key!r}")
                return view
            return self._create_view(key)

    def _create_view(self, key: Path) -> Observable:
        connectable = self._reducer.observe().pipe(
            ops.map(lambda state: extract(state, key)),
            ops.distinct_until_changed(comparer=self._config.comparer),
            ops.filter(is_present),
            # Deliver on the caller's stack, even inside a running trampoline
            ops.replay(buffer_size=1, scheduler=ImmediateScheduler()),
        )
        view = connectable.pipe(ops.as_observable())
        self._views[key] = view
        self._connections[key] = connectable.connect()
        logging.debug(f"[{self._config.name}] created view for {key!r}")
        return view

    def dispose(self) -> None:
        """Disconnect every cached view and forget it."""
        with self._lock:
            for connection in self._connections.values():
                connection.dispose()
            count = len(self._views)
            self._connections.clear()
            self._views.clear()
        logging.debug(f"[{self._config.name}] disposed {count} view(s)")

    def __contains__(self, path: Any) -> bool:
        return normalize_path(path) in self._views

    def __len__(self) -> int:
        return len(self._views)
