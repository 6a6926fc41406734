"""
rxstate - Reactive State Container on RxPY

A single mutable "current state" updated through a stream of updates and
observed through memoized, deduplicated path views.
"""

from .config import DEFAULT_CONFIG, ContainerConfig
from .container import StateContainer, setup
from .errors import ContainerDisposedError, InvalidUpdateError, StateError
from .merge import shallow_merge
from .paths import ABSENT, extract, normalize_path
from .reducer import StateReducer
from .selector import PathSelector
from .updates import Patch, Transform, Update, as_update

__all__ = [
    # Factory
    "setup",
    "StateContainer",
    # Components
    "StateReducer",
    "PathSelector",
    # Updates
    "Update",
    "Patch",
    "Transform",
    "as_update",
    "shallow_merge",
    # Paths
    "ABSENT",
    "extract",
    "normalize_path",
    # Configuration
    "ContainerConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "StateError",
    "InvalidUpdateError",
    "ContainerDisposedError",
]
