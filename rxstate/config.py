"""Container configuration."""

import operator
from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass
class ContainerConfig:
    """Container configuration parameters."""

    # Shown in log records so several containers can be told apart
    name: str = "state"
    # Equality used to suppress consecutive duplicates in path views
    comparer: Callable[[Any, Any], bool] = field(default=operator.eq)
    # Guard submit with a re-entrant lock
    thread_safe: bool = True


DEFAULT_CONFIG = ContainerConfig()
