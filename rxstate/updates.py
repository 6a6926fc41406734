"""
rxstate Updates - Literal and Functional State Changes
======================================================

An update describes how the next state is derived from the current one. There
are exactly two kinds:

- **Patch**: a literal partial state. Its top-level fields overwrite the
  matching fields of the current state.
- **Transform**: a function of the current state returning such a partial.
  It is called exactly once, with the state as it is at the moment the update
  is applied, never with a stale snapshot.

Callers rarely build these by hand. ``submit`` accepts plain values and
normalises them with ``as_update``:

```python
submit({"count": 1})                          # Patch
submit(lambda s: {"count": s["count"] + 1})   # Transform
```

Mappings are recognised before callables, so an object that is both (a dict
subclass with ``__call__``, say) is always treated as a literal partial.

When the state is a dataclass, a transform may also return a whole instance
of the same class, e.g. ``lambda s: s`` or ``lambda s: replace(s, theme="dark")``.
"""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Union

from .errors import InvalidUpdateError

PartialState = Mapping


@dataclass(frozen=True)
class Patch:
    """Literal partial state."""

    values: PartialState

    def resolve(self, state: Any) -> PartialState:
        return self.values


@dataclass(frozen=True)
class Transform:
    """Partial state computed from the current state."""

    func: Callable[[Any], PartialState]

    def resolve(self, state: Any) -> PartialState:
        partial = self.func(state)
        if type(partial) is type(state) and dataclasses.is_dataclass(partial):
            # A whole dataclass state stands for all of its init fields
            return {
                f.name: getattr(partial, f.name)
                for f in dataclasses.fields(partial)
                if f.init
            }
        if not isinstance(partial, Mapping):
            raise InvalidUpdateError(
                f"Transform {self.func!r} returned {type(partial).__name__}, expected a mapping"
            )
        return partial


Update = Union[Patch, Transform]


def as_update(obj: Any) -> Update:
    """
    Normalise caller input into an Update.

    Args:
        obj: A Patch or Transform, a mapping of top-level fields, or a function
            taking the current state and returning such a mapping.

    Returns:
        The corresponding Patch or Transform.

    Raises:
        InvalidUpdateError: If obj is none of the above.
    """
    if isinstance(obj, (Patch, Transform)):
        return obj
    if isinstance(obj, Mapping):
        return Patch(obj)
    if callable(obj):
        return Transform(obj)
    raise InvalidUpdateError(
        f"Cannot use {type(obj).__name__} as a state update; "
        "expected a mapping or a callable"
    )
