"""Shallow merge of a partial into a state value."""

import dataclasses
from collections.abc import Mapping
from typing import Any

from .errors import InvalidUpdateError


def shallow_merge(state: Any, partial: Mapping) -> Any:
    """
    Return a new state with the top-level fields of ``partial`` applied.

    Nested values are replaced wholesale, never merged:

        >>> shallow_merge({"a": {"x": 1}, "b": 2}, {"a": {"y": 2}})
        {'a': {'y': 2}, 'b': 2}

    Mapping states produce a new dict. Dataclass instances produce a copy via
    ``dataclasses.replace``. ``state`` itself is never modified.
    """
    if dataclasses.is_dataclass(state) and not isinstance(state, type):
        names = {f.name for f in dataclasses.fields(state)}
        unknown = [key for key in partial if key not in names]
        if unknown:
            raise InvalidUpdateError(
                f"{type(state).__name__} has no field(s) {', '.join(map(repr, unknown))}"
            )
        return dataclasses.replace(state, **partial)

    merged = dict(state)
    merged.update(partial)
    return merged
