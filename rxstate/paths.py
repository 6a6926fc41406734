"""
Path extraction for selector views.

A path is a tuple of segments read one after another from the state:
``("some", "value")`` reaches ``state["some"]["value"]``. Missing segments do
not raise; the whole lookup yields ``ABSENT`` instead, which selector views
filter out together with ``None``.
"""

from collections.abc import Hashable, Mapping, Sequence
from typing import Any, Tuple

Path = Tuple[Hashable, ...]


# ============================================================================
# SENTINEL VALUES
# ============================================================================


class _ABSENT:
    """Sentinel for 'nothing at this path'."""

    def __repr__(self):
        return "ABSENT"

    def __bool__(self):
        return False


ABSENT = _ABSENT()


# ============================================================================
# PATH HANDLING
# ============================================================================


def normalize_path(*segments: Any) -> Path:
    """
    Build the canonical cache key for a path.

    Accepts both ``normalize_path("a", "b")`` and ``normalize_path(["a", "b"])``.
    """
    if len(segments) == 1 and isinstance(segments[0], (list, tuple)):
        segments = tuple(segments[0])
    for segment in segments:
        if not isinstance(segment, Hashable):
            raise TypeError(f"Path segment {segment!r} is not hashable")
    return tuple(segments)


def _step(value: Any, segment: Hashable) -> Any:
    if isinstance(value, Mapping):
        return value.get(segment, ABSENT)
    if (
        isinstance(segment, int)
        and isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
    ):
        try:
            return value[segment]
        except IndexError:
            return ABSENT
    if isinstance(segment, str):
        return getattr(value, segment, ABSENT)
    return ABSENT


def extract(state: Any, path: Path) -> Any:
    """Read the value at ``path`` in ``state``, or ABSENT if any segment is missing."""
    value = state
    for segment in path:
        if value is None or value is ABSENT:
            return ABSENT
        value = _step(value, segment)
    return value


def is_present(value: Any) -> bool:
    return value is not None and value is not ABSENT
