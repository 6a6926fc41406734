"""
Exceptions raised by rxstate.

Errors coming out of user code (transform functions, observer callbacks) are
never wrapped; they reach the caller of ``submit`` unchanged.
"""

# ============================================================================
# EXCEPTIONS
# ============================================================================


class StateError(Exception):
    """Base class for rxstate errors."""

    pass


class InvalidUpdateError(StateError, TypeError):
    """Update is neither a mapping nor a callable, or resolved to a non-mapping."""

    pass


class ContainerDisposedError(StateError, RuntimeError):
    """Update submitted to a disposed container."""

    pass
