"""
Shared pytest fixtures and configuration for rxstate tests.
"""

import pytest

from rxstate import setup


@pytest.fixture
def container():
    """Provide a fresh container with a small nested state."""
    state = setup({"some": {"value": 0}, "count": 0, "name": "Alice"})
    yield state
    state.dispose()


@pytest.fixture
def record():
    """Subscribe a recording list to an observable and return the list."""
    subscriptions = []

    def _record(observable):
        values = []
        subscriptions.append(observable.subscribe(values.append))
        return values

    yield _record
    for subscription in subscriptions:
        subscription.dispose()
