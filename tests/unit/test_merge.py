"""Unit tests for shallow_merge."""

from dataclasses import dataclass

import pytest

from rxstate import InvalidUpdateError, shallow_merge


@pytest.mark.unit
def test_merge_overwrites_only_mentioned_fields():
    """Fields present in the partial replace the old ones, others are kept"""
    merged = shallow_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})

    assert merged == {"a": 1, "b": 3, "c": 4}


@pytest.mark.unit
def test_merge_replaces_nested_values_wholesale():
    """Nested mappings are replaced, not deep-merged"""
    merged = shallow_merge({"a": {"x": 1}, "b": 2}, {"a": {"y": 2}})

    assert merged == {"a": {"y": 2}, "b": 2}


@pytest.mark.unit
def test_merge_returns_new_value_and_leaves_input_untouched():
    """The previous state is never mutated"""
    state = {"a": 1}

    merged = shallow_merge(state, {"a": 2})

    assert merged is not state
    assert state == {"a": 1}


@pytest.mark.unit
def test_merge_with_empty_partial_still_returns_new_value():
    """An empty partial yields an equal but distinct state"""
    state = {"a": 1}

    merged = shallow_merge(state, {})

    assert merged == state
    assert merged is not state


@dataclass(frozen=True)
class Profile:
    name: str
    age: int


@pytest.mark.unit
def test_merge_dataclass_state_uses_replace():
    """Dataclass states are copied with the given fields replaced"""
    state = Profile("Alice", 30)

    merged = shallow_merge(state, {"age": 31})

    assert merged == Profile("Alice", 31)
    assert state.age == 30


@pytest.mark.unit
def test_merge_dataclass_rejects_unknown_fields():
    """Unknown fields on a dataclass state raise InvalidUpdateError"""
    with pytest.raises(InvalidUpdateError, match="'email'"):
        shallow_merge(Profile("Alice", 30), {"email": "a@example.com"})
