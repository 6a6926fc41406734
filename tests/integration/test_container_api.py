"""Integration tests for the setup() factory and StateContainer surface."""

import threading
from dataclasses import dataclass, field, replace
from typing import Dict

import pytest

from rxstate import ContainerConfig, ContainerDisposedError, StateContainer, setup


@pytest.mark.integration
def test_setup_unpacks_into_three_operations():
    submit, observe_full, select = setup({"a": 1})

    assert callable(submit)
    assert callable(observe_full)
    assert callable(select)


@pytest.mark.integration
def test_setup_returns_independent_containers(record):
    """Each container owns its own private state"""
    first = setup({"n": 0})
    second = setup({"n": 0})
    second_values = record(second.select("n"))

    first.submit({"n": 1})

    assert second_values == [0]


@pytest.mark.integration
def test_readme_example(record):
    """Submitting the state itself does not re-emit an unchanged path"""
    submit, _, select = setup({"some": {"value": 0}})
    values = record(select("some", "value"))

    submit(lambda state: state)
    submit(lambda state: {"some": {"value": state["some"]["value"] + 1}})

    assert values == [0, 1]


@pytest.mark.integration
def test_context_manager_disposes_on_exit(record):
    with setup({"n": 0}) as state:
        completed = []
        state.observe_full().subscribe(on_completed=lambda: completed.append(True))
        state.submit({"n": 1})

    assert completed == [True]
    with pytest.raises(ContainerDisposedError):
        state.submit({"n": 2})
    with pytest.raises(ContainerDisposedError):
        state.select("n")


@pytest.mark.integration
def test_dispose_completes_open_path_views():
    state = setup({"n": 0})
    completed = []
    state.select("n").subscribe(on_completed=lambda: completed.append(True))

    state.dispose()

    assert completed == [True]


@pytest.mark.integration
def test_repr_reports_updates_and_views():
    state = StateContainer({"a": 1}, ContainerConfig(name="app"))
    state.select("a")
    state.select("a")
    state.select("b")
    state.submit({"a": 2})

    assert repr(state) == "StateContainer('app', submitted=1, views=2)"


@dataclass(frozen=True)
class Settings:
    theme: str = "light"
    language: str = "en"
    extra: Dict[str, int] = field(default_factory=dict)


@pytest.mark.integration
def test_dataclass_state_is_supported(record):
    """Dataclass states merge with replace() and are readable by attribute path"""
    state = setup(Settings())
    themes = record(state.select("theme"))
    counts = record(state.select("extra", "count"))

    state.submit({"theme": "dark"})
    state.submit({"extra": {"count": 3}})
    state.submit(lambda s: {"language": "fr" if s.theme == "dark" else "de"})

    assert themes == ["light", "dark"]
    assert counts == [3]
    assert record(state.observe_full())[0] == Settings("dark", "fr", {"count": 3})


@pytest.mark.integration
def test_concurrent_submits_are_serialised(record):
    """Read-modify-publish is atomic across threads"""
    state = setup({"n": 0})
    seen = record(state.select("n"))
    workers, rounds = 8, 200

    def work():
        for _ in range(rounds):
            state.submit(lambda s: {"n": s["n"] + 1})

    threads = [threading.Thread(target=work) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert seen == list(range(workers * rounds + 1))


@pytest.mark.integration
def test_dataclass_state_accepts_identity_transform(record):
    """submit(lambda s: s) works for dataclass states and publishes a snapshot"""
    state = setup(Settings())
    snapshots = record(state.observe_full())
    themes = record(state.select("theme"))

    state.submit(lambda s: s)
    state.submit(lambda s: replace(s, theme="dark"))

    assert len(snapshots) == 3
    assert snapshots[-1] == Settings(theme="dark")
    assert themes == ["light", "dark"]
