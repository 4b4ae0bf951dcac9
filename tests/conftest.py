from __future__ import annotations

import pytest

from tick_machine import BaseState


class RecordingState(BaseState):
    """State that appends every hook call to a shared log."""

    def __init__(self, name: str, log: list[tuple[str, str]]) -> None:
        self.name = name
        self.log = log
        self.enters = 0
        self.exits = 0
        self.updates: list[float] = []

    def on_enter(self) -> None:
        self.enters += 1
        self.log.append((self.name, "enter"))

    def on_update(self, dt: float) -> None:
        self.updates.append(dt)
        self.log.append((self.name, "update"))

    def on_exit(self) -> None:
        self.exits += 1
        self.log.append((self.name, "exit"))

    def __repr__(self) -> str:
        return f"<{self.name}>"


class Counter:
    """Call-counting stub returning a fixed value."""

    def __init__(self, value: bool) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return self.value


@pytest.fixture
def log() -> list[tuple[str, str]]:
    return []


@pytest.fixture
def make_state(log):
    def _make(name: str) -> RecordingState:
        return RecordingState(name, log)

    return _make


@pytest.fixture
def make_counter():
    return Counter
