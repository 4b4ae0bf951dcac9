"""Shared types and protocols for tick-machine."""
from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class State(Protocol):
    """A unit of per-tick behaviour with enter/update/exit hooks.

    The machine never constructs or destroys states; it only holds references
    to them and compares them by identity.
    """

    def on_enter(self) -> None: ...
    def on_update(self, dt: float) -> None: ...
    def on_exit(self) -> None: ...


class BaseState:
    """Convenience base with no-op hooks. Override what you need."""

    def on_enter(self) -> None:
        pass

    def on_update(self, dt: float) -> None:
        pass

    def on_exit(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


Condition = Callable[[], bool]
StateChangedHandler = Callable[[State, State], None]


class MissingArgumentError(ValueError):
    """Raised when a required state, predicate or callback is None."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"{argument} must not be None")


def require(value: object, argument: str) -> None:
    if value is None:
        raise MissingArgumentError(argument)
