"""Ordered observer list for state-change notifications."""
from __future__ import annotations

from tick_machine.types import State, StateChangedHandler, require


class StateChangedEvent:
    """Synchronous observer list invoked with ``(previous, new)``.

    Handlers run in subscription order on the caller's thread. Exceptions
    raised by a handler propagate to whoever triggered the change.
    """

    def __init__(self) -> None:
        self._handlers: list[StateChangedHandler] = []

    def subscribe(self, handler: StateChangedHandler) -> None:
        require(handler, "handler")
        self._handlers.append(handler)

    def unsubscribe(self, handler: StateChangedHandler) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def notify(self, previous: State, new: State) -> None:
        for handler in list(self._handlers):
            handler(previous, new)

    def clear(self) -> None:
        self._handlers.clear()

    def __len__(self) -> int:
        return len(self._handlers)
