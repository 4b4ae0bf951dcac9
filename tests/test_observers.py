"""Unit tests for StateChangedEvent."""
from __future__ import annotations

import pytest

from tick_machine import BaseState, MissingArgumentError, StateChangedEvent


def test_subscribe_and_notify():
    """Subscribed handler receives (previous, new)."""
    event = StateChangedEvent()
    received = []
    a, b = BaseState(), BaseState()

    event.subscribe(lambda prev, new: received.append((prev, new)))
    event.notify(a, b)

    assert received == [(a, b)]


def test_notify_without_subscribers():
    """Notify with no handlers is a no-op (no error)."""
    StateChangedEvent().notify(BaseState(), BaseState())


def test_handlers_called_in_subscription_order():
    event = StateChangedEvent()
    order = []

    event.subscribe(lambda p, n: order.append("first"))
    event.subscribe(lambda p, n: order.append("second"))
    event.subscribe(lambda p, n: order.append("third"))
    event.notify(BaseState(), BaseState())

    assert order == ["first", "second", "third"]


def test_unsubscribe():
    event = StateChangedEvent()
    received = []

    def handler(prev, new):
        received.append(new)

    event.subscribe(handler)
    event.unsubscribe(handler)
    event.notify(BaseState(), BaseState())

    assert received == []
    assert len(event) == 0


def test_unsubscribe_unknown_handler_is_noop():
    event = StateChangedEvent()
    event.unsubscribe(lambda p, n: None)
    assert len(event) == 0


def test_handler_can_unsubscribe_itself_during_notify():
    event = StateChangedEvent()
    calls = []

    def once(prev, new):
        calls.append("once")
        event.unsubscribe(once)

    event.subscribe(once)
    event.subscribe(lambda p, n: calls.append("always"))

    event.notify(BaseState(), BaseState())
    event.notify(BaseState(), BaseState())

    assert calls == ["once", "always", "always"]


def test_handler_exception_propagates():
    event = StateChangedEvent()

    def boom(prev, new):
        raise RuntimeError("observer failed")

    event.subscribe(boom)
    with pytest.raises(RuntimeError, match="observer failed"):
        event.notify(BaseState(), BaseState())


def test_subscribe_none_raises():
    with pytest.raises(MissingArgumentError):
        StateChangedEvent().subscribe(None)


def test_clear():
    event = StateChangedEvent()
    event.subscribe(lambda p, n: None)
    event.subscribe(lambda p, n: None)
    assert len(event) == 2
    event.clear()
    assert len(event) == 0
