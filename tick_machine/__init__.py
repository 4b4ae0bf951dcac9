"""tick-machine - Finite state machine runtime for per-tick behaviour."""
from __future__ import annotations

from tick_machine.machine import StateMachine
from tick_machine.observers import StateChangedEvent
from tick_machine.predicates import (
    AndPredicate,
    FuncPredicate,
    OrPredicate,
    Predicate,
    as_predicate,
)
from tick_machine.systems import make_machine_system
from tick_machine.transition import Transition
from tick_machine.types import BaseState, MissingArgumentError, State

__all__ = [
    "StateMachine",
    "State",
    "BaseState",
    "Transition",
    "Predicate",
    "FuncPredicate",
    "AndPredicate",
    "OrPredicate",
    "as_predicate",
    "StateChangedEvent",
    "MissingArgumentError",
    "make_machine_system",
]
