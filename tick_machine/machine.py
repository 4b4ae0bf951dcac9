"""StateMachine - current state, transition tables, and per-tick evaluation."""
from __future__ import annotations

import logging
from typing import Iterable

from tick_machine.observers import StateChangedEvent
from tick_machine.predicates import FuncPredicate, PredicateLike, as_predicate
from tick_machine.transition import Transition
from tick_machine.types import State, StateChangedHandler, require

logger = logging.getLogger(__name__)


class StateMachine:
    """Finite state machine driven externally once per tick.

    Source-specific transitions are checked before any-state transitions and
    at most one transition fires per ``update``. Within a list, registration
    order is priority. States are keyed by identity, so two distinct state
    objects that compare equal are still different states.
    """

    def __init__(self, start_state: State, *, name: str | None = None) -> None:
        require(start_state, "start_state")
        self._name = name
        # id(state) -> (state, transitions); the state reference keeps the id stable.
        self._transitions: dict[int, tuple[State, list[Transition]]] = {}
        self._any_transitions: list[Transition] = []
        self._state_changed = StateChangedEvent()
        self._current: State = start_state
        start_state.on_enter()

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def current_state(self) -> State:
        return self._current

    @property
    def state_changed(self) -> StateChangedEvent:
        return self._state_changed

    @property
    def any_transitions(self) -> tuple[Transition, ...]:
        return tuple(self._any_transitions)

    def transitions_from(self, state: State) -> tuple[Transition, ...]:
        entry = self._transitions.get(id(state))
        if entry is None:
            return ()
        return tuple(entry[1])

    def on_state_changed(self, handler: StateChangedHandler) -> None:
        self._state_changed.subscribe(handler)

    # --- Ticking ---

    def update(self, dt: float) -> bool:
        """Evaluate transitions, then tick the current state.

        Returns True if a transition fired. When one does, the new state's
        ``on_update`` runs in this same call; the old state's does not.
        """
        fired = self._first_match(self._outgoing(self._current))
        if fired is None:
            fired = self._first_match(self._any_transitions)
        if fired is not None:
            self._change_state(fired.target)
        self._current.on_update(dt)
        return fired is not None

    def force_state(self, new_state: State | None) -> None:
        if new_state is None:
            logger.warning("%s: attempted to force transition to None state", self._label())
            return
        self._change_state(new_state)

    # --- Configuration ---

    def add_transition(
        self, from_state: State, to_state: State, condition: PredicateLike
    ) -> Transition:
        require(from_state, "from_state")
        require(to_state, "to_state")
        transition = Transition(to_state, as_predicate(condition, "condition"))
        key = id(from_state)
        if key not in self._transitions:
            self._transitions[key] = (from_state, [])
        self._transitions[key][1].append(transition)
        return transition

    def add_any_transition(
        self,
        to_state: State,
        condition: PredicateLike,
        allow_self_transition: bool = False,
    ) -> Transition:
        """Register a transition checked from every state.

        Unless ``allow_self_transition`` is set, the condition is ANDed with a
        guard that is False while ``to_state`` is already current. The guard
        reads the machine's current state each time it is evaluated.
        """
        require(to_state, "to_state")
        predicate = as_predicate(condition, "condition")
        if not allow_self_transition:
            predicate = predicate & FuncPredicate(lambda: self._current is not to_state)
        transition = Transition(to_state, predicate)
        self._any_transitions.append(transition)
        return transition

    def remove_transitions_from(self, from_state: State) -> None:
        self._transitions.pop(id(from_state), None)

    def remove_transitions_to(self, to_state: State) -> None:
        for key, (_, transitions) in list(self._transitions.items()):
            transitions[:] = [t for t in transitions if not t.targets(to_state)]
            if not transitions:
                del self._transitions[key]
        self._any_transitions = [
            t for t in self._any_transitions if not t.targets(to_state)
        ]

    def clear_all_transitions(self) -> None:
        self._transitions.clear()
        self._any_transitions.clear()

    # --- Internals ---

    def _outgoing(self, state: State) -> list[Transition]:
        entry = self._transitions.get(id(state))
        return entry[1] if entry is not None else []

    @staticmethod
    def _first_match(transitions: Iterable[Transition]) -> Transition | None:
        for transition in transitions:
            if transition.predicate.evaluate():
                return transition
        return None

    def _change_state(self, new_state: State | None) -> None:
        if new_state is None:
            logger.error("%s: attempted to transition to None state", self._label())
            return
        previous = self._current
        previous.on_exit()
        self._current = new_state
        new_state.on_enter()
        logger.debug("%s: %r -> %r", self._label(), previous, new_state)
        self._state_changed.notify(previous, new_state)

    def _label(self) -> str:
        return self._name if self._name is not None else type(self).__name__
