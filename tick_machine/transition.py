"""Transition value type."""
from __future__ import annotations

from dataclasses import dataclass

from tick_machine.predicates import Predicate
from tick_machine.types import State, require


@dataclass(frozen=True, eq=False)
class Transition:
    """Immutable (target, predicate) pair.

    Attributes:
        target: State entered when the predicate holds.
        predicate: Guard evaluated on every tick the transition is considered.
    """

    target: State
    predicate: Predicate

    def __post_init__(self) -> None:
        require(self.target, "target")
        require(self.predicate, "predicate")
        if not isinstance(self.predicate, Predicate):
            raise TypeError(
                f"predicate must be a Predicate, got {type(self.predicate).__name__}"
            )

    def targets(self, state: State) -> bool:
        """True if this transition enters ``state`` (by identity)."""
        return self.target is state
