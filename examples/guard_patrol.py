"""Guard patrol -- a small NPC driven by a tick-machine StateMachine.

Demonstrates:
- Defining states by subclassing BaseState
- Source-specific transitions from plain lambdas
- Composing predicates with & and |
- A global "any state" transition with self-transition suppression
- Observing state changes and reading transition logs

Run: python -m examples.guard_patrol
"""

import logging
from dataclasses import dataclass

from tick_machine import BaseState, FuncPredicate, StateMachine


@dataclass
class Guard:
    health: int = 100
    noise: float = 0.0
    stamina: float = 3.0


class Patrol(BaseState):
    def __init__(self, guard: Guard) -> None:
        self.guard = guard

    def on_update(self, dt: float) -> None:
        self.guard.stamina -= dt

    def __repr__(self) -> str:
        return "Patrol"


class Rest(BaseState):
    def __init__(self, guard: Guard) -> None:
        self.guard = guard

    def on_update(self, dt: float) -> None:
        self.guard.stamina += 2 * dt

    def __repr__(self) -> str:
        return "Rest"


class Investigate(BaseState):
    def __init__(self, guard: Guard) -> None:
        self.guard = guard

    def on_update(self, dt: float) -> None:
        # Noise fades while the guard looks around.
        self.guard.noise = max(0.0, self.guard.noise - dt)

    def __repr__(self) -> str:
        return "Investigate"


class Dead(BaseState):
    def on_enter(self) -> None:
        print("  the guard collapses")

    def __repr__(self) -> str:
        return "Dead"


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="  %(name)s %(message)s")
    print("=== Guard Patrol ===\n")

    guard = Guard()
    patrol, rest, investigate, dead = Patrol(guard), Rest(guard), Investigate(guard), Dead()

    machine = StateMachine(patrol, name="guard")
    heard = FuncPredicate(lambda: guard.noise > 0.5)
    machine.add_transition(patrol, rest, lambda: guard.stamina <= 0)
    machine.add_transition(patrol, investigate, heard)
    machine.add_transition(rest, investigate, heard & (lambda: guard.stamina > 1))
    machine.add_transition(rest, patrol, lambda: guard.stamina >= 3)
    machine.add_transition(investigate, patrol, lambda: guard.noise == 0)
    machine.add_any_transition(dead, lambda: guard.health <= 0)

    machine.on_state_changed(lambda prev, new: print(f"  {prev!r} -> {new!r}"))

    dt = 0.5
    for tick in range(1, 21):
        if tick == 4:
            guard.noise = 1.0
        if tick == 18:
            guard.health = 0
        machine.update(dt)

    print(f"\nDone. Final state: {machine.current_state!r}")


if __name__ == "__main__":
    main()
