"""System factory for driving state machines from a tick loop."""
from __future__ import annotations

from typing import Any, Callable

from tick_machine.machine import StateMachine
from tick_machine.types import MissingArgumentError, require


def make_machine_system(*machines: StateMachine) -> Callable[[Any, Any], None]:
    """Return a ``(world, ctx)`` system that ticks each machine with ``ctx.dt``.

    Machines are updated in the order given. The world argument is ignored;
    it is accepted so the system slots into an engine's system list.
    """
    if not machines:
        raise MissingArgumentError("machines", "at least one machine is required")
    for machine in machines:
        require(machine, "machine")

    def machine_system(world: Any, ctx: Any) -> None:
        for machine in machines:
            machine.update(ctx.dt)

    return machine_system
