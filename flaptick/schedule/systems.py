"""System factory for repeating timers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from flaptick.schedule.components import Repeating

if TYPE_CHECKING:
    from flaptick.core import EntityId, TickContext, World

# Absorbs float drift when summing frame deltas.
_EPSILON = 1e-9


def make_repeating_system(
    on_fire: Callable[[World, TickContext, EntityId, Repeating], None],
) -> Callable[[World, TickContext], None]:
    """Return a system that counts Repeating timers down by ``ctx.dt``.

    Fires at most once per entity per frame and carries the overshoot into
    the next period.
    """

    def repeating_system(world: World, ctx: TickContext) -> None:
        for eid, (timer,) in list(world.query(Repeating)):
            timer.remaining -= ctx.dt
            if timer.remaining <= _EPSILON:
                timer.remaining = max(timer.remaining + timer.period, 0.0)
                on_fire(world, ctx, eid, timer)

    return repeating_system
