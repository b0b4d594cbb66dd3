"""System factories for gravity, integration, and tilt."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from flaptick.physics import vec
from flaptick.physics.collision import top_left_box
from flaptick.physics.components import AABBCollider, Gravity, Tilt, Transform, Velocity

if TYPE_CHECKING:
    from flaptick.core import TickContext, World


def collider_box(
    transform: Transform, collider: AABBCollider
) -> tuple[vec.Vec, vec.Vec]:
    """World-space (centre, half_extents) of a collider."""
    if collider.anchor == "top_left":
        return top_left_box(transform.position, vec.scale(collider.half_extents, 2.0))
    return transform.position, collider.half_extents


def make_gravity_system(g: float) -> Callable[["World", "TickContext"], None]:
    """Subtract ``g * dt`` from vertical velocity of Gravity entities."""

    def gravity_system(world: "World", ctx: "TickContext") -> None:
        dv = g * ctx.dt
        for eid, (velocity, _) in world.query(Velocity, Gravity):
            vx, vy = velocity.value
            velocity.value = (vx, vy - dv)

    return gravity_system


def make_movement_system() -> Callable[["World", "TickContext"], None]:
    """Euler step with an implicit unit timestep: position += velocity.

    Velocities are per-frame displacements, so ``ctx.dt`` is not applied.
    """

    def movement_system(world: "World", ctx: "TickContext") -> None:
        for eid, (transform, velocity) in world.query(Transform, Velocity):
            transform.position = vec.add(transform.position, velocity.value)

    return movement_system


def make_tilt_system() -> Callable[["World", "TickContext"], None]:
    """Derive rotation from vertical velocity. Cosmetic only."""

    def tilt_system(world: "World", ctx: "TickContext") -> None:
        for eid, (transform, velocity, tilt) in world.query(Transform, Velocity, Tilt):
            transform.rotation = velocity.value[1] * tilt.radians_per_unit

    return tilt_system
