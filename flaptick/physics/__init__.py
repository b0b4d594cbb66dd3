"""2D kinematics and box collision for the tick engine."""
from __future__ import annotations

from flaptick.physics import vec
from flaptick.physics.collision import aabb_vs_aabb, top_left_box
from flaptick.physics.components import AABBCollider, Gravity, Tilt, Transform, Velocity
from flaptick.physics.systems import (
    collider_box,
    make_gravity_system,
    make_movement_system,
    make_tilt_system,
)

__all__ = [
    "AABBCollider",
    "Gravity",
    "Tilt",
    "Transform",
    "Velocity",
    "aabb_vs_aabb",
    "collider_box",
    "make_gravity_system",
    "make_movement_system",
    "make_tilt_system",
    "top_left_box",
    "vec",
]
