"""Physics components."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Transform:
    """World placement. y points up; rotation is in radians, counter-clockwise."""

    position: tuple[float, ...]
    rotation: float = 0.0


@dataclass
class Velocity:
    """Per-frame displacement, added to Transform.position once per frame."""

    value: tuple[float, ...]


@dataclass
class Gravity:
    """Marks an entity as pulled down by the gravity system."""

    pass


@dataclass
class Tilt:
    """Rotate with vertical velocity: rotation = vy * radians_per_unit."""

    radians_per_unit: float = (math.pi / 4) / 5


@dataclass
class AABBCollider:
    """Axis-aligned box.

    With ``anchor == "center"`` the box is centred on Transform.position;
    with ``"top_left"`` the position is the box's top-left corner and the box
    extends right and down by its full size.
    """

    half_extents: tuple[float, ...]
    anchor: str = "center"
