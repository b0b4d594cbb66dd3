"""Pure axis-aligned box collision functions."""
from __future__ import annotations

from flaptick.physics.vec import Vec


def aabb_vs_aabb(
    pos_a: Vec,
    half_a: Vec,
    pos_b: Vec,
    half_b: Vec,
) -> tuple[Vec, float] | None:
    """Detect AABB overlap. Returns (normal A→B, depth) on minimum-penetration axis or None.

    Boxes that only touch along an edge do not overlap.
    """
    min_overlap = float("inf")
    min_axis = -1
    min_sign = 1.0
    ndim = len(pos_a)

    for i in range(ndim):
        overlap = (half_a[i] + half_b[i]) - abs(pos_a[i] - pos_b[i])
        if overlap <= 0.0:
            return None
        if overlap < min_overlap:
            min_overlap = overlap
            min_axis = i
            min_sign = 1.0 if pos_b[i] >= pos_a[i] else -1.0

    normal = tuple(
        min_sign if i == min_axis else 0.0 for i in range(ndim)
    )
    return normal, min_overlap


def top_left_box(corner: Vec, size: Vec) -> tuple[Vec, Vec]:
    """Centre and half-extents of a box anchored at its top-left corner (y up)."""
    width, height = size
    half = (width / 2.0, height / 2.0)
    return (corner[0] + half[0], corner[1] - half[1]), half
