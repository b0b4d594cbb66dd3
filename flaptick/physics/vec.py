"""2D vector helpers operating on tuple[float, ...]."""
from __future__ import annotations

Vec = tuple[float, ...]


def add(a: Vec, b: Vec) -> Vec:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def scale(v: Vec, s: float) -> Vec:
    return tuple(vi * s for vi in v)
