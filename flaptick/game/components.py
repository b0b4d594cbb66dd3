"""Game components for the avatar, obstacles, and scrolling layers."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Avatar:
    """Singleton marker for the player-controlled entity."""

    pass


@dataclass
class Obstacle:
    """One member of a gated pair. Members share the spawn-time gap values."""

    gap_bottom: float
    gap_top: float
    upper: bool


@dataclass
class Scrolling:
    """Looping tile. Two per layer, one segment width apart."""

    layer: str
    segment_width: float
    speed: float  # negative scrolls left


@dataclass
class AnimationFrames:
    """Cyclic sprite frame index within [first, last]."""

    first: int
    last: int
    index: int = -1

    def __post_init__(self) -> None:
        if self.index < 0:
            self.index = self.first

    def advance(self) -> int:
        self.index = self.first if self.index >= self.last else self.index + 1
        return self.index


@dataclass
class Sprite:
    """Render description. ``texture`` is an opaque key for the front-end."""

    texture: str
    anchor: str = "center"  # or "top_left"
    flip_y: bool = False
    z: float = 0.0
