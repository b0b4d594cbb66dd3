"""Gameplay configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


class ConfigError(ValueError):
    """Raised when a GameConfig cannot describe a playable world."""


@dataclass(frozen=True)
class GameConfig:
    """Immutable gameplay constants.

    World coordinates have their origin at the viewport centre with y up.
    Speeds and impulses are per-frame displacements; ``gravity`` is an
    acceleration applied as ``gravity * dt`` to vertical velocity each frame.

    Attributes:
        width: Logical viewport width.
        height: Logical viewport height.
        gravity: Downward acceleration.
        flap_speed: Vertical velocity set by a flap.
        scroll_speed: Leftward speed of obstacles and ground.
        backdrop_speed_factor: Backdrop speed as a fraction of scroll_speed.
        obstacle_interval: Seconds between obstacle spawn/retire passes.
        obstacle_width: Full width of one obstacle member.
        obstacle_height: Full height of one obstacle member.
        gap_size: Vertical opening between a pair's members.
        min_obstacle_offset: Minimum distance from the gap to floor or ceiling.
        spawn_margin: Distance past the right edge where obstacles appear.
        floor_height: Height of the floor graphic above the bottom edge.
        ground_segment_width: Width of one ground tile.
        backdrop_segment_width: Width of one backdrop tile.
        avatar_start_x: Fixed horizontal position of the avatar.
        avatar_half_extent: Half size of the avatar's square hit box.
        collision_rate: Collision evaluations per second.
        animation_period: Seconds per avatar animation frame.
        animation_first: First sprite frame index.
        animation_last: Last sprite frame index.
    """

    width: float = 400.0
    height: float = 700.0
    gravity: float = 9.8
    flap_speed: float = 4.5
    scroll_speed: float = 4.5
    backdrop_speed_factor: float = 0.2
    obstacle_interval: float = 1.0
    obstacle_width: float = 26.0 * 3
    obstacle_height: float = 160.0 * 3
    gap_size: float = 150.0
    min_obstacle_offset: float = 100.0
    spawn_margin: float = 200.0
    floor_height: float = 50.0
    ground_segment_width: float = 168.0 * 3
    backdrop_segment_width: float = 144.0 * 3
    avatar_start_x: float = -150.0
    avatar_half_extent: float = 45.0
    collision_rate: int = 30
    animation_period: float = 0.1
    animation_first: int = 0
    animation_last: int = 3

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError("viewport width and height must be positive")
        if self.obstacle_interval <= 0 or self.animation_period <= 0:
            raise ConfigError("obstacle_interval and animation_period must be positive")
        if self.collision_rate <= 0:
            raise ConfigError("collision_rate must be positive")
        if self.animation_last < self.animation_first:
            raise ConfigError("animation_last must not precede animation_first")
        lo, hi = self.gap_range
        if lo > hi:
            raise ConfigError(
                f"Empty gap range [{lo}, {hi}]: viewport too short for gap_size "
                f"{self.gap_size} with offset {self.min_obstacle_offset}"
            )

    @property
    def half_width(self) -> float:
        return self.width / 2.0

    @property
    def half_height(self) -> float:
        return self.height / 2.0

    @property
    def floor_line(self) -> float:
        """Avatar y below which the run is over."""
        return -self.half_height + self.floor_height

    @property
    def gap_range(self) -> tuple[float, float]:
        """Inclusive bounds for a pair's gap-bottom."""
        return (
            -self.half_height + self.min_obstacle_offset,
            self.half_height - self.min_obstacle_offset - self.gap_size,
        )

    @property
    def spawn_x(self) -> float:
        return self.half_width + self.spawn_margin

    @property
    def retire_x(self) -> float:
        """Obstacles left of this x are fully off-screen."""
        return -self.half_width - self.obstacle_width

    @property
    def backdrop_speed(self) -> float:
        return self.scroll_speed * self.backdrop_speed_factor

    @property
    def collision_period(self) -> float:
        return 1.0 / self.collision_rate
