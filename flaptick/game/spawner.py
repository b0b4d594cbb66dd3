"""Entity spawning utilities."""
from __future__ import annotations

from typing import TYPE_CHECKING

from flaptick.game.components import AnimationFrames, Avatar, Obstacle, Scrolling, Sprite
from flaptick.game.config import GameConfig
from flaptick.physics import AABBCollider, Gravity, Tilt, Transform, Velocity
from flaptick.schedule import Repeating

if TYPE_CHECKING:
    from flaptick.core import EntityId, World

AVATAR_TEXTURE = "bird.png"
OBSTACLE_TEXTURE = "pipe.png"
GROUND_TEXTURE = "floor.png"
BACKDROP_TEXTURE = "bg.png"

GROUND_LAYER = "ground"
BACKDROP_LAYER = "backdrop"


def spawn_avatar(world: World, config: GameConfig) -> EntityId:
    """Spawn the avatar at its start position, at rest."""
    half = config.avatar_half_extent
    return world.spawn(
        Avatar(),
        Transform(position=(config.avatar_start_x, 0.0)),
        Velocity(value=(0.0, 0.0)),
        Gravity(),
        Tilt(),
        AABBCollider(half_extents=(half, half)),
        AnimationFrames(first=config.animation_first, last=config.animation_last),
        Repeating(name="animation", period=config.animation_period),
        Sprite(texture=AVATAR_TEXTURE, z=5.0),
    )


def spawn_obstacle_pair(
    world: World, config: GameConfig, gap_bottom: float
) -> tuple[EntityId, EntityId]:
    """Spawn the upper and lower members of a gated pair at the spawn line.

    Both members are anchored at their top-left corner. The upper member's
    bottom edge sits at gap-top; the lower member's top edge at gap-bottom.
    """
    gap_top = gap_bottom + config.gap_size
    half = (config.obstacle_width / 2.0, config.obstacle_height / 2.0)
    velocity = (-config.scroll_speed, 0.0)
    x = config.spawn_x

    upper = world.spawn(
        Obstacle(gap_bottom=gap_bottom, gap_top=gap_top, upper=True),
        Transform(position=(x, gap_top + config.obstacle_height)),
        Velocity(value=velocity),
        AABBCollider(half_extents=half, anchor="top_left"),
        Sprite(texture=OBSTACLE_TEXTURE, anchor="top_left", flip_y=True, z=1.0),
    )
    lower = world.spawn(
        Obstacle(gap_bottom=gap_bottom, gap_top=gap_top, upper=False),
        Transform(position=(x, gap_bottom)),
        Velocity(value=velocity),
        AABBCollider(half_extents=half, anchor="top_left"),
        Sprite(texture=OBSTACLE_TEXTURE, anchor="top_left", z=1.0),
    )
    return upper, lower


def spawn_scroll_layer(
    world: World,
    layer: str,
    texture: str,
    segment_width: float,
    speed: float,
    left: float,
    y: float,
    z: float,
) -> tuple[EntityId, EntityId]:
    """Spawn the two tiles of a looping layer, one segment width apart."""
    return tuple(  # type: ignore[return-value]
        world.spawn(
            Scrolling(layer=layer, segment_width=segment_width, speed=speed),
            Transform(position=(left + i * segment_width, y)),
            Sprite(texture=texture, anchor="top_left", z=z),
        )
        for i in range(2)
    )


def spawn_ground(world: World, config: GameConfig) -> tuple[EntityId, EntityId]:
    return spawn_scroll_layer(
        world,
        GROUND_LAYER,
        GROUND_TEXTURE,
        config.ground_segment_width,
        -config.scroll_speed,
        -config.half_width,
        config.floor_line,
        z=10.0,
    )


def spawn_backdrop(world: World, config: GameConfig) -> tuple[EntityId, EntityId]:
    return spawn_scroll_layer(
        world,
        BACKDROP_LAYER,
        BACKDROP_TEXTURE,
        config.backdrop_segment_width,
        -config.backdrop_speed,
        -config.half_width,
        config.half_height,
        z=0.0,
    )
