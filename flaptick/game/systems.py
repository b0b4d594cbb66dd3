"""Game systems: input, obstacle pipeline, scrolling, collision, and animation."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flaptick.core import GameMode
from flaptick.core.types import System
from flaptick.game.components import AnimationFrames, Avatar, Obstacle, Scrolling
from flaptick.game.config import GameConfig
from flaptick.game.spawner import spawn_obstacle_pair
from flaptick.physics import AABBCollider, Transform, Velocity, aabb_vs_aabb, collider_box
from flaptick.schedule import Repeating, make_repeating_system

if TYPE_CHECKING:
    from flaptick.core import EntityId, TickContext, World

logger = logging.getLogger(__name__)


# --- Input ---

def make_start_system() -> System:
    """Menu only: a flap starts the run."""

    def start_system(world: World, ctx: TickContext) -> None:
        if ctx.flap:
            ctx.request_mode(GameMode.IN_GAME)

    return start_system


def make_flap_system(config: GameConfig) -> System:
    """In game: a flap overwrites the avatar's vertical velocity."""

    def flap_system(world: World, ctx: TickContext) -> None:
        if not ctx.flap:
            return
        _, (_, velocity) = world.single(Avatar, Velocity)
        velocity.value = (velocity.value[0], config.flap_speed)

    return flap_system


# --- Obstacle pipeline ---

def make_retire_system(config: GameConfig) -> System:
    """Despawn obstacles that have passed fully off the left edge."""
    threshold = config.retire_x

    def retire_system(world: World, ctx: TickContext) -> None:
        retired = [
            eid
            for eid, (_, transform) in world.query(Obstacle, Transform)
            if transform.position[0] < threshold
        ]
        for eid in retired:
            world.despawn(eid)
        if retired:
            logger.debug("Retired %d obstacle(s)", len(retired))

    return retire_system


def make_spawn_system(config: GameConfig) -> System:
    """Spawn one gated pair with a gap-bottom drawn from the context RNG."""
    lo, hi = config.gap_range

    def spawn_system(world: World, ctx: TickContext) -> None:
        gap_bottom = ctx.random.uniform(lo, hi)
        spawn_obstacle_pair(world, config, gap_bottom)
        logger.debug(
            "Spawned obstacle pair, gap %.1f..%.1f", gap_bottom, gap_bottom + config.gap_size
        )

    return spawn_system


# --- Scrolling ---

def wrap_segment_x(x: float, segment_width: float, half_width: float) -> float:
    """Snap a tile that left the screen to the far right of its partner."""
    if x < -half_width - segment_width:
        return x + 2.0 * segment_width
    return x


def make_scrolling_system(config: GameConfig) -> System:
    half_width = config.half_width

    def scrolling_system(world: World, ctx: TickContext) -> None:
        for eid, (transform, scrolling) in world.query(Transform, Scrolling):
            x, y = transform.position
            x = wrap_segment_x(x + scrolling.speed, scrolling.segment_width, half_width)
            transform.position = (x, y)

    return scrolling_system


# --- Collision & game mode ---

def find_collision(world: World, config: GameConfig) -> str | None:
    """Return why the run is over ("floor" or "obstacle"), or None."""
    _, (_, transform, collider) = world.single(Avatar, Transform, AABBCollider)
    if transform.position[1] < config.floor_line:
        return "floor"
    centre, half = collider_box(transform, collider)
    for eid, (_, o_transform, o_collider) in world.query(Obstacle, Transform, AABBCollider):
        o_centre, o_half = collider_box(o_transform, o_collider)
        if aabb_vs_aabb(centre, half, o_centre, o_half) is not None:
            return "obstacle"
    return None


def make_game_over_system(config: GameConfig) -> System:
    """In game, fixed cadence: any collision sends the session to the menu."""

    def game_over_system(world: World, ctx: TickContext) -> None:
        cause = find_collision(world, config)
        if cause is not None:
            logger.info("Game over at frame %d: hit %s", ctx.frame, cause)
            ctx.request_mode(GameMode.MENU)

    return game_over_system


def make_menu_reset_hook() -> System:
    """Menu entry: put the avatar back at rest and clear every obstacle."""

    def menu_reset_hook(world: World, ctx: TickContext) -> None:
        _, (_, transform, velocity) = world.single(Avatar, Transform, Velocity)
        velocity.value = (0.0, 0.0)
        transform.position = (transform.position[0], 0.0)
        transform.rotation = 0.0
        for eid, _ in list(world.query(Obstacle)):
            world.despawn(eid)

    return menu_reset_hook


# --- Animation ---

def make_animation_system() -> System:
    """Advance AnimationFrames whenever the entity's Repeating timer fires."""

    def on_fire(world: World, ctx: TickContext, eid: EntityId, timer: Repeating) -> None:
        if world.has(eid, AnimationFrames):
            world.get(eid, AnimationFrames).advance()

    return make_repeating_system(on_fire)
