"""Build the complete game engine: world population and system wiring."""
from __future__ import annotations

import logging

from flaptick.core import Engine, GameMode
from flaptick.game.config import GameConfig
from flaptick.game.spawner import spawn_avatar, spawn_backdrop, spawn_ground
from flaptick.game.systems import (
    make_animation_system,
    make_flap_system,
    make_game_over_system,
    make_menu_reset_hook,
    make_retire_system,
    make_scrolling_system,
    make_spawn_system,
    make_start_system,
)
from flaptick.physics import make_gravity_system, make_movement_system, make_tilt_system

logger = logging.getLogger(__name__)


def build_engine(config: GameConfig | None = None, seed: int | None = None) -> Engine:
    """Return a started engine in Menu mode with the avatar and scroll layers spawned.

    System order (ties on a shared cadence run in this order):
    start, flap, gravity, movement, tilt, scrolling, animation,
    retire + spawn (obstacle cadence), game over (collision cadence).
    """
    if config is None:
        config = GameConfig()

    engine = Engine(seed=seed, initial_mode=GameMode.MENU)
    world = engine.world
    spawn_backdrop(world, config)
    spawn_ground(world, config)
    spawn_avatar(world, config)

    engine.add_system(make_start_system(), mode=GameMode.MENU)
    engine.add_system(make_flap_system(config), mode=GameMode.IN_GAME)
    engine.add_system(make_gravity_system(config.gravity), mode=GameMode.IN_GAME)
    engine.add_system(make_movement_system())
    engine.add_system(make_tilt_system())
    engine.add_system(make_scrolling_system(config))
    engine.add_system(make_animation_system())
    engine.add_system(
        make_retire_system(config), every=config.obstacle_interval, mode=GameMode.IN_GAME
    )
    engine.add_system(
        make_spawn_system(config), every=config.obstacle_interval, mode=GameMode.IN_GAME
    )
    engine.add_system(
        make_game_over_system(config), every=config.collision_period, mode=GameMode.IN_GAME
    )
    engine.on_enter(GameMode.MENU, make_menu_reset_hook())

    engine.start()
    logger.debug("Engine ready (seed=%d, viewport %gx%g)", engine.seed, config.width, config.height)
    return engine
