"""Gravity-and-gates arcade game built on the flaptick engine."""
from __future__ import annotations

from flaptick.game.components import AnimationFrames, Avatar, Obstacle, Scrolling, Sprite
from flaptick.game.config import ConfigError, GameConfig
from flaptick.game.input import FlapLatch
from flaptick.game.setup import build_engine

__all__ = [
    "AnimationFrames",
    "Avatar",
    "ConfigError",
    "FlapLatch",
    "GameConfig",
    "Obstacle",
    "Scrolling",
    "Sprite",
    "build_engine",
]
