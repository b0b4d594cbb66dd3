"""Minimal tick engine: entity store, frame clock, and mode-gated scheduler."""

from flaptick.core.clock import Clock, FixedTimer
from flaptick.core.engine import Engine
from flaptick.core.types import (
    DeadEntityError,
    EntityId,
    GameMode,
    MissingSingletonError,
    TickContext,
)
from flaptick.core.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "FixedTimer",
    "TickContext",
    "GameMode",
    "EntityId",
    "DeadEntityError",
    "MissingSingletonError",
]
