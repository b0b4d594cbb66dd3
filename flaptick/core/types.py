"""Shared type aliases, game modes, and errors for the tick engine."""

from __future__ import annotations

import enum
import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


class GameMode(enum.Enum):
    """Coarse game state gating which systems run."""

    MENU = "menu"
    IN_GAME = "in_game"


@dataclass(frozen=True, slots=True)
class TickContext:
    frame: int
    dt: float
    elapsed: float
    mode: GameMode
    flap: bool
    request_mode: Callable[[GameMode], None]
    request_stop: Callable[[], None]
    random: _random.Random


class DeadEntityError(KeyError):
    """Raised when operating on an entity that is not alive."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


class MissingSingletonError(LookupError):
    """Raised when a singleton query does not match exactly one entity."""


if TYPE_CHECKING:
    from flaptick.core.world import World

System = Callable[["World", TickContext], None]
