"""Engine - frame loop, cadence dispatch, mode gating, and lifecycle hooks."""

from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass
from typing import Callable, Collection

from flaptick.core.clock import Clock, FixedTimer
from flaptick.core.types import GameMode, System, TickContext
from flaptick.core.world import World

logger = logging.getLogger(__name__)

Hook = Callable[[World, TickContext], None]

# (period, mode) - systems sharing a key share one timer.
_CadenceKey = tuple[float, GameMode | None]


@dataclass
class _Entry:
    system: System
    cadence: _CadenceKey | None
    mode: GameMode | None


class Engine:
    def __init__(
        self, seed: int | None = None, initial_mode: GameMode = GameMode.MENU
    ) -> None:
        self._clock = Clock()
        self._world = World()
        self._systems: list[_Entry] = []
        self._timers: dict[_CadenceKey, FixedTimer] = {}
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._enter_hooks: dict[GameMode, list[Hook]] = {}
        self._mode = initial_mode
        self._pending_mode: GameMode | None = None
        self._started = False
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def started(self) -> bool:
        return self._started

    def add_system(
        self,
        system: System,
        every: float | None = None,
        mode: GameMode | None = None,
    ) -> None:
        """Register ``system``.

        ``every`` is a fixed period in seconds; ``None`` runs the system every
        frame. ``mode`` restricts the system to one game mode. Systems run in
        registration order.
        """
        cadence: _CadenceKey | None = None
        if every is not None:
            cadence = (every, mode)
            if cadence not in self._timers:
                self._timers[cadence] = FixedTimer(every)
        self._systems.append(_Entry(system, cadence, mode))

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def on_enter(self, mode: GameMode, hook: Hook) -> None:
        """Run ``hook`` once each time the engine enters ``mode``."""
        self._enter_hooks.setdefault(mode, []).append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _request_mode(self, mode: GameMode) -> None:
        self._pending_mode = mode

    def _context(self, flap: bool = False) -> TickContext:
        return self._clock.context(
            self._mode, flap, self._request_mode, self._request_stop, self._rng
        )

    def _enter(self, mode: GameMode) -> None:
        ctx = self._context()
        for hook in self._enter_hooks.get(mode, ()):
            hook(self._world, ctx)

    def _apply_pending_mode(self) -> None:
        target = self._pending_mode
        self._pending_mode = None
        if target is None or target is self._mode:
            return
        logger.info("Mode %s -> %s", self._mode.name, target.name)
        self._mode = target
        for (_, mode), timer in self._timers.items():
            if mode is target:
                timer.reset()
        self._enter(target)

    def start(self) -> None:
        """Run start hooks and the initial mode's enter hooks. Idempotent."""
        if self._started:
            return
        self._started = True
        ctx = self._context()
        for hook in self._start_hooks:
            hook(self._world, ctx)
        self._enter(self._mode)

    def _tick(self, dt: float, flap: bool) -> None:
        self._clock.advance(dt)
        mode = self._mode
        fired: set[_CadenceKey] = set()
        for key, timer in self._timers.items():
            if key[1] is None or key[1] is mode:
                if timer.tick(dt):
                    fired.add(key)

        ctx = self._context(flap)
        for entry in self._systems:
            if entry.mode is not None and entry.mode is not mode:
                continue
            if entry.cadence is not None and entry.cadence not in fired:
                continue
            entry.system(self._world, ctx)
            if self._stop_requested:
                break
        self._apply_pending_mode()

    def step(self, dt: float, flap: bool = False) -> None:
        """Advance one frame of ``dt`` seconds. ``flap`` is the rising edge."""
        self._stop_requested = False
        self.start()
        self._tick(dt, flap)

    def run(self, frames: int, dt: float, flap_on: Collection[int] = ()) -> None:
        """Run ``frames`` frames of ``dt`` seconds each.

        ``flap_on`` holds the frame numbers (as seen in ``ctx.frame``) on which
        the flap edge is raised.
        """
        self._stop_requested = False
        self.start()

        for _ in range(frames):
            self._tick(dt, self._clock.frame + 1 in flap_on)
            if self._stop_requested:
                break

        ctx = self._context()
        for hook in self._stop_hooks:
            hook(self._world, ctx)
