"""Frame clock and fixed-cadence timers."""

import logging
import random
from typing import Callable

from flaptick.core.types import GameMode, TickContext

logger = logging.getLogger(__name__)

# Absorbs float drift when summing frame deltas (60 × 1/60 < 1.0).
_EPSILON = 1e-9


class Clock:
    """Monotonic frame counter with variable-length frame deltas."""

    def __init__(self) -> None:
        self._frame = 0
        self._dt = 0.0
        self._elapsed = 0.0

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float) -> int:
        if dt < 0:
            raise ValueError("dt must not be negative")
        self._frame += 1
        self._dt = dt
        self._elapsed += dt
        return self._frame

    def context(
        self,
        mode: GameMode,
        flap: bool,
        mode_fn: Callable[[GameMode], None],
        stop_fn: Callable[[], None],
        rng: random.Random,
    ) -> TickContext:
        return TickContext(
            frame=self._frame,
            dt=self._dt,
            elapsed=self._elapsed,
            mode=mode,
            flap=flap,
            request_mode=mode_fn,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self) -> None:
        self._frame = 0
        self._dt = 0.0
        self._elapsed = 0.0


class FixedTimer:
    """Fires once per ``period`` seconds of accumulated frame time.

    Fires at most once per call to :meth:`tick`. When a single frame spans
    several periods the surplus whole periods are dropped.
    """

    def __init__(self, period: float) -> None:
        if period <= 0:
            raise ValueError("period must be positive")
        self._period = period
        self._accumulated = 0.0

    @property
    def period(self) -> float:
        return self._period

    @property
    def accumulated(self) -> float:
        return self._accumulated

    def tick(self, dt: float) -> bool:
        self._accumulated += dt
        if self._accumulated + _EPSILON < self._period:
            return False
        self._accumulated = max(self._accumulated - self._period, 0.0)
        if self._accumulated + _EPSILON >= self._period:
            dropped = int((self._accumulated + _EPSILON) // self._period)
            logger.debug(
                "Dropping %d overdue firing(s) of %.4fs cadence", dropped, self._period
            )
            self._accumulated = max(self._accumulated - dropped * self._period, 0.0)
        return True

    def reset(self) -> None:
        self._accumulated = 0.0
