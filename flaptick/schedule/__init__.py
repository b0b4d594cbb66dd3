"""Timer primitives for the tick engine."""
from __future__ import annotations

from flaptick.schedule.components import Repeating
from flaptick.schedule.systems import make_repeating_system

__all__ = ["Repeating", "make_repeating_system"]
