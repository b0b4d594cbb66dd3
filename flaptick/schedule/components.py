"""Repeating timer component."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Repeating:
    """Recurring countdown in seconds. Fires every ``period``, never auto-detaches."""

    name: str
    period: float
    remaining: float = -1.0

    def __post_init__(self) -> None:
        if self.period <= 0:
            raise ValueError("period must be positive")
        if self.remaining < 0:
            self.remaining = self.period
