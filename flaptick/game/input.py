"""Rising-edge detection for a held flap button."""
from __future__ import annotations


class FlapLatch:
    """Turns a raw "button is down" signal into a once-per-press edge."""

    def __init__(self) -> None:
        self._held = False

    @property
    def held(self) -> bool:
        return self._held

    def update(self, pressed: bool) -> bool:
        """Feed this frame's raw state; True only on the frame the press begins."""
        edge = pressed and not self._held
        self._held = pressed
        return edge
