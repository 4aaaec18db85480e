"""Floating '+amount' markers shown when a resource is collected."""

from __future__ import annotations

from dataclasses import dataclass

from stellar_idle.numbers import format_number
from stellar_idle.resources import Resource

LIFETIME = 35
_SLOWDOWN_SPAN = LIFETIME - 10
RISE_SPEED = 1.5
POSITIVE_COLOR = 0xFFFFFFFF
NEGATIVE_COLOR = 0xFF0000FF


@dataclass
class Collection:
    """A resource gain (or loss) that rises and fades above where it happened."""

    pos: tuple[float, float]
    value: tuple[Resource, int]
    created_at: int
    positive: bool = True
    is_active: bool = True

    def update(self, tick: int) -> None:
        """Drift upward, slowing down, and expire once the lifetime has passed."""
        elapsed = tick - self.created_at
        if elapsed < 0:
            raise ValueError(f"tick {tick} is before creation tick {self.created_at}")
        progress = min(elapsed / _SLOWDOWN_SPAN, 1.0)
        speed = RISE_SPEED * (1.0 - progress)
        x, y = self.pos
        self.pos = (x, y - speed)
        if elapsed > LIFETIME:
            self.is_active = False

    def label(self) -> str:
        """The amount as displayed, with a minus sign for losses."""
        amount = format_number(self.value[1])
        return amount if self.positive else f"-{amount}"

    @property
    def sprite(self) -> str:
        return str(self.value[0])

    @property
    def color(self) -> int:
        return POSITIVE_COLOR if self.positive else NEGATIVE_COLOR