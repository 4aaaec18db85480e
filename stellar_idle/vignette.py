"""The dark fog that hides parts of the sector until they are unlocked."""

from __future__ import annotations

import math
import random

from stellar_idle.cloud import Cloud
from stellar_idle.events import Event

MAX_FADE = 255.0


class Vignette:
    """Screen fade plus the clouds that recede as stations become available."""

    def __init__(self, depot_box: tuple[int, int, int, int], rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        dx, dy = depot_box[0], depot_box[1]
        self.fade = True
        self.fade_prog = MAX_FADE
        self.stage = 0
        self.depot = [
            Cloud((320, 200), 320, 240, rng),
            Cloud((dx - 16, dy - 16), 48, 0, rng),
        ]
        self.mines = [Cloud((320, 200), 480, 320, rng)]
        self.clouds = [Cloud((320, 200), 780, 480, rng)]

    def handle_event(self, event: Event) -> None:
        """Open up the fog for the stage the event announces."""
        if event is Event.DRONE_DEPOT_UNLOCKABLE:
            del self.depot[1]
            self.depot[0].fade_ranges.append((110.0, 200.0))
        elif event is Event.MINES_UNLOCKABLE:
            self.depot[0].fade_ranges[0] = (110.0, 315.0)
            self.mines[0].fade_ranges.append((180.0, 280.0))
            self.clouds[0].fade_ranges.append((190.0, 250.0))
        elif event is Event.POWER_PLANT_UNLOCKABLE:
            self.depot.clear()
            self.mines[0].fade_ranges[0] = (180.0, 10.0)
            start, _ = self.clouds[0].fade_ranges[0]
            self.clouds[0].fade_ranges[0] = (start, 360.0)
        elif event is Event.LATE_GAME:
            self.mines[0].fade_ranges.append((40.0, 140.0))
            self.clouds[0].fade_ranges.append((60.0, 120.0))

    def update(self, tick: int) -> None:
        """Step the screen fade and move all clouds."""
        ease = (self.fade_prog / MAX_FADE) ** 2
        step = math.ceil(2.0 * ease)
        if self.fade and self.fade_prog < MAX_FADE:
            self.fade_prog = min(self.fade_prog + step, MAX_FADE)
        elif not self.fade and self.fade_prog > 0.0:
            self.fade_prog = min(max(self.fade_prog - step, 0.0), MAX_FADE)

        for cloud in (*self.clouds, *self.depot, *self.mines):
            cloud.update(tick)

    def overlay_color(self) -> int:
        """Black with the current fade as its alpha."""
        return 0x000000 | int(self.fade_prog)