"""Rings of slowly orbiting circles that form the fog around the sector."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

TAU = math.tau
RING_STEP = 16
SIZE_RANGE = (16, 72)
CIRCLE_SPACING = 32
DEFAULT_ALPHA = 100
FADE_SPAN = 30.0
WOBBLE_SPEED = 0.02
DARK_COLORS = (0x1A1229FF, 0x1F122BFF)


@dataclass
class Circle:
    """One puff of fog on a ring."""

    pos: tuple[float, float]
    size: int
    color: int
    angle: float
    speed: float
    wobble_phase: float
    wobble_amplitude: float


class Cloud:
    """Concentric rings of circles between radius ``start`` and ``radius``."""

    def __init__(
        self,
        center: tuple[int, int],
        radius: int,
        start: int,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.center = center
        self.radius = radius
        self.size_range = SIZE_RANGE
        self.fade_ranges: list[tuple[float, float]] = []
        self.fade = False
        self.rings: list[list[Circle]] = [
            self._build_ring(ring_radius, rng)
            for ring_radius in range(start, radius + 1, RING_STEP)
        ]

    def _build_ring(self, ring_radius: int, rng: random.Random) -> list[Circle]:
        cx, cy = self.center
        circumference = TAU * ring_radius
        count = 1 + math.floor(circumference / CIRCLE_SPACING)
        ratio = ring_radius / self.radius if self.radius else math.nan
        amplitude = 0.1 + ratio * 0.04
        low, span = self.size_range
        ring = []
        for i in range(count):
            angle = i / count * TAU
            color = DARK_COLORS[0] if rng.getrandbits(32) % 2 == 0 else DARK_COLORS[1]
            size = low + int(span * ((rng.getrandbits(32) % 100) / 100))
            speed = 0.1 + (rng.getrandbits(32) % 100) / 100 * 0.04
            phase = (rng.getrandbits(32) % 100) / 100 * TAU
            ring.append(
                Circle(
                    pos=(cx + ring_radius * math.cos(angle), cy + ring_radius * math.sin(angle)),
                    size=size,
                    color=color,
                    angle=angle,
                    speed=speed,
                    wobble_phase=phase,
                    wobble_amplitude=amplitude,
                )
            )
        return ring

    def update(self, tick: int) -> None:
        """Advance every circle along its ring and apply its wobble."""
        cx, cy = self.center
        for ring_index, ring in enumerate(self.rings):
            for circle_index, circle in enumerate(ring):
                px, py = circle.pos
                ring_radius = math.hypot(px - cx, py - cy)
                circle.angle += circle.speed / max(ring_radius, 1.0)
                if circle.angle > TAU:
                    circle.angle -= TAU
                base_x = cx + ring_radius * math.cos(circle.angle)
                base_y = cy + ring_radius * math.sin(circle.angle)
                phase = (
                    tick * WOBBLE_SPEED
                    + circle_index * 0.4
                    + ring_index * 0.8
                    + circle.angle * 2.0
                )
                circle.pos = (
                    base_x + circle.wobble_amplitude * math.cos(phase),
                    base_y + circle.wobble_amplitude * math.sin(phase),
                )

    def alpha(self, circle: Circle) -> int:
        """Opacity of ``circle`` given the cloud's fade ranges."""
        for start, end in self.fade_ranges:
            angle_deg = math.degrees(circle.angle)
            start_deg = math.degrees(start)
            end_deg = math.degrees(end)
            normalized = angle_deg + 360.0 if angle_deg < 0.0 else angle_deg
            # The angle is converted a second time before comparison.
            deg = math.degrees(normalized)
            if start_deg <= end_deg:
                in_range = start_deg <= deg <= end_deg
            else:
                in_range = deg >= start_deg or deg <= end_deg
            if not in_range:
                continue
            to_start = abs(deg - start_deg) if deg >= start_deg else abs(deg + 360.0 - start_deg)
            to_end = abs(end_deg - deg) if deg <= end_deg else abs(end_deg + 360.0 - deg)
            from_start = (1.0 - min(to_start / FADE_SPAN, 1.0)) ** 2
            from_end = (1.0 - min(to_end / FADE_SPAN, 1.0)) ** 2
            return int(max(from_start, from_end) * 100.0)
        return DEFAULT_ALPHA

    def circles_back_to_front(self) -> list[Circle]:
        """Circles in drawing order: outermost ring first."""
        return [circle for ring in reversed(self.rings) for circle in ring]