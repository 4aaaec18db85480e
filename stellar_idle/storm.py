"""The nebula storm: arcing lightning bolts and the drifting nebula field."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from stellar_idle.noise import perlin_noise

Point = tuple[float, float]

GROW_TIME = 0.1
FRAME_TIME = 1.0 / 60.0
SPAWN_INTERVAL = 0.1
BOLT_LIFESPAN = 0.8
STORM_CENTER: Point = (640.0 + 240.0 + 64.0, -240.0 - 64.0)
IDLE_DRONE_TARGET: Point = (640.0 + 320.0, 400.0 / 2.0)
ARC_COLOR = 0xB3D3DFFF
BRANCH_COLOR = 0x99B3FFFF
DRONE_BOLT_COLOR = 0xFFFFFFFF
BASE_COLOR = 0x4B77BC33
PINK = 0x942630FF
PURPLE = 0x4B77BCFF
MAX_ALPHA = 120


def _rand(rng: random.Random) -> float:
    return float(rng.getrandbits(32))


def _jitter(rng: random.Random, amount: float) -> float:
    return (_rand(rng) % 101.0 / 100.0 - 0.5) * amount


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def _lerp_point(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def rgba_to_u32(r: int, g: int, b: int, a: int) -> int:
    """Pack four 8-bit channels into an RGBA colour."""
    for channel in (r, g, b, a):
        if not 0 <= channel <= 255:
            raise ValueError(f"channel out of range 0..255: {channel}")
    return (r << 24) | (g << 16) | (b << 8) | a


def u32_to_rgba(color: int) -> tuple[int, int, int, int]:
    """Split an RGBA colour into its four 8-bit channels."""
    return (
        (color >> 24) & 0xFF,
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
    )


def animated_gradient_color(x: float, y: float, time: float, center: Point, radius: float) -> int:
    """Noise-blended pink/purple colour whose alpha fades towards ``radius``."""
    pink = u32_to_rgba(PINK)
    purple = u32_to_rgba(PURPLE)

    noise_val = perlin_noise(x * 0.01 + time * 0.02, y * 0.01 + time * 0.02)
    t = min(max(noise_val * 0.5 + 0.5, 0.0), 1.0)

    distance = math.hypot(x - center[0], y - center[1])
    alpha_start = radius / 2.0
    if distance > alpha_start:
        fade_t = min(max((distance - alpha_start) / (radius - alpha_start), 0.0), 1.0)
        alpha = _round(MAX_ALPHA * (1.0 - fade_t))
    else:
        alpha = MAX_ALPHA

    r, g, b = (
        min(max(_round(p * (1.0 - t) + q * t), 0), 255)
        for p, q in zip(pink[:3], purple[:3])
    )
    return rgba_to_u32(r, g, b, min(max(alpha, 0), 255))


@dataclass
class Segment:
    """One straight piece of a bolt or of the nebula flow."""

    start: Point
    end: Point
    thickness: float
    color: int
    direction: Point = (0.0, 0.0)


@dataclass
class Bolt:
    """A lightning bolt that grows in, holds, then shrinks away."""

    segments: list[Segment]
    age: float = 0.0
    lifespan: float = BOLT_LIFESPAN
    dir: float = 1.0
    origin: Point = (0.0, 0.0)
    angle_speed: float = 0.2
    draw_segments: list[Segment] = field(default_factory=list)

    def center(self) -> Point:
        """Mean of all segment endpoints."""
        if not self.segments:
            raise ValueError("bolt has no segments")
        n = len(self.segments) * 2
        sum_x = sum(s.start[0] + s.end[0] for s in self.segments)
        sum_y = sum(s.start[1] + s.end[1] for s in self.segments)
        return (sum_x / n, sum_y / n)

    def update(self) -> None:
        """Age one frame and rebuild the visible, faded segments."""
        self.age += self.dir / 60.0
        self.draw_segments = []
        count = len(self.segments)
        if count == 0:
            return
        segment_duration = GROW_TIME / count
        shrink_start = self.lifespan - GROW_TIME * 2.0
        alpha = 1.0 - self.age / self.lifespan

        for i, segment in enumerate(self.segments):
            seg_start = i * segment_duration
            seg_end = seg_start + segment_duration
            draw = False
            draw_start, draw_end = segment.start, segment.end

            if self.age < GROW_TIME:
                if seg_start <= self.age < seg_end:
                    draw = True
                    t = (self.age - seg_start) / segment_duration
                    draw_end = _lerp_point(segment.start, segment.end, t)
                elif self.age >= seg_end:
                    draw = True
            elif self.age <= shrink_start:
                draw = True
            else:
                t = (self.age - shrink_start) / (GROW_TIME * 2.0)
                index = math.floor(t * count)
                if i > index:
                    draw = True
                elif i == index:
                    draw = True
                    draw_start = _lerp_point(segment.start, segment.end, math.fmod(t * count, 1.0))

            if draw:
                top = (segment.color >> 24) & 0xFF
                faded_top = min(max(int(top * alpha), 0), 0xFF)
                color = (faded_top << 24) | (segment.color & 0x00FFFFFF)
                self.draw_segments.append(
                    Segment(draw_start, draw_end, segment.thickness, color, segment.direction)
                )


class Nebulous:
    """A field of flow lines drifting outwards from the storm centre."""

    def __init__(
        self,
        rng: random.Random | None = None,
        flow: list[tuple[float, float, int]] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.center: Point = (944.0, -304.0)
        self.counter = 0
        self.k = 24
        self.flow_array: list[tuple[float, float, int]] = list(flow or [])
        self.start_col = _rand(self._rng) % 361.0
        self.rez1 = 0.006
        self.rez2 = 0.005
        self.gap = 4.0
        self.len = 10.0
        self.start_vary = 25.0
        self.radius_max = 480.0
        self.radius_min = 20.0
        self.segments: list[Segment] = []

    def update(self) -> None:
        """Extend the flow every 120 frames and drift all segments."""
        if self.counter % 120 == 0:
            self.make_segments(self._rng)

        cx, cy = self.center
        for segment in self.segments:
            sx, sy = segment.start
            angle = math.atan2(sy - cy, sx - cx)
            offset = angle + (perlin_noise(sx * self.rez2, sy * self.rez2) - 0.5) * math.pi / 2.0
            dx = math.cos(offset) / self.len
            dy = math.sin(offset) / self.len
            segment.start = (sx + dx, sy + dy)
            segment.end = (segment.end[0] + dx, segment.end[1] + dy)

        self.counter = (self.counter + 1) % 256

    def make_segments(self, rng: random.Random) -> None:
        """Trim old segments when too many, then add one per flow point."""
        if len(self.segments) > len(self.flow_array) * 5:
            for i in range(len(self.flow_array) + 1):
                del self.segments[i]

        cx, cy = self.center
        for i, (x, y, color) in enumerate(self.flow_array):
            base_angle = math.atan2(y - cy, x - cx)
            ang = base_angle + (perlin_noise(x * self.rez1, y * self.rez1) - 0.2) * 1.7 * math.pi
            new_x = math.cos(ang) * self.len + x
            new_y = math.sin(ang) * self.len + y
            self.segments.append(
                Segment(
                    start=(x, y),
                    end=(new_x, new_y),
                    thickness=8.0 + _rand(rng) % 40.0,
                    color=color,
                )
            )
            self.flow_array[i] = (new_x, new_y, color)

    def recolor(self, tick: int) -> list[Segment]:
        """Recolour segments for ``tick``; return them in drawing order (oldest skipped)."""
        ordered = [self.segments[i] for i in range(len(self.segments) - 1, 0, -1)]
        for segment in ordered:
            segment.color = animated_gradient_color(
                segment.start[0], segment.start[1], float(tick), self.center, self.radius_max
            )
        return ordered


class NebulaStorm:
    """Spawns arcing bolts and conduit lightning around the storm."""

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self.bolts: list[Bolt] = []
        self.spawn_timer = 0.0
        self.field = Nebulous(rng)

    def update(self, rng: random.Random) -> None:
        """Spawn a bolt when due and age out expired ones."""
        self.spawn_timer += FRAME_TIME
        if self.spawn_timer >= SPAWN_INTERVAL:
            self.spawn_timer = 0.0
            center = (STORM_CENTER[0] + _rand(rng) % 64.0, STORM_CENTER[1])
            radius = 120.0 + _rand(rng) % 241.0
            start_angle = 64.0 + _rand(rng) % 65.0
            arc_span = 90.0 + _rand(rng) % 32.0 - radius / 360.0 * 32.0
            segments = NebulaStorm.generate_arc_lightning(
                center, radius, start_angle, arc_span, 15, 25.0, rng
            )
            self.bolts.append(Bolt(segments=segments, origin=center))

        alive = []
        for bolt in self.bolts:
            bolt.update()
            if bolt.age < bolt.lifespan:
                alive.append(bolt)
        self.bolts = alive

    def drone_target(self) -> Point:
        """Where a conduit drone should head: the oldest bolt, or a default spot."""
        if not self.bolts:
            return IDLE_DRONE_TARGET
        return self.bolts[0].center()

    def generate_drone_lightning(
        self,
        origin: Point,
        segments: int,
        target: Point,
        rng: random.Random,
    ) -> Point:
        """Add a bolt from ``origin`` towards ``target``; return where it ends."""
        if segments < 2:
            raise ValueError(f"need at least 2 segments, got {segments}")
        points = []
        for i in range(segments):
            t = i / segments
            x = origin[0] * (1.0 - t) + target[0] * t
            y = origin[1] * (1.0 - t) + target[1] * t
            if i < segments - 4:
                x += _jitter(rng, 25.0)
                y += _jitter(rng, 25.0)
            points.append((x, y))

        mid = len(points) // 2
        pieces = [
            Segment(
                start=a,
                end=b,
                thickness=max(8.0 - abs(i - mid) * 1.5, 1.0),
                color=DRONE_BOLT_COLOR,
            )
            for i, (a, b) in enumerate(zip(points, points[1:]))
        ]
        self.bolts.append(Bolt(segments=pieces, origin=origin))
        return pieces[-1].end

    @staticmethod
    def generate_arc_lightning(
        center: Point,
        radius: float,
        start_angle_deg: float,
        arc_span_deg: float,
        segments: int,
        jaggedness: float,
        rng: random.Random,
    ) -> list[Segment]:
        """A jagged arc of ``segments`` pieces, with occasional side branches."""
        if segments < 1:
            raise ValueError(f"need at least 1 segment, got {segments}")
        points = []
        for i in range(segments + 1):
            angle = math.radians(start_angle_deg + arc_span_deg * (i / segments))
            x = center[0] + radius * math.cos(angle)
            y = center[1] + radius * math.sin(angle)
            points.append((x + _jitter(rng, jaggedness), y + _jitter(rng, jaggedness)))

        mid = len(points) // 2
        result: list[Segment] = []
        for i, (start, end) in enumerate(zip(points, points[1:])):
            result.append(
                Segment(
                    start=start,
                    end=end,
                    thickness=max(6.0 - abs(i - mid) * 1.0, 1.0),
                    color=ARC_COLOR,
                )
            )
            if _rand(rng) % 100.0 < 20.0:
                branch_angle = math.radians(_rand(rng) % 60.0 - 30.0)
                branch_length = 30.0 + _rand(rng) % 20.0
                angle = math.atan2(end[1] - start[1], end[0] - start[0]) + branch_angle
                result.append(
                    Segment(
                        start=end,
                        end=(
                            end[0] + branch_length * math.cos(angle),
                            end[1] + branch_length * math.sin(angle),
                        ),
                        thickness=1.0,
                        color=BRANCH_COLOR,
                    )
                )
        return result