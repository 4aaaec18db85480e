"""The belt of asteroids that mining drones harvest."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

TAU = math.tau
ORBIT_CENTER = 1344.0
START_ANGLE = math.pi / 2 + 0.62
END_ANGLE = 2.5
FADE_START = 2.45
MAX_DEBRIS = 10
BELTS = 3
MINABLE_ANGLE = 2.3
MINABLE_RADIUS = 2040.0
_TINTS = (0x55555500, 0x94949400)
_DEFAULT_TINT = 0xFFFFFF00


def _percent(rng: random.Random) -> float:
    return (rng.getrandbits(32) % 101) / 100.0


@dataclass
class Debris:
    """A chunk thrown off an asteroid while it is drilled."""

    pos: tuple[float, float]
    angle: float
    speed: float
    size: float
    lifetime: int
    timer: int = 0

    def update(self, anchor: tuple[float, float]) -> bool:
        """Move away from ``anchor``; return True once the chunk has expired."""
        self.timer += 1
        if self.timer >= self.lifetime:
            return True
        ax, ay = anchor
        self.pos = (
            ax + self.timer * self.speed * math.cos(self.angle),
            ay - self.timer * self.speed * math.sin(self.angle),
        )
        if self.timer >= self.lifetime // 2:
            self.size *= 0.95
        return False


def _spawn_debris(pos: tuple[float, float], size: float, rng: random.Random) -> Debris:
    return Debris(
        pos=pos,
        angle=float(rng.getrandbits(32)) % TAU,
        speed=-(_percent(rng) * 0.2 + 0.1),
        size=6.0 + size / 3.0 * _percent(rng),
        lifetime=30 + rng.getrandbits(32) % 30,
    )


@dataclass
class Asteroid:
    """An asteroid travelling along a wide arc around the orbit centre."""

    angle: float
    speed: float
    radius: float
    size: float
    id: int
    pos: tuple[float, float] = (-320.0, -320.0)
    drilling: bool = False
    debris: list[Debris] = field(default_factory=list)
    sprite: int = 0
    rot: int = 0

    def update(self, rng: random.Random) -> None:
        """Advance along the orbit and animate any drilling debris."""
        self.angle -= self.speed
        if self.angle > TAU:
            self.angle -= TAU
        self.pos = (
            ORBIT_CENTER + self.radius * math.cos(self.angle),
            ORBIT_CENTER - self.radius * math.sin(self.angle),
        )
        if self.drilling and len(self.debris) < MAX_DEBRIS:
            self.debris.append(_spawn_debris(self.pos, self.size, rng))
        kept = []
        for chunk in self.debris:
            if not chunk.update(self.pos):
                kept.append(chunk)
        self.debris = kept

    def tint(self, color_index: int) -> int:
        """RGBA tint for the given belt, fading out near the end of the arc."""
        fade = min(max((END_ANGLE - self.angle) / (END_ANGLE - FADE_START), 0.0), 1.0)
        alpha = int(fade * 255.0)
        base = _TINTS[color_index] if 0 <= color_index < len(_TINTS) else _DEFAULT_TINT
        return base | alpha

    @property
    def sprite_name(self) -> str:
        return f"stroid_{self.sprite:02}"

    @property
    def rotation(self) -> int:
        return self.rot * 90


def _spawn_asteroid(rng: random.Random) -> Asteroid:
    speed = -(_percent(rng) * 0.0001 + 0.0001)
    radius = 1920.0 + 384.0 * _percent(rng)
    size = 8.0 + rng.getrandbits(32) % 17
    ident = rng.getrandbits(32)
    return Asteroid(
        angle=START_ANGLE,
        speed=speed,
        radius=radius,
        size=size,
        id=ident,
        sprite=rng.getrandbits(32) % 4,
        rot=rng.getrandbits(32) % 4,
    )


@dataclass
class AsteroidField:
    """Three belts of asteroids, filled in turn at a fixed interval."""

    asteroids: list[list[Asteroid]] = field(default_factory=lambda: [[] for _ in range(BELTS)])
    limit: int = 350
    spawn_interval: int = 10
    timer: int = 0
    belt_index: int = 0

    def update(self, rng: random.Random) -> None:
        """Move asteroids, drop finished ones, and spawn new ones."""
        for belt in self.asteroids:
            for asteroid in belt:
                asteroid.update(rng)
        self.asteroids = [[a for a in belt if a.angle < END_ANGLE] for belt in self.asteroids]

        self.timer += 1
        total = sum(len(belt) for belt in self.asteroids)
        if total < self.limit and self.timer >= self.spawn_interval:
            self.asteroids[self.belt_index].append(_spawn_asteroid(rng))
            self.timer = 0
            self.belt_index = (self.belt_index + 1) % BELTS

    def candidates(self) -> list[Asteroid]:
        """Asteroids of the nearest belt that drones may mine."""
        return [
            a for a in self.asteroids[0]
            if a.angle < MINABLE_ANGLE and a.radius < MINABLE_RADIUS
        ]

    def find(self, asteroid_id: int) -> Asteroid | None:
        """The asteroid of the nearest belt with the given id, if any."""
        return next((a for a in self.asteroids[0] if a.id == asteroid_id), None)