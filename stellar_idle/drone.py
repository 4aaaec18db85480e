"""Worker drones that survey, mine, ship and conduct power between stations."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum

from stellar_idle.asteroid_field import Asteroid, AsteroidField
from stellar_idle.resources import Resource
from stellar_idle.storm import STORM_CENTER, NebulaStorm

Point = tuple[float, float]
Box = tuple[int, int, int, int]

TAU = math.tau
SURVEY_RADIUS_X = 100.0
SURVEY_RADIUS_Y = 25.0
SCAN_RADIUS = 32.0
WANDER_ARC_START = 0.35
WANDER_ARC_END = 4.0
WANDER_SPEED = 0.008
CONDUIT_SEGMENTS = 15


class DroneMode(Enum):
    SURVEY = "survey"
    MINING = "mining"
    SHIPPING = "shipping"
    CONDUIT = "conduit"

    @property
    def interval(self) -> float:
        """Ticks one work cycle of this mode takes."""
        return _INTERVALS[self]


_INTERVALS = {
    DroneMode.SURVEY: 800.0,
    DroneMode.MINING: 500.0,
    DroneMode.SHIPPING: 300.0,
    DroneMode.CONDUIT: 400.0,
}


@dataclass(frozen=True)
class StationLayout:
    """The (x, y, w, h) boxes of the stations drones travel between."""

    planet: Box
    depot: Box
    mines: Box
    plant: Box

    @staticmethod
    def _center(box: Box) -> Point:
        x, y, w, h = box
        return (float(x + w // 2), float(y + h // 2))

    @property
    def planet_center(self) -> Point:
        return self._center(self.planet)

    @property
    def depot_center(self) -> Point:
        return self._center(self.depot)

    @property
    def plant_center(self) -> Point:
        return self._center(self.plant)

    @property
    def plant_terminal(self) -> Point:
        """Where conduit lightning lands on the power plant."""
        x, y, w, _ = self.plant
        return (float(x + w) - 24.0, float(y) + 16.0)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _pick(field: AsteroidField, rng: random.Random) -> Asteroid | None:
    candidates = field.candidates()
    if not candidates:
        return None
    return candidates[rng.getrandbits(32) % len(candidates)]


def _signed_rand_mod(rng: random.Random, modulus: int) -> int:
    """A 32-bit random value read as signed, reduced with a truncating remainder."""
    value = rng.getrandbits(32)
    if value >= 2**31:
        value -= 2**32
    return int(math.fmod(value, modulus))


class Drone:
    """A drone working for one station in one mode."""

    def __init__(
        self,
        mode: DroneMode,
        level: int,
        speed: int,
        target_pos: tuple[int, int],
        layout: StationLayout,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.layout = layout
        self.mode = mode
        self.level = level
        self.speed = speed
        self.pos: Point = layout.depot_center
        self.target_pos: Point = (float(target_pos[0]), float(target_pos[1]))
        self.front = True
        self.interval = mode.interval
        self.timer = 0.0
        self.phase = (float(self._rng.getrandbits(32)) % 101.0) / 100.0
        self.angle = 0.0
        self.scan: tuple[Point, Point] | None = None
        self.asteroid_id = 0
        self.cargo: list[tuple[Resource, int]] = []
        self.on_site = False
        self.wander_progress = 0.0
        self.wander_forward = False

    def follow(self, speed_mult: float) -> bool:
        """Step towards the target; snap to it and return True once close enough."""
        dx = self.target_pos[0] - self.pos[0]
        dy = self.target_pos[1] - self.pos[1]
        magnitude = math.hypot(dx, dy)
        nx, ny = (dx / magnitude, dy / magnitude) if magnitude != 0.0 else (0.0, 0.0)

        step = 1.0 + 0.1 * self.speed * speed_mult
        self.pos = (self.pos[0] + nx * step, self.pos[1] + ny * step)

        rx = self.target_pos[0] - self.pos[0]
        ry = self.target_pos[1] - self.pos[1]
        # The vertical tolerance ignores the speed multiplier.
        if abs(rx) < step and abs(ry) < 1.0 + 0.1 * self.speed:
            self.pos = self.target_pos
            return True
        return False

    def wander(self) -> None:
        """Sweep back and forth along an arc around the storm."""
        cx, cy = STORM_CENTER
        base_radius = 240.0 + self.phase * 120.0

        if math.isnan(self.wander_progress):
            self.wander_progress = 0.0
            self.wander_forward = True

        if self.wander_forward:
            self.wander_progress += WANDER_SPEED
            if self.wander_progress >= 1.0:
                self.wander_progress = 1.0
                self.wander_forward = False
        else:
            self.wander_progress -= WANDER_SPEED
            if self.wander_progress <= 0.0:
                self.wander_progress = 0.0
                self.wander_forward = True

        angle = WANDER_ARC_START + (WANDER_ARC_END - WANDER_ARC_START) * self.wander_progress
        self.target_pos = (cx + base_radius * math.cos(angle), cy + base_radius * math.sin(angle))
        self.follow(0.1)

    def survey(self, drone_speed: float) -> bool:
        """Orbit the planet; return True when a new scan is emitted."""
        if drone_speed <= 0:
            raise ValueError(f"drone speed must be positive, got {drone_speed}")
        cycle = self.timer / drone_speed
        angle = (cycle + self.phase) * TAU
        cx, cy = self.layout.planet_center
        oscillation = 0.25 + 0.75 * (0.5 + 0.5 * math.sin(cycle * TAU))
        orbit = (
            cx + SURVEY_RADIUS_X * math.cos(angle),
            cy + SURVEY_RADIUS_Y * oscillation * math.sin(angle),
        )

        if not self.on_site:
            self.timer = drone_speed / 2.0 - 1.0
            self.target_pos = orbit
            if self.follow(0.1):
                self.on_site = True
            return False

        self.pos = orbit
        self.front = self.pos[1] >= cy
        self.timer += 1.0
        delta = math.fmod(abs(self.timer - drone_speed), drone_speed / 2.0)
        if delta <= 1.0 and self.scan is None:
            target = (
                cx + SCAN_RADIUS * math.cos(angle),
                cy + SCAN_RADIUS * oscillation * math.sin(angle),
            )
            self.scan = (self.pos, target)
            return True
        if self.timer >= drone_speed:
            self.timer = 0.0
        return False

    def end_scan(self) -> None:
        """Mark the current scan as finished so another may start."""
        self.scan = None

    def shipping(self) -> tuple[Resource, int] | None:
        """Ferry metals from the mines to the depot; report each load and delivery."""
        dx, dy, dw, dh = self.layout.depot
        mx, my, mw, mh = self.layout.mines
        home = (float(dx + dw // 2), float(dy + dh - 8))
        mines = (
            float(mx + mw // 2) - 6.0 - _round_half_up(self.phase * 2.0) * 8.0,
            float(my + 2 * mh // 3),
        )

        if self.on_site:
            self.timer += 1.0 + self.speed * 0.2
            angle = self.timer / self.interval * TAU
            reach = 8.0 + self.phase * 16.0
            self.target_pos = (home[0] + reach * math.sin(angle), home[1] + reach * math.cos(angle))
            self.follow(0.1)
            if self.timer >= self.interval:
                self.timer = 0.0
                amount = _round_half_up((1.0 + self.speed * 0.2) * 10.0 + self.level * 0.75 * 5.0)
                resource, held = self.cargo[0]
                if amount >= held:
                    self.cargo.clear()
                    self.target_pos = mines
                    self.on_site = False
                else:
                    self.cargo[0] = (resource, held - amount)
                return (Resource.METALS, amount)
            return None

        self.target_pos = home if self.cargo else mines
        if self.follow(0.2):
            if self.cargo:
                self.on_site = True
            else:
                self.timer += 1.0
                if self.timer >= self.interval:
                    self.timer = 0.0
                    amount = int((1.0 + self.level * 0.75) * 32.0)
                    self.cargo.append((Resource.METALS, amount))
                    self.target_pos = home
                    return (Resource.METALS, amount)
        return None

    def _choose(self, field: AsteroidField, rng: random.Random) -> None:
        asteroid = _pick(field, rng)
        if asteroid is not None:
            self.asteroid_id = asteroid.id
            self.target_pos = asteroid.pos

    def update_mining(self, field: AsteroidField, rng: random.Random) -> bool:
        """Drill asteroids and return to the mines; True when a load is unloaded."""
        if self.on_site:
            self.timer += 1.0 + self.speed * 0.5
            if self.timer >= self.interval / 4.0:
                self.timer = 0.0
                self.cargo.clear()
                self._choose(field, rng)
                self.on_site = False
                return True
            return False

        done = self.follow(0.15)
        if not self.cargo:
            asteroid = field.find(self.asteroid_id)
            if asteroid is None:
                self._choose(field, rng)
            elif done:
                self.timer += 1.0 + self.speed * 0.15
                asteroid.drilling = True
                self.target_pos = asteroid.pos
                if self.timer >= self.interval:
                    self.timer = 0.0
                    self.cargo.append((Resource.METALS, 0))
                    offset = _signed_rand_mod(rng, 33)
                    self.target_pos = (15.0 + float(self.layout.mines[0] + offset), 0.0)
                    asteroid.drilling = False
            else:
                self.target_pos = asteroid.pos
        elif done:
            self.on_site = True
        return False

    def conduit(self, nebula: NebulaStorm, rng: random.Random) -> bool:
        """Harvest storm power; return True each time a charge is sent to the plant."""
        if self.on_site:
            self.wander()
            self.timer += 1.0
            if self.timer >= self.interval:
                self.timer = 0.0
                self.target_pos = nebula.drone_target()
                nebula.generate_drone_lightning(
                    self.pos, CONDUIT_SEGMENTS, self.layout.plant_terminal, rng
                )
                return True
        else:
            self.target_pos = self.layout.plant_center
            self.on_site = self.follow(0.1)
        return False