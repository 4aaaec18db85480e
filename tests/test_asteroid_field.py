import math
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from stellar_idle.asteroid_field import Asteroid, AsteroidField, Debris


def _asteroid(angle=2.0, radius=2000.0, ident=1, speed=-0.0001):
    return Asteroid(angle=angle, speed=speed, radius=radius, size=10.0, id=ident)


def test_first_spawn_after_interval():
    field = AsteroidField()
    rng = random.Random(1)
    for _ in range(9):
        field.update(rng)
    assert sum(len(b) for b in field.asteroids) == 0
    field.update(rng)
    assert len(field.asteroids[0]) == 1


def test_spawns_cycle_through_belts():
    field = AsteroidField()
    rng = random.Random(2)
    for _ in range(40):
        field.update(rng)
    assert [len(b) for b in field.asteroids] == [2, 1, 1]
    assert field.belt_index == 1


def test_limit_respected():
    field = AsteroidField(limit=2)
    rng = random.Random(3)
    for _ in range(200):
        field.update(rng)
    assert sum(len(b) for b in field.asteroids) == 2


def test_spawned_asteroid_ranges():
    field = AsteroidField(spawn_interval=1)
    rng = random.Random(4)
    for _ in range(30):
        field.update(rng)
    for belt in field.asteroids:
        for a in belt:
            assert 8.0 <= a.size <= 24.0
            assert 1920.0 <= a.radius <= 2304.0
            assert -0.0002 <= a.speed <= -0.0001
            assert 0 <= a.sprite < 4 and 0 <= a.rot < 4
            assert a.sprite_name.startswith("stroid_0")


def test_asteroid_moves_on_circle():
    a = _asteroid()
    a.update(random.Random(0))
    assert math.hypot(a.pos[0] - 1344.0, a.pos[1] - 1344.0) == pytest.approx(a.radius)
    assert a.angle > 2.0


def test_finished_asteroid_removed():
    field = AsteroidField()
    field.asteroids[1].append(_asteroid(angle=2.4999, speed=-0.001))
    field.asteroids[0].append(_asteroid(angle=2.0))
    field.update(random.Random(5))
    assert field.asteroids[1] == []
    assert len(field.asteroids[0]) == 1


def test_tint_values():
    assert _asteroid(angle=2.0).tint(0) == 0x555555FF
    assert _asteroid(angle=2.5).tint(1) == 0x94949400
    assert _asteroid(angle=2.0).tint(7) == 0xFFFFFFFF


@given(st.floats(min_value=0.0, max_value=6.2), st.integers(min_value=0, max_value=5))
def test_tint_alpha_in_byte(angle, index):
    color = _asteroid(angle=angle).tint(index)
    assert 0 <= color & 0xFF <= 255
    assert color >> 8 in (0x555555, 0x949494, 0xFFFFFF)


def test_drilling_produces_bounded_debris():
    a = _asteroid()
    a.drilling = True
    rng = random.Random(6)
    for _ in range(60):
        a.update(rng)
        assert len(a.debris) <= 10
    assert a.debris


def test_debris_lifecycle():
    d = Debris(pos=(0.0, 0.0), angle=0.5, speed=-0.1, size=10.0, lifetime=4)
    assert d.update((5.0, 5.0)) is False
    assert d.size == 10.0
    assert math.hypot(d.pos[0] - 5.0, d.pos[1] - 5.0) == pytest.approx(0.1)
    assert d.update((5.0, 5.0)) is False
    assert d.size < 10.0
    assert d.update((5.0, 5.0)) is False
    assert d.update((5.0, 5.0)) is True


def test_candidates_filter():
    field = AsteroidField()
    good = _asteroid(angle=2.0, radius=2000.0, ident=1)
    too_far_along = _asteroid(angle=2.35, radius=2000.0, ident=2)
    too_wide = _asteroid(angle=2.0, radius=2100.0, ident=3)
    other_belt = _asteroid(angle=2.0, radius=2000.0, ident=4)
    field.asteroids[0].extend([good, too_far_along, too_wide])
    field.asteroids[1].append(other_belt)
    assert field.candidates() == [good]


def test_find_by_id():
    field = AsteroidField()
    a = _asteroid(ident=42)
    field.asteroids[0].append(a)
    assert field.find(42) is a
    assert field.find(43) is None