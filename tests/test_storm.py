import math
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from stellar_idle.storm import (
    ARC_COLOR,
    BRANCH_COLOR,
    Bolt,
    NebulaStorm,
    Nebulous,
    Segment,
    animated_gradient_color,
    rgba_to_u32,
    u32_to_rgba,
)

channel = st.integers(min_value=0, max_value=255)


@given(channel, channel, channel, channel)
def test_rgba_round_trip(r, g, b, a):
    assert u32_to_rgba(rgba_to_u32(r, g, b, a)) == (r, g, b, a)


def test_u32_to_rgba_splits_channels():
    assert u32_to_rgba(0x942630FF) == (0x94, 0x26, 0x30, 0xFF)


def test_rgba_to_u32_rejects_out_of_range():
    with pytest.raises(ValueError):
        rgba_to_u32(256, 0, 0, 0)


def test_gradient_full_alpha_at_center():
    color = animated_gradient_color(944.0, -304.0, 0.0, (944.0, -304.0), 480.0)
    assert color & 0xFF == 120


def test_gradient_transparent_beyond_radius():
    color = animated_gradient_color(944.0 + 1000.0, -304.0, 5.0, (944.0, -304.0), 480.0)
    assert color & 0xFF == 0


def test_gradient_rgb_between_pink_and_purple():
    r, g, b, _ = u32_to_rgba(animated_gradient_color(10.0, 20.0, 3.0, (0.0, 0.0), 480.0))
    pr, pg, pb, _ = u32_to_rgba(0x942630FF)
    qr, qg, qb, _ = u32_to_rgba(0x4B77BCFF)
    assert min(pr, qr) <= r <= max(pr, qr)
    assert min(pg, qg) <= g <= max(pg, qg)
    assert min(pb, qb) <= b <= max(pb, qb)


def _main(segments):
    return [s for s in segments if s.color == ARC_COLOR]


def test_arc_lightning_main_chain_is_connected():
    segs = NebulaStorm.generate_arc_lightning((0.0, 0.0), 200.0, 64.0, 90.0, 15, 25.0, random.Random(3))
    main = _main(segs)
    assert len(main) == 15
    for a, b in zip(main, main[1:]):
        assert a.end == b.start


def test_arc_lightning_without_jitter_lies_on_circle():
    segs = NebulaStorm.generate_arc_lightning((5.0, 7.0), 150.0, 64.0, 90.0, 10, 0.0, random.Random(1))
    main = _main(segs)
    for seg in main:
        assert math.hypot(seg.start[0] - 5.0, seg.start[1] - 7.0) == pytest.approx(150.0)
    first_angle = math.degrees(math.atan2(main[0].start[1] - 7.0, main[0].start[0] - 5.0))
    assert first_angle == pytest.approx(64.0)


def test_arc_lightning_thickness_and_branches():
    segs = NebulaStorm.generate_arc_lightning((0.0, 0.0), 200.0, 64.0, 90.0, 15, 25.0, random.Random(11))
    main = _main(segs)
    assert max(s.thickness for s in main) == 6.0
    assert min(s.thickness for s in main) >= 1.0
    for seg in segs:
        if seg.color == BRANCH_COLOR:
            length = math.hypot(seg.end[0] - seg.start[0], seg.end[1] - seg.start[1])
            assert 30.0 <= length < 50.0 + 1e-9
            assert seg.thickness == 1.0


def test_arc_lightning_rejects_zero_segments():
    with pytest.raises(ValueError):
        NebulaStorm.generate_arc_lightning((0.0, 0.0), 100.0, 0.0, 90.0, 0, 1.0, random.Random(0))


def test_drone_lightning_ends_at_target():
    storm = NebulaStorm(random.Random(0))
    end = storm.generate_drone_lightning((10.0, 20.0), 6, (10.0, 20.0), random.Random(2))
    assert end == (10.0, 20.0)
    assert len(storm.bolts) == 1
    bolt = storm.bolts[0]
    assert len(bolt.segments) == 5
    assert all(s.color == 0xFFFFFFFF for s in bolt.segments)
    assert bolt.segments[-1].end == end


def test_drone_lightning_rejects_too_few_segments():
    storm = NebulaStorm(random.Random(0))
    with pytest.raises(ValueError):
        storm.generate_drone_lightning((0.0, 0.0), 1, (5.0, 5.0), random.Random(0))


def test_drone_target_idle_default():
    storm = NebulaStorm(random.Random(0))
    assert storm.drone_target() == (960.0, 200.0)


def test_drone_target_follows_first_bolt():
    storm = NebulaStorm(random.Random(0))
    storm.generate_drone_lightning((10.0, 20.0), 4, (10.0, 20.0), random.Random(0))
    assert storm.drone_target() == pytest.approx((10.0, 20.0))


def test_bolt_center_of_empty_bolt_raises():
    with pytest.raises(ValueError):
        Bolt(segments=[]).center()


def test_bolt_center_is_mean_of_endpoints():
    bolt = Bolt(segments=[Segment((0.0, 0.0), (2.0, 4.0), 1.0, 0xFFFFFFFF)])
    assert bolt.center() == (1.0, 2.0)


def _line(n):
    return [Segment((float(i), 0.0), (float(i + 1), 0.0), 1.0, 0xFFFFFFFF) for i in range(n)]


def test_bolt_grows_one_segment_at_a_time():
    bolt = Bolt(segments=_line(3))
    bolt.update()
    assert len(bolt.draw_segments) == 1
    drawn = bolt.draw_segments[0]
    assert drawn.start == (0.0, 0.0)
    assert 0.0 < drawn.end[0] < 1.0


def test_bolt_fully_drawn_and_faded():
    bolt = Bolt(segments=_line(3), age=0.3)
    bolt.update()
    assert len(bolt.draw_segments) == 3
    for seg in bolt.draw_segments:
        assert (seg.color >> 24) < 0xFF
        assert seg.color & 0x00FFFFFF == 0x00FFFFFF


def test_bolt_shrinks_from_the_start():
    bolt = Bolt(segments=_line(4), age=0.65)
    bolt.update()
    assert len(bolt.draw_segments) == 3
    assert bolt.draw_segments[0].start[0] > 1.0
    assert bolt.draw_segments[-1].end == (4.0, 0.0)


def test_storm_spawns_and_expires_bolts():
    rng = random.Random(5)
    storm = NebulaStorm(rng)
    for _ in range(7):
        storm.update(rng)
    assert storm.bolts
    for _ in range(200):
        storm.update(rng)
        assert all(b.age < b.lifespan for b in storm.bolts)
    assert len(storm.bolts) <= 10


def test_make_segments_extends_flow():
    field = Nebulous(random.Random(0), flow=[(900.0, -300.0, 0x4B77BC33)])
    field.make_segments(random.Random(1))
    assert len(field.segments) == 1
    seg = field.segments[0]
    assert seg.start == (900.0, -300.0)
    assert math.hypot(seg.end[0] - 900.0, seg.end[1] + 300.0) == pytest.approx(10.0)
    assert field.flow_array[0][:2] == seg.end
    assert seg.color == 0x4B77BC33
    assert 8.0 <= seg.thickness < 48.0


def test_make_segments_trims_old_segments():
    field = Nebulous(random.Random(0), flow=[(900.0, -300.0, 1)])
    field.segments = [Segment((0.0, 0.0), (1.0, 0.0), float(i), 0) for i in range(6)]
    field.make_segments(random.Random(1))
    assert len(field.segments) == 5
    assert [s.thickness for s in field.segments[:4]] == [1.0, 3.0, 4.0, 5.0]


def test_nebulous_update_drifts_segments():
    field = Nebulous(random.Random(0), flow=[(900.0, -300.0, 1)])
    field.update()
    seg = field.segments[0]
    start, end = seg.start, seg.end
    field.counter = 1
    field.update()
    dx = seg.start[0] - start[0]
    dy = seg.start[1] - start[1]
    assert math.hypot(dx, dy) == pytest.approx(0.1)
    assert seg.end[0] - end[0] == pytest.approx(dx)
    assert seg.end[1] - end[1] == pytest.approx(dy)


def test_nebulous_counter_wraps():
    field = Nebulous(random.Random(0))
    field.counter = 255
    field.update()
    assert field.counter == 0


def test_recolor_skips_oldest_segment():
    field = Nebulous(random.Random(0))
    field.segments = [Segment((944.0 + i, -304.0), (945.0 + i, -304.0), 8.0, 0) for i in range(3)]
    ordered = field.recolor(10)
    assert ordered == [field.segments[2], field.segments[1]]
    assert ordered[0] is field.segments[2]
    assert all((s.color & 0xFF) <= 120 for s in ordered)
    assert field.segments[0].color == 0


def test_recolor_empty_field():
    assert Nebulous(random.Random(0)).recolor(0) == []