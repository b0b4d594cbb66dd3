"""Tests for gravity, movement, and tilt system factories."""
from __future__ import annotations

import math

import pytest

from flaptick.core import Engine, GameMode
from flaptick.physics.components import Gravity, Tilt, Transform, Velocity
from flaptick.physics.systems import (
    make_gravity_system,
    make_movement_system,
    make_tilt_system,
)


def _make_engine() -> Engine:
    return Engine(seed=42)


class TestGravitySystem:
    def test_subtracts_g_times_dt(self) -> None:
        engine = _make_engine()
        eid = engine.world.spawn(Velocity(value=(0.0, 1.0)), Gravity())
        engine.add_system(make_gravity_system(9.8))
        engine.step(0.5)
        assert engine.world.get(eid, Velocity).value == pytest.approx((0.0, 1.0 - 4.9))

    @pytest.mark.parametrize("dt", [1 / 144, 1 / 60, 1 / 30, 0.1, 0.25])
    def test_every_frame_uses_that_frames_dt(self, dt: float) -> None:
        engine = _make_engine()
        eid = engine.world.spawn(Velocity(value=(0.0, 3.0)), Gravity())
        engine.add_system(make_gravity_system(9.8))
        velocity = engine.world.get(eid, Velocity)
        for _ in range(10):
            before = velocity.value[1]
            engine.step(dt)
            assert math.isclose(velocity.value[1], before - 9.8 * dt, abs_tol=1e-9)

    def test_only_gravity_entities_fall(self) -> None:
        engine = _make_engine()
        floating = engine.world.spawn(Velocity(value=(-4.5, 0.0)))
        engine.add_system(make_gravity_system(9.8))
        engine.step(0.1)
        assert engine.world.get(floating, Velocity).value == (-4.5, 0.0)

    def test_horizontal_velocity_untouched(self) -> None:
        engine = _make_engine()
        eid = engine.world.spawn(Velocity(value=(2.0, 0.0)), Gravity())
        engine.add_system(make_gravity_system(9.8))
        engine.step(0.1)
        assert engine.world.get(eid, Velocity).value[0] == 2.0

    def test_zero_dt_is_noop(self) -> None:
        engine = _make_engine()
        eid = engine.world.spawn(Velocity(value=(0.0, 1.5)), Gravity())
        engine.add_system(make_gravity_system(9.8))
        engine.step(0.0)
        assert engine.world.get(eid, Velocity).value == (0.0, 1.5)


class TestMovementSystem:
    def test_position_adds_velocity_per_frame(self) -> None:
        engine = _make_engine()
        eid = engine.world.spawn(
            Transform(position=(0.0, 0.0)), Velocity(value=(-4.5, 2.0))
        )
        engine.add_system(make_movement_system())
        engine.step(0.016)
        engine.step(0.5)
        # Unit timestep: dt does not scale the displacement.
        assert engine.world.get(eid, Transform).position == pytest.approx((-9.0, 4.0))

    def test_entities_without_velocity_stay_put(self) -> None:
        engine = _make_engine()
        eid = engine.world.spawn(Transform(position=(3.0, 4.0)))
        engine.add_system(make_movement_system())
        engine.step(0.1)
        assert engine.world.get(eid, Transform).position == (3.0, 4.0)

    def test_runs_with_no_entities(self) -> None:
        engine = _make_engine()
        engine.add_system(make_movement_system())
        engine.step(0.1)


class TestTiltSystem:
    @pytest.mark.parametrize(
        "vy, expected",
        [
            (0.0, 0.0),
            (5.0, math.pi / 4),
            (-5.0, -math.pi / 4),
            (4.5, 4.5 / 5 * math.pi / 4),
            (-10.0, -math.pi / 2),
        ],
    )
    def test_rotation_proportional_to_vertical_velocity(self, vy, expected) -> None:
        engine = _make_engine()
        eid = engine.world.spawn(
            Transform(position=(0.0, 0.0)), Velocity(value=(0.0, vy)), Tilt()
        )
        engine.add_system(make_tilt_system())
        engine.step(0.1)
        assert math.isclose(engine.world.get(eid, Transform).rotation, expected, abs_tol=1e-12)

    def test_untilted_entities_keep_rotation(self) -> None:
        engine = _make_engine()
        eid = engine.world.spawn(
            Transform(position=(0.0, 0.0), rotation=0.3), Velocity(value=(0.0, 5.0))
        )
        engine.add_system(make_tilt_system())
        engine.step(0.1)
        assert engine.world.get(eid, Transform).rotation == 0.3

    def test_runs_in_any_mode(self) -> None:
        engine = Engine(seed=1, initial_mode=GameMode.IN_GAME)
        eid = engine.world.spawn(
            Transform(position=(0.0, 0.0)), Velocity(value=(0.0, 5.0)), Tilt()
        )
        engine.add_system(make_tilt_system())
        engine.step(0.1)
        assert math.isclose(engine.world.get(eid, Transform).rotation, math.pi / 4)
