"""Tests for the avatar's cyclic animation frames."""
import pytest

from flaptick.core import Engine, GameMode
from flaptick.game.components import AnimationFrames
from flaptick.game.config import GameConfig
from flaptick.game.spawner import spawn_avatar
from flaptick.game.systems import make_animation_system
from flaptick.schedule import Repeating


# --- AnimationFrames ---

def test_starts_at_first():
    assert AnimationFrames(first=2, last=5).index == 2


def test_advance_cycles_and_wraps():
    frames = AnimationFrames(first=0, last=3)
    assert [frames.advance() for _ in range(6)] == [1, 2, 3, 0, 1, 2]


def test_single_frame_range_stays_put():
    frames = AnimationFrames(first=1, last=1)
    assert [frames.advance() for _ in range(3)] == [1, 1, 1]


# --- System ---

def test_avatar_frame_advances_every_period():
    config = GameConfig()
    engine = Engine(seed=1)
    eid = spawn_avatar(engine.world, config)
    engine.add_system(make_animation_system())
    seen = []
    for _ in range(10):
        engine.step(0.05)
        seen.append(engine.world.get(eid, AnimationFrames).index)
    assert seen == [0, 1, 1, 2, 2, 3, 3, 0, 0, 1]


def test_animates_in_both_modes():
    config = GameConfig()
    engine = Engine(seed=1, initial_mode=GameMode.IN_GAME)
    eid = spawn_avatar(engine.world, config)
    engine.add_system(make_animation_system())
    engine.step(0.1)
    assert engine.world.get(eid, AnimationFrames).index == 1


def test_timer_without_frames_is_ignored():
    engine = Engine(seed=1)
    engine.world.spawn(Repeating(name="other", period=0.1))
    engine.add_system(make_animation_system())
    engine.run(5, 0.1)


@pytest.mark.parametrize("dt", [0.3, 1.0])
def test_long_frames_advance_one_step(dt):
    config = GameConfig()
    engine = Engine(seed=1)
    eid = spawn_avatar(engine.world, config)
    engine.add_system(make_animation_system())
    engine.step(dt)
    assert engine.world.get(eid, AnimationFrames).index == 1


def test_ten_advances_per_second_at_60_fps():
    config = GameConfig()
    engine = Engine(seed=1)
    eid = spawn_avatar(engine.world, config)
    engine.add_system(make_animation_system())
    frames = engine.world.get(eid, AnimationFrames)
    advanced_on = []
    for _ in range(60):
        before = frames.index
        engine.step(1 / 60)
        if frames.index != before:
            advanced_on.append(engine.clock.frame)
    assert advanced_on == [6, 12, 18, 24, 30, 36, 42, 48, 54, 60]
