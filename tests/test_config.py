"""Tests for GameConfig defaults, derived values, and validation."""

import dataclasses

import pytest

from flaptick.game.config import ConfigError, GameConfig


# --- Defaults ---

def test_default_viewport():
    config = GameConfig()
    assert (config.width, config.height) == (400.0, 700.0)
    assert config.half_width == 200.0
    assert config.half_height == 350.0


def test_default_obstacle_geometry():
    config = GameConfig()
    assert config.obstacle_width == 78.0
    assert config.obstacle_height == 480.0
    assert config.gap_size == 150.0


def test_floor_line():
    assert GameConfig().floor_line == -300.0


def test_gap_range():
    assert GameConfig().gap_range == (-250.0, 100.0)


def test_spawn_and_retire_lines():
    config = GameConfig()
    assert config.spawn_x == 400.0
    assert config.retire_x == -278.0


def test_backdrop_speed_is_fraction_of_scroll_speed():
    config = GameConfig()
    assert config.backdrop_speed == pytest.approx(0.9)


def test_collision_period():
    assert GameConfig().collision_period == pytest.approx(1 / 30)


def test_config_is_frozen():
    config = GameConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.width = 800.0  # type: ignore[misc]


def test_custom_viewport_changes_derived_values():
    config = GameConfig(width=600.0, height=900.0)
    assert config.floor_line == -400.0
    assert config.gap_range == (-350.0, 200.0)
    assert config.retire_x == -378.0


# --- Validation ---

@pytest.mark.parametrize(
    "overrides",
    [
        {"width": 0.0},
        {"height": -1.0},
        {"obstacle_interval": 0.0},
        {"animation_period": 0.0},
        {"collision_rate": 0},
        {"animation_first": 3, "animation_last": 0},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ConfigError):
        GameConfig(**overrides)


def test_empty_gap_range_rejected():
    with pytest.raises(ConfigError, match="Empty gap range"):
        GameConfig(height=300.0)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_zero_width_gap_range_allowed():
    # 2*100 + 150 = 350: exactly one legal gap position.
    config = GameConfig(height=350.0)
    lo, hi = config.gap_range
    assert lo == hi == -75.0
