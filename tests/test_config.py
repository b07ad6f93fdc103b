"""Tests for config module."""
import dataclasses

import pytest
from water_rocket_sim import config
from water_rocket_sim import constants as C


def test_simulation_config_defaults():
    """Test that default config uses constants values."""
    cfg = config.SimulationConfig()
    assert cfg.dt == C.DT
    assert cfg.max_time == C.MAX_TIME
    assert cfg.gravity == C.G
    assert cfg.success_height == C.SUCCESS_HEIGHT
    assert cfg.air_volume_floor_fraction == C.AIR_VOLUME_FLOOR_FRACTION
    assert cfg.verbose is False


def test_simulation_config_custom_values():
    """Test creating config with custom values."""
    cfg = config.SimulationConfig(dt=0.005, max_time=10.0, verbose=True)
    assert cfg.dt == 0.005
    assert cfg.max_time == 10.0
    assert cfg.verbose is True


def test_simulation_config_frozen():
    """Test that config is immutable (frozen)."""
    cfg = config.SimulationConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.dt = 0.5


def test_simulation_config_replace():
    cfg = dataclasses.replace(config.SimulationConfig(), gravity=0.0)
    assert cfg.gravity == 0.0
    assert cfg.dt == C.DT


def test_create_default_config():
    """Test create_default_config factory function."""
    cfg = config.create_default_config()
    assert isinstance(cfg, config.SimulationConfig)
    assert cfg.dt == C.DT


def test_create_test_config():
    """Test create_test_config factory function."""
    cfg = config.create_test_config()
    assert cfg.dt == C.DT
    assert cfg.max_time == 5.0
    assert cfg.verbose is False


def test_create_test_config_custom():
    """Test create_test_config with custom parameters."""
    cfg = config.create_test_config(max_time=1.0, gravity=0.0)
    assert cfg.max_time == 1.0
    assert cfg.gravity == 0.0
