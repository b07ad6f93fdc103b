"""
Water Rocket Flight Simulation - Configuration

This module provides a SimulationConfig dataclass for dependency injection,
allowing different simulation parameters to be passed without modifying
global constants.
"""

from dataclasses import dataclass

from . import constants as C


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for simulation parameters.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.

    Section grouping:
      1. Simulation timing
      2. Environment
      3. Propulsion / aerodynamics
      4. Verdict
      5. Misc
    """

    # ── 1. Simulation timing ─────────────────────────────────────────────
    dt: float = C.DT
    max_time: float = C.MAX_TIME

    # ── 2. Environment ───────────────────────────────────────────────────
    gravity: float = C.G
    rho_water: float = C.RHO_WATER
    rho_air: float = C.RHO_AIR
    atmospheric_pressure: float = C.P_ATM

    # ── 3. Propulsion / aerodynamics ─────────────────────────────────────
    drag_coefficient: float = C.DRAG_COEFFICIENT
    nozzle_area: float = C.NOZZLE_AREA
    gamma: float = C.GAMMA
    air_volume_floor_fraction: float = C.AIR_VOLUME_FLOOR_FRACTION

    # ── 4. Verdict ───────────────────────────────────────────────────────
    success_height: float = C.SUCCESS_HEIGHT

    # ── 5. Misc ──────────────────────────────────────────────────────────
    verbose: bool = False


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_test_config(dt: float = C.DT, max_time: float = 5.0,
                       **overrides) -> SimulationConfig:
    """Create a fast config suitable for testing.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    """
    defaults = dict(dt=dt, max_time=max_time, verbose=False)
    defaults.update(overrides)
    return SimulationConfig(**defaults)
