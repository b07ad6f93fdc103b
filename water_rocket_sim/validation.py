"""
Water Rocket Flight Simulation - Validation Checks

This module implements input and physics validation checks:
- User inputs within the slider ranges
- Sample invariants (finite values, non-negative water and thrust,
  stage number within bounds)
- Trajectory-level invariants (uniform sampling, monotonic staging)
"""

import math
from typing import Sequence

import numpy as np

from . import constants as C


class ValidationError(Exception):
    """Raised when an input or physics validation check fails."""
    pass


def validate_stage_inputs(water_ml: Sequence[float], pressure_atm: Sequence[float]) -> bool:
    """
    Verify per-stage user inputs against the slider ranges.

    Args:
        water_ml: Water volume per stage, whole mL
        pressure_atm: Absolute tank pressure per stage (atm)

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if len(water_ml) != C.NUM_STAGES or len(pressure_atm) != C.NUM_STAGES:
        raise ValidationError(
            f"Expected {C.NUM_STAGES} stages, got {len(water_ml)} water "
            f"and {len(pressure_atm)} pressure values"
        )

    for i, (water, pressure) in enumerate(zip(water_ml, pressure_atm)):
        lo, hi = C.WATER_MIN_ML[i], C.WATER_MAX_ML[i]
        if not lo <= water <= hi:
            raise ValidationError(
                f"Stage {i + 1} water volume {water} mL outside [{lo}, {hi}] mL"
            )
        if not float(water).is_integer():
            raise ValidationError(
                f"Stage {i + 1} water volume {water} mL is not a whole number of mL"
            )
        if not C.PRESSURE_MIN_ATM <= pressure <= C.PRESSURE_MAX_ATM:
            raise ValidationError(
                f"Stage {i + 1} pressure {pressure} atm outside "
                f"[{C.PRESSURE_MIN_ATM}, {C.PRESSURE_MAX_ATM}] atm"
            )
        steps = (pressure - C.PRESSURE_MIN_ATM) / C.PRESSURE_STEP_ATM
        if abs(steps - round(steps)) > C.PRESSURE_STEP_TOLERANCE:
            raise ValidationError(
                f"Stage {i + 1} pressure {pressure} atm is not a multiple of "
                f"{C.PRESSURE_STEP_ATM} atm"
            )
    return True


def check_sample_valid(sample) -> bool:
    """
    Check one trajectory sample for physically impossible values.

    Args:
        sample: SimulationState

    Returns:
        True if valid, raises ValidationError otherwise
    """
    values = (sample.time, sample.height, sample.velocity, sample.acceleration,
              sample.thrust, sample.water_mass)
    if not all(math.isfinite(v) for v in values):
        raise ValidationError(f"Non-finite value in sample at t={sample.time}")

    if sample.water_mass < 0.0:
        raise ValidationError(
            f"Negative water mass {sample.water_mass:.3e} kg at t={sample.time:.2f}s"
        )
    if sample.thrust < 0.0:
        raise ValidationError(f"Negative thrust {sample.thrust:.3e} N at t={sample.time:.2f}s")
    if not 1 <= sample.active_stage <= C.NUM_STAGES:
        raise ValidationError(f"Stage number {sample.active_stage} out of range")
    return True


def validate_trajectory(trajectory: Sequence, dt: float = C.DT) -> dict:
    """
    Validate trajectory-level invariants.

    Args:
        trajectory: Sequence of SimulationState
        dt: Expected sample spacing (s)

    Returns:
        Dictionary with validation results
    """
    violations = []

    if len(trajectory) == 0:
        violations.append("Empty trajectory")
        return {'valid': False, 'violations': violations, 'n_samples': 0}

    for sample in trajectory:
        try:
            check_sample_valid(sample)
        except ValidationError as e:
            violations.append(str(e))

    stages = np.array([s.active_stage for s in trajectory])
    if np.any(np.diff(stages) < 0):
        violations.append("Stage number decreased")

    times = np.array([s.time for s in trajectory])
    expected = np.arange(len(trajectory)) * dt
    if not np.allclose(times, expected, rtol=0.0, atol=1e-9):
        violations.append("Samples not uniformly spaced at dt")

    return {
        'valid': len(violations) == 0,
        'violations': violations,
        'n_samples': len(trajectory),
    }
