"""
Water Rocket Flight Simulation - Numerical Integration

This module implements the fixed-step semi-implicit Euler integrator for
the vertical kinematics.
"""

import math

from . import constants as C
from .types import StepKinematics


def euler_step(height: float, velocity: float, thrust: float, drag: float,
               total_mass: float, dt: float = C.DT, g: float = C.G) -> StepKinematics:
    """
    Perform a single semi-implicit Euler step.

    a      = (T - m*g - D) / m
    v_new  = v + a * dt
    h_new  = h + v_new * dt

    The height update uses the just-updated velocity; this ordering is part
    of the model and must not be changed to the explicit form.

    Args:
        height: Current height (m)
        velocity: Current velocity, positive upward (m/s)
        thrust: Thrust (N)
        drag: Signed drag (N), same sign as velocity
        total_mass: Vehicle mass (kg)
        dt: Time step (s)
        g: Gravitational acceleration (m/s^2)

    Returns:
        StepKinematics(height, velocity, acceleration)

    Raises:
        ValueError: If dt <= 0, total_mass <= 0, or any input is NaN
    """
    # Input validation
    if dt <= 0:
        raise ValueError(f"Time step dt must be positive, got {dt}")
    if total_mass <= 0:
        raise ValueError(f"Total mass must be positive, got {total_mass}")
    if any(math.isnan(x) for x in (height, velocity, thrust, drag)):
        raise ValueError("Integrator input contains NaN values")

    acceleration = (thrust - total_mass * g - drag) / total_mass
    new_velocity = velocity + acceleration * dt
    new_height = height + new_velocity * dt

    return StepKinematics(new_height, new_velocity, acceleration)
