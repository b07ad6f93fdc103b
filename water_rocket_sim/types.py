"""
Water Rocket Flight Simulation - Type Definitions

This module provides NamedTuple and TypedDict definitions for structured
return types, improving type safety and IDE support.
"""

from typing import NamedTuple, TypedDict


class ThrustOutput(NamedTuple):
    """Return type of the thrust model for one time step."""
    thrust: float  # Thrust (N), >= 0
    water_mass: float  # Water remaining after the step (kg)
    pressure: float  # Tank pressure after the step (Pa)


class StepKinematics(NamedTuple):
    """Return type of one integrator step."""
    height: float  # m
    velocity: float  # m/s
    acceleration: float  # m/s^2


class ForceBreakdown(TypedDict):
    """Return type for force computation details (positive = upward)."""
    thrust: float  # Thrust (N)
    gravity: float  # Weight, signed (N)
    drag: float  # Drag, signed with velocity (N)
    net: float  # thrust + gravity - drag (N)
    total_mass: float  # Mass the forces act on (kg)
