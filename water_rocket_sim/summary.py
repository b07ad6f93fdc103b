"""
Water Rocket Flight Simulation - Flight Summary

Reduces a completed trajectory to peak height, time of peak and the
success verdict.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from . import constants as C
from .state import SimulationState


@dataclass(frozen=True)
class FlightSummary:
    """Peak and verdict of one flight."""
    max_height: float
    max_height_time: float
    success: bool


def analyze_trajectory(trajectory: Sequence[SimulationState],
                       success_height: float = C.SUCCESS_HEIGHT) -> FlightSummary:
    """
    Find the peak of a trajectory and judge the flight.

    Ties on the peak height resolve to the earliest sample. Success is
    inclusive: a peak of exactly success_height passes.

    Args:
        trajectory: Samples in time order
        success_height: Verdict threshold (m)

    Returns:
        FlightSummary

    Raises:
        ValueError: If the trajectory is empty
    """
    if len(trajectory) == 0:
        raise ValueError("Cannot analyze an empty trajectory")

    heights = np.array([s.height for s in trajectory], dtype=np.float64)
    idx = int(np.argmax(heights))
    max_height = float(heights[idx])

    return FlightSummary(
        max_height=max_height,
        max_height_time=trajectory[idx].time,
        success=max_height >= success_height,
    )
