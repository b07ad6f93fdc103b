"""
Water Rocket Flight Simulation - Playback

Read-only replay of a completed SimulationResult. A display clock asks for
the sample at an arbitrary time; the lookup is floor(t / dt), with sample
times snapping to their own sample, clamped to the recorded range. Nothing
here modifies the result.
"""

import math
from typing import Iterator, Sequence, Tuple

from .main import SimulationResult
from .mass import get_water_fraction
from .stages import STAGE_SPECS, StageSpec
from .state import SimulationState

# Display refresh interval of a ~60 Hz animation clock (s)
FRAME_INTERVAL = 0.016

# Fraction of a step within which a requested time snaps to the next sample
INDEX_TOLERANCE = 1e-9


def sample_index(result: SimulationResult, t: float) -> int:
    """
    Index of the sample shown at time t.

    Args:
        result: Completed simulation result
        t: Requested replay time (s)

    Unlike a bare floor(t / dt), a time that lands on a sample time picks
    that sample: floor(0.03 / 0.01) is 2 in floating point, this returns 3.
    Off-grid times floor exactly as floor(t / dt).

    Returns:
        floor(t / dt + INDEX_TOLERANCE), clamped to [0, n_samples - 1]
    """
    last = result.n_samples - 1
    if t <= 0.0:
        return 0
    # Sample times are step * dt; absorb the rounding of t / dt at grid points
    idx = int(math.floor(t / result.dt + INDEX_TOLERANCE))
    return min(idx, last)


def sample_at(result: SimulationResult, t: float) -> SimulationState:
    """Sample shown at replay time t."""
    return result.trajectory[sample_index(result, t)]


def iter_frames(result: SimulationResult, frame_interval: float = FRAME_INTERVAL,
                speed: float = 1.0) -> Iterator[Tuple[float, SimulationState]]:
    """
    Replay the result as (replay_time, sample) frames.

    The replay clock advances by frame_interval * speed per frame and stops
    once it reaches the flight's total elapsed time.

    Raises:
        ValueError: If frame_interval or speed is not positive
    """
    if frame_interval <= 0 or speed <= 0:
        raise ValueError("frame_interval and speed must be positive")

    step = frame_interval * speed
    n = 1
    while True:
        replay_time = n * step
        if replay_time >= result.total_elapsed_time:
            return
        yield replay_time, sample_at(result, replay_time)
        n += 1


def format_telemetry(sample: SimulationState,
                     stage_specs: Sequence[StageSpec] = STAGE_SPECS) -> str:
    """Text rendering of the flight information panel for one sample."""
    fill = get_water_fraction(sample.water_mass, stage_specs[sample.active_stage - 1])
    return '\n'.join([
        f"Time:     {sample.time:.2f} s",
        f"Height:   {sample.height:.2f} m",
        f"Velocity: {sample.velocity:.2f} m/s",
        f"Stage:    {sample.active_stage}",
        f"Thrust:   {sample.thrust:.2f} N",
        f"Water:    {sample.water_mass * 1000:.0f} mL ({fill * 100:.0f}% of tank)",
    ])
