"""
Water Rocket Flight Simulation - Main Entry Point

This module implements the main simulation loop with:
- Single continuous fixed-step simulation
- Correct execution order per timestep
- Data logging
- Logging framework for diagnostics

Execution order per timestep:
1. Thrust (updates water mass and tank pressure)
2. Drag
3. Integration (acceleration, velocity, then height)
4. Sample recorded (stage number before any separation)
5. Staging check (may load the next stage)
6. Time advanced
"""

import csv
import logging
import os
import time
from dataclasses import dataclass, fields
from typing import Optional, Sequence, Tuple

import numpy as np

from .config import SimulationConfig, create_default_config
from .forces import compute_drag_force
from .integrators import euler_step
from .mass import compute_total_mass
from .propulsion import compute_thrust
from .stages import STAGE_SPECS, StageConfig, StageSpec, create_default_stage_configs
from .staging import StagingController
from .state import SeparationEvent, SimulationState, WorkingState, create_initial_state
from .summary import analyze_trajectory
from .validation import ValidationError, check_sample_valid

# Configure module logger
logger = logging.getLogger(__name__)

SAMPLE_FIELDS = tuple(f.name for f in fields(SimulationState))


@dataclass(frozen=True)
class SimulationResult:
    """
    Complete, immutable output of one simulation run.

    Attributes:
        trajectory: Samples in time order, uniformly spaced at dt
        events: Stage separations in time order
        max_height: Peak sample height (m)
        max_height_time: Time of the first sample at the peak (s)
        success: Peak reached the success height
        total_elapsed_time: Flight time when the loop stopped (s)
        dt: Sample spacing (s)
        reason: Why the loop stopped
    """
    trajectory: Tuple[SimulationState, ...]
    events: Tuple[SeparationEvent, ...]
    max_height: float
    max_height_time: float
    success: bool
    total_elapsed_time: float
    dt: float
    reason: str = ""

    @property
    def n_samples(self) -> int:
        return len(self.trajectory)

    def column(self, name: str) -> np.ndarray:
        """Return one sample field across the trajectory as an array."""
        if name not in SAMPLE_FIELDS:
            raise KeyError(f"Unknown sample field '{name}', expected one of {SAMPLE_FIELDS}")
        return np.array([getattr(s, name) for s in self.trajectory])

    def summary_text(self) -> str:
        """Human-readable summary block."""
        lines = [
            f"Termination reason: {self.reason}",
            f"Samples:            {self.n_samples}",
            f"Flight time:        {self.total_elapsed_time:.2f} s",
            f"Max height:         {self.max_height:.2f} m at t={self.max_height_time:.2f} s",
            f"Result:             {'SUCCESS' if self.success else 'FAILURE'}",
        ]
        for event in self.events:
            lines.append(
                f"Stage {event.from_stage} separation: t={event.time:.2f} s, "
                f"h={event.height:.2f} m, v={event.velocity:.2f} m/s"
            )
        return '\n'.join(lines)

    def to_csv(self, filename: str):
        """Write the trajectory to CSV for offline analysis."""
        os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)
        header = [
            'time', 'height_m', 'velocity_mps', 'acceleration_mps2',
            'stage', 'thrust_N', 'water_mL',
        ]

        with open(filename, 'w', newline='') as fh:
            writer = csv.writer(fh)
            writer.writerow(header)
            for s in self.trajectory:
                writer.writerow([
                    s.time, s.height, s.velocity, s.acceleration,
                    s.active_stage, s.thrust, s.water_mass * 1000.0,
                ])


def check_termination(state: WorkingState, config: SimulationConfig) -> tuple:
    """
    Check if simulation should terminate.

    The loop runs while time < max_time and height >= 0.

    Args:
        state: Current working state
        config: Simulation configuration

    Returns:
        (should_terminate, reason) tuple
    """
    if state.height < 0.0:
        return True, "Ground contact"

    if state.time >= config.max_time:
        return True, "Maximum simulation time reached"

    return False, None


def simulation_step(state: WorkingState, stage_spec: StageSpec,
                    config: SimulationConfig = None) -> SimulationState:
    """
    Execute thrust, drag and integration for one timestep.

    Updates water mass, pressure, height and velocity of the working state
    in place. Time and staging are left to the caller.

    Args:
        state: Working state (mutated)
        stage_spec: Active stage
        config: Simulation configuration (uses default if None)

    Returns:
        The SimulationState sample for this step
    """
    if config is None:
        config = create_default_config()

    # Step 1: Thrust
    thrust, state.water_mass, state.pressure = compute_thrust(
        state.water_mass, state.pressure, stage_spec, config.dt, config
    )

    # Step 2: Drag
    drag = compute_drag_force(state.velocity, stage_spec,
                              config.rho_air, config.drag_coefficient)

    # Step 3: Integration
    total_mass = compute_total_mass(stage_spec, state.water_mass)
    state.height, state.velocity, acceleration = euler_step(
        state.height, state.velocity, thrust, drag, total_mass,
        dt=config.dt, g=config.gravity,
    )

    return SimulationState(
        time=state.time,
        height=state.height,
        velocity=state.velocity,
        acceleration=acceleration,
        active_stage=state.active_stage,
        thrust=thrust,
        water_mass=state.water_mass,
    )


def run_simulation(stage_configs: Optional[Sequence[StageConfig]] = None,
                   stage_specs: Sequence[StageSpec] = STAGE_SPECS,
                   config: SimulationConfig = None,
                   verbose: bool = None) -> SimulationResult:
    """
    Run the complete three-stage flight.

    Args:
        stage_configs: Propellant load per stage. If None, uses the default preset.
        stage_specs: Static stage table
        config: SimulationConfig instance. If None a default is created.
        verbose: Print progress table. Overrides config.verbose if explicitly passed.

    Returns:
        SimulationResult

    Raises:
        ValidationError: If the very first step already yields a non-finite
            or otherwise invalid sample (e.g. an infinite tank pressure)
    """
    if config is None:
        config = create_default_config()
    if verbose is None:
        verbose = config.verbose
    if stage_configs is None:
        stage_configs = create_default_stage_configs()

    dt = config.dt
    staging = StagingController(stage_specs, stage_configs)
    state = create_initial_state(staging.stage_configs[0])
    trajectory = []

    logger.info(f"Starting simulation: dt={dt}s, max_time={config.max_time}s, "
                f"stages={len(stage_specs)}")
    logger.debug(f"Initial state: {state}")

    if verbose:
        print("\n" + "=" * 72)
        print(f"WATER ROCKET SIMULATION    | dt={dt}s | T_max={config.max_time}s")
        print("=" * 72)
        print(f"{'Time (s)':^10} | {'Height (m)':^10} | {'Vel (m/s)':^10} | "
              f"{'Thrust (N)':^10} | {'Stage':^6}")
        print("-" * 72)

    start_time = time.time()
    last_print_time = 0.0

    # Main simulation loop
    while True:
        should_terminate, reason = check_termination(state, config)
        if should_terminate:
            logger.info(f"Simulation terminated: {reason}")
            if verbose:
                print(f"\nTermination: {reason}")
            break

        sample = simulation_step(state, staging.active_spec, config)

        # Validate sample
        try:
            check_sample_valid(sample)
        except ValidationError as e:
            logger.error(f"Validation failed: {e}")
            if not trajectory:
                raise ValidationError(f"First step produced an invalid sample: {e}") from e
            reason = f"Validation failure: {e}"
            break

        trajectory.append(sample)

        event = staging.update(state)
        if event is not None and verbose:
            print(f"  *** STAGE {event.from_stage} SEPARATION at t={event.time:.2f}s | "
                  f"h={event.height:.1f} m | v={event.velocity:.1f} m/s")

        # Time is derived from the step count so samples stay exactly on the dt grid
        state.step += 1
        state.time = state.step * dt

        if verbose and state.time - last_print_time >= 1.0:
            _print_status(sample)
            last_print_time = state.time

    summary = analyze_trajectory(trajectory, config.success_height)
    result = SimulationResult(
        trajectory=tuple(trajectory),
        events=tuple(staging.events),
        max_height=summary.max_height,
        max_height_time=summary.max_height_time,
        success=summary.success,
        total_elapsed_time=state.time,
        dt=dt,
        reason=reason,
    )

    _log_completion(result, time.time() - start_time, verbose)
    return result


def simulate(stage_configs: Sequence[StageConfig],
             stage_specs: Sequence[StageSpec] = STAGE_SPECS,
             config: SimulationConfig = None) -> SimulationResult:
    """Pure entry point: run one flight quietly and return its result."""
    if config is None:
        config = create_default_config()
    return run_simulation(stage_configs, stage_specs, config, verbose=False)


def _print_status(sample: SimulationState):
    """Print a formatted status row."""
    msg = (f"{sample.time:10.2f} | {sample.height:10.2f} | "
           f"{sample.velocity:10.2f} | {sample.thrust:10.2f} | {sample.active_stage:^6}")
    print(msg)
    logger.debug(msg)


def _log_completion(result: SimulationResult, elapsed: float, verbose: bool):
    """Log and print completion statistics."""
    logger.info(f"Simulation complete: {result.n_samples} steps in {elapsed:.3f}s")
    logger.info(f"Max height {result.max_height:.2f}m at t={result.max_height_time:.2f}s, "
                f"success={result.success}")

    if verbose:
        print("-" * 72)
        print("SIMULATION COMPLETED")
        print("-" * 72)
        print(result.summary_text())
        print("-" * 72)
        print(f"Steps:       {result.n_samples:,}")
        print(f"Wall Time:   {elapsed:.3f} s")
        print("=" * 72)
