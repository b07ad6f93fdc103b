"""
Water Rocket Flight Simulation - State Records

WorkingState is the single mutable record threaded through the simulation
loop. SimulationState and SeparationEvent are the immutable records emitted
into the result.
"""

from dataclasses import dataclass

from .stages import StageConfig


@dataclass
class WorkingState:
    """
    Mutable per-run state of the simulation loop.

    Attributes:
        time: Elapsed flight time (s)
        height: Height above the launch pad (m)
        velocity: Vertical velocity, positive upward (m/s)
        water_mass: Remaining water in the active stage (kg)
        pressure: Absolute air pressure in the active stage (Pa)
        stage_index: 0-based index of the active stage
        step: Number of completed time steps
    """
    time: float = 0.0
    height: float = 0.0
    velocity: float = 0.0
    water_mass: float = 0.0
    pressure: float = 0.0
    stage_index: int = 0
    step: int = 0

    def load_stage(self, stage_index: int, stage_config: StageConfig):
        """Make stage_index active with a fresh propellant load."""
        self.stage_index = stage_index
        self.water_mass = stage_config.water_mass
        self.pressure = stage_config.pressure

    @property
    def active_stage(self) -> int:
        """1-based stage number."""
        return self.stage_index + 1

    def __str__(self) -> str:
        return (
            f"WorkingState(t={self.time:.2f}s, "
            f"h={self.height:.2f}m, "
            f"v={self.velocity:.2f}m/s, "
            f"stage={self.active_stage}, "
            f"water={self.water_mass * 1000:.0f}mL)"
        )


@dataclass(frozen=True)
class SimulationState:
    """One fixed-time-step snapshot of the rocket."""
    time: float
    height: float
    velocity: float
    acceleration: float
    active_stage: int  # 1-based
    thrust: float
    water_mass: float


@dataclass(frozen=True)
class SeparationEvent:
    """Stage separation: from_stage (1-based) detaches at this instant."""
    time: float
    from_stage: int
    height: float
    velocity: float


def create_initial_state(first_stage: StageConfig) -> WorkingState:
    """
    Create the launch-pad state: at rest, height 0, stage 1 loaded.

    Args:
        first_stage: Propellant load of stage 1

    Returns:
        WorkingState at t=0
    """
    state = WorkingState()
    state.load_stage(0, first_stage)
    return state
