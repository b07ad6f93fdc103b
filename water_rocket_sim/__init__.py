"""
Three-Stage Water Rocket Flight Simulation Package

A deterministic, fixed-step simulation of the vertical flight of a
three-stage pressurized-water rocket.

Modules:
    - constants: Physical constants, stage table and input ranges
    - config: Immutable simulation configuration
    - stages: StageSpec / StageConfig and unit conversion
    - state: Working state and emitted sample/event records
    - propulsion: Nozzle exit flow thrust and adiabatic pressure update
    - forces: Gravity and quadratic drag
    - mass: Mass bookkeeping
    - integrators: Semi-implicit Euler step
    - staging: Stage separation state machine
    - summary: Peak height and success verdict
    - validation: Input and physics validation checks
    - main: Simulation entry point
    - playback: Read-only time-indexed replay
    - studies: Launch parameter sweep
"""

from .stages import (
    StageSpec, StageConfig, STAGE_SPECS,
    create_stage_configs, create_default_stage_configs,
)
from .state import SimulationState, SeparationEvent
from .main import run_simulation, simulate, SimulationResult
from .config import SimulationConfig, create_default_config, create_test_config

__version__ = "1.0.0"
__author__ = "Water Rocket Simulation Team"

__all__ = [
    'StageSpec',
    'StageConfig',
    'STAGE_SPECS',
    'create_stage_configs',
    'create_default_stage_configs',
    'SimulationState',
    'SeparationEvent',
    'run_simulation',
    'simulate',
    'SimulationResult',
    'SimulationConfig',
    'create_default_config',
    'create_test_config',
]
