"""
Water Rocket Flight Simulation - Force Computations

This module implements the 1-D vertical force calculations:
- Gravity (constant g)
- Quadratic aerodynamic drag
- Net force breakdown for logging/analysis
"""

from . import constants as C
from .config import SimulationConfig, create_default_config
from .stages import StageSpec
from .types import ForceBreakdown


def compute_drag_force(velocity: float, stage_spec: StageSpec,
                       rho_air: float = C.RHO_AIR,
                       drag_coefficient: float = C.DRAG_COEFFICIENT) -> float:
    """
    Compute aerodynamic drag on the active stage.

    F_drag = 0.5 * rho_air * v * |v| * Cd * A

    The v * |v| form makes the sign follow the velocity, so subtracting the
    result always opposes motion.

    Args:
        velocity: Vertical velocity, positive upward (m/s)
        stage_spec: Active stage (frontal area)

    Returns:
        Signed drag force (N)
    """
    return 0.5 * rho_air * velocity * abs(velocity) * drag_coefficient * stage_spec.area


def compute_gravity_force(mass: float, g: float = C.G) -> float:
    """Weight as a signed upward force (N)."""
    return -mass * g


def compute_forces(thrust: float, velocity: float, total_mass: float,
                   stage_spec: StageSpec, config: SimulationConfig = None) -> ForceBreakdown:
    """
    Compute all forces and return as a dictionary for logging/analysis.
    """
    if config is None:
        config = create_default_config()

    gravity = compute_gravity_force(total_mass, config.gravity)
    drag = compute_drag_force(velocity, stage_spec, config.rho_air, config.drag_coefficient)
    return {
        'thrust': thrust,
        'gravity': gravity,
        'drag': drag,
        'net': thrust + gravity - drag,
        'total_mass': total_mass,
    }
