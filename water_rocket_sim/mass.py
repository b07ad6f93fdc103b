"""
Water Rocket Flight Simulation - Mass computations.
"""

from . import constants as C
from .stages import StageSpec


def compute_total_mass(stage_spec: StageSpec, water_mass: float) -> float:
    """
    Mass of the flying vehicle: active stage dry mass plus its water.

    Separated stages leave no residual mass; the next stage's dry_mass
    already encodes everything still attached.
    """
    return stage_spec.dry_mass + max(0.0, water_mass)


def is_propellant_exhausted(water_mass: float) -> bool:
    """True if the active stage has no water left."""
    return water_mass <= 0.0


def get_water_fraction(water_mass: float, stage_spec: StageSpec,
                       rho_water: float = C.RHO_WATER) -> float:
    """
    Fraction of the tank volume occupied by water.
    """
    if stage_spec.tank_volume <= 0.0:
        return 0.0
    frac = (water_mass / rho_water) / stage_spec.tank_volume
    return min(1.0, max(0.0, frac))
