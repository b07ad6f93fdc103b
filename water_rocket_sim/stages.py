"""
Water Rocket Flight Simulation - Stage Definitions

Static per-stage hardware (StageSpec) and the per-run propellant load chosen
by the user (StageConfig), plus the conversion from UI units (mL, atm) to SI.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from . import constants as C
from .validation import validate_stage_inputs


@dataclass(frozen=True)
class StageSpec:
    """
    Fixed hardware description of one stage.

    Attributes:
        dry_mass: Structural mass without water (kg)
        tank_volume: Internal bottle volume (m^3)
        area: Frontal cross-section used for drag (m^2)
        separation_time: Earliest flight time at which the stage may
            separate (s). None for the last stage, which never separates.
    """
    dry_mass: float
    tank_volume: float
    area: float
    separation_time: Optional[float] = None


@dataclass(frozen=True)
class StageConfig:
    """
    Propellant load of one stage.

    Attributes:
        water_mass: Initial water mass (kg)
        pressure: Initial absolute tank pressure (Pa)
    """
    water_mass: float
    pressure: float

    @classmethod
    def from_user_units(cls, water_ml: float, pressure_atm: float) -> 'StageConfig':
        """Convert slider units: mL of water -> kg, atm -> Pa."""
        return cls(
            water_mass=water_ml / C.ML_PER_KG_WATER,
            pressure=pressure_atm * C.P_ATM,
        )

    @property
    def water_ml(self) -> float:
        return self.water_mass * C.ML_PER_KG_WATER

    @property
    def pressure_atm(self) -> float:
        return self.pressure / C.P_ATM


STAGE_SPECS: Tuple[StageSpec, ...] = (
    StageSpec(C.STAGE1_DRY_MASS, C.STAGE1_TANK_VOLUME, C.STAGE1_AREA, C.STAGE1_SEPARATION_TIME),
    StageSpec(C.STAGE2_DRY_MASS, C.STAGE2_TANK_VOLUME, C.STAGE2_AREA, C.STAGE2_SEPARATION_TIME),
    StageSpec(C.STAGE3_DRY_MASS, C.STAGE3_TANK_VOLUME, C.STAGE3_AREA, None),
)


def create_stage_configs(water_ml: Sequence[float], pressure_atm: Sequence[float],
                         validate: bool = True) -> Tuple[StageConfig, ...]:
    """
    Build the three StageConfigs from per-stage user inputs.

    Args:
        water_ml: Water volume per stage (mL)
        pressure_atm: Absolute tank pressure per stage (atm)
        validate: Check inputs against the slider ranges first

    Returns:
        Tuple of StageConfig, one per stage

    Raises:
        ValidationError: If validate is True and an input is out of range
    """
    if validate:
        validate_stage_inputs(water_ml, pressure_atm)
    return tuple(
        StageConfig.from_user_units(w, p) for w, p in zip(water_ml, pressure_atm)
    )


def create_default_stage_configs() -> Tuple[StageConfig, ...]:
    """Create StageConfigs for the default launch preset."""
    return create_stage_configs(C.DEFAULT_WATER_ML, C.DEFAULT_PRESSURE_ATM)
