"""
Water Rocket Flight Simulation - Thrust Model

Water is driven out of the nozzle by the compressed air above it:
- Exit velocity from Bernoulli's relation for incompressible discharge
- Thrust as the momentum flux of the jet
- Air pressure updated with an adiabatic-expansion approximation
"""

import numpy as np

from . import constants as C
from .config import SimulationConfig, create_default_config
from .stages import StageSpec
from .types import ThrustOutput


def compute_exit_velocity(pressure: float, rho_water: float = C.RHO_WATER,
                          p_atm: float = C.P_ATM) -> float:
    """
    Jet exit velocity v_e = sqrt(2 * (P - P_atm) / rho_water).

    Returns 0 when the tank is not above ambient pressure.
    """
    dp = pressure - p_atm
    if dp <= 0.0:
        return 0.0
    return float(np.sqrt(2.0 * dp / rho_water))


def compute_mass_flow_rate(exit_velocity: float, rho_water: float = C.RHO_WATER,
                           nozzle_area: float = C.NOZZLE_AREA) -> float:
    """Water mass flow rate through the nozzle (kg/s)."""
    return rho_water * nozzle_area * exit_velocity


def compute_air_volume(water_mass: float, tank_volume: float,
                       rho_water: float = C.RHO_WATER,
                       floor_fraction: float = C.AIR_VOLUME_FLOOR_FRACTION) -> float:
    """
    Volume of trapped air above the remaining water (m^3).

    Clamped to floor_fraction * tank_volume so the pressure ratio stays finite.
    """
    air_volume = tank_volume - water_mass / rho_water
    floor = floor_fraction * tank_volume
    if air_volume <= floor:
        return floor
    return air_volume


def update_pressure(pressure: float, tank_volume: float, air_volume: float,
                    gamma: float = C.GAMMA) -> float:
    """
    Adiabatic pressure update: P' = P * (V_tank / V_air) ** gamma.
    """
    return float(pressure * (tank_volume / air_volume) ** gamma)


def compute_thrust(water_mass: float, pressure: float, stage_spec: StageSpec,
                   dt: float, config: SimulationConfig = None) -> ThrustOutput:
    """
    Compute thrust for one time step and the propellant state after it.

    Thrust is produced only while water remains and the tank is above
    atmospheric pressure; otherwise mass and pressure are returned unchanged.

    Args:
        water_mass: Water in the active stage (kg)
        pressure: Absolute tank pressure (Pa)
        stage_spec: Hardware of the active stage
        dt: Time step (s)
        config: Simulation configuration (uses default if None)

    Returns:
        ThrustOutput(thrust, water_mass, pressure)
    """
    if config is None:
        config = create_default_config()

    if water_mass <= 0.0 or pressure <= config.atmospheric_pressure:
        return ThrustOutput(0.0, water_mass, pressure)

    v_exit = compute_exit_velocity(pressure, config.rho_water, config.atmospheric_pressure)
    mdot = compute_mass_flow_rate(v_exit, config.rho_water, config.nozzle_area)
    thrust = mdot * v_exit

    new_water_mass = max(0.0, water_mass - mdot * dt)

    air_volume = compute_air_volume(
        new_water_mass, stage_spec.tank_volume,
        rho_water=config.rho_water,
        floor_fraction=config.air_volume_floor_fraction,
    )
    new_pressure = update_pressure(pressure, stage_spec.tank_volume, air_volume, config.gamma)

    return ThrustOutput(thrust, new_water_mass, new_pressure)
