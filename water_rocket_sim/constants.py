"""
Water Rocket Flight Simulation - Physical Constants and Vehicle Parameters

This module defines the environment constants, the static three-stage
vehicle table, simulation timing and the input ranges exposed to the user.
"""

# =============================================================================
# ENVIRONMENT
# =============================================================================

# Gravitational acceleration (m/s^2)
G = 9.81

# Fluid densities (kg/m^3)
RHO_WATER = 1000.0
RHO_AIR = 1.225

# Atmospheric pressure at the launch pad (Pa)
P_ATM = 101325.0

# =============================================================================
# PROPULSION & AERODYNAMICS
# =============================================================================

DRAG_COEFFICIENT = 0.75  # Cd (constant, all stages)
NOZZLE_AREA = 0.0001     # Nozzle exit area (m^2), ~11 mm diameter

# Adiabatic index of the pressurizing air
GAMMA = 1.4

# Lower bound on the trapped air volume, as a fraction of tank volume.
# Keeps tank_volume / air_volume finite when a tank is (nearly) full.
AIR_VOLUME_FLOOR_FRACTION = 1e-6

# =============================================================================
# VEHICLE PARAMETERS (static stage table)
# =============================================================================

NUM_STAGES = 3

# Stage 1 (booster)
STAGE1_DRY_MASS = 0.15       # kg
STAGE1_TANK_VOLUME = 0.0015  # m^3 (1.5 L bottle)
STAGE1_AREA = 0.0079         # m^2 (~100 mm diameter)
STAGE1_SEPARATION_TIME = 3.0  # s

# Stage 2
STAGE2_DRY_MASS = 0.12
STAGE2_TANK_VOLUME = 0.0012
STAGE2_AREA = 0.0063
STAGE2_SEPARATION_TIME = 6.0

# Stage 3 (sustainer, never separates)
STAGE3_DRY_MASS = 0.10
STAGE3_TANK_VOLUME = 0.001
STAGE3_AREA = 0.005

# =============================================================================
# SIMULATION PARAMETERS
# =============================================================================

DT = 0.01          # Fixed time step (s)
MAX_TIME = 30.0    # Maximum simulated flight time (s)

# Peak height at or above which a flight counts as a success (m)
SUCCESS_HEIGHT = 50.0

# =============================================================================
# USER INPUT RANGES
# =============================================================================

ML_PER_KG_WATER = 1000.0  # 1 L of water = 1 kg

# Water volume slider limits per stage (mL)
WATER_MIN_ML = (100, 100, 100)
WATER_MAX_ML = (1000, 800, 600)

# Tank pressure slider limits (atm, absolute)
PRESSURE_MIN_ATM = 2.0
PRESSURE_MAX_ATM = 8.0
PRESSURE_STEP_ATM = 0.5

# Launch presets (mL, atm)
DEFAULT_WATER_ML = (500, 400, 300)
DEFAULT_PRESSURE_ATM = (5.0, 4.5, 4.0)

# =============================================================================
# NUMERICAL TOLERANCES
# =============================================================================

# Slack when checking that a pressure sits on the slider step grid (steps)
PRESSURE_STEP_TOLERANCE = 1e-9

# =============================================================================


def print_config():
    """Print configuration summary."""
    print("=" * 60)
    print("Three-Stage Water Rocket Configuration")
    print("=" * 60)
    print(f"Gravity: {G:.2f} m/s^2")
    print(f"Water density: {RHO_WATER:.0f} kg/m^3, air density: {RHO_AIR:.3f} kg/m^3")
    print(f"Cd: {DRAG_COEFFICIENT:.2f}, nozzle area: {NOZZLE_AREA * 1e4:.2f} cm^2")
    print(f"Time step: {DT} s, max time: {MAX_TIME:.0f} s")
    print(f"Success height: {SUCCESS_HEIGHT:.0f} m")
    print("-" * 60)
    print(f"Stage 1: dry {STAGE1_DRY_MASS * 1000:.0f} g, tank {STAGE1_TANK_VOLUME * 1000:.1f} L, "
          f"separation >= {STAGE1_SEPARATION_TIME:.0f} s")
    print(f"Stage 2: dry {STAGE2_DRY_MASS * 1000:.0f} g, tank {STAGE2_TANK_VOLUME * 1000:.1f} L, "
          f"separation >= {STAGE2_SEPARATION_TIME:.0f} s")
    print(f"Stage 3: dry {STAGE3_DRY_MASS * 1000:.0f} g, tank {STAGE3_TANK_VOLUME * 1000:.1f} L")
    print("=" * 60)
