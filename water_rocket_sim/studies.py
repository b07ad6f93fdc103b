"""
Water Rocket Flight Simulation - Launch Parameter Sweep

Runs the simulator over a grid of water volumes and pressures for one stage
(the other stages held at a base setting) to find the launch conditions that
fly highest.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from . import constants as C
from .config import SimulationConfig, create_default_config
from .stages import create_stage_configs

logger = logging.getLogger(__name__)


@dataclass
class SweepRunResult:
    """Result from a single sweep point."""
    run_index: int
    water_ml: Tuple[float, ...]
    pressure_atm: Tuple[float, ...]
    max_height: float
    max_height_time: float
    success: bool
    total_elapsed_time: float
    n_separations: int
    final_reason: str


@dataclass
class SweepResults:
    """Aggregated results from a parameter sweep."""
    runs: List[SweepRunResult] = field(default_factory=list)
    stage: int = 1
    config: Optional[SimulationConfig] = None
    wall_time_s: float = 0.0

    @property
    def n_runs(self) -> int:
        return len(self.runs)

    @property
    def success_rate(self) -> float:
        if not self.runs:
            return 0.0
        return sum(r.success for r in self.runs) / len(self.runs)

    def best(self) -> Optional[SweepRunResult]:
        """Run with the highest peak (earliest run on ties)."""
        if not self.runs:
            return None
        heights = np.array([r.max_height for r in self.runs])
        return self.runs[int(np.argmax(heights))]

    def get_statistic(self, attr: str) -> dict:
        """Compute mean/std/min/max for a scalar attribute across runs."""
        values = [getattr(r, attr) for r in self.runs if hasattr(r, attr)]
        if not values:
            return {'mean': 0, 'std': 0, 'min': 0, 'max': 0}
        arr = np.array(values, dtype=np.float64)
        return {
            'mean': float(np.mean(arr)),
            'std': float(np.std(arr)),
            'min': float(np.min(arr)),
            'max': float(np.max(arr)),
        }

    def summary(self) -> str:
        """Return a formatted summary string."""
        lines = [f"Sweep Results (stage {self.stage}): {self.n_runs} runs in {self.wall_time_s:.1f}s",
                 f"  success rate: {self.success_rate * 100:.1f}%"]
        for attr in ['max_height', 'max_height_time', 'total_elapsed_time']:
            stats = self.get_statistic(attr)
            lines.append(f"  {attr:20s}: mean={stats['mean']:.2f} std={stats['std']:.2f} "
                         f"min={stats['min']:.2f} max={stats['max']:.2f}")
        best = self.best()
        if best is not None:
            lines.append(f"  best: water={best.water_ml} mL, pressure={best.pressure_atm} atm "
                         f"-> {best.max_height:.2f} m")
        return '\n'.join(lines)


def water_grid(stage: int, n_points: int = 10) -> np.ndarray:
    """Evenly spaced water volumes (mL) across a stage's slider range."""
    lo, hi = C.WATER_MIN_ML[stage - 1], C.WATER_MAX_ML[stage - 1]
    return np.round(np.linspace(lo, hi, n_points))


def pressure_grid() -> np.ndarray:
    """All pressure slider positions (atm)."""
    n = int(round((C.PRESSURE_MAX_ATM - C.PRESSURE_MIN_ATM) / C.PRESSURE_STEP_ATM)) + 1
    return C.PRESSURE_MIN_ATM + C.PRESSURE_STEP_ATM * np.arange(n)


def run_parameter_sweep(water_values: Sequence[float],
                        pressure_values: Sequence[float],
                        stage: int = 1,
                        base_water_ml: Sequence[float] = C.DEFAULT_WATER_ML,
                        base_pressure_atm: Sequence[float] = C.DEFAULT_PRESSURE_ATM,
                        config: SimulationConfig = None,
                        run_function: Callable = None,
                        verbose: bool = False) -> SweepResults:
    """
    Sweep one stage's water volume and pressure over a grid.

    Args:
        water_values: Water volumes to try for the swept stage (mL)
        pressure_values: Pressures to try for the swept stage (atm)
        stage: 1-based stage to sweep
        base_water_ml: Water volumes of the other stages (mL)
        base_pressure_atm: Pressures of the other stages (atm)
        config: Simulation configuration
        run_function: Callable(stage_configs, config) -> SimulationResult.
                      If None, uses simulate from main.
        verbose: Print progress

    Returns:
        SweepResults with per-run data and statistics

    Raises:
        ValidationError: If any grid point is outside the slider ranges
    """
    if not 1 <= stage <= C.NUM_STAGES:
        raise ValueError(f"stage must be in [1, {C.NUM_STAGES}], got {stage}")
    if config is None:
        config = create_default_config()

    if run_function is None:
        from .main import simulate

        def run_function(configs, cfg):
            return simulate(configs, config=cfg)

    results = SweepResults(stage=stage, config=config)
    n_total = len(water_values) * len(pressure_values)
    start = time.time()

    logger.info(f"Starting sweep of stage {stage}: {n_total} runs")

    i = 0
    for water in water_values:
        for pressure in pressure_values:
            water_ml = list(base_water_ml)
            pressure_atm = list(base_pressure_atm)
            water_ml[stage - 1] = float(water)
            pressure_atm[stage - 1] = float(pressure)

            stage_configs = create_stage_configs(water_ml, pressure_atm)
            result = run_function(stage_configs, config)

            results.runs.append(SweepRunResult(
                run_index=i,
                water_ml=tuple(water_ml),
                pressure_atm=tuple(pressure_atm),
                max_height=result.max_height,
                max_height_time=result.max_height_time,
                success=result.success,
                total_elapsed_time=result.total_elapsed_time,
                n_separations=len(result.events),
                final_reason=result.reason,
            ))
            i += 1

            if verbose and i % max(1, n_total // 10) == 0:
                elapsed = time.time() - start
                print(f"  Sweep run {i}/{n_total} ({elapsed:.1f}s)")

    results.wall_time_s = time.time() - start
    logger.info(f"Sweep complete: {results.n_runs} runs in {results.wall_time_s:.2f}s")

    if verbose:
        print(results.summary())

    return results
