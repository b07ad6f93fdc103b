"""
Integration tests for full simulation run.

Tests the complete simulation pipeline from start to finish,
verifying termination conditions, sample bounds, and staging.
"""

import itertools
import unittest

import numpy as np

from water_rocket_sim import (
    STAGE_SPECS, run_simulation, create_stage_configs, create_default_stage_configs,
)
from water_rocket_sim import constants as C
from water_rocket_sim.config import create_test_config
from water_rocket_sim.validation import validate_trajectory


class TestFullSimulation(unittest.TestCase):
    """Integration tests for the default flight."""

    @classmethod
    def setUpClass(cls):
        """Run simulation once for all tests in this class."""
        cls.result = run_simulation(create_default_stage_configs(), verbose=False)

    def test_simulation_terminates(self):
        """Simulation should terminate with a valid reason."""
        self.assertIn(self.result.reason,
                      ("Ground contact", "Maximum simulation time reached"))
        self.assertLessEqual(self.result.total_elapsed_time, C.MAX_TIME)

    def test_trajectory_valid(self):
        report = validate_trajectory(self.result.trajectory, self.result.dt)
        self.assertTrue(report['valid'], report['violations'])

    def test_stage_monotonic(self):
        stages = self.result.column('active_stage')
        self.assertTrue(np.all(np.diff(stages) >= 0))
        self.assertEqual(stages[0], 1)

    def test_no_thrust_without_water(self):
        """Once a stage is dry it produces no thrust."""
        for prev, cur in zip(self.result.trajectory, self.result.trajectory[1:]):
            if prev.water_mass == 0.0 and prev.active_stage == cur.active_stage:
                self.assertEqual(cur.thrust, 0.0)

    def test_events_match_stage_changes(self):
        stages = self.result.column('active_stage')
        changes = np.nonzero(np.diff(stages))[0]
        self.assertEqual(len(changes), len(self.result.events))
        for idx, event in zip(changes, self.result.events):
            self.assertEqual(self.result.trajectory[idx].time, event.time)
            self.assertEqual(self.result.trajectory[idx].water_mass, 0.0)

    def test_separations_gated_by_time(self):
        thresholds = [spec.separation_time for spec in STAGE_SPECS[:-1]]
        for event, threshold in zip(self.result.events, thresholds):
            self.assertGreaterEqual(event.time, threshold)

    def test_peak_consistent(self):
        heights = self.result.column('height')
        self.assertEqual(self.result.max_height, heights.max())
        self.assertEqual(self.result.success, self.result.max_height >= C.SUCCESS_HEIGHT)


class TestInputCorners(unittest.TestCase):
    """Every corner of the input ranges yields a well-formed flight."""

    def test_corner_flights_valid(self):
        waters = list(zip(C.WATER_MIN_ML, C.WATER_MAX_ML))
        for load in itertools.product(*waters):
            for p in (C.PRESSURE_MIN_ATM, C.PRESSURE_MAX_ATM):
                configs = create_stage_configs(load, (p, p, p))
                result = run_simulation(configs, verbose=False)
                report = validate_trajectory(result.trajectory, result.dt)
                self.assertTrue(report['valid'], (load, p, report['violations']))
                self.assertFalse(result.reason.startswith("Validation failure"))


class TestShortSimulation(unittest.TestCase):
    """Tests for short simulation runs."""

    def test_one_second_simulation(self):
        result = run_simulation(config=create_test_config(max_time=1.0))
        self.assertEqual(result.n_samples, 100)
        self.assertEqual(result.reason, "Maximum simulation time reached")
        self.assertGreater(result.trajectory[-1].height, 0.0)


if __name__ == '__main__':
    unittest.main()
