import dataclasses
import math

import numpy as np
import pytest
from water_rocket_sim import main, constants as C
from water_rocket_sim.config import create_test_config
from water_rocket_sim.stages import STAGE_SPECS, StageConfig, create_default_stage_configs
from water_rocket_sim.state import WorkingState, create_initial_state
from water_rocket_sim.validation import ValidationError


def test_run_simulation_completes():
    result = main.run_simulation(config=create_test_config(max_time=1.0))
    assert isinstance(result, main.SimulationResult)
    assert result.total_elapsed_time <= 1.0
    assert isinstance(result.reason, str)
    assert result.n_samples > 0


def test_run_simulation_default_inputs():
    result = main.run_simulation()
    assert result.n_samples > 0
    assert result.total_elapsed_time <= C.MAX_TIME
    assert result.reason in ("Ground contact", "Maximum simulation time reached")


def test_check_termination_ground_contact():
    s = WorkingState(time=1.0, height=-0.01)
    term, reason = main.check_termination(s, create_test_config())
    assert term is True
    assert reason == "Ground contact"


def test_check_termination_max_time():
    s = WorkingState(time=5.0, height=10.0)
    term, reason = main.check_termination(s, create_test_config(max_time=5.0))
    assert term is True
    assert 'Maximum simulation time' in reason


def test_check_termination_continue():
    s = WorkingState(time=0.0, height=0.0)
    term, reason = main.check_termination(s, create_test_config())
    assert term is False
    assert reason is None


def test_simulation_step_pipeline():
    configs = create_default_stage_configs()
    s = create_initial_state(configs[0])
    sample = main.simulation_step(s, STAGE_SPECS[0], create_test_config())
    assert sample.time == 0.0
    assert sample.thrust > 0
    assert sample.velocity > 0
    assert sample.height > 0
    assert sample.active_stage == 1
    # Working state advanced in place, except time
    assert s.water_mass == sample.water_mass
    assert s.water_mass < configs[0].water_mass
    assert s.pressure != configs[0].pressure
    assert s.time == 0.0


def test_atmospheric_pressure_degenerate_case():
    configs = [StageConfig(water_mass=w, pressure=C.P_ATM) for w in (0.5, 0.4, 0.3)]
    result = main.simulate(configs)
    assert result.n_samples == 1
    sample = result.trajectory[0]
    assert sample.thrust == 0.0
    assert sample.acceleration == pytest.approx(-C.G)
    assert sample.velocity == pytest.approx(-0.0981)
    assert sample.height == pytest.approx(-0.000981)
    assert result.max_height == pytest.approx(-0.000981)
    assert result.max_height_time == 0.0
    assert result.success is False
    assert result.events == ()
    assert result.reason == "Ground contact"


def test_timeout_stops_exactly_at_max_time():
    # Without gravity the rocket never comes back down
    cfg = create_test_config(max_time=C.MAX_TIME, gravity=0.0)
    result = main.simulate(create_default_stage_configs(), config=cfg)
    assert result.total_elapsed_time == 30.0
    assert result.n_samples == 3000
    assert result.reason == "Maximum simulation time reached"
    assert result.trajectory[-1].height > 0


def test_short_timeout():
    result = main.simulate(create_default_stage_configs(),
                           config=create_test_config(max_time=0.5))
    assert result.n_samples == 50
    assert result.total_elapsed_time == pytest.approx(0.5)


def test_separation_events_without_gravity():
    cfg = create_test_config(max_time=10.0, gravity=0.0)
    result = main.simulate(create_default_stage_configs(), config=cfg)
    assert [e.from_stage for e in result.events] == [1, 2]
    assert result.events[0].time == pytest.approx(3.0)
    assert result.events[1].time == pytest.approx(6.0)

    idx = int(round(result.events[0].time / result.dt))
    at_sep = result.trajectory[idx]
    after = result.trajectory[idx + 1]
    # Separation step is recorded under the old stage
    assert at_sep.active_stage == 1
    assert at_sep.water_mass == 0.0
    assert at_sep.height == result.events[0].height
    assert at_sep.velocity == result.events[0].velocity
    # Next step burns the freshly loaded stage
    assert after.active_stage == 2
    assert after.thrust > 0.0


def test_samples_uniform_in_time():
    result = main.simulate(create_default_stage_configs(),
                           config=create_test_config(max_time=2.0))
    times = result.column('time')
    np.testing.assert_array_equal(times, np.arange(result.n_samples) * result.dt)


def test_result_is_frozen():
    result = main.simulate(create_default_stage_configs(),
                           config=create_test_config(max_time=0.1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.success = True
    assert isinstance(result.trajectory, tuple)
    assert isinstance(result.events, tuple)


def test_column_unknown_field():
    result = main.simulate(create_default_stage_configs(),
                           config=create_test_config(max_time=0.1))
    with pytest.raises(KeyError):
        result.column('altitude')


def test_to_csv(tmp_path):
    result = main.simulate(create_default_stage_configs(),
                           config=create_test_config(max_time=0.2))
    path = tmp_path / "out" / "flight.csv"
    result.to_csv(str(path))
    lines = path.read_text().strip().splitlines()
    assert lines[0].split(',')[:2] == ['time', 'height_m']
    assert len(lines) == result.n_samples + 1


def test_summary_text():
    result = main.simulate(create_default_stage_configs(),
                           config=create_test_config(max_time=0.2))
    text = result.summary_text()
    assert "Max height" in text
    assert result.reason in text


def test_verbose_prints_table(capsys):
    main.run_simulation(config=create_test_config(max_time=1.5), verbose=True)
    out = capsys.readouterr().out
    assert "WATER ROCKET SIMULATION" in out
    assert "SIMULATION COMPLETED" in out


def test_invalid_first_sample_raises():
    configs = [StageConfig(water_mass=0.5, pressure=math.inf),
               StageConfig(water_mass=0.4, pressure=4.5 * C.P_ATM),
               StageConfig(water_mass=0.3, pressure=4.0 * C.P_ATM)]
    with pytest.raises(ValidationError, match="First step"):
        main.simulate(configs)
