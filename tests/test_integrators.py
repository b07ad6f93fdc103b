import math

import pytest
from water_rocket_sim import integrators, constants as C


def test_euler_step_returns_kinematics():
    out = integrators.euler_step(0.0, 0.0, 10.0, 0.0, 0.5)
    assert isinstance(out, integrators.StepKinematics)
    assert isinstance(out.height, float)
    assert isinstance(out.velocity, float)
    assert isinstance(out.acceleration, float)


def test_free_fall_from_rest():
    h, v, a = integrators.euler_step(0.0, 0.0, 0.0, 0.0, 0.65, dt=C.DT)
    assert a == pytest.approx(-C.G)
    assert v == pytest.approx(-0.0981)
    assert h == pytest.approx(-0.000981)


def test_height_uses_updated_velocity():
    h, v, a = integrators.euler_step(10.0, 5.0, 0.0, 0.0, 1.0, dt=0.1, g=10.0)
    assert a == pytest.approx(-10.0)
    assert v == pytest.approx(4.0)
    # Explicit Euler would give 10.5
    assert h == pytest.approx(10.4)


def test_drag_opposes_motion():
    _, _, a_drag = integrators.euler_step(0.0, 10.0, 0.0, 1.0, 1.0)
    _, _, a_free = integrators.euler_step(0.0, 10.0, 0.0, 0.0, 1.0)
    assert a_drag < a_free


def test_thrust_accelerates():
    _, v, a = integrators.euler_step(0.0, 0.0, 81.06, 0.0, 0.65)
    assert a == pytest.approx(81.06 / 0.65 - C.G)
    assert v > 0


def test_euler_step_invalid_dt():
    with pytest.raises(ValueError):
        integrators.euler_step(0.0, 0.0, 0.0, 0.0, 1.0, dt=0.0)


def test_euler_step_invalid_mass():
    with pytest.raises(ValueError):
        integrators.euler_step(0.0, 0.0, 0.0, 0.0, 0.0)


def test_euler_step_nan_input():
    with pytest.raises(ValueError):
        integrators.euler_step(0.0, math.nan, 0.0, 0.0, 1.0)
