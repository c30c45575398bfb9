# File: tests/test_bearing.py
"""
Test bearing.py: Stribeck load distribution, the calibrated contact
stress/deformation, and the per-ball stress point field.
"""

import math

import numpy as np
import pytest

from beamsim.bearing import (
    LOAD_VECTOR_ANGLE,
    angular_distance,
    distribute_bearing_load,
    generate_ball_mesh,
    max_ball_load,
)
from beamsim.model import BearingConfig

SCENARIO_C = BearingConfig(outer_radius=100.0, inner_radius=60.0, ball_count=12,
                           radial_load=5000.0)


def test_scenario_c_peak_ball_carries_qmax():
    """
    100/60 mm races, 12 balls, 5 kN radial:
        Q_max = 5000·5/12 ≈ 2083.3 N, carried by the ball under the load
    """
    elements = distribute_bearing_load(SCENARIO_C)
    q_max = 5000.0 * 5 / 12

    assert len(elements) == 12
    assert np.isclose(max_ball_load(SCENARIO_C), q_max)
    assert np.isclose(q_max, 2083.333, rtol=1e-5)

    bottom = elements[9]  # θ = 270°, straight down
    assert np.isclose(bottom.angle, LOAD_VECTOR_ANGLE)
    assert np.isclose(bottom.load, q_max)
    assert max(e.load for e in elements) == bottom.load
    print(f"✓ Q_max = {bottom.load:.1f} N")


def test_load_zone_is_half_the_circle():
    """Balls at ψ = 90° and beyond carry nothing; inside, Q = Q_max·cos(ψ)^1.5."""
    elements = distribute_bearing_load(SCENARIO_C)
    q_max = max_ball_load(SCENARIO_C)

    for e in elements:
        psi = angular_distance(e.angle)
        if psi >= math.pi / 2 - 1e-9:
            assert e.load == 0.0
            assert e.max_stress == 0.0
            assert e.deformation == 0.0
        else:
            assert np.isclose(e.load, q_max * math.cos(psi) ** 1.5)

    # θ = 0° and 180° sit exactly on the load-zone boundary
    assert elements[0].load == 0.0
    assert elements[6].load == 0.0
    assert sum(1 for e in elements if e.load > 0) == 5


def test_loads_symmetric_about_load_vector():
    elements = distribute_bearing_load(SCENARIO_C)
    assert np.isclose(elements[8].load, elements[10].load)
    assert np.isclose(elements[7].load, elements[11].load)
    assert np.isclose(elements[8].load, max_ball_load(SCENARIO_C) * math.cos(math.pi / 6) ** 1.5)


def test_geometry():
    elements = distribute_bearing_load(SCENARIO_C)
    for e in elements:
        assert np.isclose(e.radius, 20.0)
        assert np.isclose(math.hypot(e.x, e.y), 80.0)
    assert np.isclose(elements[9].x, 0.0, atol=1e-9)
    assert np.isclose(elements[9].y, -80.0)


def test_calibrated_contact_stress_and_deformation():
    """σ ≈ 50·√(Q/D), δ ≈ 0.001·Q^(2/3) with D the ball diameter."""
    bottom = distribute_bearing_load(SCENARIO_C)[9]
    q = bottom.load

    assert np.isclose(bottom.max_stress, 50.0 * math.sqrt(q / 40.0))
    assert np.isclose(bottom.deformation, 0.001 * q ** (2.0 / 3.0))


def test_zero_radial_load():
    elements = distribute_bearing_load(BearingConfig(radial_load=0.0))
    assert all(e.load == 0.0 and e.max_stress == 0.0 for e in elements)


def test_single_ball_at_zero_angle_unloaded():
    elements = distribute_bearing_load(BearingConfig(ball_count=1))
    assert len(elements) == 1
    assert elements[0].angle == 0.0
    assert elements[0].load == 0.0


@pytest.mark.parametrize("theta, expected", [
    (LOAD_VECTOR_ANGLE, 0.0),
    (0.0, math.pi / 2),
    (math.pi / 2, math.pi),
    (math.pi, math.pi / 2),
    (LOAD_VECTOR_ANGLE + 2 * math.pi, 0.0),
])
def test_angular_distance_wraps(theta, expected):
    assert np.isclose(angular_distance(theta), expected, atol=1e-12)


# ---------------------------------------------------------------------------
# Ball stress point field
# ---------------------------------------------------------------------------

def test_ball_mesh_points_stay_inside_ball():
    bottom = distribute_bearing_load(SCENARIO_C)[9]
    field = generate_ball_mesh(bottom, resolution=8)

    # one center point plus rings of 6, 12, ..., 48 points
    assert len(field) == 1 + 6 * sum(range(1, 9))
    dist = np.hypot(field.x - bottom.x, field.y - bottom.y)
    assert np.all(dist <= bottom.radius * (1 + 1e-12))


def test_ball_stress_peaks_at_contact_poles():
    """
    WHAT IS THIS TEST?
    ==================
    The field is max at the two poles (on the line through the bearing
    center) and decays as exp(−2·d/R); the ball center is a distance R
    from both poles.
    """
    bottom = distribute_bearing_load(SCENARIO_C)[9]
    field = generate_ball_mesh(bottom, resolution=8)

    assert np.isclose(field.stress.max(), bottom.max_stress)
    assert np.isclose(field.stress[0], bottom.max_stress * math.exp(-2.0))
    assert np.all(field.stress <= bottom.max_stress * (1 + 1e-12))
    assert np.all(field.stress > 0)


def test_unloaded_ball_has_zero_field():
    top = distribute_bearing_load(SCENARIO_C)[3]
    field = generate_ball_mesh(top, resolution=4)
    np.testing.assert_allclose(field.stress, 0.0)
