import numpy as np
import pytest

from beamsim.diagrams import integrate_diagrams
from beamsim.loads import load_breakpoints, load_source, resolve_loads
from beamsim.model import (
    AppliedMoment,
    BeamConfig,
    PointLoad,
    TriangularLoad,
    UniformLoad,
)
from beamsim.piecewise import build_segments, evaluate_segments
from beamsim.solve import solve_reactions

SUPPORTS = ['cantilever', 'simply_supported', 'overhanging']

MIXED_LOADS = (
    PointLoad(x=3.0, magnitude=10000.0),
    UniformLoad(x1=5.0, x2=8.0, magnitude=2000.0),
    TriangularLoad(x1=1.0, x2=4.0, magnitude=3000.0, peak='right'),
    TriangularLoad(x1=6.5, x2=9.5, magnitude=1500.0, peak='left'),
    AppliedMoment(x=6.0, magnitude=5000.0),
    PointLoad(x=9.0, magnitude=-2500.0),
)


def mixed_beam(support):
    config = BeamConfig(length=10.0, support=support, support_a=1.5, support_b=8.5,
                        loads=MIXED_LOADS)
    loads = resolve_loads(load_source(config), config.length)
    return config, loads, solve_reactions(config, loads)


@pytest.mark.parametrize("support", SUPPORTS)
def test_segments_tile_the_beam(support):
    """
    WHAT IS THIS TEST?
    ==================
    The segment list must cover [0, L] exactly once: first segment starts
    at 0, last ends at L, each segment starts where the previous ended.
    """
    config, loads, reactions = mixed_beam(support)
    segments = build_segments(config, loads, reactions)

    assert segments[0].x_start == 0.0
    assert segments[-1].x_end == config.length
    for left, right in zip(segments, segments[1:]):
        assert left.x_end == right.x_start
        assert left.x_start < left.x_end

    total = sum(s.length for s in segments)
    assert np.isclose(total, config.length)


@pytest.mark.parametrize("support", SUPPORTS)
def test_polynomials_agree_with_sweep(support):
    """
    WHAT IS THIS TEST?
    ==================
    The exact piecewise polynomials and the forward-Euler sweep describe
    the same V(x), M(x). Away from jumps they must agree to within the
    integration error of the sweep.

    WHY DOES THIS MATTER?
    ====================
    The two are built independently (cumulative sums vs. closed-form
    bookkeeping). If a sign or a triangular-load coefficient is wrong in
    either, they drift apart.
    """
    config, loads, reactions = mixed_beam(support)
    n = 4000
    diagrams = integrate_diagrams(config, loads, reactions, n)
    segments = build_segments(config, loads, reactions)
    V, M = evaluate_segments(segments, diagrams.xs)

    dx = config.length / n
    breaks = np.array(load_breakpoints(loads) + [reactions.support_a, reactions.support_b,
                                                 config.length])
    away = np.min(np.abs(diagrams.xs[:, None] - breaks[None, :]), axis=1) > 2 * dx

    np.testing.assert_allclose(V[away], diagrams.V[away], atol=1e-2 * diagrams.max_abs_V)
    np.testing.assert_allclose(M[away], diagrams.M[away], atol=1e-2 * diagrams.max_abs_M)


@pytest.mark.parametrize("support", SUPPORTS)
def test_jumps_only_at_point_actions(support):
    """
    V jumps by the point loads and reactions at a boundary, M jumps by
    the applied moments there; both are continuous everywhere else.
    """
    config, loads, reactions = mixed_beam(support)
    segments = build_segments(config, loads, reactions)

    for left, right in zip(segments, segments[1:]):
        xb = right.x_start
        expected_dV = -sum(l.magnitude for l in loads
                           if isinstance(l, PointLoad) and np.isclose(l.x, xb))
        expected_dM = -sum(l.magnitude for l in loads
                           if isinstance(l, AppliedMoment) and np.isclose(l.x, xb))
        if support != 'cantilever':
            if np.isclose(reactions.support_a, xb):
                expected_dV += reactions.ra
            if np.isclose(reactions.support_b, xb):
                expected_dV += reactions.rb

        dV = right.shear(xb) - left.shear(xb)
        dM = right.moment(xb) - left.moment(xb)
        assert np.isclose(dV, expected_dV, atol=1e-6), f"V jump at x={xb}"
        assert np.isclose(dM, expected_dM, atol=1e-6), f"M jump at x={xb}"


@pytest.mark.parametrize("support", ['cantilever', 'overhanging'])
def test_free_ends_carry_nothing(support):
    """At a free right end (cantilever tip, overhang) V and M return to zero."""
    config, loads, reactions = mixed_beam(support)
    segments = build_segments(config, loads, reactions)
    V, M = evaluate_segments(segments, np.array([config.length]))

    assert abs(V[0]) < 1e-6 * 20000.0
    assert abs(M[0]) < 1e-6 * 200000.0
