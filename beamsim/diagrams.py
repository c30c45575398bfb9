# beamsim/diagrams.py
"""
SHEAR AND MOMENT DIAGRAMS (NUMERICAL SWEEP)
===========================================

Rasterized V(x) and M(x) for any mix of point, uniform, triangular and
applied-moment loads, on cantilever, simply supported and overhanging
beams. Used for charting; the exact per-segment expressions live in
piecewise.py and agree with this sweep to within the step size.

ALGORITHM:
----------
n+1 equally spaced stations, dx = L/n. At every station, in order:

    1. V += reaction      (at the first station at or past each support)
    2. V -= P             (at the first station at or past each point load)
    3. V -= q(x)·dx       (q = summed distributed intensity at x)
    4. M += V·dx          (explicit forward Euler, V from the previous station)
    5. M -= Ma            (cantilever reaction moment, at x = 0)
       M -= M0            (applied moments, counter-clockwise positive)

Steps 1-3 and 4-5 are cumulative sums, so the sweep is two np.cumsum
calls over per-station increments.

SIGN CONVENTIONS:
-----------------
- V positive when the net force left of the cut is upward
- M sagging positive (simply supported beam under gravity: M > 0)
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .config import CONFIG
from .loads import distributed_intensity
from .model import AppliedMoment, BeamConfig, LoadDefinition, PointLoad
from .solve import ReactionSet


@dataclass
class DiagramData:
    xs: np.ndarray
    V: np.ndarray
    M: np.ndarray
    reactions: ReactionSet

    @property
    def max_abs_V(self) -> float:
        return float(np.max(np.abs(self.V)))

    @property
    def max_abs_M(self) -> float:
        return float(np.max(np.abs(self.M)))


def station_index(xs: np.ndarray, target: float, tol: float) -> int:
    """Index of the first station at or past target (within tol)."""
    idx = int(np.searchsorted(xs, target - tol, side='left'))
    return min(idx, len(xs) - 1)


def integrate_diagrams(
    config: BeamConfig,
    loads: Sequence[LoadDefinition],
    reactions: ReactionSet,
    n: Optional[int] = None,
) -> DiagramData:
    """
    Sweep the beam and accumulate V(x) and M(x).

    Parameters:
    -----------
    config : BeamConfig
    loads : sequence of resolved load primitives
    reactions : ReactionSet from solve_reactions()
    n : int, optional
        Number of steps (n+1 stations); defaults to CONFIG.diagram_samples

    Returns:
    --------
    DiagramData
        xs, V, M arrays of length n+1, plus the reactions used
    """
    n = max(1, int(n or CONFIG.diagram_samples))
    L = config.length
    dx = L / n
    xs = np.arange(n + 1) * dx
    tol = CONFIG.segment_tolerance * L

    dV = np.zeros(n + 1)
    dM = np.zeros(n + 1)

    if config.support == 'cantilever':
        dV[0] += reactions.ra
        dM[0] -= reactions.ma
    else:
        dV[station_index(xs, reactions.support_a, tol)] += reactions.ra
        dV[station_index(xs, reactions.support_b, tol)] += reactions.rb

    q = np.zeros(n + 1)
    for load in loads:
        if isinstance(load, PointLoad):
            dV[station_index(xs, load.x, tol)] -= load.magnitude
        elif isinstance(load, AppliedMoment):
            dM[station_index(xs, load.x, tol)] -= load.magnitude
        else:
            q += distributed_intensity(load, xs)

    V = np.cumsum(dV - q * dx)
    # M[i] = M[i-1] + V[i-1]·dx, plus any jump at station i
    M = np.concatenate(([0.0], np.cumsum(V[:-1] * dx))) + np.cumsum(dM)

    return DiagramData(xs=xs, V=V, M=M, reactions=reactions)
