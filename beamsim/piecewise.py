# beamsim/piecewise.py
"""
PIECEWISE POLYNOMIAL SHEAR AND MOMENT
=====================================

Splits the beam at every support and load discontinuity and derives, for
each segment [xA, xB), exact polynomials V(x) (degree ≤ 2) and M(x)
(degree ≤ 3) by summing the closed-form contribution of every reaction
and load that acts at or before the segment start.

CONTRIBUTIONS (x is the global coordinate):
-------------------------------------------
    Reaction R at s ≤ xA      V += R           M += R·(x − s)
    Point load P at p ≤ xA    V −= P           M −= P·(x − p)
    Applied moment M0 ≤ xA                     M −= M0
    Uniform w, fully left     as a point load w·(x2−x1) at its midpoint
    Uniform w, spanning       V −= w·(x − x1)  M −= w·(x − x1)²/2
    Triangle, fully left      as a point load ½·w·(x2−x1) at its centroid
    Triangle, spanning        with s = x − x1 and Lt = x2 − x1:
        peak right:  V −= w·s²/(2Lt)             M −= w·s³/(6Lt)
        peak left:   V −= w·s − w·s²/(2Lt)       M −= w·s²/2 − w·s³/(6Lt)

Because segments are cut at every x1 and x2, a distributed load is always
either fully left of, spanning, or fully right of a segment.

Each contribution is its own numpy Polynomial; a segment's V and M are
fresh sums of those, so no coefficient set is shared or mutated.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
from numpy.polynomial import Polynomial

from .config import CONFIG
from .loads import clamp, load_breakpoints, load_resultant
from .model import (
    AppliedMoment,
    BeamConfig,
    LoadDefinition,
    PointLoad,
    TriangularLoad,
    UniformLoad,
)
from .solve import InvariantError, ReactionSet

logger = logging.getLogger(__name__)

ZERO = Polynomial([0.0])


@dataclass(frozen=True)
class PiecewiseSegment:
    x_start: float
    x_end: float
    shear: Polynomial
    moment: Polynomial

    @property
    def length(self) -> float:
        return self.x_end - self.x_start

    @property
    def shear_text(self) -> str:
        return format_polynomial(self.shear)

    @property
    def moment_text(self) -> str:
        return format_polynomial(self.moment)

    @property
    def equation(self) -> str:
        return f"V(x) = {self.shear_text}\nM(x) = {self.moment_text}"

    def contains(self, x: float) -> bool:
        return self.x_start <= x < self.x_end


def format_polynomial(poly: Polynomial, tolerance: Optional[float] = None) -> str:
    """
    Human-readable polynomial, highest power first, two decimals.

    Coefficients with |c| ≤ tolerance are left out (display only).
    Returns "0.00" when nothing is left.

    >>> format_polynomial(Polynomial([100000.0, -25000.0]))
    '-25000.00x + 100000.00'
    """
    if tolerance is None:
        tolerance = CONFIG.display_tolerance
    terms: List[str] = []
    coef = poly.coef
    for p in range(len(coef) - 1, -1, -1):
        c = float(coef[p])
        if abs(c) <= tolerance:
            continue
        if not terms:
            sign = "-" if c < 0 else ""
        else:
            sign = " - " if c < 0 else " + "
        if p == 0:
            power = ""
        elif p == 1:
            power = "x"
        else:
            power = f"x^{p}"
        terms.append(f"{sign}{abs(c):.2f}{power}")
    return "".join(terms) if terms else "0.00"


def segment_breakpoints(
    config: BeamConfig,
    loads: Sequence[LoadDefinition],
) -> List[float]:
    """
    Sorted, de-duplicated segment boundaries: 0, L, supports and every
    load discontinuity. Points closer than the merge tolerance collapse.
    """
    L = config.length
    tol = CONFIG.segment_tolerance * L

    pts = [0.0, L]
    if config.support != 'cantilever':
        pts.extend(config.support_positions())
    pts.extend(load_breakpoints(loads))
    pts = sorted(clamp(p, 0.0, L) for p in pts)

    merged = [0.0]
    for p in pts:
        if p - merged[-1] > tol:
            merged.append(p)
    if len(merged) == 1:
        merged.append(L)
    else:
        merged[-1] = L
    return merged


def _point_contribution(F: float, x0: float) -> Tuple[Polynomial, Polynomial]:
    # downward force F at x0: V = -F, M = -F(x - x0)
    return Polynomial([-F]), Polynomial([F * x0, -F])


def _reaction_contribution(R: float, s: float) -> Tuple[Polynomial, Polynomial]:
    return Polynomial([R]), Polynomial([-R * s, R])


def _load_contribution(
    load: LoadDefinition,
    x_a: float,
    x_b: float,
    tol: float,
) -> Tuple[Polynomial, Polynomial]:
    if isinstance(load, PointLoad):
        if load.x <= x_a + tol:
            return _point_contribution(load.magnitude, load.x)
        return ZERO, ZERO

    if isinstance(load, AppliedMoment):
        if load.x <= x_a + tol:
            return ZERO, Polynomial([-load.magnitude])
        return ZERO, ZERO

    if isinstance(load, (UniformLoad, TriangularLoad)):
        if load.x2 <= x_a + tol:
            F, centroid = load_resultant(load)
            return _point_contribution(F, centroid)
        if not (load.x1 <= x_a + tol and load.x2 >= x_b - tol):
            return ZERO, ZERO

        w = load.magnitude
        x1 = load.x1
        if isinstance(load, UniformLoad):
            V = Polynomial([w * x1, -w])
            M = Polynomial([-0.5 * w * x1**2, w * x1, -0.5 * w])
            return V, M

        Lt = load.x2 - load.x1
        k = w / (6.0 * Lt)
        kv = w / (2.0 * Lt)
        # ramp part, common to both peak sides: w·s²/(2Lt), w·s³/(6Lt)
        ramp_V = Polynomial([-kv * x1**2, 2 * kv * x1, -kv])
        ramp_M = Polynomial([k * x1**3, -3 * k * x1**2, 3 * k * x1, -k])
        if load.peak == 'right':
            return ramp_V, ramp_M
        # peak left = full uniform w minus the rising ramp
        V = Polynomial([w * x1, -w]) - ramp_V
        M = Polynomial([-0.5 * w * x1**2, w * x1, -0.5 * w]) - ramp_M
        return V, M

    raise ValueError(f"Unknown load type: {type(load).__name__}")


def segment_polynomials(
    x_a: float,
    x_b: float,
    config: BeamConfig,
    loads: Sequence[LoadDefinition],
    reactions: ReactionSet,
) -> Tuple[Polynomial, Polynomial]:
    """V(x), M(x) valid on [x_a, x_b)."""
    tol = CONFIG.segment_tolerance * config.length
    parts: List[Tuple[Polynomial, Polynomial]] = []

    if config.support == 'cantilever':
        parts.append((Polynomial([reactions.ra]), Polynomial([-reactions.ma, reactions.ra])))
    else:
        if reactions.support_a <= x_a + tol:
            parts.append(_reaction_contribution(reactions.ra, reactions.support_a))
        if reactions.support_b <= x_a + tol:
            parts.append(_reaction_contribution(reactions.rb, reactions.support_b))

    for load in loads:
        parts.append(_load_contribution(load, x_a, x_b, tol))

    V = sum((p[0] for p in parts), ZERO)
    M = sum((p[1] for p in parts), ZERO)
    return V, M


def check_coverage(segments: Sequence[PiecewiseSegment], length: float) -> None:
    """
    Segments must tile [0, L] exactly: contiguous, ordered, non-empty.

    Raises:
    -------
    InvariantError
        If the list has a gap, an overlap, or does not reach both ends
    """
    if not segments:
        raise InvariantError("No segments produced")
    if segments[0].x_start != 0.0:
        raise InvariantError(f"First segment starts at {segments[0].x_start}, not 0")
    if segments[-1].x_end != length:
        raise InvariantError(f"Last segment ends at {segments[-1].x_end}, not {length}")
    for left, right in zip(segments, segments[1:]):
        if left.x_end != right.x_start:
            raise InvariantError(f"Gap/overlap between {left.x_end} and {right.x_start}")
    for seg in segments:
        if seg.x_end <= seg.x_start:
            raise InvariantError(f"Empty segment [{seg.x_start}, {seg.x_end})")


def build_segments(
    config: BeamConfig,
    loads: Sequence[LoadDefinition],
    reactions: ReactionSet,
) -> List[PiecewiseSegment]:
    """
    Piecewise V(x), M(x) polynomials covering [0, L].

    Parameters:
    -----------
    config : BeamConfig
    loads : sequence of resolved load primitives
    reactions : ReactionSet from solve_reactions()

    Returns:
    --------
    List[PiecewiseSegment]
        Ordered by position, contiguous, union exactly [0, L]
    """
    pts = segment_breakpoints(config, loads)
    segments = []
    for x_a, x_b in zip(pts, pts[1:]):
        V, M = segment_polynomials(x_a, x_b, config, loads, reactions)
        segments.append(PiecewiseSegment(x_start=x_a, x_end=x_b, shear=V, moment=M))

    check_coverage(segments, config.length)
    logger.debug("Built %d segments for L=%g", len(segments), config.length)
    return segments


def evaluate_segments(
    segments: Sequence[PiecewiseSegment],
    xs: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Evaluate piecewise V and M at arbitrary stations.

    A station on a boundary belongs to the segment starting there; x = L
    belongs to the last segment.
    """
    xs = np.asarray(xs, dtype=float)
    starts = np.array([s.x_start for s in segments])
    idx = np.clip(np.searchsorted(starts, xs, side='right') - 1, 0, len(segments) - 1)

    V = np.empty_like(xs)
    M = np.empty_like(xs)
    for k, seg in enumerate(segments):
        mask = idx == k
        if np.any(mask):
            V[mask] = seg.shear(xs[mask])
            M[mask] = seg.moment(xs[mask])
    return V, M
