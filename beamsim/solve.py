# support reactions from static equilibrium, invariant errors

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from .loads import load_moment, load_resultant
from .model import BeamConfig, LoadDefinition

logger = logging.getLogger(__name__)

SPAN_EPS = 1e-6


class InvariantError(RuntimeError):
    """Raised when an internal invariant is violated (a defect, not bad input)."""
    pass


@dataclass(frozen=True)
class ReactionSet:
    """
    Support reactions of a statically determinate beam.

    ra, rb : vertical reactions at support A and B (N, positive = up)
    ma     : fixed-end reaction moment (N·m, counter-clockwise positive),
             nonzero only for cantilevers
    support_a, support_b : where the reactions act
    degenerate : True when the two supports coincide and a unit span was
                 substituted; the numbers are then defined but meaningless
    """
    ra: float
    rb: float
    ma: float
    support_a: float
    support_b: float
    degenerate: bool = False


def load_totals(loads: Sequence[LoadDefinition], pivot: float) -> Tuple[float, float]:
    """
    Sum of vertical forces (up positive) and of counter-clockwise moments
    about the pivot for a load list.
    """
    sum_fy = 0.0
    sum_m = 0.0
    for load in loads:
        F, _ = load_resultant(load)
        sum_fy -= F
        sum_m += load_moment(load, pivot)
    return sum_fy, sum_m


def solve_reactions(config: BeamConfig, loads: Sequence[LoadDefinition]) -> ReactionSet:
    """
    Solve ΣFy = 0 and ΣM = 0 for the supports of a beam.

    Moments are taken about support A (x=0 for cantilever and simply
    supported beams, x=support_a for overhanging beams).

    Cantilever:
        Ra = −ΣFy,  Ma = −ΣM_A
    Two supports:
        Rb = −ΣM_A / (xB − xA),  Ra = −ΣFy − Rb

    Parameters:
    -----------
    config : BeamConfig
    loads : sequence of load primitives (already resolved)

    Returns:
    --------
    ReactionSet
    """
    sup_a, sup_b = config.support_positions()
    sum_fy, sum_m = load_totals(loads, sup_a)

    if config.support == 'cantilever':
        return ReactionSet(ra=-sum_fy, rb=0.0, ma=-sum_m, support_a=0.0, support_b=0.0)

    if config.support not in ('simply_supported', 'overhanging'):
        raise ValueError(f"Unknown support type: {config.support!r}")

    span = sup_b - sup_a
    degenerate = abs(span) < SPAN_EPS
    if degenerate:
        logger.warning("Supports coincide at x=%g; substituting a unit span", sup_a)
        span = 1.0

    rb = -sum_m / span
    ra = -sum_fy - rb
    return ReactionSet(ra=ra, rb=rb, ma=0.0, support_a=sup_a, support_b=sup_b,
                       degenerate=degenerate)


def check_equilibrium(
    loads: Sequence[LoadDefinition],
    reactions: ReactionSet,
    pivot: float = 0.0,
) -> Tuple[float, float]:
    """
    Residual (ΣFy, ΣM about pivot) of reactions plus loads.

    Both are ≈ 0 for a correctly solved, non-degenerate beam.
    """
    sum_fy, sum_m = load_totals(loads, pivot)
    sum_fy += reactions.ra + reactions.rb
    sum_m += reactions.ra * (reactions.support_a - pivot)
    sum_m += reactions.rb * (reactions.support_b - pivot)
    sum_m += reactions.ma
    return sum_fy, sum_m
