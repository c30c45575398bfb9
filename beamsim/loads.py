# loads.py - Load resolution, resultants and distributed intensities

import logging
from typing import List, Sequence, Tuple

import numpy as np

from .model import (
    AppliedMoment,
    BeamConfig,
    ExplicitLoads,
    ImplicitSingleLoad,
    LoadDefinition,
    LoadSource,
    PointLoad,
    TriangularLoad,
    UniformLoad,
)

logger = logging.getLogger(__name__)


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(x, hi))


def load_source(config: BeamConfig) -> LoadSource:
    """
    Decide, once, where the loads of a beam case come from.

    An explicit load list wins; without one the base point load
    (config.force at config.load_position) is the only load.
    """
    if config.loads:
        return ExplicitLoads(tuple(config.loads))
    return ImplicitSingleLoad(force=config.force, position=config.load_position)


def resolve_loads(source: LoadSource, length: float) -> Tuple[LoadDefinition, ...]:
    """
    Turn a load source into the tuple of load primitives the solvers use.

    Positions are clamped into [0, L]. Range loads with reversed ends are
    reordered; range loads that collapse to zero width are dropped.

    Parameters:
    -----------
    source : ExplicitLoads or ImplicitSingleLoad
    length : float
        Beam length L (m)

    Returns:
    --------
    tuple of PointLoad / UniformLoad / TriangularLoad / AppliedMoment
    """
    if isinstance(source, ImplicitSingleLoad):
        x = clamp(source.position, 0.0, length)
        if x != source.position:
            logger.debug("Base load position %g clamped to %g", source.position, x)
        # signed force (negative = down) -> downward-positive magnitude
        return (PointLoad(x=x, magnitude=-source.force),)

    if not isinstance(source, ExplicitLoads):
        raise TypeError(f"Unknown load source: {type(source).__name__}")

    resolved: List[LoadDefinition] = []
    for load in source.loads:
        if isinstance(load, (PointLoad, AppliedMoment)):
            x = clamp(load.x, 0.0, length)
            resolved.append(type(load)(x=x, magnitude=load.magnitude))
        elif isinstance(load, (UniformLoad, TriangularLoad)):
            x1 = clamp(min(load.x1, load.x2), 0.0, length)
            x2 = clamp(max(load.x1, load.x2), 0.0, length)
            if x2 - x1 <= 0.0:
                logger.debug("Dropping zero-width distributed load %r", load)
                continue
            if isinstance(load, UniformLoad):
                resolved.append(UniformLoad(x1=x1, x2=x2, magnitude=load.magnitude))
            else:
                resolved.append(TriangularLoad(x1=x1, x2=x2, magnitude=load.magnitude, peak=load.peak))
        else:
            raise ValueError(f"Unknown load type: {type(load).__name__}")
    return tuple(resolved)


def load_resultant(load: LoadDefinition) -> Tuple[float, float]:
    """
    Total downward force of a load and the position it acts at.

    Uniform:     F = w·(x2−x1) at the midpoint
    Triangular:  F = ½·w·(x2−x1) at 1/3 of the span from the peak end
    Moment:      no force (F = 0)
    """
    if isinstance(load, PointLoad):
        return load.magnitude, load.x
    if isinstance(load, UniformLoad):
        return load.magnitude * (load.x2 - load.x1), 0.5 * (load.x1 + load.x2)
    if isinstance(load, TriangularLoad):
        span = load.x2 - load.x1
        F = 0.5 * load.magnitude * span
        if load.peak == 'right':
            return F, load.x2 - span / 3.0
        return F, load.x1 + span / 3.0
    if isinstance(load, AppliedMoment):
        return 0.0, load.x
    raise ValueError(f"Unknown load type: {type(load).__name__}")


def load_moment(load: LoadDefinition, pivot: float) -> float:
    """Counter-clockwise moment of a load about x = pivot."""
    if isinstance(load, AppliedMoment):
        return load.magnitude
    F, x = load_resultant(load)
    # downward force to the right of the pivot turns clockwise
    return -F * (x - pivot)


def distributed_intensity(load: LoadDefinition, xs: np.ndarray) -> np.ndarray:
    """
    Downward intensity q(x) of a distributed load sampled at xs.

    Zero outside [x1, x2] (both ends inclusive) and for point-type loads.
    Triangular loads ramp linearly from 0 at one end to the peak at the other.
    """
    xs = np.asarray(xs, dtype=float)
    if not isinstance(load, (UniformLoad, TriangularLoad)):
        return np.zeros_like(xs)

    inside = (xs >= load.x1) & (xs <= load.x2)
    if isinstance(load, UniformLoad):
        return np.where(inside, load.magnitude, 0.0)

    r = (xs - load.x1) / (load.x2 - load.x1)
    ramp = r if load.peak == 'right' else 1.0 - r
    return np.where(inside, ramp * load.magnitude, 0.0)


def load_breakpoints(loads: Sequence[LoadDefinition]) -> List[float]:
    """Positions where a load starts, ends, or acts."""
    pts = []
    for load in loads:
        if isinstance(load, (PointLoad, AppliedMoment)):
            pts.append(load.x)
        else:
            pts.extend([load.x1, load.x2])
    return pts
