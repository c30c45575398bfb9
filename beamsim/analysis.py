# beamsim/analysis.py
"""
ONE-CALL ANALYSIS ENTRY POINTS
==============================

analyze_beam() runs the whole beam pipeline for one configuration:

    BeamConfig ──► load_source ──► resolve_loads   (once)
        │                               │
        ├─► section_properties          ├─► solve_reactions ─┬─► integrate_diagrams
        │                               │                    └─► build_segments
        └─► compute_beam_mesh ─► mesh_stats ─► safety factor, L/360 check

analyze_bearing() does the same for a bearing.

Both are memoized on their (hashable, frozen) inputs: editing one case
never recomputes another, and re-rendering an unchanged case is a cache
hit. Arrays in cached results are made read-only so that callers cannot
leak changes into each other through the cache.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple

import numpy as np

from .bearing import (
    BallStressField,
    BearingElement,
    distribute_bearing_load,
    generate_ball_mesh,
)
from .config import CONFIG
from .diagrams import DiagramData, integrate_diagrams
from .fields import BeamMesh, BeamStats, compute_beam_mesh, mesh_stats
from .loads import load_source, resolve_loads
from .model import BeamConfig, BearingConfig, LoadDefinition
from .piecewise import PiecewiseSegment, build_segments
from .post import DeflectionCheck, deflection_check, safety_factor
from .section import SectionProperties, section_properties
from .solve import ReactionSet, solve_reactions


@dataclass(frozen=True)
class BeamAnalysis:
    config: BeamConfig
    loads: Tuple[LoadDefinition, ...]
    section: SectionProperties
    reactions: ReactionSet
    mesh: BeamMesh
    stats: BeamStats
    diagrams: DiagramData
    segments: Tuple[PiecewiseSegment, ...]
    safety_factor: float
    deflection: DeflectionCheck

    @property
    def degenerate(self) -> bool:
        return self.reactions.degenerate


@dataclass(frozen=True)
class BearingAnalysis:
    config: BearingConfig
    elements: Tuple[BearingElement, ...]
    fields: Tuple[BallStressField, ...]

    @property
    def max_load(self) -> float:
        return max((e.load for e in self.elements), default=0.0)

    @property
    def max_stress(self) -> float:
        return max((e.max_stress for e in self.elements), default=0.0)

    @property
    def loaded_count(self) -> int:
        return sum(1 for e in self.elements if e.load > 0)


def _freeze(*arrays: np.ndarray) -> None:
    for arr in arrays:
        arr.flags.writeable = False


@lru_cache(maxsize=CONFIG.cache_size)
def analyze_beam(
    config: BeamConfig,
    mesh_density_x: Optional[int] = None,
    mesh_density_y: Optional[int] = None,
    deformation_scale: Optional[float] = None,
    diagram_samples: Optional[int] = None,
) -> BeamAnalysis:
    """
    Full beam analysis for one configuration.

    Parameters:
    -----------
    config : BeamConfig
    mesh_density_x, mesh_density_y, deformation_scale : optional
        Stress mesh discretization (defaults from CONFIG)
    diagram_samples : int, optional
        Steps of the V/M sweep (defaults from CONFIG)

    Returns:
    --------
    BeamAnalysis
    """
    loads = resolve_loads(load_source(config), config.length)
    props = section_properties(config.section)
    reactions = solve_reactions(config, loads)

    mesh = compute_beam_mesh(config, mesh_density_x, mesh_density_y, deformation_scale)
    stats = mesh_stats(mesh)
    diagrams = integrate_diagrams(config, loads, reactions, diagram_samples)
    segments = tuple(build_segments(config, loads, reactions))

    _freeze(mesh.x, mesh.y, mesh.deflection, mesh.slope, mesh.moment,
            mesh.stress, mesh.x_def, mesh.y_def, mesh.cell_stress,
            diagrams.xs, diagrams.V, diagrams.M)

    return BeamAnalysis(
        config=config,
        loads=loads,
        section=props,
        reactions=reactions,
        mesh=mesh,
        stats=stats,
        diagrams=diagrams,
        segments=segments,
        safety_factor=safety_factor(config.material.yield_strength, stats.max_stress),
        deflection=deflection_check(config.length, stats.max_deflection),
    )


@lru_cache(maxsize=CONFIG.cache_size)
def analyze_bearing(
    config: BearingConfig,
    mesh_resolution: Optional[int] = None,
) -> BearingAnalysis:
    """Load distribution plus one stress point field per ball."""
    elements = distribute_bearing_load(config)
    fields: List[BallStressField] = []
    for element in elements:
        field = generate_ball_mesh(element, mesh_resolution)
        _freeze(field.x, field.y, field.stress)
        fields.append(field)
    return BearingAnalysis(config=config, elements=tuple(elements), fields=tuple(fields))
