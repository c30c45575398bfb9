# beamsim - Closed-form beam and bearing analysis engine
"""
BEAMSIM: Interactive Beam and Bearing Analysis Engine
=====================================================

This package provides:
- Section properties (rectangular, circular, I-beam)
- Support reactions for cantilever, simply supported and overhanging beams
- Closed-form deflection/stress meshes for a single point load
- Shear and moment diagrams for mixed load sets (numerical sweep)
- Exact piecewise polynomials for V(x) and M(x)
- Stribeck load distribution and approximate contact stress for ball bearings

ARCHITECTURE:
-------------
    model.py        Frozen configuration records (beam, section, loads, bearing)
    section.py      Second moment of area and area
    loads.py        Load resolution, resultants, distributed intensities
    solve.py        Support reactions (static equilibrium)
    fields.py       Closed-form v, θ, M, σ over a 2D stress mesh
    diagrams.py     V(x), M(x) numerical sweep
    piecewise.py    Per-segment V/M polynomials
    bearing.py      Ball load distribution and ball stress point fields
    post.py         Safety factor, span/360 check, text summaries
    analysis.py     Memoized one-call pipelines
    cases.py        Independent design cases and comparison tables
    viz.py          Matplotlib quick-look plots
"""

from .model import (
    AppliedMoment,
    BeamConfig,
    BearingConfig,
    ExplicitLoads,
    ImplicitSingleLoad,
    Material,
    PointLoad,
    SectionDescriptor,
    TriangularLoad,
    UniformLoad,
)
from .section import section_properties
from .solve import InvariantError, solve_reactions
from .analysis import analyze_beam, analyze_bearing

__version__ = "0.1.0"
