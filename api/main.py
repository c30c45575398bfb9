# api/main.py
"""
FastAPI backend for BeamSim - exposes the beamsim engine as a REST API.
"""

import logging
from typing import List, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from beamsim.analysis import analyze_beam, analyze_bearing
from beamsim.config import CONFIG
from beamsim.model import (
    AppliedMoment,
    BeamConfig,
    BearingConfig,
    Material,
    PointLoad,
    SectionDescriptor,
    TriangularLoad,
    UniformLoad,
)
from beamsim.post import simulation_summary

logger = logging.getLogger("beamsim.api")
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    logger.addHandler(handler)
logger.setLevel(logging.INFO)


app = FastAPI(
    title="BeamSim API",
    description="Beam and bearing analysis engine",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class LoadInput(BaseModel):
    """One load: P (point), U (uniform), T (triangular) or M (moment)."""
    type: Literal['P', 'U', 'T', 'M']
    val: float = Field(..., description="Magnitude, positive = downward / counter-clockwise")
    x: Optional[float] = None
    x1: Optional[float] = None
    x2: Optional[float] = None
    peak: Literal['left', 'right'] = 'right'


class BeamParams(BaseModel):
    """Input parameters for one beam case."""
    name: str = Field("Design Case 1", description="Case name")
    length: float = Field(8.0, gt=0, description="Beam length (m)")
    height: float = Field(0.5, gt=0, description="Section height / diameter (m)")
    force: float = Field(-50000.0, description="Base point load (N), negative = down")
    load_position: float = Field(4.0, description="Base load position (m)")
    youngs_modulus: float = Field(200e9, gt=0, description="E (Pa)")
    yield_strength: float = Field(250e6, gt=0, description="Yield strength (Pa)")
    beam_type: Literal['cantilever', 'simply_supported', 'overhanging'] = 'simply_supported'
    support_a: float = Field(1.0, ge=0, description="Overhang support A (m)")
    support_b: float = Field(7.0, ge=0, description="Overhang support B (m)")
    custom_loads: List[LoadInput] = Field(default_factory=list)
    section_type: Literal['rectangular', 'circular', 'ibeam'] = 'rectangular'
    section_width: float = Field(0.2, gt=0, description="Rectangle width (m)")
    flange_width: float = Field(0.3, gt=0, description="I-beam flange width (m)")
    flange_thickness: float = Field(0.02, gt=0, description="I-beam flange thickness (m)")
    web_thickness: float = Field(0.015, gt=0, description="I-beam web thickness (m)")
    mesh_density_x: int = Field(CONFIG.mesh_density_x, ge=1, le=400)
    mesh_density_y: int = Field(CONFIG.mesh_density_y, ge=1, le=100)
    deformation_scale: float = Field(CONFIG.deformation_scale, ge=0)
    diagram_samples: int = Field(CONFIG.diagram_samples, ge=10, le=20000)


class BearingParams(BaseModel):
    """Input parameters for a radial ball bearing."""
    outer_radius: float = Field(100.0, gt=0, description="Outer race radius (mm)")
    inner_radius: float = Field(60.0, gt=0, description="Inner race radius (mm)")
    ball_count: int = Field(12, ge=1, le=100)
    radial_load: float = Field(5000.0, ge=0, description="Radial load (N)")
    mesh_resolution: int = Field(CONFIG.ball_mesh_resolution, ge=1, le=50)


class ReactionData(BaseModel):
    Ra: float
    Rb: float
    Ma: float
    support_a: float
    support_b: float
    degenerate: bool


class BeamResult(BaseModel):
    """Headline results of a beam case."""
    reactions: ReactionData
    I: float
    area: float
    max_stress: float
    max_deflection: float
    safety_factor: float
    deflection_allowable: float
    deflection_ratio: float
    deflection_ok: bool
    closed_form: bool
    summary: str


class DiagramResult(BaseModel):
    xs: List[float]
    V: List[float]
    M: List[float]
    reactions: ReactionData


class SegmentData(BaseModel):
    x_start: float
    x_end: float
    V_coefficients: List[float]
    M_coefficients: List[float]
    V_text: str
    M_text: str


class NodeData(BaseModel):
    x: float
    y: float
    dx: float
    dy: float
    stress: float


class CellData(BaseModel):
    i: int
    j: int
    nodes: List[NodeData]
    avg_stress: float


class BallData(BaseModel):
    angle: float
    load: float
    max_stress: float
    deformation: float
    x: float
    y: float
    radius: float
    points_x: List[float]
    points_y: List[float]
    points_stress: List[float]


class BearingResult(BaseModel):
    balls: List[BallData]
    max_load: float
    max_stress: float
    loaded_count: int


# =============================================================================
# Conversion
# =============================================================================

def to_load(load: LoadInput):
    if load.type in ('P', 'M'):
        if load.x is None:
            raise ValueError(f"Load type {load.type} needs x")
        cls = PointLoad if load.type == 'P' else AppliedMoment
        return cls(x=load.x, magnitude=load.val)
    if load.x1 is None or load.x2 is None:
        raise ValueError(f"Load type {load.type} needs x1 and x2")
    if load.type == 'U':
        return UniformLoad(x1=load.x1, x2=load.x2, magnitude=load.val)
    return TriangularLoad(x1=load.x1, x2=load.x2, magnitude=load.val, peak=load.peak)


def to_config(params: BeamParams) -> BeamConfig:
    section = SectionDescriptor(
        shape=params.section_type,
        height=params.height,
        width=params.section_width,
        flange_width=params.flange_width,
        flange_thickness=params.flange_thickness,
        web_thickness=params.web_thickness,
    )
    material = Material(
        name="custom",
        E=params.youngs_modulus,
        yield_strength=params.yield_strength,
    )
    return BeamConfig(
        length=params.length,
        support=params.beam_type,
        section=section,
        material=material,
        force=params.force,
        load_position=params.load_position,
        support_a=params.support_a,
        support_b=params.support_b,
        loads=tuple(to_load(l) for l in params.custom_loads),
    )


def run_beam(params: BeamParams):
    try:
        config = to_config(params)
        return analyze_beam(
            config,
            mesh_density_x=params.mesh_density_x,
            mesh_density_y=params.mesh_density_y,
            deformation_scale=params.deformation_scale,
            diagram_samples=params.diagram_samples,
        )
    except ValueError as e:
        logger.info("Rejected beam request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


def reaction_data(result) -> ReactionData:
    r = result.reactions
    return ReactionData(Ra=r.ra, Rb=r.rb, Ma=r.ma, support_a=r.support_a,
                        support_b=r.support_b, degenerate=r.degenerate)


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "BeamSim API"}


@app.post("/api/beam/analyze", response_model=BeamResult)
async def beam_analyze(params: BeamParams):
    """Reactions, global stats, safety factor and deflection check."""
    result = run_beam(params)
    logger.info("Analyzed %s beam L=%g (%d loads)", params.beam_type, params.length,
                len(result.loads))
    return BeamResult(
        reactions=reaction_data(result),
        I=result.section.I,
        area=result.section.area,
        max_stress=result.stats.max_stress,
        max_deflection=result.stats.max_deflection,
        safety_factor=result.safety_factor,
        deflection_allowable=result.deflection.allowable,
        deflection_ratio=result.deflection.ratio,
        deflection_ok=result.deflection.passes,
        closed_form=result.mesh.closed_form,
        summary=simulation_summary(params.name, result.config, result.stats),
    )


@app.post("/api/beam/diagrams", response_model=DiagramResult)
async def beam_diagrams(params: BeamParams):
    """Shear and moment sweep."""
    result = run_beam(params)
    d = result.diagrams
    return DiagramResult(xs=d.xs.tolist(), V=d.V.tolist(), M=d.M.tolist(),
                         reactions=reaction_data(result))


@app.post("/api/beam/segments", response_model=List[SegmentData])
async def beam_segments(params: BeamParams):
    """Exact per-segment V(x), M(x) polynomials."""
    result = run_beam(params)
    return [
        SegmentData(
            x_start=s.x_start,
            x_end=s.x_end,
            V_coefficients=[float(c) for c in s.shear.coef],
            M_coefficients=[float(c) for c in s.moment.coef],
            V_text=s.shear_text,
            M_text=s.moment_text,
        )
        for s in result.segments
    ]


@app.post("/api/beam/mesh", response_model=List[CellData])
async def beam_mesh(params: BeamParams):
    """Stress mesh cells (four corners each, with the average stress)."""
    result = run_beam(params)
    return [
        CellData(
            i=cell.i,
            j=cell.j,
            nodes=[NodeData(x=n.x, y=n.y, dx=n.x_def, dy=n.y_def, stress=n.stress)
                   for n in cell.nodes],
            avg_stress=cell.avg_stress,
        )
        for cell in result.mesh.cells()
    ]


@app.post("/api/bearing/analyze", response_model=BearingResult)
async def bearing_analyze(params: BearingParams):
    """Ball loads, contact stresses and per-ball stress point fields."""
    if params.outer_radius <= params.inner_radius:
        raise HTTPException(status_code=400, detail="outer_radius must exceed inner_radius")
    config = BearingConfig(
        outer_radius=params.outer_radius,
        inner_radius=params.inner_radius,
        ball_count=params.ball_count,
        radial_load=params.radial_load,
    )
    result = analyze_bearing(config, params.mesh_resolution)
    balls = [
        BallData(
            angle=e.angle, load=e.load, max_stress=e.max_stress,
            deformation=e.deformation, x=e.x, y=e.y, radius=e.radius,
            points_x=f.x.tolist(), points_y=f.y.tolist(), points_stress=f.stress.tolist(),
        )
        for e, f in zip(result.elements, result.fields)
    ]
    return BearingResult(balls=balls, max_load=result.max_load,
                         max_stress=result.max_stress, loaded_count=result.loaded_count)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
