# Beam, section, load and bearing definitions (frozen dataclasses)

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple, Union

SupportType = Literal['cantilever', 'simply_supported', 'overhanging']
SectionShape = Literal['rectangular', 'circular', 'ibeam']
PeakSide = Literal['left', 'right']

SUPPORT_TYPES = ('cantilever', 'simply_supported', 'overhanging')
SECTION_SHAPES = ('rectangular', 'circular', 'ibeam')


@dataclass(frozen=True)
class Material:
    name: str
    E: float                # Young's modulus (Pa)
    yield_strength: float   # (Pa)
    density: float = 7850.0  # kg/m³


@dataclass(frozen=True)
class SectionDescriptor:
    """
    Cross-section shape plus the dimensions that shape uses.

    height is the overall depth (the diameter for circular sections).
    width is only read for rectangular sections; the flange/web
    dimensions only for I-beams.
    """
    shape: SectionShape = 'rectangular'
    height: float = 0.5
    width: float = 0.2
    flange_width: float = 0.3
    flange_thickness: float = 0.02
    web_thickness: float = 0.015


# ---------------------------------------------------------------------------
# Load primitives
#
# Force magnitudes are positive DOWNWARD (intensity convention).
# Applied moments are positive counter-clockwise.
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PointLoad:
    x: float
    magnitude: float


@dataclass(frozen=True)
class UniformLoad:
    x1: float
    x2: float
    magnitude: float  # per unit length


@dataclass(frozen=True)
class TriangularLoad:
    x1: float
    x2: float
    magnitude: float  # peak intensity
    peak: PeakSide = 'right'


@dataclass(frozen=True)
class AppliedMoment:
    x: float
    magnitude: float


LoadDefinition = Union[PointLoad, UniformLoad, TriangularLoad, AppliedMoment]


@dataclass(frozen=True)
class ExplicitLoads:
    """User-supplied load list."""
    loads: Tuple[LoadDefinition, ...]


@dataclass(frozen=True)
class ImplicitSingleLoad:
    """No load list given: the base point load stands in for it."""
    force: float     # signed, negative = downward
    position: float


LoadSource = Union[ExplicitLoads, ImplicitSingleLoad]


@dataclass(frozen=True)
class BeamConfig:
    """
    Complete description of one beam case.

    Parameters:
    -----------
    length : float
        Beam length L (m), > 0
    support : str
        'cantilever' (fixed at x=0), 'simply_supported' (pins at 0 and L)
        or 'overhanging' (pins at support_a and support_b)
    section : SectionDescriptor
        Cross-section; its height also bounds the stress mesh (±h/2)
    material : Material
        E and yield strength
    force : float
        Base point load (N), signed, negative = downward
    load_position : float
        Position of the base load (m), clamped to [0, L] before use
    support_a, support_b : float
        Pin positions for overhanging beams. support_b=None means L.
    loads : tuple
        Explicit load list. Empty means "use the base load".
        Order only matters for display numbering.
    """
    length: float = 8.0
    support: SupportType = 'simply_supported'
    section: SectionDescriptor = field(default_factory=SectionDescriptor)
    material: Material = field(
        default_factory=lambda: Material('Structural steel', 200e9, 250e6)
    )
    force: float = -50000.0
    load_position: float = 4.0
    support_a: float = 0.0
    support_b: Optional[float] = None
    loads: Tuple[LoadDefinition, ...] = ()

    @property
    def height(self) -> float:
        return self.section.height

    def support_positions(self) -> Tuple[float, float]:
        """Positions of support A and B; a cantilever reports (0, 0)."""
        if self.support == 'cantilever':
            return 0.0, 0.0
        if self.support == 'overhanging':
            b = self.length if self.support_b is None else self.support_b
            return self.support_a, b
        return 0.0, self.length


@dataclass(frozen=True)
class BearingConfig:
    outer_radius: float = 100.0   # mm
    inner_radius: float = 60.0    # mm
    ball_count: int = 12
    radial_load: float = 5000.0   # N
    # carried for collaborators; the static distribution ignores them
    rotation_speed: float = 0.0   # rpm
    contact_angle: float = 0.0    # deg
