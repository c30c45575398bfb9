# beamsim/fields.py
"""
CLOSED-FORM BEAM FIELDS AND STRESS MESH
=======================================

Evaluates Euler–Bernoulli closed-form deflection v(x), slope θ(x) and
bending moment M(x) for a single point load P at x = a, then spreads the
result over a 2D grid through the depth of the beam so the bending stress
σ = −M·y/I can be shaded cell by cell.

SUPPORTED CASES:
----------------
Cantilever fixed at x = 0, load at a:

    x ≤ a:  v = P·x²·(3a − x) / (6EI)
            θ = P·x·(2a − x) / (2EI)
            M = −P·(x − a)
    x > a:  v = v(a) + θ(a)·(x − a)   (straight, unloaded tip)
            θ = θ(a),  M = 0

Simply supported on 0 and L, b = L − a:

    x ≤ a:  v = P·b·x·(L² − b² − x²) / (6LEI)
            M = −P·b·x / L
    x > a:  mirrored, measured from the right support

SIGN CONVENTIONS:
-----------------
- y is up, measured from the neutral axis (−h/2 … +h/2)
- P is signed: negative = downward
- M is sagging-positive (M = EI·v''), so a downward load on a simply
  supported beam gives M > 0, compression on the top fiber (σ < 0) and
  tension on the bottom fiber; a cantilever root hogs (M < 0) and its
  top fiber is in tension.
- Positive σ = tension.

The displaced node positions use the plane-section assumption:
    u = −y·θ   (horizontal),   y_def = y + v·scale
Only the plotted coordinates are scaled; M and σ use the undeformed y.

Overhanging beams have no closed form here: the mesh is returned
undeformed with zero stress and closed_form=False.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .config import CONFIG
from .loads import clamp
from .model import BeamConfig
from .section import section_properties

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSample:
    """One node of the stress mesh."""
    x: float            # undeformed position along the beam (m)
    y: float            # offset from the neutral axis (m)
    deflection: float   # v(x) (m, up positive)
    slope: float        # θ(x) (rad)
    moment: float       # M(x) (N·m, sagging positive)
    stress: float       # σ = −M·y/I (Pa, tension positive)
    x_def: float        # displaced x for plotting (scaled)
    y_def: float        # displaced y for plotting (scaled)


@dataclass(frozen=True)
class MeshCell:
    """Quadrilateral cell: corners counter-clockwise from bottom-left."""
    i: int
    j: int
    nodes: Tuple[FieldSample, FieldSample, FieldSample, FieldSample]
    avg_stress: float


@dataclass(frozen=True)
class BeamStats:
    max_stress: float       # max |σ| over all nodes (Pa)
    max_deflection: float   # max |v| over all nodes (m, unscaled)


@dataclass
class BeamMesh:
    """
    Node arrays have shape (nx+1, ny+1); cell_stress has shape (nx, ny).
    Index i runs along the beam, j through the depth (bottom to top).
    """
    x: np.ndarray
    y: np.ndarray
    deflection: np.ndarray
    slope: np.ndarray
    moment: np.ndarray
    stress: np.ndarray
    x_def: np.ndarray
    y_def: np.ndarray
    cell_stress: np.ndarray
    closed_form: bool = True

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cell_stress.shape

    def sample(self, i: int, j: int) -> FieldSample:
        return FieldSample(
            x=float(self.x[i, j]),
            y=float(self.y[i, j]),
            deflection=float(self.deflection[i, j]),
            slope=float(self.slope[i, j]),
            moment=float(self.moment[i, j]),
            stress=float(self.stress[i, j]),
            x_def=float(self.x_def[i, j]),
            y_def=float(self.y_def[i, j]),
        )

    def cells(self) -> List[MeshCell]:
        nx, ny = self.shape
        cells = []
        for i in range(nx):
            for j in range(ny):
                corners = (
                    self.sample(i, j),
                    self.sample(i + 1, j),
                    self.sample(i + 1, j + 1),
                    self.sample(i, j + 1),
                )
                cells.append(MeshCell(i=i, j=j, nodes=corners,
                                      avg_stress=float(self.cell_stress[i, j])))
        return cells


def closed_form_fields(
    support: str,
    L: float,
    P: float,
    a: float,
    EI: float,
    xs: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    v(x), θ(x), M(x) for a single point load.

    Parameters:
    -----------
    support : 'cantilever' or 'simply_supported'
    L : float
        Beam length (m)
    P : float
        Signed point load (N), negative = downward
    a : float
        Load position (m), expected in [0, L]
    EI : float
        Flexural rigidity (N·m²)
    xs : np.ndarray
        Stations (m)

    Returns:
    --------
    v, theta, M : np.ndarray
        Same shape as xs
    """
    x = np.asarray(xs, dtype=float)
    left = x <= a

    if support == 'cantilever':
        v_a = P * a**3 / (3 * EI)
        theta_a = P * a**2 / (2 * EI)
        v = np.where(left, P * x**2 * (3 * a - x) / (6 * EI), v_a + theta_a * (x - a))
        theta = np.where(left, P * x * (2 * a - x) / (2 * EI), theta_a)
        M = np.where(left, -P * (x - a), 0.0)
        return v, theta, M

    if support == 'simply_supported':
        b = L - a
        xr = L - x
        k = P / (6 * L * EI)
        v = np.where(
            left,
            k * b * x * (L**2 - b**2 - x**2),
            k * a * xr * (L**2 - a**2 - xr**2),
        )
        theta = np.where(
            left,
            k * b * (L**2 - b**2 - 3 * x**2),
            -k * a * (L**2 - a**2 - 3 * xr**2),
        )
        M = np.where(left, -P * b * x / L, -P * a * xr / L)
        return v, theta, M

    raise ValueError(f"No closed-form field for support type {support!r}")


def compute_beam_mesh(
    config: BeamConfig,
    mesh_density_x: Optional[int] = None,
    mesh_density_y: Optional[int] = None,
    deformation_scale: Optional[float] = None,
) -> BeamMesh:
    """
    Build the deformed, stress-colored mesh for the base point load.

    Parameters:
    -----------
    config : BeamConfig
        Only length, support, section, material, force and
        load_position are read; the explicit load list is not.
    mesh_density_x, mesh_density_y : int, optional
        Number of cells along the beam and through the depth
    deformation_scale : float, optional
        Exaggeration applied to the plotted displacements only

    Returns:
    --------
    BeamMesh
    """
    nx = max(1, int(mesh_density_x or CONFIG.mesh_density_x))
    ny = max(1, int(mesh_density_y or CONFIG.mesh_density_y))
    scale = CONFIG.deformation_scale if deformation_scale is None else deformation_scale

    L = config.length
    h = config.height
    I = section_properties(config.section).I
    EI = config.material.E * I
    a = clamp(config.load_position, 0.0, L)

    xs = np.linspace(0.0, L, nx + 1)
    ys = np.linspace(-h / 2.0, h / 2.0, ny + 1)
    X, Y = np.meshgrid(xs, ys, indexing='ij')

    closed_form = config.support in ('cantilever', 'simply_supported')
    if closed_form:
        v_1d, theta_1d, M_1d = closed_form_fields(config.support, L, config.force, a, EI, xs)
    else:
        logger.warning("No closed-form field for %r beams; returning an unloaded mesh",
                       config.support)
        v_1d = theta_1d = M_1d = np.zeros_like(xs)

    v = np.broadcast_to(v_1d[:, None], X.shape).copy()
    theta = np.broadcast_to(theta_1d[:, None], X.shape).copy()
    M = np.broadcast_to(M_1d[:, None], X.shape).copy()

    stress = -M * Y / I
    u = -Y * theta
    x_def = X + u * scale
    y_def = Y + v * scale

    cell_stress = 0.25 * (
        stress[:-1, :-1] + stress[1:, :-1] + stress[1:, 1:] + stress[:-1, 1:]
    )

    return BeamMesh(
        x=X, y=Y,
        deflection=v, slope=theta, moment=M, stress=stress,
        x_def=x_def, y_def=y_def,
        cell_stress=cell_stress,
        closed_form=closed_form,
    )


def mesh_stats(mesh: BeamMesh) -> BeamStats:
    """Global extrema of a mesh: max |σ| and max |v|."""
    return BeamStats(
        max_stress=float(np.max(np.abs(mesh.stress))),
        max_deflection=float(np.max(np.abs(mesh.deflection))),
    )
