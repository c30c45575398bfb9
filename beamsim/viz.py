"""
VISUALIZATION: QUICK-LOOK PLOTS
===============================

Static matplotlib figures of analysis results, for demos and reports:

- plot_diagrams:     V(x) and M(x) sweep with the exact segment polynomials
- plot_stress_mesh:  deformed beam mesh, cells colored by average stress
- plot_bearing:      ball positions colored by contact stress

Each function saves a PNG when a path is given and returns the Figure.
"""

import os
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import PolyCollection
from matplotlib.patches import Circle

from .bearing import BearingElement
from .diagrams import DiagramData
from .fields import BeamMesh
from .piecewise import PiecewiseSegment

COLORS = {
    'shear': '#3B82F6',       # blue
    'moment': '#A855F7',      # purple
    'exact': '#2C3E50',       # dark blue-gray
    'boundary': '#BDC3C7',    # silver gray
    'outline': '#2C3E50',
    'background': '#FAFAFA',
}


def _save(fig, path: Optional[str]):
    if path:
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        fig.savefig(path, dpi=150, bbox_inches='tight', facecolor=COLORS['background'])


def plot_diagrams(
    diagrams: DiagramData,
    segments: Optional[Sequence[PiecewiseSegment]] = None,
    path: Optional[str] = None,
    title: str = "Shear and moment",
):
    """
    Two stacked axes: V(x) on top, M(x) below.

    When segments are given, each segment's exact polynomial is drawn
    over the numerical sweep and segment boundaries are marked.
    """
    fig, (ax_v, ax_m) = plt.subplots(2, 1, figsize=(10, 6), sharex=True)
    fig.patch.set_facecolor(COLORS['background'])

    ax_v.fill_between(diagrams.xs, diagrams.V, color=COLORS['shear'], alpha=0.25)
    ax_v.plot(diagrams.xs, diagrams.V, color=COLORS['shear'], lw=1.5, label='sweep')
    ax_m.fill_between(diagrams.xs, diagrams.M, color=COLORS['moment'], alpha=0.25)
    ax_m.plot(diagrams.xs, diagrams.M, color=COLORS['moment'], lw=1.5, label='sweep')

    for seg in segments or ():
        xs = np.linspace(seg.x_start, seg.x_end, 30)
        ax_v.plot(xs, seg.shear(xs), color=COLORS['exact'], lw=0.8, ls='--')
        ax_m.plot(xs, seg.moment(xs), color=COLORS['exact'], lw=0.8, ls='--')
        for ax in (ax_v, ax_m):
            ax.axvline(seg.x_start, color=COLORS['boundary'], lw=0.6)

    ax_v.set_ylabel('V (N)')
    ax_m.set_ylabel('M (N·m)')
    ax_m.set_xlabel('x (m)')
    ax_v.set_title(title)
    for ax in (ax_v, ax_m):
        ax.axhline(0.0, color=COLORS['outline'], lw=0.6)
        ax.grid(True, alpha=0.3)

    _save(fig, path)
    return fig


def plot_stress_mesh(
    mesh: BeamMesh,
    path: Optional[str] = None,
    title: str = "Bending stress",
    cmap: str = 'coolwarm',
):
    """Deformed mesh, flat-shaded by per-cell average stress."""
    nx, ny = mesh.shape
    polys = []
    for i in range(nx):
        for j in range(ny):
            corners = [(i, j), (i + 1, j), (i + 1, j + 1), (i, j + 1)]
            polys.append([(mesh.x_def[a, b], mesh.y_def[a, b]) for a, b in corners])

    fig, ax = plt.subplots(figsize=(12, 3))
    fig.patch.set_facecolor(COLORS['background'])
    limit = float(np.max(np.abs(mesh.cell_stress))) or 1.0
    coll = PolyCollection(polys, array=mesh.cell_stress.ravel(), cmap=cmap,
                          edgecolors='none')
    coll.set_clim(-limit, limit)
    ax.add_collection(coll)
    ax.autoscale_view()
    ax.set_aspect('auto')
    ax.set_xlabel('x (m)')
    ax.set_title(title)
    fig.colorbar(coll, ax=ax, label='σ (Pa)')

    _save(fig, path)
    return fig


def plot_bearing(
    elements: Sequence[BearingElement],
    path: Optional[str] = None,
    title: str = "Ball loads",
    cmap: str = 'inferno',
):
    """Balls on the pitch circle, colored by contact stress."""
    fig, ax = plt.subplots(figsize=(6, 6))
    fig.patch.set_facecolor(COLORS['background'])
    peak = max((e.max_stress for e in elements), default=0.0) or 1.0
    colormap = plt.get_cmap(cmap)
    extent = 0.0
    for e in elements:
        ax.add_patch(Circle((e.x, e.y), e.radius, facecolor=colormap(e.max_stress / peak),
                            edgecolor=COLORS['outline'], lw=0.8))
        extent = max(extent, np.hypot(e.x, e.y) + e.radius)
    ax.annotate('', xy=(0, -0.5 * extent), xytext=(0, 0),
                arrowprops=dict(arrowstyle='->', color=COLORS['outline'], lw=2))
    ax.set_xlim(-1.1 * extent, 1.1 * extent)
    ax.set_ylim(-1.1 * extent, 1.1 * extent)
    ax.set_aspect('equal')
    ax.set_title(title)

    _save(fig, path)
    return fig
