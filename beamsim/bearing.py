# beamsim/bearing.py
"""
RADIAL BALL BEARING: LOAD DISTRIBUTION AND CONTACT STRESS
=========================================================

Distributes a radial load over the balls of a single-row bearing with
Stribeck's approximation and attaches an approximate Hertzian contact
stress to each ball.

GEOMETRY:
---------
    pitch radius  = (outer + inner) / 2
    ball radius   = (outer − inner) / 2      (races touching the balls)
    ball i sits at θ_i = 2π·i / Z, counted counter-clockwise from +x

The radial load vector points straight down (θ = 3π/2). Only balls
within 90° of it carry load (the 180° load zone):

    Q_max = 5·Fr / Z                       (zero-clearance Stribeck factor)
    Q(ψ)  = Q_max·cos(ψ)^1.5  for ψ < π/2, else 0

CALIBRATED APPROXIMATIONS:
--------------------------
The stress and deformation below are scaled for relative comparison and
coloring, NOT certified Hertz contact values:

    σ ≈ 50·√(Q / D)          (D = ball diameter)
    δ ≈ 0.001·Q^(2/3)

The constants live in CONFIG (stribeck_factor, hertz_stress_scale,
hertz_deformation_scale) so a caller can recalibrate them.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .config import CONFIG
from .model import BearingConfig

LOAD_VECTOR_ANGLE = 3.0 * math.pi / 2.0

# cos ψ at or below this is the load-zone boundary: no load
LOAD_ZONE_EPS = 1e-12


@dataclass(frozen=True)
class BearingElement:
    angle: float        # ball center angle θ (rad)
    load: float         # Q (N)
    max_stress: float   # approximate contact stress
    deformation: float  # approximate compression
    x: float            # ball center on the pitch circle
    y: float
    radius: float       # ball radius


@dataclass
class BallStressField:
    """Interior points of one ball with an interpolated stress value."""
    x: np.ndarray
    y: np.ndarray
    stress: np.ndarray

    def __len__(self) -> int:
        return len(self.x)


def angular_distance(theta: float, reference: float = LOAD_VECTOR_ANGLE) -> float:
    """Smallest angle between theta and reference, in [0, π]."""
    return abs(math.remainder(theta - reference, 2.0 * math.pi))


def max_ball_load(config: BearingConfig, stribeck_factor: Optional[float] = None) -> float:
    """Q_max = factor·Fr / Z (Z clamped to at least 1)."""
    factor = CONFIG.stribeck_factor if stribeck_factor is None else stribeck_factor
    return config.radial_load * factor / max(1, int(config.ball_count))


def distribute_bearing_load(config: BearingConfig) -> List[BearingElement]:
    """
    One BearingElement per ball, in angular order starting at θ = 0.

    Parameters:
    -----------
    config : BearingConfig
        outer_radius > inner_radius > 0, ball_count ≥ 1, radial_load ≥ 0

    Returns:
    --------
    List[BearingElement]
    """
    pitch_radius = (config.outer_radius + config.inner_radius) / 2.0
    ball_diameter = config.outer_radius - config.inner_radius
    ball_radius = ball_diameter / 2.0
    q_max = max_ball_load(config)

    elements = []
    count = max(1, int(config.ball_count))
    for i in range(count):
        theta = 2.0 * math.pi * i / count
        psi = angular_distance(theta)

        cos_psi = math.cos(psi)
        load = q_max * cos_psi ** 1.5 if cos_psi > LOAD_ZONE_EPS else 0.0

        if load > 0 and ball_diameter > 0:
            stress = CONFIG.hertz_stress_scale * math.sqrt(load / ball_diameter)
            deformation = CONFIG.hertz_deformation_scale * load ** (2.0 / 3.0)
        else:
            stress = 0.0
            deformation = 0.0

        elements.append(BearingElement(
            angle=theta,
            load=load,
            max_stress=stress,
            deformation=deformation,
            x=pitch_radius * math.cos(theta),
            y=pitch_radius * math.sin(theta),
            radius=ball_radius,
        ))
    return elements


def generate_ball_mesh(
    element: BearingElement,
    resolution: Optional[int] = None,
) -> BallStressField:
    """
    Point cloud inside one ball, stress peaking at the two contact poles.

    Rings of radius r/resolution·R hold 6r points (one point at the
    center). The poles sit on the line through the bearing center, at
    ±R from the ball center; local stress decays as
    exp(−k·d/R) with d the distance to the nearer pole.

    Rendering aid only; nothing here feeds back into the load model.
    """
    resolution = max(1, int(resolution or CONFIG.ball_mesh_resolution))
    cx, cy, R = element.x, element.y, element.radius

    px, py = [], []
    for r in range(resolution + 1):
        dist = r / resolution * R
        ring_count = 1 if r == 0 else 6 * r
        angles = 2.0 * np.pi * np.arange(ring_count) / ring_count
        px.append(cx + dist * np.cos(angles))
        py.append(cy + dist * np.sin(angles))
    px = np.concatenate(px)
    py = np.concatenate(py)

    ux, uy = math.cos(element.angle), math.sin(element.angle)
    d1 = np.hypot(px - (cx + R * ux), py - (cy + R * uy))
    d2 = np.hypot(px - (cx - R * ux), py - (cy - R * uy))
    nearest = np.minimum(d1, d2)

    if R > 0:
        stress = element.max_stress * np.exp(-CONFIG.ball_stress_decay * nearest / R)
    else:
        stress = np.full_like(px, element.max_stress)
    return BallStressField(x=px, y=py, stress=stress)
