# beamsim/config.py
"""
Engine configuration and defaults.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Global engine configuration."""

    # Beam stress mesh
    mesh_density_x: int = 40
    mesh_density_y: int = 8
    deformation_scale: float = 50.0

    # Shear/moment sweep
    diagram_samples: int = 400

    # Piecewise polynomials
    display_tolerance: float = 0.001   # coefficients at or below are not printed
    segment_tolerance: float = 1e-9    # breakpoints closer than tol*L are merged

    # Serviceability
    deflection_limit_divisor: float = 360.0  # span/360
    min_deflection: float = 1e-4             # floor for the L/δ ratio

    # Bearing model (visualization-calibrated, see bearing.py)
    stribeck_factor: float = 5.0
    hertz_stress_scale: float = 50.0
    hertz_deformation_scale: float = 0.001
    ball_stress_decay: float = 2.0
    ball_mesh_resolution: int = 8

    # Memoization
    cache_size: int = 128


# Global config instance
CONFIG = EngineConfig()
