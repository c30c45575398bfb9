# File: demos/run_bearing.py
"""
DEMO: RADIAL BALL BEARING LOAD DISTRIBUTION
===========================================

12-ball bearing, 100/60 mm races, 5 kN radial load pointing down.
Prints the load on every ball (Stribeck distribution) and the
calibrated contact stress, then saves a picture of the balls colored
by stress.

The stress and deformation numbers are visualization-calibrated
approximations for comparing balls with each other, not certified
Hertz contact values.
"""

import math
from pathlib import Path

from beamsim import analyze_bearing
from beamsim.bearing import angular_distance, max_ball_load
from beamsim.catalog import DEFAULT_BEARING
from beamsim.viz import plot_bearing

OUTPUT_DIR = Path("artifacts")


def main():
    config = DEFAULT_BEARING
    result = analyze_bearing(config)

    print("Radial Ball Bearing - Stribeck Distribution")
    print("=" * 60)
    print(f"Races: {config.outer_radius:g} / {config.inner_radius:g} mm, "
          f"{config.ball_count} balls, Fr = {config.radial_load:g} N")
    print(f"Q_max = 5·Fr/Z = {max_ball_load(config):.1f} N")
    print()
    print(f"{'ball':>4} {'θ (deg)':>8} {'ψ (deg)':>8} {'Q (N)':>10} {'σ':>10} {'δ':>8}")
    for i, e in enumerate(result.elements):
        psi = math.degrees(angular_distance(e.angle))
        print(f"{i:>4} {math.degrees(e.angle):8.1f} {psi:8.1f} {e.load:10.1f} "
              f"{e.max_stress:10.1f} {e.deformation:8.4f}")
    print()
    print(f"Balls in the load zone: {result.loaded_count} of {len(result.elements)}")

    OUTPUT_DIR.mkdir(exist_ok=True)
    path = OUTPUT_DIR / "bearing.png"
    plot_bearing(result.elements, path=str(path))
    print(f"✓ Saved {path}")


if __name__ == "__main__":
    main()
