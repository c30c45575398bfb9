import matplotlib.pyplot as plt

from beamsim import analyze_beam
from beamsim.catalog import DEFAULT_BEAM
from beamsim.viz import plot_stress_mesh


def main():
    """
    VISUAL DEMONSTRATION OF SIMPLY SUPPORTED BEAM
    =============================================
    8 m steel beam, 200 x 500 mm, 50 kN at midspan. Prints the reactions
    and peak values next to the textbook numbers, then draws the
    deformed stress mesh so you can SEE the beam bending.
    """

    # ========================================================================
    # SETUP: the application's default case
    # ========================================================================
    config = DEFAULT_BEAM
    L = config.length
    P = -config.force  # downward magnitude

    result = analyze_beam(config, mesh_density_x=40, mesh_density_y=8,
                          deformation_scale=200.0)
    I = result.section.I
    E = config.material.E

    # ========================================================================
    # PRINT RESULTS
    # ========================================================================
    print("Simply Supported Beam - Midspan Point Load")
    print("=" * 50)
    print(f"Left reaction (N): {result.reactions.ra:.2f}")
    print(f"Right reaction (N): {result.reactions.rb:.2f}")
    print(f"Max moment (N·m): {result.diagrams.max_abs_M:.2f}")
    print(f"Max stress (MPa): {result.stats.max_stress / 1e6:.3f}")
    print(f"Max deflection (m): {result.stats.max_deflection:.6f}")
    print(f"Safety factor: {result.safety_factor:.2f}")
    print(f"L/δ: {result.deflection.ratio:.0f} ({'OK' if result.deflection.passes else 'FAIL'})")
    print()
    print("Expected (from textbook):")
    print(f"Reactions: {P/2:.2f} N each (each support takes half)")
    print(f"Max moment: {P * L / 4:.2f} N·m")
    print(f"Max stress: {P * L / 4 * (config.height / 2) / I / 1e6:.3f} MPa")
    print(f"Max deflection: {P * L**3 / (48 * E * I):.6f} m")
    print()
    print("Segments:")
    for seg in result.segments:
        print(f"  [{seg.x_start:.2f}, {seg.x_end:.2f})  V(x) = {seg.shear_text}")
        print(f"  {'':14}  M(x) = {seg.moment_text}")

    # ========================================================================
    # DRAW THE PICTURE
    # ========================================================================
    # Blue cells: compression (top), red cells: tension (bottom)
    # Displacements are exaggerated 200× so you can see the sag
    plot_stress_mesh(result.mesh, title="Simply Supported Beam - Midspan Point Load")
    plt.show()


if __name__ == "__main__":
    main()
