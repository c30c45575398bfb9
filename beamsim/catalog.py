"""
CATALOG: MATERIALS, SECTIONS AND DEFAULT CASES
==============================================

A small library of named materials and section presets, so demos and
tests can write `MATERIALS['steel']` instead of repeating E = 200e9,
σy = 250e6 everywhere.

The DEFAULT_BEAM and DEFAULT_BEARING records are the configuration a
fresh design case starts from:

    L = 8 m simply supported, 200 × 500 mm rectangle, steel,
    P = −50 kN at midspan; overhang supports at 1 m and 7 m.
    Bearing: 100 / 60 mm races, 12 balls, 5 kN radial.
"""

from .model import BeamConfig, BearingConfig, Material, SectionDescriptor


MATERIALS = {
    'steel': Material(
        name="Structural steel",
        E=200e9,             # Pa
        yield_strength=250e6,
        density=7850.0,
    ),
    'aluminium': Material(
        name="Aluminium 6061-T6",
        E=69e9,
        yield_strength=276e6,
        density=2700.0,
    ),
    'timber': Material(
        name="Douglas Fir",
        E=12e9,
        yield_strength=40e6,  # bending strength used as the "yield" limit
        density=550.0,
    ),
}

DEFAULT_MATERIAL = MATERIALS['steel']


SECTIONS = {
    # Solid rectangles (b x h)
    'rect_200x500': SectionDescriptor(shape='rectangular', height=0.5, width=0.2),
    'rect_100x300': SectionDescriptor(shape='rectangular', height=0.3, width=0.1),
    # Solid round bar, height = diameter
    'round_300': SectionDescriptor(shape='circular', height=0.3),
    # Built-up I sections
    'ibeam_500': SectionDescriptor(
        shape='ibeam', height=0.5, flange_width=0.3,
        flange_thickness=0.02, web_thickness=0.015,
    ),
    'ibeam_300': SectionDescriptor(
        shape='ibeam', height=0.3, flange_width=0.15,
        flange_thickness=0.0107, web_thickness=0.0071,
    ),
}

DEFAULT_SECTION = SECTIONS['rect_200x500']


DEFAULT_BEAM = BeamConfig(
    length=8.0,
    support='simply_supported',
    section=DEFAULT_SECTION,
    material=DEFAULT_MATERIAL,
    force=-50000.0,
    load_position=4.0,
    support_a=1.0,
    support_b=7.0,
    loads=(),
)

DEFAULT_BEARING = BearingConfig(
    outer_radius=100.0,
    inner_radius=60.0,
    ball_count=12,
    radial_load=5000.0,
)
