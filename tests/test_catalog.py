# File: tests/test_catalog.py
"""
Test the catalog.py module to verify material and section presets and
the default case records.
"""

import pytest

from beamsim.catalog import (
    DEFAULT_BEAM,
    DEFAULT_BEARING,
    DEFAULT_MATERIAL,
    MATERIALS,
    SECTIONS,
)
from beamsim.model import Material
from beamsim.section import section_properties


def test_material_creation():
    """
    Test that we can create a Material and access its properties.
    """
    mat = Material(name="Test Material", E=10e9, yield_strength=30e6, density=500.0)

    assert mat.name == "Test Material"
    assert mat.E == 10e9
    assert mat.yield_strength == 30e6

    # Check it's frozen (immutable)
    with pytest.raises(Exception):  # dataclass.FrozenInstanceError
        mat.E = 20e9  # Should fail!


def test_materials_are_physical():
    for key, mat in MATERIALS.items():
        assert mat.E > 0, key
        assert mat.yield_strength > 0, key
        assert mat.density > 0, key
    assert DEFAULT_MATERIAL is MATERIALS['steel']
    assert DEFAULT_MATERIAL.E == 200e9
    assert DEFAULT_MATERIAL.yield_strength == 250e6


def test_every_section_preset_has_positive_properties():
    for key, section in SECTIONS.items():
        props = section_properties(section)
        assert props.I > 0, key
        assert props.area > 0, key


def test_default_beam_matches_application_defaults():
    assert DEFAULT_BEAM.length == 8.0
    assert DEFAULT_BEAM.support == 'simply_supported'
    assert DEFAULT_BEAM.height == 0.5
    assert DEFAULT_BEAM.section.width == 0.2
    assert DEFAULT_BEAM.force == -50000.0
    assert DEFAULT_BEAM.load_position == 4.0
    assert (DEFAULT_BEAM.support_a, DEFAULT_BEAM.support_b) == (1.0, 7.0)
    assert DEFAULT_BEAM.loads == ()


def test_default_beam_is_hashable():
    """Configurations key the analysis cache, so they must hash."""
    assert hash(DEFAULT_BEAM) == hash(DEFAULT_BEAM)
    assert {DEFAULT_BEAM: 1}[DEFAULT_BEAM] == 1


def test_default_bearing():
    assert DEFAULT_BEARING.outer_radius == 100.0
    assert DEFAULT_BEARING.inner_radius == 60.0
    assert DEFAULT_BEARING.ball_count == 12
    assert DEFAULT_BEARING.radial_load == 5000.0
