# File: tests/test_cases.py
"""
Test cases.py: independent design cases and the comparison table.
"""

from dataclasses import replace

import numpy as np
import pandas as pd
import pytest

from beamsim.cases import (
    add_case,
    compare_cases,
    find_case,
    new_case,
    remove_case,
    update_case,
)
from beamsim.catalog import DEFAULT_BEAM


def test_add_case_clones_last():
    cases = (new_case(case_id='a'),)
    cases = add_case(cases, case_id='b')

    assert [c.case_id for c in cases] == ['a', 'b']
    assert cases[1].name == "Case 2"
    assert cases[1].config == cases[0].config


def test_add_case_from_named_source():
    cases = (new_case(case_id='a'),
             new_case(name="Long", config=replace(DEFAULT_BEAM, length=12.0), case_id='b'))
    cases = add_case(cases, source_id='a', case_id='c')
    assert find_case(cases, 'c').config.length == DEFAULT_BEAM.length


def test_add_case_to_empty_list():
    cases = add_case((), case_id='first')
    assert len(cases) == 1
    assert cases[0].name == "Design Case 1"


def test_last_case_is_never_removed():
    cases = (new_case(case_id='only'),)
    assert remove_case(cases, 'only') == cases

    cases = add_case(cases, case_id='two')
    assert [c.case_id for c in remove_case(cases, 'only')] == ['two']


def test_update_does_not_touch_other_cases():
    cases = add_case((new_case(case_id='a'),), case_id='b')
    updated = update_case(cases, 'b', replace(DEFAULT_BEAM, force=-10000.0))

    assert find_case(updated, 'a').config.force == DEFAULT_BEAM.force
    assert find_case(updated, 'b').config.force == -10000.0
    # the original tuple is unchanged
    assert find_case(cases, 'b').config.force == DEFAULT_BEAM.force


def test_find_missing_case():
    with pytest.raises(KeyError):
        find_case((new_case(case_id='a'),), 'zzz')
    with pytest.raises(KeyError):
        update_case((new_case(case_id='a'),), 'zzz', DEFAULT_BEAM)


def test_compare_cases_table():
    cases = (
        new_case(name="Simply supported", case_id='ss'),
        new_case(name="Cantilever",
                 config=replace(DEFAULT_BEAM, support='cantilever', load_position=8.0),
                 case_id='cant'),
    )
    df = compare_cases(cases, mesh_density_x=40, mesh_density_y=4)

    assert isinstance(df, pd.DataFrame)
    assert list(df['case_id']) == ['ss', 'cant']
    for col in ('max_stress', 'max_deflection', 'safety_factor', 'deflection_ratio',
                'deflection_ok', 'max_moment', 'Ra', 'Rb', 'Ma', 'degenerate'):
        assert col in df.columns

    ss = df.set_index('case_id').loc['ss']
    cant = df.set_index('case_id').loc['cant']
    assert np.isclose(ss['Ra'], 25000.0)
    assert np.isclose(cant['Ma'], 400000.0)
    assert cant['max_stress'] > ss['max_stress']
