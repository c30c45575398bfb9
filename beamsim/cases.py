# Independent design cases and side-by-side comparison
"""
DESIGN CASES
============

A user usually keeps several variants of a beam open at once ("Design
Case 1", "Case 2", ...) and compares them. A case is an immutable
(id, name, config) record; every operation returns a new tuple of cases
and leaves the others untouched, so there is no way for an edit to one
case to leak into another.

compare_cases() evaluates every case through the memoized analyze_beam()
and collects the headline numbers into a DataFrame, one row per case.
"""

import logging
import uuid
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

import pandas as pd

from .analysis import analyze_beam
from .catalog import DEFAULT_BEAM
from .model import BeamConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DesignCase:
    case_id: str
    name: str
    config: BeamConfig


def new_case(
    name: str = "Design Case 1",
    config: BeamConfig = DEFAULT_BEAM,
    case_id: Optional[str] = None,
) -> DesignCase:
    return DesignCase(case_id=case_id or uuid.uuid4().hex[:8], name=name, config=config)


def find_case(cases: Sequence[DesignCase], case_id: str) -> DesignCase:
    for case in cases:
        if case.case_id == case_id:
            return case
    raise KeyError(case_id)


def add_case(
    cases: Sequence[DesignCase],
    source_id: Optional[str] = None,
    case_id: Optional[str] = None,
) -> Tuple[DesignCase, ...]:
    """
    Append a clone of an existing case (the last one by default),
    named "Case N" where N is the new case count.
    """
    if source_id is not None:
        source = find_case(cases, source_id)
    elif cases:
        source = cases[-1]
    else:
        return (new_case(case_id=case_id),)
    clone = new_case(name=f"Case {len(cases) + 1}", config=source.config, case_id=case_id)
    return tuple(cases) + (clone,)


def remove_case(cases: Sequence[DesignCase], case_id: str) -> Tuple[DesignCase, ...]:
    """Remove a case; the last remaining case is never removed."""
    if len(cases) <= 1:
        logger.info("Refusing to remove the last design case")
        return tuple(cases)
    return tuple(c for c in cases if c.case_id != case_id)


def update_case(
    cases: Sequence[DesignCase],
    case_id: str,
    config: BeamConfig,
) -> Tuple[DesignCase, ...]:
    """Replace one case's configuration."""
    find_case(cases, case_id)
    return tuple(replace(c, config=config) if c.case_id == case_id else c for c in cases)


def compare_cases(cases: Sequence[DesignCase], **discretization) -> pd.DataFrame:
    """
    Evaluate every case and tabulate the results.

    Parameters:
    -----------
    cases : sequence of DesignCase
    **discretization
        Forwarded to analyze_beam (mesh_density_x, mesh_density_y,
        deformation_scale, diagram_samples)

    Returns:
    --------
    pd.DataFrame
        One row per case, columns:
        - case_id, name, support, length
        - max_stress (Pa), max_deflection (m)
        - safety_factor, deflection_ratio, deflection_ok
        - max_moment (N·m, from the diagram sweep)
        - Ra, Rb, Ma (reactions)
        - degenerate
    """
    rows = []
    for case in cases:
        result = analyze_beam(case.config, **discretization)
        rows.append({
            'case_id': case.case_id,
            'name': case.name,
            'support': case.config.support,
            'length': case.config.length,
            'max_stress': result.stats.max_stress,
            'max_deflection': result.stats.max_deflection,
            'safety_factor': result.safety_factor,
            'deflection_ratio': result.deflection.ratio,
            'deflection_ok': result.deflection.passes,
            'max_moment': result.diagrams.max_abs_M,
            'Ra': result.reactions.ra,
            'Rb': result.reactions.rb,
            'Ma': result.reactions.ma,
            'degenerate': result.degenerate,
        })
    return pd.DataFrame(rows)
