# beamsim/section.py
"""
CROSS-SECTION PROPERTIES
========================

Second moment of area (I) and area (A) for the three section shapes the
engine understands:

    rectangular          circular            I-beam
    ┌──────┐              ╭──╮              ┌──────────┐  ← flange (tf)
    │      │ h           │    │ d           └───┐  ┌───┘
    │      │              ╰──╯                  │  │      ← web (tw)
    └──────┘                                ┌───┘  └───┐
       b                                    └──────────┘
                                                 B

    Rectangular:  I = b·h³/12           A = b·h
    Circular:     I = π·d⁴/64           A = π·(d/2)²
    I-beam:       I = (B·H³ − b·h³)/12  with h = H − 2·tf, b = B − tw
                  (outer box minus the two side cut-outs)

DEGENERATE I-BEAMS:
-------------------
While a user drags the flange thickness slider, the cut-out can become
empty (H ≤ 2·tf) or the web can become wider than the flange. The
calculator then treats the section as a solid rectangle B × H instead of
returning a negative or NaN inertia.
"""

import logging
from dataclasses import dataclass

import numpy as np

from .model import SectionDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionProperties:
    I: float     # m⁴
    area: float  # m²


def section_properties(section: SectionDescriptor) -> SectionProperties:
    """
    Compute (I, area) for a section descriptor.

    Parameters:
    -----------
    section : SectionDescriptor
        Shape tag plus dimensions (m)

    Returns:
    --------
    SectionProperties
        I about the horizontal neutral axis, and cross-sectional area

    Raises:
    -------
    ValueError
        If the shape tag is unknown
    """
    H = section.height

    if section.shape == 'rectangular':
        b = section.width
        return SectionProperties(I=b * H**3 / 12.0, area=b * H)

    if section.shape == 'circular':
        d = H
        return SectionProperties(I=np.pi * d**4 / 64.0, area=np.pi * (d / 2.0)**2)

    if section.shape == 'ibeam':
        B = section.flange_width
        tf = section.flange_thickness
        tw = section.web_thickness
        inner_h = H - 2.0 * tf
        inner_b = B - tw

        if inner_h > 0 and inner_b > 0:
            I = (B * H**3 - inner_b * inner_h**3) / 12.0
            area = 2.0 * B * tf + tw * inner_h
            return SectionProperties(I=I, area=area)

        logger.warning(
            "I-beam cut-out is empty (inner_h=%.4g, inner_b=%.4g); using solid %gx%g box",
            inner_h, inner_b, B, H,
        )
        return SectionProperties(I=B * H**3 / 12.0, area=B * H)

    raise ValueError(f"Unknown section shape: {section.shape!r}")


def section_modulus(section: SectionDescriptor) -> float:
    """Elastic section modulus S = I / (h/2)."""
    props = section_properties(section)
    return props.I / (section.height / 2.0)
