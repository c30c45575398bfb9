# safety factor, serviceability check, reaction and text summaries

from dataclasses import dataclass
from typing import Dict, Optional

from .config import CONFIG
from .fields import BeamStats
from .model import BeamConfig
from .solve import ReactionSet

SUPPORT_LABELS = {
    'cantilever': 'Cantilever',
    'simply_supported': 'Simply supported',
    'overhanging': 'Overhanging',
}


@dataclass(frozen=True)
class DeflectionCheck:
    allowable: float   # L / divisor (m)
    ratio: float       # L / δ
    passes: bool


def safety_factor(yield_strength: float, max_stress: float) -> float:
    """
    σy / max(1, |σmax|).

    The denominator floor of 1 (Pa) only keeps unloaded beams from
    dividing by zero.
    """
    return yield_strength / max(1.0, abs(max_stress))


def deflection_check(
    length: float,
    max_deflection: float,
    divisor: Optional[float] = None,
) -> DeflectionCheck:
    """
    Serviceability check against span/divisor (span/360 by default).

    Returns:
    --------
    DeflectionCheck
        allowable: span/divisor
        ratio: L/δ with δ floored at CONFIG.min_deflection
        passes: δ ≤ allowable
    """
    if divisor is None:
        divisor = CONFIG.deflection_limit_divisor
    allowable = length / divisor
    delta = abs(max_deflection)
    return DeflectionCheck(
        allowable=allowable,
        ratio=length / max(CONFIG.min_deflection, delta),
        passes=delta <= allowable,
    )


def reaction_summary(reactions: ReactionSet) -> Dict[str, float]:
    return {
        'Ra': reactions.ra,
        'Rb': reactions.rb,
        'Ma': reactions.ma,
        'support_a': reactions.support_a,
        'support_b': reactions.support_b,
        'degenerate': reactions.degenerate,
    }


def simulation_summary(name: str, config: BeamConfig, stats: BeamStats) -> str:
    """
    Plain-text description of a case and its results, suitable as
    context for a conversational assistant.
    """
    sf = safety_factor(config.material.yield_strength, stats.max_stress)
    check = deflection_check(config.length, stats.max_deflection)
    lines = [
        f"Case: {name}",
        f"- Beam type: {SUPPORT_LABELS.get(config.support, config.support)}",
        f"- Section: {config.section.shape}",
        f"- Geometry: L={config.length:g} m, H={config.height:g} m",
        f"- Material: E={config.material.E / 1e9:.1f} GPa, "
        f"yield strength={config.material.yield_strength / 1e6:.0f} MPa",
        f"- Load: {config.force:g} N at x={config.load_position:g} m",
        "Results:",
        f"- Max stress: {stats.max_stress / 1e6:.2f} MPa",
        f"- Safety factor: {sf:.2f} (recommended > 1.5)",
        f"- Max deflection: {stats.max_deflection * 1000:.2f} mm",
        f"- Deflection ratio L/d: {check.ratio:.0f} (recommended > "
        f"{CONFIG.deflection_limit_divisor:.0f})",
    ]
    return "\n".join(lines)
