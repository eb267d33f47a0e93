"""Stat composition.

The final stat block is built in a fixed order:
- base values (from the Attitudinal Psyche stack, or DEFAULT_STATS),
- archetype multipliers (missing axes count as 1.0), rounded half up,
- manual overrides, taken verbatim,
- clamping of every axis to [0, MAX_STAT].

StatBreakdown keeps each stage so `compose_stats(breakdown...)` reproduces
the displayed numbers.
"""
from __future__ import annotations

import math
from typing import Dict, Mapping, Optional

from .types import MAX_STAT, STAT_NAMES, StatBlock, StatBreakdown, StatusEffect

DEFAULT_BASE_VALUE = 8
DEFAULT_STATS = StatBlock(
    willpower=DEFAULT_BASE_VALUE,
    intelligence=DEFAULT_BASE_VALUE,
    spirit=DEFAULT_BASE_VALUE,
    vitality=DEFAULT_BASE_VALUE,
)
DEFAULT_BASE_SOURCE = "Default"

STAT_LABELS: Dict[str, str] = {
    "willpower": "Willpower",
    "intelligence": "Intelligence",
    "spirit": "Spirit",
    "vitality": "Vitality",
}
STAT_SHORT_LABELS: Dict[str, str] = {
    "willpower": "WIL",
    "intelligence": "INT",
    "spirit": "SPR",
    "vitality": "VIT",
}


def _clamp(x: int, lo: int = 0, hi: int = MAX_STAT) -> int:
    return max(lo, min(hi, x))


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def apply_multipliers(base: StatBlock, multipliers: Mapping[str, float]) -> StatBlock:
    """Multiply each axis by its multiplier and round. Not clamped."""
    return StatBlock(
        **{s: _round_half_up(base.get(s) * float(multipliers.get(s, 1.0))) for s in STAT_NAMES}
    )


def apply_overrides(stats: StatBlock, overrides: Optional[Mapping[str, int]]) -> StatBlock:
    """Replace overridden axes verbatim, keep the rest."""
    if not overrides:
        return stats
    return stats.with_values({k: v for k, v in overrides.items() if v is not None})


def clamp_stats(stats: StatBlock) -> StatBlock:
    return StatBlock(**{s: _clamp(stats.get(s)) for s in STAT_NAMES})


def compose_stats(
    base: StatBlock,
    multipliers: Optional[Mapping[str, float]] = None,
    overrides: Optional[Mapping[str, int]] = None,
) -> StatBlock:
    """Compose base, multipliers and overrides into a final clamped StatBlock."""
    stats = apply_multipliers(base, multipliers or {})
    stats = apply_overrides(stats, overrides)
    return clamp_stats(stats)


def build_stat_breakdown(
    base: StatBlock,
    base_source: str,
    multipliers: Optional[Mapping[str, float]] = None,
    multiplier_source: str = "",
    overrides: Optional[Mapping[str, int]] = None,
) -> StatBreakdown:
    return StatBreakdown(
        base=base,
        base_source=base_source,
        multipliers=dict(multipliers or {}),
        multiplier_source=multiplier_source,
        overrides={k: v for k, v in overrides.items() if v is not None} if overrides is not None else None,
    )


def stats_from_breakdown(breakdown: StatBreakdown) -> StatBlock:
    return compose_stats(breakdown.base, breakdown.multipliers, breakdown.overrides)


def apply_stat_changes(stats: StatBlock, changes: Mapping[str, int]) -> StatBlock:
    """Add flat changes (e.g. from a status effect), clamped."""
    return clamp_stats(
        StatBlock(**{s: stats.get(s) + int(changes.get(s, 0)) for s in STAT_NAMES})
    )


def apply_status_effect(stats: StatBlock, effect: StatusEffect) -> StatBlock:
    return apply_stat_changes(stats, effect.stat_changes)
