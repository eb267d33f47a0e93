"""
Edit layer: a sparse overlay of user changes on top of a generated character.

Edits never mutate the character; `apply_edits` returns a new one. The stat
budget is only reported (`is_stat_budget_valid`), never enforced.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Optional

from .errors import InvalidInputError
from .socionics import build_element_affinity_for_element
from .stats import apply_overrides, clamp_stats
from .types import ABILITY_SLOTS, STAT_NAMES, Character, CharacterEdits, StatBlock

logger = logging.getLogger(__name__)

STAT_BUDGET_TOLERANCE = 4

EMPTY_CHARACTER_EDITS = CharacterEdits()


def is_stat_budget_valid(
    original: StatBlock,
    edited: StatBlock,
    tolerance: int = STAT_BUDGET_TOLERANCE,
) -> bool:
    """True when the edited total stays within `tolerance` of the original total."""
    return abs(edited.total() - original.total()) <= tolerance


def _edit_stats(character: Character, stat_edits: Dict[str, Optional[int]]) -> Character:
    for stat in stat_edits:
        if stat not in STAT_NAMES:
            raise InvalidInputError(f"Unknown stat in edits: {stat!r}", field="edits.stats")
    # None keeps the generated value for that axis.
    values = {k: int(v) for k, v in stat_edits.items() if v is not None}
    if not values:
        return character
    stats = clamp_stats(apply_overrides(character.stats, values))
    merged = dict(character.stat_breakdown.overrides or {})
    merged.update(values)
    breakdown = replace(character.stat_breakdown, overrides=merged)
    return replace(character, stats=stats, stat_breakdown=breakdown)


def apply_edits(character: Character, edits: CharacterEdits) -> Character:
    """Return a new character with the edits applied on top of `character`.

    The result owns its lists and dicts; nothing is shared with `character`.
    """
    if edits.is_empty():
        return character

    result = Character.from_dict(character.to_dict())
    if edits.stats:
        result = _edit_stats(result, edits.stats)

    if edits.class_name is not None:
        result = replace(result, archetype=replace(result.archetype, class_name=edits.class_name))

    if edits.ability_names:
        for slot in edits.ability_names:
            if slot not in ABILITY_SLOTS:
                raise InvalidInputError(f"Unknown ability slot in edits: {slot!r}", field="edits.ability_names")
        abilities = [
            replace(a, name=edits.ability_names[a.slot])
            if edits.ability_names.get(a.slot) is not None
            else a
            for a in result.abilities
        ]
        result = replace(result, abilities=abilities)

    if edits.element is not None:
        # Quadra, club and the club passive follow the element.
        result = replace(result, element=build_element_affinity_for_element(edits.element))

    if edits.combat_orientation is not None:
        result = replace(
            result,
            combat_behavior=replace(result.combat_behavior, combat_orientation=edits.combat_orientation),
        )

    logger.debug("applied edits to %s: %s", character.name, edits.to_dict())
    return result
