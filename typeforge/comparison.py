"""
Side-by-side comparison of two characters.

The diff is derived on demand and never stored. Abilities are matched by
cognitive function, not by slot, so two characters that share a function in
different slots still line up.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .enneagram import archetype_passive_list
from .mbti import ability_power
from .types import STAT_NAMES, Ability, Character


@dataclass(frozen=True)
class AbilityComparison:
    cognitive_function: str
    slot_a: Optional[str]
    slot_b: Optional[str]
    name_a: Optional[str]
    name_b: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cognitive_function": self.cognitive_function,
            "slot_a": self.slot_a,
            "slot_b": self.slot_b,
            "name_a": self.name_a,
            "name_b": self.name_b,
        }


@dataclass(frozen=True)
class PassiveDiff:
    shared: List[str] = field(default_factory=list)
    unique_to_a: List[str] = field(default_factory=list)
    unique_to_b: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shared": list(self.shared),
            "unique_to_a": list(self.unique_to_a),
            "unique_to_b": list(self.unique_to_b),
        }


@dataclass(frozen=True)
class CharacterDiff:
    """How character A differs from character B. Positive stat diffs mean A is higher."""

    stat_diff: Dict[str, int]
    ability_comparison_list: List[AbilityComparison]
    shared_function_list: List[str]
    unique_to_a: List[str]
    unique_to_b: List[str]
    ability_power_diff: Dict[str, Tuple[int, int]]  # function -> (power_a, power_b)
    same_element: bool
    same_archetype: bool
    same_orientation: bool
    same_quadra: bool
    same_activation: bool
    same_positioning: bool
    same_regen_source: bool
    passive_diff: PassiveDiff

    def is_identical(self) -> bool:
        return (
            all(v == 0 for v in self.stat_diff.values())
            and not self.unique_to_a
            and not self.unique_to_b
            and all(a == b for a, b in self.ability_power_diff.values())
            and self.same_element
            and self.same_archetype
            and self.same_orientation
            and self.same_quadra
            and self.same_activation
            and self.same_positioning
            and self.same_regen_source
            and not self.passive_diff.unique_to_a
            and not self.passive_diff.unique_to_b
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stat_diff": dict(self.stat_diff),
            "ability_comparison_list": [c.to_dict() for c in self.ability_comparison_list],
            "shared_function_list": list(self.shared_function_list),
            "unique_to_a": list(self.unique_to_a),
            "unique_to_b": list(self.unique_to_b),
            "ability_power_diff": {
                fn: {"power_a": pa, "power_b": pb} for fn, (pa, pb) in self.ability_power_diff.items()
            },
            "same_element": self.same_element,
            "same_archetype": self.same_archetype,
            "same_orientation": self.same_orientation,
            "same_quadra": self.same_quadra,
            "same_activation": self.same_activation,
            "same_positioning": self.same_positioning,
            "same_regen_source": self.same_regen_source,
            "passive_diff": self.passive_diff.to_dict(),
        }


def _abilities_by_function(character: Character) -> Dict[str, Ability]:
    by_fn: Dict[str, Ability] = {}
    for ability in character.abilities:
        by_fn.setdefault(ability.cognitive_function, ability)
    return by_fn


def _passive_names(character: Character) -> List[str]:
    names = [character.element.passive_trait.name]
    names += [p.name for p in archetype_passive_list(character.archetype)]
    names += [p.name for p in character.combat_behavior.passives]
    # keep first occurrence only
    return list(dict.fromkeys(names))


def _passive_diff(a: Character, b: Character) -> PassiveDiff:
    names_a = _passive_names(a)
    names_b = _passive_names(b)
    set_a, set_b = set(names_a), set(names_b)
    return PassiveDiff(
        shared=[n for n in names_a if n in set_b],
        unique_to_a=[n for n in names_a if n not in set_b],
        unique_to_b=[n for n in names_b if n not in set_a],
    )


def compute_character_diff(a: Character, b: Character) -> CharacterDiff:
    stat_diff = {s: a.stats.get(s) - b.stats.get(s) for s in STAT_NAMES}

    by_fn_a = _abilities_by_function(a)
    by_fn_b = _abilities_by_function(b)
    functions = list(by_fn_a) + [fn for fn in by_fn_b if fn not in by_fn_a]

    comparisons: List[AbilityComparison] = []
    shared: List[str] = []
    unique_a: List[str] = []
    unique_b: List[str] = []
    power_diff: Dict[str, Tuple[int, int]] = {}
    for fn in functions:
        ability_a = by_fn_a.get(fn)
        ability_b = by_fn_b.get(fn)
        comparisons.append(
            AbilityComparison(
                cognitive_function=fn,
                slot_a=ability_a.slot if ability_a else None,
                slot_b=ability_b.slot if ability_b else None,
                name_a=ability_a.name if ability_a else None,
                name_b=ability_b.name if ability_b else None,
            )
        )
        if ability_a and ability_b:
            shared.append(fn)
            power_diff[fn] = (ability_power(ability_a, a.stats), ability_power(ability_b, b.stats))
        elif ability_a:
            unique_a.append(fn)
        else:
            unique_b.append(fn)

    combat_a, combat_b = a.combat_behavior, b.combat_behavior
    return CharacterDiff(
        stat_diff=stat_diff,
        ability_comparison_list=comparisons,
        shared_function_list=shared,
        unique_to_a=unique_a,
        unique_to_b=unique_b,
        ability_power_diff=power_diff,
        same_element=a.element.element == b.element.element,
        same_archetype=a.archetype.class_name == b.archetype.class_name,
        same_orientation=combat_a.combat_orientation == combat_b.combat_orientation,
        same_quadra=a.element.quadra == b.element.quadra,
        same_activation=combat_a.activation_style == combat_b.activation_style,
        same_positioning=combat_a.positioning == combat_b.positioning,
        same_regen_source=combat_a.regen_source == combat_b.regen_source,
        passive_diff=_passive_diff(a, b),
    )
