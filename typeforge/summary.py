"""
Rule-based, deterministic text built from a generated character.

- generate_character_summary: one sentence per active system.
- generate_system_insights: up to four cross-system observations.
- build_backstory_context: the plain-text character sheet handed to the
  optional backstory client.

All phrasing is template-based; nothing here calls out to a model.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .enneagram import get_center
from .mbti import ability_power
from .stats import STAT_LABELS
from .types import STAT_NAMES, Character, StatBlock

MAX_INSIGHTS = 4

SLOT_LABELS = {
    "hero": "Hero",
    "parent": "Parent",
    "child": "Child",
    "inferior": "Inferior",
}

AGGRESSIVE_CLASSES = ("Berserker", "Warlord", "Justicar")
METHODICAL_FUNCTIONS = ("Si", "Ti", "Fi")
SUPPORT_CLASSES = ("Cleric", "Druid", "Bard")
AGGRESSIVE_FUNCTIONS = ("Se", "Te", "Ne")

QUADRA_CLASS_ALIGNMENT = {
    "Beta": ("Berserker", "Warlord"),
    "Alpha": ("Sage", "Bard"),
    "Gamma": ("Sentinel", "Trickster"),
    "Delta": ("Cleric", "Druid"),
}

FRONTLINE_CLASSES = ("Berserker", "Warlord", "Sentinel")
STRATEGIST_CLASSES = ("Sage", "Trickster")

CLUB_CLASS_SYNERGY = {
    "Practical": (("Sentinel", "Warlord"), "Practical Resourceful + {cls}: efficient and relentless, with shorter cooldowns on an already durable kit."),
    "Researcher": (("Sage", "Trickster"), "Researcher Analytical Mind + {cls}: a vulnerability specialist. Debuff first, then punish."),
    "Social": (("Cleric", "Bard"), "Social Grace + {cls}: amplified support, where buffs and heals land harder."),
    "Humanitarian": (("Druid", "Cleric"), "Humanitarian Compassionate Aura + {cls}: a passive sustain engine that heals the party just by standing near it."),
}


def _tritype(character: Character) -> Optional[Tuple[int, ...]]:
    # From the selections; the class name may have been edited.
    enn = character.typology_source.enneagram
    return tuple(enn.tritype) if enn and enn.tritype else None


def _class_matches(class_name: str, targets: Tuple[str, ...]) -> bool:
    # Class names are decorated, e.g. "Fierce Berserker (sx)".
    return any(t in class_name for t in targets)


def _highest_stat(stats: StatBlock) -> Tuple[str, int]:
    best = STAT_NAMES[0]
    for s in STAT_NAMES[1:]:
        if stats.get(s) > stats.get(best):
            best = s
    return best, stats.get(best)


def _lowest_stat(stats: StatBlock) -> Tuple[str, int]:
    worst = STAT_NAMES[0]
    for s in STAT_NAMES[1:]:
        if stats.get(s) < stats.get(worst):
            worst = s
    return worst, stats.get(worst)


# --- Summary -----------------------------------------------------------------


def generate_character_summary(character: Character) -> str:
    systems = set(character.active_systems)
    parts: List[str] = []

    if "attitudinal" in systems:
        stat, value = _highest_stat(character.stat_breakdown.base)
        parts.append(
            f"Your {character.stat_breakdown.base_source} stack puts {STAT_LABELS[stat]} at {value}, "
            "making it your primary resource."
        )

    if "enneagram" in systems:
        first = re.split(r"[.!]", character.archetype.description)[0].strip()
        if first:
            first = first[0].lower() + first[1:]
        class_name = character.archetype.class_name
        article = "an" if class_name[:1].lower() in ("a", "e", "i", "o", "u") else "a"
        parts.append(f"As {article} {class_name}, you {first}.")

    if "mbti" in systems:
        hero = character.ability_for_slot("hero")
        if hero is not None:
            parts.append(f"Your {hero.cognitive_function}-dominant kit means you lead with {hero.name}.")

    if "socionics" in systems:
        parts.append(
            f"{character.element.element} from the {character.element.quadra} quadra shapes your abilities elementally."
        )

    if "instincts" in systems:
        cb = character.combat_behavior
        parts.append(
            f"In combat, you're a {cb.combat_orientation} fighter with {cb.activation_style} activation "
            f"and {cb.positioning} positioning."
        )

    return " ".join(parts)


# --- Insights ----------------------------------------------------------------


def generate_system_insights(character: Character) -> List[str]:
    """Up to four cross-system observations, highest priority first.

    Needs at least two active systems; otherwise returns an empty list.
    """
    systems = set(character.active_systems)
    if len(systems) < 2:
        return []

    has_ap = "attitudinal" in systems
    has_enneagram = "enneagram" in systems
    has_mbti = "mbti" in systems
    has_socionics = "socionics" in systems
    has_instincts = "instincts" in systems

    class_name = character.archetype.class_name
    high_stat, high_value = _highest_stat(character.stat_breakdown.base)
    low_stat, low_value = _lowest_stat(character.stat_breakdown.base)
    hero = character.ability_for_slot("hero")
    inferior = character.ability_for_slot("inferior")

    candidates: List[Tuple[float, str]] = []

    if has_ap and has_mbti and has_socionics and hero and hero.scaling_stat == high_stat:
        candidates.append((
            10,
            f"{STAT_LABELS[high_stat]} is your highest stat ({high_value}), powers your "
            f"{hero.cognitive_function}-Hero {hero.name}, and aligns with your {character.element.club} club: "
            "a triple-layered convergence.",
        ))

    tritype = _tritype(character)
    if has_enneagram and tritype and len({get_center(n) for n in tritype}) == 3:
        candidates.append((
            9.5,
            f"Tritype {'-'.join(str(n) for n in tritype)} covers all three centers (Gut, Heart, Head), "
            "giving full instinctual, emotional and intellectual access.",
        ))

    if has_ap and has_mbti and hero and hero.scaling_stat == high_stat:
        candidates.append((
            9,
            f"Your {character.stat_breakdown.base_source} stack puts {STAT_LABELS[high_stat]} at {high_value}, "
            f"directly amplifying your {hero.cognitive_function}-Hero ability {hero.name}.",
        ))

    if has_enneagram and has_mbti and hero:
        fn = hero.cognitive_function
        if _class_matches(class_name, AGGRESSIVE_CLASSES) and fn in METHODICAL_FUNCTIONS:
            candidates.append((
                8,
                f"{class_name} with a {fn}-dominant kit: a disciplined brawler who channels aggression through precision.",
            ))
        elif _class_matches(class_name, SUPPORT_CLASSES) and fn in AGGRESSIVE_FUNCTIONS:
            candidates.append((
                8,
                f"{class_name} with {fn}-Hero: a support archetype armed with an aggressive primary ability.",
            ))

    if has_ap and has_mbti and inferior and inferior.scaling_stat == low_stat:
        candidates.append((
            7,
            f"{inferior.cognitive_function}-{SLOT_LABELS[inferior.slot]}'s comeback fires from "
            f"{STAT_LABELS[low_stat]} at {low_value}: thin base, big spikes.",
        ))

    if has_enneagram and has_socionics:
        aligned = QUADRA_CLASS_ALIGNMENT.get(character.element.quadra)
        if aligned and _class_matches(class_name, aligned):
            candidates.append((
                6,
                f"{character.element.quadra} {character.element.element} + {class_name}: your element and class "
                "reinforce the same combat identity.",
            ))

    if has_instincts and has_mbti and hero and "single-target" in hero.tags:
        if any(p.name == "Fixation" for p in character.archetype.instinct_passives):
            candidates.append((
                5,
                f"sx Fixation + {hero.cognitive_function}-Hero single-target ability: a boss fight specialist "
                "whose damage ramps on sustained focus.",
            ))

    if has_instincts:
        fix_count = sum(1 for p in character.combat_behavior.passives if "fix" in p.source)
        if fix_count:
            plural = "s" if fix_count > 1 else ""
            candidates.append((
                4.5,
                f"Your instinct tritype adds {fix_count} cross-center passive{plural}, broadening your combat "
                "toolkit beyond your primary center.",
            ))

    if has_instincts and has_enneagram:
        orientation = character.combat_behavior.combat_orientation
        if orientation == "Frontline" and _class_matches(class_name, STRATEGIST_CLASSES):
            candidates.append((
                4,
                f"SUR Frontline + {class_name}: a frontline intellectual whose positioning says charge while the class says plan.",
            ))
        elif orientation == "Strategist" and _class_matches(class_name, FRONTLINE_CLASSES):
            candidates.append((4, f"PUR Strategist + {class_name}: a tactical brawler planning from the front line."))
        elif orientation == "Support" and _class_matches(class_name, FRONTLINE_CLASSES):
            candidates.append((4, f"INT Support + {class_name}: a protective vanguard, aggressive in service of the group."))

    if has_enneagram and tritype:
        candidates.append((
            3.5,
            "Your tritype blends 40% of your 2nd fix and 20% of your 3rd fix stat modifiers into your archetype, "
            "softening your primary type's profile.",
        ))

    if has_socionics and has_enneagram:
        synergy = CLUB_CLASS_SYNERGY.get(character.element.club)
        if synergy and _class_matches(class_name, synergy[0]):
            candidates.append((3, synergy[1].format(cls=class_name)))

    # sorted() is stable, so equal priorities keep insertion order
    candidates = sorted(candidates, key=lambda c: -c[0])
    return [text for _, text in candidates[:MAX_INSIGHTS]]


# --- Backstory context -------------------------------------------------------


def build_backstory_context(character: Character) -> str:
    """Plain-text character sheet used as the backstory prompt payload."""
    arch = character.archetype
    cb = character.combat_behavior
    stats = character.stats
    lines = [
        f"Name: {character.name}",
        f"Title: {character.title}",
        f"Class: {arch.class_name}",
        f"Class Description: {arch.description}",
        "Stats: " + ", ".join(f"{STAT_LABELS[s]} {stats.get(s)}" for s in STAT_NAMES),
        f"Element: {character.element.element} ({character.element.quadra} quadra)",
        f"Combat: {cb.combat_orientation}, {cb.activation_style} activation, {cb.positioning} positioning, "
        f"{cb.regen_source} regen",
        f"Empowered State: {arch.empowered_state.name}. {arch.empowered_state.description}",
        f"Stressed State: {arch.stressed_state.name}. {arch.stressed_state.description}",
    ]
    if arch.instinct_passives:
        lines.append("Archetype Passives: " + "; ".join(f"{p.name}: {p.description}" for p in arch.instinct_passives))
    if character.abilities:
        lines.append("Abilities:")
        for ability in character.abilities:
            power = ability_power(ability, stats)
            lines.append(
                f"{ability.name} ({ability.slot}, {ability.cognitive_function}, power {power}): {ability.description}"
            )
    if cb.passives:
        lines.append("Combat Passives: " + "; ".join(f"{p.name}: {p.description}" for p in cb.passives))
    return "\n".join(lines)
