"""
Character generation.

One pass over a GeneratorInput, one system at a time:

1. Attitudinal Psyche -> base stats (or DEFAULT_STATS)
2. Enneagram -> archetype and stat multipliers (or the Wanderer)
3. MBTI -> four abilities (or manual picks, or the default functions)
4. Socionics -> element affinity (or the unaligned default)
5. Expanded Instincts -> combat behavior (or the balanced default)

The whole input is validated up front, so a bad selection never produces a
half-built character. Disabled systems are never an error.
"""

from __future__ import annotations

import json
import logging
import zlib
from typing import List

from . import attitudinal, enneagram, instincts, mbti, socionics
from .errors import InvalidInputError
from .names import generate_name, generate_title
from .stats import DEFAULT_BASE_SOURCE, DEFAULT_STATS, build_stat_breakdown, stats_from_breakdown
from .types import (
    ABILITY_SLOTS,
    COGNITIVE_FUNCTIONS,
    ELEMENTS,
    STAT_NAMES,
    Ability,
    Archetype,
    Character,
    CombatBehavior,
    ElementAffinity,
    GeneratorInput,
    TypologySource,
)

logger = logging.getLogger(__name__)


# --- Validation --------------------------------------------------------------


def _validate_overrides(gen_input: GeneratorInput) -> None:
    overrides = gen_input.overrides
    if overrides.stats:
        for stat, value in overrides.stats.items():
            if stat not in STAT_NAMES:
                raise InvalidInputError(f"Unknown stat in overrides: {stat!r}", field="overrides.stats")
            if value is not None and not isinstance(value, int):
                raise InvalidInputError(f"Stat override for {stat} must be an integer", field="overrides.stats")
    if overrides.abilities is not None:
        for slot in ABILITY_SLOTS:
            fn = overrides.abilities.for_slot(slot)
            if fn not in COGNITIVE_FUNCTIONS:
                raise InvalidInputError(
                    f"Unknown cognitive function for {slot}: {fn!r}", field="overrides.abilities"
                )
    if overrides.element is not None and overrides.element not in ELEMENTS:
        raise InvalidInputError(f"Unknown element: {overrides.element!r}", field="overrides.element")


def validate_generator_input(gen_input: GeneratorInput) -> None:
    """Raise InvalidInputError if any enabled system or override is malformed."""
    try:
        if gen_input.attitudinal is not None:
            attitudinal.base_stats(gen_input.attitudinal)
        if gen_input.enneagram is not None:
            enneagram.validate_selection(gen_input.enneagram)
        if gen_input.mbti is not None:
            mbti.function_stack(gen_input.mbti)
        if gen_input.socionics is not None:
            socionics.get_socionics_type(gen_input.socionics)
        if gen_input.instincts is not None:
            instincts.get_realm(gen_input.instincts.realm)
            if gen_input.instincts.tritype is not None:
                instincts.validate_tritype(gen_input.instincts.tritype, core=gen_input.instincts.realm)
        _validate_overrides(gen_input)
    except InvalidInputError as exc:
        logger.debug("rejected generator input (%s): %s", exc.field, exc)
        raise


def active_systems(gen_input: GeneratorInput) -> List[str]:
    """Enabled systems, always in the order AP, enneagram, MBTI, socionics, instincts."""
    systems: List[str] = []
    if gen_input.attitudinal:
        systems.append("attitudinal")
    if gen_input.enneagram:
        systems.append("enneagram")
    if gen_input.mbti:
        systems.append("mbti")
    if gen_input.socionics:
        systems.append("socionics")
    if gen_input.instincts:
        systems.append("instincts")
    return systems


# --- Per-system pieces -------------------------------------------------------


def _build_archetype(gen_input: GeneratorInput) -> Archetype:
    if gen_input.enneagram is None:
        return enneagram.build_default_archetype(gen_input.overrides.archetype)
    return enneagram.build_archetype_for_selection(gen_input.enneagram)


def _build_abilities(gen_input: GeneratorInput) -> List[Ability]:
    if gen_input.mbti:
        return mbti.build_ability_kit(gen_input.mbti)
    return mbti.build_ability_kit_for_overrides(gen_input.overrides.abilities)


def _build_element(gen_input: GeneratorInput) -> ElementAffinity:
    if gen_input.socionics:
        return socionics.build_element_affinity(gen_input.socionics)
    return socionics.build_default_element_affinity(gen_input.overrides.element)


def _build_combat_behavior(gen_input: GeneratorInput) -> CombatBehavior:
    selection = gen_input.instincts
    if selection is None:
        return instincts.build_default_combat_behavior(gen_input.overrides.combat_orientation)
    if selection.tritype:
        return instincts.build_tritype_combat_behavior(selection.realm, selection.tritype)
    return instincts.build_combat_behavior(selection.realm)


def name_seed_for(gen_input: GeneratorInput) -> int:
    """The explicit seed, else a stable hash of the selections."""
    if gen_input.seed is not None:
        return gen_input.seed
    payload = json.dumps(gen_input.to_dict(), sort_keys=True, separators=(",", ":"))
    return zlib.crc32(payload.encode("utf-8"))


# --- Entry point -------------------------------------------------------------


def generate_character(gen_input: GeneratorInput) -> Character:
    """Build a full character. Identical input always gives an identical character."""
    validate_generator_input(gen_input)
    systems = active_systems(gen_input)

    base = attitudinal.base_stats(gen_input.attitudinal) if gen_input.attitudinal else DEFAULT_STATS
    archetype = _build_archetype(gen_input)
    multipliers = dict(archetype.stat_modifiers) if gen_input.enneagram else {}

    breakdown = build_stat_breakdown(
        base=base,
        base_source=gen_input.attitudinal or DEFAULT_BASE_SOURCE,
        multipliers=multipliers,
        multiplier_source=archetype.class_name if gen_input.enneagram else "",
        overrides=gen_input.overrides.stats,
    )
    stats = stats_from_breakdown(breakdown)

    abilities = _build_abilities(gen_input)
    element = _build_element(gen_input)
    combat_behavior = _build_combat_behavior(gen_input)

    seed = name_seed_for(gen_input)
    name = generate_name(seed, archetype.class_name, element.element)
    title = generate_title(archetype.class_name, element.element)

    logger.debug("generated %s (%s) from systems=%s", name, title, systems)
    return Character(
        name=name,
        title=title,
        stats=stats,
        stat_breakdown=breakdown,
        archetype=archetype,
        abilities=abilities,
        element=element,
        combat_behavior=combat_behavior,
        active_systems=systems,
        typology_source=TypologySource.from_generator_input(gen_input),
    )
