"""
Enneagram tables and the archetype builder.

The enneagram type decides the character class, its stat multiplier
template and its empowered/stressed states. The wing only adds flavor (a
class-name prefix and a blurb). Instinctual variants add passives, and a
tritype blends the multipliers of three types from the three centers.

Blend weights per tritype position are fixed: core 1.0, 2nd fix 0.4,
3rd fix 0.2. For every stat axis:

    multiplier = 1 + sum(weight_i * (modifier_i - 1))

rounded to two decimals. Axes that end at exactly 1.0 are left out.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .errors import InvalidInputError
from .types import (
    ENNEAGRAM_CENTERS,
    ENNEAGRAM_INSTINCTS,
    ENNEAGRAM_NUMBERS,
    STAT_NAMES,
    Archetype,
    EnneagramSelection,
    PassiveTrait,
    StatBlendStep,
    StatusEffect,
)

logger = logging.getLogger(__name__)

TRITYPE_WEIGHTS: Tuple[float, float, float] = (1.0, 0.4, 0.2)
TRITYPE_POSITION_LABELS: Tuple[str, str, str] = ("Core", "2nd fix", "3rd fix")

EnneagramTypeSpec = Dict[str, Any]

# --- Core types --------------------------------------------------------------

ENNEAGRAM_TYPES: Dict[int, EnneagramTypeSpec] = {
    1: {
        "class_name": "Justicar",
        "description": "Carries a cold sense of judgment into every fight. Each blow is a ruling, and the conviction behind it never cools.",
        "motivation": "Wants to be good, right and true to their ideals.",
        "core_fear": "Being corrupt or fundamentally flawed.",
        "core_desire": "Integrity and moral soundness.",
        "wings": (9, 2),
        "integration_target": 7,
        "disintegration_target": 4,
        "stat_modifiers": {"willpower": 1.15, "intelligence": 1.05},
        "empowered": ("Liberated", "Takes on the lightness of 7 and loosens up.", {"spirit": 3}),
        "stressed": ("Melancholic", "Sinks into the moodiness of 4 and pulls away.", {"spirit": -3}),
    },
    2: {
        "class_name": "Cleric",
        "description": "Mends wounds through devotion and lifts curses through sacrifice. Grows stronger with every ally kept standing.",
        "motivation": "Wants to be loved and needed.",
        "core_fear": "Being unwanted.",
        "core_desire": "To feel loved and appreciated.",
        "wings": (1, 3),
        "integration_target": 4,
        "disintegration_target": 8,
        "stat_modifiers": {"spirit": 1.15, "vitality": 1.05},
        "empowered": ("Self-Aware", "Takes on the honesty of 4 and admits its own needs.", {"intelligence": 3}),
        "stressed": ("Domineering", "Slides into the force of 8 and starts to control.", {"intelligence": -3}),
    },
    3: {
        "class_name": "Warlord",
        "description": "Leads from the front and turns every fight into a campaign. Victory is the only report worth filing.",
        "motivation": "Wants to succeed and be admired.",
        "core_fear": "Being worthless without achievement.",
        "core_desire": "To feel valuable.",
        "wings": (2, 4),
        "integration_target": 6,
        "disintegration_target": 9,
        "stat_modifiers": {"willpower": 1.1, "intelligence": 1.1},
        "empowered": ("Devoted", "Takes on the loyalty of 6 and fights for the group.", {"vitality": 3}),
        "stressed": ("Disengaged", "Drops into the numbness of 9 and goes passive.", {"willpower": -3}),
    },
    4: {
        "class_name": "Bard",
        "description": "Turns longing into song and song into power. Every verse is personal, and the audience always feels it.",
        "motivation": "Wants to find and express a true identity.",
        "core_fear": "Having no identity or significance.",
        "core_desire": "To be uniquely themselves.",
        "wings": (3, 5),
        "integration_target": 1,
        "disintegration_target": 2,
        "stat_modifiers": {"spirit": 1.2},
        "empowered": ("Disciplined", "Takes on the principle of 1 and follows through.", {"willpower": 3}),
        "stressed": ("Dependent", "Falls into the clinging of 2 and seeks rescue.", {"willpower": -3}),
    },
    5: {
        "class_name": "Sage",
        "description": "Watches from a distance until the pattern is clear, then spends knowledge like ammunition.",
        "motivation": "Wants to understand and be capable.",
        "core_fear": "Being helpless or incompetent.",
        "core_desire": "Mastery and understanding.",
        "wings": (4, 6),
        "integration_target": 8,
        "disintegration_target": 7,
        "stat_modifiers": {"intelligence": 1.2},
        "empowered": ("Assertive", "Takes on the confidence of 8 and acts decisively.", {"willpower": 3}),
        "stressed": ("Scattered", "Spins out into the distraction of 7.", {"intelligence": -3}),
    },
    6: {
        "class_name": "Sentinel",
        "description": "Holds the line because someone has to. Has already planned for the worst case and the one after it.",
        "motivation": "Wants security and support.",
        "core_fear": "Being left without support or guidance.",
        "core_desire": "Safety and certainty.",
        "wings": (5, 7),
        "integration_target": 9,
        "disintegration_target": 3,
        "stat_modifiers": {"vitality": 1.15, "willpower": 1.05},
        "empowered": ("Serene", "Takes on the calm of 9 and trusts the moment.", {"spirit": 3}),
        "stressed": ("Performative", "Slips into the image-work of 3 and overcompensates.", {"vitality": -3}),
    },
    7: {
        "class_name": "Trickster",
        "description": "Never fights the same way twice. Boredom is the real enemy, and every battlefield is a playground.",
        "motivation": "Wants freedom and new experiences.",
        "core_fear": "Being trapped in pain or deprivation.",
        "core_desire": "To be satisfied and free.",
        "wings": (6, 8),
        "integration_target": 5,
        "disintegration_target": 1,
        "stat_modifiers": {"spirit": 1.1, "intelligence": 1.1},
        "empowered": ("Focused", "Takes on the depth of 5 and commits to one thing.", {"intelligence": 3}),
        "stressed": ("Rigid", "Hardens into the criticism of 1.", {"spirit": -3}),
    },
    8: {
        "class_name": "Berserker",
        "description": "Meets resistance with more force. Protects what is theirs and breaks whatever stands in the way.",
        "motivation": "Wants to stay in control of their own life.",
        "core_fear": "Being controlled or harmed by others.",
        "core_desire": "To protect themselves and their own.",
        "wings": (7, 9),
        "integration_target": 2,
        "disintegration_target": 5,
        "stat_modifiers": {"willpower": 1.2},
        "empowered": ("Compassionate", "Takes on the care of 2 and fights for others.", {"spirit": 3}),
        "stressed": ("Withdrawn", "Retreats into the isolation of 5.", {"vitality": -3}),
    },
    9: {
        "class_name": "Druid",
        "description": "Keeps the peace between wild things. Endures instead of striking, and the land remembers.",
        "motivation": "Wants inner and outer harmony.",
        "core_fear": "Loss and separation.",
        "core_desire": "Peace of mind.",
        "wings": (8, 1),
        "integration_target": 3,
        "disintegration_target": 6,
        "stat_modifiers": {"vitality": 1.1, "spirit": 1.1},
        "empowered": ("Driven", "Takes on the drive of 3 and gets things done.", {"willpower": 3}),
        "stressed": ("Anxious", "Falls into the worry of 6.", {"spirit": -3}),
    },
}

# --- Wings -------------------------------------------------------------------

WING_LABELS: Dict[int, str] = {
    1: "Principled",
    2: "Compassionate",
    3: "Ambitious",
    4: "Expressive",
    5: "Cerebral",
    6: "Vigilant",
    7: "Chaotic",
    8: "Fierce",
    9: "Serene",
}

WING_FLAVOR: Dict[int, str] = {
    1: "Adds structure and a moral code; every move is checked against it.",
    2: "Adds warmth; power is used to stay close to people.",
    3: "Adds a competitive streak; winning doubles as armor.",
    4: "Adds emotional depth; fighting becomes a kind of art.",
    5: "Adds detachment; knowledge is stockpiled and used with precision.",
    6: "Adds vigilance; every scenario has a backup plan.",
    7: "Adds spontaneity; limits are there to be tested.",
    8: "Adds raw intensity; power is used without apology.",
    9: "Adds calm; fights are won by outlasting, not overpowering.",
}

# --- Instinctual variants ----------------------------------------------------

INSTINCTS: Dict[str, Dict[str, Any]] = {
    "sp": {
        "label": "Guardian",
        "full_name": "Self-Preservation",
        "passive": PassiveTrait(
            name="Fortified",
            description="Regenerates a small amount of health over time.",
            source="Instinctual variant (sp)",
        ),
    },
    "so": {
        "label": "Herald",
        "full_name": "Social",
        "passive": PassiveTrait(
            name="Rally",
            description="Nearby allies gain a minor stat boost while grouped.",
            source="Instinctual variant (so)",
        ),
    },
    "sx": {
        "label": "Intense",
        "full_name": "Sexual",
        "passive": PassiveTrait(
            name="Fixation",
            description="Damage against one target rises with consecutive hits.",
            source="Instinctual variant (sx)",
        ),
    },
}

# --- Tritype fix passives ----------------------------------------------------

FIX_PASSIVES: Dict[int, Tuple[str, str]] = {
    1: ("Exacting Standard", "The first strike of each fight cannot miss."),
    2: ("Devoted Ward", "Heals on allies also grant a small shield."),
    3: ("Momentum", "Each defeated enemy shortens all cooldowns slightly."),
    4: ("Melancholy Muse", "Abilities deal more damage below half health."),
    5: ("Hoarded Insight", "Skipped turns store a charge that empowers the next ability."),
    6: ("Contingency Plan", "The first lethal hit of each fight leaves 1 health instead."),
    7: ("Restless Spark", "Moving before acting grants a brief speed boost."),
    8: ("Iron Grip", "Control effects on this character wear off faster."),
    9: ("Calm Waters", "Incoming damage is slightly reduced on turns without an attack."),
}

# --- Centers -----------------------------------------------------------------

CENTER_TYPES: Dict[str, Tuple[int, int, int]] = {
    "Gut": (8, 9, 1),
    "Heart": (2, 3, 4),
    "Head": (5, 6, 7),
}

_TYPE_TO_CENTER: Dict[int, str] = {t: c for c, types in CENTER_TYPES.items() for t in types}


# --- Lookups -----------------------------------------------------------------


def _require_type(type_number: int, field: str = "enneagram.type") -> int:
    if type_number not in ENNEAGRAM_NUMBERS:
        raise InvalidInputError(f"Unknown enneagram type: {type_number!r}", field=field)
    return type_number


def _require_instinct(instinct: str, field: str = "enneagram.instinct") -> str:
    if instinct not in ENNEAGRAM_INSTINCTS:
        raise InvalidInputError(f"Unknown instinctual variant: {instinct!r}", field=field)
    return instinct


def get_enneagram_type(type_number: int) -> EnneagramTypeSpec:
    return ENNEAGRAM_TYPES[_require_type(type_number)]


def get_wings(type_number: int) -> Tuple[int, int]:
    return ENNEAGRAM_TYPES[_require_type(type_number)]["wings"]


def get_center(type_number: int) -> str:
    return _TYPE_TO_CENTER[_require_type(type_number)]


def get_wing_flavor(wing: int) -> str:
    return WING_FLAVOR[_require_type(wing, field="enneagram.wing")]


def get_instinct_label(instinct: str) -> str:
    return INSTINCTS[_require_instinct(instinct)]["label"]


def get_instinct_full_name(instinct: str) -> str:
    return INSTINCTS[_require_instinct(instinct)]["full_name"]


def _status_effect(spec: Tuple[str, str, Dict[str, int]]) -> StatusEffect:
    name, description, changes = spec
    return StatusEffect(name=name, description=description, stat_changes=dict(changes))


# --- Validation --------------------------------------------------------------


def validate_tritype(tritype: Sequence[int], core: Optional[int] = None) -> Tuple[int, int, int]:
    """Check that a tritype is three known types from Gut, Heart and Head.

    When ``core`` is given, the tritype must start with it.
    """
    if len(tritype) != 3:
        raise InvalidInputError(f"Tritype needs exactly three types, got {list(tritype)!r}", field="enneagram.tritype")
    for t in tritype:
        _require_type(t, field="enneagram.tritype")
    if core is not None and tritype[0] != core:
        raise InvalidInputError(
            f"Tritype {list(tritype)!r} must start with the core type {core}", field="enneagram.tritype"
        )
    centers = {get_center(t) for t in tritype}
    if len(centers) != len(ENNEAGRAM_CENTERS):
        raise InvalidInputError(
            f"Tritype {'-'.join(str(t) for t in tritype)} must take one type from each center (Gut, Heart, Head)",
            field="enneagram.tritype",
        )
    return (tritype[0], tritype[1], tritype[2])


def validate_instinct_stack(instinct: str, stack: Sequence[str]) -> Tuple[str, str, str]:
    if sorted(stack) != sorted(ENNEAGRAM_INSTINCTS) or len(stack) != 3:
        raise InvalidInputError(
            f"Instinct stack must order sp, so and sx exactly once, got {list(stack)!r}",
            field="enneagram.instinct_stack",
        )
    if stack[0] != instinct:
        raise InvalidInputError(
            f"Instinct stack {'/'.join(stack)} must lead with the dominant instinct {instinct}",
            field="enneagram.instinct_stack",
        )
    return (stack[0], stack[1], stack[2])


def validate_selection(selection: EnneagramSelection) -> None:
    """Raise InvalidInputError if an enneagram selection breaks its contract."""
    _require_type(selection.type)
    if selection.wing not in get_wings(selection.type):
        raise InvalidInputError(
            f"Wing {selection.wing} is not adjacent to type {selection.type}", field="enneagram.wing"
        )
    _require_instinct(selection.instinct)
    if selection.instinct_stack is not None:
        validate_instinct_stack(selection.instinct, selection.instinct_stack)
    if selection.tritype is not None:
        tritype = validate_tritype(selection.tritype, core=selection.type)
        if selection.tritype_wings is not None:
            if len(selection.tritype_wings) != 2:
                raise InvalidInputError("Tritype wings need one wing per fix", field="enneagram.tritype_wings")
            for fix, wing in zip(tritype[1:], selection.tritype_wings):
                if wing not in get_wings(fix):
                    raise InvalidInputError(
                        f"Wing {wing} is not adjacent to fix {fix}", field="enneagram.tritype_wings"
                    )
    elif selection.tritype_wings is not None:
        raise InvalidInputError("Tritype wings given without a tritype", field="enneagram.tritype_wings")


# --- Blending ----------------------------------------------------------------


def blend_modifiers(steps: Sequence[StatBlendStep]) -> Dict[str, float]:
    """Weighted composition of blend steps into final per-axis multipliers."""
    result: Dict[str, float] = {}
    for stat in STAT_NAMES:
        value = 1.0 + sum(step.influence * (step.modifiers.get(stat, 1.0) - 1.0) for step in steps)
        value = round(value, 2)
        if value != 1.0:
            result[stat] = value
    return result


def _fix_passive(type_number: int, position: int) -> PassiveTrait:
    name, description = FIX_PASSIVES[type_number]
    return PassiveTrait(
        name=name,
        description=description,
        source=f"Tritype {TRITYPE_POSITION_LABELS[position].lower()} (Type {type_number})",
    )


def _instinct_passives(instinct: str, stack: Optional[Sequence[str]]) -> List[PassiveTrait]:
    passives = [INSTINCTS[instinct]["passive"]]
    if stack:
        for position, variant in ((2, stack[1]), (3, stack[2])):
            base = INSTINCTS[variant]["passive"]
            label = "2nd" if position == 2 else "3rd"
            passives.append(base.with_source(f"{label} instinct ({variant}) - {base.source}"))
    return passives


# --- Archetype builders ------------------------------------------------------


def build_archetype(
    type_number: int,
    wing: int,
    instinct: str,
    instinct_stack: Optional[Sequence[str]] = None,
) -> Archetype:
    """Archetype for a core type, wing and instinct (optionally a full stack)."""
    spec = get_enneagram_type(type_number)
    if wing not in spec["wings"]:
        raise InvalidInputError(f"Wing {wing} is not adjacent to type {type_number}", field="enneagram.wing")
    _require_instinct(instinct)
    if instinct_stack is not None:
        instinct_stack = validate_instinct_stack(instinct, instinct_stack)
    suffix = "/".join(instinct_stack) if instinct_stack else instinct
    core_step = StatBlendStep(
        source=f"Type {type_number} ({spec['class_name']})",
        influence=TRITYPE_WEIGHTS[0],
        modifiers=dict(spec["stat_modifiers"]),
    )
    return Archetype(
        class_name=f"{WING_LABELS[wing]} {spec['class_name']} ({suffix})",
        description=spec["description"],
        enneagram_type=type_number,
        wing=wing,
        stat_modifiers=blend_modifiers([core_step]),
        empowered_state=_status_effect(spec["empowered"]),
        stressed_state=_status_effect(spec["stressed"]),
        wing_flavor=get_wing_flavor(wing),
        instinct_passives=_instinct_passives(instinct, instinct_stack),
        integration_line=f"{type_number} → {spec['integration_target']}",
        disintegration_line=f"{type_number} → {spec['disintegration_target']}",
        stat_blend_chain=[core_step],
    )


def build_tritype_archetype(
    core: int,
    wing: int,
    tritype: Sequence[int],
    tritype_wings: Optional[Sequence[int]] = None,
    instinct: str = "sp",
    instinct_stack: Optional[Sequence[str]] = None,
) -> Archetype:
    """Archetype with tritype blending.

    Produces exactly three blend steps (core, 2nd fix, 3rd fix) and one fix
    passive per contributing type.
    """
    fixes = validate_tritype(tritype, core=core)
    base = build_archetype(core, wing, instinct, instinct_stack)

    steps: List[StatBlendStep] = []
    for position, type_number in enumerate(fixes):
        spec = ENNEAGRAM_TYPES[type_number]
        label = f"Type {type_number}"
        if position > 0 and tritype_wings:
            label = f"Type {type_number}w{tritype_wings[position - 1]}"
        steps.append(
            StatBlendStep(
                source=f"{TRITYPE_POSITION_LABELS[position]}: {label} ({spec['class_name']})",
                influence=TRITYPE_WEIGHTS[position],
                modifiers=dict(spec["stat_modifiers"]),
            )
        )

    logger.debug("tritype %s blended from %d steps", fixes, len(steps))
    return Archetype(
        class_name=f"{base.class_name} [{'-'.join(str(t) for t in fixes)}]",
        description=base.description,
        enneagram_type=base.enneagram_type,
        wing=base.wing,
        stat_modifiers=blend_modifiers(steps),
        empowered_state=base.empowered_state,
        stressed_state=base.stressed_state,
        wing_flavor=base.wing_flavor,
        instinct_passives=list(base.instinct_passives),
        tritype_passives=[_fix_passive(t, i) for i, t in enumerate(fixes)],
        integration_line=base.integration_line,
        disintegration_line=base.disintegration_line,
        stat_blend_chain=steps,
    )


def build_archetype_for_selection(selection: EnneagramSelection) -> Archetype:
    validate_selection(selection)
    if selection.tritype:
        return build_tritype_archetype(
            selection.type,
            selection.wing,
            selection.tritype,
            selection.tritype_wings,
            selection.instinct,
            selection.instinct_stack,
        )
    return build_archetype(selection.type, selection.wing, selection.instinct, selection.instinct_stack)


def build_default_archetype(class_name: Optional[str] = None) -> Archetype:
    """Neutral archetype used when the enneagram system is off."""
    return Archetype(
        class_name=class_name or "Wanderer",
        description="A traveler with no fixed calling.",
        enneagram_type=9,
        wing=1,
        stat_modifiers={},
        empowered_state=StatusEffect(name="Resolved", description="A moment of inner clarity."),
        stressed_state=StatusEffect(name="Lost", description="Overcome by uncertainty."),
    )


def archetype_passive_list(archetype: Archetype) -> List[PassiveTrait]:
    """All passives an archetype carries: instinct passives, then tritype passives."""
    return list(archetype.instinct_passives) + list(archetype.tritype_passives)
