"""
MBTI (Beebe model) tables and the ability kit builder.

Each type's stack assigns eight cognitive functions to eight roles. The first
four roles (hero, parent, child, inferior) become abilities. The last four
(nemesis, critic, trickster, demon) are the same functions with their
attitude flipped and stay descriptive only.

Ability power is not stored; it is derived from the character's stats:

    power = base_power + floor(min(stat, MAX_STAT) * base_power / MAX_STAT)

so a stat of 0 gives base_power and MAX_STAT gives twice base_power.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .errors import InvalidInputError
from .types import (
    ABILITY_SLOTS,
    COGNITIVE_FUNCTIONS,
    MAX_STAT,
    MBTI_TYPES,
    Ability,
    AbilityOverrides,
    StatBlock,
)

# --- Stacks ------------------------------------------------------------------

FUNCTION_STACKS: Dict[str, Tuple[str, str, str, str]] = {
    "INTJ": ("Ni", "Te", "Fi", "Se"),
    "INTP": ("Ti", "Ne", "Si", "Fe"),
    "ENTJ": ("Te", "Ni", "Se", "Fi"),
    "ENTP": ("Ne", "Ti", "Fe", "Si"),
    "INFJ": ("Ni", "Fe", "Ti", "Se"),
    "INFP": ("Fi", "Ne", "Si", "Te"),
    "ENFJ": ("Fe", "Ni", "Se", "Ti"),
    "ENFP": ("Ne", "Fi", "Te", "Si"),
    "ISTJ": ("Si", "Te", "Fi", "Ne"),
    "ISFJ": ("Si", "Fe", "Ti", "Ne"),
    "ESTJ": ("Te", "Si", "Ne", "Fi"),
    "ESFJ": ("Fe", "Si", "Ne", "Ti"),
    "ISTP": ("Ti", "Se", "Ni", "Fe"),
    "ISFP": ("Fi", "Se", "Ni", "Te"),
    "ESTP": ("Se", "Ti", "Fe", "Ni"),
    "ESFP": ("Se", "Fi", "Te", "Ni"),
}

STACK_ROLES: Tuple[str, ...] = (
    "hero", "parent", "child", "inferior",
    "nemesis", "critic", "trickster", "demon",
)

SLOT_BASE_POWER: Dict[str, int] = {
    "hero": 12,
    "parent": 8,
    "child": 6,
    "inferior": 4,
}

# Used when MBTI is off and no manual functions were picked.
DEFAULT_ABILITY_FUNCTIONS: Tuple[str, str, str, str] = ("Fe", "Ti", "Se", "Ni")

# --- Functions ---------------------------------------------------------------

FUNCTION_SCALING_STAT: Dict[str, str] = {
    "Ti": "intelligence",
    "Te": "intelligence",
    "Fi": "spirit",
    "Fe": "spirit",
    "Si": "vitality",
    "Se": "vitality",
    "Ni": "willpower",
    "Ne": "willpower",
}

FUNCTION_NAMES: Dict[str, str] = {
    "Ti": "Introverted Thinking",
    "Te": "Extraverted Thinking",
    "Fi": "Introverted Feeling",
    "Fe": "Extraverted Feeling",
    "Si": "Introverted Sensing",
    "Se": "Extraverted Sensing",
    "Ni": "Introverted Intuition",
    "Ne": "Extraverted Intuition",
}

FUNCTION_ESSENCE: Dict[str, str] = {
    "Ti": "Builds an internal framework and tests everything against it.",
    "Te": "Organizes people and resources toward a measurable result.",
    "Fi": "Weighs choices against a private set of values.",
    "Fe": "Reads the room and keeps the group in tune.",
    "Si": "Draws on remembered detail and proven routine.",
    "Se": "Acts on what is happening right now.",
    "Ni": "Follows a single thread toward where things are heading.",
    "Ne": "Spins out possibilities and connections.",
}

ATTITUDE_FLIP: Dict[str, str] = {
    "Ti": "Te", "Te": "Ti",
    "Fi": "Fe", "Fe": "Fi",
    "Si": "Se", "Se": "Si",
    "Ni": "Ne", "Ne": "Ni",
}

TAG_GLOSSARY: Dict[str, str] = {
    "damage": "Deals direct damage.",
    "single-target": "Hits exactly one target.",
    "aoe": "Affects every target in an area.",
    "buff": "Raises stats or grants a beneficial effect.",
    "debuff": "Lowers an enemy's stats or applies a harmful effect.",
    "heal": "Restores health.",
    "defensive": "Reduces or blocks incoming damage.",
    "utility": "Changes the battlefield rather than dealing damage.",
    "chaotic": "Strong but unpredictable; results vary from use to use.",
    "reactive": "Triggers in response to a condition, often when in danger.",
    "self": "Affects only the user.",
}

# function -> slot -> (name, description, tags)
ABILITY_TEMPLATES: Dict[str, Dict[str, Tuple[str, str, Tuple[str, ...]]]] = {
    "Ti": {
        "hero": ("Axiom Strike", "A precise blow aimed at the flaw in the enemy's defense.", ("damage", "single-target")),
        "parent": ("Structural Analysis", "Maps the target's weak points, lowering its defense.", ("debuff", "utility")),
        "child": ("Logic Bomb", "An overclever trap that sometimes catches friends as well as foes.", ("damage", "chaotic", "aoe")),
        "inferior": ("Clarity Surge", "When cornered, thinking snaps into focus and raises intelligence.", ("buff", "reactive", "self")),
    },
    "Te": {
        "hero": ("Execute Command", "A decisive strike delivered exactly on schedule.", ("damage", "single-target")),
        "parent": ("Battle Plan", "Lays out the fight so the party acts with purpose.", ("buff", "utility")),
        "child": ("Overwork", "Pushes past limits for big damage at a cost to the user.", ("damage", "chaotic", "self")),
        "inferior": ("Rally Order", "A sharp command that steadies allies when things go wrong.", ("buff", "reactive", "aoe")),
    },
    "Fi": {
        "hero": ("Conviction", "Hardens resolve around personal values, raising defense.", ("buff", "self", "defensive")),
        "parent": ("Empathic Shield", "Shields an ally the user believes in.", ("defensive", "utility")),
        "child": ("Passion Flare", "A burst of feeling that lands hard or not at all.", ("damage", "chaotic")),
        "inferior": ("Inner Truth", "Recovers health by holding on to what matters.", ("heal", "reactive", "self")),
    },
    "Fe": {
        "hero": ("Inspire", "Lifts the whole party's spirit at once.", ("buff", "aoe")),
        "parent": ("Harmonize", "Smooths the group's wounds and tempers.", ("heal", "utility")),
        "child": ("Emotional Surge", "A wave of shared feeling with unpredictable strength.", ("buff", "chaotic", "aoe")),
        "inferior": ("Desperate Bond", "Pours everything into an ally who is about to fall.", ("heal", "reactive")),
    },
    "Si": {
        "hero": ("Fortify", "Braces using every lesson the body remembers.", ("defensive", "self", "buff")),
        "parent": ("Recall", "Returns to a known-good state and recovers health.", ("heal", "utility", "self")),
        "child": ("Déjà Vu", "Senses a repeated attack a moment early, sometimes.", ("defensive", "chaotic", "reactive")),
        "inferior": ("Muscle Memory", "Trained reflexes block a hit without thinking.", ("defensive", "reactive")),
    },
    "Se": {
        "hero": ("Impact", "A heavy hit thrown at exactly the right moment.", ("damage", "single-target")),
        "parent": ("Quick Reflex", "Slips an incoming attack.", ("defensive", "reactive")),
        "child": ("Wild Swing", "A big, loose swing that hits whatever is close.", ("damage", "chaotic", "aoe")),
        "inferior": ("Adrenaline Rush", "Hurt badly enough, the body fights back on its own.", ("damage", "reactive", "self")),
    },
    "Ni": {
        "hero": ("Foresight", "Strikes where the enemy is about to be.", ("damage", "single-target")),
        "parent": ("Premonition", "Foresees the enemy's plan and blunts it.", ("debuff", "utility")),
        "child": ("Vision Flash", "A sudden glimpse that lands as a painful blow.", ("damage", "chaotic")),
        "inferior": ("Moment of Clarity", "In danger, the whole picture arrives at once.", ("buff", "reactive", "self")),
    },
    "Ne": {
        "hero": ("Brainstorm", "A storm of ideas made solid, striking everything nearby.", ("damage", "aoe")),
        "parent": ("Lateral Thinking", "Finds an unexpected angle for the party.", ("buff", "utility")),
        "child": ("Chaos Theory", "Sets off a chain of unlikely events across the field.", ("damage", "chaotic", "aoe")),
        "inferior": ("Eureka", "A last-second idea turns the fight around.", ("buff", "reactive", "self")),
    },
}


# --- Lookups -----------------------------------------------------------------


def _require_mbti(mbti_type: str) -> str:
    if mbti_type not in MBTI_TYPES:
        raise InvalidInputError(f"Unknown MBTI type: {mbti_type!r}", field="mbti")
    return mbti_type


def _require_function(fn: str, field: str = "cognitive_function") -> str:
    if fn not in COGNITIVE_FUNCTIONS:
        raise InvalidInputError(f"Unknown cognitive function: {fn!r}", field=field)
    return fn


def _require_slot(slot: str) -> str:
    if slot not in ABILITY_SLOTS:
        raise InvalidInputError(f"Unknown ability slot: {slot!r}", field="slot")
    return slot


def function_stack(mbti_type: str) -> Tuple[str, str, str, str]:
    """Hero, parent, child and inferior functions of a type."""
    return FUNCTION_STACKS[_require_mbti(mbti_type)]


def full_function_stack(mbti_type: str) -> List[Tuple[str, str]]:
    """All eight (role, function) pairs; shadow roles flip the first four."""
    primary = function_stack(mbti_type)
    shadow = tuple(ATTITUDE_FLIP[fn] for fn in primary)
    return list(zip(STACK_ROLES, primary + shadow))


def get_function_name(fn: str) -> str:
    return FUNCTION_NAMES[_require_function(fn)]


def get_function_essence(fn: str) -> str:
    return FUNCTION_ESSENCE[_require_function(fn)]


def get_ability_name(fn: str, slot: str) -> str:
    return ABILITY_TEMPLATES[_require_function(fn)][_require_slot(slot)][0]


def tag_description(tag: str) -> str:
    return TAG_GLOSSARY[tag]


# --- Builders ----------------------------------------------------------------


def build_ability(fn: str, slot: str) -> Ability:
    """Ability for one function in one slot."""
    name, description, tags = ABILITY_TEMPLATES[_require_function(fn)][_require_slot(slot)]
    return Ability(
        slot=slot,
        name=name,
        description=description,
        cognitive_function=fn,
        base_power=SLOT_BASE_POWER[slot],
        scaling_stat=FUNCTION_SCALING_STAT[fn],
        tags=tags,
    )


def build_ability_kit_from_functions(functions: Sequence[str]) -> List[Ability]:
    """Four abilities from four functions given in slot order."""
    if len(functions) != len(ABILITY_SLOTS):
        raise InvalidInputError(
            f"Need exactly {len(ABILITY_SLOTS)} functions, got {list(functions)!r}", field="abilities"
        )
    return [build_ability(fn, slot) for fn, slot in zip(functions, ABILITY_SLOTS)]


def build_ability_kit(mbti_type: str) -> List[Ability]:
    """The four-ability kit for an MBTI type, in slot order."""
    return build_ability_kit_from_functions(function_stack(mbti_type))


def build_ability_kit_for_overrides(overrides: Optional[AbilityOverrides]) -> List[Ability]:
    """Kit used when MBTI is off: manual picks, else the default functions."""
    if overrides is None:
        return build_ability_kit_from_functions(DEFAULT_ABILITY_FUNCTIONS)
    return build_ability_kit_from_functions([overrides.for_slot(slot) for slot in ABILITY_SLOTS])


def ability_power(ability: Ability, stats: StatBlock) -> int:
    """Displayed power of an ability for a stat block."""
    stat_value = max(0, min(MAX_STAT, stats.get(ability.scaling_stat)))
    return ability.base_power + (stat_value * ability.base_power) // MAX_STAT
