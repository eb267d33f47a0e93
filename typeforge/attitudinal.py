"""
Attitudinal Psyche tables (cognitive-priority stack).

An AP code orders the four aspects Volition, Logic, Emotion and Physics from
1st to 4th position. Position decides the base value of the stat the aspect
maps to; the 4th position gets the least.

This file is PURE DATA plus small lookup helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from .errors import InvalidInputError
from .types import AP_TYPES, ASPECTS, StatBlock

POSITION_BASE_VALUES = (14, 10, 7, 4)

ASPECT_TO_STAT: Dict[str, str] = {
    "V": "willpower",
    "L": "intelligence",
    "E": "spirit",
    "F": "vitality",
}

ASPECT_LABELS: Dict[str, str] = {
    "V": "Volition",
    "L": "Logic",
    "E": "Emotion",
    "F": "Physics",
}


@dataclass(frozen=True)
class PositionAttitude:
    position: int
    label: str
    orientation: str  # "Result" | "Process"
    self_attitude: str  # "+" | "-"
    others_attitude: str  # "+" | "-"
    description: str


POSITION_ATTITUDES: List[PositionAttitude] = [
    PositionAttitude(
        position=1,
        label="1st",
        orientation="Result",
        self_attitude="+",
        others_attitude="-",
        description="Confident. Acts on this aspect without hesitation and has little patience for other people's way of doing it.",
    ),
    PositionAttitude(
        position=2,
        label="2nd",
        orientation="Process",
        self_attitude="+",
        others_attitude="+",
        description="Flexible. Enjoys working through this aspect and happily helps others with it.",
    ),
    PositionAttitude(
        position=3,
        label="3rd",
        orientation="Process",
        self_attitude="-",
        others_attitude="-",
        description="Insecure. Second-guesses itself here and reads others' input as criticism.",
    ),
    PositionAttitude(
        position=4,
        label="4th",
        orientation="Result",
        self_attitude="-",
        others_attitude="+",
        description="Unbothered. Spends little energy on this aspect and lets others take the lead.",
    ),
]

# Per-aspect flavor at each position: (summary, gameplay hint)
ASPECT_POSITION_FLAVORS: Dict[str, Dict[int, Dict[str, str]]] = {
    "V": {
        1: {"summary": "Commanding will; decides and moves.", "gameplay_hint": "Willpower abilities hit hard and answer to no one."},
        2: {"summary": "Rallying will; sets goals others can share.", "gameplay_hint": "Willpower abilities lift the whole party."},
        3: {"summary": "Shaky will; direction wavers under pressure.", "gameplay_hint": "Willpower abilities swing between great and poor."},
        4: {"summary": "Easygoing will; follows a good lead.", "gameplay_hint": "Willpower abilities are quiet and reactive."},
    },
    "L": {
        1: {"summary": "Authoritative logic; trusts its own analysis.", "gameplay_hint": "Intelligence abilities are exact and self-assured."},
        2: {"summary": "Curious logic; likes to reason things out together.", "gameplay_hint": "Intelligence abilities set up openings for allies."},
        3: {"summary": "Defensive logic; doubts its own conclusions.", "gameplay_hint": "Intelligence abilities are uneven but can spike."},
        4: {"summary": "Relaxed logic; defers to whoever knows best.", "gameplay_hint": "Intelligence abilities are small but cheap."},
    },
    "E": {
        1: {"summary": "Expressive emotion; says what it feels.", "gameplay_hint": "Spirit abilities are strong and self-focused."},
        2: {"summary": "Warm emotion; tuned in to everyone's mood.", "gameplay_hint": "Spirit abilities heal and steady the party."},
        3: {"summary": "Guarded emotion; easily hurt, slow to trust.", "gameplay_hint": "Spirit abilities burst hard with a drawback."},
        4: {"summary": "Light emotion; lets feelings pass.", "gameplay_hint": "Spirit abilities are steady and modest."},
    },
    "F": {
        1: {"summary": "Commanding physicality; takes care of material needs first.", "gameplay_hint": "Vitality abilities are aggressive and self-reliant."},
        2: {"summary": "Generous physicality; looks after others' comfort.", "gameplay_hint": "Vitality abilities keep the party going."},
        3: {"summary": "Uneasy physicality; the body and its needs feel awkward.", "gameplay_hint": "Vitality abilities run hot or cold."},
        4: {"summary": "Indifferent physicality; happy to let others handle it.", "gameplay_hint": "Vitality abilities are passive and low upkeep."},
    },
}


@dataclass(frozen=True)
class StackPosition:
    position: int
    label: str
    aspect: str
    aspect_code: str
    stat: str
    stat_value: int
    attitude: PositionAttitude
    summary: str
    gameplay_hint: str


def is_ap_type(code: str) -> bool:
    return code in AP_TYPES


def _require_ap_type(code: str) -> str:
    if not is_ap_type(code):
        raise InvalidInputError(f"Unknown Attitudinal Psyche type: {code!r}", field="attitudinal")
    return code


def base_stats(ap_type: str) -> StatBlock:
    """Base stats for an AP code: 1st aspect 14, 2nd 10, 3rd 7, 4th 4."""
    _require_ap_type(ap_type)
    values = {ASPECT_TO_STAT[aspect]: POSITION_BASE_VALUES[i] for i, aspect in enumerate(ap_type)}
    return StatBlock.from_dict(values)


def aspect_position(ap_type: str, aspect: str) -> int:
    """1-based position of an aspect within an AP code."""
    _require_ap_type(ap_type)
    if aspect not in ASPECTS:
        raise InvalidInputError(f"Unknown aspect: {aspect!r}", field="aspect")
    return ap_type.index(aspect) + 1


def describe_stack(ap_type: str) -> List[StackPosition]:
    """Per-position breakdown of an AP code, 1st to 4th."""
    _require_ap_type(ap_type)
    out: List[StackPosition] = []
    for i, aspect in enumerate(ap_type):
        flavor = ASPECT_POSITION_FLAVORS[aspect][i + 1]
        out.append(
            StackPosition(
                position=i + 1,
                label=POSITION_ATTITUDES[i].label,
                aspect=ASPECT_LABELS[aspect],
                aspect_code=aspect,
                stat=ASPECT_TO_STAT[aspect],
                stat_value=POSITION_BASE_VALUES[i],
                attitude=POSITION_ATTITUDES[i],
                summary=flavor["summary"],
                gameplay_hint=flavor["gameplay_hint"],
            )
        )
    return out
