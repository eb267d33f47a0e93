"""
Expanded Instincts tables and the combat behavior builder.

Nine realms sit in three centers (SUR, INT, PUR). Each realm carries one
value from each of the three triads:

- experiential (how abilities activate),
- movement (how the character positions),
- source (where resources regenerate from).

The center picks the combat orientation and every triad value grants one
passive.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .errors import InvalidInputError
from .types import INSTINCT_CENTERS, INSTINCT_REALMS, CombatBehavior, PassiveTrait

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RealmSpec:
    realm: str
    name: str
    center: str
    experiential: str
    movement: str
    source: str


REALMS: Dict[str, RealmSpec] = {
    # SUR
    "FD": RealmSpec("FD", "Fortitude", "SUR", "Immersing", "Directing", "Externalizing"),
    "SY": RealmSpec("SY", "Security", "SUR", "Distinguishing", "Escaping", "Internalizing"),
    "SM": RealmSpec("SM", "Self-Management", "SUR", "Memorializing", "Aligning", "Exchanging"),
    # INT
    "AY": RealmSpec("AY", "Alchemy", "INT", "Immersing", "Escaping", "Exchanging"),
    "CY": RealmSpec("CY", "Community", "INT", "Distinguishing", "Aligning", "Externalizing"),
    "BG": RealmSpec("BG", "Bonding", "INT", "Memorializing", "Directing", "Internalizing"),
    # PUR
    "SS": RealmSpec("SS", "Self-Significance", "PUR", "Immersing", "Aligning", "Internalizing"),
    "EX": RealmSpec("EX", "Existentialism", "PUR", "Distinguishing", "Directing", "Exchanging"),
    "UN": RealmSpec("UN", "Unknown", "PUR", "Memorializing", "Escaping", "Externalizing"),
}

CENTER_NAMES: Dict[str, str] = {
    "SUR": "Self-Survival",
    "INT": "Interpersonal",
    "PUR": "Purpose",
}

CENTER_ORIENTATIONS: Dict[str, str] = {
    "SUR": "Frontline",
    "INT": "Support",
    "PUR": "Strategist",
}

# --- Triad passives ----------------------------------------------------------

EXPERIENTIAL_PASSIVES: Dict[str, PassiveTrait] = {
    "Memorializing": PassiveTrait(
        name="Afterimage",
        description="Ability effects linger for extra ticks after they end.",
        source="Experiential triad (Memorializing)",
    ),
    "Immersing": PassiveTrait(
        name="Flow State",
        description="Back-to-back ability uses build momentum and power.",
        source="Experiential triad (Immersing)",
    ),
    "Distinguishing": PassiveTrait(
        name="Precision Timing",
        description="Abilities have a critical window that deals bonus damage.",
        source="Experiential triad (Distinguishing)",
    ),
}

MOVEMENT_PASSIVES: Dict[str, PassiveTrait] = {
    "Escaping": PassiveTrait(
        name="Evasive",
        description="Gains dodge chance and can reposition after taking damage.",
        source="Movement triad (Escaping)",
    ),
    "Aligning": PassiveTrait(
        name="Adaptive Stance",
        description="Positioning shifts on its own to follow the fight.",
        source="Movement triad (Aligning)",
    ),
    "Directing": PassiveTrait(
        name="Aggressive Advance",
        description="Closes distance after attacking and keeps enemies under pressure.",
        source="Movement triad (Directing)",
    ),
}

SOURCE_PASSIVES: Dict[str, PassiveTrait] = {
    "Internalizing": PassiveTrait(
        name="Inner Reserve",
        description="Resources regenerate slowly over time, in or out of combat.",
        source="Source triad (Internalizing)",
    ),
    "Externalizing": PassiveTrait(
        name="Siphon",
        description="Resources regenerate when dealing damage.",
        source="Source triad (Externalizing)",
    ),
    "Exchanging": PassiveTrait(
        name="Equilibrium",
        description="Resources regenerate from both dealing and taking damage.",
        source="Source triad (Exchanging)",
    ),
}

TRIAD_DESCRIPTIONS: Dict[str, Dict[str, str]] = {
    "experiential": {
        "Memorializing": "Abilities leave echoes; effects outlast their base duration and pressure stacks up.",
        "Immersing": "Casting in a row builds flow; each use powers up the next.",
        "Distinguishing": "Timing windows; a well-timed hit bursts, a missed one fizzles.",
    },
    "movement": {
        "Escaping": "Evasive and reactive; dodges more and repositions after being hit.",
        "Aligning": "Adaptive; positioning follows the flow of combat.",
        "Directing": "Relentless; closes distance after each attack.",
    },
    "source": {
        "Internalizing": "Passive regeneration that ignores what happens in the fight.",
        "Externalizing": "Fueled by damage dealt; rewards aggression.",
        "Exchanging": "Fueled both ways; gains from dealing and from receiving damage.",
    },
}

DEFAULT_REALM = "SM"
DEFAULT_ORIENTATION = "Balanced"

FIX_POSITION_LABELS: Tuple[str, str] = ("2nd fix", "3rd fix")


# --- Lookups -----------------------------------------------------------------


def _require_realm(realm: str, field: str = "instincts.realm") -> str:
    if realm not in INSTINCT_REALMS:
        raise InvalidInputError(f"Unknown instinct realm: {realm!r}", field=field)
    return realm


def get_realm(realm: str) -> RealmSpec:
    return REALMS[_require_realm(realm)]


def get_realm_name(realm: str) -> str:
    return get_realm(realm).name


def realm_center(realm: str) -> str:
    return get_realm(realm).center


def realms_by_center(center: str) -> List[str]:
    """Realms of a center, in table order."""
    if center not in INSTINCT_CENTERS:
        raise InvalidInputError(f"Unknown instinct center: {center!r}", field="instincts.center")
    return [r for r in INSTINCT_REALMS if REALMS[r].center == center]


def get_triad_description(category: str, value: str) -> str:
    return TRIAD_DESCRIPTIONS.get(category, {}).get(value, "")


def realm_passives(realm: str) -> List[PassiveTrait]:
    """One passive per triad: experiential, movement, source."""
    spec = get_realm(realm)
    return [
        EXPERIENTIAL_PASSIVES[spec.experiential],
        MOVEMENT_PASSIVES[spec.movement],
        SOURCE_PASSIVES[spec.source],
    ]


def validate_tritype(tritype: Sequence[str], core: Optional[str] = None) -> Tuple[str, str, str]:
    """Check that a realm tritype takes one realm from each of SUR, INT and PUR."""
    if len(tritype) != 3:
        raise InvalidInputError(f"Realm tritype needs exactly three realms, got {list(tritype)!r}", field="instincts.tritype")
    for realm in tritype:
        _require_realm(realm, field="instincts.tritype")
    if core is not None and tritype[0] != core:
        raise InvalidInputError(
            f"Realm tritype {'-'.join(tritype)} must start with the core realm {core}", field="instincts.tritype"
        )
    centers = {REALMS[r].center for r in tritype}
    if len(centers) != len(INSTINCT_CENTERS):
        raise InvalidInputError(
            f"Realm tritype {'-'.join(tritype)} must take one realm from each center (SUR, INT, PUR)",
            field="instincts.tritype",
        )
    return (tritype[0], tritype[1], tritype[2])


# --- Builders ----------------------------------------------------------------


def build_combat_behavior(realm: str) -> CombatBehavior:
    spec = get_realm(realm)
    return CombatBehavior(
        realm=spec.realm,
        center=spec.center,
        combat_orientation=CENTER_ORIENTATIONS[spec.center],
        activation_style=spec.experiential,
        positioning=spec.movement,
        regen_source=spec.source,
        passives=realm_passives(realm),
    )


def build_tritype_combat_behavior(core: str, tritype: Sequence[str]) -> CombatBehavior:
    """Core realm behavior plus the passives of the 2nd and 3rd fix realms.

    Triads stay those of the core. Fix passives whose name is already present
    are dropped, so the core's copy wins.
    """
    fixes = validate_tritype(tritype, core=core)
    behavior = build_combat_behavior(core)

    passives = list(behavior.passives)
    seen: Set[str] = {p.name for p in passives}
    for label, fix in zip(FIX_POSITION_LABELS, fixes[1:]):
        for passive in realm_passives(fix):
            if passive.name in seen:
                continue
            seen.add(passive.name)
            passives.append(passive.with_source(f"{label} ({fix}) - {passive.source}"))

    logger.debug("realm tritype %s: %d passives", "-".join(fixes), len(passives))
    return CombatBehavior(
        realm=behavior.realm,
        center=behavior.center,
        combat_orientation=behavior.combat_orientation,
        activation_style=behavior.activation_style,
        positioning=behavior.positioning,
        regen_source=behavior.regen_source,
        passives=passives,
    )


def build_default_combat_behavior(orientation: Optional[str] = None) -> CombatBehavior:
    """Neutral behavior used when instincts are off; no passives."""
    spec = REALMS[DEFAULT_REALM]
    return CombatBehavior(
        realm=spec.realm,
        center=spec.center,
        combat_orientation=orientation or DEFAULT_ORIENTATION,
        activation_style=spec.experiential,
        positioning=spec.movement,
        regen_source=spec.source,
        passives=[],
    )
