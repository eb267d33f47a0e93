"""
Socionics tables and the element affinity builder.

Every socionics type maps to exactly one element, quadra and club. The club
decides the passive trait. Elements come in pairs per quadra, so an element
alone is enough to recover quadra, club and passive (used by the edit layer).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .errors import InvalidInputError
from .types import ELEMENTS, QUADRAS, SOCIONICS_TYPES, ElementAffinity, PassiveTrait

SocionicsTypeSpec = Dict[str, str]

SOCIONICS_TYPE_DATA: Dict[str, SocionicsTypeSpec] = {
    # Alpha
    "ILE": {"name": "Inventor", "quadra": "Alpha", "club": "Researcher", "element": "Light"},
    "SEI": {"name": "Mediator", "quadra": "Alpha", "club": "Humanitarian", "element": "Nature"},
    "ESE": {"name": "Enthusiast", "quadra": "Alpha", "club": "Humanitarian", "element": "Light"},
    "LII": {"name": "Analyst", "quadra": "Alpha", "club": "Researcher", "element": "Nature"},
    # Beta
    "SLE": {"name": "Commander", "quadra": "Beta", "club": "Practical", "element": "Fire"},
    "IEI": {"name": "Romantic", "quadra": "Beta", "club": "Social", "element": "Shadow"},
    "EIE": {"name": "Mentor", "quadra": "Beta", "club": "Social", "element": "Fire"},
    "LSI": {"name": "Inspector", "quadra": "Beta", "club": "Practical", "element": "Shadow"},
    # Gamma
    "SEE": {"name": "Politician", "quadra": "Gamma", "club": "Humanitarian", "element": "Earth"},
    "ILI": {"name": "Critic", "quadra": "Gamma", "club": "Researcher", "element": "Metal"},
    "LIE": {"name": "Pioneer", "quadra": "Gamma", "club": "Researcher", "element": "Earth"},
    "ESI": {"name": "Guardian", "quadra": "Gamma", "club": "Humanitarian", "element": "Metal"},
    # Delta
    "IEE": {"name": "Advisor", "quadra": "Delta", "club": "Social", "element": "Wind"},
    "SLI": {"name": "Craftsman", "quadra": "Delta", "club": "Practical", "element": "Water"},
    "LSE": {"name": "Director", "quadra": "Delta", "club": "Practical", "element": "Wind"},
    "EII": {"name": "Humanist", "quadra": "Delta", "club": "Social", "element": "Water"},
}

CLUB_PASSIVES: Dict[str, PassiveTrait] = {
    "Researcher": PassiveTrait(
        name="Analytical Mind",
        description="Deals 15% more damage to debuffed targets.",
        source="Researcher club",
    ),
    "Social": PassiveTrait(
        name="Social Grace",
        description="Buffs and heals are 20% stronger; auras last one extra turn.",
        source="Social club",
    ),
    "Practical": PassiveTrait(
        name="Resourceful",
        description="Cooldowns are one turn shorter; repeated abilities cost 10% less.",
        source="Practical club",
    ),
    "Humanitarian": PassiveTrait(
        name="Compassionate Aura",
        description="Nearby allies regenerate 2% health per turn, doubled when one is below 30%.",
        source="Humanitarian club",
    ),
}

UNALIGNED_PASSIVE = PassiveTrait(
    name="Unaligned",
    description="No elemental school. Balanced but unspecialized.",
    source="No socionics type selected",
)

ELEMENT_QUADRA: Dict[str, str] = {
    "Light": "Alpha",
    "Nature": "Alpha",
    "Fire": "Beta",
    "Shadow": "Beta",
    "Earth": "Gamma",
    "Metal": "Gamma",
    "Wind": "Delta",
    "Water": "Delta",
}

QUADRA_CLUB: Dict[str, str] = {
    "Alpha": "Humanitarian",
    "Beta": "Practical",
    "Gamma": "Researcher",
    "Delta": "Social",
}

QUADRA_DESCRIPTIONS: Dict[str, str] = {
    "Alpha": "Playful and open-minded; values ideas, comfort and easy company.",
    "Beta": "Intense and collective; values loyalty, hierarchy and a shared cause.",
    "Gamma": "Pragmatic and independent; values results, honesty and personal freedom.",
    "Delta": "Steady and constructive; values useful work, health and lasting growth.",
}

QUADRA_RATIONALE: Dict[str, str] = {
    "Alpha": "Light and Nature: curiosity and comfort in the open.",
    "Beta": "Fire and Shadow: conviction burning bright, strategy kept in the dark.",
    "Gamma": "Earth and Metal: hard-won results forged from solid ground.",
    "Delta": "Wind and Water: steady currents that shape things over time.",
}

CLUB_DESCRIPTIONS: Dict[str, str] = {
    "Researcher": "Intuitive logicians drawn to systems, theory and hidden patterns.",
    "Social": "Intuitive ethicals drawn to people, meaning and relationships.",
    "Practical": "Sensing logicians drawn to craft, order and getting things done.",
    "Humanitarian": "Sensing ethicals drawn to care, comfort and shared experience.",
}

MBTI_TO_SOCIONICS: Dict[str, str] = {
    "INTJ": "ILI",
    "INTP": "LII",
    "ENTJ": "LIE",
    "ENTP": "ILE",
    "INFJ": "IEI",
    "INFP": "EII",
    "ENFJ": "EIE",
    "ENFP": "IEE",
    "ISTJ": "LSI",
    "ISFJ": "ESI",
    "ESTJ": "LSE",
    "ESFJ": "ESE",
    "ISTP": "SLI",
    "ISFP": "SEI",
    "ESTP": "SLE",
    "ESFP": "SEE",
}

SOCIONICS_TO_MBTI: Dict[str, str] = {soc: mbti for mbti, soc in MBTI_TO_SOCIONICS.items()}

# Model A ego and super-ego blocks: leading, creative, role, vulnerable.
FUNCTION_STACKS: Dict[str, Tuple[str, str, str, str]] = {
    "ILE": ("Ne", "Ti", "Se", "Fi"),
    "SEI": ("Si", "Fe", "Ni", "Te"),
    "ESE": ("Fe", "Si", "Te", "Ni"),
    "LII": ("Ti", "Ne", "Fi", "Se"),
    "SLE": ("Se", "Ti", "Ne", "Fi"),
    "IEI": ("Ni", "Fe", "Si", "Te"),
    "EIE": ("Fe", "Ni", "Te", "Si"),
    "LSI": ("Ti", "Se", "Fi", "Ne"),
    "SEE": ("Se", "Fi", "Ne", "Ti"),
    "ILI": ("Ni", "Te", "Si", "Fe"),
    "LIE": ("Te", "Ni", "Fe", "Si"),
    "ESI": ("Fi", "Se", "Ti", "Ne"),
    "IEE": ("Ne", "Fi", "Se", "Ti"),
    "SLI": ("Si", "Te", "Ni", "Fe"),
    "LSE": ("Te", "Si", "Fe", "Ni"),
    "EII": ("Fi", "Ne", "Ti", "Se"),
}


# --- Lookups -----------------------------------------------------------------


def _require_socionics(soc_type: str) -> str:
    if soc_type not in SOCIONICS_TYPES:
        raise InvalidInputError(f"Unknown socionics type: {soc_type!r}", field="socionics")
    return soc_type


def _require_element(element: str) -> str:
    if element not in ELEMENTS:
        raise InvalidInputError(f"Unknown element: {element!r}", field="element")
    return element


def get_socionics_type(soc_type: str) -> SocionicsTypeSpec:
    return SOCIONICS_TYPE_DATA[_require_socionics(soc_type)]


def types_by_quadra(quadra: str) -> List[str]:
    """Socionics types of a quadra, in table order."""
    if quadra not in QUADRAS:
        raise InvalidInputError(f"Unknown quadra: {quadra!r}", field="quadra")
    return [t for t in SOCIONICS_TYPES if SOCIONICS_TYPE_DATA[t]["quadra"] == quadra]


def type_quadra(soc_type: str) -> str:
    return get_socionics_type(soc_type)["quadra"]


def type_club(soc_type: str) -> str:
    return get_socionics_type(soc_type)["club"]


def elements_of_quadra(quadra: str) -> Tuple[str, ...]:
    return tuple(e for e in ELEMENTS if ELEMENT_QUADRA[e] == quadra)


# --- Builders ----------------------------------------------------------------


def build_element_affinity(soc_type: str) -> ElementAffinity:
    spec = get_socionics_type(soc_type)
    return ElementAffinity(
        element=spec["element"],
        quadra=spec["quadra"],
        club=spec["club"],
        passive_trait=CLUB_PASSIVES[spec["club"]],
    )


def build_element_affinity_for_element(element: str) -> ElementAffinity:
    """Affinity rebuilt from an element alone (quadra, club and passive follow)."""
    quadra = ELEMENT_QUADRA[_require_element(element)]
    club = QUADRA_CLUB[quadra]
    return ElementAffinity(element=element, quadra=quadra, club=club, passive_trait=CLUB_PASSIVES[club])


def build_default_element_affinity(element: Optional[str] = None) -> ElementAffinity:
    """Neutral affinity used when socionics is off. An override only renames the element."""
    if element is not None:
        _require_element(element)
    return ElementAffinity(
        element=element or "Nature",
        quadra="Alpha",
        club="Humanitarian",
        passive_trait=UNALIGNED_PASSIVE,
    )
