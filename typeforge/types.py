from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Literal, Optional, Tuple


# --- Closed enumerations -----------------------------------------------------

MAX_STAT = 20

StatName = Literal["willpower", "intelligence", "spirit", "vitality"]
STAT_NAMES: Tuple[StatName, ...] = ("willpower", "intelligence", "spirit", "vitality")

SystemId = Literal["attitudinal", "enneagram", "mbti", "socionics", "instincts"]
SYSTEM_IDS: Tuple[SystemId, ...] = ("attitudinal", "enneagram", "mbti", "socionics", "instincts")

Aspect = Literal["V", "L", "E", "F"]
ASPECTS: Tuple[Aspect, ...] = ("V", "L", "E", "F")

APType = Literal[
    "VLEF", "VLFE", "VELF", "VEFL", "VFEL", "VFLE",
    "LVEF", "LVFE", "LEVF", "LEFV", "LFEV", "LFVE",
    "EVLF", "EVFL", "ELVF", "ELFV", "EFLV", "EFVL",
    "FVLE", "FVEL", "FLVE", "FLEV", "FEVL", "FELV",
]
AP_TYPES: Tuple[str, ...] = (
    "VLEF", "VLFE", "VELF", "VEFL", "VFEL", "VFLE",
    "LVEF", "LVFE", "LEVF", "LEFV", "LFEV", "LFVE",
    "EVLF", "EVFL", "ELVF", "ELFV", "EFLV", "EFVL",
    "FVLE", "FVEL", "FLVE", "FLEV", "FEVL", "FELV",
)

EnneagramNumber = Literal[1, 2, 3, 4, 5, 6, 7, 8, 9]
ENNEAGRAM_NUMBERS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 9)

EnneagramInstinct = Literal["sp", "so", "sx"]
ENNEAGRAM_INSTINCTS: Tuple[str, ...] = ("sp", "so", "sx")

EnneagramCenter = Literal["Gut", "Heart", "Head"]
ENNEAGRAM_CENTERS: Tuple[str, ...] = ("Gut", "Heart", "Head")

CognitiveFunction = Literal["Ti", "Te", "Fi", "Fe", "Si", "Se", "Ni", "Ne"]
COGNITIVE_FUNCTIONS: Tuple[str, ...] = ("Ti", "Te", "Fi", "Fe", "Si", "Se", "Ni", "Ne")

MBTIType = Literal[
    "INTJ", "INTP", "ENTJ", "ENTP",
    "INFJ", "INFP", "ENFJ", "ENFP",
    "ISTJ", "ISFJ", "ESTJ", "ESFJ",
    "ISTP", "ISFP", "ESTP", "ESFP",
]
MBTI_TYPES: Tuple[str, ...] = (
    "INTJ", "INTP", "ENTJ", "ENTP",
    "INFJ", "INFP", "ENFJ", "ENFP",
    "ISTJ", "ISFJ", "ESTJ", "ESFJ",
    "ISTP", "ISFP", "ESTP", "ESFP",
)

SocionicsType = Literal[
    "ILE", "SEI", "ESE", "LII",
    "SLE", "IEI", "EIE", "LSI",
    "SEE", "ILI", "LIE", "ESI",
    "IEE", "SLI", "LSE", "EII",
]
SOCIONICS_TYPES: Tuple[str, ...] = (
    "ILE", "SEI", "ESE", "LII",
    "SLE", "IEI", "EIE", "LSI",
    "SEE", "ILI", "LIE", "ESI",
    "IEE", "SLI", "LSE", "EII",
)

Element = Literal["Light", "Nature", "Fire", "Shadow", "Earth", "Metal", "Wind", "Water"]
ELEMENTS: Tuple[str, ...] = ("Light", "Nature", "Fire", "Shadow", "Earth", "Metal", "Wind", "Water")

Quadra = Literal["Alpha", "Beta", "Gamma", "Delta"]
QUADRAS: Tuple[str, ...] = ("Alpha", "Beta", "Gamma", "Delta")

Club = Literal["Researcher", "Social", "Practical", "Humanitarian"]
CLUBS: Tuple[str, ...] = ("Researcher", "Social", "Practical", "Humanitarian")

InstinctRealm = Literal["FD", "SY", "SM", "AY", "CY", "BG", "SS", "EX", "UN"]
INSTINCT_REALMS: Tuple[str, ...] = ("FD", "SY", "SM", "AY", "CY", "BG", "SS", "EX", "UN")

InstinctCenter = Literal["SUR", "INT", "PUR"]
INSTINCT_CENTERS: Tuple[str, ...] = ("SUR", "INT", "PUR")

ExperientialTriad = Literal["Immersing", "Distinguishing", "Memorializing"]
EXPERIENTIAL_TRIADS: Tuple[str, ...] = ("Immersing", "Distinguishing", "Memorializing")

MovementTriad = Literal["Directing", "Escaping", "Aligning"]
MOVEMENT_TRIADS: Tuple[str, ...] = ("Directing", "Escaping", "Aligning")

SourceTriad = Literal["Externalizing", "Internalizing", "Exchanging"]
SOURCE_TRIADS: Tuple[str, ...] = ("Externalizing", "Internalizing", "Exchanging")

AbilitySlot = Literal["hero", "parent", "child", "inferior"]
ABILITY_SLOTS: Tuple[AbilitySlot, ...] = ("hero", "parent", "child", "inferior")

AbilityTag = Literal[
    "damage", "single-target", "aoe", "buff", "debuff", "heal",
    "defensive", "utility", "chaotic", "reactive", "self",
]
ABILITY_TAGS: Tuple[str, ...] = (
    "damage", "single-target", "aoe", "buff", "debuff", "heal",
    "defensive", "utility", "chaotic", "reactive", "self",
)


def _clamp_stat(value: int) -> int:
    return max(0, min(MAX_STAT, int(value)))


def _optional_tuple(value: Any) -> Optional[tuple]:
    if value is None:
        return None
    return tuple(value)


def _int_map(values: Optional[Dict[str, Any]]) -> Optional[Dict[str, int]]:
    """Per-key integers; null entries mean "keep the computed value" and are dropped."""
    if values is None:
        return None
    return {k: int(v) for k, v in values.items() if v is not None}


# --- Stats -------------------------------------------------------------------


@dataclass(frozen=True)
class StatBlock:
    """Four integer stat axes, each kept in [0, MAX_STAT]."""

    willpower: int = 0
    intelligence: int = 0
    spirit: int = 0
    vitality: int = 0

    def get(self, stat: str) -> int:
        if stat not in STAT_NAMES:
            raise KeyError(stat)
        return int(getattr(self, stat))

    def total(self) -> int:
        return sum(self.get(s) for s in STAT_NAMES)

    def clamped(self) -> "StatBlock":
        return StatBlock(**{s: _clamp_stat(self.get(s)) for s in STAT_NAMES})

    def with_values(self, values: Dict[str, int]) -> "StatBlock":
        """Return a copy with the given axes replaced (unknown axes are ignored)."""
        changes = {k: int(v) for k, v in values.items() if k in STAT_NAMES}
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, int]:
        return {s: self.get(s) for s in STAT_NAMES}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatBlock":
        return cls(**{s: int(data.get(s, 0)) for s in STAT_NAMES})


@dataclass(frozen=True)
class StatBreakdown:
    """Provenance of a StatBlock: base, multipliers and overrides.

    Composing the three stages with ``stats.compose_stats`` always reproduces
    the character's final numbers.
    """

    base: StatBlock
    base_source: str  # AP code, or "Default" when the system is off
    multipliers: Dict[str, float] = field(default_factory=dict)
    multiplier_source: str = ""  # class name, or "" when the system is off
    overrides: Optional[Dict[str, int]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base": self.base.to_dict(),
            "base_source": self.base_source,
            "multipliers": {k: float(v) for k, v in self.multipliers.items()},
            "multiplier_source": self.multiplier_source,
            "overrides": dict(self.overrides) if self.overrides is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatBreakdown":
        overrides = data.get("overrides")
        return cls(
            base=StatBlock.from_dict(data.get("base", {})),
            base_source=str(data.get("base_source", "Default")),
            multipliers={k: float(v) for k, v in (data.get("multipliers") or {}).items()},
            multiplier_source=str(data.get("multiplier_source", "")),
            overrides=_int_map(overrides),
        )


# --- Traits and effects ------------------------------------------------------


@dataclass(frozen=True)
class PassiveTrait:
    name: str
    description: str
    source: str

    def with_source(self, source: str) -> "PassiveTrait":
        return replace(self, source=source)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description, "source": self.source}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PassiveTrait":
        return cls(
            name=str(data.get("name", "")),
            description=str(data.get("description", "")),
            source=str(data.get("source", "")),
        )


@dataclass(frozen=True)
class StatusEffect:
    """Empowered or stressed state of an archetype."""

    name: str
    description: str
    stat_changes: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "stat_changes": dict(self.stat_changes),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatusEffect":
        return cls(
            name=str(data.get("name", "")),
            description=str(data.get("description", "")),
            stat_changes={k: int(v) for k, v in (data.get("stat_changes") or {}).items()},
        )


@dataclass(frozen=True)
class StatBlendStep:
    """One contribution to an archetype's final multipliers."""

    source: str
    influence: float
    modifiers: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "influence": float(self.influence),
            "modifiers": {k: float(v) for k, v in self.modifiers.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatBlendStep":
        return cls(
            source=str(data.get("source", "")),
            influence=float(data.get("influence", 0.0)),
            modifiers={k: float(v) for k, v in (data.get("modifiers") or {}).items()},
        )


# --- Archetype ---------------------------------------------------------------


@dataclass(frozen=True)
class Archetype:
    class_name: str
    description: str
    enneagram_type: int
    wing: int
    stat_modifiers: Dict[str, float]
    empowered_state: StatusEffect
    stressed_state: StatusEffect
    wing_flavor: str = ""
    instinct_passives: List[PassiveTrait] = field(default_factory=list)
    tritype_passives: List[PassiveTrait] = field(default_factory=list)
    integration_line: Optional[str] = None
    disintegration_line: Optional[str] = None
    stat_blend_chain: List[StatBlendStep] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class_name": self.class_name,
            "description": self.description,
            "enneagram_type": int(self.enneagram_type),
            "wing": int(self.wing),
            "stat_modifiers": {k: float(v) for k, v in self.stat_modifiers.items()},
            "empowered_state": self.empowered_state.to_dict(),
            "stressed_state": self.stressed_state.to_dict(),
            "wing_flavor": self.wing_flavor,
            "instinct_passives": [p.to_dict() for p in self.instinct_passives],
            "tritype_passives": [p.to_dict() for p in self.tritype_passives],
            "integration_line": self.integration_line,
            "disintegration_line": self.disintegration_line,
            "stat_blend_chain": [s.to_dict() for s in self.stat_blend_chain],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Archetype":
        return cls(
            class_name=str(data.get("class_name", "")),
            description=str(data.get("description", "")),
            enneagram_type=int(data.get("enneagram_type", 9)),
            wing=int(data.get("wing", 1)),
            stat_modifiers={k: float(v) for k, v in (data.get("stat_modifiers") or {}).items()},
            empowered_state=StatusEffect.from_dict(data.get("empowered_state", {})),
            stressed_state=StatusEffect.from_dict(data.get("stressed_state", {})),
            wing_flavor=str(data.get("wing_flavor", "")),
            instinct_passives=[PassiveTrait.from_dict(p) for p in data.get("instinct_passives", [])],
            tritype_passives=[PassiveTrait.from_dict(p) for p in data.get("tritype_passives", [])],
            integration_line=data.get("integration_line"),
            disintegration_line=data.get("disintegration_line"),
            stat_blend_chain=[StatBlendStep.from_dict(s) for s in data.get("stat_blend_chain", [])],
        )


# --- Abilities ---------------------------------------------------------------


@dataclass(frozen=True)
class Ability:
    slot: str
    name: str
    description: str
    cognitive_function: str
    base_power: int
    scaling_stat: str
    tags: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slot": self.slot,
            "name": self.name,
            "description": self.description,
            "cognitive_function": self.cognitive_function,
            "base_power": int(self.base_power),
            "scaling_stat": self.scaling_stat,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ability":
        return cls(
            slot=str(data.get("slot", "")),
            name=str(data.get("name", "")),
            description=str(data.get("description", "")),
            cognitive_function=str(data.get("cognitive_function", "")),
            base_power=int(data.get("base_power", 0)),
            scaling_stat=str(data.get("scaling_stat", "")),
            tags=tuple(data.get("tags", ())),
        )


@dataclass(frozen=True)
class AbilityOverrides:
    """One cognitive function per slot, used when MBTI is switched off."""

    hero: str
    parent: str
    child: str
    inferior: str

    def for_slot(self, slot: str) -> str:
        if slot not in ABILITY_SLOTS:
            raise KeyError(slot)
        return getattr(self, slot)

    def to_dict(self) -> Dict[str, str]:
        return {s: self.for_slot(s) for s in ABILITY_SLOTS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AbilityOverrides":
        return cls(**{s: str(data[s]) for s in ABILITY_SLOTS})


# --- Element and combat ------------------------------------------------------


@dataclass(frozen=True)
class ElementAffinity:
    element: str
    quadra: str
    club: str
    passive_trait: PassiveTrait

    def to_dict(self) -> Dict[str, Any]:
        return {
            "element": self.element,
            "quadra": self.quadra,
            "club": self.club,
            "passive_trait": self.passive_trait.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ElementAffinity":
        return cls(
            element=str(data.get("element", "")),
            quadra=str(data.get("quadra", "")),
            club=str(data.get("club", "")),
            passive_trait=PassiveTrait.from_dict(data.get("passive_trait", {})),
        )


@dataclass(frozen=True)
class CombatBehavior:
    realm: str
    center: str
    combat_orientation: str
    activation_style: str  # experiential triad
    positioning: str  # movement triad
    regen_source: str  # source triad
    passives: List[PassiveTrait] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "realm": self.realm,
            "center": self.center,
            "combat_orientation": self.combat_orientation,
            "activation_style": self.activation_style,
            "positioning": self.positioning,
            "regen_source": self.regen_source,
            "passives": [p.to_dict() for p in self.passives],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CombatBehavior":
        return cls(
            realm=str(data.get("realm", "")),
            center=str(data.get("center", "")),
            combat_orientation=str(data.get("combat_orientation", "")),
            activation_style=str(data.get("activation_style", "")),
            positioning=str(data.get("positioning", "")),
            regen_source=str(data.get("regen_source", "")),
            passives=[PassiveTrait.from_dict(p) for p in data.get("passives", [])],
        )


# --- Generator input ---------------------------------------------------------


@dataclass(frozen=True)
class EnneagramSelection:
    """Enneagram pick. ``tritype`` is ordered [core, 2nd fix, 3rd fix]."""

    type: int
    wing: int
    instinct: str
    instinct_stack: Optional[Tuple[str, str, str]] = None
    tritype: Optional[Tuple[int, int, int]] = None
    tritype_wings: Optional[Tuple[int, int]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": int(self.type),
            "wing": int(self.wing),
            "instinct": self.instinct,
            "instinct_stack": list(self.instinct_stack) if self.instinct_stack else None,
            "tritype": list(self.tritype) if self.tritype else None,
            "tritype_wings": list(self.tritype_wings) if self.tritype_wings else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EnneagramSelection":
        tritype = data.get("tritype")
        tritype_wings = data.get("tritype_wings")
        return cls(
            type=int(data["type"]),
            wing=int(data["wing"]),
            instinct=str(data["instinct"]),
            instinct_stack=_optional_tuple(data.get("instinct_stack")),
            tritype=tuple(int(t) for t in tritype) if tritype else None,
            tritype_wings=tuple(int(w) for w in tritype_wings) if tritype_wings else None,
        )


@dataclass(frozen=True)
class InstinctSelection:
    """Instinct realm pick. ``tritype`` is ordered [core, 2nd fix, 3rd fix]."""

    realm: str
    tritype: Optional[Tuple[str, str, str]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"realm": self.realm, "tritype": list(self.tritype) if self.tritype else None}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InstinctSelection":
        return cls(realm=str(data["realm"]), tritype=_optional_tuple(data.get("tritype")))


@dataclass(frozen=True)
class ManualOverrides:
    """Manual picks that stand in for (or sit on top of) computed values."""

    stats: Optional[Dict[str, Optional[int]]] = None
    archetype: Optional[str] = None
    abilities: Optional[AbilityOverrides] = None
    element: Optional[str] = None
    combat_orientation: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stats": dict(self.stats) if self.stats is not None else None,
            "archetype": self.archetype,
            "abilities": self.abilities.to_dict() if self.abilities else None,
            "element": self.element,
            "combat_orientation": self.combat_orientation,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ManualOverrides":
        data = data or {}
        stats = data.get("stats")
        abilities = data.get("abilities")
        return cls(
            stats=_int_map(stats),
            archetype=data.get("archetype"),
            abilities=AbilityOverrides.from_dict(abilities) if abilities else None,
            element=data.get("element"),
            combat_orientation=data.get("combat_orientation"),
        )


@dataclass(frozen=True)
class GeneratorInput:
    """Everything the generator needs. Each system is independently optional."""

    attitudinal: Optional[str] = None
    enneagram: Optional[EnneagramSelection] = None
    mbti: Optional[str] = None
    socionics: Optional[str] = None
    instincts: Optional[InstinctSelection] = None
    overrides: ManualOverrides = field(default_factory=ManualOverrides)
    seed: Optional[int] = None  # cosmetic name text only

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attitudinal": self.attitudinal,
            "enneagram": self.enneagram.to_dict() if self.enneagram else None,
            "mbti": self.mbti,
            "socionics": self.socionics,
            "instincts": self.instincts.to_dict() if self.instincts else None,
            "overrides": self.overrides.to_dict(),
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorInput":
        enneagram = data.get("enneagram")
        instincts = data.get("instincts")
        seed = data.get("seed")
        return cls(
            attitudinal=data.get("attitudinal"),
            enneagram=EnneagramSelection.from_dict(enneagram) if enneagram else None,
            mbti=data.get("mbti"),
            socionics=data.get("socionics"),
            instincts=InstinctSelection.from_dict(instincts) if instincts else None,
            overrides=ManualOverrides.from_dict(data.get("overrides")),
            seed=int(seed) if seed is not None else None,
        )


@dataclass(frozen=True)
class TypologySource:
    """Raw inputs a character was generated from.

    Holds the five selections plus overrides and seed, so
    ``to_generator_input()`` rebuilds an input that regenerates the same
    character.
    """

    attitudinal: Optional[str] = None
    enneagram: Optional[EnneagramSelection] = None
    mbti: Optional[str] = None
    socionics: Optional[str] = None
    instincts: Optional[InstinctSelection] = None
    overrides: ManualOverrides = field(default_factory=ManualOverrides)
    seed: Optional[int] = None

    @classmethod
    def from_generator_input(cls, gen_input: GeneratorInput) -> "TypologySource":
        return cls(
            attitudinal=gen_input.attitudinal,
            enneagram=gen_input.enneagram,
            mbti=gen_input.mbti,
            socionics=gen_input.socionics,
            instincts=gen_input.instincts,
            overrides=gen_input.overrides,
            seed=gen_input.seed,
        )

    def to_generator_input(self) -> GeneratorInput:
        return GeneratorInput(
            attitudinal=self.attitudinal,
            enneagram=self.enneagram,
            mbti=self.mbti,
            socionics=self.socionics,
            instincts=self.instincts,
            overrides=self.overrides,
            seed=self.seed,
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.to_generator_input().to_dict()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TypologySource":
        return cls.from_generator_input(GeneratorInput.from_dict(data))


# --- Character ---------------------------------------------------------------


@dataclass(frozen=True)
class Character:
    name: str
    title: str
    stats: StatBlock
    stat_breakdown: StatBreakdown
    archetype: Archetype
    abilities: List[Ability]
    element: ElementAffinity
    combat_behavior: CombatBehavior
    active_systems: List[str]
    typology_source: TypologySource

    def ability_for_slot(self, slot: str) -> Optional[Ability]:
        for ability in self.abilities:
            if ability.slot == slot:
                return ability
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "stats": self.stats.to_dict(),
            "stat_breakdown": self.stat_breakdown.to_dict(),
            "archetype": self.archetype.to_dict(),
            "abilities": [a.to_dict() for a in self.abilities],
            "element": self.element.to_dict(),
            "combat_behavior": self.combat_behavior.to_dict(),
            "active_systems": list(self.active_systems),
            "typology_source": self.typology_source.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Character":
        return cls(
            name=str(data.get("name", "")),
            title=str(data.get("title", "")),
            stats=StatBlock.from_dict(data.get("stats", {})),
            stat_breakdown=StatBreakdown.from_dict(data.get("stat_breakdown", {})),
            archetype=Archetype.from_dict(data.get("archetype", {})),
            abilities=[Ability.from_dict(a) for a in data.get("abilities", [])],
            element=ElementAffinity.from_dict(data.get("element", {})),
            combat_behavior=CombatBehavior.from_dict(data.get("combat_behavior", {})),
            active_systems=list(data.get("active_systems", [])),
            typology_source=TypologySource.from_dict(data.get("typology_source", {})),
        )


@dataclass(frozen=True)
class CharacterEdits:
    """Sparse overlay applied on top of a generated character.

    ``None`` means "keep the generated value" for every field, and for each
    entry of ``stats`` and ``ability_names``.
    """

    stats: Optional[Dict[str, Optional[int]]] = None
    class_name: Optional[str] = None
    ability_names: Optional[Dict[str, Optional[str]]] = None  # slot -> display name
    element: Optional[str] = None
    combat_orientation: Optional[str] = None

    def is_empty(self) -> bool:
        return (
            not self.stats
            and self.class_name is None
            and not self.ability_names
            and self.element is None
            and self.combat_orientation is None
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stats": dict(self.stats) if self.stats is not None else None,
            "class_name": self.class_name,
            "ability_names": dict(self.ability_names) if self.ability_names is not None else None,
            "element": self.element,
            "combat_orientation": self.combat_orientation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CharacterEdits":
        stats = data.get("stats")
        names = data.get("ability_names")
        return cls(
            stats=_int_map(stats),
            class_name=data.get("class_name"),
            ability_names={k: str(v) for k, v in names.items() if v is not None} if names is not None else None,
            element=data.get("element"),
            combat_orientation=data.get("combat_orientation"),
        )


# --- Quiz --------------------------------------------------------------------


QuizMode = Literal["quick", "deep"]
QUIZ_MODES: Tuple[str, ...] = ("quick", "deep")

# question id -> selected option index
QuizAnswerMap = Dict[str, int]


@dataclass(frozen=True)
class QuizOption:
    label: str
    weights: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class QuizQuestion:
    id: str
    system: str
    prompt: str
    options: Tuple[QuizOption, ...] = ()


@dataclass(frozen=True)
class ScoreContribution:
    target: str
    points: int

    def to_dict(self) -> Dict[str, Any]:
        return {"target": self.target, "points": int(self.points)}


@dataclass(frozen=True)
class QuestionInfluence:
    """Which answer pushed which candidates, and by how much."""

    question_id: str
    prompt: str
    selected_option_label: str
    contributions: List[ScoreContribution] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question_id": self.question_id,
            "prompt": self.prompt,
            "selected_option_label": self.selected_option_label,
            "contributions": [c.to_dict() for c in self.contributions],
        }


@dataclass(frozen=True)
class ScoreEntry:
    label: str
    score: int
    max_possible: int

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "score": int(self.score), "max_possible": int(self.max_possible)}


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-system scoring output used by explanation views."""

    scores: Dict[str, int]
    winner: str
    winner_margin: Optional[int] = None
    axis_lean_summary: List[str] = field(default_factory=list)
    score_detail: List[str] = field(default_factory=list)
    score_entries: List[ScoreEntry] = field(default_factory=list)
    question_influences: List[QuestionInfluence] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scores": dict(self.scores),
            "winner": self.winner,
            "winner_margin": self.winner_margin,
            "axis_lean_summary": list(self.axis_lean_summary),
            "score_detail": list(self.score_detail),
            "score_entries": [e.to_dict() for e in self.score_entries],
            "question_influences": [q.to_dict() for q in self.question_influences],
        }


@dataclass(frozen=True)
class QuizResult:
    attitudinal: Optional[str] = None
    enneagram_type: Optional[int] = None
    enneagram_wing: Optional[int] = None
    enneagram_instinct: Optional[str] = None
    mbti: Optional[str] = None
    socionics: Optional[str] = None
    instinct_realm: Optional[str] = None
    explanations: Dict[str, ScoreBreakdown] = field(default_factory=dict)
    function_scores: Optional[Dict[str, int]] = None  # deep MBTI only

    def to_generator_input(self, seed: Optional[int] = None) -> GeneratorInput:
        """Turn quiz results into a generator input (unscored systems stay off)."""
        enneagram = None
        if self.enneagram_type is not None and self.enneagram_wing is not None and self.enneagram_instinct:
            enneagram = EnneagramSelection(
                type=self.enneagram_type,
                wing=self.enneagram_wing,
                instinct=self.enneagram_instinct,
            )
        instincts = InstinctSelection(realm=self.instinct_realm) if self.instinct_realm else None
        return GeneratorInput(
            attitudinal=self.attitudinal,
            enneagram=enneagram,
            mbti=self.mbti,
            socionics=self.socionics,
            instincts=instincts,
            seed=seed,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attitudinal": self.attitudinal,
            "enneagram_type": self.enneagram_type,
            "enneagram_wing": self.enneagram_wing,
            "enneagram_instinct": self.enneagram_instinct,
            "mbti": self.mbti,
            "socionics": self.socionics,
            "instinct_realm": self.instinct_realm,
            "explanations": {k: v.to_dict() for k, v in self.explanations.items()},
            "function_scores": dict(self.function_scores) if self.function_scores is not None else None,
        }
