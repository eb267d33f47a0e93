"""
Cosmetic name generation.

Names are a prefix and a suffix drawn from one of three syllable pools. The
pool follows the character's class and element: martial classes and Fire or
Shadow sound harsh, gentle classes and Light, Nature or Water sound flowing,
and anything mixed or unknown uses the neutral pool.

The same seed always gives the same name.
"""

from __future__ import annotations

import random
from typing import FrozenSet, List, Optional, Tuple

NEUTRAL_PREFIXES: List[str] = [
    "Ar", "Bel", "Cas", "Dor", "El", "Fen", "Gal", "Hal",
    "Ir", "Jas", "Kel", "Lor", "Mir", "Nor", "Or", "Pel",
    "Quin", "Ras", "Sol", "Thar", "Ul", "Vel", "Wen", "Xan",
    "Yor", "Zen",
]
NEUTRAL_SUFFIXES: List[str] = [
    "ith", "an", "os", "ara", "iel", "on", "is", "wyn",
    "ak", "en", "ur", "ova", "ix", "us", "ea", "or",
    "ine", "ash", "ek", "al",
]

HARSH_PREFIXES: List[str] = [
    "Krag", "Vex", "Brok", "Drak", "Thorn", "Grim", "Skar", "Rok",
    "Vor", "Zul", "Gor", "Brak", "Kael", "Mord", "Rax", "Durn",
]
HARSH_SUFFIXES: List[str] = [
    "ax", "urn", "ek", "ash", "or", "uk", "ath", "ark",
    "ex", "ol", "ag", "orn", "us", "an", "ik", "oz",
]

FLOWING_PREFIXES: List[str] = [
    "Ael", "Lumi", "Syl", "Eira", "Thel", "Ari", "Cel", "Ilya",
    "Mael", "Nai", "Sera", "Vel", "Wyn", "Elara", "Fael", "Liora",
]
FLOWING_SUFFIXES: List[str] = [
    "wyn", "iel", "ara", "ine", "ea", "ana", "ova", "ith",
    "ael", "wen", "ira", "ora", "una", "is",
]

HARSH_CLASSES: FrozenSet[str] = frozenset({"Berserker", "Warlord", "Justicar"})
HARSH_ELEMENTS: FrozenSet[str] = frozenset({"Fire", "Shadow"})
FLOWING_CLASSES: FrozenSet[str] = frozenset({"Cleric", "Druid", "Sage", "Bard"})
FLOWING_ELEMENTS: FrozenSet[str] = frozenset({"Light", "Nature", "Water"})


def _has_class(class_name: str, classes: FrozenSet[str]) -> bool:
    # Archetype names carry a wing label and an instinct suffix around the class.
    return any(word in classes for word in class_name.split())


def pick_name_pool(class_name: Optional[str], element: Optional[str]) -> Tuple[str, List[str], List[str]]:
    """Return (pool_name, prefixes, suffixes) for a class and element."""
    if not class_name or not element:
        return "neutral", NEUTRAL_PREFIXES, NEUTRAL_SUFFIXES
    harsh = _has_class(class_name, HARSH_CLASSES) or element in HARSH_ELEMENTS
    flowing = _has_class(class_name, FLOWING_CLASSES) or element in FLOWING_ELEMENTS
    if harsh and not flowing:
        return "harsh", HARSH_PREFIXES, HARSH_SUFFIXES
    if flowing and not harsh:
        return "flowing", FLOWING_PREFIXES, FLOWING_SUFFIXES
    return "neutral", NEUTRAL_PREFIXES, NEUTRAL_SUFFIXES


def generate_name(seed: int, class_name: Optional[str] = None, element: Optional[str] = None) -> str:
    rng = random.Random(seed)
    _, prefixes, suffixes = pick_name_pool(class_name, element)
    return rng.choice(prefixes) + rng.choice(suffixes)


def generate_title(class_name: str, element: str) -> str:
    return f"{element} {class_name}"
