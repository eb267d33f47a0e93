import pytest

from typeforge.errors import InvalidInputError
from typeforge.instincts import (
    build_combat_behavior,
    build_default_combat_behavior,
    build_tritype_combat_behavior,
    realm_passives,
    realms_by_center,
    validate_tritype,
)
from typeforge.types import INSTINCT_CENTERS


def test_fd_behavior():
    cb = build_combat_behavior("FD")
    assert cb.center == "SUR"
    assert cb.combat_orientation == "Frontline"
    assert cb.activation_style == "Immersing"
    assert cb.positioning == "Directing"
    assert cb.regen_source == "Externalizing"
    assert [p.name for p in cb.passives] == ["Flow State", "Aggressive Advance", "Siphon"]


def test_realms_by_center():
    assert realms_by_center("SUR") == ["FD", "SY", "SM"]
    assert realms_by_center("INT") == ["AY", "CY", "BG"]
    assert realms_by_center("PUR") == ["SS", "EX", "UN"]
    with pytest.raises(InvalidInputError):
        realms_by_center("XYZ")


def test_each_center_covers_every_triad_value_once():
    for center in INSTINCT_CENTERS:
        names = [p.name for r in realms_by_center(center) for p in realm_passives(r)]
        assert len(names) == 9
        assert len(set(names)) == 9


def test_tritype_behavior_keeps_core_triads_and_dedupes_passives():
    cb = build_tritype_combat_behavior("FD", ("FD", "CY", "UN"))

    assert cb.realm == "FD"
    assert cb.activation_style == "Immersing"
    names = [p.name for p in cb.passives]
    assert names[:3] == ["Flow State", "Aggressive Advance", "Siphon"]
    # CY brings Precision Timing and Adaptive Stance; its Siphon is a duplicate.
    # UN brings Afterimage and Evasive; its Siphon is a duplicate.
    assert names[3:] == ["Precision Timing", "Adaptive Stance", "Afterimage", "Evasive"]
    assert len(names) == len(set(names))
    assert cb.passives[3].source.startswith("2nd fix (CY)")
    assert cb.passives[5].source.startswith("3rd fix (UN)")


@pytest.mark.parametrize(
    "tritype",
    [
        ("FD", "SY", "EX"),  # two SUR realms
        ("FD", "CY"),
        ("FD", "CY", "ZZ"),
    ],
)
def test_invalid_realm_tritypes(tritype):
    with pytest.raises(InvalidInputError):
        validate_tritype(tritype)


def test_tritype_must_start_with_core():
    with pytest.raises(InvalidInputError):
        build_tritype_combat_behavior("CY", ("FD", "CY", "UN"))


def test_default_behavior_has_no_passives():
    cb = build_default_combat_behavior()
    assert cb.combat_orientation == "Balanced"
    assert cb.passives == []
    assert build_default_combat_behavior("Skirmisher").combat_orientation == "Skirmisher"
