import pytest

from typeforge.comparison import compute_character_diff
from typeforge.generator import generate_character
from typeforge.types import EnneagramSelection, GeneratorInput, InstinctSelection


def _char(**kwargs):
    return generate_character(GeneratorInput(seed=1, **kwargs))


def test_identical_characters():
    a = _char(attitudinal="VELF", mbti="INTJ", socionics="ILI")
    b = _char(attitudinal="VELF", mbti="INTJ", socionics="ILI")
    diff = compute_character_diff(a, b)

    assert diff.is_identical()
    assert diff.stat_diff == {"willpower": 0, "intelligence": 0, "spirit": 0, "vitality": 0}
    assert diff.shared_function_list == ["Ni", "Te", "Fi", "Se"]


def test_abilities_matched_by_function_not_slot():
    # INTJ: Ni Te Fi Se, INFJ: Ni Fe Ti Se
    a = _char(mbti="INTJ")
    b = _char(mbti="INFJ")
    diff = compute_character_diff(a, b)

    assert diff.shared_function_list == ["Ni", "Se"]
    assert diff.unique_to_a == ["Te", "Fi"]
    assert diff.unique_to_b == ["Fe", "Ti"]
    by_fn = {c.cognitive_function: c for c in diff.ability_comparison_list}
    assert by_fn["Te"].slot_b is None
    assert by_fn["Fe"].slot_a is None
    assert [c.cognitive_function for c in diff.ability_comparison_list] == ["Ni", "Te", "Fi", "Se", "Fe", "Ti"]
    assert not diff.is_identical()


def test_shared_function_in_different_slots():
    # ENTP: Ne Ti Fe Si, INTP: Ti Ne Si Fe
    diff = compute_character_diff(_char(mbti="ENTP"), _char(mbti="INTP"))
    by_fn = {c.cognitive_function: c for c in diff.ability_comparison_list}

    assert sorted(diff.shared_function_list) == ["Fe", "Ne", "Si", "Ti"]
    assert by_fn["Ne"].slot_a == "hero"
    assert by_fn["Ne"].slot_b == "parent"
    power_a, power_b = diff.ability_power_diff["Ne"]
    assert power_a > power_b


def test_stat_diff_sign_and_flags():
    a = _char(attitudinal="VLEF", socionics="ILE", instincts=InstinctSelection(realm="FD"))
    b = _char(attitudinal="FELV", socionics="LII", instincts=InstinctSelection(realm="AY"))
    diff = compute_character_diff(a, b)

    assert diff.stat_diff["willpower"] == 14 - 4
    assert diff.stat_diff["vitality"] == 4 - 14
    assert diff.same_quadra
    assert not diff.same_element
    assert not diff.same_orientation
    assert diff.same_activation
    assert not diff.same_positioning


def test_passive_diff():
    a = _char(
        enneagram=EnneagramSelection(type=5, wing=4, instinct="sp"),
        instincts=InstinctSelection(realm="FD"),
    )
    b = _char(
        enneagram=EnneagramSelection(type=6, wing=5, instinct="sp"),
        instincts=InstinctSelection(realm="SY"),
    )
    diff = compute_character_diff(a, b)

    assert "Fortified" in diff.passive_diff.shared
    assert "Unaligned" in diff.passive_diff.shared
    assert "Flow State" in diff.passive_diff.unique_to_a
    assert "Precision Timing" in diff.passive_diff.unique_to_b
    assert diff.same_orientation


def test_diff_to_dict():
    diff = compute_character_diff(_char(mbti="INTJ"), _char(mbti="INFJ"))
    data = diff.to_dict()
    assert set(data["ability_power_diff"]) == {"Ni", "Se"}
    assert data["ability_power_diff"]["Ni"]["power_a"] == data["ability_power_diff"]["Ni"]["power_b"]


@pytest.mark.parametrize(
    "mbti_a, mbti_b",
    [("INTJ", "INFJ"), ("ENTP", "ISFJ"), ("ESTP", "INTP"), ("INTJ", "INTJ")],
)
def test_function_buckets_cover_every_comparison(mbti_a, mbti_b):
    diff = compute_character_diff(_char(mbti=mbti_a), _char(mbti=mbti_b))

    buckets = len(diff.shared_function_list) + len(diff.unique_to_a) + len(diff.unique_to_b)
    assert buckets == len(diff.ability_comparison_list)
    assert set(diff.shared_function_list).isdisjoint(diff.unique_to_a + diff.unique_to_b)
