import pytest

from typeforge.attitudinal import aspect_position, base_stats, describe_stack, is_ap_type
from typeforge.errors import InvalidInputError
from typeforge.types import AP_TYPES


def test_base_stats_follow_position_values():
    stats = base_stats("VELF")
    assert stats.willpower == 14
    assert stats.spirit == 10
    assert stats.intelligence == 7
    assert stats.vitality == 4


def test_every_ap_type_uses_each_position_value_once():
    assert len(AP_TYPES) == 24
    for code in AP_TYPES:
        values = sorted(base_stats(code).to_dict().values())
        assert values == [4, 7, 10, 14]


def test_aspect_position_is_one_based():
    assert aspect_position("LFEV", "L") == 1
    assert aspect_position("LFEV", "V") == 4


def test_describe_stack():
    stack = describe_stack("FLVE")
    assert [p.position for p in stack] == [1, 2, 3, 4]
    assert [p.aspect_code for p in stack] == ["F", "L", "V", "E"]
    assert stack[0].stat == "vitality"
    assert stack[0].stat_value == 14
    assert stack[0].attitude.orientation == "Result"
    assert stack[2].attitude.self_attitude == "-"
    assert stack[1].summary


@pytest.mark.parametrize("code", ["VLEE", "vlef", "VLE", "XLEF", ""])
def test_invalid_codes_rejected(code):
    assert not is_ap_type(code)
    with pytest.raises(InvalidInputError) as exc:
        base_stats(code)
    assert exc.value.field == "attitudinal"
