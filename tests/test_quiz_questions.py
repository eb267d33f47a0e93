import pytest

from typeforge.errors import InvalidInputError
from typeforge.quiz_deep import INFO_ELEMENTS
from typeforge.quiz_questions import (
    QUESTION_BANKS,
    REALM_BANKS,
    SECTION_INTROS,
    find_question,
    is_realm_question_id,
    questions_for,
    realm_questions_for,
)
from typeforge.quiz_quick import ENNEAGRAM_TYPE_KEYS, MBTI_AXES
from typeforge.instincts import realms_by_center
from typeforge.types import (
    ASPECTS,
    CLUBS,
    COGNITIVE_FUNCTIONS,
    ENNEAGRAM_INSTINCTS,
    INSTINCT_CENTERS,
    QUADRAS,
    QUIZ_MODES,
    SYSTEM_IDS,
)

VALID_KEYS = {
    "quick": {
        "attitudinal": set(ASPECTS),
        "enneagram": set(ENNEAGRAM_TYPE_KEYS) | set(ENNEAGRAM_INSTINCTS),
        "mbti": set(MBTI_AXES),
        "socionics": set(QUADRAS),
        "instincts": set(INSTINCT_CENTERS),
    },
    "deep": {
        "attitudinal": set(ASPECTS),
        "enneagram": set(ENNEAGRAM_TYPE_KEYS) | set(ENNEAGRAM_INSTINCTS),
        "mbti": set(COGNITIVE_FUNCTIONS),
        "socionics": set(QUADRAS) | set(CLUBS) | set(INFO_ELEMENTS),
        "instincts": set(INSTINCT_CENTERS),
    },
}


def test_bank_sizes():
    quick = QUESTION_BANKS["quick"]
    deep = QUESTION_BANKS["deep"]
    assert [len(quick[s]) for s in SYSTEM_IDS] == [6, 15, 12, 4, 3]
    assert [len(deep[s]) for s in SYSTEM_IDS] == [12, 16, 16, 16, 6]
    for center in INSTINCT_CENTERS:
        assert len(REALM_BANKS["quick"][center]) == 5
        assert len(REALM_BANKS["deep"][center]) == 4


@pytest.mark.parametrize("mode", QUIZ_MODES)
def test_question_ids_unique(mode):
    ids = [q.id for q in questions_for(mode)]
    ids += [q.id for center in INSTINCT_CENTERS for q in realm_questions_for(mode, center)]
    assert len(ids) == len(set(ids))


@pytest.mark.parametrize("mode", QUIZ_MODES)
def test_weight_keys_are_valid(mode):
    for question in questions_for(mode):
        assert len(question.options) >= 2
        for option in question.options:
            assert option.weights, question.id
            assert set(option.weights) <= VALID_KEYS[mode][question.system], question.id


@pytest.mark.parametrize("mode", QUIZ_MODES)
def test_realm_questions_stay_inside_their_center(mode):
    for center in INSTINCT_CENTERS:
        realms = set(realms_by_center(center))
        for question in realm_questions_for(mode, center):
            assert question.system == "instincts"
            assert is_realm_question_id(question.id)
            for option in question.options:
                assert set(option.weights) <= realms, question.id


def test_questions_for_filters_in_system_order():
    questions = questions_for("quick", ["instincts", "attitudinal"])
    systems = [q.system for q in questions]
    assert systems == ["attitudinal"] * 6 + ["instincts"] * 3
    assert questions_for("quick", []) == []


def test_center_questions_are_not_realm_questions():
    assert not is_realm_question_id("inst-1")
    assert not is_realm_question_id("deep-inst-4")
    assert is_realm_question_id("inst-pur-2")
    assert is_realm_question_id("deep-inst-int-1")


def test_find_question():
    assert find_question("quick", "ap-1").system == "attitudinal"
    assert find_question("quick", "inst-sur-1").system == "instincts"
    assert find_question("quick", "deep-ap-1") is None
    assert find_question("deep", "deep-ap-1") is not None


def test_invalid_mode_and_center():
    with pytest.raises(InvalidInputError):
        questions_for("slow")
    with pytest.raises(InvalidInputError):
        realm_questions_for("quick", "XYZ")


def test_section_intros_cover_every_system():
    assert set(SECTION_INTROS) == set(SYSTEM_IDS)
