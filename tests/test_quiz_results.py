import pytest

from typeforge.errors import InvalidInputError
from typeforge.generator import generate_character
from typeforge.quiz_questions import questions_for, realm_questions_for
from typeforge.quiz_results import DEEP_KIT, QUICK_KIT, compute_quiz_results, get_scorer_kit
from typeforge.types import MBTI_TYPES, SOCIONICS_TYPES, SYSTEM_IDS, QuizOption, QuizQuestion


def _q(qid, system, *weights):
    return QuizQuestion(
        id=qid,
        system=system,
        prompt=f"prompt {qid}",
        options=tuple(QuizOption(label=f"{qid}-{i}", weights=w) for i, w in enumerate(weights)),
    )


QUESTIONS = [
    _q("a1", "attitudinal", {"V": 1}, {"L": 1}),
    _q("a2", "attitudinal", {"E": 1}, {"F": 1}),
    _q("e1", "enneagram", {"5": 3, "4": 1}, {"8": 3}),
    _q("e2", "enneagram", {"sp": 2}, {"sx": 2}),
    _q("m1", "mbti", {"EI": 2}, {"EI": -2}),
    _q("m2", "mbti", {"SN": 1}, {"SN": -1}),
    _q("m3", "mbti", {"TF": 2}, {"TF": -2}),
    _q("m4", "mbti", {"JP": 1}, {"JP": -1}),
    _q("s1", "socionics", {"Alpha": 3}, {"Beta": 3}, {"Gamma": 3}, {"Delta": 3}),
    _q("c1", "instincts", {"SUR": 3}, {"INT": 3}, {"PUR": 3}),
]
REALM_QUESTIONS = [_q("r1", "instincts", {"FD": 3}, {"SY": 3}, {"SM": 3})]

ANSWERS = {
    "a1": 0,
    "a2": 0,
    "e1": 0,
    "e2": 0,
    "m1": 1,
    "m2": 1,
    "m3": 0,
    "m4": 0,
    "s1": 2,
    "c1": 0,
    "r1": 0,
}


def test_get_scorer_kit():
    assert get_scorer_kit("quick") is QUICK_KIT
    assert get_scorer_kit("deep") is DEEP_KIT
    with pytest.raises(InvalidInputError) as exc:
        get_scorer_kit("slow")
    assert exc.value.field == "mode"


def test_quick_results_for_all_systems():
    result = compute_quiz_results(ANSWERS, SYSTEM_IDS, QUESTIONS, REALM_QUESTIONS)

    assert result.attitudinal == "VELF"
    assert (result.enneagram_type, result.enneagram_wing, result.enneagram_instinct) == (5, 4, "sp")
    assert result.mbti == "INTJ"
    assert result.socionics == "ILI"
    assert result.instinct_realm == "FD"
    assert result.function_scores is None
    assert set(result.explanations) == set(SYSTEM_IDS)
    assert result.explanations["enneagram"].winner == "5w4 sp"


def test_disabled_systems_stay_none():
    result = compute_quiz_results(ANSWERS, ["mbti"], QUESTIONS, REALM_QUESTIONS)

    assert result.mbti == "INTJ"
    assert result.attitudinal is None
    assert result.enneagram_type is None
    assert result.socionics is None
    assert result.instinct_realm is None
    assert list(result.explanations) == ["mbti"]


def test_quick_socionics_needs_mbti():
    result = compute_quiz_results(ANSWERS, ["socionics"], QUESTIONS, REALM_QUESTIONS)
    assert result.socionics is None
    assert "socionics" not in result.explanations


def test_unknown_system_rejected():
    with pytest.raises(InvalidInputError) as exc:
        compute_quiz_results(ANSWERS, ["astrology"], QUESTIONS, REALM_QUESTIONS)
    assert exc.value.field == "enabled"


def test_results_feed_the_generator():
    result = compute_quiz_results(ANSWERS, SYSTEM_IDS, QUESTIONS, REALM_QUESTIONS)
    gen_input = result.to_generator_input(seed=4)

    assert gen_input.enneagram.type == 5
    assert gen_input.instincts.realm == "FD"
    character = generate_character(gen_input)
    assert character.active_systems == list(SYSTEM_IDS)
    assert character.archetype.class_name == "Expressive Sage (sp)"


def test_deep_results_with_real_banks():
    questions = questions_for("deep")
    answers = {q.id: 0 for q in questions}
    center = DEEP_KIT.score_instinct_center(answers, [q for q in questions if q.system == "instincts"])
    realm_questions = realm_questions_for("deep", center)
    answers.update({q.id: 0 for q in realm_questions})

    result = compute_quiz_results(answers, SYSTEM_IDS, questions, realm_questions, DEEP_KIT)

    assert result.mbti in MBTI_TYPES
    assert result.socionics in SOCIONICS_TYPES
    assert result.function_scores is not None
    assert set(result.function_scores) == {"Ti", "Te", "Fi", "Fe", "Si", "Se", "Ni", "Ne"}
    assert result.explanations["socionics"].axis_lean_summary[1].endswith("cross-scored from MBTI.")
    assert result.to_dict()["function_scores"] == result.function_scores


def test_deep_socionics_without_mbti():
    questions = questions_for("deep", ["socionics"])
    answers = {q.id: 1 for q in questions}

    result = compute_quiz_results(answers, ["socionics"], questions, [], DEEP_KIT)

    assert result.socionics in SOCIONICS_TYPES
    assert result.mbti is None
    assert result.explanations["socionics"].axis_lean_summary[1].endswith("from Socionics questions only.")


@pytest.mark.parametrize("kit", [QUICK_KIT, DEEP_KIT])
def test_scoring_twice_gives_equal_breakdowns(kit):
    if kit is QUICK_KIT:
        questions, realm, answers = QUESTIONS, REALM_QUESTIONS, ANSWERS
    else:
        questions = questions_for("deep")
        answers = {q.id: 0 for q in questions}
        center = kit.score_instinct_center(answers, [q for q in questions if q.system == "instincts"])
        realm = realm_questions_for("deep", center)
        answers.update({q.id: 0 for q in realm})

    first = compute_quiz_results(answers, SYSTEM_IDS, questions, realm, kit)
    second = compute_quiz_results(answers, SYSTEM_IDS, questions, realm, kit)

    assert first == second
    for system in SYSTEM_IDS:
        assert first.explanations[system] == second.explanations[system]
