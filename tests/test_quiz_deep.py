from typeforge.quiz_deep import (
    explain_attitudinal,
    explain_mbti,
    explain_socionics,
    info_element_scores,
    rank_map,
    score_mbti,
    score_socionics,
    stack_fit,
)
from typeforge.types import COGNITIVE_FUNCTIONS, MBTI_TYPES, QuizOption, QuizQuestion


def _q(qid, system, *weights):
    return QuizQuestion(
        id=qid,
        system=system,
        prompt=f"prompt {qid}",
        options=tuple(QuizOption(label=f"{qid}-{i}", weights=w) for i, w in enumerate(weights)),
    )


FUNCTION_QUESTIONS = [
    _q("f1", "mbti", {"Ni": 3}, {"Ne": 3}),
    _q("f2", "mbti", {"Te": 2}, {"Ti": 2}),
    _q("f3", "mbti", {"Fi": 1}, {"Fe": 1}),
    _q("f4", "mbti", {"Se": 1}, {"Si": 1}),
]

INTJ_ANSWERS = {"f1": 0, "f2": 0, "f3": 0, "f4": 0}


def test_rank_map_keeps_key_order_on_ties():
    ranks = rank_map({"Ni": 3, "Te": 2, "Fi": 1, "Se": 1}, COGNITIVE_FUNCTIONS)
    assert ranks["Ni"] == 0
    assert ranks["Te"] == 1
    assert ranks["Fi"] == 2
    assert ranks["Se"] == 3
    assert ranks["Ti"] == 4
    assert ranks["Ne"] == 7


def test_stack_fit_weights_positions():
    ranks = {"Ni": 0, "Te": 1, "Fi": 2, "Se": 3}
    # 4*7 + 3*6 + 2*5 + 1*4
    assert stack_fit(("Ni", "Te", "Fi", "Se"), ranks) == 60


def test_score_mbti_by_stack_fit():
    mbti, function_scores = score_mbti(INTJ_ANSWERS, FUNCTION_QUESTIONS)
    assert mbti == "INTJ"
    assert function_scores["Ni"] == 3
    assert function_scores["Te"] == 2
    assert function_scores["Ne"] == 0

    mbti, _ = score_mbti({"f1": 1, "f2": 1, "f3": 1, "f4": 1}, FUNCTION_QUESTIONS)
    # Ne, Ti, Fe, Si
    assert mbti == "ENTP"


def test_score_mbti_without_answers_is_deterministic():
    first = score_mbti({}, FUNCTION_QUESTIONS)
    assert first == score_mbti({}, FUNCTION_QUESTIONS)
    assert first[0] in MBTI_TYPES


def test_explain_mbti():
    breakdown = explain_mbti(INTJ_ANSWERS, FUNCTION_QUESTIONS)

    assert breakdown.winner == "INTJ"
    assert breakdown.axis_lean_summary[0].startswith("Function-based: INTJ (fit: 60)")
    assert breakdown.axis_lean_summary[1] == "Top functions: Ni (3), Te (2)."
    assert "---" in breakdown.score_detail
    assert breakdown.score_entries[0].label == "Ni"
    assert all(e.max_possible == 3 for e in breakdown.score_entries)


def test_explain_attitudinal_uses_higher_dominance_threshold():
    questions = [_q("a1", "attitudinal", {"V": 3}, {"L": 3}), _q("a2", "attitudinal", {"V": 1}, {"E": 1})]
    breakdown = explain_attitudinal({"a1": 0}, questions)
    assert breakdown.winner_margin == 3
    assert breakdown.axis_lean_summary == ["V scored 3 (1st), L scored 0 (2nd)."]

    breakdown = explain_attitudinal({"a1": 0, "a2": 0}, questions)
    assert breakdown.axis_lean_summary[-1] == "Clear V dominance."


# --- Socionics ---

SOC_QUESTIONS = [
    _q("d1", "socionics", {"ie_Ni": 4}, {"ie_Ne": 4}),
    _q("d2", "socionics", {"ie_Te": 3}, {"ie_Ti": 3}),
    _q("d3", "socionics", {"ie_Si": 2}, {"ie_Se": 2}),
    _q("d4", "socionics", {"ie_Fe": 1}, {"ie_Fi": 1}),
    _q("g1", "socionics", {"Gamma": 2}, {"Alpha": 2}),
    _q("k1", "socionics", {"Researcher": 2}, {"Social": 2}),
]

ILI_ANSWERS = {"d1": 0, "d2": 0, "d3": 0, "d4": 0, "g1": 0, "k1": 0}


def test_info_element_scores_keyed_by_function():
    scores = info_element_scores(ILI_ANSWERS, SOC_QUESTIONS)
    assert scores["Ni"] == 4
    assert scores["Te"] == 3
    assert scores["Ne"] == 0
    assert set(scores) == set(COGNITIVE_FUNCTIONS)


def test_info_element_scores_cross_fed_from_mbti():
    answers = {"d1": 1, "d2": 0, "f1": 0, "f2": 1}
    plain = info_element_scores(answers, SOC_QUESTIONS)
    assert plain["Ne"] == 4
    assert plain["Te"] == 3

    crossed = info_element_scores(answers, SOC_QUESTIONS, FUNCTION_QUESTIONS)
    # Ne, Ti and Te come from the MBTI answers
    assert crossed["Ne"] == 0
    assert crossed["Te"] == 0
    assert crossed["Ti"] == 2
    # other elements stay with the socionics answers
    assert crossed["Ni"] == 0


def test_score_socionics_stack_fit_and_bonuses():
    assert score_socionics(ILI_ANSWERS, SOC_QUESTIONS) == "ILI"


def test_quadra_bonus_can_tip_a_close_fit():
    # Only Ni and Fe scored. With no quadra answer the bonus falls to Alpha and EIE
    # has the best plain fit; a Gamma answer lifts LIE above it.
    assert score_socionics({"d1": 0, "d4": 0}, SOC_QUESTIONS) == "EIE"
    assert score_socionics({"d1": 0, "d4": 0, "g1": 0}, SOC_QUESTIONS) == "LIE"


def test_explain_socionics():
    breakdown = explain_socionics(ILI_ANSWERS, SOC_QUESTIONS)

    assert breakdown.winner == "ILI"
    assert breakdown.axis_lean_summary[0] == "Quadra: Gamma (2), runner-up Alpha (0)."
    assert breakdown.axis_lean_summary[1].endswith("No MBTI data; Ti/Te/Ne from Socionics questions only.")
    assert breakdown.winner_margin == 2
    assert [e.label for e in breakdown.score_entries][:4] == ["Gamma", "Alpha", "Beta", "Delta"]

    crossed = explain_socionics(ILI_ANSWERS, SOC_QUESTIONS, FUNCTION_QUESTIONS)
    assert crossed.axis_lean_summary[1].endswith("Ti/Te/Ne cross-scored from MBTI.")
