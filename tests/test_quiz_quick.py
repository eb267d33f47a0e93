from typeforge.quiz_quick import (
    explain_attitudinal,
    explain_enneagram,
    explain_instincts,
    explain_mbti,
    explain_socionics,
    lean_strength,
    mbti_overlap,
    order_aspects,
    score_attitudinal,
    score_enneagram,
    score_instinct_center,
    score_instincts,
    score_mbti,
    score_socionics,
)
from typeforge.types import QuizOption, QuizQuestion


def _q(qid, system, *weights):
    return QuizQuestion(
        id=qid,
        system=system,
        prompt=f"prompt {qid}",
        options=tuple(QuizOption(label=f"{qid}-{i}", weights=w) for i, w in enumerate(weights)),
    )


# --- Attitudinal Psyche ---

AP_QUESTIONS = [
    _q("a1", "attitudinal", {"V": 1}, {"L": 1}),
    _q("a2", "attitudinal", {"V": 1}, {"E": 1}),
    _q("a3", "attitudinal", {"V": 1}, {"F": 1}),
    _q("a4", "attitudinal", {"L": 1}, {"E": 1}),
    _q("a5", "attitudinal", {"L": 1}, {"F": 1}),
    _q("a6", "attitudinal", {"E": 1}, {"F": 1}),
]


def test_order_aspects_breaks_ties_v_l_e_f():
    assert order_aspects({"V": 1, "L": 3, "E": 1, "F": 0}) == ["L", "V", "E", "F"]
    assert order_aspects({}) == ["V", "L", "E", "F"]
    assert order_aspects({"F": 2, "E": 2, "L": 1, "V": 1}) == ["E", "F", "V", "L"]


def test_score_attitudinal():
    answers = {"a1": 1, "a2": 1, "a3": 0, "a4": 0, "a5": 0, "a6": 0}
    # L 3, E 2, V 1, F 0
    assert score_attitudinal(answers, AP_QUESTIONS) == "LEVF"


def test_explain_attitudinal():
    answers = {"a1": 1, "a2": 1, "a3": 0, "a4": 0, "a5": 0, "a6": 0}
    breakdown = explain_attitudinal(answers, AP_QUESTIONS)

    assert breakdown.winner == "LEVF"
    assert breakdown.winner_margin == 1
    assert breakdown.axis_lean_summary == ["L won 3 comparisons (1st), E won 2 (2nd)."]
    assert breakdown.score_detail[0] == "L: 3 wins"
    assert [e.max_possible for e in breakdown.score_entries] == [6, 6, 6, 6]
    assert [i.question_id for i in breakdown.question_influences] == ["a1", "a2", "a3", "a4", "a5", "a6"]


def test_explain_attitudinal_dominance():
    questions = [_q("d1", "attitudinal", {"V": 3}, {"L": 1})]
    breakdown = explain_attitudinal({"d1": 0}, questions)
    assert breakdown.axis_lean_summary[-1] == "Clear V dominance."


# --- Enneagram ---

ENN_QUESTIONS = [
    _q("e1", "enneagram", {"5": 3, "4": 1}, {"8": 3}),
    _q("e2", "enneagram", {"5": 2, "6": 1}, {"1": 2}),
    _q("e3", "enneagram", {"sp": 2}, {"sx": 2}),
    _q("e4", "enneagram", {"4": 1, "so": 1}, {"6": 2}),
]


def test_score_enneagram():
    assert score_enneagram({"e1": 0, "e2": 0, "e3": 0, "e4": 0}, ENN_QUESTIONS) == (5, 4, "sp")
    assert score_enneagram({"e1": 0, "e2": 0, "e3": 1, "e4": 1}, ENN_QUESTIONS) == (5, 6, "sx")


def test_score_enneagram_ties():
    # 4 and 6 tie as wings of 5; the first wing wins. No instinct answers -> sp.
    assert score_enneagram({"e1": 0, "e2": 0}, ENN_QUESTIONS) == (5, 4, "sp")


def test_explain_enneagram():
    breakdown = explain_enneagram({"e1": 0, "e2": 0, "e3": 0, "e4": 0}, ENN_QUESTIONS)

    assert breakdown.winner == "5w4 sp"
    assert breakdown.winner_margin == 3
    assert breakdown.axis_lean_summary == [
        "Type 5 scored 5 (Sage), Type 4 scored 2 (runner-up).",
        "sp led with 2 points.",
    ]
    assert breakdown.score_detail[:3] == ["Type 5 (Sage): 5", "Type 4 (Bard): 2", "Type 6 (Sentinel): 1"]
    type_entries = [e for e in breakdown.score_entries if e.label.startswith("Type")]
    assert len(type_entries) == 9
    assert type_entries[0].max_possible == 6
    assert breakdown.scores["5"] == 5
    assert breakdown.scores["so"] == 1


# --- MBTI ---

MBTI_QUESTIONS = [
    _q("m1", "mbti", {"EI": 2}, {"EI": -2}),
    _q("m2", "mbti", {"SN": 1}, {"SN": -1}),
    _q("m3", "mbti", {"TF": 2}, {"TF": -2}),
    _q("m4", "mbti", {"JP": 1}, {"JP": -1}),
]


def test_score_mbti():
    assert score_mbti({"m1": 1, "m2": 1, "m3": 0, "m4": 0}, MBTI_QUESTIONS) == "INTJ"
    assert score_mbti({"m1": 0, "m2": 0, "m3": 1, "m4": 1}, MBTI_QUESTIONS) == "ESFP"
    # zero leans to the second letter
    assert score_mbti({}, MBTI_QUESTIONS) == "INFP"


def test_lean_strength():
    assert lean_strength(0) == "Slight"
    assert lean_strength(-1) == "Slight"
    assert lean_strength(2) == "Moderate"
    assert lean_strength(-3) == "Moderate"
    assert lean_strength(4) == "Strong"
    assert lean_strength(-7) == "Strong"


def test_explain_mbti():
    breakdown = explain_mbti({"m1": 1, "m2": 1, "m3": 0, "m4": 0}, MBTI_QUESTIONS)

    assert breakdown.winner == "INTJ"
    assert breakdown.axis_lean_summary == [
        "Moderate I preference (EI: -2).",
        "Slight N preference (SN: -1).",
        "Moderate T preference (TF: +2).",
        "Slight J preference (JP: +1).",
    ]
    assert [(e.label, e.score, e.max_possible) for e in breakdown.score_entries][0] == ("EI", 2, 1)


# --- Socionics ---

SOC_QUESTIONS = [
    _q("s1", "socionics", {"Alpha": 3}, {"Beta": 3}, {"Gamma": 3}, {"Delta": 3}),
    _q("s2", "socionics", {"Alpha": 3}, {"Beta": 3}, {"Gamma": 3}, {"Delta": 3}),
]


def test_mbti_overlap():
    assert mbti_overlap("INTJ", "INTJ") == 4
    assert mbti_overlap("INTJ", "ESFP") == 0
    assert mbti_overlap("INTJ", "INTP") == 3


def test_socionics_keeps_derived_type_when_quadra_agrees():
    assert score_socionics({"s1": 2, "s2": 2}, SOC_QUESTIONS, "INTJ") == "ILI"
    breakdown = explain_socionics({"s1": 2, "s2": 2}, SOC_QUESTIONS, "INTJ")
    assert breakdown.winner == "ILI"
    assert breakdown.axis_lean_summary[-1] == "Derived ILI matched Gamma, keeping result."


def test_socionics_overridden_by_quadra():
    # Alpha types: ILE (ENTP), SEI (ISFP), ESE (ESFJ), LII (INTP); INTP overlaps INTJ most
    assert score_socionics({"s1": 0, "s2": 0}, SOC_QUESTIONS, "INTJ") == "LII"
    breakdown = explain_socionics({"s1": 0, "s2": 0}, SOC_QUESTIONS, "INTJ")
    assert breakdown.axis_lean_summary == [
        "Alpha scored 6, Beta scored 0.",
        "Derived ILI (Gamma) overridden by Alpha preference.",
    ]
    assert breakdown.winner_margin == 6


# --- Expanded Instincts ---

CENTER_QUESTIONS = [
    _q("c1", "instincts", {"SUR": 3}, {"INT": 3}, {"PUR": 3}),
    _q("c2", "instincts", {"SUR": 3}, {"INT": 3}, {"PUR": 3}),
]
INT_REALM_QUESTIONS = [
    _q("r1", "instincts", {"AY": 3}, {"CY": 3}, {"BG": 3}),
    _q("r2", "instincts", {"CY": 3, "AY": 1}, {"BG": 3}),
]


def test_score_instincts_two_stage():
    answers = {"c1": 1, "c2": 1, "r1": 0, "r2": 0}
    assert score_instinct_center(answers, CENTER_QUESTIONS) == "INT"
    assert score_instincts(answers, CENTER_QUESTIONS, INT_REALM_QUESTIONS) == "AY"


def test_realm_weights_outside_center_are_ignored():
    questions = [_q("r9", "instincts", {"FD": 9, "BG": 1})]
    answers = {"c1": 1, "c2": 1, "r9": 0}
    assert score_instincts(answers, CENTER_QUESTIONS, questions) == "BG"


def test_explain_instincts():
    answers = {"c1": 1, "c2": 1, "r1": 0, "r2": 0}
    breakdown = explain_instincts(answers, CENTER_QUESTIONS, INT_REALM_QUESTIONS, "INT")

    assert breakdown.winner == "AY"
    assert breakdown.winner_margin == 6
    assert breakdown.axis_lean_summary == [
        "INT dominated (INT 6, SUR 0, PUR 0).",
        "Within INT: AY scored 4, CY scored 3.",
    ]
    assert [i.question_id for i in breakdown.question_influences] == ["c1", "c2", "r1", "r2"]
