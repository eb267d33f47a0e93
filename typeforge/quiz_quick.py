"""
Quick-mode quiz scorers, one pair of functions per system.

`score_*` returns the inferred type; `explain_*` returns a ScoreBreakdown
with the raw scores, the winner and the human-readable lean summary.
Nothing here mutates its inputs.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Tuple

from .enneagram import get_enneagram_type, get_wings
from .instincts import realms_by_center
from .quiz_shared import (
    ASPECT_PRIORITY,
    accumulate_score_map,
    answered_count,
    build_question_influence_list,
    ranked_keys,
    top_key,
)
from .socionics import MBTI_TO_SOCIONICS, SOCIONICS_TO_MBTI, type_quadra, types_by_quadra
from .types import (
    ASPECTS,
    ENNEAGRAM_INSTINCTS,
    ENNEAGRAM_NUMBERS,
    INSTINCT_CENTERS,
    QUADRAS,
    QuizQuestion,
    ScoreBreakdown,
    ScoreEntry,
)

MBTI_AXES: Tuple[str, ...] = ("EI", "SN", "TF", "JP")
AXIS_LETTERS: Dict[str, Tuple[str, str]] = {
    "EI": ("E", "I"),
    "SN": ("S", "N"),
    "TF": ("T", "F"),
    "JP": ("J", "P"),
}

ENNEAGRAM_TYPE_KEYS: Tuple[str, ...] = tuple(str(n) for n in ENNEAGRAM_NUMBERS)

AP_DOMINANCE_MARGIN = 3

Answers = Mapping[str, int]


# --- Attitudinal Psyche ------------------------------------------------------


def order_aspects(wins: Mapping[str, int]) -> List[str]:
    """Aspects by wins, ties broken V > L > E > F."""
    return sorted(ASPECTS, key=lambda a: (-wins.get(a, 0), ASPECT_PRIORITY.index(a)))


def score_attitudinal(answers: Answers, questions: Sequence[QuizQuestion]) -> str:
    wins = accumulate_score_map(answers, questions, ASPECTS)
    return "".join(order_aspects(wins))


def explain_attitudinal(answers: Answers, questions: Sequence[QuizQuestion]) -> ScoreBreakdown:
    wins = accumulate_score_map(answers, questions, ASPECTS)
    answered = answered_count(answers, questions)
    ranked = ranked_keys(wins, ASPECTS)
    first, second = ranked[0], ranked[1]
    margin = wins[first] - wins[second]

    summary = [f"{first} won {wins[first]} comparisons (1st), {second} won {wins[second]} (2nd)."]
    if margin >= AP_DOMINANCE_MARGIN:
        summary.append(f"Clear {first} dominance.")

    return ScoreBreakdown(
        scores=wins,
        winner="".join(order_aspects(wins)),
        winner_margin=margin,
        axis_lean_summary=summary,
        score_detail=[f"{a}: {wins[a]} wins" for a in ranked],
        score_entries=[ScoreEntry(label=a, score=wins[a], max_possible=answered) for a in ranked],
        question_influences=build_question_influence_list(answers, questions, ASPECTS),
    )


# --- Enneagram ---------------------------------------------------------------


def score_enneagram(answers: Answers, questions: Sequence[QuizQuestion]) -> Tuple[int, int, str]:
    """(type, wing, instinct). The first wing wins a tie."""
    type_scores = accumulate_score_map(answers, questions, ENNEAGRAM_TYPE_KEYS)
    instinct_scores = accumulate_score_map(answers, questions, ENNEAGRAM_INSTINCTS)

    type_number = int(top_key(type_scores, ENNEAGRAM_TYPE_KEYS))
    wing_a, wing_b = get_wings(type_number)
    wing = wing_a if type_scores[str(wing_a)] >= type_scores[str(wing_b)] else wing_b
    instinct = top_key(instinct_scores, ENNEAGRAM_INSTINCTS)
    return type_number, wing, instinct


def _max_type_points(questions: Sequence[QuizQuestion]) -> int:
    # Highest type weight of each question's first option, summed.
    total = 0
    for q in questions:
        weights = q.options[0].weights if q.options else {}
        total += max([0] + [v for k, v in weights.items() if k in ENNEAGRAM_TYPE_KEYS])
    return total


def explain_enneagram(answers: Answers, questions: Sequence[QuizQuestion]) -> ScoreBreakdown:
    type_scores = accumulate_score_map(answers, questions, ENNEAGRAM_TYPE_KEYS)
    instinct_scores = accumulate_score_map(answers, questions, ENNEAGRAM_INSTINCTS)

    ranked_types = ranked_keys(type_scores, ENNEAGRAM_TYPE_KEYS)
    ranked_instincts = ranked_keys(instinct_scores, ENNEAGRAM_INSTINCTS)
    top3 = ranked_types[:3]
    margin = type_scores[ranked_types[0]] - type_scores[ranked_types[1]]

    def class_of(key: str) -> str:
        return get_enneagram_type(int(key))["class_name"]

    leader, runner_up = top3[0], top3[1]
    lead_instinct = ranked_instincts[0]
    summary = [
        f"Type {leader} scored {type_scores[leader]} ({class_of(leader)}), "
        f"Type {runner_up} scored {type_scores[runner_up]} (runner-up).",
        f"{lead_instinct} led with {instinct_scores[lead_instinct]} points.",
    ]
    detail = [f"Type {t} ({class_of(t)}): {type_scores[t]}" for t in top3]
    detail += [f"{i}: {instinct_scores[i]}" for i in ranked_instincts]

    max_type = _max_type_points(questions)
    entries = [ScoreEntry(label=f"Type {t}", score=type_scores[t], max_possible=max_type) for t in ranked_types]
    entries += [
        ScoreEntry(label=i, score=instinct_scores[i], max_possible=len(questions)) for i in ranked_instincts
    ]

    type_number, wing, instinct = score_enneagram(answers, questions)
    scores = dict(type_scores)
    scores.update(instinct_scores)
    return ScoreBreakdown(
        scores=scores,
        winner=f"{type_number}w{wing} {instinct}",
        winner_margin=margin,
        axis_lean_summary=summary,
        score_detail=detail,
        score_entries=entries,
        question_influences=build_question_influence_list(
            answers, questions, ENNEAGRAM_TYPE_KEYS + ENNEAGRAM_INSTINCTS
        ),
    )


# --- MBTI --------------------------------------------------------------------


def _axis_letter(axis: str, score: int) -> str:
    first, second = AXIS_LETTERS[axis]
    return first if score > 0 else second


def score_mbti(answers: Answers, questions: Sequence[QuizQuestion]) -> str:
    """Positive axis scores pick E/S/T/J; zero or negative pick I/N/F/P."""
    axis_scores = accumulate_score_map(answers, questions, MBTI_AXES)
    return "".join(_axis_letter(axis, axis_scores[axis]) for axis in MBTI_AXES)


def lean_strength(score: int) -> str:
    magnitude = abs(score)
    if magnitude >= 4:
        return "Strong"
    if magnitude >= 2:
        return "Moderate"
    return "Slight"


def _questions_per_axis(questions: Sequence[QuizQuestion]) -> Dict[str, int]:
    counts = {axis: 0 for axis in MBTI_AXES}
    for q in questions:
        weights = q.options[0].weights if q.options else {}
        for key in weights:
            if key in counts:
                counts[key] += 1
    return counts


def explain_mbti(answers: Answers, questions: Sequence[QuizQuestion]) -> ScoreBreakdown:
    axis_scores = accumulate_score_map(answers, questions, MBTI_AXES)
    per_axis = _questions_per_axis(questions)

    summary = []
    for axis in MBTI_AXES:
        score = axis_scores[axis]
        sign = "+" if score > 0 else ""
        summary.append(
            f"{lean_strength(score)} {_axis_letter(axis, score)} preference ({axis}: {sign}{score})."
        )

    return ScoreBreakdown(
        scores=axis_scores,
        winner=score_mbti(answers, questions),
        axis_lean_summary=summary,
        score_detail=[f"{axis}: {axis_scores[axis]}" for axis in MBTI_AXES],
        score_entries=[
            ScoreEntry(label=axis, score=abs(axis_scores[axis]), max_possible=per_axis[axis])
            for axis in MBTI_AXES
        ],
        question_influences=build_question_influence_list(answers, questions, MBTI_AXES),
    )


# --- Socionics ---------------------------------------------------------------


def mbti_overlap(a: str, b: str) -> int:
    """Number of letter positions two MBTI codes share."""
    return sum(1 for x, y in zip(a, b) if x == y)


def score_socionics(answers: Answers, questions: Sequence[QuizQuestion], mbti_result: str) -> str:
    """Derive from the MBTI result, then defer to the scored quadra if it disagrees."""
    derived = MBTI_TO_SOCIONICS[mbti_result]
    quadra_scores = accumulate_score_map(answers, questions, QUADRAS)
    scored_quadra = top_key(quadra_scores, QUADRAS)
    if scored_quadra == type_quadra(derived):
        return derived

    best = None
    best_overlap = -1
    for candidate in types_by_quadra(scored_quadra):
        overlap = mbti_overlap(mbti_result, SOCIONICS_TO_MBTI[candidate])
        if overlap > best_overlap:
            best, best_overlap = candidate, overlap
    return best


def explain_socionics(
    answers: Answers, questions: Sequence[QuizQuestion], mbti_result: str
) -> ScoreBreakdown:
    derived = MBTI_TO_SOCIONICS[mbti_result]
    derived_quadra = type_quadra(derived)
    quadra_scores = accumulate_score_map(answers, questions, QUADRAS)
    ranked = ranked_keys(quadra_scores, QUADRAS)
    first, second = ranked[0], ranked[1]
    answered = answered_count(answers, questions)

    if first == derived_quadra:
        verdict = f"Derived {derived} matched {derived_quadra}, keeping result."
    else:
        verdict = f"Derived {derived} ({derived_quadra}) overridden by {first} preference."

    return ScoreBreakdown(
        scores=quadra_scores,
        winner=score_socionics(answers, questions, mbti_result),
        winner_margin=quadra_scores[first] - quadra_scores[second],
        axis_lean_summary=[f"{first} scored {quadra_scores[first]}, {second} scored {quadra_scores[second]}.", verdict],
        score_detail=[f"{q}: {quadra_scores[q]}" for q in ranked],
        score_entries=[ScoreEntry(label=q, score=quadra_scores[q], max_possible=answered) for q in ranked],
        question_influences=build_question_influence_list(answers, questions, QUADRAS),
    )


# --- Expanded Instincts ------------------------------------------------------


def score_instinct_center(answers: Answers, questions: Sequence[QuizQuestion]) -> str:
    center_scores = accumulate_score_map(answers, questions, INSTINCT_CENTERS)
    return top_key(center_scores, INSTINCT_CENTERS)


def score_instinct_realm(answers: Answers, questions: Sequence[QuizQuestion], center: str) -> str:
    realms = realms_by_center(center)
    realm_scores = accumulate_score_map(answers, questions, realms)
    return top_key(realm_scores, realms)


def score_instincts(
    answers: Answers,
    center_questions: Sequence[QuizQuestion],
    realm_questions: Sequence[QuizQuestion],
) -> str:
    """Two stages: pick the center, then the realm inside it."""
    center = score_instinct_center(answers, center_questions)
    return score_instinct_realm(answers, realm_questions, center)


def explain_instincts(
    answers: Answers,
    center_questions: Sequence[QuizQuestion],
    realm_questions: Sequence[QuizQuestion],
    center: str,
) -> ScoreBreakdown:
    center_scores = accumulate_score_map(answers, center_questions, INSTINCT_CENTERS)
    realms = realms_by_center(center)
    realm_scores = accumulate_score_map(answers, realm_questions, realms)

    ranked_centers = ranked_keys(center_scores, INSTINCT_CENTERS)
    ranked_realms = ranked_keys(realm_scores, realms)
    center_answered = answered_count(answers, center_questions)
    realm_answered = answered_count(answers, realm_questions)

    lead, runner_up = ranked_realms[0], ranked_realms[1]
    summary = [
        f"{ranked_centers[0]} dominated ("
        + ", ".join(f"{c} {center_scores[c]}" for c in ranked_centers)
        + ").",
        f"Within {center}: {lead} scored {realm_scores[lead]}, {runner_up} scored {realm_scores[runner_up]}.",
    ]

    scores = dict(center_scores)
    scores.update(realm_scores)
    influences = build_question_influence_list(answers, center_questions, INSTINCT_CENTERS)
    influences += build_question_influence_list(answers, realm_questions, realms)
    return ScoreBreakdown(
        scores=scores,
        winner=top_key(realm_scores, realms),
        winner_margin=center_scores[ranked_centers[0]] - center_scores[ranked_centers[1]],
        axis_lean_summary=summary,
        score_detail=[f"{c}: {center_scores[c]}" for c in ranked_centers]
        + [f"{r}: {realm_scores[r]}" for r in ranked_realms],
        score_entries=[
            ScoreEntry(label=c, score=center_scores[c], max_possible=center_answered) for c in ranked_centers
        ]
        + [ScoreEntry(label=r, score=realm_scores[r], max_possible=realm_answered) for r in ranked_realms],
        question_influences=influences,
    )
