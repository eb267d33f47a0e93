"""
Deep-mode quiz scorers.

Enneagram and instinct scoring is the same as quick mode; only the question
banks are longer. Attitudinal Psyche reuses the quick ordering with a higher
dominance threshold. MBTI and socionics switch from letter axes to
cognitive-function stack fit:

    fit = sum(POSITION_WEIGHTS[pos] * (7 - rank(stack[pos])))

where rank 0 is the highest scored function.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Tuple

from . import quiz_quick
from .mbti import FUNCTION_STACKS as MBTI_FUNCTION_STACKS
from .quiz_shared import (
    accumulate_score_map,
    answered_count,
    build_question_influence_list,
    ranked_keys,
    top_key,
)
from .socionics import FUNCTION_STACKS as SOCIONICS_FUNCTION_STACKS
from .socionics import type_club, type_quadra
from .types import (
    ASPECTS,
    CLUBS,
    COGNITIVE_FUNCTIONS,
    MBTI_TYPES,
    QUADRAS,
    SOCIONICS_TYPES,
    QuizQuestion,
    ScoreBreakdown,
    ScoreEntry,
)

POSITION_WEIGHTS: Tuple[int, int, int, int] = (4, 3, 2, 1)
QUADRA_BONUS = 6
CLUB_BONUS = 3
AP_DOMINANCE_MARGIN = 4

INFO_ELEMENT_PREFIX = "ie_"
INFO_ELEMENTS: Tuple[str, ...] = tuple(INFO_ELEMENT_PREFIX + fn for fn in COGNITIVE_FUNCTIONS)
# Information elements taken from MBTI function scores when MBTI answers exist.
CROSS_SCORED_FUNCTIONS: Tuple[str, ...] = ("Ne", "Ti", "Te")

Answers = Mapping[str, int]

score_enneagram = quiz_quick.score_enneagram
explain_enneagram = quiz_quick.explain_enneagram
score_instinct_center = quiz_quick.score_instinct_center
score_instinct_realm = quiz_quick.score_instinct_realm
score_instincts = quiz_quick.score_instincts
explain_instincts = quiz_quick.explain_instincts


def rank_map(scores: Mapping[str, int], keys: Sequence[str]) -> Dict[str, int]:
    """key -> rank (0 = highest). Ties keep the order of `keys`."""
    return {key: i for i, key in enumerate(ranked_keys(scores, keys))}


def stack_fit(stack: Sequence[str], ranks: Mapping[str, int]) -> int:
    return sum(POSITION_WEIGHTS[pos] * (7 - ranks[fn]) for pos, fn in enumerate(stack[:4]))


# --- Attitudinal Psyche ------------------------------------------------------


def score_attitudinal(answers: Answers, questions: Sequence[QuizQuestion]) -> str:
    return quiz_quick.score_attitudinal(answers, questions)


def explain_attitudinal(answers: Answers, questions: Sequence[QuizQuestion]) -> ScoreBreakdown:
    wins = accumulate_score_map(answers, questions, ASPECTS)
    answered = answered_count(answers, questions)
    ranked = ranked_keys(wins, ASPECTS)
    first, second = ranked[0], ranked[1]
    margin = wins[first] - wins[second]

    summary = [f"{first} scored {wins[first]} (1st), {second} scored {wins[second]} (2nd)."]
    if margin >= AP_DOMINANCE_MARGIN:
        summary.append(f"Clear {first} dominance.")

    return ScoreBreakdown(
        scores=wins,
        winner=score_attitudinal(answers, questions),
        winner_margin=margin,
        axis_lean_summary=summary,
        score_detail=[f"{a}: {wins[a]}" for a in ranked],
        score_entries=[ScoreEntry(label=a, score=wins[a], max_possible=answered) for a in ranked],
        question_influences=build_question_influence_list(answers, questions, ASPECTS),
    )


# --- MBTI --------------------------------------------------------------------


def _mbti_fits(function_scores: Mapping[str, int]) -> List[Tuple[str, int]]:
    ranks = rank_map(function_scores, COGNITIVE_FUNCTIONS)
    return [(t, stack_fit(MBTI_FUNCTION_STACKS[t], ranks)) for t in MBTI_TYPES]


def score_mbti(answers: Answers, questions: Sequence[QuizQuestion]) -> Tuple[str, Dict[str, int]]:
    """(best-fitting type, raw function scores).

    Equal fits go to the type whose hero function scored higher, then to the
    earlier type in MBTI_TYPES order.
    """
    function_scores = accumulate_score_map(answers, questions, COGNITIVE_FUNCTIONS)

    best_type = MBTI_TYPES[0]
    best_fit = None
    best_hero = None
    for mbti_type, fit in _mbti_fits(function_scores):
        hero = function_scores[MBTI_FUNCTION_STACKS[mbti_type][0]]
        if best_fit is None or fit > best_fit or (fit == best_fit and hero > best_hero):
            best_type, best_fit, best_hero = mbti_type, fit, hero
    return best_type, function_scores


def explain_mbti(answers: Answers, questions: Sequence[QuizQuestion]) -> ScoreBreakdown:
    mbti_type, function_scores = score_mbti(answers, questions)
    ranked_fns = ranked_keys(function_scores, COGNITIVE_FUNCTIONS)
    fits = sorted(_mbti_fits(function_scores), key=lambda tf: -tf[1])
    top3 = fits[:3]
    margin = top3[0][1] - top3[1][1]

    first_fn, second_fn = ranked_fns[0], ranked_fns[1]
    summary = [
        f"Function-based: {top3[0][0]} (fit: {top3[0][1]}), {top3[1][0]} (fit: {top3[1][1]}). Margin: {margin}.",
        f"Top functions: {first_fn} ({function_scores[first_fn]}), {second_fn} ({function_scores[second_fn]}).",
    ]
    detail = [f"{fn}: {function_scores[fn]}" for fn in ranked_fns]
    detail.append("---")
    detail += [f"{t}: fit {fit}" for t, fit in top3]

    top_score = function_scores[first_fn]
    return ScoreBreakdown(
        scores=function_scores,
        winner=mbti_type,
        axis_lean_summary=summary,
        score_detail=detail,
        score_entries=[
            ScoreEntry(label=fn, score=function_scores[fn], max_possible=top_score) for fn in ranked_fns
        ],
        question_influences=build_question_influence_list(answers, questions, COGNITIVE_FUNCTIONS),
    )


# --- Socionics ---------------------------------------------------------------


def info_element_scores(
    answers: Answers,
    questions: Sequence[QuizQuestion],
    mbti_questions: Sequence[QuizQuestion] = (),
) -> Dict[str, int]:
    """Scores keyed by function name (Ti, Te, ...), read from the ie_* weights.

    When MBTI questions are given, Ne, Ti and Te are replaced by the MBTI
    function scores.
    """
    raw = accumulate_score_map(answers, questions, INFO_ELEMENTS)
    scores = {key[len(INFO_ELEMENT_PREFIX):]: value for key, value in raw.items()}
    if mbti_questions:
        mbti_scores = accumulate_score_map(answers, mbti_questions, COGNITIVE_FUNCTIONS)
        for fn in CROSS_SCORED_FUNCTIONS:
            scores[fn] = mbti_scores[fn]
    return scores


def _socionics_totals(
    answers: Answers,
    questions: Sequence[QuizQuestion],
    mbti_questions: Sequence[QuizQuestion],
) -> List[Tuple[str, int]]:
    group_scores = accumulate_score_map(answers, questions, QUADRAS + CLUBS)
    ranks = rank_map(info_element_scores(answers, questions, mbti_questions), COGNITIVE_FUNCTIONS)
    best_quadra = top_key(group_scores, QUADRAS)
    best_club = top_key(group_scores, CLUBS)

    totals = []
    for soc_type in SOCIONICS_TYPES:
        total = stack_fit(SOCIONICS_FUNCTION_STACKS[soc_type], ranks)
        if type_quadra(soc_type) == best_quadra:
            total += QUADRA_BONUS
        if type_club(soc_type) == best_club:
            total += CLUB_BONUS
        totals.append((soc_type, total))
    return totals


def score_socionics(
    answers: Answers,
    questions: Sequence[QuizQuestion],
    mbti_questions: Sequence[QuizQuestion] = (),
) -> str:
    """Stack fit plus quadra and club bonuses; the first best total wins."""
    best_type, best_total = None, None
    for soc_type, total in _socionics_totals(answers, questions, mbti_questions):
        if best_total is None or total > best_total:
            best_type, best_total = soc_type, total
    return best_type


def explain_socionics(
    answers: Answers,
    questions: Sequence[QuizQuestion],
    mbti_questions: Sequence[QuizQuestion] = (),
) -> ScoreBreakdown:
    group_scores = accumulate_score_map(answers, questions, QUADRAS + CLUBS)
    element_scores = info_element_scores(answers, questions, mbti_questions)
    ranked_fns = ranked_keys(element_scores, COGNITIVE_FUNCTIONS)
    ranked_quadras = ranked_keys(group_scores, QUADRAS)
    ranked_clubs = ranked_keys(group_scores, CLUBS)
    answered = answered_count(answers, questions)

    if mbti_questions:
        cross_note = "Ti/Te/Ne cross-scored from MBTI."
    else:
        cross_note = "No MBTI data; Ti/Te/Ne from Socionics questions only."

    q1, q2 = ranked_quadras[0], ranked_quadras[1]
    f1, f2 = ranked_fns[0], ranked_fns[1]
    summary = [
        f"Quadra: {q1} ({group_scores[q1]}), runner-up {q2} ({group_scores[q2]}).",
        f"Top functions: {f1} ({element_scores[f1]}), {f2} ({element_scores[f2]}). {cross_note}",
    ]
    detail = [f"{fn}: {element_scores[fn]}" for fn in ranked_fns]
    detail.append("---")
    detail += [f"{q}: {group_scores[q]}" for q in ranked_quadras]
    detail += [f"{c}: {group_scores[c]}" for c in ranked_clubs]

    return ScoreBreakdown(
        scores=dict(group_scores),
        winner=score_socionics(answers, questions, mbti_questions),
        winner_margin=group_scores[q1] - group_scores[q2],
        axis_lean_summary=summary,
        score_detail=detail,
        score_entries=[ScoreEntry(label=q, score=group_scores[q], max_possible=answered) for q in ranked_quadras]
        + [ScoreEntry(label=c, score=group_scores[c], max_possible=answered) for c in ranked_clubs],
        question_influences=build_question_influence_list(answers, questions, QUADRAS + CLUBS),
    )
