"""
Turn a finished answer map into a QuizResult.

A QuizScorerKit bundles one set of scorers. QUICK_KIT derives socionics from
the MBTI result; DEEP_KIT scores socionics from its own information-element
questions, cross-fed with the MBTI function questions when MBTI is enabled,
and keeps the raw function scores on the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Collection, Dict, List, Mapping, Optional, Sequence, Tuple

from . import quiz_deep, quiz_quick
from .errors import InvalidInputError
from .types import SYSTEM_IDS, QuizQuestion, QuizResult, ScoreBreakdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuizScorerKit:
    name: str
    score_attitudinal: Callable[..., str]
    explain_attitudinal: Callable[..., ScoreBreakdown]
    score_enneagram: Callable[..., Tuple[int, int, str]]
    explain_enneagram: Callable[..., ScoreBreakdown]
    # Returns (type, function scores or None).
    score_mbti: Callable[..., Tuple[str, Optional[Dict[str, int]]]]
    explain_mbti: Callable[..., ScoreBreakdown]
    score_socionics: Callable[..., str]
    explain_socionics: Callable[..., ScoreBreakdown]
    score_instinct_center: Callable[..., str]
    score_instinct_realm: Callable[..., str]
    explain_instincts: Callable[..., ScoreBreakdown]
    # True: socionics gets the MBTI questions. False: it gets the MBTI result.
    socionics_cross_feed: bool


QUICK_KIT = QuizScorerKit(
    name="quick",
    score_attitudinal=quiz_quick.score_attitudinal,
    explain_attitudinal=quiz_quick.explain_attitudinal,
    score_enneagram=quiz_quick.score_enneagram,
    explain_enneagram=quiz_quick.explain_enneagram,
    score_mbti=lambda answers, questions: (quiz_quick.score_mbti(answers, questions), None),
    explain_mbti=quiz_quick.explain_mbti,
    score_socionics=quiz_quick.score_socionics,
    explain_socionics=quiz_quick.explain_socionics,
    score_instinct_center=quiz_quick.score_instinct_center,
    score_instinct_realm=quiz_quick.score_instinct_realm,
    explain_instincts=quiz_quick.explain_instincts,
    socionics_cross_feed=False,
)

DEEP_KIT = QuizScorerKit(
    name="deep",
    score_attitudinal=quiz_deep.score_attitudinal,
    explain_attitudinal=quiz_deep.explain_attitudinal,
    score_enneagram=quiz_deep.score_enneagram,
    explain_enneagram=quiz_deep.explain_enneagram,
    score_mbti=quiz_deep.score_mbti,
    explain_mbti=quiz_deep.explain_mbti,
    score_socionics=quiz_deep.score_socionics,
    explain_socionics=quiz_deep.explain_socionics,
    score_instinct_center=quiz_deep.score_instinct_center,
    score_instinct_realm=quiz_deep.score_instinct_realm,
    explain_instincts=quiz_deep.explain_instincts,
    socionics_cross_feed=True,
)

SCORER_KITS: Dict[str, QuizScorerKit] = {"quick": QUICK_KIT, "deep": DEEP_KIT}


def get_scorer_kit(mode: str) -> QuizScorerKit:
    try:
        return SCORER_KITS[mode]
    except KeyError:
        raise InvalidInputError(f"Unknown quiz mode: {mode!r}", field="mode") from None


def _for_system(questions: Sequence[QuizQuestion], system: str) -> List[QuizQuestion]:
    return [q for q in questions if q.system == system]


def compute_quiz_results(
    answers: Mapping[str, int],
    enabled: Collection[str],
    questions: Sequence[QuizQuestion],
    realm_questions: Sequence[QuizQuestion],
    kit: QuizScorerKit = QUICK_KIT,
) -> QuizResult:
    """Score every enabled system. Disabled systems stay None.

    `questions` is the base question list (instinct center questions only);
    `realm_questions` are the realm questions of the chosen center.
    """
    for system in enabled:
        if system not in SYSTEM_IDS:
            raise InvalidInputError(f"Unknown system: {system!r}", field="enabled")

    fields: Dict[str, Any] = {}
    explanations: Dict[str, ScoreBreakdown] = {}

    if "attitudinal" in enabled:
        ap_questions = _for_system(questions, "attitudinal")
        fields["attitudinal"] = kit.score_attitudinal(answers, ap_questions)
        explanations["attitudinal"] = kit.explain_attitudinal(answers, ap_questions)

    if "enneagram" in enabled:
        enn_questions = _for_system(questions, "enneagram")
        type_number, wing, instinct = kit.score_enneagram(answers, enn_questions)
        fields["enneagram_type"] = type_number
        fields["enneagram_wing"] = wing
        fields["enneagram_instinct"] = instinct
        explanations["enneagram"] = kit.explain_enneagram(answers, enn_questions)

    mbti_questions = _for_system(questions, "mbti")
    if "mbti" in enabled:
        mbti_type, function_scores = kit.score_mbti(answers, mbti_questions)
        fields["mbti"] = mbti_type
        if function_scores is not None:
            fields["function_scores"] = function_scores
        explanations["mbti"] = kit.explain_mbti(answers, mbti_questions)

    if "socionics" in enabled:
        soc_questions = _for_system(questions, "socionics")
        if kit.socionics_cross_feed:
            cross = mbti_questions if "mbti" in enabled else []
            fields["socionics"] = kit.score_socionics(answers, soc_questions, cross)
            explanations["socionics"] = kit.explain_socionics(answers, soc_questions, cross)
        elif fields.get("mbti"):
            fields["socionics"] = kit.score_socionics(answers, soc_questions, fields["mbti"])
            explanations["socionics"] = kit.explain_socionics(answers, soc_questions, fields["mbti"])
        else:
            logger.debug("socionics enabled without MBTI in %s mode; leaving it unscored", kit.name)

    if "instincts" in enabled:
        center_questions = _for_system(questions, "instincts")
        center = kit.score_instinct_center(answers, center_questions)
        fields["instinct_realm"] = kit.score_instinct_realm(answers, realm_questions, center)
        explanations["instincts"] = kit.explain_instincts(answers, center_questions, realm_questions, center)

    result = QuizResult(explanations=explanations, **fields)
    logger.debug("quiz results (%s): %s", kit.name, {k: v for k, v in fields.items() if k != "function_scores"})
    return result
