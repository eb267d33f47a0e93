"""
Helpers shared by the quick and deep quiz scorers.

Answers are a plain mapping of question id -> selected option index. The
mapping's insertion order is the order the questions were answered in, which
is the order the influence trail replays them.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .errors import InvalidInputError
from .types import QuestionInfluence, QuizOption, QuizQuestion, ScoreContribution

# Tie priority when two aspects have the same number of wins.
ASPECT_PRIORITY = ("V", "L", "E", "F")


def _selected_option(question: QuizQuestion, index: int) -> QuizOption:
    if not isinstance(index, int) or index < 0 or index >= len(question.options):
        raise InvalidInputError(
            f"Answer {index!r} is out of range for question {question.id} "
            f"({len(question.options)} options)",
            field=f"answers.{question.id}",
        )
    return question.options[index]


def accumulate_score_map(
    answers: Mapping[str, int],
    questions: Sequence[QuizQuestion],
    valid_keys: Sequence[str],
) -> Dict[str, int]:
    """Sum the weights of every selected option, restricted to `valid_keys`.

    Every valid key starts at 0. Unanswered questions are skipped and weight
    keys outside `valid_keys` are ignored.
    """
    scores = {key: 0 for key in valid_keys}
    for question in questions:
        if question.id not in answers:
            continue
        option = _selected_option(question, answers[question.id])
        for key, weight in option.weights.items():
            if key in scores:
                scores[key] += weight
    return scores


def top_key(scores: Mapping[str, int], keys: Sequence[str]) -> str:
    """The key with the strictly highest score; the earliest key wins ties."""
    best = keys[0]
    for key in keys[1:]:
        if scores.get(key, 0) > scores.get(best, 0):
            best = key
    return best


def ranked_keys(scores: Mapping[str, int], keys: Sequence[str]) -> List[str]:
    """Keys sorted by score, highest first. sorted() keeps `keys` order for ties."""
    return sorted(keys, key=lambda k: -scores.get(k, 0))


def answered_count(answers: Mapping[str, int], questions: Iterable[QuizQuestion]) -> int:
    return sum(1 for q in questions if q.id in answers)


def build_question_influence_list(
    answers: Mapping[str, int],
    questions: Sequence[QuizQuestion],
    valid_keys: Sequence[str],
) -> List[QuestionInfluence]:
    """Replay trail of the answers that moved at least one valid key, in answer order."""
    by_id = {q.id: q for q in questions}
    valid = set(valid_keys)
    influences: List[QuestionInfluence] = []
    for question_id, index in answers.items():
        question: Optional[QuizQuestion] = by_id.get(question_id)
        if question is None:
            continue
        option = _selected_option(question, index)
        contributions = [
            ScoreContribution(target=key, points=weight)
            for key, weight in option.weights.items()
            if key in valid
        ]
        if not contributions:
            continue
        influences.append(
            QuestionInfluence(
                question_id=question.id,
                prompt=question.prompt,
                selected_option_label=option.label,
                contributions=contributions,
            )
        )
    return influences
