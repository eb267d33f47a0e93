"""
QuizSession: one pass through the quiz.

States move forward only:

    IN_PROGRESS -> COMPLETE -> RESULTS_COMPUTED

The realm-stage questions depend on the instinct center, so they join the
required list once every center question has an answer. Answers may be
revised until results are computed, but a revision that would take a
complete session back to in-progress (for example by flipping the instinct
center) is refused. A revised answer counts as the latest one, so it moves to
the end of the answer order. Starting over means constructing a new session.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import InvalidInputError, QuizStateError
from .quiz_questions import find_question, questions_for, realm_questions_for
from .quiz_quick import score_instinct_center
from .quiz_results import compute_quiz_results, get_scorer_kit
from .types import SYSTEM_IDS, QuizQuestion, QuizResult

logger = logging.getLogger(__name__)

IN_PROGRESS = "in-progress"
COMPLETE = "complete"
RESULTS_COMPUTED = "results-computed"


class QuizSession:
    """Collects answers for the enabled systems and computes results once."""

    def __init__(self, mode: str = "quick", enabled: Optional[Iterable[str]] = None):
        self.kit = get_scorer_kit(mode)
        self.mode = mode
        enabled_set = set(SYSTEM_IDS if enabled is None else enabled)
        for system in enabled_set:
            if system not in SYSTEM_IDS:
                raise InvalidInputError(f"Unknown system: {system!r}", field="enabled")
        self.enabled: Tuple[str, ...] = tuple(s for s in SYSTEM_IDS if s in enabled_set)
        self.base_questions: List[QuizQuestion] = questions_for(mode, self.enabled)
        self.answers: Dict[str, int] = {}
        self.result: Optional[QuizResult] = None
        self._state = IN_PROGRESS if self.base_questions else COMPLETE

    @property
    def state(self) -> str:
        return self._state

    # --- Question flow ---

    def _center_questions(self) -> List[QuizQuestion]:
        return [q for q in self.base_questions if q.system == "instincts"]

    def _instinct_center(self, answers: Dict[str, int]) -> Optional[str]:
        center_questions = self._center_questions()
        if not center_questions or any(q.id not in answers for q in center_questions):
            return None
        return score_instinct_center(answers, center_questions)

    def _realm_questions(self, answers: Dict[str, int]) -> List[QuizQuestion]:
        center = self._instinct_center(answers)
        if center is None:
            return []
        return realm_questions_for(self.mode, center)

    def _required(self, answers: Dict[str, int]) -> List[QuizQuestion]:
        return self.base_questions + self._realm_questions(answers)

    def _is_complete(self, answers: Dict[str, int]) -> bool:
        if "instincts" in self.enabled and self._instinct_center(answers) is None:
            return False
        return all(q.id in answers for q in self._required(answers))

    def required_questions(self) -> List[QuizQuestion]:
        """Every question that currently needs an answer, in presentation order."""
        return self._required(self.answers)

    def realm_questions(self) -> List[QuizQuestion]:
        return self._realm_questions(self.answers)

    def next_question(self) -> Optional[QuizQuestion]:
        for question in self.required_questions():
            if question.id not in self.answers:
                return question
        return None

    def progress(self) -> Tuple[int, int]:
        """(answered, required) over the current required list."""
        required = self.required_questions()
        return sum(1 for q in required if q.id in self.answers), len(required)

    @property
    def is_complete(self) -> bool:
        return self._state in (COMPLETE, RESULTS_COMPUTED)

    # --- Transitions ---

    def answer(self, question_id: str, option_index: int) -> None:
        if self._state == RESULTS_COMPUTED:
            raise QuizStateError("Results have already been computed; start a new session to answer again")

        question = find_question(self.mode, question_id)
        if question is None or question.system not in self.enabled:
            raise InvalidInputError(f"Unknown question for this session: {question_id!r}", field="question_id")
        if not isinstance(option_index, int) or not 0 <= option_index < len(question.options):
            raise InvalidInputError(
                f"Option {option_index!r} is out of range for {question_id}", field="option_index"
            )

        updated = dict(self.answers)
        # A revised answer moves to the end of the influence trail.
        updated.pop(question_id, None)
        updated[question_id] = option_index
        complete = self._is_complete(updated)
        if self._state == COMPLETE and not complete:
            raise QuizStateError(f"Changing {question_id} would reopen a complete quiz")

        self.answers = updated
        if complete and self._state == IN_PROGRESS:
            self._state = COMPLETE
            logger.debug("quiz session complete (%s, %d answers)", self.mode, len(self.answers))

    def answer_all(self, answers: Dict[str, int]) -> None:
        """Answer in the mapping's order, which is also the influence-trail order."""
        for question_id, option_index in answers.items():
            self.answer(question_id, option_index)

    def compute_results(self) -> QuizResult:
        if self._state == IN_PROGRESS:
            answered, required = self.progress()
            raise QuizStateError(f"Quiz is not complete ({answered}/{required} answered)")
        if self._state == RESULTS_COMPUTED:
            raise QuizStateError("Results have already been computed for this session")

        self.result = compute_quiz_results(
            self.answers,
            self.enabled,
            self.base_questions,
            self.realm_questions(),
            self.kit,
        )
        self._state = RESULTS_COMPUTED
        return self.result
