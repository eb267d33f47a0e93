"""Typeforge package.

Rules engine that turns personality typology selections (Attitudinal Psyche,
Enneagram, MBTI, Socionics, Expanded Instincts) into game characters, plus
the comparison, edit and quiz layers built on top of it.
"""

from .comparison import compute_character_diff  # re-export entry points
from .edits import apply_edits, is_stat_budget_valid
from .errors import InvalidInputError, QuizStateError, TypeforgeError
from .generator import generate_character, validate_generator_input
from .quiz_session import QuizSession
from .types import Character, CharacterEdits, GeneratorInput, QuizResult

__all__ = [
    "config",
    "types",
    "stats",
    "attitudinal",
    "enneagram",
    "mbti",
    "socionics",
    "instincts",
    "names",
    "generator",
    "edits",
    "comparison",
    "summary",
    "llm_client",
    "quiz_shared",
    "quiz_quick",
    "quiz_deep",
    "quiz_results",
    "quiz_session",
    "quiz_questions",
    # re-exports
    "Character",
    "CharacterEdits",
    "GeneratorInput",
    "QuizResult",
    "QuizSession",
    "TypeforgeError",
    "InvalidInputError",
    "QuizStateError",
    "generate_character",
    "validate_generator_input",
    "apply_edits",
    "is_stat_budget_valid",
    "compute_character_diff",
]
