import pytest

from typeforge.errors import InvalidInputError, QuizStateError
from typeforge.quiz_questions import questions_for, realm_questions_for
from typeforge.quiz_session import COMPLETE, IN_PROGRESS, RESULTS_COMPUTED, QuizSession
from typeforge.types import MBTI_TYPES


def _answer_base(session, index=0):
    for question in questions_for(session.mode, session.enabled):
        session.answer(question.id, index)


def _answer_realm(session, index=0):
    for question in session.realm_questions():
        session.answer(question.id, index)


def test_new_session_starts_in_progress():
    session = QuizSession()

    assert session.state == IN_PROGRESS
    assert not session.is_complete
    assert session.next_question().id == "ap-1"
    assert session.progress() == (0, len(questions_for("quick")))
    assert session.realm_questions() == []


def test_realm_stage_joins_after_center_questions():
    session = QuizSession()
    _answer_base(session)

    assert session.state == IN_PROGRESS
    realm = session.realm_questions()
    assert [q.id for q in realm] == [q.id for q in realm_questions_for("quick", "SUR")]
    answered, required = session.progress()
    assert required == len(questions_for("quick")) + len(realm)
    assert answered == len(questions_for("quick"))
    assert session.next_question().id == realm[0].id


def test_full_quick_run():
    session = QuizSession()
    _answer_base(session)
    _answer_realm(session)

    assert session.state == COMPLETE
    assert session.next_question() is None
    result = session.compute_results()

    assert session.state == RESULTS_COMPUTED
    assert session.result is result
    assert result.mbti in MBTI_TYPES
    assert result.instinct_realm in ("FD", "SY", "SM")
    assert result.socionics is not None


def test_full_deep_run():
    session = QuizSession(mode="deep")
    _answer_base(session)
    _answer_realm(session)

    result = session.compute_results()
    assert result.function_scores is not None
    assert result.mbti in MBTI_TYPES


def test_compute_before_complete_is_refused():
    session = QuizSession()
    session.answer("ap-1", 0)
    with pytest.raises(QuizStateError):
        session.compute_results()


def test_no_answers_after_results():
    session = QuizSession(enabled=["mbti"])
    _answer_base(session)
    session.compute_results()

    with pytest.raises(QuizStateError):
        session.answer("mbti-1", 1)
    with pytest.raises(QuizStateError):
        session.compute_results()


def test_answers_can_be_revised_before_results():
    session = QuizSession(enabled=["mbti"])
    _answer_base(session)
    assert session.state == COMPLETE

    session.answer("mbti-1", 1)
    assert session.answers["mbti-1"] == 1
    assert session.state == COMPLETE


def test_revision_that_reopens_the_quiz_is_refused():
    session = QuizSession(enabled=["instincts"])
    _answer_base(session)
    _answer_realm(session)
    assert session.state == COMPLETE

    # SUR 6 / INT 3 keeps the center, so this is fine
    session.answer("inst-1", 1)
    # INT 6 / SUR 3 would switch to unanswered INT realm questions
    with pytest.raises(QuizStateError):
        session.answer("inst-2", 1)
    assert session.answers["inst-2"] == 0
    assert session.state == COMPLETE


def test_invalid_answers():
    session = QuizSession(enabled=["attitudinal"])

    with pytest.raises(InvalidInputError):
        session.answer("no-such-question", 0)
    with pytest.raises(InvalidInputError):
        session.answer("mbti-1", 0)  # system not enabled
    with pytest.raises(InvalidInputError):
        session.answer("ap-1", 2)
    with pytest.raises(InvalidInputError):
        session.answer("ap-1", -1)
    assert session.answers == {}


def test_answer_all_keeps_order():
    session = QuizSession(enabled=["attitudinal"])
    ids = [q.id for q in questions_for("quick", ["attitudinal"])]
    session.answer_all({qid: 0 for qid in reversed(ids)})

    assert list(session.answers) == list(reversed(ids))
    result = session.compute_results()
    trail = result.explanations["attitudinal"].question_influences
    assert [i.question_id for i in trail] == list(reversed(ids))


def test_session_without_systems_is_complete():
    session = QuizSession(enabled=[])
    assert session.state == COMPLETE
    result = session.compute_results()
    assert result.explanations == {}
    assert result.mbti is None


def test_invalid_session_options():
    with pytest.raises(InvalidInputError):
        QuizSession(mode="slow")
    with pytest.raises(InvalidInputError):
        QuizSession(enabled=["astrology"])


def test_revised_answer_moves_to_end_of_trail():
    session = QuizSession(enabled=["attitudinal"])
    ids = [q.id for q in questions_for("quick", ["attitudinal"])]
    _answer_base(session)
    session.answer(ids[0], 1)

    assert list(session.answers) == ids[1:] + ids[:1]
    assert session.answers[ids[0]] == 1
    trail = session.compute_results().explanations["attitudinal"].question_influences
    assert [i.question_id for i in trail] == ids[1:] + ids[:1]
