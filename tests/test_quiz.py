import pytest

from aerolab.quiz.questions import QUIZ_ITEMS, QuizItem
from aerolab.quiz.sequencer import (
    COMPLETE_ICON, COMPLETE_TEXT, CORRECT_ICON, CORRECT_TEXT,
    INCORRECT_ICON, INCORRECT_TEXT, Feedback, QuizSequencer,
)


@pytest.fixture
def quiz():
    quiz = QuizSequencer()
    quiz.start()
    return quiz


def answer_correctly(quiz):
    feedback = quiz.answer(quiz.current_item.correct)
    quiz.show_next()
    return feedback


def test_fixed_three_questions():
    assert len(QUIZ_ITEMS) == 3
    for item in QUIZ_ITEMS:
        assert item.correct in item.options


def test_quiz_item_is_immutable():
    with pytest.raises(AttributeError):
        QUIZ_ITEMS[0].correct = "Friction"


def test_quiz_item_requires_correct_option():
    with pytest.raises(ValueError):
        QuizItem("Pick one", ["a", "b"], "c")


def test_start_shows_first_question(quiz):
    assert quiz.current_index == 0
    assert quiz.current_item is QUIZ_ITEMS[0]
    assert quiz.feedback == Feedback()


def test_correct_answer_advances_by_one(quiz):
    feedback = quiz.answer("Tailwind")
    assert feedback == Feedback(CORRECT_TEXT, "green", CORRECT_ICON)
    assert quiz.current_index == 1
    assert quiz.awaiting_next


def test_wrong_answer_keeps_index(quiz):
    feedback = quiz.answer("Friction")
    assert feedback == Feedback(INCORRECT_TEXT, "red", INCORRECT_ICON)
    assert quiz.current_index == 0
    assert not quiz.awaiting_next


def test_answers_ignored_during_delay(quiz):
    quiz.answer("Tailwind")
    assert quiz.answer("Friction") is None
    assert quiz.current_index == 1


def test_show_next_clears_feedback(quiz):
    quiz.answer("Tailwind")
    item = quiz.show_next()
    assert item is QUIZ_ITEMS[1]
    assert quiz.feedback == Feedback()
    assert quiz.show_next() is None


def test_completion_after_third_correct_answer(quiz):
    answer_correctly(quiz)
    answer_correctly(quiz)
    assert not quiz.completed

    feedback = quiz.answer("The car stops or slows down")
    assert feedback == Feedback(COMPLETE_TEXT, "blue", COMPLETE_ICON)
    assert quiz.completed
    assert not quiz.awaiting_next
    assert quiz.answer("The car flies") is None


def test_wrong_answers_never_advance(quiz):
    for _ in range(5):
        quiz.answer("Speed")
    assert quiz.current_index == 0
    answer_correctly(quiz)
    quiz.answer("Tailwind")
    assert quiz.current_index == 1


def test_restart_resets_progress(quiz):
    answer_correctly(quiz)
    answer_correctly(quiz)
    quiz.start()
    assert quiz.current_index == 0
    assert not quiz.completed


def test_answer_before_start_is_ignored():
    quiz = QuizSequencer()
    assert quiz.answer("Tailwind") is None


def test_empty_quiz_rejected():
    with pytest.raises(ValueError):
        QuizSequencer([])


def test_feedback_text_is_plain_ascii(quiz):
    texts = [quiz.answer("Friction").text]
    texts.append(answer_correctly(quiz).text)
    answer_correctly(quiz)
    texts.append(quiz.answer("The car stops or slows down").text)

    for text in texts:
        assert text.isascii()


def test_feedback_display_adds_icon(quiz):
    feedback = quiz.answer("Tailwind")
    assert feedback.display == f"{CORRECT_ICON} {CORRECT_TEXT}"
    assert Feedback().display == ""
