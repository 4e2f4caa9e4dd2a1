"""Forces quiz."""

from aerolab.quiz.questions import QuizItem, QUIZ_ITEMS
from aerolab.quiz.sequencer import QuizSequencer, Feedback, ADVANCE_DELAY

__all__ = [
    "QuizItem",
    "QUIZ_ITEMS",
    "QuizSequencer",
    "Feedback",
    "ADVANCE_DELAY",
]
