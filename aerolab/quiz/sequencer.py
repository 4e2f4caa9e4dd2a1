"""Quiz state machine.

Steps through a fixed list of questions. A correct answer moves on to the
next question after a short display delay; a wrong answer asks the learner to
try again and stays on the same question.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from aerolab.quiz.questions import QuizItem, QUIZ_ITEMS

logger = logging.getLogger(__name__)

ADVANCE_DELAY: float = 1.0  # Seconds the "Correct!" message stays before the next question

CORRECT_TEXT = "Correct!"
INCORRECT_TEXT = "Incorrect. Try again."
COMPLETE_TEXT = "Quiz complete!"

# Icons are printed in the terminal only, never drawn by the renderer
CORRECT_ICON = "✅"
INCORRECT_ICON = "❌"
COMPLETE_ICON = "🎉"


@dataclass(frozen=True)
class Feedback:
    """Feedback line shown under the options."""
    text: str = ""
    color: str = ""
    icon: str = ""

    @property
    def display(self) -> str:
        """Text with its icon, for terminals."""
        return f"{self.icon} {self.text}".strip()


class QuizSequencer:
    """Quiz progress over a fixed question list.

    The index advances by exactly one per correct answer. While the delay
    before the next question runs (``awaiting_next``) and once the quiz is
    complete, further answers are ignored. The caller owns the timer and
    calls ``show_next()`` when ``ADVANCE_DELAY`` has elapsed.
    """

    def __init__(self, items: Sequence[QuizItem] = QUIZ_ITEMS):
        if not items:
            raise ValueError("A quiz needs at least one question")

        self.items = tuple(items)
        self.current_index: int = 0
        self.feedback: Feedback = Feedback()
        self.active: bool = False
        self.completed: bool = False
        self.awaiting_next: bool = False

    def __len__(self) -> int:
        return len(self.items)

    @property
    def current_item(self) -> QuizItem:
        return self.items[self.current_index]

    def start(self) -> QuizItem:
        """(Re)start from the first question."""
        self.current_index = 0
        self.feedback = Feedback()
        self.active = True
        self.completed = False
        self.awaiting_next = False
        logger.info("Quiz started (%d questions)", len(self.items))
        return self.current_item

    def answer(self, selected: str) -> Optional[Feedback]:
        """Check an answer against the current question.

        Args:
            selected: Option text the learner picked

        Returns:
            The new feedback, or None if the answer was ignored (quiz not
            started, already complete, or waiting for the next question).
        """
        if not self.active or self.completed or self.awaiting_next:
            logger.debug("Ignoring answer %r", selected)
            return None

        if not self.current_item.is_correct(selected):
            self.feedback = Feedback(INCORRECT_TEXT, "red", INCORRECT_ICON)
            logger.debug("Question %d: wrong answer %r", self.current_index + 1, selected)
            return self.feedback

        if self.current_index + 1 < len(self.items):
            self.current_index += 1
            self.awaiting_next = True
            self.feedback = Feedback(CORRECT_TEXT, "green", CORRECT_ICON)
        else:
            self.completed = True
            self.feedback = Feedback(COMPLETE_TEXT, "blue", COMPLETE_ICON)
            logger.info("Quiz complete")

        return self.feedback

    def show_next(self) -> Optional[QuizItem]:
        """Finish the delay after a correct answer and show the next question."""
        if not self.awaiting_next:
            return None

        self.awaiting_next = False
        self.feedback = Feedback()
        return self.current_item
