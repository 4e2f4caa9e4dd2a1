"""Fixed quiz content."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class QuizItem:
    """Multiple-choice question with one correct option."""
    question: str
    options: Tuple[str, ...]
    correct: str

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "options", tuple(self.options))
        if self.correct not in self.options:
            raise ValueError(
                f"Correct answer {self.correct!r} is not one of the options {self.options}"
            )

    def is_correct(self, selected: str) -> bool:
        return selected == self.correct


QUIZ_ITEMS: Tuple[QuizItem, ...] = (
    QuizItem(
        question="Which force helps the car move forward?",
        options=("Tailwind", "Friction", "Air Resistance"),
        correct="Tailwind",
    ),
    QuizItem(
        question="Which force opposes motion due to contact with the road?",
        options=("Tailwind", "Friction", "Speed"),
        correct="Friction",
    ),
    QuizItem(
        question="What happens if opposing forces are greater than helpful forces?",
        options=("The car speeds up", "The car stops or slows down", "The car flies"),
        correct="The car stops or slows down",
    ),
)
