"""Lab controller tying the motion model, frame clock and quiz together.

Front ends (the pygame window, the terminal quiz, tests) drive an ``AeroLab``
instead of touching the components directly. The motion model and the quiz
never talk to each other.
"""

from __future__ import annotations
import logging
from typing import Any, Mapping, Optional

from aerolab.config.car_presets import CarPreset, DEFAULT_CAR, get_car_preset
from aerolab.core.motion import MotionModel
from aerolab.core.world import World
from aerolab.quiz.sequencer import ADVANCE_DELAY, Feedback, QuizSequencer

logger = logging.getLogger(__name__)

NO_MOTION_NOTICE = (
    "The car will not move since the net velocity is zero due to the opposing forces."
)


class AeroLab:
    """State of one lab session."""

    def __init__(
        self,
        car: str = DEFAULT_CAR,
        fps: int = 60,
        quiz_delay: float = ADVANCE_DELAY,
    ):
        self.world = World(model=MotionModel(), fps=fps)
        self.quiz = QuizSequencer()
        self.car: CarPreset = get_car_preset(car)
        self.quiz_delay = quiz_delay

        # Blocking message; start is refused until dismissed
        self.notice: Optional[str] = None

        # Seconds left before the next quiz question is shown
        self._quiz_timer: Optional[float] = None

    @property
    def model(self) -> MotionModel:
        return self.world.model

    # Simulation

    def start(self, inputs: Optional[Mapping[str, Any]] = None) -> bool:
        """Start the car with the given slider values.

        Returns:
            True if the car moves. On the no-motion case the notice is set.
        """
        if self.notice is not None:
            logger.debug("Start ignored while notice is open")
            return False

        moving = self.model.start(inputs)
        if not moving:
            self.notice = NO_MOTION_NOTICE
        return moving

    def dismiss_notice(self) -> None:
        self.notice = None

    def reset(self) -> None:
        self.world.reset()

    def change_car(self, key: str) -> CarPreset:
        """Switch the car look.

        Raises:
            ValueError: If the preset is unknown
        """
        self.car = get_car_preset(key)
        logger.info("Car changed to %s", self.car.name)
        return self.car

    # Quiz

    def start_quiz(self) -> None:
        self._quiz_timer = None
        self.quiz.start()

    def answer(self, option: str) -> Optional[Feedback]:
        feedback = self.quiz.answer(option)
        if self.quiz.awaiting_next and self._quiz_timer is None:
            self._quiz_timer = self.quiz_delay
        return feedback

    # Clock

    def update(self, real_dt: float) -> int:
        """Advance the frame clock and the quiz timer.

        Args:
            real_dt: Real elapsed time since last call (seconds)

        Returns:
            Number of simulation frames stepped
        """
        if self._quiz_timer is not None:
            self._quiz_timer -= real_dt
            if self._quiz_timer <= 0:
                self._quiz_timer = None
                self.quiz.show_next()

        return self.world.step_fixed(real_dt)
