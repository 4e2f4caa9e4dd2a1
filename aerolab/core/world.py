"""Frame clock driving the motion model."""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

from aerolab.core.motion import MotionModel

logger = logging.getLogger(__name__)


@dataclass
class World:
    """Fixed frame-rate simulation clock.

    The motion model moves by one velocity per display frame, so the clock
    counts whole frames. ``step_fixed`` uses an accumulator to turn real
    elapsed time into frames regardless of how often it is called.
    """

    model: MotionModel = field(default_factory=MotionModel)

    # Simulation parameters
    fps: int = 60
    frame: int = 0

    # Fixed timestep accumulator
    _accumulator: float = 0.0
    _max_steps_per_frame: int = 5  # Don't jump the car after a stall

    @property
    def dt(self) -> float:
        """Duration of one frame (seconds)."""
        return 1.0 / self.fps

    def step(self) -> None:
        """Advance the simulation by one frame."""
        self.model.step()
        self.frame += 1

    def step_fixed(self, real_dt: float) -> int:
        """Fixed frame update with accumulator.

        Call this once per loop iteration with the real elapsed time.

        Args:
            real_dt: Real elapsed time since last call (seconds)

        Returns:
            Number of frames stepped
        """
        self._accumulator += real_dt
        steps = 0

        while self._accumulator >= self.dt and steps < self._max_steps_per_frame:
            self.step()
            self._accumulator -= self.dt
            steps += 1

        if steps == self._max_steps_per_frame and self._accumulator >= self.dt:
            logger.debug("Dropping %.3fs of backlog", self._accumulator)
            self._accumulator = 0.0

        return steps

    def run(self, frames: int) -> float:
        """Step a number of frames and return the final position."""
        for _ in range(frames):
            self.step()
        return self.model.position

    def reset(self) -> None:
        """Reset clock and model to the initial state."""
        self.frame = 0
        self._accumulator = 0.0
        self.model.reset()
