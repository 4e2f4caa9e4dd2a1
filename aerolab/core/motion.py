"""Linear car-motion model.

The car's net velocity is a signed sum of the helping and opposing forces:

    velocity = (speed + tailwind) - (friction + air_resistance)

Velocity is only recomputed when the simulation is explicitly started. While
running, every display frame advances the position by exactly one velocity.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import numpy as np

logger = logging.getLogger(__name__)

FORCE_KEYS = ("speed", "friction", "tailwind", "air_resistance")


def coerce_force(value: Any, previous: float) -> float:
    """Convert a raw input value (number or numeric string) to a force.

    Negative values clamp to zero. Missing or non-numeric values (None,
    empty or garbage strings, NaN) are ignored and ``previous`` is kept.

    Args:
        value: Raw input, typically a slider's string value
        previous: Value to keep when ``value`` can't be used

    Returns:
        Non-negative float
    """
    if value is None:
        return previous

    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric force input %r", value)
        return previous

    if not math.isfinite(number):
        logger.debug("Ignoring non-finite force input %r", value)
        return previous

    return max(0.0, number)


@dataclass(frozen=True)
class MotionState:
    """Snapshot of the motion model."""
    speed: float = 0.0
    friction: float = 0.0
    tailwind: float = 0.0
    air_resistance: float = 0.0
    velocity: float = 0.0          # Derived on start
    position: float = 0.0          # Pixels from the left edge
    running: bool = False


class MotionModel:
    """1-D car motion driven by a constant net velocity.

    Inputs are set through validating properties. ``start()`` recomputes the
    net velocity and arms the run flag when the car can move; ``step()`` is
    called once per frame by the frame clock.
    """

    def __init__(self):
        self._speed: float = 0.0
        self._friction: float = 0.0
        self._tailwind: float = 0.0
        self._air_resistance: float = 0.0
        self._velocity: float = 0.0
        self._position: float = 0.0
        self._running: bool = False

    # Inputs

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: Any) -> None:
        self._speed = coerce_force(value, self._speed)

    @property
    def friction(self) -> float:
        return self._friction

    @friction.setter
    def friction(self, value: Any) -> None:
        self._friction = coerce_force(value, self._friction)

    @property
    def tailwind(self) -> float:
        return self._tailwind

    @tailwind.setter
    def tailwind(self, value: Any) -> None:
        self._tailwind = coerce_force(value, self._tailwind)

    @property
    def air_resistance(self) -> float:
        return self._air_resistance

    @air_resistance.setter
    def air_resistance(self, value: Any) -> None:
        self._air_resistance = coerce_force(value, self._air_resistance)

    # Derived state

    @property
    def velocity(self) -> float:
        """Net velocity from the last ``start()`` (pixels per frame)."""
        return self._velocity

    @property
    def position(self) -> float:
        return self._position

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def state(self) -> MotionState:
        return MotionState(
            speed=self._speed,
            friction=self._friction,
            tailwind=self._tailwind,
            air_resistance=self._air_resistance,
            velocity=self._velocity,
            position=self._position,
            running=self._running,
        )

    def set_inputs(self, inputs: Mapping[str, Any]) -> None:
        """Apply raw input values keyed by force name.

        Unknown keys are ignored; missing keys keep their current value.
        """
        for key in FORCE_KEYS:
            if key in inputs:
                setattr(self, key, inputs[key])

    def calculate_net_velocity(self) -> float:
        """Helping forces minus opposing forces."""
        return (self._speed + self._tailwind) - (self._friction + self._air_resistance)

    def start(self, inputs: Optional[Mapping[str, Any]] = None) -> bool:
        """Read inputs, recompute velocity and start moving if possible.

        Args:
            inputs: Optional raw input values keyed by force name

        Returns:
            True if the car is now moving, False for the no-motion case
            (net velocity <= 0).
        """
        if inputs is not None:
            self.set_inputs(inputs)

        self._velocity = self.calculate_net_velocity()

        if self._velocity > 0:
            self._running = True
            logger.info("Simulation started with net velocity %.2f", self._velocity)
            return True

        self._running = False
        logger.info(
            "No motion: net velocity %.2f (helping %.2f, opposing %.2f)",
            self._velocity,
            self._speed + self._tailwind,
            self._friction + self._air_resistance,
        )
        return False

    def step(self) -> float:
        """Advance one frame. No-op unless running.

        Returns:
            Position after the frame
        """
        if self._running:
            self._position += self._velocity
        return self._position

    def reset(self) -> None:
        """Halt and move the car back to the start line."""
        self._running = False
        self._position = 0.0
        logger.debug("Simulation reset")

    def trajectory(self, frames: int) -> np.ndarray:
        """Positions after frames 1..n for the current velocity from zero.

        Non-positive velocity yields an all-zero trajectory, since the car
        never starts moving.
        """
        if frames < 0:
            raise ValueError(f"frames must be non-negative, got {frames}")

        velocity = self._velocity if self._velocity > 0 else 0.0
        return np.arange(1, frames + 1, dtype=float) * velocity

    def readout(self) -> Dict[str, str]:
        """Values for the force panel."""
        return {
            "speed": f"{self._speed:g}",
            "tailwind": f"{self._tailwind:g}",
            "friction": f"{self._friction:g}",
            "air_resistance": f"{self._air_resistance:g}",
            "velocity": f"{self._velocity:.2f}",
        }
