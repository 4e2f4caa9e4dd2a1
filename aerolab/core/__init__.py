"""Motion model and frame clock."""

from aerolab.core.motion import MotionModel, MotionState, coerce_force
from aerolab.core.world import World

__all__ = [
    "MotionModel",
    "MotionState",
    "coerce_force",
    "World",
]
