"""
AeroLab - Interactive car-motion lab with a short forces quiz.

A small teaching widget featuring:
- Linear net-velocity model (speed + tailwind - friction - air resistance)
- Frame-driven position update on a pygame canvas
- Car selection and live force panel
- Three-question multiple-choice quiz
"""

__version__ = "0.1.0"

from aerolab.core.motion import MotionModel, MotionState
from aerolab.core.world import World
from aerolab.quiz.sequencer import QuizSequencer
from aerolab.lab import AeroLab

__all__ = [
    "MotionModel",
    "MotionState",
    "World",
    "QuizSequencer",
    "AeroLab",
    "__version__",
]
