"""Visualization tools for the motion lab."""

from aerolab.visualization.renderer import PygameRenderer, RenderConfig
from aerolab.visualization.plotter import MotionPlotter

__all__ = [
    "PygameRenderer",
    "RenderConfig",
    "MotionPlotter",
]
