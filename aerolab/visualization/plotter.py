"""Matplotlib-based plots of the motion model.

Provides static plots for:
- Car position over frames
- Force balance (helping vs opposing forces and the net velocity)
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

import numpy as np

try:
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False

if TYPE_CHECKING:
    from aerolab.core.motion import MotionModel


def _check_matplotlib():
    """Check if matplotlib is available."""
    if not MATPLOTLIB_AVAILABLE:
        raise ImportError(
            "Matplotlib is required for plotting. "
            "Install it with: pip install matplotlib"
        )


class MotionPlotter:
    """Plot how the forces move the car."""

    @staticmethod
    def plot_position(
        model: MotionModel,
        frames: int = 120,
        canvas_width: Optional[float] = None,
        ax: Optional[plt.Axes] = None
    ) -> plt.Figure:
        """Plot position vs frame for the model's current velocity.

        Args:
            model: Motion model; its velocity from the last start is used
            frames: Number of frames to plot
            canvas_width: Optional canvas width drawn as a reference line
            ax: Optional axes to plot on

        Returns:
            Matplotlib figure
        """
        _check_matplotlib()

        if ax is None:
            fig, ax = plt.subplots(figsize=(10, 6))
        else:
            fig = ax.figure

        frame_numbers = np.arange(0, frames + 1)
        positions = np.concatenate(([0.0], model.trajectory(frames)))

        ax.plot(frame_numbers, positions, label=f'v = {model.velocity:.2f} px/frame')

        if canvas_width is not None:
            ax.axhline(y=canvas_width, color='r', linestyle='--', linewidth=1, label='Canvas edge')

        ax.set_xlabel('Frame')
        ax.set_ylabel('Position (px)')
        ax.set_title('Car Position Over Time')
        ax.legend()
        ax.grid(True, alpha=0.3)

        return fig

    @staticmethod
    def plot_forces(
        model: MotionModel,
        ax: Optional[plt.Axes] = None
    ) -> plt.Figure:
        """Bar chart of helping (+) and opposing (-) forces with the velocity from the last start."""
        _check_matplotlib()

        if ax is None:
            fig, ax = plt.subplots(figsize=(8, 5))
        else:
            fig = ax.figure

        labels = ['Speed', 'Tailwind', 'Friction', 'Air Resistance', 'Net']
        values = np.array([
            model.speed,
            model.tailwind,
            -model.friction,
            -model.air_resistance,
            model.velocity,
        ])
        colors = ['tab:green', 'tab:green', 'tab:red', 'tab:red', 'tab:blue']

        ax.bar(labels, values, color=colors)
        ax.axhline(y=0, color='k', linewidth=0.5)
        ax.set_ylabel('Contribution to velocity')
        ax.set_title('Force Balance')
        ax.grid(True, axis='y', alpha=0.3)

        return fig
