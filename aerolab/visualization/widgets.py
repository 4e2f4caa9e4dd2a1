"""Minimal on-screen controls for the pygame window.

Widgets only hold geometry and values; drawing lives in the renderer so the
hit-testing here works without a display.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from aerolab.config.sliders import SliderSpec

Rect = Tuple[int, int, int, int]  # x, y, width, height


def rect_contains(rect: Rect, pos: Tuple[int, int]) -> bool:
    x, y, w, h = rect
    return x <= pos[0] < x + w and y <= pos[1] < y + h


@dataclass
class Slider:
    """Horizontal slider over a ``SliderSpec`` range."""
    spec: SliderSpec
    rect: Rect
    value: float = 0.0
    dragging: bool = False

    def __post_init__(self):
        self.value = self.spec.clamp(self.value)

    @property
    def fraction(self) -> float:
        span = self.spec.maximum - self.spec.minimum
        return (self.value - self.spec.minimum) / span if span > 0 else 0.0

    @property
    def text_value(self) -> str:
        """Value as the string a form control would report."""
        return f"{self.value:g}"

    def contains(self, pos: Tuple[int, int]) -> bool:
        return rect_contains(self.rect, pos)

    def set_from_x(self, x: int) -> float:
        """Move the knob to a screen x coordinate."""
        left, _, width, _ = self.rect
        fraction = min(1.0, max(0.0, (x - left) / width)) if width > 0 else 0.0
        span = self.spec.maximum - self.spec.minimum
        self.value = self.spec.clamp(self.spec.minimum + fraction * span)
        return self.value

    def nudge(self, steps: int) -> float:
        """Move by whole steps (keyboard control)."""
        self.value = self.spec.clamp(self.value + steps * self.spec.step)
        return self.value


@dataclass
class Button:
    """Clickable labelled rectangle."""
    label: str
    rect: Rect
    action: str
    payload: Optional[str] = None

    def contains(self, pos: Tuple[int, int]) -> bool:
        return rect_contains(self.rect, pos)
