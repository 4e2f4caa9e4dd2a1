"""Input slider ranges."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SliderSpec:
    """Range and default of one force slider."""
    key: str
    label: str
    minimum: float = 0.0
    maximum: float = 10.0
    step: float = 1.0
    default: float = 0.0

    def clamp(self, value: float) -> float:
        """Clamp to the range and snap to the step grid."""
        value = min(self.maximum, max(self.minimum, value))
        steps = round((value - self.minimum) / self.step)
        return min(self.maximum, self.minimum + steps * self.step)


# Ordered as shown on screen
SLIDER_SPECS = {
    "speed": SliderSpec("speed", "Speed", maximum=20.0, default=5.0),
    "tailwind": SliderSpec("tailwind", "Tailwind"),
    "friction": SliderSpec("friction", "Friction"),
    "air_resistance": SliderSpec("air_resistance", "Air Resistance"),
}


def get_slider_spec(key: str) -> SliderSpec:
    """Get a slider spec by force name.

    Raises:
        ValueError: If no slider exists for the key
    """
    if key not in SLIDER_SPECS:
        available = ", ".join(SLIDER_SPECS.keys())
        raise ValueError(f"Unknown slider '{key}'. Available: {available}")

    return SLIDER_SPECS[key]
