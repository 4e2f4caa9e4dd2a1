"""Selectable car looks."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CarPreset:
    """How a car is drawn. Motion is the same for every car."""
    key: str
    name: str
    description: str
    body_color: Tuple[int, int, int]


CAR_PRESETS = {
    "red_coupe": CarPreset(
        key="red_coupe",
        name="Red Coupe",
        description="Low two-door sports car",
        body_color=(200, 40, 40),
    ),
    "blue_hatch": CarPreset(
        key="blue_hatch",
        name="Blue Hatchback",
        description="Compact city hatchback",
        body_color=(40, 90, 200),
    ),
    "green_truck": CarPreset(
        key="green_truck",
        name="Green Pickup",
        description="Boxy pickup truck",
        body_color=(50, 150, 70),
    ),
}

DEFAULT_CAR = "red_coupe"


def get_car_preset(preset_name: str) -> CarPreset:
    """Get a car preset by key.

    Raises:
        ValueError: If preset name is not found
    """
    if preset_name not in CAR_PRESETS:
        available = ", ".join(CAR_PRESETS.keys())
        raise ValueError(f"Unknown car preset '{preset_name}'. Available: {available}")

    return CAR_PRESETS[preset_name]
