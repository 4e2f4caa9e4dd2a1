"""Configuration presets for cars and input sliders."""

from aerolab.config.car_presets import CAR_PRESETS, DEFAULT_CAR, CarPreset, get_car_preset
from aerolab.config.sliders import SLIDER_SPECS, SliderSpec, get_slider_spec

__all__ = [
    "CAR_PRESETS",
    "DEFAULT_CAR",
    "CarPreset",
    "get_car_preset",
    "SLIDER_SPECS",
    "SliderSpec",
    "get_slider_spec",
]
