import pytest

from aerolab.config import (
    CAR_PRESETS, DEFAULT_CAR, SLIDER_SPECS, get_car_preset, get_slider_spec,
)


def test_car_presets():
    assert DEFAULT_CAR in CAR_PRESETS
    for key, preset in CAR_PRESETS.items():
        assert preset.key == key
        assert len(preset.body_color) == 3


def test_unknown_car_preset():
    with pytest.raises(ValueError, match="Available"):
        get_car_preset("hovercraft")


def test_slider_specs_cover_all_forces():
    assert set(SLIDER_SPECS) == {"speed", "tailwind", "friction", "air_resistance"}
    for spec in SLIDER_SPECS.values():
        assert spec.minimum == 0.0
        assert spec.minimum <= spec.default <= spec.maximum


def test_slider_clamp():
    spec = get_slider_spec("friction")
    assert spec.clamp(-3) == 0.0
    assert spec.clamp(99) == spec.maximum
    assert spec.clamp(2.4) == 2.0


def test_unknown_slider():
    with pytest.raises(ValueError):
        get_slider_spec("gravity")
