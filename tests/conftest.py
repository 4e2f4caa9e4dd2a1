import matplotlib
import pytest

matplotlib.use("Agg")

from aerolab.core.motion import MotionModel
from aerolab.lab import AeroLab


@pytest.fixture
def model():
    return MotionModel()


@pytest.fixture
def lab():
    return AeroLab()


@pytest.fixture
def moving_inputs():
    return {"speed": "6", "tailwind": "2", "friction": "1", "air_resistance": "3"}


@pytest.fixture
def blocked_inputs():
    return {"speed": "3", "tailwind": "1", "friction": "3", "air_resistance": "2"}
