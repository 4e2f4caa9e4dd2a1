import pytest

from aerolab.core.motion import MotionModel
from aerolab.core.world import World


@pytest.fixture
def world(moving_inputs):
    world = World(model=MotionModel())
    world.model.start(moving_inputs)
    return world


def test_run_steps_frames(world):
    assert world.run(30) == pytest.approx(120.0)
    assert world.frame == 30


def test_step_fixed_counts_whole_frames(world):
    assert world.step_fixed(world.dt * 2.5) == 2
    assert world.step_fixed(world.dt * 0.6) == 1
    assert world.model.position == pytest.approx(12.0)


def test_step_fixed_caps_backlog(world):
    steps = world.step_fixed(10.0)
    assert steps == world._max_steps_per_frame
    assert world.step_fixed(0.0) == 0


def test_reset_clears_clock_and_model(world):
    world.run(5)
    world.reset()
    assert world.frame == 0
    assert world.model.position == 0.0
    assert not world.model.is_running
