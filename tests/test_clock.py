"""Tests for the fixed-step clock."""

import math
import pytest
from solar_sim.physics.clock import FixedStepClock


def test_whole_steps_are_issued():
    clock = FixedStepClock(0.25, max_frame_time=None)
    assert clock.advance(1.0) == 4
    assert clock.accumulator == 0.0
    assert clock.total_steps == 4


def test_remainder_carries_over():
    """Short frames yield zero steps until a whole step has accumulated."""
    clock = FixedStepClock(0.1, max_frame_time=None)
    assert clock.advance(0.04) == 0
    assert clock.advance(0.04) == 0
    assert clock.advance(0.04) == 1
    assert clock.accumulator == pytest.approx(0.02)
    assert 0.0 <= clock.alpha < 1.0
    assert clock.alpha == pytest.approx(0.2)


def test_long_frame_is_capped():
    clock = FixedStepClock(0.1, max_frame_time=0.25)
    assert clock.advance(10.0) == 2
    assert clock.accumulator == pytest.approx(0.05)


def test_step_cap_drops_backlog():
    clock = FixedStepClock(0.1, max_frame_time=None, max_steps_per_frame=3)
    assert clock.advance(1.0) == 3
    assert clock.accumulator == 0.0


def test_zero_elapsed_is_allowed():
    clock = FixedStepClock(1.0 / 60.0)
    assert clock.advance(0.0) == 0


def test_reset():
    clock = FixedStepClock(1.0, max_frame_time=None)
    clock.advance(0.5)
    clock.reset()
    assert clock.accumulator == 0.0
    assert clock.advance(0.75) == 0


@pytest.mark.parametrize("elapsed", [-0.1, math.nan, math.inf])
def test_invalid_elapsed(elapsed):
    clock = FixedStepClock(0.1)
    with pytest.raises(ValueError):
        clock.advance(elapsed)


@pytest.mark.parametrize("kwargs", [
    {"dt": 0.0},
    {"dt": -1.0},
    {"dt": math.nan},
    {"dt": 0.1, "max_frame_time": 0.0},
    {"dt": 0.1, "max_steps_per_frame": 0},
])
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        FixedStepClock(**kwargs)


@pytest.mark.parametrize("seconds, frames", [(1.0, 60), (10.0, 600)])
def test_one_chunk_matches_many_frames_at_1_60(seconds, frames):
    """Non-binary dt: one big chunk and per-frame chunks issue the same steps."""
    dt = 1.0 / 60.0
    chunk = FixedStepClock(dt, max_frame_time=None)
    per_frame = FixedStepClock(dt, max_frame_time=None)
    
    n_chunk = chunk.advance(seconds)
    n_frames = sum(per_frame.advance(seconds / frames) for _ in range(frames))
    
    assert n_chunk == frames
    assert n_frames == frames
    assert chunk.accumulator < 1e-9


def test_huge_elapsed_without_cap():
    clock = FixedStepClock(1.0 / 60.0, max_frame_time=None)
    steps = clock.advance(1.0e6)
    assert abs(steps - 60_000_000) <= 1
    assert 0.0 <= clock.accumulator < 2 * clock.dt
