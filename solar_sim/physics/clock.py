"""Fixed-timestep scheduler decoupling physics from render frame time."""

import math
from typing import Optional

# Fraction of a step treated as rounding error rather than leftover time
STEP_TOLERANCE = 1e-9


class FixedStepClock:
    """Accumulates real frame time and hands it out in whole ``dt`` steps.

    Each frame the host calls ``advance(elapsed)``; the return value is the
    number of fixed steps to run (possibly zero or several). Time that does
    not fill a whole step is carried over to the next frame.
    """

    def __init__(
        self,
        dt: float,
        max_frame_time: Optional[float] = 0.25,
        max_steps_per_frame: Optional[int] = None
    ):
        """Initialize clock.

        Args:
            dt: Fixed simulation step (> 0)
            max_frame_time: Cap on the elapsed time accepted from one frame,
                so a stall (debugger, window drag) does not trigger a burst
                of catch-up steps. None disables the cap.
            max_steps_per_frame: Optional cap on steps issued per frame;
                any backlog beyond it is dropped.
        """
        if not math.isfinite(dt) or dt <= 0.0:
            raise ValueError(f"dt must be positive and finite, got {dt}")
        if max_frame_time is not None and not max_frame_time > 0.0:
            raise ValueError(f"max_frame_time must be positive, got {max_frame_time}")
        if max_steps_per_frame is not None and max_steps_per_frame < 1:
            raise ValueError(f"max_steps_per_frame must be >= 1, got {max_steps_per_frame}")
        self.dt = float(dt)
        self.max_frame_time = max_frame_time
        self.max_steps_per_frame = max_steps_per_frame
        self.accumulator = 0.0
        self.total_steps = 0

    def advance(self, elapsed: float) -> int:
        """Consume ``elapsed`` seconds of real time.

        Returns:
            Number of fixed steps to run this frame
        """
        if not math.isfinite(elapsed) or elapsed < 0.0:
            raise ValueError(f"elapsed frame time must be finite and >= 0, got {elapsed}")
        if self.max_frame_time is not None:
            elapsed = min(elapsed, self.max_frame_time)

        self.accumulator += elapsed
        # Whole steps in one division; the tolerance absorbs rounding so that
        # 1.0 s at dt=1/60 is 60 steps, same as sixty 1/60 s frames
        steps = int(math.floor(self.accumulator / self.dt + STEP_TOLERANCE))
        self.accumulator = max(self.accumulator - steps * self.dt, 0.0)

        if self.max_steps_per_frame is not None and steps > self.max_steps_per_frame:
            steps = self.max_steps_per_frame
            self.accumulator = 0.0

        self.total_steps += steps
        return steps

    @property
    def alpha(self) -> float:
        """Fraction of a step left in the accumulator, in [0, 1).

        A renderer may blend the previous and current states with it.
        """
        return self.accumulator / self.dt

    def reset(self):
        """Drop any leftover time."""
        self.accumulator = 0.0
