"""Main simulator controller."""

from typing import Optional, Callable, Sequence
import math
import time
import numpy as np
from solar_sim.physics.world import World
from solar_sim.physics.force_calculator import ForceCalculator
from solar_sim.physics.clock import FixedStepClock
from solar_sim.physics.diagnostics import Diagnostics
from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.euler import SymplecticEulerIntegrator


class Simulator:
    """Main simulation controller.

    Owns the World and runs the fixed-step cycle
    {snapshot -> evaluate accelerations -> integrate}. The host calls
    ``advance(elapsed)`` once per rendered frame.
    """

    def __init__(
        self,
        integrator: Optional[Integrator] = None,
        dt: float = 1.0 / 60.0,
        G: float = 1.0,
        softening: float = 2.0,
        force_method: str = "vectorized",
        max_frame_time: Optional[float] = 0.25,
        max_steps_per_frame: Optional[int] = None
    ):
        """Initialize simulator.

        Args:
            integrator: Integrator to use (default: symplectic Euler)
            dt: Fixed time step
            G: Gravitational constant
            softening: Minimum pair separation used by the force law
            force_method: 'vectorized' or 'pairwise'
            max_frame_time: Cap on real time accepted per frame (None: no cap)
            max_steps_per_frame: Optional cap on steps per frame
        """
        if not math.isfinite(softening) or softening <= 0.0:
            raise ValueError(f"softening must be positive, got {softening}")
        if not math.isfinite(G) or G < 0.0:
            raise ValueError(f"G must be non-negative, got {G}")

        self.integrator = integrator or SymplecticEulerIntegrator()
        self.G = G
        self.softening = softening
        self.force_calculator = ForceCalculator(method=force_method)
        self.clock = FixedStepClock(dt, max_frame_time=max_frame_time, max_steps_per_frame=max_steps_per_frame)
        self.diagnostics = Diagnostics(G=G, softening=softening)

        self.world: Optional[World] = None
        self.time = 0.0
        self.paused = False
        self.step_count = 0

        # Profiling: last step timing (ms)
        self._last_forces_ms: Optional[float] = None
        self._last_integrator_ms: Optional[float] = None
        self._profile: bool = False

        # Callbacks
        self.on_step_callback: Optional[Callable] = None
        self.debug_table: bool = False
        self.debug_table_interval: int = 100

    @property
    def dt(self) -> float:
        return self.clock.dt

    def set_profiling(self, enabled: bool = True):
        """Enable or disable step timing (forces ms, integrator ms)."""
        self._profile = enabled

    def get_timing(self) -> dict:
        """Return last step timing in ms: forces_ms, integrator_ms."""
        return {
            "forces_ms": self._last_forces_ms,
            "integrator_ms": self._last_integrator_ms,
        }

    def initialize(
        self,
        positions,
        velocities,
        masses,
        names: Optional[Sequence[str]] = None,
        recenter: bool = False
    ) -> World:
        """Build the world from the host's initial body list.

        Args:
            positions: Initial positions (n, 3)
            velocities: Initial velocities (n, 3)
            masses: Body masses (n,)
            names: Optional unique body names
            recenter: If True, move to the centre-of-mass frame

        Returns:
            The new World
        """
        world = World(positions, velocities, masses, names=names)
        if recenter:
            world.recenter()
        self.world = world
        self.time = 0.0
        self.step_count = 0
        self.clock.reset()
        return world

    def _require_world(self) -> World:
        if self.world is None:
            raise RuntimeError("Simulator has no world; call initialize() first")
        return self.world

    def compute_accelerations(self, positions=None) -> np.ndarray:
        """Accelerations for the current (or given) positions; no state change."""
        world = self._require_world()
        if positions is None:
            positions = world.positions
        return self.force_calculator.compute_accelerations(
            positions, world.masses, G=self.G, softening=self.softening
        )

    def step(self):
        """Perform one fixed simulation step."""
        world = self._require_world()
        if self.paused:
            return
        dt = self.clock.dt

        if self._profile:
            t0 = time.perf_counter()
        # Every acceleration comes from this one snapshot of positions
        accelerations = self.compute_accelerations()
        if self._profile:
            t1 = time.perf_counter()
        new_positions, new_velocities = self.integrator.step(
            world.positions,
            world.velocities,
            accelerations,
            dt,
        )
        if self._profile:
            t2 = time.perf_counter()
        if hasattr(self.integrator, "complete_step"):
            accelerations_new = self.compute_accelerations(new_positions)
            if self._profile:
                t3 = time.perf_counter()
            new_velocities = self.integrator.complete_step(new_velocities, accelerations_new, dt)
        elif self._profile:
            t3 = t2
        if self._profile:
            t4 = time.perf_counter()
            self._last_forces_ms = (t1 - t0 + t3 - t2) * 1000.0
            self._last_integrator_ms = (t2 - t1 + t4 - t3) * 1000.0

        world.commit(new_positions, new_velocities)
        self.time += dt
        self.step_count += 1

        if self.debug_table and (self.step_count % self.debug_table_interval == 0):
            self._log_stability_table()

        if self.on_step_callback:
            self.on_step_callback(self)

    def advance(self, elapsed: float) -> int:
        """Feed real elapsed frame time; run as many fixed steps as it covers.

        Args:
            elapsed: Real seconds since the previous frame

        Returns:
            Number of steps run (zero or more)
        """
        self._require_world()
        if self.paused:
            return 0
        n_steps = self.clock.advance(elapsed)
        for _ in range(n_steps):
            self.step()
        return n_steps

    def _log_stability_table(self):
        """Log K, U, E, |P|, r_min, r_max."""
        K, U, E = self.get_energies()
        P = float(np.linalg.norm(self.get_momentum()))
        r_min, r_max = self.get_radial_extent()
        print(f"[Diag] step={self.step_count} t={self.time:.3f} K={K:.4f} U={U:.4f} E={E:.4f} "
              f"|P|={P:.3e} r_min={r_min:.3f} r_max={r_max:.3f}")

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            self.step()

    def run_for(self, duration: float) -> int:
        """Run the number of fixed steps closest to ``duration`` seconds.

        Returns:
            Number of steps run
        """
        n_steps = int(round(duration / self.clock.dt))
        self.run(n_steps)
        return n_steps

    def pause(self):
        """Pause simulation."""
        self.paused = True

    def resume(self):
        """Resume simulation."""
        self.paused = False

    def set_timestep(self, dt: float):
        """Set time step; leftover accumulated frame time is discarded.

        Args:
            dt: New time step
        """
        self.clock = FixedStepClock(
            dt,
            max_frame_time=self.clock.max_frame_time,
            max_steps_per_frame=self.clock.max_steps_per_frame,
        )

    def set_integrator(self, integrator: Integrator):
        """Set integrator.

        Args:
            integrator: New integrator
        """
        self.integrator = integrator

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count)
        """
        pos, vel, mass = self._require_world().get_state()
        return pos, vel, mass, self.time, self.step_count

    def get_energies(self):
        """Get (kinetic, potential, total) energy."""
        world = self._require_world()
        return self.diagnostics.compute_energies(world.positions, world.velocities, world.masses)

    def get_energy(self) -> float:
        """Get current total energy."""
        return self.get_energies()[2]

    def get_momentum(self) -> np.ndarray:
        """Get total linear momentum vector."""
        world = self._require_world()
        return self.diagnostics.total_momentum(world.velocities, world.masses)

    def get_angular_momentum(self) -> np.ndarray:
        """Get total angular momentum vector about the origin."""
        world = self._require_world()
        return self.diagnostics.angular_momentum(world.positions, world.velocities, world.masses)

    def get_radial_extent(self, center_index: int = 0):
        """Get (min, max) distance of the other bodies from the central body."""
        return self.diagnostics.radial_extent(self._require_world().positions, center_index)
