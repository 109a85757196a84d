"""Semi-implicit (symplectic) Euler integrator."""

from typing import Tuple
import numpy as np
from solar_sim.physics.integrators.base import Integrator


class SymplecticEulerIntegrator(Integrator):
    """Kick then drift: v_new = v + a*dt, r_new = r + v_new*dt.
    
    First order, but symplectic: closed orbits stay closed instead of
    spiralling outward as with explicit Euler. Default integrator.
    """
    
    @property
    def name(self) -> str:
        return "symplectic_euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def step(self, positions, velocities, accelerations, dt: float) -> Tuple:
        new_velocities = np.add(velocities, np.multiply(accelerations, dt))
        # Drift uses the updated velocity
        new_positions = np.add(positions, np.multiply(new_velocities, dt))
        return new_positions, new_velocities
