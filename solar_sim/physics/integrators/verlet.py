"""Velocity Verlet integrator (better energy conservation, O(h²) accuracy)."""

from typing import Tuple
import numpy as np
from solar_sim.physics.integrators.base import Integrator


class VerletIntegrator(Integrator):
    """Velocity Verlet integrator - second-order, symplectic.
    
    Canonical Velocity Verlet algorithm:
    1. x_new = x + v*dt + 0.5*a_old*dt^2
    2. (recompute accelerations to get a_new)
    3. v_new = v + 0.5*(a_old + a_new)*dt
    
    This is implemented as:
    - step(): computes x_new and v_half = v + 0.5*a_old*dt
    - complete_step(): computes v_new = v_half + 0.5*a_new*dt
    
    The simulator detects complete_step() and evaluates accelerations a
    second time, at x_new, before calling it.
    """
    
    @property
    def name(self) -> str:
        return "verlet"
    
    @property
    def order(self) -> int:
        return 2
    
    def step(self, positions, velocities, accelerations, dt: float) -> Tuple:
        """Velocity Verlet step (first half).
        
        Returns:
            Tuple of (new_positions, v_half) where v_half is intermediate velocity
        """
        v_half = np.add(velocities, np.multiply(accelerations, 0.5 * dt))
        new_positions = np.add(positions, np.multiply(v_half, dt))
        return new_positions, v_half
    
    def complete_step(self, v_half, accelerations_new, dt: float) -> np.ndarray:
        """Complete Velocity Verlet step (second half).
        
        Args:
            v_half: Intermediate velocity from step()
            accelerations_new: Accelerations at the new positions
            dt: Time step
            
        Returns:
            Final velocities v_new
        """
        return np.add(v_half, np.multiply(accelerations_new, 0.5 * dt))
