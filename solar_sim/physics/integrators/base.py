"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Tuple


class Integrator(ABC):
    """Abstract interface for fixed-step integrators."""
    
    @abstractmethod
    def step(self, positions, velocities, accelerations, dt: float) -> Tuple:
        """Perform one integration step.
        
        Accelerations must all come from the same snapshot of positions.
        Inputs are not modified.
        
        Args:
            positions: Current positions (n, 3)
            velocities: Current velocities (n, 3)
            accelerations: Accelerations at the current positions (n, 3)
            dt: Time step
            
        Returns:
            Tuple of (new_positions, new_velocities)
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (1 for symplectic Euler, 2 for Verlet)."""
        pass
