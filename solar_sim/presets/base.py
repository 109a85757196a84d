"""Base class for preset scenes."""

from abc import ABC, abstractmethod
from typing import Tuple


class Preset(ABC):
    """Abstract base class for preset scenes.
    
    A preset plays the scene host's startup role: it supplies the initial
    body list once, and the simulator owns the bodies from then on.
    """
    
    def __init__(self, G: float = 1.0):
        """Initialize preset.
        
        Args:
            G: Gravitational constant the scene is tuned for
        """
        self.G = G
    
    @abstractmethod
    def generate(self) -> Tuple:
        """Generate initial conditions.
        
        Returns:
            Tuple of (positions, velocities, masses, names)
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
