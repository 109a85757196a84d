"""Sun plus three planets."""

import numpy as np
from typing import Sequence, Tuple
from solar_sim.presets.base import Preset
from solar_sim.presets.utils import circular_velocity

# name, mass, orbital radius
DEFAULT_PLANETS = (
    ("Inner Planet", 5.0, 12.0),
    ("Middle Planet", 8.0, 20.0),
    ("Outer Planet", 6.0, 30.0),
)


class SolarSystem(Preset):
    """A massive sun at the origin with planets on the +x axis.
    
    Planets move along +z, so orbits lie in the x-z plane (y is up).
    """
    
    def __init__(
        self,
        G: float = 1.0,
        sun_mass: float = 1000.0,
        planets: Sequence[Tuple[str, float, float]] = DEFAULT_PLANETS,
        speed_factor: float = 1.0
    ):
        """Initialize solar system preset.
        
        Args:
            G: Gravitational constant
            sun_mass: Mass of the central body
            planets: (name, mass, radius) for each planet
            speed_factor: Multiplier on the circular speed; < 1 gives
                eccentric orbits that dip toward the sun
        """
        super().__init__(G)
        if sun_mass <= 0:
            raise ValueError(f"sun_mass must be positive, got {sun_mass}")
        self.sun_mass = sun_mass
        self.planets = [(str(name), float(mass), float(radius)) for name, mass, radius in planets]
        self.speed_factor = speed_factor
    
    @property
    def name(self) -> str:
        return "solar_system"
    
    def generate(self) -> Tuple:
        """Generate sun + planets initial conditions."""
        n = len(self.planets) + 1
        positions = np.zeros((n, 3))
        velocities = np.zeros((n, 3))
        masses = np.empty(n)
        names = ["Sun"]
        masses[0] = self.sun_mass
        
        for k, (planet_name, mass, radius) in enumerate(self.planets, start=1):
            positions[k] = [radius, 0.0, 0.0]
            speed = self.speed_factor * circular_velocity(self.G, self.sun_mass, radius)
            velocities[k] = [0.0, 0.0, speed]
            masses[k] = mass
            names.append(planet_name)
        
        return positions, velocities, masses, names
