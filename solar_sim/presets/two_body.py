"""Central mass with a single circular orbiter."""

import numpy as np
from typing import Tuple
from solar_sim.presets.base import Preset
from solar_sim.presets.utils import circular_velocity


class TwoBody(Preset):
    """Central mass M at rest at the origin, orbiter m at (r, 0, 0).
    
    The orbiter gets the tangential speed v = sqrt(G*M/r) along +y.
    """
    
    def __init__(
        self,
        G: float = 1.0,
        central_mass: float = 1000.0,
        orbiter_mass: float = 1.0,
        radius: float = 10.0
    ):
        super().__init__(G)
        self.central_mass = central_mass
        self.orbiter_mass = orbiter_mass
        self.radius = radius
    
    @property
    def name(self) -> str:
        return "two_body"
    
    def generate(self) -> Tuple:
        v_circ = float(circular_velocity(self.G, self.central_mass, self.radius))
        positions = np.array([[0.0, 0.0, 0.0], [self.radius, 0.0, 0.0]])
        velocities = np.array([[0.0, 0.0, 0.0], [0.0, v_circ, 0.0]])
        masses = np.array([self.central_mass, self.orbiter_mass])
        return positions, velocities, masses, ["Central", "Orbiter"]
