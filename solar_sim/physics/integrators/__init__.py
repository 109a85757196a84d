"""Numerical integrators for the N-body core."""

from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.euler import SymplecticEulerIntegrator
from solar_sim.physics.integrators.verlet import VerletIntegrator

INTEGRATORS = {
    "symplectic_euler": SymplecticEulerIntegrator,
    "verlet": VerletIntegrator,
}


def get_integrator(name: str) -> Integrator:
    """Get an integrator instance by name.
    
    Raises:
        ValueError: If the name is unknown
    """
    integrator_class = INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list(INTEGRATORS.keys())}")
    return integrator_class()


__all__ = [
    "Integrator",
    "SymplecticEulerIntegrator",
    "VerletIntegrator",
    "INTEGRATORS",
    "get_integrator",
]
