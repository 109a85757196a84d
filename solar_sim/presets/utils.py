"""Utility functions for scene generation."""

import numpy as np


def circular_velocity(G: float, central_mass: float, r):
    """Speed of a circular orbit around a point mass.
    
    v_circ(r) = sqrt(G * M / r)
    
    Args:
        G: Gravitational constant
        central_mass: Mass of the central body
        r: Orbital radius (scalar or array)
        
    Returns:
        Circular speed at each radius
    """
    r = np.asarray(r, dtype=np.float64)
    if np.any(r <= 0):
        raise ValueError("orbital radius must be positive")
    return np.sqrt(G * central_mass / r)


def orbital_period(G: float, central_mass: float, r: float) -> float:
    """Period of a circular orbit: T = 2π * sqrt(r³ / (G*M))."""
    return float(2.0 * np.pi * np.sqrt(r ** 3 / (G * central_mass)))
