"""Diagnostics for the N-body core."""

import numpy as np
from typing import Tuple


class Diagnostics:
    """Conserved quantities and extent checks matching the clamped force law."""

    def __init__(self, G: float = 1.0, softening: float = 2.0):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant
            softening: Softening threshold (must match force calculation)
        """
        self.G = G
        self.softening = softening

    def compute_energies(
        self,
        positions,
        velocities,
        masses
    ) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        The pair potential is the one whose gradient is the clamped force:
        U_ij = -G m_i m_j / r                          for r >= s
        U_ij = -G m_i m_j (3 s^2 - r^2) / (2 s^3)      for r <  s
        Both branches agree at r = s.

        Args:
            positions: Body positions (n, 3)
            velocities: Body velocities (n, 3)
            masses: Body masses (n,)

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        positions = np.asarray(positions, dtype=np.float64)
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).flatten()

        # Kinetic energy: K = 0.5 * Σ m_i * v_i^2
        v_sq = np.sum(velocities ** 2, axis=1)
        K = 0.5 * np.sum(masses * v_sq)

        U = 0.0
        n = len(masses)
        if n > 1:
            s = self.softening
            i_idx, j_idx = np.triu_indices(n, k=1)
            r = np.linalg.norm(positions[j_idx] - positions[i_idx], axis=1)
            mm = masses[i_idx] * masses[j_idx]
            far = r >= s
            u_pair = np.empty_like(r)
            u_pair[far] = -self.G * mm[far] / r[far]
            u_pair[~far] = -self.G * mm[~far] * (3.0 * s ** 2 - r[~far] ** 2) / (2.0 * s ** 3)
            U = np.sum(u_pair)

        return float(K), float(U), float(K + U)

    def total_momentum(self, velocities, masses) -> np.ndarray:
        """Total linear momentum Σ m_i v_i."""
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).flatten()
        return np.sum(masses[:, np.newaxis] * velocities, axis=0)

    def angular_momentum(self, positions, velocities, masses) -> np.ndarray:
        """Total angular momentum vector Σ m_i (r_i × v_i) about the origin."""
        positions = np.asarray(positions, dtype=np.float64)
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).flatten()
        return np.sum(masses[:, np.newaxis] * np.cross(positions, velocities), axis=0)

    def center_of_mass(self, positions, velocities, masses) -> Tuple[np.ndarray, np.ndarray]:
        """Centre-of-mass position and velocity."""
        positions = np.asarray(positions, dtype=np.float64)
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).flatten()
        total_mass = np.sum(masses)
        com = np.sum(masses[:, np.newaxis] * positions, axis=0) / total_mass
        com_v = np.sum(masses[:, np.newaxis] * velocities, axis=0) / total_mass
        return com, com_v

    def radial_extent(self, positions, center_index: int = 0) -> Tuple[float, float]:
        """Closest and farthest distance of the other bodies from a central body.

        Used to detect ejection (max grows without bound) and collapse
        (min falls below the softening threshold).

        Returns:
            Tuple of (min_distance, max_distance); (0.0, 0.0) for a single body
        """
        positions = np.asarray(positions, dtype=np.float64)
        others = np.delete(positions, center_index, axis=0)
        if others.shape[0] == 0:
            return 0.0, 0.0
        distances = np.linalg.norm(others - positions[center_index], axis=1)
        return float(np.min(distances)), float(np.max(distances))
