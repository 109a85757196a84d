"""Pairwise gravitational accelerations with a clamped-distance singularity guard.

Every unordered pair (i, j) is visited once and contributes to both bodies
(Newton's third law). The separation used for both normalisation and the
inverse-square law is clamped to ``softening``:

    a_i += G * m_j * d / max(r, softening)^3,   d = x_j - x_i
    a_j -= G * m_i * d / max(r, softening)^3

so forces stay finite for near-coincident bodies and vanish at exact
coincidence.
"""

from typing import Literal
import numpy as np

METHODS = ("vectorized", "pairwise")


def pair_force(
    position_i,
    mass_i: float,
    position_j,
    mass_j: float,
    G: float = 1.0,
    softening: float = 2.0
) -> np.ndarray:
    """Force on body i due to body j.

    Args:
        position_i: Position of body i (3,)
        mass_i: Mass of body i
        position_j: Position of body j (3,)
        mass_j: Mass of body j
        G: Gravitational constant
        softening: Minimum separation substituted for closer pairs

    Returns:
        Force vector (3,); pair_force(i, j) == -pair_force(j, i)
    """
    d = np.asarray(position_j, dtype=np.float64) - np.asarray(position_i, dtype=np.float64)
    r = max(float(np.linalg.norm(d)), softening)
    return (G * mass_i * mass_j / r ** 3) * d


class ForceCalculator:
    """Acceleration evaluator; pure function of positions and masses."""

    def __init__(self, method: Literal["vectorized", "pairwise"] = "vectorized"):
        if method not in METHODS:
            raise ValueError(f"Unknown force method '{method}'. Available: {list(METHODS)}")
        self.method = method

    def compute_accelerations(
        self,
        positions,
        masses,
        G: float = 1.0,
        softening: float = 2.0
    ) -> np.ndarray:
        """Compute the net gravitational acceleration on every body.

        Inputs are read only; a new array is returned.

        Args:
            positions: (n, 3) array
            masses: (n,) array
            G: Gravitational constant
            softening: Minimum separation (> 0)

        Returns:
            (n, 3) accelerations in the same order as positions
        """
        positions = np.asarray(positions, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).reshape(-1)
        n = positions.shape[0]

        if n < 2 or G == 0.0:
            return np.zeros_like(positions)

        if self.method == "pairwise":
            return self._compute_pairwise(positions, masses, G, softening)
        return self._compute_vectorized(positions, masses, G, softening)

    def _compute_pairwise(self, positions, masses, G, softening) -> np.ndarray:
        """Explicit loop over i < j pairs."""
        n = positions.shape[0]
        accelerations = np.zeros_like(positions)
        for i in range(n - 1):
            for j in range(i + 1, n):
                d = positions[j] - positions[i]
                r = max(float(np.linalg.norm(d)), softening)
                scaled = (G / r ** 3) * d
                accelerations[i] += masses[j] * scaled
                accelerations[j] -= masses[i] * scaled
        return accelerations

    def _compute_vectorized(self, positions, masses, G, softening) -> np.ndarray:
        """Same pair sum using NumPy gathers over the upper triangle."""
        n = positions.shape[0]
        i_idx, j_idx = np.triu_indices(n, k=1)

        # d: (n_pairs, 3)
        d = positions[j_idx] - positions[i_idx]
        r = np.maximum(np.linalg.norm(d, axis=1), softening)
        scaled = (G / r ** 3)[:, np.newaxis] * d

        accelerations = np.zeros_like(positions)
        # np.add.at accumulates repeated indices, unlike fancy-index +=
        np.add.at(accelerations, i_idx, masses[j_idx][:, np.newaxis] * scaled)
        np.add.at(accelerations, j_idx, -masses[i_idx][:, np.newaxis] * scaled)
        return accelerations
