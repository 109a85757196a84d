"""World state: a fixed set of point masses and their kinematics."""

from typing import Dict, Iterator, Optional, Sequence, Tuple
import numpy as np


class Body:
    """Handle to one body in a World.

    ``position`` and ``velocity`` are live views into the World arrays, so a
    host holding a Body always reads the state of the last completed step.
    """

    __slots__ = ("_world", "_index")

    def __init__(self, world: "World", index: int):
        self._world = world
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def name(self) -> str:
        return self._world.names[self._index]

    @property
    def mass(self) -> float:
        return float(self._world.masses[self._index])

    @property
    def position(self) -> np.ndarray:
        return self._world.positions[self._index]

    @property
    def velocity(self) -> np.ndarray:
        return self._world.velocities[self._index]

    def __repr__(self) -> str:
        return f"Body(name={self.name!r}, mass={self.mass:g})"


class World:
    """Ordered, fixed-size collection of bodies.

    State lives in three NumPy arrays: positions (n, 3), velocities (n, 3)
    and masses (n,). Updates are written into these arrays in place; the
    arrays themselves are never rebound.
    """

    def __init__(
        self,
        positions,
        velocities,
        masses,
        names: Optional[Sequence[str]] = None
    ):
        """Build and validate a world.

        Args:
            positions: Array-like of shape (n, 3)
            velocities: Array-like of shape (n, 3)
            masses: Array-like of shape (n,)
            names: Optional unique body names (default: body-0, body-1, ...)

        Raises:
            ValueError: If shapes disagree, a mass is not strictly positive,
                a value is not finite, two bodies coincide, or names repeat.
        """
        positions = np.array(positions, dtype=np.float64)
        velocities = np.array(velocities, dtype=np.float64)
        masses = np.array(masses, dtype=np.float64).reshape(-1)

        if positions.ndim != 2 or positions.shape[1] != 3:
            raise ValueError(f"positions must have shape (n, 3), got {positions.shape}")
        n = positions.shape[0]
        if n == 0:
            raise ValueError("a world needs at least one body")
        if velocities.shape != (n, 3):
            raise ValueError(f"velocities must have shape ({n}, 3), got {velocities.shape}")
        if masses.shape != (n,):
            raise ValueError(f"masses must have shape ({n},), got {masses.shape}")

        if names is None:
            names = [f"body-{i}" for i in range(n)]
        names = tuple(str(name) for name in names)
        if len(names) != n:
            raise ValueError(f"expected {n} names, got {len(names)}")
        if len(set(names)) != n:
            raise ValueError(f"body names must be unique: {list(names)}")

        for i in range(n):
            if not np.isfinite(masses[i]) or masses[i] <= 0.0:
                raise ValueError(f"body {names[i]!r}: mass must be finite and > 0, got {masses[i]}")
            if not np.all(np.isfinite(positions[i])):
                raise ValueError(f"body {names[i]!r}: position is not finite")
            if not np.all(np.isfinite(velocities[i])):
                raise ValueError(f"body {names[i]!r}: velocity is not finite")

        # Coincident bodies have no defined direction between them
        for i in range(n):
            for j in range(i + 1, n):
                if np.array_equal(positions[i], positions[j]):
                    raise ValueError(f"bodies {names[i]!r} and {names[j]!r} share the same position")

        self.positions = positions
        self.velocities = velocities
        self.masses = masses
        self.names = names
        self.bodies = tuple(Body(self, i) for i in range(n))
        self._index = {name: i for i, name in enumerate(names)}

    @property
    def n_bodies(self) -> int:
        return len(self.bodies)

    def __len__(self) -> int:
        return len(self.bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self.bodies)

    def __getitem__(self, key) -> Body:
        """Look up a body by name or by index."""
        if isinstance(key, str):
            return self.bodies[self._index[key]]
        return self.bodies[key]

    def commit(self, positions, velocities):
        """Write a completed step into the world arrays in place."""
        self.positions[...] = positions
        self.velocities[...] = velocities

    def recenter(self):
        """Shift into the centre-of-mass frame (COM at origin, zero net momentum)."""
        total_mass = np.sum(self.masses)
        com = np.sum(self.masses[:, np.newaxis] * self.positions, axis=0) / total_mass
        com_v = np.sum(self.masses[:, np.newaxis] * self.velocities, axis=0) / total_mass
        self.positions -= com
        self.velocities -= com_v

    def by_body(self, values) -> Dict[str, np.ndarray]:
        """Key a per-body array (e.g. accelerations) by body name."""
        values = np.asarray(values)
        if values.shape[0] != self.n_bodies:
            raise ValueError(f"expected {self.n_bodies} rows, got {values.shape[0]}")
        return {name: values[i] for i, name in enumerate(self.names)}

    def get_state(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return copies of (positions, velocities, masses)."""
        return self.positions.copy(), self.velocities.copy(), self.masses.copy()
