"""
Solar Simulator - a fixed-timestep N-body gravity core.

Features:
- Pairwise gravity with a clamped-distance singularity guard
- Symplectic Euler and velocity Verlet integrators
- Fixed-step clock decoupling physics from render frame time
- Scene presets, YAML/JSON scene configs and a headless CLI
"""

__version__ = "0.1.0"

from solar_sim.physics.simulator import Simulator
from solar_sim.physics.world import World, Body
from solar_sim.presets import get_preset, list_presets

__all__ = [
    "Simulator",
    "World",
    "Body",
    "get_preset",
    "list_presets",
]
