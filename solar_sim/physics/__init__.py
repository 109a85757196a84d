"""Physics engine for the N-body core."""

from solar_sim.physics.world import World, Body
from solar_sim.physics.force_calculator import ForceCalculator, pair_force
from solar_sim.physics.clock import FixedStepClock
from solar_sim.physics.simulator import Simulator

__all__ = ["World", "Body", "ForceCalculator", "pair_force", "FixedStepClock", "Simulator"]
