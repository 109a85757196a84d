"""Example scene host: matplotlib animation driving the fixed-step clock.

Requires the ``render`` extra (matplotlib).
"""

import time
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from solar_sim import Simulator, get_preset


def main():
    """Animate the solar system; physics speed does not depend on the draw rate."""
    positions, velocities, masses, names = get_preset("solar_system").generate()
    sim = Simulator(dt=1.0 / 120.0)
    world = sim.initialize(positions, velocities, masses, names=names)
    
    fig, ax = plt.subplots(figsize=(8, 8))
    fig.patch.set_facecolor("black")
    ax.set_facecolor("black")
    ax.set_xlim(-40, 40)
    ax.set_ylim(-40, 40)
    ax.set_aspect("equal")
    ax.set_xlabel("x")
    ax.set_ylabel("z")
    
    sizes = 20.0 * np.cbrt(world.masses / world.masses.min())
    colors = ["yellow"] + ["tab:orange", "tab:blue", "tab:red"][: len(world) - 1]
    # Orbits lie in the x-z plane
    scatter = ax.scatter(world.positions[:, 0], world.positions[:, 2], s=sizes, c=colors)
    label = ax.text(-38, 36, "", color="white")
    
    last = [time.perf_counter()]
    
    def update(_frame):
        now = time.perf_counter()
        n_steps = sim.advance(now - last[0])
        last[0] = now
        scatter.set_offsets(world.positions[:, [0, 2]])
        label.set_text(f"t={sim.time:6.2f}  steps this frame={n_steps}")
        return scatter, label
    
    animation = FuncAnimation(fig, update, interval=16, blit=True, cache_frame_data=False)
    plt.show()
    return animation


if __name__ == "__main__":
    main()
