"""Basic example of using the solar simulator."""

from solar_sim import Simulator, get_preset


def main():
    """Run the sun + three planets scene headless."""
    preset = get_preset("solar_system", G=1.0)
    positions, velocities, masses, names = preset.generate()
    
    sim = Simulator(dt=1.0 / 60.0, G=1.0, softening=2.0)
    world = sim.initialize(positions, velocities, masses, names=names)
    
    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6f}")
    
    # Uneven frames: the clock still advances physics in fixed steps
    for frame in range(600):
        elapsed = 1.0 / 30.0 if frame % 3 == 0 else 1.0 / 90.0
        sim.advance(elapsed)
        if frame % 100 == 0:
            r_min, r_max = sim.get_radial_extent()
            print(f"Frame {frame}: Time={sim.time:.2f}, Energy={sim.get_energy():.6f}, "
                  f"r_min={r_min:.2f}, r_max={r_max:.2f}")
    
    for body in world:
        print(f"{body.name}: {body.position}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
