"""CLI main entry point."""

import argparse
import sys
from dataclasses import replace
import numpy as np
from solar_sim.physics.force_calculator import METHODS
from solar_sim.physics.integrators import INTEGRATORS
from solar_sim.presets import list_presets
from solar_sim.utils.config import Config, load_config, save_config, build_simulator


def frame_times(config: Config):
    """Yield simulated render frame durations until ``duration`` is covered.
    
    With ``frame_jitter`` > 0 each frame lasts frame_time * (1 ± jitter),
    drawn from a seeded generator, to emulate an uneven framerate.
    """
    rng = np.random.default_rng(config.seed)
    elapsed_total = 0.0
    while elapsed_total < config.duration:
        elapsed = config.frame_time
        if config.frame_jitter > 0:
            elapsed *= 1.0 + config.frame_jitter * rng.uniform(-1.0, 1.0)
        elapsed_total += elapsed
        yield elapsed


def run_simulation(config: Config):
    """Run a headless simulation and print diagnostics."""
    sim = build_simulator(config)
    world = sim.world
    
    print(f"Running simulation: {len(world)} bodies ({', '.join(world.names)})")
    print(f"Integrator: {sim.integrator.name}, dt: {sim.dt:.5f}, G: {sim.G}, softening: {sim.softening}, "
          f"forces: {config.force_method}")
    
    K0, U0, E0 = sim.get_energies()
    P0 = float(np.linalg.norm(sim.get_momentum()))
    r_min, r_max = sim.get_radial_extent()
    
    print(f"{'Frame':<8} {'Time':<10} {'Steps':<8} {'K':<12} {'U':<12} {'E':<12} {'|P|':<12} {'r_min':<9} {'r_max':<9} {'dE/E0':<10}")
    print("-" * 108)
    print(f"{0:<8} {0.0:<10.2f} {0:<8} {K0:<12.4f} {U0:<12.4f} {E0:<12.4f} {P0:<12.4e} {r_min:<9.3f} {r_max:<9.3f} {0.0:<10.4f}%")
    
    frame = 0
    for frame, elapsed in enumerate(frame_times(config), start=1):
        sim.advance(elapsed)
        
        if frame % config.debug_every == 0:
            K, U, E = sim.get_energies()
            P = float(np.linalg.norm(sim.get_momentum()))
            r_min, r_max = sim.get_radial_extent()
            dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
            print(f"{frame:<8} {sim.time:<10.2f} {sim.step_count:<8} {K:<12.4f} {U:<12.4f} {E:<12.4f} {P:<12.4e} {r_min:<9.3f} {r_max:<9.3f} {dE:<10.4f}%")
    
    print(f"\nFinal state after {frame} frames, {sim.step_count} steps, t = {sim.time:.3f}:")
    for body in world:
        x, y, z = body.position
        vx, vy, vz = body.velocity
        print(f"  {body.name:<16} pos=({x:9.3f}, {y:9.3f}, {z:9.3f})  vel=({vx:8.3f}, {vy:8.3f}, {vz:8.3f})")
    
    print("Simulation complete!")
    return sim


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solar Simulator - fixed-timestep N-body gravity")
    
    # Scene
    parser.add_argument('--config', type=str, default=None,
                       help='Scene/config file (.yaml, .yml or .json); flags override it')
    parser.add_argument('--preset', type=str, default=None, choices=list_presets(),
                       help='Preset scene (default: solar_system)')
    parser.add_argument('--recenter', action='store_true', default=None,
                       help='Move the initial state into the centre-of-mass frame')
    
    # Physics
    parser.add_argument('--G', type=float, default=None,
                       help='Gravitational constant (default: 1.0)')
    parser.add_argument('--softening', type=float, default=None,
                       help='Minimum pair separation used by the force law (default: 2.0)')
    parser.add_argument('--dt', type=float, default=None,
                       help='Fixed physics time step (default: 1/60)')
    parser.add_argument('--integrator', type=str, default=None, choices=list(INTEGRATORS.keys()),
                       help='Numerical integrator (default: symplectic_euler)')
    parser.add_argument('--force-method', type=str, default=None, choices=list(METHODS),
                       help='Acceleration evaluator (default: vectorized)')
    
    # Frame driver
    parser.add_argument('--duration', type=float, default=None,
                       help='Real seconds of frames to simulate (default: 60)')
    parser.add_argument('--frame-time', type=float, default=None,
                       help='Simulated render frame duration (default: 1/60)')
    parser.add_argument('--frame-jitter', type=float, default=None,
                       help='Relative frame time jitter in [0, 1) (default: 0)')
    parser.add_argument('--max-frame-time', type=float, default=None,
                       help='Cap on real time accepted per frame (default: 0.25)')
    parser.add_argument('--max-steps-per-frame', type=int, default=None,
                       help='Cap on fixed steps run per frame; backlog beyond it is dropped')
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for frame jitter')
    parser.add_argument('--debug-every', type=int, default=None,
                       help='Print diagnostics every N frames (default: 60)')
    
    # Info
    parser.add_argument('--save-config', type=str, default=None,
                       help='Write the effective config to this file and exit')
    parser.add_argument('--list-presets', action='store_true',
                       help='List available presets and exit')
    return parser


# argparse dest -> Config field
_OVERRIDES = {
    "preset": "preset",
    "recenter": "recenter",
    "G": "G",
    "softening": "softening",
    "dt": "dt",
    "integrator": "integrator",
    "force_method": "force_method",
    "duration": "duration",
    "frame_time": "frame_time",
    "frame_jitter": "frame_jitter",
    "max_frame_time": "max_frame_time",
    "max_steps_per_frame": "max_steps_per_frame",
    "seed": "seed",
    "debug_every": "debug_every",
}


def main(argv=None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if args.list_presets:
        print("Available presets:")
        for name in list_presets():
            print(f"  - {name}")
        return 0
    
    try:
        config = load_config(args.config) if args.config else Config()
        overrides = {field_name: getattr(args, dest) for dest, field_name in _OVERRIDES.items()
                     if getattr(args, dest) is not None}
        config = replace(config, **overrides).validate()
        
        if args.save_config:
            save_config(config, args.save_config)
            print(f"Config saved to {args.save_config}")
            return 0
        
        run_simulation(config)
    except (ValueError, OSError) as exc:
        print(f"solar-sim: error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
