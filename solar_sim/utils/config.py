"""Configuration management."""

import json
import math
import yaml
from typing import Dict, Any, List, Optional, Tuple
from pathlib import Path
from dataclasses import dataclass, asdict, field, fields

import numpy as np

from solar_sim.physics.force_calculator import METHODS
from solar_sim.physics.integrators import INTEGRATORS, get_integrator
from solar_sim.physics.simulator import Simulator
from solar_sim.presets import get_preset

BODY_KEYS = {"name", "mass", "position", "velocity"}


@dataclass
class Config:
    """Simulation configuration."""
    # Scene
    preset: str = "solar_system"
    preset_params: Dict[str, Any] = field(default_factory=dict)
    bodies: Optional[List[Dict[str, Any]]] = None
    recenter: bool = False
    
    # Physics
    G: float = 1.0
    softening: float = 2.0
    dt: float = 1.0 / 60.0
    integrator: str = "symplectic_euler"
    force_method: str = "vectorized"
    
    # Frame driver
    max_frame_time: Optional[float] = 0.25
    max_steps_per_frame: Optional[int] = None
    duration: float = 60.0
    frame_time: float = 1.0 / 60.0
    frame_jitter: float = 0.0
    seed: Optional[int] = None
    debug_every: int = 60
    
    def validate(self):
        """Check values; raise ValueError on the first problem found."""
        for name in ("preset", "integrator", "force_method"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string, got {getattr(self, name)!r}")
        if not isinstance(self.preset_params, dict):
            raise ValueError(f"preset_params must be a mapping, got {self.preset_params!r}")
        if not isinstance(self.recenter, bool):
            raise ValueError(f"recenter must be true or false, got {self.recenter!r}")
        
        dt = _number("dt", self.dt)
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        if _number("G", self.G) < 0:
            raise ValueError(f"G must be non-negative, got {self.G}")
        if _number("softening", self.softening) <= 0:
            raise ValueError(f"softening must be positive, got {self.softening}")
        if self.integrator.lower() not in INTEGRATORS:
            raise ValueError(f"Unknown integrator: {self.integrator}. Available: {list(INTEGRATORS.keys())}")
        if self.force_method not in METHODS:
            raise ValueError(f"Unknown force method: {self.force_method}. Available: {list(METHODS)}")
        
        if self.max_frame_time is not None and _number("max_frame_time", self.max_frame_time) <= 0:
            raise ValueError(f"max_frame_time must be positive, got {self.max_frame_time}")
        if self.max_steps_per_frame is not None and _integer("max_steps_per_frame", self.max_steps_per_frame) < 1:
            raise ValueError(f"max_steps_per_frame must be >= 1, got {self.max_steps_per_frame}")
        if _number("duration", self.duration) < 0:
            raise ValueError(f"duration must be non-negative, got {self.duration}")
        if _number("frame_time", self.frame_time) <= 0:
            raise ValueError(f"frame_time must be positive, got {self.frame_time}")
        if not 0.0 <= _number("frame_jitter", self.frame_jitter) < 1.0:
            raise ValueError(f"frame_jitter must be in [0, 1), got {self.frame_jitter}")
        if self.seed is not None:
            _integer("seed", self.seed)
        if _integer("debug_every", self.debug_every) < 1:
            raise ValueError(f"debug_every must be >= 1, got {self.debug_every}")
        
        if self.bodies is not None:
            if not isinstance(self.bodies, list) or len(self.bodies) == 0:
                raise ValueError("bodies must be a non-empty list")
            for i, body in enumerate(self.bodies):
                _check_body(i, body)
        return self


def _number(name: str, value) -> float:
    """Finite int or float (bool excluded), else ValueError."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return float(value)


def _integer(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def _check_body(i: int, body: Dict[str, Any]):
    if not isinstance(body, dict):
        raise ValueError(f"bodies[{i}] must be a mapping, got {type(body).__name__}")
    unknown = set(body) - BODY_KEYS
    if unknown:
        raise ValueError(f"bodies[{i}] has unknown keys: {sorted(unknown)}")
    if "mass" not in body or "position" not in body:
        raise ValueError(f"bodies[{i}] needs at least 'mass' and 'position'")
    _number(f"bodies[{i}].mass", body["mass"])
    if "name" in body and not isinstance(body["name"], str):
        raise ValueError(f"bodies[{i}].name must be a string, got {body['name']!r}")
    for key in ("position", "velocity"):
        if key not in body:
            continue
        vector = body[key]
        if not isinstance(vector, (list, tuple)) or len(vector) != 3:
            raise ValueError(f"bodies[{i}].{key} must be a list of 3 numbers, got {vector!r}")
        for component in vector:
            _number(f"bodies[{i}].{key}", component)


def config_from_dict(data: Dict[str, Any]) -> Config:
    """Build a validated Config, rejecting unknown keys."""
    known = {f.name for f in fields(Config)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    return Config(**data).validate()


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object
    """
    config_path = Path(config_path)
    
    with open(config_path, 'r') as f:
        if config_path.suffix == '.yaml' or config_path.suffix == '.yml':
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"{config_path}: invalid YAML: {exc}") from exc
        else:
            data = json.load(f)
    
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: top level must be a mapping")
    return config_from_dict(data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)
    
    with open(output_path, 'w') as f:
        if output_path.suffix == '.yaml' or output_path.suffix == '.yml':
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)


def build_scene(config: Config) -> Tuple:
    """Initial (positions, velocities, masses, names) for a config.
    
    An explicit ``bodies`` list wins over the preset.
    """
    if config.bodies is not None:
        positions = np.array([b["position"] for b in config.bodies], dtype=np.float64)
        velocities = np.array([b.get("velocity", [0.0, 0.0, 0.0]) for b in config.bodies], dtype=np.float64)
        masses = np.array([b["mass"] for b in config.bodies], dtype=np.float64)
        names = [b.get("name", f"body-{i}") for i, b in enumerate(config.bodies)]
        return positions, velocities, masses, names
    
    params = dict(config.preset_params)
    params.setdefault("G", config.G)
    preset = get_preset(config.preset, **params)
    return preset.generate()


def build_simulator(config: Config) -> Simulator:
    """Create and initialize a Simulator from a config."""
    config.validate()
    sim = Simulator(
        integrator=get_integrator(config.integrator),
        dt=config.dt,
        G=config.G,
        softening=config.softening,
        force_method=config.force_method,
        max_frame_time=config.max_frame_time,
        max_steps_per_frame=config.max_steps_per_frame,
    )
    positions, velocities, masses, names = build_scene(config)
    sim.initialize(positions, velocities, masses, names=names, recenter=config.recenter)
    return sim
