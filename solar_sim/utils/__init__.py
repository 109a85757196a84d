"""Configuration utilities."""

from solar_sim.utils.config import Config, load_config, save_config, build_scene, build_simulator

__all__ = ["Config", "load_config", "save_config", "build_scene", "build_simulator"]
