"""Preset scenes for the N-body core."""

import inspect
from typing import List
from solar_sim.presets.base import Preset
from solar_sim.presets.solar_system import SolarSystem
from solar_sim.presets.two_body import TwoBody

PRESETS = {
    "solar_system": SolarSystem,
    "two_body": TwoBody,
}


def list_presets() -> List[str]:
    """Names accepted by get_preset()."""
    return list(PRESETS.keys())


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name.
    
    Raises:
        ValueError: If the name is unknown or a parameter is not accepted
    """
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list_presets()}")
    try:
        inspect.signature(preset_class).bind(**kwargs)
    except TypeError as exc:
        raise ValueError(f"Invalid parameters for preset {name}: {exc}") from exc
    return preset_class(**kwargs)


__all__ = [
    "Preset",
    "SolarSystem",
    "TwoBody",
    "PRESETS",
    "get_preset",
    "list_presets",
]
