"""Preset initial conditions."""

from nbody_sim.presets.base import Preset
from nbody_sim.presets.binary import CircularBinary
from nbody_sim.presets.figure_eight import FigureEight

_PRESETS = {
    'binary': CircularBinary,
    'figure-eight': FigureEight,
}


def list_presets():
    return list(_PRESETS)


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = _PRESETS.get(name.lower().replace('_', '-'))
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list_presets()}")
    return preset_class(**kwargs)


__all__ = ["Preset", "CircularBinary", "FigureEight", "get_preset", "list_presets"]
