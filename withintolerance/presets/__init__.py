from .registry import Preset, ToleranceRegistry, get_registry

__all__ = [
    "Preset",
    "ToleranceRegistry",
    "get_registry",
]
