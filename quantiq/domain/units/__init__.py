"""Unit registry: kinds, unit definitions and the built-in catalog."""

from .catalog import (
    AreaUnits,
    EnergyUnits,
    LengthUnits,
    MassUnits,
    SpeedUnits,
    TemperatureUnits,
    TimeUnits,
    VolumeUnits,
)
from .kind import QuantityKind
from .registry import UnitRegistry, build_default_registry, default_registry
from .unit_definition import UnitDefinition

__all__ = [
    "AreaUnits",
    "EnergyUnits",
    "LengthUnits",
    "MassUnits",
    "QuantityKind",
    "SpeedUnits",
    "TemperatureUnits",
    "TimeUnits",
    "UnitDefinition",
    "UnitRegistry",
    "VolumeUnits",
    "build_default_registry",
    "default_registry",
]
