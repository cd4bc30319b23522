"""
Object factory demo: vehicles created by key through a registry.
"""

from __future__ import annotations

__all__ = [
    "Client",
    "FourWheeler",
    "ObjectRegistry",
    "SwitchClient",
    "ThreeWheeler",
    "TwoWheeler",
    "UnknownKey",
    "Vehicle",
    "VehicleType",
    "default_registry",
    "register_default_vehicles",
]

from .registry import ObjectRegistry, UnknownKey, default_registry
from .vehicles import (
    FourWheeler,
    ThreeWheeler,
    TwoWheeler,
    Vehicle,
    VehicleType,
    register_default_vehicles,
)
from .client import Client, SwitchClient
