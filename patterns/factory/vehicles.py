"""
Vehicle products built through the object registry.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from .registry import ObjectRegistry

LOG = logging.getLogger(__name__)


class VehicleType(Enum):
    TWO_WHEELER = 2
    THREE_WHEELER = 3
    FOUR_WHEELER = 4


class Vehicle(Protocol):
    """Anything that can describe itself."""

    def describe(self) -> str: ...


class TwoWheeler:
    def __init__(self) -> None:
        LOG.info("Two wheeler ctor")

    @classmethod
    def create(cls) -> "TwoWheeler":
        return cls()

    def describe(self) -> str:
        return "I am a two wheeler"


class ThreeWheeler:
    def __init__(self) -> None:
        LOG.info("Three wheeler ctor")

    @classmethod
    def create(cls) -> "ThreeWheeler":
        return cls()

    def describe(self) -> str:
        return "I am a three wheeler"


class FourWheeler:
    def __init__(self) -> None:
        LOG.info("Four wheeler ctor")

    @classmethod
    def create(cls) -> "FourWheeler":
        return cls()

    def describe(self) -> str:
        return "I am a four wheeler"


def register_default_vehicles(registry: ObjectRegistry[VehicleType, Vehicle]) -> None:
    registry.register(VehicleType.TWO_WHEELER, TwoWheeler.create)
    registry.register(VehicleType.THREE_WHEELER, ThreeWheeler.create)
    registry.register(VehicleType.FOUR_WHEELER, FourWheeler.create)
