"""
Clients that need a vehicle.

:class:`SwitchClient` picks the concrete class itself and has to be edited for
every new vehicle type.  :class:`Client` asks a registry instead.
"""

from __future__ import annotations

import logging
from typing import Optional

from .registry import ObjectRegistry, default_registry
from .vehicles import FourWheeler, ThreeWheeler, TwoWheeler, Vehicle, VehicleType

LOG = logging.getLogger(__name__)


class SwitchClient:
    def __init__(self, vehicle_type: VehicleType) -> None:
        self.vehicle: Optional[Vehicle] = None
        if vehicle_type is VehicleType.TWO_WHEELER:
            self.vehicle = TwoWheeler()
        elif vehicle_type is VehicleType.THREE_WHEELER:
            self.vehicle = ThreeWheeler()
        elif vehicle_type is VehicleType.FOUR_WHEELER:
            self.vehicle = FourWheeler()
        else:
            LOG.error("Unknown vehicle type %r", vehicle_type)


class Client:
    """
    Holds the vehicle produced by ``registry`` for ``vehicle_type``.

    ``vehicle`` is ``None`` when nothing is registered for the type.
    """

    def __init__(
        self,
        vehicle_type: VehicleType,
        registry: Optional[ObjectRegistry[VehicleType, Vehicle]] = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.vehicle: Optional[Vehicle] = self.registry.create(vehicle_type)
