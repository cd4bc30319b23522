"""Tests covering the vehicle registry wiring and clients."""

from __future__ import annotations

import logging

from patterns.factory import (
    Client,
    FourWheeler,
    ObjectRegistry,
    SwitchClient,
    ThreeWheeler,
    TwoWheeler,
    VehicleType,
    default_registry,
    register_default_vehicles,
)


def _vehicle_registry() -> ObjectRegistry:
    registry = ObjectRegistry(kind="vehicle")
    register_default_vehicles(registry)
    return registry


def test_register_default_vehicles_covers_every_type() -> None:
    registry = _vehicle_registry()
    assert sorted(key.value for key in registry.keys()) == [2, 3, 4]


def test_client_gets_matching_vehicle() -> None:
    registry = _vehicle_registry()

    two = Client(VehicleType.TWO_WHEELER, registry=registry)
    three = Client(VehicleType.THREE_WHEELER, registry=registry)

    assert isinstance(two.vehicle, TwoWheeler)
    assert isinstance(three.vehicle, ThreeWheeler)
    assert two.vehicle.describe() == "I am a two wheeler"
    assert three.vehicle.describe() == "I am a three wheeler"


def test_client_without_registration_has_no_vehicle(caplog) -> None:
    registry = _vehicle_registry()
    registry.unregister(VehicleType.FOUR_WHEELER)

    with caplog.at_level(logging.WARNING):
        client = Client(VehicleType.FOUR_WHEELER, registry=registry)

    assert client.vehicle is None
    assert "Unknown vehicle type" in caplog.text


def test_new_variant_needs_no_client_change() -> None:
    registry = ObjectRegistry(kind="vehicle")
    registry.register(VehicleType.FOUR_WHEELER, FourWheeler.create)

    client = Client(VehicleType.FOUR_WHEELER, registry=registry)

    assert client.vehicle.describe() == "I am a four wheeler"


def test_switch_client_dispatches_known_types() -> None:
    assert isinstance(SwitchClient(VehicleType.TWO_WHEELER).vehicle, TwoWheeler)
    assert isinstance(SwitchClient(VehicleType.THREE_WHEELER).vehicle, ThreeWheeler)
    assert isinstance(SwitchClient(VehicleType.FOUR_WHEELER).vehicle, FourWheeler)


def test_switch_client_unknown_type(caplog) -> None:
    with caplog.at_level(logging.ERROR):
        client = SwitchClient("five wheeler")  # type: ignore[arg-type]
    assert client.vehicle is None
    assert "Unknown vehicle type" in caplog.text


def test_vehicle_construction_is_logged(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="patterns.factory.vehicles"):
        TwoWheeler.create()
    assert "Two wheeler ctor" in caplog.text


def test_client_uses_default_registry(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        assert Client(VehicleType.TWO_WHEELER).vehicle is None
    assert "Unknown vehicle type" in caplog.text

    register_default_vehicles(default_registry())
    client = Client(VehicleType.TWO_WHEELER)

    assert client.registry is default_registry()
    assert isinstance(client.vehicle, TwoWheeler)
