"""
Demo entrypoint.

Runs the object factory demo and the SOLID demo, printing their results to
stdout.  Diagnostics go through :mod:`logging`.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import LOG_LEVELS, ConfigError, DemoConfig, load_config
from .factory import (
    Client,
    ObjectRegistry,
    Vehicle,
    VehicleType,
    default_registry,
    register_default_vehicles,
)
from .solid import (
    BetterFilter,
    Color,
    ColorSpecification,
    Journal,
    JournalSaver,
    Product,
    Size,
    SizeSpecification,
)
from .utils.logging import configure_logging

LOG = logging.getLogger(__name__)

SAMPLE_ENTRIES = ("Dear XYZ", "I ate a bug", "I cried today")

SAMPLE_PRODUCTS = (
    Product("Apple", Color.GREEN, Size.SMALL),
    Product("Tree", Color.GREEN, Size.LARGE),
    Product("House", Color.BLUE, Size.LARGE),
    Product("Banana", Color.YELLOW, Size.SMALL),
    Product("Mountain", Color.GREEN, Size.LARGE),
)


def run_factory_demo(registry: Optional[ObjectRegistry[VehicleType, Vehicle]] = None) -> List[str]:
    if registry is None:
        registry = default_registry()
    register_default_vehicles(registry)

    lines: List[str] = []
    for vehicle_type in (VehicleType.TWO_WHEELER, VehicleType.THREE_WHEELER):
        client = Client(vehicle_type, registry=registry)
        if client.vehicle is not None:
            lines.append(client.vehicle.describe())
    return lines


def run_solid_demo(diary_path: Path) -> List[str]:
    journal = Journal()
    for entry in SAMPLE_ENTRIES:
        journal.add_entry(entry)
    JournalSaver.save(journal, diary_path)

    better: BetterFilter[Product] = BetterFilter()
    green = ColorSpecification(Color.GREEN)
    large = SizeSpecification(Size.LARGE)

    lines: List[str] = []
    lines.extend(f"{p.name} is green" for p in better.filter(SAMPLE_PRODUCTS, green))
    lines.extend(f"{p.name} is large" for p in better.filter(SAMPLE_PRODUCTS, large))
    lines.extend(f"{p.name} is green and large" for p in better.filter(SAMPLE_PRODUCTS, green & large))
    return lines


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Object factory and SOLID demos")
    parser.add_argument("--config", default=None, help="optional YAML config file")
    parser.add_argument("--diary", default=None, help="where the SRP demo writes its journal")
    parser.add_argument(
        "--demo",
        choices=("factory", "solid", "all"),
        default=None,
        help="which demo to run",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="logging level, e.g. INFO",
    )
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> DemoConfig:
    config = load_config(args.config)
    overrides = {}
    if args.diary is not None:
        overrides["diary_path"] = args.diary
    if args.demo is not None:
        overrides["demo"] = args.demo
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if not overrides:
        return config
    try:
        return DemoConfig(**{**config.model_dump(), **overrides})
    except ValidationError as exc:
        raise ConfigError(f"invalid command line override: {exc}") from exc


def run(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    config = resolve_config(args)
    configure_logging(config.log_level)

    if config.demo in ("factory", "all"):
        for line in run_factory_demo():
            print(line)
    if config.demo in ("solid", "all"):
        for line in run_solid_demo(config.diary_path):
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
