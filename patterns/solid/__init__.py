"""
SOLID demos: single responsibility and open-closed.
"""

from __future__ import annotations

__all__ = [
    "AndSpecification",
    "BetterFilter",
    "Color",
    "ColorSpecification",
    "Filter",
    "Journal",
    "JournalSaver",
    "Product",
    "ProductFilter",
    "Size",
    "SizeSpecification",
    "Specification",
]

from .journal import Journal, JournalSaver
from .specification import (
    AndSpecification,
    BetterFilter,
    Color,
    ColorSpecification,
    Filter,
    Product,
    ProductFilter,
    Size,
    SizeSpecification,
    Specification,
)
