"""
Open-closed filtering of products.

:class:`ProductFilter` needs a new method for every attribute combination.
:class:`BetterFilter` takes a :class:`Specification` instead, so new criteria
are added as new specification classes and combined with ``&``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, List, TypeVar

T = TypeVar("T")


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"


class Size(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class Product:
    name: str
    color: Color
    size: Size


class ProductFilter:
    @staticmethod
    def by_color(items: Iterable[Product], color: Color) -> List[Product]:
        return [item for item in items if item.color == color]

    @staticmethod
    def by_size(items: Iterable[Product], size: Size) -> List[Product]:
        return [item for item in items if item.size == size]

    @staticmethod
    def by_size_and_color(items: Iterable[Product], size: Size, color: Color) -> List[Product]:
        return [item for item in items if item.size == size and item.color == color]


class Specification(ABC, Generic[T]):
    @abstractmethod
    def is_satisfied(self, item: T) -> bool:
        raise NotImplementedError

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)


class ColorSpecification(Specification[Product]):
    def __init__(self, color: Color) -> None:
        self.color = color

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color


class SizeSpecification(Specification[Product]):
    def __init__(self, size: Size) -> None:
        self.size = size

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self.size


class AndSpecification(Specification[T]):
    def __init__(self, first: Specification[T], second: Specification[T]) -> None:
        self.first = first
        self.second = second

    def is_satisfied(self, item: T) -> bool:
        return self.first.is_satisfied(item) and self.second.is_satisfied(item)


class Filter(ABC, Generic[T]):
    @abstractmethod
    def filter(self, items: Iterable[T], spec: Specification[T]) -> List[T]:
        raise NotImplementedError


class BetterFilter(Filter[T]):
    def filter(self, items: Iterable[T], spec: Specification[T]) -> List[T]:
        """Return the items satisfying ``spec``, in input order."""

        return [item for item in items if spec.is_satisfied(item)]
