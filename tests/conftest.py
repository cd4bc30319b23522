from __future__ import annotations

from typing import Iterator

import pytest

from patterns.factory.registry import default_registry


@pytest.fixture(autouse=True)
def empty_default_registry() -> Iterator[None]:
    default_registry().clear()
    yield
    default_registry().clear()
