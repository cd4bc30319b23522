"""
Design pattern demos.

``patterns.factory`` holds the key based object registry and the vehicle
example built on it; ``patterns.solid`` holds the single responsibility and
open-closed examples.
"""

from __future__ import annotations

__version__ = "0.1.0"
