"""Utility helpers for the demos."""

from .logging import configure_logging

__all__ = ["configure_logging"]
