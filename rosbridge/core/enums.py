"""Enumerations shared across the package."""
from __future__ import annotations

from enum import Enum


class ClockSource(str, Enum):
    """Where ``now()`` readings come from."""

    MONOTONIC = "monotonic"  # arbitrary reference point, never goes backwards
    WALL = "wall"  # nanoseconds since the Unix epoch
