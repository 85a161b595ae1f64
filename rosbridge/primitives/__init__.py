"""Primitive value types of the rosbridge protocol."""
from .base import Primitive
from .clock import Clock
from .duration import Duration
from .time import Time

__all__ = ["Clock", "Duration", "Primitive", "Time"]
