"""Core definitions shared by messages, primitives and config.

This package aggregates enums, type aliases, nanosecond helpers and error
classes. Higher level packages import from here to avoid circular
dependencies.
"""

from . import enums, errors, time_utils, types

__all__ = ["enums", "errors", "time_utils", "types"]
