"""Error hierarchy shared by the package.

Callers can catch :class:`RosbridgeError` to handle every failure raised here,
or the more specific subclasses when they need to tell a malformed document
apart from a broken configuration file.
"""
from __future__ import annotations


class RosbridgeError(Exception):
    """Base class for all custom exceptions in the package."""


class ParseError(RosbridgeError, ValueError):
    """Raised when JSON text or a structured value cannot be decoded."""


class ConfigurationError(RosbridgeError):
    """Raised when configuration files are missing or invalid."""
