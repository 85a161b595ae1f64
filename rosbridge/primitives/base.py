"""Shared capability of primitive values.

A primitive stores its own typed fields and knows how to present itself as a
structured JSON value tagged with a type name. Nothing here caches the JSON
form; it is rebuilt from the fields on every call.
"""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict

from rosbridge.core.errors import ParseError
from rosbridge.core.types import JSONLike
from rosbridge.messages import Message

LOGGER = logging.getLogger(__name__)


class Primitive(ABC):
    """Base class for values that round-trip through structured JSON."""

    __slots__ = ()

    TYPE: ClassVar[str]

    @abstractmethod
    def to_structured_value(self) -> Dict[str, Any]:
        """Return the JSON object representing this value."""

    def to_message(self) -> Message:
        """Wrap the structured value in a :class:`Message` tagged with ``TYPE``."""

        return Message(self.to_structured_value(), self.TYPE)

    def to_json_string(self) -> str:
        return json.dumps(self.to_structured_value(), separators=(",", ":"))


def read_int_field(value: JSONLike, key: str, default: int = 0) -> int:
    """Return integer ``value[key]`` or ``default`` when the key is absent.

    ``bool`` is rejected even though it subclasses ``int``: ``true`` is not a
    valid seconds count on the wire.
    """

    if key not in value:
        return default
    raw = value[key]
    if isinstance(raw, bool) or not isinstance(raw, int):
        LOGGER.debug("Rejected non-integer field", extra={"field": key, "json_type": type(raw).__name__})
        raise ParseError(f"Field {key!r} must be an integer, got {type(raw).__name__}")
    return raw


__all__ = ["Primitive", "read_int_field"]
