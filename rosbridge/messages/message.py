"""Generic rosbridge message: a JSON object tagged with a type name.

Typed values such as :class:`rosbridge.primitives.Time` convert to and from
this wrapper when they are embedded in larger protocol messages. The wrapper
itself knows nothing about the fields it carries.
"""
from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from rosbridge.core.errors import ParseError
from rosbridge.core.types import JSONLike

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class Message:
    """JSON object plus the message type string (``""`` when unknown)."""

    values: Dict[str, Any] = field(default_factory=dict)
    message_type: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.values, Mapping):
            raise TypeError(f"Message values must be a mapping, got {type(self.values).__name__}")
        self.values = dict(self.values)

    @classmethod
    def from_json_string(cls, text: str | bytes, message_type: str = "") -> "Message":
        """Parse ``text`` into a message; the JSON root must be an object."""

        return cls(parse_json_object(text), message_type)

    def to_structured_value(self) -> Dict[str, Any]:
        """Return a deep copy of the JSON object carried by the message."""

        return copy.deepcopy(self.values)

    def to_json_string(self) -> str:
        return json.dumps(self.values, separators=(",", ":"), ensure_ascii=False)

    def clone(self) -> "Message":
        return Message(self.to_structured_value(), self.message_type)

    def __str__(self) -> str:
        return self.to_json_string()


def parse_json_object(text: str | bytes) -> Dict[str, Any]:
    """Decode ``text`` and check that the document is a JSON object."""

    try:
        data = json.loads(text)
    except (TypeError, ValueError, RecursionError) as exc:
        LOGGER.debug("Rejected malformed JSON document", extra={"error": str(exc)})
        raise ParseError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        LOGGER.debug("Rejected non-object JSON document", extra={"json_type": type(data).__name__})
        raise ParseError(f"JSON root must be an object, got {type(data).__name__}")
    return data


def require_mapping(value: Any) -> JSONLike:
    """Return ``value`` if it is a JSON object, otherwise raise ParseError."""

    if not isinstance(value, Mapping):
        raise ParseError(f"Expected a JSON object, got {type(value).__name__}")
    return value


__all__ = ["Message", "parse_json_object", "require_mapping"]
