"""Duration primitive: a signed span of seconds and nanoseconds."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, ClassVar, Dict

from rosbridge.core import time_utils
from rosbridge.messages import Message
from rosbridge.messages.message import parse_json_object, require_mapping

from .base import Primitive, read_int_field


@dataclass(frozen=True, slots=True, order=True)
class Duration(Primitive):
    """Span of time on the wire as ``{"secs": int, "nsecs": int}``.

    Values built through :meth:`from_nanoseconds` keep ``nsecs`` in
    ``[0, 1e9)`` with the sign carried by ``secs``; values built directly are
    stored as given.
    """

    FIELD_SECS: ClassVar[str] = "secs"
    FIELD_NSECS: ClassVar[str] = "nsecs"
    TYPE: ClassVar[str] = "duration"

    secs: int = 0
    nsecs: int = 0

    @classmethod
    def create(cls, secs: int = 0, nsecs: int = 0) -> "Duration":
        return cls(secs, nsecs)

    def get_secs(self) -> int:
        return self.secs

    def get_nsecs(self) -> int:
        return self.nsecs

    def clone(self) -> "Duration":
        return Duration(self.secs, self.nsecs)

    def to_nanoseconds(self) -> int:
        return time_utils.join_nanoseconds(self.secs, self.nsecs)

    def to_seconds(self) -> float:
        return self.to_nanoseconds() / time_utils.NSECS_PER_SEC

    def to_timedelta(self) -> timedelta:
        """Return a timedelta, floored to microsecond precision."""

        return timedelta(microseconds=self.to_nanoseconds() // time_utils.NSECS_PER_USEC)

    def is_zero(self) -> bool:
        return self.to_nanoseconds() == 0

    def to_structured_value(self) -> Dict[str, Any]:
        return {self.FIELD_SECS: self.secs, self.FIELD_NSECS: self.nsecs}

    # Arithmetic ----------------------------------------------------------
    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_nanoseconds(self.to_nanoseconds() + other.to_nanoseconds())

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_nanoseconds(self.to_nanoseconds() - other.to_nanoseconds())

    def __neg__(self) -> "Duration":
        return Duration.from_nanoseconds(-self.to_nanoseconds())

    # Factories -----------------------------------------------------------
    @classmethod
    def from_nanoseconds(cls, total: int, *, exact: bool = True) -> "Duration":
        if exact:
            secs, nsecs = time_utils.split_nanoseconds(total)
        else:
            secs, nsecs = time_utils.split_nanoseconds_float(total)
        return cls(secs, nsecs)

    @classmethod
    def from_seconds(cls, seconds: float) -> "Duration":
        return cls.from_nanoseconds(round(seconds * time_utils.NSECS_PER_SEC))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        return cls.from_nanoseconds(time_utils.timedelta_to_nanoseconds(delta))

    @classmethod
    def from_json_string(cls, text: str | bytes) -> "Duration":
        """Parse a duration document; missing fields default to 0."""

        return cls.from_structured_value(parse_json_object(text))

    @classmethod
    def from_message(cls, message: Message) -> "Duration":
        return cls.from_structured_value(message.to_structured_value())

    @classmethod
    def from_structured_value(cls, value: Any) -> "Duration":
        data = require_mapping(value)
        return cls(read_int_field(data, cls.FIELD_SECS), read_int_field(data, cls.FIELD_NSECS))


__all__ = ["Duration"]
