"""Time primitive: a point in time as integer seconds and nanoseconds.

On the wire a time is the JSON object ``{"secs": <int>, "nsecs": <int>}``,
usually embedded as a field of a larger message (a header stamp, for
instance). Both fields are optional when parsing and always emitted when
serializing.

The nanoseconds accessor returns the stored nanoseconds. Older clients
returned the seconds field from it; that behaviour is not reproduced.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Dict

from rosbridge.core import time_utils
from rosbridge.core.enums import ClockSource
from rosbridge.messages import Message
from rosbridge.messages.message import require_mapping

from .base import Primitive, read_int_field
from .duration import Duration


@dataclass(frozen=True, slots=True, order=True)
class Time(Primitive):
    """Immutable ``(secs, nsecs)`` pair measured from the epoch.

    Ranges are not validated: ``nsecs`` is conventionally in ``[0, 1e9)`` and
    every factory in this class produces such values, but ``Time(1, 2e9)`` is
    stored as given. Equality, hashing and ordering compare ``(secs, nsecs)``
    field by field.
    """

    FIELD_SECS: ClassVar[str] = "secs"
    FIELD_NSECS: ClassVar[str] = "nsecs"
    TYPE: ClassVar[str] = "time"

    secs: int = 0
    nsecs: int = 0

    @classmethod
    def create(cls, secs: int = 0, nsecs: int = 0) -> "Time":
        """Build a time from seconds and optional nanoseconds (both default 0)."""

        return cls(secs, nsecs)

    def get_secs(self) -> int:
        return self.secs

    def get_nsecs(self) -> int:
        return self.nsecs

    def clone(self) -> "Time":
        """Return a new, equal Time that shares nothing with this one."""

        return Time(self.secs, self.nsecs)

    def to_nanoseconds(self) -> int:
        return time_utils.join_nanoseconds(self.secs, self.nsecs)

    def to_seconds(self) -> float:
        return self.to_nanoseconds() / time_utils.NSECS_PER_SEC

    def to_datetime(self) -> datetime:
        """Return an aware UTC datetime, treating the value as epoch-based.

        Only meaningful for wall-clock times; monotonic readings map to a
        date close to 1970. Precision is truncated to microseconds.
        """

        return time_utils.nanoseconds_to_datetime(self.to_nanoseconds())

    def is_zero(self) -> bool:
        return self.secs == 0 and self.nsecs == 0

    def to_structured_value(self) -> Dict[str, Any]:
        return {self.FIELD_SECS: self.secs, self.FIELD_NSECS: self.nsecs}

    # Arithmetic ----------------------------------------------------------
    def __add__(self, other: object) -> "Time":
        if not isinstance(other, Duration):
            return NotImplemented
        return Time.from_nanoseconds(self.to_nanoseconds() + other.to_nanoseconds())

    def __radd__(self, other: object) -> "Time":
        return self.__add__(other)

    def __sub__(self, other: object) -> "Time | Duration":
        if isinstance(other, Time):
            return Duration.from_nanoseconds(self.to_nanoseconds() - other.to_nanoseconds())
        if isinstance(other, Duration):
            return Time.from_nanoseconds(self.to_nanoseconds() - other.to_nanoseconds())
        return NotImplemented

    # Factories -----------------------------------------------------------
    @classmethod
    def now(cls, source: ClockSource = ClockSource.MONOTONIC) -> "Time":
        """Return the current reading of ``source`` (monotonic by default)."""

        return cls.from_nanoseconds(time_utils.read_clock_ns(source))

    @classmethod
    def from_nanoseconds(cls, total: int, *, exact: bool = True) -> "Time":
        """Split an elapsed nanosecond count into ``(secs, nsecs)``.

        ``exact=False`` uses the legacy float decomposition, which loses
        precision once ``abs(total)`` exceeds 2**53 and truncates negative
        counts toward zero.
        """

        if exact:
            secs, nsecs = time_utils.split_nanoseconds(total)
        else:
            secs, nsecs = time_utils.split_nanoseconds_float(total)
        return cls(secs, nsecs)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Time":
        """Convert an aware datetime to a time since the epoch."""

        return cls.from_nanoseconds(time_utils.datetime_to_nanoseconds(dt))

    @classmethod
    def from_json_string(cls, text: str | bytes) -> "Time":
        """Parse a JSON document; missing fields default to 0.

        Raises :class:`ParseError` for invalid JSON, a non-object root or a
        non-integer ``secs``/``nsecs``.
        """

        return cls.from_message(Message.from_json_string(text))

    @classmethod
    def from_message(cls, message: Message) -> "Time":
        return cls.from_structured_value(message.to_structured_value())

    @classmethod
    def from_structured_value(cls, value: Any) -> "Time":
        """Build a time from a JSON object; missing fields default to 0."""

        data = require_mapping(value)
        return cls(read_int_field(data, cls.FIELD_SECS), read_int_field(data, cls.FIELD_NSECS))


__all__ = ["Time"]
