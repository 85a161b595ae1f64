"""Helpers for splitting and reading nanosecond counts.

All primitives store a ``(secs, nsecs)`` pair. The helpers below are the single
place where a flat nanosecond count is split into that pair or read from a
clock, so ``Time``, ``Duration`` and ``Clock`` agree on the arithmetic.
"""
from __future__ import annotations

import math
import time
from datetime import datetime, timedelta, timezone

from .enums import ClockSource

NSECS_PER_SEC = 1_000_000_000
NSECS_PER_USEC = 1_000
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def split_nanoseconds(total: int) -> tuple[int, int]:
    """Split ``total`` into whole seconds and a remainder in ``[0, 1e9)``.

    Floor semantics: ``-1`` becomes ``(-1, 999_999_999)``.
    """

    secs, nsecs = divmod(int(total), NSECS_PER_SEC)
    return secs, nsecs


def split_nanoseconds_float(total: int) -> tuple[int, int]:
    """Legacy floating-point split kept for compatibility with older data.

    Both parts are truncated toward zero, so negative counts produce a
    negative remainder. Exact only while ``abs(total)`` stays below 2**53.
    """

    conversion = total / float(NSECS_PER_SEC)
    secs = math.trunc(conversion)
    nsecs = math.trunc((conversion - secs) * NSECS_PER_SEC)
    return secs, nsecs


def join_nanoseconds(secs: int, nsecs: int) -> int:
    """Return the exact nanosecond total for a ``(secs, nsecs)`` pair."""

    return secs * NSECS_PER_SEC + nsecs


def read_clock_ns(source: ClockSource = ClockSource.MONOTONIC) -> int:
    """Return the current reading of ``source`` in nanoseconds."""

    if source is ClockSource.WALL:
        return time.time_ns()
    return time.monotonic_ns()


def nanoseconds_to_datetime(total: int) -> datetime:
    """Convert nanoseconds since the epoch to an aware UTC datetime.

    ``datetime`` only carries microseconds; the sub-microsecond part is
    dropped (floored).
    """

    return EPOCH + timedelta(microseconds=total // NSECS_PER_USEC)


def datetime_to_nanoseconds(dt: datetime) -> int:
    """Convert an aware datetime to nanoseconds since the epoch."""

    if dt.tzinfo is None:
        raise ValueError("Datetime must be timezone-aware before conversion")
    return timedelta_to_nanoseconds(dt - EPOCH)


def timedelta_to_nanoseconds(delta: timedelta) -> int:
    """Exact nanosecond count of ``delta`` (no float round trip)."""

    micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
    return micros * NSECS_PER_USEC
