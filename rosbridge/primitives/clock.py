"""Configured source of :class:`Time` readings."""
from __future__ import annotations

from rosbridge.config.models import ClockConfig
from rosbridge.core import time_utils

from .duration import Duration
from .time import Time


class Clock:
    """Produce ``Time`` values from the clock selected in :class:`ClockConfig`.

    ``Time.now()`` covers the common case; a ``Clock`` is useful when the
    source or the decomposition mode comes from configuration.
    """

    def __init__(self, config: ClockConfig | None = None) -> None:
        self._config = config or ClockConfig()

    @property
    def config(self) -> ClockConfig:
        return self._config

    def now(self) -> Time:
        reading = time_utils.read_clock_ns(self._config.source)
        return Time.from_nanoseconds(reading, exact=self._config.exact_decomposition)

    def elapsed_since(self, start: Time) -> Duration:
        """Return ``now() - start``; ``start`` must come from the same source."""

        return Duration.from_nanoseconds(self.now().to_nanoseconds() - start.to_nanoseconds())
