from __future__ import annotations

import logging
from typing import Callable, Iterator

import pytest

from rosbridge.core import time_utils

WALL_NS = 1_700_000_000_123_456_789
MONOTONIC_NS = 42_500_000_001


@pytest.fixture
def frozen_clock(monkeypatch: pytest.MonkeyPatch) -> dict[str, int]:
    """Pin both clocks read by ``time_utils.read_clock_ns``."""

    readings = {"wall": WALL_NS, "monotonic": MONOTONIC_NS}
    monkeypatch.setattr(time_utils.time, "time_ns", lambda: readings["wall"])
    monkeypatch.setattr(time_utils.time, "monotonic_ns", lambda: readings["monotonic"])
    return readings


@pytest.fixture
def time_doc() -> Callable[..., dict[str, object]]:
    def _factory(**fields: object) -> dict[str, object]:
        payload: dict[str, object] = {"secs": 12, "nsecs": 345}
        payload.update(fields)
        return payload

    return _factory


@pytest.fixture
def isolated_logger() -> Iterator[str]:
    name = "rosbridge.test"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
