from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from rosbridge.core.enums import ClockSource
from rosbridge.core.errors import ParseError
from rosbridge.messages import Message
from rosbridge.primitives import Duration, Time


@pytest.mark.parametrize(("secs", "nsecs"), [(0, 0), (5, 0), (12, 345), (-3, 999_999_999), (2**31 - 1, 2**31 - 1)])
def test_time_accessors_should_return_stored_fields(secs: int, nsecs: int) -> None:
    stamp = Time.create(secs, nsecs)
    assert stamp.get_secs() == secs
    assert stamp.get_nsecs() == nsecs
    assert (stamp.secs, stamp.nsecs) == (secs, nsecs)


def test_time_nanoseconds_accessor_should_not_return_seconds() -> None:
    stamp = Time(7, 11)
    assert stamp.get_nsecs() == 11
    assert stamp.get_nsecs() != stamp.get_secs()


def test_time_should_default_to_zero() -> None:
    assert Time.create() == Time(0, 0)
    assert Time().get_secs() == 0
    assert Time().get_nsecs() == 0
    assert Time().is_zero()


def test_time_with_seconds_only_should_zero_nanoseconds() -> None:
    stamp = Time.create(5)
    assert stamp.get_secs() == 5
    assert stamp.get_nsecs() == 0


def test_time_should_be_immutable() -> None:
    stamp = Time(1, 2)
    with pytest.raises(AttributeError):
        stamp.secs = 3  # type: ignore[misc]


def test_clone_should_copy_fields_into_distinct_value() -> None:
    stamp = Time(12, 345)
    clone = stamp.clone()
    assert clone == stamp
    assert clone is not stamp
    assert hash(clone) == hash(stamp)


def test_time_should_serialize_both_fields() -> None:
    assert Time(3).to_structured_value() == {"secs": 3, "nsecs": 0}
    assert json.loads(Time(12, 345).to_json_string()) == {"secs": 12, "nsecs": 345}


def test_time_should_wrap_itself_in_typed_message() -> None:
    message = Time(1, 2).to_message()
    assert message.message_type == "time"
    assert message.values == {"secs": 1, "nsecs": 2}


@pytest.mark.parametrize(("secs", "nsecs"), [(0, 0), (1, 999_999_999), (-5, 10), (1_700_000_000, 123_456_789)])
def test_structured_value_should_round_trip(secs: int, nsecs: int) -> None:
    restored = Time.from_structured_value(Time(secs, nsecs).to_structured_value())
    assert (restored.secs, restored.nsecs) == (secs, nsecs)


def test_structured_value_should_default_missing_fields() -> None:
    assert Time.from_structured_value({}) == Time(0, 0)
    assert Time.from_structured_value({"secs": 7}) == Time(7, 0)
    assert Time.from_structured_value({"nsecs": 9}) == Time(0, 9)


def test_structured_value_should_ignore_unknown_fields(time_doc) -> None:
    assert Time.from_structured_value(time_doc(frame_id="map")) == Time(12, 345)


@pytest.mark.parametrize("bad", ["1", 1.5, 2.0, None, True, [1], {"v": 1}])
def test_structured_value_should_reject_non_integer_fields(time_doc, bad: object) -> None:
    with pytest.raises(ParseError):
        Time.from_structured_value(time_doc(secs=bad))
    with pytest.raises(ParseError):
        Time.from_structured_value(time_doc(nsecs=bad))


def test_structured_value_should_reject_non_objects() -> None:
    with pytest.raises(ParseError):
        Time.from_structured_value([1, 2])


def test_json_string_should_parse_and_default() -> None:
    assert Time.from_json_string('{"secs": 12, "nsecs": 345}') == Time(12, 345)
    assert Time.from_json_string("{}") == Time(0, 0)
    assert Time.from_json_string(b'{"secs": 4}') == Time(4, 0)


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[1]",
        '{"secs": "1"}',
        '{"nsecs": 0.5}',
        pytest.param("[" * 200_000, id="deeply-nested-root"),
        pytest.param('{"secs": ' + "[" * 200_000 + "]" * 200_000 + "}", id="deeply-nested-field"),
    ],
)
def test_json_string_should_fail_with_parse_error(text: str) -> None:
    with pytest.raises(ParseError):
        Time.from_json_string(text)


def test_from_message_should_read_message_values() -> None:
    message = Message({"secs": 8, "nsecs": 9}, "time")
    assert Time.from_message(message) == Time(8, 9)
    assert Time.from_message(Message()) == Time()


@pytest.mark.parametrize(
    ("total", "secs", "nsecs"),
    [
        (1_500_000_000, 1, 500_000_000),
        (0, 0, 0),
        (999, 0, 999),
        (-1, -1, 999_999_999),
        (2**62, 4_611_686_018, 427_387_904),
    ],
)
def test_from_nanoseconds_should_split_exactly(total: int, secs: int, nsecs: int) -> None:
    assert Time.from_nanoseconds(total) == Time(secs, nsecs)


def test_from_nanoseconds_float_mode_should_match_exact_within_precision() -> None:
    assert Time.from_nanoseconds(1_500_000_000, exact=False) == Time(1, 500_000_000)
    total = 2**52 + 12_345
    exact = Time.from_nanoseconds(total)
    legacy = Time.from_nanoseconds(total, exact=False)
    assert legacy.secs == exact.secs
    assert abs(legacy.nsecs - exact.nsecs) <= 1_000


def test_now_should_read_monotonic_clock_by_default(frozen_clock) -> None:
    stamp = Time.now()
    assert stamp == Time(42, 500_000_001)
    assert stamp.secs >= 0


def test_now_should_read_wall_clock_when_requested(frozen_clock) -> None:
    assert Time.now(ClockSource.WALL) == Time(1_700_000_000, 123_456_789)


def test_now_should_be_nonnegative_on_real_clock() -> None:
    assert Time.now().secs >= 0
    assert Time.now(ClockSource.WALL).secs > 0


def test_to_datetime_should_convert_from_epoch() -> None:
    stamp = Time(1_704_067_200, 500_000_999)
    assert stamp.to_datetime() == datetime(2024, 1, 1, 0, 0, 0, 500_000, tzinfo=timezone.utc)
    assert Time().to_datetime() == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_from_datetime_should_round_trip_to_microseconds() -> None:
    dt = datetime(2024, 6, 1, 8, 15, 30, 123_456, tzinfo=timezone.utc)
    stamp = Time.from_datetime(dt)
    assert stamp == Time(1_717_229_730, 123_456_000)
    assert stamp.to_datetime() == dt


def test_from_datetime_should_reject_naive_datetime() -> None:
    with pytest.raises(ValueError):
        Time.from_datetime(datetime(2024, 1, 1))


def test_time_should_convert_to_totals() -> None:
    stamp = Time(2, 250_000_000)
    assert stamp.to_nanoseconds() == 2_250_000_000
    assert stamp.to_seconds() == pytest.approx(2.25)


def test_time_should_order_by_seconds_then_nanoseconds() -> None:
    assert Time(1, 999_999_999) < Time(2, 0)
    assert Time(2, 1) > Time(2, 0)
    assert sorted([Time(3), Time(1, 5), Time(1)]) == [Time(1), Time(1, 5), Time(3)]


def test_time_arithmetic_should_normalize_via_nanoseconds() -> None:
    start = Time(10, 900_000_000)
    later = start + Duration(0, 200_000_000)
    assert later == Time(11, 100_000_000)
    assert Duration(1, 0) + start == Time(11, 900_000_000)
    assert later - start == Duration(0, 200_000_000)
    assert later - Duration(1, 0) == Time(10, 100_000_000)
    assert start - later == Duration(-1, 800_000_000)


def test_time_arithmetic_should_reject_unsupported_operands() -> None:
    with pytest.raises(TypeError):
        Time(1) + Time(2)  # type: ignore[operator]
    with pytest.raises(TypeError):
        Time(1) + 5  # type: ignore[operator]
