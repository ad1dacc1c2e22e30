"""Tests for the unix-seconds clock helpers."""

from datetime import UTC, datetime, timedelta, timezone

from cast_scheduler.db.time import now_unix_seconds, unix_seconds, utcnow


def test_unix_seconds_truncates_sub_second_precision() -> None:
    moment = datetime(2024, 3, 1, 0, 0, 0, 999_999, tzinfo=UTC)
    assert unix_seconds(moment) == 1_709_251_200


def test_unix_seconds_respects_timezones() -> None:
    plus_two = timezone(timedelta(hours=2))
    assert unix_seconds(datetime(1970, 1, 1, 2, 0, 10, tzinfo=plus_two)) == 10


def test_naive_datetimes_are_treated_as_utc() -> None:
    assert unix_seconds(datetime(1970, 1, 1, 0, 1)) == 60


def test_pre_epoch_moments_fall_back_to_zero() -> None:
    assert unix_seconds(datetime(1969, 12, 31, 23, 59, 59, tzinfo=UTC)) == 0
    assert unix_seconds(datetime(1, 1, 1, tzinfo=UTC)) == 0


def test_now_unix_seconds_uses_captured_time() -> None:
    captured = datetime(2030, 1, 1, tzinfo=UTC)
    assert now_unix_seconds(captured) == unix_seconds(captured)


def test_now_unix_seconds_defaults_to_wall_clock() -> None:
    before = unix_seconds(utcnow())
    value = now_unix_seconds()
    after = unix_seconds(utcnow())
    assert before <= value <= after
