from __future__ import annotations

import calendar
from datetime import UTC, datetime, timedelta

import pytest

from tzpocket.cache import TimezoneCaches
from tzpocket.dst import DstRule, DstRuleEngine, DstTransition, nth_weekday_of_month

from .conftest import AU_RULE, EU_RULE, US_RULE

ONE_MINUTE = timedelta(minutes=1)


def test_decode_us_rule() -> None:
    rule = DstRule.decode(US_RULE)
    assert rule == DstRule(start_month=3, start_week=2, end_month=11, end_week=1)
    assert rule is not None and not rule.southern
    assert rule.encode() == US_RULE


def test_decode_southern_rule() -> None:
    rule = DstRule.decode(AU_RULE)
    assert rule == DstRule(start_month=10, start_week=1, end_month=4, end_week=1)
    assert rule is not None and rule.southern


def test_decode_sentinel_is_none() -> None:
    assert DstRule.decode(0) is None


@pytest.mark.parametrize("value", [-1, 0x10000, 0x0100, 0x0D03])
def test_decode_rejects_invalid_rules(value: int) -> None:
    with pytest.raises(ValueError):
        DstRule.decode(value)


def test_decode_rejects_non_integers() -> None:
    with pytest.raises(ValueError):
        DstRule.decode(True)
    with pytest.raises(ValueError):
        DstRule.decode("0x1B23")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("year", "month", "n", "expected"),
    [
        (2024, 3, 2, 10),
        (2024, 11, 1, 3),
        (2024, 3, 0, 31),
        (2024, 10, 0, 27),
        (2024, 2, 0, 25),
        (2024, 2, 5, 25),
        (2023, 3, 2, 12),
        (2025, 3, 2, 9),
    ],
)
def test_nth_sunday(year: int, month: int, n: int, expected: int) -> None:
    assert nth_weekday_of_month(year, month, calendar.SUNDAY, n) == expected


def test_nth_weekday_other_days() -> None:
    # 1 April 2024 is a Monday.
    assert nth_weekday_of_month(2024, 4, calendar.MONDAY, 1) == 1
    assert nth_weekday_of_month(2024, 4, calendar.MONDAY, 0) == 29
    assert nth_weekday_of_month(2024, 4, calendar.TUESDAY, 5) == 30


@pytest.mark.parametrize(("month", "weekday", "n"), [(0, 6, 1), (13, 6, 1), (3, 7, 1), (3, 6, -1)])
def test_nth_weekday_rejects_bad_arguments(month: int, weekday: int, n: int) -> None:
    with pytest.raises(ValueError):
        nth_weekday_of_month(2024, month, weekday, n)


def test_transition_instants_for_us_2024() -> None:
    engine = DstRuleEngine()
    start, end = engine.transition_instants(2024, US_RULE)
    assert start == datetime(2024, 3, 10, 2, 0, tzinfo=UTC)
    assert end == datetime(2024, 11, 3, 2, 0, tzinfo=UTC)
    assert engine.transition_instants(2024, 0) is None


def test_us_start_boundary() -> None:
    engine = DstRuleEngine()
    start = datetime(2024, 3, 10, 2, 0, tzinfo=UTC)
    assert not engine.is_dst_active(start - ONE_MINUTE, US_RULE)
    assert engine.is_dst_active(start, US_RULE)
    assert engine.is_dst_active(start + ONE_MINUTE, US_RULE)


def test_us_end_boundary() -> None:
    engine = DstRuleEngine()
    end = datetime(2024, 11, 3, 2, 0, tzinfo=UTC)
    assert engine.is_dst_active(end - ONE_MINUTE, US_RULE)
    assert not engine.is_dst_active(end, US_RULE)
    assert not engine.is_dst_active(end + ONE_MINUTE, US_RULE)


def test_eu_last_sunday_rule() -> None:
    engine = DstRuleEngine()
    assert engine.transition_instants(2024, EU_RULE) == (
        datetime(2024, 3, 31, 2, 0, tzinfo=UTC),
        datetime(2024, 10, 27, 2, 0, tzinfo=UTC),
    )
    assert engine.is_dst_active(datetime(2024, 7, 1, tzinfo=UTC), EU_RULE)
    assert not engine.is_dst_active(datetime(2024, 12, 1, tzinfo=UTC), EU_RULE)


def test_southern_wraparound() -> None:
    engine = DstRuleEngine()
    start, end = engine.transition_instants(2024, AU_RULE)
    assert start == datetime(2024, 10, 6, 2, 0, tzinfo=UTC)
    assert end == datetime(2024, 4, 7, 2, 0, tzinfo=UTC)
    assert engine.is_dst_active(datetime(2024, 1, 15, tzinfo=UTC), AU_RULE)
    assert engine.is_dst_active(end - ONE_MINUTE, AU_RULE)
    assert not engine.is_dst_active(end, AU_RULE)
    assert not engine.is_dst_active(datetime(2024, 7, 1, tzinfo=UTC), AU_RULE)
    assert not engine.is_dst_active(start - ONE_MINUTE, AU_RULE)
    assert engine.is_dst_active(start, AU_RULE)
    assert engine.is_dst_active(datetime(2024, 12, 31, 23, 59, tzinfo=UTC), AU_RULE)


def test_naive_instants_are_utc() -> None:
    engine = DstRuleEngine()
    assert engine.is_dst_active(datetime(2024, 3, 10, 2, 0), US_RULE)
    assert not engine.is_dst_active(datetime(2024, 3, 10, 1, 59), US_RULE)


def test_no_dst_rule_is_never_active() -> None:
    engine = DstRuleEngine()
    assert not engine.is_dst_active(datetime(2024, 7, 1, tzinfo=UTC), 0)
    assert engine.next_transition(datetime(2024, 7, 1, tzinfo=UTC), 0) is None


@pytest.mark.parametrize(
    ("current", "rule", "expected"),
    [
        (datetime(2024, 1, 1, tzinfo=UTC), US_RULE, DstTransition(datetime(2024, 3, 10, 2, tzinfo=UTC), True)),
        (datetime(2024, 6, 1, tzinfo=UTC), US_RULE, DstTransition(datetime(2024, 11, 3, 2, tzinfo=UTC), False)),
        (datetime(2024, 12, 1, tzinfo=UTC), US_RULE, DstTransition(datetime(2025, 3, 9, 2, tzinfo=UTC), True)),
        (datetime(2024, 3, 10, 2, tzinfo=UTC), US_RULE, DstTransition(datetime(2024, 11, 3, 2, tzinfo=UTC), False)),
        (datetime(2024, 5, 1, tzinfo=UTC), AU_RULE, DstTransition(datetime(2024, 10, 6, 2, tzinfo=UTC), True)),
        (datetime(2024, 2, 1, tzinfo=UTC), AU_RULE, DstTransition(datetime(2024, 4, 7, 2, tzinfo=UTC), False)),
        (datetime(2024, 11, 1, tzinfo=UTC), AU_RULE, DstTransition(datetime(2025, 4, 6, 2, tzinfo=UTC), False)),
    ],
)
def test_next_transition(current: datetime, rule: int, expected: DstTransition) -> None:
    assert DstRuleEngine().next_transition(current, rule) == expected


def test_engine_caches_are_transparent() -> None:
    caches = TimezoneCaches()
    engine = DstRuleEngine(caches)
    moments = [datetime(2024, month, 15, tzinfo=UTC) for month in range(1, 13)]
    before = [engine.is_dst_active(m, rule) for m in moments for rule in (US_RULE, AU_RULE)]
    assert len(caches.dst) > 0
    assert len(caches.nth_weekday) > 0
    caches.clear()
    assert len(caches.dst) == 0
    after = [engine.is_dst_active(m, rule) for m in moments for rule in (US_RULE, AU_RULE)]
    assert before == after


def test_time_until_next_transition() -> None:
    engine = DstRuleEngine()
    remaining = engine.time_until_next_transition(datetime(2024, 11, 1, tzinfo=UTC), US_RULE)
    assert remaining == timedelta(days=2, hours=2)
