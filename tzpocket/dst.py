"""Compact DST rules: decoding, nth-weekday arithmetic and transition search.

A rule is a 16-bit integer laid out as::

    end_week (15-12) | end_month (11-8) | start_week (7-4) | start_month (3-0)

``start_week`` only uses three bits. A week of ``0`` selects the last Sunday
of the month and the value ``0`` means the zone never observes DST. Both
transitions happen at 02:00 UTC on the selected Sunday.
"""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from .cache import MemoCache, TimezoneCaches

LOG = logging.getLogger(__name__)

__all__ = [
    "NO_DST",
    "DstRule",
    "DstRuleEngine",
    "DstTransition",
    "is_dst_active",
    "next_transition",
    "nth_weekday_of_month",
    "transition_instants",
]

NO_DST = 0
TRANSITION_HOUR = 2


@dataclass(frozen=True, slots=True)
class DstRule:
    """Decoded form of a packed DST rule.

    Attributes
    ----------
    start_month, end_month:
        Calendar months (1-12) in which DST starts and ends.
    start_week, end_week:
        Which Sunday of the month the change happens on. ``0`` selects the
        last Sunday; values past the end of the month clamp to the last one.
    """

    start_month: int
    start_week: int
    end_month: int
    end_week: int

    def __post_init__(self) -> None:
        for label, month in (("start_month", self.start_month), ("end_month", self.end_month)):
            if not 1 <= month <= 12:
                raise ValueError(f"{label} must be within 1..12, got {month}")
        if not 0 <= self.start_week <= 0x7:
            raise ValueError(f"start_week must be within 0..7, got {self.start_week}")
        if not 0 <= self.end_week <= 0xF:
            raise ValueError(f"end_week must be within 0..15, got {self.end_week}")

    @classmethod
    def decode(cls, value: int) -> "DstRule | None":
        """Unpack ``value``; returns ``None`` for the no-DST sentinel."""

        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"DST rule must be an int, got {type(value).__name__}")
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"DST rule out of range: {value:#x}")
        if value == NO_DST:
            return None
        return cls(
            start_month=value & 0xF,
            start_week=(value >> 4) & 0x7,
            end_month=(value >> 8) & 0xF,
            end_week=(value >> 12) & 0xF,
        )

    def encode(self) -> int:
        return (
            (self.end_week << 12)
            | (self.end_month << 8)
            | (self.start_week << 4)
            | self.start_month
        )

    @property
    def southern(self) -> bool:
        """``True`` when the DST period spans the turn of the year."""

        return self.start_month > self.end_month


@dataclass(frozen=True, slots=True)
class DstTransition:
    at: datetime
    to_dst: bool

    def as_dict(self) -> dict[str, object]:
        return {"at": self.at.isoformat(), "to_dst": self.to_dst}


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> int:
    """Return the day of month of the ``n``-th ``weekday`` in ``month``.

    ``weekday`` follows :mod:`datetime` (Monday is ``0``, Sunday is ``6``).
    ``n == 0`` selects the last occurrence and an ``n`` past the end of the
    month clamps to the last occurrence as well.
    """

    if not 1 <= month <= 12:
        raise ValueError(f"month must be within 1..12, got {month}")
    if not 0 <= weekday <= 6:
        raise ValueError(f"weekday must be within 0..6, got {weekday}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    first_weekday, days_in_month = calendar.monthrange(year, month)
    first = 1 + (weekday - first_weekday) % 7
    if n == 0:
        return first + 7 * ((days_in_month - first) // 7)
    day = first + (n - 1) * 7
    while day > days_in_month:
        day -= 7
    return day


def _as_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant.astimezone(UTC)


class DstRuleEngine:
    """Evaluate packed DST rules with memoized intermediate results."""

    def __init__(self, caches: TimezoneCaches | None = None) -> None:
        caches = caches if caches is not None else TimezoneCaches()
        self._dst: MemoCache = caches.dst
        self._nth: MemoCache = caches.nth_weekday

    def nth_weekday(self, year: int, month: int, weekday: int, n: int) -> int:
        key = (year, month, weekday, n)
        return self._nth.get_or_compute(key, lambda: nth_weekday_of_month(year, month, weekday, n))

    def _sunday(self, year: int, month: int, week: int) -> datetime:
        day = self.nth_weekday(year, month, calendar.SUNDAY, week)
        return datetime(year, month, day, TRANSITION_HOUR, tzinfo=UTC)

    def transition_instants(self, year: int, rule: int) -> tuple[datetime, datetime] | None:
        """Return the ``(start, end)`` instants of ``rule`` within ``year``."""

        decoded = DstRule.decode(rule)
        if decoded is None:
            return None
        start = self._sunday(year, decoded.start_month, decoded.start_week)
        end = self._sunday(year, decoded.end_month, decoded.end_week)
        return start, end

    def is_dst_active(self, instant: datetime, rule: int) -> bool:
        """Return whether ``rule`` puts ``instant`` inside the DST period.

        Naive datetimes are interpreted as UTC.
        """

        moment = _as_utc(instant)
        return self._dst.get_or_compute((moment, rule), lambda: self._evaluate(moment, rule))

    def _evaluate(self, moment: datetime, rule: int) -> bool:
        bounds = self.transition_instants(moment.year, rule)
        if bounds is None:
            return False
        start, end = bounds
        if start <= end:
            active = start <= moment < end
        else:
            active = moment >= start or moment < end
        LOG.debug("rule %#06x at %s: start=%s end=%s active=%s", rule, moment, start, end, active)
        return active

    def next_transition(self, current: datetime, rule: int) -> DstTransition | None:
        """Return the first transition strictly after ``current``.

        Candidates are this year's start and end plus next year's start and
        end, so a rule whose DST period wraps the year is handled as well.
        """

        moment = _as_utc(current)
        this_year = self.transition_instants(moment.year, rule)
        if this_year is None:
            return None
        next_year = self.transition_instants(moment.year + 1, rule)
        assert next_year is not None
        candidates = [
            DstTransition(this_year[0], True),
            DstTransition(this_year[1], False),
            DstTransition(next_year[0], True),
            DstTransition(next_year[1], False),
        ]
        upcoming = [c for c in candidates if c.at > moment]
        return min(upcoming, key=lambda c: c.at)

    def time_until_next_transition(self, current: datetime, rule: int) -> timedelta | None:
        transition = self.next_transition(current, rule)
        if transition is None:
            return None
        return transition.at - _as_utc(current)


_DEFAULT_ENGINE = DstRuleEngine()


def transition_instants(year: int, rule: int) -> tuple[datetime, datetime] | None:
    return _DEFAULT_ENGINE.transition_instants(year, rule)


def is_dst_active(instant: datetime, rule: int) -> bool:
    return _DEFAULT_ENGINE.is_dst_active(instant, rule)


def next_transition(current: datetime, rule: int) -> DstTransition | None:
    return _DEFAULT_ENGINE.next_transition(current, rule)
